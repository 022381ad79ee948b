# portfolio_api/schema.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from .database import Base
from .models import AppUser
from .store import StoreGateway

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BootstrapOutcome:
    """
    Non-fatal result of the startup schema step.

    A failed bootstrap is reported here and logged, never raised: the
    process keeps serving /health, and another instance may have created
    the table concurrently.
    """
    ok: bool
    error: Optional[Exception] = None


def ensure_schema(store: StoreGateway) -> BootstrapOutcome:
    # checkfirst=True → "create table if not exists"，重複執行都安全
    try:
        Base.metadata.create_all(store.engine, tables=[AppUser.__table__], checkfirst=True)
    except SQLAlchemyError as e:
        logger.warning("Schema bootstrap failed, continuing without it: %s", e)
        return BootstrapOutcome(ok=False, error=e)
    return BootstrapOutcome(ok=True)
