# portfolio_api/store.py
"""
Store gateway: the only thing the auth routes know about the database.

    store = StoreGateway(engine)
    store.execute("insert into app_user(name, email, password_hash) values ($1, $2, $3)", ...)
    user_id, name = store.query_row("select id, name from app_user where email = $1", email).scan()

Statements use positional ``$1``, ``$2`` ... placeholders so they read the
same against PostgreSQL and SQLite. The gateway holds no per-request state;
connection checkout / return is the engine pool's job.
"""
from __future__ import annotations

import re
from typing import Any, Dict, Optional, Tuple

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from .errors import ConstraintViolationError, NoRowsError, StoreError

_PLACEHOLDER = re.compile(r"\$(\d+)")


def _bind(sql: str, args: Tuple[Any, ...]):
    stmt = text(_PLACEHOLDER.sub(r":p\1", sql))
    params: Dict[str, Any] = {f"p{i}": v for i, v in enumerate(args, start=1)}
    return stmt, params


def _wrap(exc: SQLAlchemyError) -> StoreError:
    if isinstance(exc, IntegrityError):
        return ConstraintViolationError(str(exc.orig))
    return StoreError(str(exc))


class RowScanner:
    """Result of ``query_row``; errors surface when ``scan`` is called."""

    def __init__(self, row: Optional[Tuple[Any, ...]], error: Optional[StoreError] = None):
        self._row = row
        self._error = error

    def scan(self) -> Tuple[Any, ...]:
        if self._error is not None:
            raise self._error
        if self._row is None:
            raise NoRowsError("no rows in result set")
        return self._row


class StoreGateway:
    def __init__(self, engine: Engine):
        self.engine = engine

    def execute(self, sql: str, *args: Any) -> None:
        stmt, params = _bind(sql, args)
        try:
            with self.engine.begin() as conn:
                conn.execute(stmt, params)
        except SQLAlchemyError as e:
            raise _wrap(e) from e

    def query_row(self, sql: str, *args: Any) -> RowScanner:
        stmt, params = _bind(sql, args)
        try:
            with self.engine.connect() as conn:
                row = conn.execute(stmt, params).first()
        except SQLAlchemyError as e:
            err = _wrap(e)
            err.__cause__ = e
            return RowScanner(None, err)
        return RowScanner(tuple(row) if row is not None else None)
