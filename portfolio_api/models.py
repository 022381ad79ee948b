# portfolio_api/models.py
from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import BigInteger, Integer, Text, TIMESTAMP, func
from sqlalchemy.orm import Mapped, mapped_column

from .database import Base

# SQLite only auto-increments INTEGER PRIMARY KEY
_Id = BigInteger().with_variant(Integer, "sqlite")


class AppUser(Base):
    __tablename__ = "app_user"

    id: Mapped[int] = mapped_column(_Id, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(Text, nullable=False)

    created_at: Mapped[Optional[datetime]] = mapped_column(
        TIMESTAMP(timezone=True), server_default=func.now()
    )
