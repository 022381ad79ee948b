# portfolio_api/database.py
from __future__ import annotations

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """所有 ORM model 都要繼承呢個 Base"""
    pass


def create_store_engine(url: str, **kwargs) -> Engine:
    """
    Build the shared connection pool. One engine per process; every request
    checks connections in and out of it, so no extra locking is needed.
    """
    connect_args = dict(kwargs.pop("connect_args", {}))
    if make_url(url).get_backend_name() == "sqlite":
        # sync endpoints run on the threadpool
        connect_args.setdefault("check_same_thread", False)

    return create_engine(
        url,
        pool_pre_ping=True,
        future=True,
        connect_args=connect_args,
        **kwargs,
    )
