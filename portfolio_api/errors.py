# portfolio_api/errors.py
from __future__ import annotations


class StoreError(Exception):
    """Any failure talking to the relational store."""


class NoRowsError(StoreError):
    """A single-row query matched nothing."""


class ConstraintViolationError(StoreError):
    """Unique / not-null / foreign-key constraint rejected the statement."""
