"""Tests for the store gateway and schema bootstrap."""

import pytest
from sqlalchemy import inspect

from portfolio_api.errors import ConstraintViolationError, NoRowsError, StoreError
from portfolio_api.schema import BootstrapOutcome, ensure_schema

INSERT_USER = "insert into app_user(name, email, password_hash) values ($1, $2, $3)"


class TestEnsureSchema:
    def test_twice_is_idempotent(self, store, engine):
        first = ensure_schema(store)
        second = ensure_schema(store)

        assert first == BootstrapOutcome(ok=True)
        assert second == BootstrapOutcome(ok=True)
        assert inspect(engine).get_table_names().count("app_user") == 1

    def test_creates_expected_columns(self, store, engine):
        ensure_schema(store)
        columns = {c["name"] for c in inspect(engine).get_columns("app_user")}
        assert columns == {"id", "name", "email", "password_hash", "created_at"}

    def test_failure_is_reported_not_raised(self, broken_store):
        outcome = ensure_schema(broken_store)

        assert outcome.ok is False
        assert outcome.error is not None


class TestStoreGateway:
    @pytest.fixture(autouse=True)
    def _schema(self, store):
        ensure_schema(store)

    def test_execute_then_query_row(self, store):
        store.execute(INSERT_USER, "Ada", "ada@example.com", "hash")

        row = store.query_row(
            "select id, name, email from app_user where email = $1", "ada@example.com"
        ).scan()

        assert row[1:] == ("Ada", "ada@example.com")
        assert isinstance(row[0], int)

    def test_created_at_is_defaulted(self, store):
        store.execute(INSERT_USER, "Ada", "ada@example.com", "hash")
        (created_at,) = store.query_row(
            "select created_at from app_user where email = $1", "ada@example.com"
        ).scan()
        assert created_at is not None

    def test_ids_auto_increment(self, store):
        store.execute(INSERT_USER, "A", "a@example.com", "h")
        store.execute(INSERT_USER, "B", "b@example.com", "h")
        (a,) = store.query_row("select id from app_user where email = $1", "a@example.com").scan()
        (b,) = store.query_row("select id from app_user where email = $1", "b@example.com").scan()
        assert b > a

    def test_placeholders_bind_by_position(self, store):
        store.execute(INSERT_USER, "Ada", "ada@example.com", "hash")
        row = store.query_row(
            "select name from app_user where email = $2 and name = $1", "Ada", "ada@example.com"
        ).scan()
        assert row == ("Ada",)

    def test_no_rows(self, store):
        scanner = store.query_row("select id from app_user where email = $1", "nobody@example.com")
        with pytest.raises(NoRowsError):
            scanner.scan()

    def test_unique_email(self, store):
        store.execute(INSERT_USER, "Ada", "ada@example.com", "hash")
        with pytest.raises(ConstraintViolationError):
            store.execute(INSERT_USER, "Other", "ada@example.com", "hash")

    def test_not_null_name(self, store):
        with pytest.raises(ConstraintViolationError):
            store.execute(INSERT_USER, None, "ada@example.com", "hash")

    def test_query_error_surfaces_on_scan(self, store):
        scanner = store.query_row("select id from no_such_table where id = $1", 1)
        with pytest.raises(StoreError) as exc_info:
            scanner.scan()
        assert not isinstance(exc_info.value, NoRowsError)

    def test_execute_error_is_store_error(self, store):
        with pytest.raises(StoreError):
            store.execute("insert into no_such_table(x) values ($1)", 1)
