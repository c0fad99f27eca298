"""Shared pytest fixtures for masonQL unit and integration tests."""
from __future__ import annotations

from typing import Any

import pytest

from masonql.format.placeholder import DOLLAR
from masonql.statements.factory import StatementBuilder


class CursorStub:
    """Minimal DB-API cursor returned by :class:`DBStub`."""

    def __init__(self, row: Any) -> None:
        self._row = row

    def fetchone(self) -> Any:
        return self._row


class DBStub:
    """Records the last SQL and args it was asked to execute."""

    def __init__(self, row: Any = None) -> None:
        self.row = row
        self.last_sql: str | None = None
        self.last_args: list[Any] | None = None
        self.calls = 0

    def execute(self, sql: str, parameters: Any) -> CursorStub:
        self.last_sql = sql
        self.last_args = list(parameters)
        self.calls += 1
        return CursorStub(self.row)


@pytest.fixture()
def db() -> DBStub:
    return DBStub(row=(1, "ada"))


@pytest.fixture(scope="session")
def pg() -> StatementBuilder:
    """Statement factory producing ``$n`` placeholders."""
    return StatementBuilder().placeholder_format(DOLLAR)
