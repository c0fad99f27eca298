"""Statement factory: process-wide defaults captured per statement.

A :class:`StatementBuilder` holds the placeholder format and runner that new
statements start with.  The format is copied into each statement when the
statement is created, so changing a factory later never affects statements
that already exist::

    pg = StatementBuilder().for_dialect("postgres")
    pg.select("*").from_("users").where(Eq({"id": 1})).to_sql()
    # ('SELECT * FROM users WHERE id = $1', [1])

The module-level shortcuts (:func:`select`, :func:`update` ...) use
:data:`statement_builder`, which is built from
:data:`DEFAULT_PLACEHOLDER_FORMAT`.
"""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

from masonql.format.placeholder import QUESTION, PlaceholderFormat
from masonql.format.registry import PlaceholderRegistry
from masonql.sqlizer.base import Sqlizer
from masonql.statements.delete import DeleteBuilder
from masonql.statements.insert import InsertBuilder
from masonql.statements.select import SelectBuilder
from masonql.statements.update import UpdateBuilder

#: Placeholder format used by :data:`statement_builder`.
DEFAULT_PLACEHOLDER_FORMAT: PlaceholderFormat = QUESTION


class StatementBuilder(BaseModel):
    """Creates statements preconfigured with a placeholder format and runner.

    Attributes:
        FORMAT: Placeholder format copied into every new statement.
        RUNNER: Optional runner copied into every new statement.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    FORMAT: PlaceholderFormat = DEFAULT_PLACEHOLDER_FORMAT
    RUNNER: Any = None

    def placeholder_format(self, fmt: PlaceholderFormat) -> StatementBuilder:
        return self.model_copy(update={"FORMAT": fmt})

    def for_dialect(self, dialect: str) -> StatementBuilder:
        """Use the placeholder format registered for ``dialect``.

        Raises:
            ConfigurationError: If ``dialect`` is not registered.
        """
        return self.placeholder_format(PlaceholderRegistry.get(dialect))

    def run_with(self, runner: Any) -> StatementBuilder:
        return self.model_copy(update={"RUNNER": runner})

    def _settings(self) -> dict[str, Any]:
        return {"FORMAT": self.FORMAT, "RUNNER": self.RUNNER}

    def select(self, *columns: str | Sqlizer) -> SelectBuilder:
        return SelectBuilder(**self._settings()).columns(*columns)

    def insert(self, into: str = "") -> InsertBuilder:
        return InsertBuilder(**self._settings()).into(into)

    def replace(self, into: str = "") -> InsertBuilder:
        """Start a ``REPLACE INTO`` statement (MySQL / SQLite)."""
        return InsertBuilder(VERB="REPLACE", **self._settings()).into(into)

    def update(self, table: str = "") -> UpdateBuilder:
        return UpdateBuilder(**self._settings()).table(table)

    def delete(self, from_: str = "") -> DeleteBuilder:
        return DeleteBuilder(**self._settings()).from_(from_)


#: Default factory used by the module-level shortcuts.
statement_builder = StatementBuilder(FORMAT=DEFAULT_PLACEHOLDER_FORMAT)


def select(*columns: str | Sqlizer) -> SelectBuilder:
    """Start a SELECT with the default placeholder format."""
    return statement_builder.select(*columns)


def insert(into: str = "") -> InsertBuilder:
    return statement_builder.insert(into)


def replace(into: str = "") -> InsertBuilder:
    return statement_builder.replace(into)


def update(table: str = "") -> UpdateBuilder:
    return statement_builder.update(table)


def delete(from_: str = "") -> DeleteBuilder:
    return statement_builder.delete(from_)
