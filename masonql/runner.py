"""Execution pass-through.

masonQL never talks to a database itself.  A *runner* is any object with a
DB-API style ``execute(sql, params)`` method, such as a ``sqlite3``
connection or a DB-API cursor.  The helpers here render a Sqlizer and
forward the SQL and args to the runner verbatim::

    conn = sqlite3.connect(":memory:")
    exec_with(conn, insert("users").columns("name").values("ada"))
"""
from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable

from masonql.sqlizer.base import Sqlizer
from masonql.utils.logging import get_logger

logger = get_logger(__name__)


@runtime_checkable
class Runner(Protocol):
    """Anything that can execute parameterized SQL."""

    def execute(self, sql: str, parameters: Sequence[Any], /) -> Any: ...


def _execute(runner: Runner, part: Sqlizer) -> Any:
    sql, args = part.to_sql()
    logger.debug("statement_executing", sql=sql, arg_count=len(args))
    return runner.execute(sql, args)


def exec_with(runner: Runner, part: Sqlizer) -> Any:
    """Render ``part`` and execute it on ``runner``; return the driver result."""
    return _execute(runner, part)


def query_with(runner: Runner, part: Sqlizer) -> Any:
    """Render ``part`` and run it as a query; return the driver's cursor."""
    return _execute(runner, part)


def query_row_with(runner: Runner, part: Sqlizer) -> Any:
    """Render ``part``, run it, and return the first row (or ``None``)."""
    return _execute(runner, part).fetchone()
