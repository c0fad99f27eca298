"""Shared statement machinery.

Every statement builder is a frozen pydantic model whose fields are the
statement's clauses (``WHERE``, ``ORDER_BY`` ...).  Fluent setters never
mutate; they return ``model_copy(update=...)``, so a partially built
statement can be reused as the base of several others::

    base = select("id", "name").from_("users")
    active = base.where(Eq({"active": True}))
    admins = base.where(Eq({"role": "admin"}))   # `base` is unchanged

Rendering happens in two steps.  ``to_sql_raw`` renders every clause in
fixed grammar order with ``?`` placeholders; ``to_sql`` then applies the
statement's placeholder format exactly once.  Nested statements are always
rendered raw, so the rewrite never runs twice.

Clause helpers
--------------
render_list   : ``a, b, c`` from a tuple of Sqlizers
render_where  : ``a AND b`` (``Or`` parts parenthesized)
where_part    : coerces ``where()`` / ``having()`` arguments to a Sqlizer
"""
from __future__ import annotations

import operator
from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict

from masonql.errors import RunnerNotSetError
from masonql.format.placeholder import QUESTION, PlaceholderFormat
from masonql.runner import exec_with, query_row_with, query_with
from masonql.sqlizer.base import RawSqlizer, SqlAndArgs, Sqlizer, render_nested
from masonql.sqlizer.expr import Expr
from masonql.sqlizer.predicates import And, Eq

_S = TypeVar("_S", bound="StatementBase")


# ---------------------------------------------------------------------------
# Clause helpers
# ---------------------------------------------------------------------------


def render_list(parts: tuple[Sqlizer, ...], sep: str = ", ") -> SqlAndArgs:
    """Render ``parts`` and join their SQL with ``sep``, args in order."""
    sqls: list[str] = []
    args: list[Any] = []
    for part in parts:
        sql, part_args = render_nested(part)
        if sql:
            sqls.append(sql)
            args.extend(part_args)
    return sep.join(sqls), args


def render_where(parts: tuple[Sqlizer, ...]) -> SqlAndArgs:
    """Render WHERE / HAVING parts joined with ``AND``."""
    return And(*parts).to_sql()


def where_part(pred: Any, args: tuple[Any, ...]) -> Sqlizer | None:
    """Coerce a ``where(pred, *args)`` call into a Sqlizer.

    ``None``, ``""`` and empty plain mappings mean "no condition" and return
    ``None``.  A non-empty mapping becomes :class:`Eq`; a string becomes
    :class:`Expr` with ``args``.
    """
    if pred is None or (isinstance(pred, str) and not pred):
        return None
    if isinstance(pred, Sqlizer):
        if args:
            raise TypeError("args cannot accompany a Sqlizer predicate")
        return pred.snapshot()
    if isinstance(pred, Mapping):
        return Eq(pred).snapshot() if pred else None
    if isinstance(pred, str):
        return Expr(pred, *args)
    raise TypeError(f"cannot use {type(pred).__name__} as a predicate")


def check_count(value: int, clause: str) -> int:
    """Validate a LIMIT / OFFSET count and return it as a plain ``int``."""
    if isinstance(value, bool):
        raise TypeError(f"{clause} must be an integer, got {value!r}")
    try:
        value = operator.index(value)
    except TypeError:
        raise TypeError(f"{clause} must be an integer, got {value!r}") from None
    if value < 0:
        raise ValueError(f"{clause} must be non-negative, got {value}")
    return value


# ---------------------------------------------------------------------------
# Statement base
# ---------------------------------------------------------------------------


class StatementBase(BaseModel, RawSqlizer):
    """Fields and behaviour common to SELECT / INSERT / UPDATE / DELETE.

    Attributes:
        FORMAT: Placeholder format applied by :meth:`to_sql`.  Captured from
            the :class:`~masonql.statements.factory.StatementBuilder` that
            created the statement.
        RUNNER: Optional execution target for :meth:`exec` and friends.
        PREFIXES: Raw fragments rendered before the statement keyword.
        SUFFIXES: Raw fragments rendered after the last clause.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    FORMAT: PlaceholderFormat = QUESTION
    RUNNER: Any = None
    PREFIXES: tuple[Sqlizer, ...] = ()
    SUFFIXES: tuple[Sqlizer, ...] = ()

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def to_sql(self) -> SqlAndArgs:
        """Render the statement and rewrite placeholders for its format."""
        sql, args = self.to_sql_raw()
        return self.FORMAT.replace_placeholders(sql), args

    def _render_prefixes(self, parts: list[str], args: list[Any]) -> None:
        if self.PREFIXES:
            sql, prefix_args = render_list(self.PREFIXES, " ")
            parts.append(sql)
            args.extend(prefix_args)

    def _render_suffixes(self, parts: list[str], args: list[Any]) -> None:
        if self.SUFFIXES:
            sql, suffix_args = render_list(self.SUFFIXES, " ")
            parts.append(sql)
            args.extend(suffix_args)

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def placeholder_format(self: _S, fmt: PlaceholderFormat) -> _S:
        """Return a copy that rewrites placeholders with ``fmt``."""
        return self.model_copy(update={"FORMAT": fmt})

    def run_with(self: _S, runner: Any) -> _S:
        """Return a copy that executes on ``runner``."""
        return self.model_copy(update={"RUNNER": runner})

    # ------------------------------------------------------------------
    # Prefix / suffix fragments
    # ------------------------------------------------------------------

    def prefix(self: _S, sql: str, *args: Any) -> _S:
        """Add a raw fragment before the statement, e.g. ``WITH ...``."""
        return self.prefix_expr(Expr(sql, *args))

    def prefix_expr(self: _S, part: Sqlizer) -> _S:
        return self.model_copy(update={"PREFIXES": self.PREFIXES + (part.snapshot(),)})

    def suffix(self: _S, sql: str, *args: Any) -> _S:
        """Add a raw fragment after the statement, e.g. ``RETURNING id``."""
        return self.suffix_expr(Expr(sql, *args))

    def suffix_expr(self: _S, part: Sqlizer) -> _S:
        return self.model_copy(update={"SUFFIXES": self.SUFFIXES + (part.snapshot(),)})

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    def _runner(self) -> Any:
        if self.RUNNER is None:
            raise RunnerNotSetError()
        return self.RUNNER

    def exec(self) -> Any:
        """Execute on the attached runner.

        Raises:
            RunnerNotSetError: If :meth:`run_with` was never called.
        """
        return exec_with(self._runner(), self)

    def query(self) -> Any:
        """Run as a query on the attached runner and return its cursor."""
        return query_with(self._runner(), self)

    def query_row(self) -> Any:
        """Run as a query and return the first row, or ``None``."""
        return query_row_with(self._runner(), self)

