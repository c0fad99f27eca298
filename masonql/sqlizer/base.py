"""The Sqlizer contract and the helpers every fragment shares.

A *Sqlizer* is anything that can render itself to a SQL string plus an
ordered list of bound argument values.  Every fragment in masonQL (raw
expressions, predicate maps, CASE expressions, aliases, full statements)
implements the single :meth:`Sqlizer.to_sql` method, so fragments nest
freely inside one another.

Invariant: the number of ``?`` placeholders in the rendered SQL equals the
length of the rendered argument list, at every nesting level.

Rendering is all-or-nothing.  A failing fragment raises; no partial SQL or
args are ever returned alongside an error.

Statements vs. fragments
------------------------
Full statements (:class:`RawSqlizer` subclasses) rewrite placeholders for
their dialect in ``to_sql`` but expose the un-rewritten form through
``to_sql_raw``.  When a statement is nested inside another fragment it must
be rendered raw, so the rewrite happens exactly once, at the outermost call.
:func:`render_raw` and :func:`render_nested` take care of that.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from masonql.errors import MasonQLError, MustSqlError

#: Return type of every render call: ``(sql, args)``.
SqlAndArgs = tuple[str, list[Any]]


class Sqlizer(ABC):
    """Abstract base for every renderable SQL fragment."""

    @abstractmethod
    def to_sql(self) -> SqlAndArgs:
        """Render this fragment.

        Returns:
            ``(sql, args)`` where ``args`` lines up positionally with the
            placeholders in ``sql``.

        Raises:
            StructuralError: If the fragment is missing a required part.
        """

    def must_sql(self) -> SqlAndArgs:
        """Render, converting any render error into :class:`MustSqlError`.

        Render errors are :class:`MasonQLError` plus the ``TypeError`` and
        ``ValueError`` raised for malformed parts (e.g. a non-string
        :class:`~masonql.sqlizer.expr.Concat` piece).

        Only use this where the SQL is known to be valid (e.g. built from
        constants).  Never use it with dynamic input.
        """
        try:
            return self.to_sql()
        except (MasonQLError, TypeError, ValueError) as exc:
            raise MustSqlError(str(exc)) from exc

    def snapshot(self) -> Sqlizer:
        """Return a copy unaffected by later mutation of this fragment.

        Builders store snapshots of the parts they are given.  Immutable
        fragments return themselves; mutable containers override this.
        """
        return self


class RawSqlizer(Sqlizer):
    """A Sqlizer that can also render without the placeholder rewrite."""

    @abstractmethod
    def to_sql_raw(self) -> SqlAndArgs:
        """Render with ``?`` placeholders regardless of configured format."""


def render_raw(part: Sqlizer) -> SqlAndArgs:
    """Render ``part`` for nesting: statements skip their placeholder rewrite."""
    if isinstance(part, RawSqlizer):
        return part.to_sql_raw()
    return part.to_sql()


def render_nested(part: Sqlizer) -> SqlAndArgs:
    """Render ``part`` as a value inside a larger expression.

    Full statements come back parenthesized, so a nested SELECT reads
    ``(SELECT ...)``.  Other fragments render as-is.
    """
    sql, args = render_raw(part)
    if isinstance(part, RawSqlizer):
        sql = f"({sql})"
    return sql, args


def render_args(values: tuple[Any, ...] | list[Any]) -> list[Any]:
    """Flatten ``values`` into bound args.

    Sqlizer entries are rendered and their args spliced in place; their SQL
    text is discarded because the caller's template already holds a
    placeholder for that slot.
    """
    args: list[Any] = []
    for value in values:
        if isinstance(value, Sqlizer):
            _, nested_args = render_raw(value)
            args.extend(nested_args)
        else:
            args.append(value)
    return args


def snapshot_value(value: Any) -> Any:
    """Snapshot ``value`` if it is a Sqlizer; plain values pass through."""
    if isinstance(value, Sqlizer):
        return value.snapshot()
    return value


def to_part(value: Any, *args: Any) -> Sqlizer:
    """Coerce a caller-supplied value into a Sqlizer.

    * A Sqlizer is returned as a :meth:`~Sqlizer.snapshot` (``args`` must
      be empty).
    * A ``str`` is treated as raw SQL with ``args``.
    * Anything else is a bound value, rendered as ``?``.
    """
    from masonql.sqlizer.expr import Expr

    if isinstance(value, Sqlizer):
        if args:
            raise TypeError("args cannot accompany a Sqlizer part")
        return value.snapshot()
    if isinstance(value, str):
        return Expr(value, *args)
    return Expr("?", value)


@dataclass(frozen=True)
class Const(Sqlizer):
    """A trusted constant SQL string with no bound args.

    Use for SQL text that is fixed in source code::

        NOW = Const("CURRENT_TIMESTAMP")
    """

    text: str

    def to_sql(self) -> SqlAndArgs:
        return self.text, []
