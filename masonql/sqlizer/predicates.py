"""Predicate containers: column maps and boolean conjunctions.

Column maps (``Eq``, ``Lt``, ``Like`` ...) are ``dict`` subclasses mapping a
column name to a value.  Keys are always visited in sorted order so the
rendered SQL and the arg list are reproducible and stay aligned::

    >>> Eq({"b": 2, "a": 1}).to_sql()
    ('a = ? AND b = ?', [1, 2])

``And`` and ``Or`` combine arbitrary Sqlizers (or plain mappings, which are
treated as ``Eq``)::

    >>> And(Eq({"x": 0}), Expr("x > ?", 1)).to_sql()
    ('x = ? AND x > ?', [0, 1])
    >>> Or(Eq({"x": 0}), Expr("x > ?", 1)).to_sql()
    ('(x = ?) OR (x > ?)', [0, 1])
"""
from __future__ import annotations

from abc import abstractmethod
from collections.abc import Mapping
from typing import Any, ClassVar

from masonql.errors import PredicateError, StructuralError
from masonql.sqlizer.base import (
    SqlAndArgs,
    Sqlizer,
    render_nested,
    snapshot_value,
    to_part,
)

#: Rendered in place of a comparison that can never / always match.
ALWAYS_FALSE = "(1=0)"
ALWAYS_TRUE = "(1=1)"

_SEQUENCE_TYPES = (list, tuple, set, frozenset)


def _sequence_values(value: Any) -> list[Any]:
    if isinstance(value, (set, frozenset)):
        return sorted(value, key=repr)
    return list(value)


def _snapshot_value(value: Any) -> Any:
    if isinstance(value, (set, frozenset)):
        return frozenset(value)
    if isinstance(value, (list, tuple)):
        return tuple(value)
    return snapshot_value(value)


# ---------------------------------------------------------------------------
# Column maps
# ---------------------------------------------------------------------------


class _ColumnMap(dict, Sqlizer):
    """Base for predicates built from ``{column: value}`` pairs."""

    operator: ClassVar[str] = ""

    def to_sql(self) -> SqlAndArgs:
        if not self:
            raise StructuralError(
                f"{type(self).__name__} predicate must contain at least one column",
                clause="WHERE",
            )
        parts: list[str] = []
        args: list[Any] = []
        for key in sorted(self, key=str):
            sql, key_args = self._compare(str(key), self[key])
            parts.append(sql)
            args.extend(key_args)
        return " AND ".join(parts), args

    @abstractmethod
    def _compare(self, column: str, value: Any) -> SqlAndArgs:
        """Render one ``column <op> value`` comparison."""

    def snapshot(self) -> _ColumnMap:
        return type(self)({key: _snapshot_value(v) for key, v in self.items()})

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict.__repr__(self)})"


class Eq(_ColumnMap):
    """Equality: ``col = ?``.

    ``None`` renders ``IS NULL``; a list, tuple or set renders ``IN (...)``
    with one placeholder per element.  An empty collection can never match
    and renders ``(1=0)``.
    """

    operator = "="
    null_operator: ClassVar[str] = "IS NULL"
    in_operator: ClassVar[str] = "IN"
    empty_in: ClassVar[str] = ALWAYS_FALSE

    def _compare(self, column: str, value: Any) -> SqlAndArgs:
        if value is None:
            return f"{column} {self.null_operator}", []
        if isinstance(value, Sqlizer):
            sql, args = render_nested(value)
            return f"{column} {self.operator} {sql}", args
        if isinstance(value, _SEQUENCE_TYPES):
            values = _sequence_values(value)
            if not values:
                return self.empty_in, []
            marks = ",".join("?" for _ in values)
            return f"{column} {self.in_operator} ({marks})", values
        return f"{column} {self.operator} ?", [value]


class NotEq(Eq):
    """Inequality: ``col <> ?``, ``IS NOT NULL``, ``NOT IN (...)``.

    An empty collection always matches and renders ``(1=1)``.
    """

    operator = "<>"
    null_operator = "IS NOT NULL"
    in_operator = "NOT IN"
    empty_in = ALWAYS_TRUE


class _ScalarComparison(_ColumnMap):
    """Operators that only make sense against a single non-NULL value."""

    def _compare(self, column: str, value: Any) -> SqlAndArgs:
        if value is None:
            raise PredicateError(
                f"cannot use NULL with {self.operator} (column '{column}')",
                column=column,
            )
        if isinstance(value, _SEQUENCE_TYPES):
            raise PredicateError(
                f"cannot use a collection with {self.operator} (column '{column}')",
                column=column,
            )
        if isinstance(value, Sqlizer):
            sql, args = render_nested(value)
            return f"{column} {self.operator} {sql}", args
        return f"{column} {self.operator} ?", [value]


class Lt(_ScalarComparison):
    operator = "<"


class LtOrEq(_ScalarComparison):
    operator = "<="


class Gt(_ScalarComparison):
    operator = ">"


class GtOrEq(_ScalarComparison):
    operator = ">="


class Like(_ScalarComparison):
    operator = "LIKE"


class NotLike(_ScalarComparison):
    operator = "NOT LIKE"


class ILike(_ScalarComparison):
    """Case-insensitive LIKE (PostgreSQL)."""

    operator = "ILIKE"


class NotILike(_ScalarComparison):
    operator = "NOT ILIKE"


# ---------------------------------------------------------------------------
# Conjunctions
# ---------------------------------------------------------------------------


def _coerce_term(term: Any) -> Sqlizer:
    if isinstance(term, Sqlizer):
        return term.snapshot()
    if isinstance(term, Mapping):
        return Eq(term).snapshot()
    if isinstance(term, str):
        return to_part(term)
    raise TypeError(f"cannot use {type(term).__name__} as a predicate")


class _Conjunction(list, Sqlizer):
    """Base for ``And`` / ``Or``: an ordered list of predicate terms."""

    joiner: ClassVar[str] = ""
    empty: ClassVar[str] = ""

    def __init__(self, *terms: Any) -> None:
        super().__init__(_coerce_term(t) for t in terms)

    def to_sql(self) -> SqlAndArgs:
        parts: list[str] = []
        args: list[Any] = []
        for term in self:
            sql, term_args = render_nested(term)
            if not sql:
                continue
            parts.append(self._wrap(term, sql))
            args.extend(term_args)
        if not parts:
            return self.empty, []
        return f" {self.joiner} ".join(parts), args

    @abstractmethod
    def _wrap(self, term: Sqlizer, sql: str) -> str:
        """Return ``sql`` as it appears between joiners."""

    def snapshot(self) -> _Conjunction:
        return type(self)(*self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(repr(t) for t in self)})"


class And(_Conjunction):
    """Joins terms with ``AND``.

    Terms are not parenthesized, except ``Or`` terms (``OR`` binds looser
    than ``AND``).  Zero terms render ``(1=1)``.
    """

    joiner = "AND"
    empty = ALWAYS_TRUE

    def _wrap(self, term: Sqlizer, sql: str) -> str:
        if isinstance(term, Or) and len(term) > 1:
            return f"({sql})"
        return sql


class Or(_Conjunction):
    """Joins parenthesized terms with ``OR``.  Zero terms render ``(1=0)``."""

    joiner = "OR"
    empty = ALWAYS_FALSE

    def _wrap(self, term: Sqlizer, sql: str) -> str:
        return f"({sql})"
