"""CASE expressions.

Built fluently; each call returns a new :class:`Case`, so partially built
expressions can be shared and extended safely::

    case = (
        Case(Expr("number"))
        .when(Expr("1"), Expr("one"))
        .when(Expr("2"), Expr("two"))
        .else_(Expr("?", "big number"))
    )
    case.to_sql()
    # ('CASE number WHEN 1 THEN one WHEN 2 THEN two ELSE ? END', ['big number'])

Conditions and results accept anything :func:`~masonql.sqlizer.base.to_part`
accepts: Sqlizers, raw SQL strings, or plain values (bound as ``?``).

The expression never parenthesizes itself; wrap it in
:class:`~masonql.sqlizer.expr.Alias` (or rely on the enclosing clause) when
nesting requires it.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from masonql.errors import StructuralError
from masonql.sqlizer.base import SqlAndArgs, Sqlizer, render_nested, to_part


@dataclass(frozen=True)
class WhenClause:
    """A single ``WHEN <condition> THEN <result>`` pair."""

    condition: Sqlizer
    result: Sqlizer


@dataclass(frozen=True)
class Case(Sqlizer):
    """Immutable CASE expression.

    Attributes:
        control: Optional expression compared against each WHEN value
            (``CASE <control> WHEN ...``).  ``None`` gives a searched CASE.
        whens: WHEN clauses in insertion order.
        else_result: Optional ELSE branch.
    """

    control: Any = None
    whens: tuple[WhenClause, ...] = ()
    else_result: Sqlizer | None = None

    def __post_init__(self) -> None:
        if self.control is not None:
            object.__setattr__(self, "control", to_part(self.control))

    def when(self, condition: Any, result: Any) -> Case:
        """Return a copy with ``WHEN condition THEN result`` appended."""
        clause = WhenClause(to_part(condition), to_part(result))
        return replace(self, whens=self.whens + (clause,))

    def else_(self, result: Any) -> Case:
        """Return a copy with the ELSE branch set to ``result``."""
        return replace(self, else_result=to_part(result))

    def to_sql(self) -> SqlAndArgs:
        if not self.whens:
            raise StructuralError(
                "case expression must contain at least one WHEN clause",
                clause="CASE",
            )

        parts = ["CASE"]
        args: list[Any] = []

        if self.control is not None:
            sql, control_args = render_nested(self.control)
            parts.append(sql)
            args.extend(control_args)

        for clause in self.whens:
            cond_sql, cond_args = render_nested(clause.condition)
            result_sql, result_args = render_nested(clause.result)
            parts.append(f"WHEN {cond_sql} THEN {result_sql}")
            args.extend(cond_args)
            args.extend(result_args)

        if self.else_result is not None:
            sql, else_args = render_nested(self.else_result)
            parts.append(f"ELSE {sql}")
            args.extend(else_args)

        parts.append("END")
        return " ".join(parts), args
