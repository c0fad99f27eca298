"""Raw expressions, aliases and concatenation."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from masonql.sqlizer.base import (
    SqlAndArgs,
    Sqlizer,
    render_args,
    render_raw,
    snapshot_value,
)


class Expr(Sqlizer):
    """A literal SQL template plus its bound args.

    ``args`` may contain nested Sqlizers; their args are spliced into the
    output at that position (their SQL text is not)::

        >>> Expr("x > ? AND y = ?", 1, "a").to_sql()
        ('x > ? AND y = ?', [1, 'a'])

    Args:
        template: SQL text, returned verbatim.
        *args: Bound values, one per ``?`` in ``template``.
    """

    __slots__ = ("template", "args")

    def __init__(self, template: str, *args: Any) -> None:
        self.template = template
        self.args = tuple(snapshot_value(a) for a in args)

    def to_sql(self) -> SqlAndArgs:
        return self.template, render_args(self.args)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Expr):
            return NotImplemented
        return (self.template, self.args) == (other.template, other.args)

    def __hash__(self) -> int:
        return hash((self.template, len(self.args)))

    def __repr__(self) -> str:
        args = "".join(f", {a!r}" for a in self.args)
        return f"Expr({self.template!r}{args})"


@dataclass(frozen=True)
class Alias(Sqlizer):
    """Renders ``(<inner>) AS <name>``.

    Commonly wraps a CASE expression or a subquery used as a column::

        Select().column(Alias(Case().when("a", "b"), "flag"))
    """

    inner: Sqlizer
    name: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "inner", snapshot_value(self.inner))

    def to_sql(self) -> SqlAndArgs:
        sql, args = render_raw(self.inner)
        return f"({sql}) AS {self.name}", args


class Concat(Sqlizer):
    """Concatenates raw SQL strings and Sqlizers into one expression.

    Unlike an :class:`Expr` argument slot, each Sqlizer part contributes its
    SQL text as well as its args::

        Concat("COALESCE(full_name, ", Expr("CONCAT(?, ' ', ?)", "a", "b"), ")")
    """

    __slots__ = ("parts",)

    def __init__(self, *parts: str | Sqlizer) -> None:
        self.parts = tuple(snapshot_value(p) for p in parts)

    def to_sql(self) -> SqlAndArgs:
        chunks: list[str] = []
        args: list[Any] = []
        for part in self.parts:
            if isinstance(part, str):
                chunks.append(part)
            elif isinstance(part, Sqlizer):
                sql, part_args = render_raw(part)
                chunks.append(sql)
                args.extend(part_args)
            else:
                raise TypeError(
                    f"Concat parts must be str or Sqlizer, not {type(part).__name__}"
                )
        return "".join(chunks), args

    def __repr__(self) -> str:
        return f"Concat({', '.join(repr(p) for p in self.parts)})"
