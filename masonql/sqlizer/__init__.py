"""masonQL fragment layer: the Sqlizer contract and composable fragments."""
from masonql.sqlizer.base import (
    Const,
    RawSqlizer,
    SqlAndArgs,
    Sqlizer,
    render_nested,
    render_raw,
    to_part,
)
from masonql.sqlizer.case import Case, WhenClause
from masonql.sqlizer.expr import Alias, Concat, Expr
from masonql.sqlizer.predicates import (
    And,
    Eq,
    Gt,
    GtOrEq,
    ILike,
    Like,
    Lt,
    LtOrEq,
    NotEq,
    NotILike,
    NotLike,
    Or,
)

__all__ = [
    "Sqlizer",
    "RawSqlizer",
    "SqlAndArgs",
    "Const",
    "render_raw",
    "render_nested",
    "to_part",
    "Expr",
    "Alias",
    "Concat",
    "Case",
    "WhenClause",
    "Eq",
    "NotEq",
    "Lt",
    "LtOrEq",
    "Gt",
    "GtOrEq",
    "Like",
    "NotLike",
    "ILike",
    "NotILike",
    "And",
    "Or",
]
