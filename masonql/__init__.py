"""masonQL – composable SQL statement building for Python.

Lay fragments, not strings.

Every piece of SQL (raw expressions, predicate maps, CASE expressions,
aliases, whole statements) is a *Sqlizer*: it renders to ``(sql, args)``
with args positioned exactly where their ``?`` placeholders are.  Fragments
nest freely and statements rewrite placeholders for the target dialect once,
at the outermost render.

Public API
----------
``select`` / ``insert`` / ``replace`` / ``update`` / ``delete``
    Start a statement with the default (``?``) placeholder format.

``StatementBuilder``
    Factory carrying a placeholder format and runner, e.g.
    ``StatementBuilder().for_dialect("postgres").select(...)``.

``Expr``, ``Alias``, ``Concat``, ``Const``, ``Case``
    Expression fragments.

``Eq``, ``NotEq``, ``Lt``, ``LtOrEq``, ``Gt``, ``GtOrEq``, ``Like``,
``NotLike``, ``ILike``, ``NotILike``, ``And``, ``Or``
    Predicate containers.

``QUESTION``, ``DOLLAR``, ``COLON``, ``AT_P``, ``NumberedFormat``
    Placeholder formats.

Example::

    import masonql as mq

    sql, args = (
        mq.select("id", mq.Alias(mq.Case().when(mq.Gt({"age": 17}), "'adult'")
                                   .else_("'minor'"), "bracket"))
        .from_("people")
        .where(mq.Eq({"country": ["NL", "BE"]}))
        .placeholder_format(mq.DOLLAR)
        .to_sql()
    )
    # SELECT id, (CASE WHEN age > $1 THEN 'adult' ELSE 'minor' END) AS bracket
    #   FROM people WHERE country IN ($2,$3)
"""

from __future__ import annotations

from masonql.errors import (
    ConfigurationError,
    MasonQLError,
    MustSqlError,
    PlaceholderCountError,
    PredicateError,
    RunnerNotSetError,
    StructuralError,
)
from masonql.format.debug import debug_sql
from masonql.format.placeholder import (
    AT_P,
    COLON,
    DOLLAR,
    QUESTION,
    NumberedFormat,
    PlaceholderFormat,
    QuestionFormat,
)
from masonql.format.registry import PlaceholderRegistry
from masonql.runner import Runner, exec_with, query_row_with, query_with
from masonql.sqlizer.base import Const, RawSqlizer, Sqlizer
from masonql.sqlizer.case import Case
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
from masonql.statements.delete import DeleteBuilder
from masonql.statements.factory import (
    DEFAULT_PLACEHOLDER_FORMAT,
    StatementBuilder,
    delete,
    insert,
    replace,
    select,
    statement_builder,
    update,
)
from masonql.statements.insert import InsertBuilder
from masonql.statements.select import SelectBuilder
from masonql.statements.update import UpdateBuilder

__all__ = [
    # Statements
    "select",
    "insert",
    "replace",
    "update",
    "delete",
    "StatementBuilder",
    "statement_builder",
    "DEFAULT_PLACEHOLDER_FORMAT",
    "SelectBuilder",
    "InsertBuilder",
    "UpdateBuilder",
    "DeleteBuilder",
    # Fragments
    "Sqlizer",
    "RawSqlizer",
    "Expr",
    "Alias",
    "Concat",
    "Const",
    "Case",
    # Predicates
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
    # Placeholder formats
    "PlaceholderFormat",
    "QuestionFormat",
    "NumberedFormat",
    "QUESTION",
    "DOLLAR",
    "COLON",
    "AT_P",
    "PlaceholderRegistry",
    "debug_sql",
    # Execution
    "Runner",
    "exec_with",
    "query_with",
    "query_row_with",
    # Errors
    "MasonQLError",
    "StructuralError",
    "PredicateError",
    "PlaceholderCountError",
    "ConfigurationError",
    "RunnerNotSetError",
    "MustSqlError",
]
