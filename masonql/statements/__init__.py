"""masonQL statement layer: SELECT / INSERT / UPDATE / DELETE builders."""
from masonql.statements.base import StatementBase
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
    "StatementBase",
    "SelectBuilder",
    "InsertBuilder",
    "UpdateBuilder",
    "DeleteBuilder",
    "StatementBuilder",
    "statement_builder",
    "DEFAULT_PLACEHOLDER_FORMAT",
    "select",
    "insert",
    "replace",
    "update",
    "delete",
]
