"""DELETE statement builder."""
from __future__ import annotations

from typing import Any

from masonql.errors import StructuralError
from masonql.sqlizer.base import SqlAndArgs, Sqlizer
from masonql.sqlizer.expr import Expr
from masonql.statements.base import (
    StatementBase,
    check_count,
    render_list,
    render_where,
    where_part,
)


class DeleteBuilder(StatementBase):
    """Builds ``DELETE FROM`` statements."""

    TABLE: str = ""
    WHERE: tuple[Sqlizer, ...] = ()
    ORDER_BY: tuple[Sqlizer, ...] = ()
    LIMIT: int | None = None
    OFFSET: int | None = None

    def to_sql_raw(self) -> SqlAndArgs:
        if not self.TABLE:
            raise StructuralError(
                "delete statements must specify a From table", clause="FROM"
            )

        parts: list[str] = []
        args: list[Any] = []

        self._render_prefixes(parts, args)

        parts.append(f"DELETE FROM {self.TABLE}")

        if self.WHERE:
            where_sql, where_args = render_where(self.WHERE)
            parts.append(f"WHERE {where_sql}")
            args.extend(where_args)

        if self.ORDER_BY:
            order_sql, order_args = render_list(self.ORDER_BY)
            parts.append(f"ORDER BY {order_sql}")
            args.extend(order_args)

        if self.LIMIT is not None:
            parts.append(f"LIMIT {self.LIMIT}")

        if self.OFFSET is not None:
            parts.append(f"OFFSET {self.OFFSET}")

        self._render_suffixes(parts, args)
        return " ".join(parts), args

    def from_(self, table: str) -> DeleteBuilder:
        return self.model_copy(update={"TABLE": table})

    def where(self, pred: Any, *args: Any) -> DeleteBuilder:
        part = where_part(pred, args)
        if part is None:
            return self
        return self.model_copy(update={"WHERE": self.WHERE + (part,)})

    def order_by(self, *order_bys: str) -> DeleteBuilder:
        new = tuple(Expr(o) for o in order_bys)
        return self.model_copy(update={"ORDER_BY": self.ORDER_BY + new})

    def limit(self, limit: int) -> DeleteBuilder:
        return self.model_copy(update={"LIMIT": check_count(limit, "LIMIT")})

    def offset(self, offset: int) -> DeleteBuilder:
        return self.model_copy(update={"OFFSET": check_count(offset, "OFFSET")})
