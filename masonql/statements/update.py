"""UPDATE statement builder."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from masonql.errors import StructuralError
from masonql.sqlizer.base import (
    SqlAndArgs,
    Sqlizer,
    render_nested,
    snapshot_value,
    to_part,
)
from masonql.sqlizer.expr import Alias, Expr
from masonql.statements.base import (
    StatementBase,
    check_count,
    render_list,
    render_where,
    where_part,
)
from masonql.statements.select import SelectBuilder


class UpdateBuilder(StatementBase):
    """Builds ``UPDATE`` statements.

    SET values may be plain values (bound as ``?``) or Sqlizers rendered
    inline; a nested SELECT is parenthesized::

        update("employees")
            .set("sales_count", Expr("sales_count + ?", 1))
            .set("rank", select("max(rank)").from_("ranks"))
            .where(Eq({"id": 7}))

    Rendering fails with :class:`~masonql.errors.StructuralError` when the
    table name is empty or no SET assignment was given.
    """

    TABLE: str = ""
    SET: tuple[tuple[str, Any], ...] = ()
    FROM: Sqlizer | None = None
    WHERE: tuple[Sqlizer, ...] = ()
    ORDER_BY: tuple[Sqlizer, ...] = ()
    LIMIT: int | None = None
    OFFSET: int | None = None

    def to_sql_raw(self) -> SqlAndArgs:
        if not self.TABLE:
            raise StructuralError("update statements must specify a table", clause="UPDATE")
        if not self.SET:
            raise StructuralError(
                "update statements must have at least one Set clause", clause="SET"
            )

        parts: list[str] = []
        args: list[Any] = []

        self._render_prefixes(parts, args)

        parts.append(f"UPDATE {self.TABLE}")

        assignments: list[str] = []
        for column, value in self.SET:
            if isinstance(value, Sqlizer):
                value_sql, value_args = render_nested(value)
                assignments.append(f"{column} = {value_sql}")
                args.extend(value_args)
            else:
                assignments.append(f"{column} = ?")
                args.append(value)
        parts.append(f"SET {', '.join(assignments)}")

        if self.FROM is not None:
            from_sql, from_args = render_nested(self.FROM)
            parts.append(f"FROM {from_sql}")
            args.extend(from_args)

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

    def table(self, table: str) -> UpdateBuilder:
        return self.model_copy(update={"TABLE": table})

    def set(self, column: str, value: Any) -> UpdateBuilder:
        """Add ``column = value`` to the SET clause."""
        assignment = (column, snapshot_value(value))
        return self.model_copy(update={"SET": self.SET + (assignment,)})

    def set_map(self, assignments: Mapping[str, Any]) -> UpdateBuilder:
        """Add one SET assignment per key, in sorted key order."""
        new = tuple(
            (str(k), snapshot_value(assignments[k])) for k in sorted(assignments, key=str)
        )
        return self.model_copy(update={"SET": self.SET + new})

    def from_(self, table: str | Sqlizer) -> UpdateBuilder:
        """Set the PostgreSQL-style ``UPDATE ... FROM`` source."""
        return self.model_copy(update={"FROM": to_part(table)})

    def from_select(self, select: SelectBuilder, alias: str) -> UpdateBuilder:
        return self.model_copy(update={"FROM": Alias(select, alias)})

    def where(self, pred: Any, *args: Any) -> UpdateBuilder:
        part = where_part(pred, args)
        if part is None:
            return self
        return self.model_copy(update={"WHERE": self.WHERE + (part,)})

    def order_by(self, *order_bys: str) -> UpdateBuilder:
        new = tuple(Expr(o) for o in order_bys)
        return self.model_copy(update={"ORDER_BY": self.ORDER_BY + new})

    def limit(self, limit: int) -> UpdateBuilder:
        return self.model_copy(update={"LIMIT": check_count(limit, "LIMIT")})

    def offset(self, offset: int) -> UpdateBuilder:
        return self.model_copy(update={"OFFSET": check_count(offset, "OFFSET")})
