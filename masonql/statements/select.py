"""SELECT statement builder."""
from __future__ import annotations

from typing import Any

from masonql.errors import StructuralError
from masonql.sqlizer.base import SqlAndArgs, Sqlizer, render_nested, to_part
from masonql.sqlizer.expr import Alias, Expr
from masonql.statements.base import (
    StatementBase,
    check_count,
    render_list,
    render_where,
    where_part,
)


class SelectBuilder(StatementBase):
    """Builds ``SELECT`` statements.

    Clause order: prefixes, ``SELECT``, options, columns, ``FROM``, joins,
    ``WHERE``, ``GROUP BY``, ``HAVING``, ``ORDER BY``, ``LIMIT``,
    ``OFFSET``, suffixes.

    Example::

        select("id", "name").from_("users").where("age > ?", 18).limit(10)
    """

    OPTIONS: tuple[str, ...] = ()
    COLUMNS: tuple[Sqlizer, ...] = ()
    FROM: Sqlizer | None = None
    JOINS: tuple[Sqlizer, ...] = ()
    WHERE: tuple[Sqlizer, ...] = ()
    GROUP_BY: tuple[str, ...] = ()
    HAVING: tuple[Sqlizer, ...] = ()
    ORDER_BY: tuple[Sqlizer, ...] = ()
    LIMIT: int | None = None
    OFFSET: int | None = None

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def to_sql_raw(self) -> SqlAndArgs:
        if not self.COLUMNS:
            raise StructuralError(
                "select statements must have at least one result column",
                clause="SELECT",
            )

        parts: list[str] = []
        args: list[Any] = []

        self._render_prefixes(parts, args)

        parts.append("SELECT")
        parts.extend(self.OPTIONS)

        columns_sql, columns_args = render_list(self.COLUMNS)
        parts.append(columns_sql)
        args.extend(columns_args)

        if self.FROM is not None:
            from_sql, from_args = render_nested(self.FROM)
            parts.append(f"FROM {from_sql}")
            args.extend(from_args)

        if self.JOINS:
            joins_sql, joins_args = render_list(self.JOINS, " ")
            parts.append(joins_sql)
            args.extend(joins_args)

        if self.WHERE:
            where_sql, where_args = render_where(self.WHERE)
            parts.append(f"WHERE {where_sql}")
            args.extend(where_args)

        if self.GROUP_BY:
            parts.append(f"GROUP BY {', '.join(self.GROUP_BY)}")

        if self.HAVING:
            having_sql, having_args = render_where(self.HAVING)
            parts.append(f"HAVING {having_sql}")
            args.extend(having_args)

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

    # ------------------------------------------------------------------
    # Result columns
    # ------------------------------------------------------------------

    def distinct(self) -> SelectBuilder:
        """Add ``DISTINCT`` to the SELECT options."""
        return self.options("DISTINCT")

    def options(self, *options: str) -> SelectBuilder:
        """Add keywords between ``SELECT`` and the column list."""
        return self.model_copy(update={"OPTIONS": self.OPTIONS + options})

    def columns(self, *columns: str | Sqlizer) -> SelectBuilder:
        """Add result columns: names, raw SQL, or any Sqlizer."""
        new = tuple(to_part(c) for c in columns)
        return self.model_copy(update={"COLUMNS": self.COLUMNS + new})

    def column(self, column: str | Sqlizer, *args: Any) -> SelectBuilder:
        """Add one result column, with args for any ``?`` it contains::

            .column("IF(col IN (?, ?), 1, 0) AS is_selected", 1, 2)
            .column(Alias(case, "label"))
        """
        return self.model_copy(
            update={"COLUMNS": self.COLUMNS + (to_part(column, *args),)}
        )

    def remove_columns(self) -> SelectBuilder:
        return self.model_copy(update={"COLUMNS": ()})

    # ------------------------------------------------------------------
    # FROM / JOIN
    # ------------------------------------------------------------------

    def from_(self, table: str | Sqlizer) -> SelectBuilder:
        """Set the ``FROM`` clause to a table name or any Sqlizer."""
        return self.model_copy(update={"FROM": to_part(table)})

    def from_select(self, select: SelectBuilder, alias: str) -> SelectBuilder:
        """Set the ``FROM`` clause to ``(<select>) AS <alias>``."""
        return self.model_copy(update={"FROM": Alias(select, alias)})

    def join_clause(self, join: str | Sqlizer, *args: Any) -> SelectBuilder:
        """Add a complete join clause, keyword included."""
        return self.model_copy(update={"JOINS": self.JOINS + (to_part(join, *args),)})

    def join(self, join: str, *args: Any) -> SelectBuilder:
        return self.join_clause(f"JOIN {join}", *args)

    def left_join(self, join: str, *args: Any) -> SelectBuilder:
        return self.join_clause(f"LEFT JOIN {join}", *args)

    def right_join(self, join: str, *args: Any) -> SelectBuilder:
        return self.join_clause(f"RIGHT JOIN {join}", *args)

    def inner_join(self, join: str, *args: Any) -> SelectBuilder:
        return self.join_clause(f"INNER JOIN {join}", *args)

    def cross_join(self, join: str, *args: Any) -> SelectBuilder:
        return self.join_clause(f"CROSS JOIN {join}", *args)

    def full_join(self, join: str, *args: Any) -> SelectBuilder:
        return self.join_clause(f"FULL OUTER JOIN {join}", *args)

    # ------------------------------------------------------------------
    # Filtering / grouping
    # ------------------------------------------------------------------

    def where(self, pred: Any, *args: Any) -> SelectBuilder:
        """Add a ``WHERE`` condition; multiple calls are ANDed together.

        ``pred`` may be raw SQL with ``args``, a ``{column: value}`` mapping
        (treated as :class:`~masonql.sqlizer.predicates.Eq`) or any Sqlizer.
        ``None`` and ``""`` are ignored.
        """
        part = where_part(pred, args)
        if part is None:
            return self
        return self.model_copy(update={"WHERE": self.WHERE + (part,)})

    def group_by(self, *group_bys: str) -> SelectBuilder:
        return self.model_copy(update={"GROUP_BY": self.GROUP_BY + group_bys})

    def having(self, pred: Any, *args: Any) -> SelectBuilder:
        """Add a ``HAVING`` condition; accepts the same forms as :meth:`where`."""
        part = where_part(pred, args)
        if part is None:
            return self
        return self.model_copy(update={"HAVING": self.HAVING + (part,)})

    # ------------------------------------------------------------------
    # Ordering / paging
    # ------------------------------------------------------------------

    def order_by(self, *order_bys: str) -> SelectBuilder:
        new = tuple(Expr(o) for o in order_bys)
        return self.model_copy(update={"ORDER_BY": self.ORDER_BY + new})

    def order_by_clause(self, clause: str | Sqlizer, *args: Any) -> SelectBuilder:
        """Add an ``ORDER BY`` term that carries bound args."""
        return self.model_copy(
            update={"ORDER_BY": self.ORDER_BY + (to_part(clause, *args),)}
        )

    def limit(self, limit: int) -> SelectBuilder:
        return self.model_copy(update={"LIMIT": check_count(limit, "LIMIT")})

    def remove_limit(self) -> SelectBuilder:
        return self.model_copy(update={"LIMIT": None})

    def offset(self, offset: int) -> SelectBuilder:
        return self.model_copy(update={"OFFSET": check_count(offset, "OFFSET")})

    def remove_offset(self) -> SelectBuilder:
        return self.model_copy(update={"OFFSET": None})
