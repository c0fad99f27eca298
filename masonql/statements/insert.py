"""INSERT / REPLACE statement builder."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal

from masonql.errors import StructuralError
from masonql.sqlizer.base import (
    SqlAndArgs,
    Sqlizer,
    render_nested,
    render_raw,
    snapshot_value,
)
from masonql.statements.base import StatementBase
from masonql.statements.select import SelectBuilder


class InsertBuilder(StatementBase):
    """Builds ``INSERT`` (or MySQL / SQLite ``REPLACE``) statements.

    Rows are added with :meth:`values` (one call per row) or taken from a
    SELECT with :meth:`select`; the two are mutually exclusive::

        insert("users").columns("name", "age").values("ada", 36).values("alan", 41)
        # INSERT INTO users (name,age) VALUES (?,?),(?,?)
    """

    VERB: Literal["INSERT", "REPLACE"] = "INSERT"
    OPTIONS: tuple[str, ...] = ()
    TABLE: str = ""
    COLUMNS: tuple[str, ...] = ()
    VALUES: tuple[tuple[Any, ...], ...] = ()
    SELECT: SelectBuilder | None = None

    def to_sql_raw(self) -> SqlAndArgs:
        if not self.TABLE:
            raise StructuralError("insert statements must specify a table", clause="INTO")
        if not self.VALUES and self.SELECT is None:
            raise StructuralError(
                "insert statements must have at least one set of values or select clause",
                clause="VALUES",
            )
        if self.VALUES and self.SELECT is not None:
            raise StructuralError(
                "insert statements must have either values or select, not both",
                clause="VALUES",
            )

        parts: list[str] = []
        args: list[Any] = []

        self._render_prefixes(parts, args)

        parts.append(self.VERB)
        parts.extend(self.OPTIONS)
        parts.append(f"INTO {self.TABLE}")

        if self.COLUMNS:
            parts.append(f"({','.join(self.COLUMNS)})")

        if self.SELECT is not None:
            select_sql, select_args = render_raw(self.SELECT)
            parts.append(select_sql)
            args.extend(select_args)
        else:
            rows = [self._render_row(row, args) for row in self.VALUES]
            parts.append(f"VALUES {','.join(rows)}")

        self._render_suffixes(parts, args)
        return " ".join(parts), args

    def _render_row(self, row: tuple[Any, ...], args: list[Any]) -> str:
        if self.COLUMNS and len(row) != len(self.COLUMNS):
            raise StructuralError(
                f"insert row has {len(row)} value(s) but {len(self.COLUMNS)} column(s)",
                clause="VALUES",
            )
        marks: list[str] = []
        for value in row:
            if isinstance(value, Sqlizer):
                value_sql, value_args = render_nested(value)
                marks.append(value_sql)
                args.extend(value_args)
            else:
                marks.append("?")
                args.append(value)
        return f"({','.join(marks)})"

    def into(self, table: str) -> InsertBuilder:
        return self.model_copy(update={"TABLE": table})

    def options(self, *options: str) -> InsertBuilder:
        """Add keywords between the verb and ``INTO`` (e.g. ``IGNORE``)."""
        return self.model_copy(update={"OPTIONS": self.OPTIONS + options})

    def columns(self, *columns: str) -> InsertBuilder:
        return self.model_copy(update={"COLUMNS": self.COLUMNS + columns})

    def values(self, *values: Any) -> InsertBuilder:
        """Add one row; Sqlizer values are rendered inline."""
        row = tuple(snapshot_value(v) for v in values)
        return self.model_copy(update={"VALUES": self.VALUES + (row,)})

    def set_map(self, row: Mapping[str, Any]) -> InsertBuilder:
        """Replace columns and rows with a single row, keys in sorted order."""
        keys = sorted(row, key=str)
        return self.model_copy(
            update={
                "COLUMNS": tuple(str(k) for k in keys),
                "VALUES": (tuple(snapshot_value(row[k]) for k in keys),),
            }
        )

    def select(self, select: SelectBuilder) -> InsertBuilder:
        """Insert the rows produced by ``select`` (``INSERT ... SELECT``)."""
        return self.model_copy(update={"SELECT": select})
