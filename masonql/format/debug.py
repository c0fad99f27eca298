"""Render a fragment with its args inlined, for logs and error messages.

The output is for humans only.  Literal quoting here is naive and is not
an injection defence; never execute it.
"""
from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Any

from masonql.errors import PlaceholderCountError
from masonql.format.placeholder import ESCAPED_PLACEHOLDER, PLACEHOLDER, TOKEN_PATTERN
from masonql.sqlizer.base import Sqlizer, render_raw


def _literal(value: Any) -> str:
    if value is None:
        return "NULL"
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, (int, float, Decimal)):
        return str(value)
    if isinstance(value, (datetime, date)):
        return f"'{value.isoformat()}'"
    if isinstance(value, bytes):
        return f"X'{value.hex()}'"
    text = str(value).replace("'", "''")
    return f"'{text}'"


def debug_sql(part: Sqlizer) -> str:
    """Render ``part`` and substitute each placeholder with its literal arg.

    Raises:
        PlaceholderCountError: If the placeholder and arg counts differ.
        StructuralError: If ``part`` itself fails to render.
    """
    sql, args = render_raw(part)
    remaining = iter(args)
    used = 0

    def _inline(match: Any) -> str:
        nonlocal used
        token = match.group(0)
        if token == ESCAPED_PLACEHOLDER:
            return PLACEHOLDER
        if token != PLACEHOLDER:
            return token
        used += 1
        try:
            return _literal(next(remaining))
        except StopIteration:
            return token

    inlined = TOKEN_PATTERN.sub(_inline, sql)
    if used != len(args):
        raise PlaceholderCountError(used, len(args))
    return inlined
