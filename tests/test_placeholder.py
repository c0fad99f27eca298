"""Unit tests for placeholder formats, the dialect registry and debug_sql."""

from __future__ import annotations

import datetime

import pytest

from masonql.errors import ConfigurationError, PlaceholderCountError
from masonql.format.debug import debug_sql
from masonql.format.placeholder import (
    AT_P,
    COLON,
    DOLLAR,
    QUESTION,
    NumberedFormat,
    count_placeholders,
)
from masonql.format.registry import PlaceholderRegistry
from masonql.sqlizer.expr import Expr
from masonql.statements.factory import StatementBuilder, update


def test_question_is_passthrough():
    sql = "SELECT * FROM t WHERE a = ? AND b = '?' AND c ?? d"
    assert QUESTION.replace_placeholders(sql) == sql


def test_question_is_idempotent():
    sql = "a = ? AND b = ?"
    once = QUESTION.replace_placeholders(sql)
    assert QUESTION.replace_placeholders(once) == once


def test_dollar_numbers_sequentially_from_one():
    assert DOLLAR.replace_placeholders("a = ? AND b = ? OR c IN (?,?)") == (
        "a = $1 AND b = $2 OR c IN ($3,$4)"
    )


@pytest.mark.parametrize(
    ("fmt", "expected"),
    [(COLON, "x = :1, y = :2"), (AT_P, "x = @p1, y = @p2"), (NumberedFormat(prefix="#"), "x = #1, y = #2")],
)
def test_other_numbered_formats(fmt, expected):
    assert fmt.replace_placeholders("x = ?, y = ?") == expected


def test_numbered_skips_string_literals_and_quoted_identifiers():
    sql = "SELECT \"what?\" FROM t WHERE note = 'why?' AND x = ? AND y = 'it''s ?' AND z = ?"
    assert DOLLAR.replace_placeholders(sql) == (
        "SELECT \"what?\" FROM t WHERE note = 'why?' AND x = $1 AND y = 'it''s ?' AND z = $2"
    )


def test_numbered_unescapes_double_question_mark():
    assert DOLLAR.replace_placeholders("data ??| ? AND id = ?") == "data ?| $1 AND id = $2"


def test_count_placeholders_ignores_literals_and_escapes():
    assert count_placeholders("a = ? AND b = '?' AND c ?? d AND e = ?") == 2


def test_statement_format_switch():
    b = update("test").set_map({"x": 1, "y": 2})
    assert b.placeholder_format(QUESTION).to_sql()[0] == "UPDATE test SET x = ?, y = ?"
    assert b.placeholder_format(DOLLAR).to_sql()[0] == "UPDATE test SET x = $1, y = $2"


def test_numbered_count_matches_args():
    sql, args = (
        StatementBuilder()
        .placeholder_format(DOLLAR)
        .select("a")
        .from_("t")
        .where(Expr("b = ? AND c = ?", 1, 2))
        .where({"d": [3, 4]})
        .to_sql()
    )
    assert sql == "SELECT a FROM t WHERE b = $1 AND c = $2 AND d IN ($3,$4)"
    assert len(args) == 4


def test_registry_defaults():
    assert PlaceholderRegistry.get("postgres") == DOLLAR
    assert PlaceholderRegistry.get("SQLite") == QUESTION
    assert PlaceholderRegistry.get("oracle") == COLON
    assert PlaceholderRegistry.get("mssql") == AT_P
    assert "mysql" in PlaceholderRegistry.registered_dialects()


def test_registry_unknown_dialect():
    with pytest.raises(ConfigurationError) as exc_info:
        PlaceholderRegistry.get("nosuchdb")
    assert exc_info.value.name == "nosuchdb"


def test_registry_register_new_dialect(monkeypatch):
    monkeypatch.setattr(PlaceholderRegistry, "_formats", dict(PlaceholderRegistry._formats))
    PlaceholderRegistry.register_format("duckdb_test", NumberedFormat(prefix="$"))
    sql, _ = StatementBuilder().for_dialect("duckdb_test").select("a").where("b = ?", 1).to_sql()
    assert sql == "SELECT a WHERE b = $1"


def test_debug_sql_inlines_literals():
    expr = Expr(
        "a = ? AND b = ? AND c = ? AND d = ? AND e = ? AND note = 'why?'",
        "it's", None, True, 1.5, datetime.date(2024, 1, 2),
    )
    assert debug_sql(expr) == (
        "a = 'it''s' AND b = NULL AND c = TRUE AND d = 1.5 AND e = '2024-01-02' AND note = 'why?'"
    )


def test_debug_sql_count_mismatch():
    with pytest.raises(PlaceholderCountError) as exc_info:
        debug_sql(Expr("a = ? AND b = ?", 1))
    assert (exc_info.value.placeholder_count, exc_info.value.arg_count) == (2, 1)


def test_debug_sql_ignores_statement_format():
    stmt = update("t").set("a", 1).placeholder_format(DOLLAR)
    assert debug_sql(stmt) == "UPDATE t SET a = 1"


def test_registry_registration_is_isolated_per_test():
    assert "duckdb_test" not in PlaceholderRegistry.registered_dialects()
