"""Unit tests for the execution pass-through and StatementBuilder."""

from __future__ import annotations

import logging

import pytest

from masonql.errors import ConfigurationError, StructuralError
from masonql.format.placeholder import DOLLAR, QUESTION
from masonql.runner import Runner, exec_with, query_row_with, query_with
from masonql.sqlizer.expr import Expr
from masonql.statements.factory import (
    DEFAULT_PLACEHOLDER_FORMAT,
    StatementBuilder,
    insert,
    select,
    statement_builder,
)


def test_db_stub_is_a_runner(db):
    assert isinstance(db, Runner)


def test_exec_with_forwards_rendered_sql(db):
    exec_with(db, insert("t").columns("a").values(1))
    assert db.last_sql == "INSERT INTO t (a) VALUES (?)"
    assert db.last_args == [1]


def test_query_with_returns_cursor(db):
    cursor = query_with(db, select("a").from_("t"))
    assert cursor.fetchone() == (1, "ada")


def test_query_row_with_returns_first_row(db):
    assert query_row_with(db, Expr("SELECT 1")) == (1, "ada")


def test_render_error_never_reaches_runner(db):
    with pytest.raises(StructuralError):
        exec_with(db, select().from_("t"))
    assert db.calls == 0


def test_statement_query_row(db):
    row = select("id", "name").from_("users").where("id = ?", 1).run_with(db).query_row()
    assert row == (1, "ada")
    assert db.last_args == [1]


def test_factory_carries_runner_and_format(db, pg):
    pg.run_with(db).update("t").set("a", 1).where("b = ?", 2).exec()
    assert db.last_sql == "UPDATE t SET a = $1 WHERE b = $2"
    assert db.last_args == [1, 2]


def test_factory_is_immutable(pg):
    pg.placeholder_format(QUESTION)
    assert pg.FORMAT == DOLLAR


def test_default_factory_uses_default_format():
    assert DEFAULT_PLACEHOLDER_FORMAT == QUESTION
    assert statement_builder.FORMAT == QUESTION
    assert statement_builder.select("a").FORMAT == QUESTION


def test_for_dialect():
    sql, _ = StatementBuilder().for_dialect("postgres").delete("t").where("a = ?", 1).to_sql()
    assert sql == "DELETE FROM t WHERE a = $1"


def test_for_unknown_dialect():
    with pytest.raises(ConfigurationError):
        StatementBuilder().for_dialect("unknown")


def test_execution_is_logged_at_debug(db, caplog):
    with caplog.at_level(logging.DEBUG, logger="masonql.runner"):
        exec_with(db, insert("t").columns("a", "b").values(1, 2))
    assert "statement_executing" in caplog.text
    assert "arg_count=2" in caplog.text
