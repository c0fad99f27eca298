"""Unit tests for predicate containers."""

from __future__ import annotations

import pytest

from masonql.errors import PredicateError, StructuralError
from masonql.sqlizer.expr import Expr
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
    _ColumnMap,
    _Conjunction,
)
from masonql.statements.factory import select


def test_eq_single_column():
    assert Eq({"x": 0}).to_sql() == ("x = ?", [0])


def test_eq_keys_rendered_in_sorted_order():
    assert Eq({"b": 2, "c": 3, "a": 1}).to_sql() == ("a = ? AND b = ? AND c = ?", [1, 2, 3])


def test_eq_keyword_construction():
    assert Eq(y=2, x=1).to_sql() == ("x = ? AND y = ?", [1, 2])


def test_eq_none_is_null():
    assert Eq({"deleted_at": None}).to_sql() == ("deleted_at IS NULL", [])
    assert NotEq({"deleted_at": None}).to_sql() == ("deleted_at IS NOT NULL", [])


def test_eq_sequence_is_in():
    assert Eq({"id": [1, 2, 3]}).to_sql() == ("id IN (?,?,?)", [1, 2, 3])
    assert NotEq({"id": (4, 5)}).to_sql() == ("id NOT IN (?,?)", [4, 5])


def test_eq_set_values_sorted_for_determinism():
    assert Eq({"code": {"b", "a"}}).to_sql() == ("code IN (?,?)", ["a", "b"])


def test_eq_empty_sequence_constants():
    assert Eq({"id": []}).to_sql() == ("(1=0)", [])
    assert NotEq({"id": []}).to_sql() == ("(1=1)", [])


def test_eq_subquery_value_is_parenthesized():
    sub = select("max(id)").from_("t").where("k = ?", "v")
    assert Eq({"id": sub}).to_sql() == ("id = (SELECT max(id) FROM t WHERE k = ?)", ["v"])


def test_eq_expr_value_inlined():
    assert NotEq({"a": Expr("lower(?)", "X")}).to_sql() == ("a <> lower(?)", ["X"])


def test_empty_eq_is_structural_error():
    with pytest.raises(StructuralError):
        Eq().to_sql()


@pytest.mark.parametrize(
    ("container", "op"),
    [
        (Lt, "<"),
        (LtOrEq, "<="),
        (Gt, ">"),
        (GtOrEq, ">="),
        (Like, "LIKE"),
        (NotLike, "NOT LIKE"),
        (ILike, "ILIKE"),
        (NotILike, "NOT ILIKE"),
    ],
)
def test_scalar_operators(container, op):
    assert container({"col": 5}).to_sql() == (f"col {op} ?", [5])


def test_scalar_operators_reject_collections():
    with pytest.raises(PredicateError) as exc_info:
        Lt({"x": [1, 2]}).to_sql()
    assert exc_info.value.column == "x"


def test_scalar_operators_reject_null():
    with pytest.raises(PredicateError):
        Like({"name": None}).to_sql()


def test_and_does_not_parenthesize_terms():
    assert And(Eq({"x": 0}), Expr("x > ?", 1)).to_sql() == ("x = ? AND x > ?", [0, 1])


def test_or_parenthesizes_terms():
    assert Or(Eq({"x": 0}), Expr("x > ?", 1)).to_sql() == ("(x = ?) OR (x > ?)", [0, 1])


def test_and_wraps_nested_or():
    pred = And(Expr("a = ?", 1), Or(Expr("b = ?", 2), Expr("c = ?", 3)))
    assert pred.to_sql() == ("a = ? AND ((b = ?) OR (c = ?))", [1, 2, 3])


def test_or_of_ands():
    pred = Or(And(Eq({"a": 1}), Eq({"b": 2})), Eq({"c": 3}))
    assert pred.to_sql() == ("(a = ? AND b = ?) OR (c = ?)", [1, 2, 3])


def test_empty_conjunction_constants():
    assert And().to_sql() == ("(1=1)", [])
    assert Or().to_sql() == ("(1=0)", [])


def test_conjunction_coerces_mappings_and_strings():
    assert And({"a": 1}, "b IS NOT NULL").to_sql() == ("a = ? AND b IS NOT NULL", [1])


def test_conjunction_skips_empty_terms():
    assert And(Expr(""), Eq({"a": 1})).to_sql() == ("a = ?", [1])


def test_conjunction_rejects_unknown_terms():
    with pytest.raises(TypeError):
        And(42)


def test_conjunction_propagates_nested_error():
    with pytest.raises(StructuralError):
        Or(Eq({"a": 1}), Eq()).to_sql()


def test_where_keeps_snapshot_of_column_map():
    pred = Eq({"a": 1})
    b = select("x").from_("t").where(pred)
    pred["z"] = 2
    assert b.to_sql() == ("SELECT x FROM t WHERE a = ?", [1])


def test_where_keeps_snapshot_of_in_list():
    ids = [1, 2]
    b = select("x").from_("t").where(Eq({"id": ids}))
    ids.append(3)
    assert b.to_sql() == ("SELECT x FROM t WHERE id IN (?,?)", [1, 2])


def test_where_keeps_snapshot_of_nested_conjunction():
    inner = Eq({"a": 1})
    pred = Or(inner, Eq({"b": 2}))
    b = select("x").from_("t").where(pred)
    pred.append(Eq({"c": 3}))
    inner["d"] = 4
    assert b.to_sql() == ("SELECT x FROM t WHERE ((a = ?) OR (b = ?))", [1, 2])


def test_conjunction_copies_its_terms():
    term = Eq({"a": 1})
    conj = And(term)
    term["b"] = 2
    assert conj.to_sql() == ("a = ?", [1])


def test_column_map_helpers_are_abstract():
    assert "_compare" in _ColumnMap.__abstractmethods__
    assert "_wrap" in _Conjunction.__abstractmethods__
