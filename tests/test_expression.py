import pytest

from geolayout import Expression, Variable


def test_variables_with_same_label_get_distinct_names():
    first = Variable("x")
    second = Variable("x")

    assert first.label == second.label == "x"
    assert first.name != second.name
    assert first is not second


def test_plus_is_associative_and_commutative():
    a, b, c = Variable("a", 1), Variable("b", 2), Variable("c", 3)

    assert ((a + b) + c).equivalent(a + (b + c))
    assert (a + b).equivalent(b + a)
    assert (a + b + c).value() == 6


def test_times_distributes_over_plus():
    a, b = Variable("a", 2), Variable("b", 5)

    assert ((a + b) * 3).equivalent(a * 3 + b * 3)
    assert (2 * (a - b)).equivalent(a.expression().times(2).minus(b.expression().times(2)))
    assert ((a + b) / 2).equivalent((a + b).divide(2))
    assert ((a + b) / 2).value() == pytest.approx(3.5, abs=1e-6)


def test_terms_merge_and_cancel():
    a = Variable("a", 4)

    doubled = a + a
    assert len(doubled.terms) == 1
    assert doubled.terms[0][1] == 2.0

    cancelled = a - a
    assert cancelled.is_constant()
    assert cancelled.value() == 0.0


def test_reflected_operators_and_negation():
    a = Variable("a", 4)

    assert (10 - a).value() == 6
    assert (1 + a).value() == 5
    assert (-a).value() == -4
    assert Expression.coerce(7).value() == 7
    assert Expression.coerce(a).variables == (a,)


def test_expression_tracks_variable_values():
    a = Variable("a", 1)
    expr = a * 2 + 1
    a.value = 10
    assert expr.value() == 21


def test_nonlinear_operations_are_rejected():
    a, b = Variable("a"), Variable("b")

    with pytest.raises(TypeError):
        a * b
    with pytest.raises(TypeError):
        a / (b + 1)
    with pytest.raises(TypeError):
        Expression.coerce("a")
    with pytest.raises(ZeroDivisionError):
        a / 0
