import pytest

from dsakit.expressions import (
    evaluate_postfix,
    infix_to_postfix,
    infix_to_prefix,
    postfix_to_infix,
)


def test_postfix_to_infix_example():
    assert postfix_to_infix("abc*+de/+") == "((a+(b*c))+(d/e))"


def test_postfix_to_infix_single_operand():
    assert postfix_to_infix("a") == "a"


@pytest.mark.parametrize("bad", ["+", "ab", "a+", ""])
def test_postfix_to_infix_malformed(bad):
    with pytest.raises(ValueError):
        postfix_to_infix(bad)


def test_infix_to_postfix_example():
    assert infix_to_postfix("(a+b)*c+d/e") == "ab+c*de/+"


def test_infix_to_prefix_example():
    assert infix_to_prefix("(A-B/C)*(A/K-L)") == "*-A/BC-/AKL"


@pytest.mark.parametrize("bad", ["(a+b", "a+b)", ")a"])
def test_unbalanced_parentheses(bad):
    with pytest.raises(ValueError):
        infix_to_postfix(bad)
    with pytest.raises(ValueError):
        infix_to_prefix(bad)


@pytest.mark.parametrize(
    "expr", ["a+b*c", "a*b/c", "a-b-c", "a^b^c", "(a+b)*(c-d)", "x/y+z*w"]
)
def test_postfix_round_trip_keeps_token_order(expr):
    infix = postfix_to_infix(infix_to_postfix(expr))
    stripped = infix.replace("(", "").replace(")", "")
    assert stripped == expr.replace("(", "").replace(")", "")


@pytest.mark.parametrize("expr", ["a+b", "(a+b)*c", "a-b/c"])
def test_prefix_has_same_operands_and_operators(expr):
    prefix = infix_to_prefix(expr)
    assert sorted(prefix) == sorted(expr.replace("(", "").replace(")", ""))
    assert prefix[0] in "+-*/^"


def test_evaluate_basic_operations():
    assert evaluate_postfix("23+") == 2 + 3
    assert evaluate_postfix("52-") == 5 - 2
    assert evaluate_postfix("34*") == 3 * 4
    assert evaluate_postfix("23^") == 2**3


def test_evaluate_division_truncates():
    assert evaluate_postfix("72/") == float(7 // 2)
    assert evaluate_postfix("05-3/") == float(int(-5 / 3))


def test_evaluate_converted_infix():
    assert evaluate_postfix(infix_to_postfix("(1+2)*3")) == (1 + 2) * 3


def test_evaluate_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        evaluate_postfix("50/")


@pytest.mark.parametrize("bad", ["2+", "", "12"])
def test_evaluate_malformed(bad):
    with pytest.raises(ValueError):
        evaluate_postfix(bad)