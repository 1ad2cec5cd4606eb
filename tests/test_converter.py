"""Tests for the shunting-yard conversion and postfix validation."""

import pytest

from eparser import ExpressionSyntaxError, Term, TermType
from eparser.converter import calculate_stack_size


# --- Ordering ---

def test_precedence(to_rpn):
    assert to_rpn("2+3*4") == "2 3 4 * +"


def test_brackets_override_precedence(to_rpn):
    assert to_rpn("(2+3)*4") == "2 3 + 4 *"


def test_binary_operators_are_left_associative(to_rpn):
    assert to_rpn("8-4-2") == "8 4 - 2 -"
    assert to_rpn("2^3^2") == "2 3 ^ 2 ^"


def test_unary_operators_chain_right(to_rpn):
    assert to_rpn("--3") == "3 '- '-"


def test_unary_binds_tighter_than_power(to_rpn):
    assert to_rpn("-2^2") == "2 '- 2 ^"


def test_unary_operand_of_binary(to_rpn):
    assert to_rpn("2*-3") == "2 3 '- *"


def test_function_application(to_rpn):
    assert to_rpn("SIN(X)^2") == "X SIN 2 ^"


def test_nested_functions(to_rpn):
    assert to_rpn("LN(EXP(1))") == "1 EXP LN"


def test_function_without_brackets_takes_next_operand(to_rpn):
    assert to_rpn("COS0") == "0 COS"


# --- Bracket errors ---

def test_unmatched_opening_bracket(to_rpn):
    with pytest.raises(ExpressionSyntaxError, match="unmatched opening bracket"):
        to_rpn("(2+3")


def test_unmatched_closing_bracket(to_rpn):
    with pytest.raises(ExpressionSyntaxError, match="unmatched closing bracket"):
        to_rpn("2+3)")


# --- Structural validation ---

def test_empty_expression(to_rpn):
    with pytest.raises(ExpressionSyntaxError, match="empty expression"):
        to_rpn("")


@pytest.mark.parametrize("expression", ["2++", "2-", "SIN", "()", "-"])
def test_incomplete_expression(to_rpn, expression):
    with pytest.raises(ExpressionSyntaxError, match="incomplete expression"):
        to_rpn(expression)


@pytest.mark.parametrize("expression", ["2X", "(1)(2)", "X Y"])
def test_missing_operator(to_rpn, expression):
    with pytest.raises(ExpressionSyntaxError, match="missing operator"):
        to_rpn(expression)


def test_calculate_stack_size():
    postfix = [
        Term("2", TermType.NUMBER),
        Term("X", TermType.VARIABLE),
        Term("-", TermType.UNARY_OP),
        Term("+", TermType.BINARY_OP),
    ]
    assert calculate_stack_size(postfix) == 1
    assert calculate_stack_size(postfix[:2]) == 2
    assert calculate_stack_size(postfix[2:]) is None
