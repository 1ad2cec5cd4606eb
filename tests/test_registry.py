"""Tests for OperatorRegistry and the default numeric semantics."""

import math

import numpy as np
import pytest

from eparser import DEFAULT_REGISTRY, OperatorRegistry, Operators


def test_default_symbol_table():
    assert sorted(DEFAULT_REGISTRY.functions) == ["COS", "EXP", "LN", "SIN"]
    assert sorted(DEFAULT_REGISTRY.binary_operators) == ["*", "+", "-", "/", "^"]
    assert sorted(DEFAULT_REGISTRY.unary_operators) == ["+", "-"]


def test_lookup_surface():
    assert DEFAULT_REGISTRY.is_function("SIN")
    assert not DEFAULT_REGISTRY.is_function("sin")
    assert DEFAULT_REGISTRY.is_binary_operator("^")
    assert DEFAULT_REGISTRY.is_unary_operator("-")
    assert not DEFAULT_REGISTRY.is_unary_operator("*")
    assert DEFAULT_REGISTRY.is_bracket("(")
    assert DEFAULT_REGISTRY.is_operator_symbol(")")
    assert DEFAULT_REGISTRY.has_function_prefix("EX")
    assert not DEFAULT_REGISTRY.has_function_prefix("IN")


def test_priorities():
    assert DEFAULT_REGISTRY.priority("^") == 70
    assert DEFAULT_REGISTRY.priority("*") == 60
    assert DEFAULT_REGISTRY.priority("/") == 60
    assert DEFAULT_REGISTRY.priority("+") == 50
    assert DEFAULT_REGISTRY.priority("-") == 50


def test_default_callables():
    assert DEFAULT_REGISTRY.binary_operator("^")(2.0, 3.0) == pytest.approx(8.0)
    assert DEFAULT_REGISTRY.binary_operator("-")(2.0, 3.0) == pytest.approx(-1.0)
    assert DEFAULT_REGISTRY.unary_operator("-")(2.0) == pytest.approx(-2.0)
    assert DEFAULT_REGISTRY.unary_operator("+")(2.0) == pytest.approx(2.0)
    assert DEFAULT_REGISTRY.function("EXP")(0.0) == pytest.approx(1.0)


def test_maps_are_read_only():
    with pytest.raises(TypeError):
        DEFAULT_REGISTRY.functions["SQRT"] = math.sqrt
    with pytest.raises(TypeError):
        DEFAULT_REGISTRY.binary_operators["%"] = lambda a, b: a % b


def test_derived_registry_leaves_original_untouched():
    derived = DEFAULT_REGISTRY.with_function("SQRT", np.sqrt)
    assert derived.is_function("SQRT")
    assert not DEFAULT_REGISTRY.is_function("SQRT")


def test_derived_registry_keeps_custom_priorities():
    registry = DEFAULT_REGISTRY.with_binary_operator("%", np.mod, priority=65)
    registry = registry.with_function("ABS", np.abs)
    assert registry.priority("%") == 65
    assert registry.priority("^") == 70


# --- Validation ---

@pytest.mark.parametrize("name", ["sin", "", "2X", "A-B"])
def test_invalid_function_names(name):
    with pytest.raises(ValueError):
        OperatorRegistry({name: math.sin}, {}, {})


@pytest.mark.parametrize("symbol", ["(", ".", ",", "A", " "])
def test_invalid_operator_symbols(symbol):
    with pytest.raises(ValueError):
        OperatorRegistry({}, {symbol: lambda a, b: a}, {})


@pytest.mark.parametrize("symbol", ["**", "<>"])
def test_multi_character_operator_symbols_are_rejected(symbol):
    with pytest.raises(ValueError, match="single character"):
        DEFAULT_REGISTRY.with_binary_operator(symbol, np.power, priority=70)


def test_non_callable_is_rejected():
    with pytest.raises(ValueError):
        OperatorRegistry({"F": 1.0}, {}, {})


def test_priority_for_unknown_operator_is_rejected():
    with pytest.raises(ValueError):
        OperatorRegistry({}, {"+": Operators.add}, {}, priorities={"%": 60})


# --- Numeric semantics ---

def test_operators_follow_ieee_rules():
    assert Operators.div(1.0, 0.0) == math.inf
    assert math.isnan(Operators.div(0.0, 0.0))
    assert math.isnan(Operators.ln(-1.0))
    assert math.isnan(Operators.power(-8.0, 1.0 / 3.0))


def test_operators_accept_arrays():
    result = Operators.add(np.array([1.0, 2.0]), 1.0)
    assert result.tolist() == [2.0, 3.0]
    assert Operators.div(np.array([1.0, 0.0]), np.array([0.0, 0.0]))[0] == math.inf
