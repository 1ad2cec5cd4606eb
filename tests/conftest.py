"""Shared fixtures for the expression engine tests."""

import pytest

from eparser import DEFAULT_REGISTRY
from eparser.classifier import TermClassifier
from eparser.converter import ShuntingYardConverter
from eparser.lexer import Lexer


@pytest.fixture
def registry():
    return DEFAULT_REGISTRY


@pytest.fixture
def lex(registry):
    """Tokenize with the default registry."""
    return Lexer(registry).tokenize


@pytest.fixture
def classify(registry, lex):
    """Lex + classify, returning (text, type) pairs."""
    classifier = TermClassifier(registry)

    def _classify(expression):
        return [(t.text, t.type) for t in classifier.classify(lex(expression))]

    return _classify


@pytest.fixture
def to_rpn(registry, lex):
    """Full pipeline up to the postfix trace string."""
    classifier = TermClassifier(registry)
    converter = ShuntingYardConverter(registry)

    def _to_rpn(expression):
        postfix = converter.convert(classifier.classify(lex(expression)))
        return " ".join(str(t) for t in postfix)

    return _to_rpn
