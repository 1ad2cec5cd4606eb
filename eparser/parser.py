"""eparser/parser.py"""
import logging

from eparser.classifier import TermClassifier
from eparser.converter import ShuntingYardConverter
from eparser.evaluator import RPNEvaluator
from eparser.lexer import Lexer
from eparser.registry import DEFAULT_REGISTRY
from eparser.terms import render_trace
from eparser.variables import VariableStore

logger = logging.getLogger(__name__)


class ExpressionParser:
    """
    字符串表达式的解析与求值。

    构造时完成 词法分析 -> 归类 -> 转后缀，失败直接抛出 LexError / ExpressionSyntaxError；
    构造成功的实例可以在修改变量后反复 evaluate()，不会重新解析。

    Example:
        >>> parser = ExpressionParser("2*X + 1")
        >>> parser.set_variable("X", 5)
        >>> parser.evaluate()
        11.0
    """

    def __init__(self, expression, registry=None):
        self._source = expression
        self._registry = registry if registry is not None else DEFAULT_REGISTRY
        self._variables = VariableStore()

        lexemes = Lexer(self._registry).tokenize(expression)
        terms = TermClassifier(self._registry).classify(lexemes)
        self._postfix = ShuntingYardConverter(self._registry).convert(terms)

        logger.debug(f"Parsed '{expression}' -> {self.rpn}")

    @property
    def source_expression(self):
        """原始字符串（未经规范化）"""
        return self._source

    @property
    def registry(self):
        return self._registry

    @property
    def postfix(self):
        return self._postfix

    @property
    def rpn(self):
        """逆波兰输出，一元操作符带 ' 前缀"""
        return render_trace(self._postfix)

    @property
    def variables(self):
        return self._variables

    def set_variable(self, name, value):
        self._variables.set(name, value)

    def get_variable(self, name):
        return self._variables.get(name)

    def evaluate(self):
        return RPNEvaluator.evaluate(self._postfix, self._registry, self._variables)

    def evaluate_frame(self, frame):
        """按行对DataFrame求值，列名即变量名"""
        return RPNEvaluator.evaluate_frame(self._postfix, self._registry, frame, self._variables)

    def __repr__(self):
        return f"ExpressionParser({self._source!r}, rpn={self.rpn!r})"


def evaluate(expression, registry=None, **variables):
    """一次性求值：evaluate("X^2", X=3) -> 9.0"""
    parser = ExpressionParser(expression, registry)
    for name, value in variables.items():
        parser.set_variable(name, value)
    return parser.evaluate()
