"""表达式解析模块 - 词法分析、归类、调度场转换和后缀求值"""
from .errors import ExpressionError, LexError, ExpressionSyntaxError, EvaluationError
from .operators import Operators
from .registry import OperatorRegistry, DEFAULT_REGISTRY
from .terms import Term, TermType
from .variables import VariableStore
from .evaluator import RPNEvaluator
from .parser import ExpressionParser, evaluate

__all__ = [
    'ExpressionError', 'LexError', 'ExpressionSyntaxError', 'EvaluationError',
    'Operators', 'OperatorRegistry', 'DEFAULT_REGISTRY',
    'Term', 'TermType', 'VariableStore', 'RPNEvaluator',
    'ExpressionParser', 'evaluate'
]
