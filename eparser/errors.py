"""eparser/errors.py"""


class ExpressionError(ValueError):
    """所有表达式错误的基类"""


class LexError(ExpressionError):
    """无法识别或未结束的词素"""

    def __init__(self, message, position=None):
        super().__init__(message)
        self.position = position  # 规范化后字符串中的位置


class ExpressionSyntaxError(ExpressionError):
    """括号不匹配、词素无法归类、表达式为空或不完整"""


class EvaluationError(ExpressionError):
    """栈下溢或栈不平衡（内部不变量被破坏）"""
