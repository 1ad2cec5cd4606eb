"""eparser/terms.py"""
import re
from enum import Enum
from typing import NamedTuple

from config.config import LEXER_CONFIG, PRIORITY_CONFIG, TRACE_CONFIG, VARIABLE_CONFIG

# 数字字面量：12 / 12. / 12.5（规范化后的小数点，不含符号和指数）
NUMBER_PATTERN = re.compile(r"\d+(?:{dp}\d*)?".format(dp=re.escape(LEXER_CONFIG["decimal_point"])))

VARIABLE_NAMES = frozenset(VARIABLE_CONFIG["names"])


class TermType(Enum):
    VARIABLE = "variable"
    FUNCTION = "function"
    OPEN_BRACKET = "open_bracket"
    CLOSE_BRACKET = "close_bracket"
    NUMBER = "number"
    BINARY_OP = "binary_op"
    UNARY_OP = "unary_op"


OPERAND_TYPES = (TermType.NUMBER, TermType.VARIABLE)


class Term(NamedTuple):
    """带语法角色的词素"""
    text: str
    type: TermType

    def __str__(self):
        if self.type == TermType.UNARY_OP:
            return TRACE_CONFIG["unary_marker"] + self.text
        return self.text


def is_number(text):
    return NUMBER_PATTERN.fullmatch(text) is not None


def is_variable(text):
    return text in VARIABLE_NAMES


def get_priority(term, registry):
    """获取项的优先级，括号返回最低值"""
    if term.type == TermType.FUNCTION:
        return PRIORITY_CONFIG["function"]
    if term.type == TermType.UNARY_OP:
        return PRIORITY_CONFIG["unary"]
    if term.type == TermType.BINARY_OP:
        return registry.priority(term.text)
    return PRIORITY_CONFIG["bracket"]


def render_trace(terms):
    """逆波兰序列的文本形式，一元操作符带前缀标记"""
    return TRACE_CONFIG["separator"].join(str(term) for term in terms)
