"""eparser/lexer.py"""
import logging

from config.config import LEXER_CONFIG
from eparser.errors import LexError
from eparser.terms import NUMBER_PATTERN, is_number, is_variable

logger = logging.getLogger(__name__)


def normalize(expression):
    """
    预处理：统一小数点 -> 删除空白 -> 转大写
    空白删除不区分是否在数字内部，"1 2" 等价于 "12"。
    """
    text = expression
    for separator in LEXER_CONFIG["decimal_separators"]:
        text = text.replace(separator, LEXER_CONFIG["decimal_point"])
    for blank in LEXER_CONFIG["whitespace"]:
        text = text.replace(blank, "")
    return text.upper()


class Lexer:
    """按最长匹配 + 回退一个字符的规则把表达式切成词素"""

    def __init__(self, registry):
        self.registry = registry

    def _is_operand_or_function(self, candidate):
        """数字、函数名或变量名"""
        return is_number(candidate) or self.registry.is_function(candidate) or is_variable(candidate)

    def _next_lexeme(self, text, start):
        """
        从start开始读取一个词素
        Returns:
            (词素, 下一个词素的起始位置)
        """
        # 数字的每个前缀都是合法数字，且不可能是函数名前缀，一次匹配即可得到最长数字
        number = NUMBER_PATTERN.match(text, start)
        if number:
            return number.group(), number.end()

        # 名称候选的长度不会超过最长的函数名
        candidate = ""
        for i in range(start, len(text)):
            candidate += text[i]

            # 操作符和括号一旦成形立即切出
            if self.registry.is_operator_symbol(candidate):
                return candidate, i + 1

            if self._is_operand_or_function(candidate):
                continue

            # 可能还是某个函数名的前半段，继续读
            if self.registry.has_function_prefix(candidate):
                continue

            # 回退一个字符
            lexeme = candidate[:-1]
            if not self._is_operand_or_function(lexeme):
                logger.debug(f"Unrecognized symbol {candidate!r} at position {start} in '{text}'")
                raise LexError(f"unrecognized symbol {candidate!r} at position {start}", position=start)
            return lexeme, i

        if self._is_operand_or_function(candidate):
            return candidate, len(text)

        logger.debug(f"Unterminated token {candidate!r} at position {start} in '{text}'")
        raise LexError(f"unterminated token {candidate!r} at position {start}", position=start)

    def tokenize(self, expression):
        """原始表达式 -> 词素列表（保持原顺序）"""
        text = normalize(expression)
        lexemes = []
        index = 0
        while index < len(text):
            lexeme, index = self._next_lexeme(text, index)
            lexemes.append(lexeme)

        logger.debug(f"Lexemes for '{expression}': {lexemes}")
        return lexemes
