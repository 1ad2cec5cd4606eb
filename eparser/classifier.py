"""eparser/classifier.py"""
import logging

from config.config import LEXER_CONFIG
from eparser.errors import ExpressionSyntaxError
from eparser.terms import Term, TermType, is_number, is_variable

logger = logging.getLogger(__name__)

# 在这些项之后出现的 + - 视为一元操作符
PREFIX_CONTEXT = (TermType.OPEN_BRACKET, TermType.BINARY_OP, TermType.UNARY_OP)


class TermClassifier:
    """给每个词素标注语法角色，并区分一元/二元的 + -"""

    def __init__(self, registry):
        self.registry = registry

    def _operator_type(self, lexeme, previous):
        """根据左侧上下文决定操作符是一元还是二元"""
        in_prefix_position = previous is None or previous.type in PREFIX_CONTEXT

        if self.registry.is_binary_operator(lexeme) and not in_prefix_position:
            return TermType.BINARY_OP

        if not in_prefix_position:
            raise ExpressionSyntaxError(f"operator '{lexeme}' cannot follow an operand")
        if not self.registry.is_unary_operator(lexeme):
            raise ExpressionSyntaxError(f"operator '{lexeme}' cannot be used as unary")
        return TermType.UNARY_OP

    def classify(self, lexemes):
        """词素列表 -> Term列表（一一对应）"""
        terms = []
        for lexeme in lexemes:
            previous = terms[-1] if terms else None

            if self.registry.is_function(lexeme):
                term_type = TermType.FUNCTION
            elif is_number(lexeme):
                term_type = TermType.NUMBER
            elif is_variable(lexeme):
                term_type = TermType.VARIABLE
            elif lexeme == LEXER_CONFIG["open_bracket"]:
                term_type = TermType.OPEN_BRACKET
            elif lexeme == LEXER_CONFIG["close_bracket"]:
                term_type = TermType.CLOSE_BRACKET
            elif self.registry.is_binary_operator(lexeme) or self.registry.is_unary_operator(lexeme):
                try:
                    term_type = self._operator_type(lexeme, previous)
                except ExpressionSyntaxError as e:
                    logger.debug(f"Misplaced operator in {lexemes}: {e}")
                    raise
            else:
                logger.debug(f"Unrecognized lexeme {lexeme!r} in {lexemes}")
                raise ExpressionSyntaxError(f"unrecognized lexeme '{lexeme}'")

            terms.append(Term(lexeme, term_type))

        logger.debug(f"Terms: {[(t.text, t.type.value) for t in terms]}")
        return terms
