"""eparser/converter.py"""
import logging

from eparser.errors import ExpressionSyntaxError
from eparser.terms import TermType, OPERAND_TYPES, get_priority, render_trace

logger = logging.getLogger(__name__)


class ShuntingYardConverter:
    """中缀Term序列 -> 逆波兰（后缀）序列"""

    def __init__(self, registry):
        self.registry = registry

    def _pop_while(self, stack, output, priority, strict):
        """
        栈顶优先级高于（strict=False时为不低于）priority时持续出栈。
        一元操作符用strict=True，得到右结合：--X 即 -(-X)；
        二元操作符用strict=False，全部左结合：2^3^2 即 (2^3)^2。
        """
        while stack:
            top_priority = get_priority(stack[-1], self.registry)
            if top_priority > priority or (not strict and top_priority == priority):
                output.append(stack.pop())
            else:
                break

    def convert(self, terms):
        if not terms:
            raise ExpressionSyntaxError("empty expression")

        stack = []
        output = []

        for term in terms:
            if term.type in OPERAND_TYPES:
                output.append(term)

            elif term.type in (TermType.FUNCTION, TermType.OPEN_BRACKET):
                stack.append(term)

            elif term.type == TermType.CLOSE_BRACKET:
                while True:
                    if not stack:
                        logger.debug(f"Unmatched closing bracket, output so far: {render_trace(output)}")
                        raise ExpressionSyntaxError("unmatched closing bracket")
                    top = stack.pop()
                    if top.type == TermType.OPEN_BRACKET:
                        break
                    output.append(top)

            elif term.type == TermType.UNARY_OP:
                self._pop_while(stack, output, get_priority(term, self.registry), strict=True)
                stack.append(term)

            elif term.type == TermType.BINARY_OP:
                self._pop_while(stack, output, get_priority(term, self.registry), strict=False)
                stack.append(term)

            else:
                raise ExpressionSyntaxError(f"unexpected term '{term.text}'")

        while stack:
            top = stack.pop()
            if top.type == TermType.OPEN_BRACKET:
                logger.debug(f"Unmatched opening bracket, output so far: {render_trace(output)}")
                raise ExpressionSyntaxError("unmatched opening bracket")
            output.append(top)

        validate_postfix(output)
        logger.debug(f"Postfix: {render_trace(output)}")
        return tuple(output)


def calculate_stack_size(postfix):
    """
    模拟求值时的栈深度
    Returns:
        最终栈深度；出现下溢时返回None
    """
    stack_size = 0
    for term in postfix:
        if term.type in OPERAND_TYPES:
            stack_size += 1
        elif term.type == TermType.BINARY_OP:
            if stack_size < 2:
                return None
            stack_size -= 1
        elif stack_size < 1:
            # 一元操作符和函数
            return None
    return stack_size


def validate_postfix(postfix):
    """保证构造出的后缀序列一定可以求值"""
    stack_size = calculate_stack_size(postfix)
    if stack_size is None or stack_size == 0:
        logger.debug(f"Incomplete expression: {render_trace(postfix)}")
        raise ExpressionSyntaxError("incomplete expression")
    if stack_size > 1:
        logger.debug(f"Missing operator, {stack_size} operands left: {render_trace(postfix)}")
        raise ExpressionSyntaxError("missing operator")
