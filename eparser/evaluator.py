"""后缀表达式求值器 - 调用注册表中的函数与操作符"""
import numpy as np
import pandas as pd
import logging

from config.config import VARIABLE_CONFIG
from eparser.errors import EvaluationError
from eparser.terms import TermType, VARIABLE_NAMES, render_trace

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """在变量绑定上执行后缀序列"""

    @staticmethod
    def _pop(stack, term, postfix):
        if not stack:
            logger.error(f"Insufficient operands for '{term.text}' in: {render_trace(postfix)}")
            raise EvaluationError("stack underflow")
        return stack.pop()

    @staticmethod
    def _run(postfix, registry, lookup):
        """
        栈机主循环
        Args:
            postfix: 后缀Term序列
            registry: OperatorRegistry
            lookup: 变量名 -> 值（标量或数组）
        Returns:
            栈中唯一剩余的值
        """
        stack = []

        for term in postfix:
            if term.type == TermType.NUMBER:
                stack.append(float(term.text))

            elif term.type == TermType.VARIABLE:
                stack.append(lookup(term.text))

            elif term.type == TermType.UNARY_OP:
                operand = RPNEvaluator._pop(stack, term, postfix)
                stack.append(registry.unary_operator(term.text)(operand))

            elif term.type == TermType.BINARY_OP:
                # 先出栈的是右操作数
                operand2 = RPNEvaluator._pop(stack, term, postfix)
                operand1 = RPNEvaluator._pop(stack, term, postfix)
                stack.append(registry.binary_operator(term.text)(operand1, operand2))

            elif term.type == TermType.FUNCTION:
                operand = RPNEvaluator._pop(stack, term, postfix)
                stack.append(registry.function(term.text)(operand))

            else:
                logger.error(f"Unexpected term '{term.text}' ({term.type.value}) in postfix sequence")
                raise EvaluationError(f"unexpected term '{term.text}'")

        if not stack:
            logger.error(f"Empty stack after evaluating: {render_trace(postfix)}")
            raise EvaluationError("stack underflow")
        if len(stack) > 1:
            logger.error(f"Stack has {len(stack)} elements after evaluation, expected 1")
            logger.error(f"RPN expression: {render_trace(postfix)}")
            raise EvaluationError("stack imbalance")

        return stack[0]

    @staticmethod
    def evaluate(postfix, registry, variables):
        """
        Args:
            postfix: 后缀Term序列
            registry: OperatorRegistry
            variables: VariableStore
        Returns:
            float结果
        """
        return float(RPNEvaluator._run(postfix, registry, variables.get))

    @staticmethod
    def evaluate_frame(postfix, registry, frame, variables=None):
        """
        向量化求值：DataFrame的每一列绑定到同名变量。

        列名不区分大小写，非变量名的列被忽略；frame中没有的变量
        取variables中的值（若给出），否则为NaN。注册表里的函数需要能处理numpy数组。

        Returns:
            与frame索引对齐的Series
        """
        length = len(frame)
        columns = {}
        for column in frame.columns:
            name = str(column).upper()
            if name in VARIABLE_NAMES:
                columns[name] = column

        # 只转换表达式实际用到的列
        def lookup(name):
            if name in columns:
                return np.asarray(frame[columns[name]], dtype=np.float64)
            value = variables.get(name) if variables is not None else VARIABLE_CONFIG["default_value"]
            return np.full(length, value, dtype=np.float64)

        result = RPNEvaluator._run(postfix, registry, lookup)

        # 不含变量的表达式得到标量，扩展到整列
        if np.ndim(result) == 0:
            result = np.full(length, result, dtype=np.float64)
        return pd.Series(np.asarray(result, dtype=np.float64), index=frame.index)
