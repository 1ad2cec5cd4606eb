"""eparser/operators.py"""
import numpy as np


class Operators:
    """默认函数与操作符的静态方法集合

    全部基于numpy ufunc，标量和数组都能处理；
    除零、溢出、定义域外等情况按IEEE-754返回 inf / NaN，而不是抛异常。
    """

    # 一元操作符====================

    @staticmethod
    def pos(operand):
        """正号（恒等）"""
        return np.positive(operand)

    @staticmethod
    def neg(operand):
        """负号"""
        return np.negative(operand)

    # 二元操作符========================================

    @staticmethod
    def add(operand1, operand2):
        """加法操作符"""
        with np.errstate(over='ignore', invalid='ignore'):
            return np.add(operand1, operand2)

    @staticmethod
    def sub(operand1, operand2):
        """减法操作符"""
        with np.errstate(over='ignore', invalid='ignore'):
            return np.subtract(operand1, operand2)

    @staticmethod
    def mul(operand1, operand2):
        """乘法操作符"""
        with np.errstate(over='ignore', invalid='ignore'):
            return np.multiply(operand1, operand2)

    @staticmethod
    def div(operand1, operand2):
        """除法操作符：x/0 返回 ±inf，0/0 返回 NaN"""
        with np.errstate(divide='ignore', over='ignore', invalid='ignore'):
            return np.true_divide(np.asarray(operand1, dtype=np.float64), operand2)

    @staticmethod
    def power(operand1, operand2):
        """乘方：负数的非整数次幂返回NaN"""
        with np.errstate(all='ignore'):
            return np.power(np.asarray(operand1, dtype=np.float64), operand2)

    # 函数=====================================

    @staticmethod
    def sin(operand):
        with np.errstate(invalid='ignore'):
            return np.sin(operand)

    @staticmethod
    def cos(operand):
        with np.errstate(invalid='ignore'):
            return np.cos(operand)

    @staticmethod
    def ln(operand):
        """自然对数：ln(0) = -inf，负数返回NaN"""
        with np.errstate(divide='ignore', invalid='ignore'):
            return np.log(operand)

    @staticmethod
    def exp(operand):
        with np.errstate(over='ignore'):
            return np.exp(operand)


DEFAULT_FUNCTIONS = {
    'SIN': Operators.sin,
    'COS': Operators.cos,
    'LN': Operators.ln,
    'EXP': Operators.exp,
}

DEFAULT_BINARY_OPERATORS = {
    '+': Operators.add,
    '-': Operators.sub,
    '*': Operators.mul,
    '/': Operators.div,
    '^': Operators.power,
}

DEFAULT_UNARY_OPERATORS = {
    '+': Operators.pos,
    '-': Operators.neg,
}
