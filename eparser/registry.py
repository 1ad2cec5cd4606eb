"""eparser/registry.py"""
from types import MappingProxyType

from config.config import LEXER_CONFIG, PRIORITY_CONFIG
from eparser.operators import DEFAULT_FUNCTIONS, DEFAULT_BINARY_OPERATORS, DEFAULT_UNARY_OPERATORS

BRACKETS = (LEXER_CONFIG["open_bracket"], LEXER_CONFIG["close_bracket"])


class OperatorRegistry:
    """
    函数与操作符的只读查找表。

    每个解析器实例持有一个注册表；要增加函数或操作符，
    用 with_* 方法派生新的注册表，而不是修改已有的。

    Args:
        functions: 函数名（大写） -> 一元函数
        binary_operators: 符号 -> 二元函数
        unary_operators: 符号 -> 一元函数
        priorities: 二元符号 -> 优先级，缺省取 PRIORITY_CONFIG
    """

    def __init__(self, functions, binary_operators, unary_operators, priorities=None):
        self._functions = MappingProxyType(dict(functions))
        self._binary_operators = MappingProxyType(dict(binary_operators))
        self._unary_operators = MappingProxyType(dict(unary_operators))

        merged = dict(PRIORITY_CONFIG["binary"])
        merged.update(priorities or {})
        self._priorities = MappingProxyType(merged)

        self._validate()

    def _validate(self):
        """检查符号表互不冲突"""
        for name, func in self._functions.items():
            if not name or name != name.upper() or not name[0].isalpha() or not name.isalnum():
                raise ValueError(f"Function name must be an uppercase identifier: {name!r}")
            if not callable(func):
                raise ValueError(f"Function {name!r} is not callable")

        operator_symbols = set(self._binary_operators) | set(self._unary_operators)
        for symbol in operator_symbols:
            if not symbol or any(ch.isalnum() or ch.isspace() for ch in symbol):
                raise ValueError(f"Invalid operator symbol: {symbol!r}")
            if len(symbol) != 1:
                raise ValueError(f"Operator symbol must be a single character: {symbol!r}")
            if symbol in LEXER_CONFIG["decimal_separators"]:
                raise ValueError(f"Operator symbol clashes with decimal separator: {symbol!r}")
            if symbol in BRACKETS:
                raise ValueError(f"Operator symbol clashes with bracket: {symbol!r}")

        for symbol, func in list(self._binary_operators.items()) + list(self._unary_operators.items()):
            if not callable(func):
                raise ValueError(f"Operator {symbol!r} is not callable")

        unknown = set(self._priorities) - set(self._binary_operators) - set(PRIORITY_CONFIG["binary"])
        if unknown:
            raise ValueError(f"Priorities given for unknown binary operators: {sorted(unknown)}")

    # 只读视图 ====================

    @property
    def functions(self):
        return self._functions

    @property
    def binary_operators(self):
        return self._binary_operators

    @property
    def unary_operators(self):
        return self._unary_operators

    @property
    def priorities(self):
        return self._priorities

    # 查询 ====================

    def is_function(self, name):
        return name in self._functions

    def is_binary_operator(self, symbol):
        return symbol in self._binary_operators

    def is_unary_operator(self, symbol):
        return symbol in self._unary_operators

    def is_bracket(self, symbol):
        return symbol in BRACKETS

    def is_operator_symbol(self, symbol):
        """词法分析中一旦成形就立即切出的符号"""
        return self.is_binary_operator(symbol) or self.is_unary_operator(symbol) or self.is_bracket(symbol)

    def has_function_prefix(self, candidate):
        """是否存在以candidate开头的函数名"""
        return any(name.startswith(candidate) for name in self._functions)

    def function(self, name):
        return self._functions[name]

    def binary_operator(self, symbol):
        return self._binary_operators[symbol]

    def unary_operator(self, symbol):
        return self._unary_operators[symbol]

    def priority(self, symbol):
        """二元操作符的优先级"""
        return self._priorities.get(symbol, PRIORITY_CONFIG["binary_default"])

    # 派生 ====================

    def with_function(self, name, func):
        """返回增加（或替换）一个函数后的新注册表"""
        functions = dict(self._functions)
        functions[name] = func
        return OperatorRegistry(functions, self._binary_operators, self._unary_operators, self._custom_priorities())

    def with_binary_operator(self, symbol, func, priority=None):
        binary_operators = dict(self._binary_operators)
        binary_operators[symbol] = func
        priorities = self._custom_priorities()
        if priority is not None:
            priorities[symbol] = priority
        return OperatorRegistry(self._functions, binary_operators, self._unary_operators, priorities)

    def with_unary_operator(self, symbol, func):
        unary_operators = dict(self._unary_operators)
        unary_operators[symbol] = func
        return OperatorRegistry(self._functions, self._binary_operators, unary_operators, self._custom_priorities())

    def _custom_priorities(self):
        return {symbol: value for symbol, value in self._priorities.items()
                if PRIORITY_CONFIG["binary"].get(symbol) != value}

    def __repr__(self):
        return (f"OperatorRegistry(functions={sorted(self._functions)}, "
                f"binary={sorted(self._binary_operators)}, unary={sorted(self._unary_operators)})")


DEFAULT_REGISTRY = OperatorRegistry(
    functions=DEFAULT_FUNCTIONS,
    binary_operators=DEFAULT_BINARY_OPERATORS,
    unary_operators=DEFAULT_UNARY_OPERATORS,
)
