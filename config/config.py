"""配置文件"""
import string

# 词法分析参数
LEXER_CONFIG = {
    "decimal_point": ".",  # 规范化后的小数点
    "decimal_separators": (".", ","),  # 输入中都视为小数点
    "whitespace": (" ", "\t", "\r", "\n"),  # 预处理时全部删除
    "open_bracket": "(",
    "close_bracket": ")",
}

# 变量参数
VARIABLE_CONFIG = {
    "names": tuple(string.ascii_uppercase),  # 单字母变量 A-Z
    "default_value": float("nan"),  # 未赋值变量读取为NaN
}

# 优先级参数（数值越大结合越紧）
PRIORITY_CONFIG = {
    "function": 100,
    "unary": 90,
    "binary": {
        "^": 70,
        "*": 60,
        "/": 60,
    },
    "binary_default": 50,  # 其余二元操作符（+ -）
    "bracket": 0,  # 括号只做匹配，不参与比较
}

# 逆波兰输出参数
TRACE_CONFIG = {
    "unary_marker": "'",  # 一元操作符前缀，区分 '- 与 -
    "separator": " ",
}

# 日志配置
LOGGING_CONFIG = {
    "level": "WARNING",
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert LEXER_CONFIG["decimal_point"] in LEXER_CONFIG["decimal_separators"], "小数点必须是可接受的分隔符之一"
    assert all(len(name) == 1 and name.isupper() for name in VARIABLE_CONFIG["names"]), "变量名必须是单个大写字母"
    assert PRIORITY_CONFIG["function"] > PRIORITY_CONFIG["unary"], "函数优先级必须高于一元操作符"
    assert PRIORITY_CONFIG["unary"] > max(PRIORITY_CONFIG["binary"].values()), "一元操作符优先级必须高于二元操作符"
    assert PRIORITY_CONFIG["bracket"] < PRIORITY_CONFIG["binary_default"], "括号不能弹出任何操作符"
    assert TRACE_CONFIG["unary_marker"], "一元操作符标记不能为空"
