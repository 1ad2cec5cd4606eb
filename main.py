"""主程序入口 - 逐行读取表达式，输出逆波兰序列和结果"""
import argparse
import logging
import sys

from config.config import LOGGING_CONFIG, validate_config
from eparser import ExpressionParser, ExpressionError, VariableStore

logger = logging.getLogger(__name__)


def parse_assignment(text):
    """解析 --var 参数：'X=5' -> ('X', 5.0)，小数点可以是 . 或 ,"""
    name, sep, value = text.partition("=")
    if not sep or not name.strip():
        raise ValueError(f"Invalid variable assignment {text!r}, expected NAME=VALUE")
    try:
        return name.strip().upper(), float(value.strip().replace(",", "."))
    except ValueError:
        raise ValueError(f"Invalid value in variable assignment {text!r}") from None


def run_expression(expression, assignments=(), show_trace=True, out=sys.stdout):
    """解析并求值一条表达式，把逆波兰序列和结果写到out"""
    parser = ExpressionParser(expression)
    for name, value in assignments:
        parser.set_variable(name, value)

    if show_trace:
        print(parser.rpn, file=out)
    result = parser.evaluate()
    print(result, file=out)
    return result


def run_loop(stream, assignments=(), show_trace=True, out=sys.stdout):
    """
    读到EOF为止；单行出错只打印错误，继续处理下一行
    Returns:
        出错的行数
    """
    failures = 0
    for line in stream:
        expression = line.rstrip("\r\n")
        try:
            run_expression(expression, assignments, show_trace, out)
        except ExpressionError as e:
            failures += 1
            logger.info(f"Failed to evaluate '{expression}': {e}")
            print(f"Error: {e}", file=out)
        print(file=out)
    return failures


def main(args, stdin=sys.stdin, out=sys.stdout):
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format=LOGGING_CONFIG["format"]
    )
    validate_config()

    try:
        bindings = VariableStore(dict(parse_assignment(item) for item in args.var or []))
    except ValueError as e:
        print(f"Error: {e}", file=out)
        return 2

    assignments = list(bindings.as_dict().items())
    show_trace = not args.no_trace

    if args.expression is not None:
        try:
            run_expression(args.expression, assignments, show_trace, out)
        except ExpressionError as e:
            print(f"Error: {e}", file=out)
            return 1
        return 0

    logger.info("Reading expressions from standard input")
    failures = run_loop(stdin, assignments, show_trace, out)
    logger.info(f"End of input, {failures} expression(s) failed")
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Evaluate arithmetic expressions line by line")

    parser.add_argument(
        "--expression",
        type=str,
        default=None,
        help="Evaluate a single expression and exit instead of reading standard input"
    )
    parser.add_argument(
        "--var",
        action="append",
        metavar="NAME=VALUE",
        help="Bind a single-letter variable before each evaluation (repeatable)"
    )
    parser.add_argument(
        "--no_trace",
        action="store_true",
        help="Do not print the reverse Polish notation line"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG["level"],
        help="Logging level (default: WARNING)"
    )
    args = parser.parse_args()
    sys.exit(main(args))
