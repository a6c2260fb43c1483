"""主程序入口 - 命令行计算器（单次求值或交互式循环）"""
import argparse
import logging
import sys

from config.config import CLI_CONFIG, LOGGING_CONFIG, validate_config
from core import tokenize, to_postfix, format_postfix, evaluate
from utils.formatting import format_result, parse_precision

logger = logging.getLogger(__name__)


def run_expression(expression, precision=None, show_postfix=False, out=None, err=None):
    """
    求值并打印一个表达式
    Returns:
        成功返回 True，失败打印错误并返回 False
    """
    out = sys.stdout if out is None else out
    err = sys.stderr if err is None else err

    result = evaluate(expression)
    if not result.ok:
        print(f"Error: {result.error.message}", file=err)
        return False
    if show_postfix:
        print(f"RPN: {format_postfix(to_postfix(tokenize(expression)))}", file=out)
    print(format_result(result.value, precision), file=out)
    return True


def _ask_precision(input_func, err):
    """交互式询问小数位数，输入非法时返回 None（按最短形式打印）"""
    try:
        return parse_precision(input_func(CLI_CONFIG["precision_prompt"]))
    except ValueError as e:
        print(f"Error: {e}", file=err)
        return None


def interactive_loop(args, input_func=input, out=None, err=None):
    """读取-求值-打印循环，遇到 EOF 或退出词结束"""
    out = sys.stdout if out is None else out
    err = sys.stderr if err is None else err
    logger.info("Interactive session started")

    while True:
        try:
            line = input_func(CLI_CONFIG["expression_prompt"])
        except EOFError:
            break

        expression = line.strip()
        if not expression:
            continue
        if expression.lower() in CLI_CONFIG["quit_words"]:
            break

        result = evaluate(expression)
        if not result.ok:
            print(f"Error: {result.error.message}", file=err)
            continue

        if args.show_postfix:
            print(f"RPN: {format_postfix(to_postfix(tokenize(expression)))}", file=out)

        precision = args.precision
        if precision is None and args.ask_precision:
            try:
                precision = _ask_precision(input_func, err)
            except EOFError:
                break
        print(format_result(result.value, precision), file=out)

    print(CLI_CONFIG["farewell"], file=out)
    logger.info("Interactive session finished")
    return 0


def main(args):
    validate_config()

    if args.precision is not None:
        args.precision = parse_precision(args.precision)

    if not args.expressions:
        return interactive_loop(args)

    failures = 0
    for expression in args.expressions:
        if not run_expression(expression, args.precision, args.show_postfix):
            failures += 1
    if failures:
        logger.info(f"{failures} of {len(args.expressions)} expressions failed")
    return 1 if failures else 0


def build_parser():
    parser = argparse.ArgumentParser(description="Evaluate infix arithmetic expressions")
    parser.add_argument(
        "expressions",
        nargs="*",
        help="Expressions to evaluate; starts an interactive session when omitted"
    )
    parser.add_argument(
        "--precision",
        type=str,
        default=CLI_CONFIG["default_precision"],
        help="Number of digits printed after the decimal point"
    )
    parser.add_argument(
        "--ask_precision",
        action="store_true",
        help="In interactive mode, ask for the precision after each result"
    )
    parser.add_argument(
        "--show_postfix",
        action="store_true",
        help="Also print the expression in reverse Polish notation"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG["level"],
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level"
    )
    return parser


def parse_cli_args(parser, argv=None):
    """
    argparse 会把 '-3+5'、'-(1+2)' 这类以负号开头的表达式当成未知选项。
    未知参数中不以 '--' 开头的都按表达式处理，并保持它们在命令行中的原始顺序；
    '--' 开头的未知参数仍然报错。
    """
    argv = sys.argv[1:] if argv is None else list(argv)
    args, extras = parser.parse_known_args(argv)

    unknown_options = [a for a in extras if a.startswith('--')]
    if unknown_options:
        parser.error(f"unrecognized arguments: {' '.join(unknown_options)}")
    if not extras:
        return args

    value_options = {'--precision', '--log_level'}
    pending = list(args.expressions) + list(extras)
    expressions = []
    for i, arg in enumerate(argv):
        if i > 0 and argv[i - 1] in value_options:
            continue
        if arg in pending:
            pending.remove(arg)
            expressions.append(arg)
    args.expressions = expressions
    return args


def cli(argv=None):
    args = parse_cli_args(build_parser(), argv)
    # 设置日志
    logging.basicConfig(level=getattr(logging, args.log_level), format=LOGGING_CONFIG["format"])
    try:
        return main(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(cli())
