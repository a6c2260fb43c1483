"""core/shunting_yard.py - 调度场算法：中缀token序列 -> 后缀(RPN)token序列"""
import logging

from core.errors import ExpressionSyntaxError
from core.token_system import (
    TokenType, OPERATOR_DEFINITIONS, is_operator, is_function, format_postfix
)

logger = logging.getLogger(__name__)


def _should_pop(stack_top, definition):
    """栈顶操作符优先级更高，或优先级相同且当前操作符左结合时，弹出栈顶"""
    if not is_operator(stack_top):
        # '(' 和函数名挡住弹出
        return False
    top_precedence = OPERATOR_DEFINITIONS[stack_top.name].precedence
    if top_precedence > definition.precedence:
        return True
    return top_precedence == definition.precedence and definition.is_left_associative


def to_postfix(tokens):
    """
    未知标识符（如 x）原样进入输出，由求值器报 UNKNOWN_TOKEN；
    只要输入中的名字都是已知函数或常数，输出就不会触发 UNKNOWN_TOKEN。
    Args:
        tokens: tokenize() 输出的token列表
    Returns:
        后缀顺序的token列表
    Raises:
        ExpressionSyntaxError: 括号不匹配
    """
    output = []
    operator_stack = []

    for token in tokens:
        if token.type == TokenType.NUMBER:
            output.append(token)

        elif token.type == TokenType.IDENTIFIER:
            if is_function(token):
                # 函数在其参数的右括号处出栈
                operator_stack.append(token)
            else:
                # 常数（以及未知标识符，由求值器拒绝）直接输出
                output.append(token)

        elif token.type == TokenType.OPERATOR:
            definition = OPERATOR_DEFINITIONS.get(token.name)
            # 前缀一元操作符左边没有操作数，入栈时不弹出任何东西
            if definition is not None and definition.arity != 1:
                while operator_stack and _should_pop(operator_stack[-1], definition):
                    output.append(operator_stack.pop())
            operator_stack.append(token)

        elif token.type == TokenType.LPAREN:
            operator_stack.append(token)

        elif token.type == TokenType.RPAREN:
            while operator_stack and operator_stack[-1].type != TokenType.LPAREN:
                output.append(operator_stack.pop())
            if not operator_stack:
                raise ExpressionSyntaxError("Mismatched parentheses: unexpected ')'")
            operator_stack.pop()  # 丢弃 '('
            if operator_stack and is_function(operator_stack[-1]):
                output.append(operator_stack.pop())

    while operator_stack:
        token = operator_stack.pop()
        if token.type == TokenType.LPAREN:
            raise ExpressionSyntaxError("Mismatched parentheses: unclosed '('")
        output.append(token)

    logger.debug(f"Postfix: {format_postfix(output)}")
    return output
