"""RPN表达式求值器 - 调用统一的Operators类"""
import logging

from core.errors import EvaluationError, ErrorKind
from core.operators import Operators
from core.token_system import (
    TokenType, OPERATOR_DEFINITIONS, FUNCTION_DEFINITIONS, CONSTANTS, is_constant, is_function
)

logger = logging.getLogger(__name__)


def _underflow(name):
    return EvaluationError(f"Insufficient operands for '{name}'", ErrorKind.STACK_UNDERFLOW)


def _unknown(token):
    return EvaluationError(f"Unknown token: {token.name}", ErrorKind.UNKNOWN_TOKEN)


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def evaluate(token_sequence):
        """
        Args:
            token_sequence: to_postfix() 输出的后缀token序列
        Returns:
            float结果
        Raises:
            EvaluationError: 栈下溢、除零、未知token、栈中结果个数不为1
        """
        stack = []

        for token in token_sequence:
            if token.type == TokenType.NUMBER:
                stack.append(token.value)

            elif token.type == TokenType.IDENTIFIER:
                if is_constant(token):
                    stack.append(CONSTANTS[token.name])
                elif is_function(token):
                    if not stack:
                        raise _underflow(token.name)
                    op_method = getattr(Operators, FUNCTION_DEFINITIONS[token.name])
                    stack.append(op_method(stack.pop()))
                else:
                    raise _unknown(token)

            elif token.type == TokenType.OPERATOR:
                definition = OPERATOR_DEFINITIONS.get(token.name)
                if definition is None:
                    raise _unknown(token)
                op_method = getattr(Operators, definition.method)

                # ================== 一元操作符处理 ==================
                if definition.arity == 1:
                    if not stack:
                        raise _underflow(token.name)
                    stack.append(op_method(stack.pop()))

                # ================== 二元操作符处理 ==================
                else:
                    if len(stack) < 2:
                        raise _underflow(token.name)
                    operand2 = stack.pop()
                    operand1 = stack.pop()
                    stack.append(op_method(operand1, operand2))

            else:
                # 括号不应出现在后缀序列中
                raise _unknown(token)

        if len(stack) != 1:
            raise EvaluationError(
                f"Malformed expression: {len(stack)} values left on the stack, expected 1",
                ErrorKind.MALFORMED_EXPRESSION,
            )
        logger.debug(f"Evaluated {len(token_sequence)} tokens to {stack[0]!r}")
        return stack[0]
