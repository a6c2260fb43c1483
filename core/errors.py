"""core/errors.py - 计算器各阶段的异常类型"""
from enum import Enum


class ErrorKind(Enum):
    LEXICAL = "lexical"
    MISMATCHED_PARENTHESES = "mismatched_parentheses"
    STACK_UNDERFLOW = "stack_underflow"
    DIVISION_BY_ZERO = "division_by_zero"
    UNKNOWN_TOKEN = "unknown_token"
    MALFORMED_EXPRESSION = "malformed_expression"


class CalculatorError(Exception):
    """所有计算错误的基类，kind 标明具体错误种类"""

    kind = None

    def __init__(self, message, kind=None):
        super().__init__(message)
        self.message = message
        if kind is not None:
            self.kind = kind


class LexicalError(CalculatorError):
    """非法字符或非法数字字面量"""

    kind = ErrorKind.LEXICAL

    def __init__(self, message, position=None):
        super().__init__(message)
        self.position = position


class ExpressionSyntaxError(CalculatorError):
    """括号不匹配"""

    kind = ErrorKind.MISMATCHED_PARENTHESES


class EvaluationError(CalculatorError):
    """RPN求值阶段的错误：栈下溢、除零、未知token、表达式不完整"""

    def __init__(self, message, kind):
        super().__init__(message, kind)
