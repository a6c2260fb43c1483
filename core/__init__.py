"""核心模块 - Token系统、分词器、调度场转换、RPN求值器和操作符"""
from .errors import (
    ErrorKind, CalculatorError, LexicalError, ExpressionSyntaxError, EvaluationError
)
from .token_system import (
    TokenType, Associativity, Token, OperatorDefinition, OPERATOR_DEFINITIONS,
    PRECEDENCE, ASSOCIATIVITY, FUNCTION_DEFINITIONS, FUNCTION_NAMES, CONSTANTS,
    format_postfix
)
from .operators import Operators
from .tokenizer import tokenize
from .shunting_yard import to_postfix
from .rpn_evaluator import RPNEvaluator
from .calculator import EvaluationResult, calculate, evaluate

__all__ = [
    'ErrorKind', 'CalculatorError', 'LexicalError', 'ExpressionSyntaxError', 'EvaluationError',
    'TokenType', 'Associativity', 'Token', 'OperatorDefinition', 'OPERATOR_DEFINITIONS',
    'PRECEDENCE', 'ASSOCIATIVITY', 'FUNCTION_DEFINITIONS', 'FUNCTION_NAMES', 'CONSTANTS',
    'format_postfix', 'Operators', 'tokenize', 'to_postfix', 'RPNEvaluator',
    'EvaluationResult', 'calculate', 'evaluate'
]
