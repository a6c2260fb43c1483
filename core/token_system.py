"""core/token_system.py"""
from enum import Enum
from types import MappingProxyType


class TokenType(Enum):
    NUMBER = "number"          # 数字字面量
    IDENTIFIER = "identifier"  # 函数名或常数名
    OPERATOR = "operator"      # 操作符
    LPAREN = "lparen"
    RPAREN = "rparen"


class Associativity(Enum):
    LEFT = "left"
    RIGHT = "right"


class Token:
    """不可变的token：类型 + 名称（+ 数值）"""

    __slots__ = ('type', 'name', 'value')

    def __init__(self, token_type, name, value=None):
        object.__setattr__(self, 'type', token_type)
        object.__setattr__(self, 'name', name)
        object.__setattr__(self, 'value', value)

    def __setattr__(self, key, value):
        raise AttributeError(f"Token is immutable, cannot set '{key}'")

    def __delattr__(self, key):
        raise AttributeError(f"Token is immutable, cannot delete '{key}'")

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return (self.type, self.name, self.value) == (other.type, other.name, other.value)

    def __hash__(self):
        return hash((self.type, self.name, self.value))

    def __repr__(self):
        if self.type == TokenType.NUMBER:
            return f"Token({self.type.name}, {self.value!r})"
        return f"Token({self.type.name}, {self.name!r})"

    @classmethod
    def number(cls, value):
        value = float(value)
        return cls(TokenType.NUMBER, repr(value), value)

    @classmethod
    def identifier(cls, name):
        return cls(TokenType.IDENTIFIER, name)

    @classmethod
    def operator(cls, symbol):
        return cls(TokenType.OPERATOR, symbol)


LPAREN = Token(TokenType.LPAREN, '(')
RPAREN = Token(TokenType.RPAREN, ')')

UNARY_MINUS = '#'


class OperatorDefinition:
    """不可变的操作符定义：method 为 Operators 中对应的方法名"""

    __slots__ = ('symbol', 'method', 'precedence', 'associativity', 'arity')

    def __init__(self, symbol, method, precedence, associativity, arity):
        object.__setattr__(self, 'symbol', symbol)
        object.__setattr__(self, 'method', method)
        object.__setattr__(self, 'precedence', precedence)
        object.__setattr__(self, 'associativity', associativity)
        object.__setattr__(self, 'arity', arity)

    def __setattr__(self, key, value):
        raise AttributeError(f"OperatorDefinition is immutable, cannot set '{key}'")

    def __delattr__(self, key):
        raise AttributeError(f"OperatorDefinition is immutable, cannot delete '{key}'")

    def __repr__(self):
        return (f"OperatorDefinition({self.symbol!r}, precedence={self.precedence}, "
                f"{self.associativity.name}, arity={self.arity})")

    @property
    def is_left_associative(self):
        return self.associativity == Associativity.LEFT


# 优先级越高结合越紧
OPERATOR_DEFINITIONS = MappingProxyType({
    '+': OperatorDefinition('+', 'add', 1, Associativity.LEFT, 2),
    '-': OperatorDefinition('-', 'sub', 1, Associativity.LEFT, 2),
    '*': OperatorDefinition('*', 'mul', 2, Associativity.LEFT, 2),
    '/': OperatorDefinition('/', 'div', 2, Associativity.LEFT, 2),
    UNARY_MINUS: OperatorDefinition(UNARY_MINUS, 'neg', 3, Associativity.LEFT, 1),
    '**': OperatorDefinition('**', 'power', 4, Associativity.RIGHT, 2),
})

PRECEDENCE = MappingProxyType({s: d.precedence for s, d in OPERATOR_DEFINITIONS.items()})
ASSOCIATIVITY = MappingProxyType({s: d.associativity for s, d in OPERATOR_DEFINITIONS.items()})

# 函数名 -> Operators 中的方法名（均为一元函数）
FUNCTION_DEFINITIONS = MappingProxyType({
    'ln': 'ln',
    'exp': 'exp',
    'sin': 'sin',
    'cos': 'cos',
    'tan': 'tan',
    'sqrt': 'sqrt',
    'arcsin': 'arcsin',
    'arccos': 'arccos',
    'arctan': 'arctan',
    'sinh': 'sinh',
    'cosh': 'cosh',
    'tanh': 'tanh',
})
FUNCTION_NAMES = frozenset(FUNCTION_DEFINITIONS)

CONSTANTS = MappingProxyType({
    'pi': 3.14159265358979323846,
    'e': 2.71828182845904523536,
})

# 分词器可直接识别的单字符操作符（'-' 与 '*' 单独处理）
SINGLE_CHAR_OPERATORS = frozenset('+/')


def is_operator(token):
    return token.type == TokenType.OPERATOR and token.name in OPERATOR_DEFINITIONS


def is_function(token):
    return token.type == TokenType.IDENTIFIER and token.name in FUNCTION_NAMES


def is_constant(token):
    return token.type == TokenType.IDENTIFIER and token.name in CONSTANTS


def format_postfix(tokens):
    """把token序列拼成空格分隔的文本，例如 '2 3 4 * +'"""
    parts = []
    for token in tokens:
        if token.type == TokenType.NUMBER:
            value = token.value
            parts.append(str(int(value)) if value.is_integer() and abs(value) < 1e16 else repr(value))
        else:
            parts.append(token.name)
    return ' '.join(parts)
