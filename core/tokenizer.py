"""core/tokenizer.py - 把表达式字符串切分为token序列"""
import logging
import string

from core.errors import LexicalError
from core.token_system import Token, LPAREN, RPAREN, UNARY_MINUS, SINGLE_CHAR_OPERATORS

logger = logging.getLogger(__name__)

DIGITS = frozenset(string.digits)
LETTERS = frozenset(string.ascii_letters)


def _read_number(expression, start):
    """从 start 开始贪婪读取数字和小数点，返回 (Token, 结束位置)"""
    i = start
    n = len(expression)
    while i < n and (expression[i] in DIGITS or expression[i] == '.'):
        i += 1
    literal = expression[start:i]
    # 贪婪扫描不限制小数点个数，这里拒绝 '1.2.3' 这类字面量
    try:
        value = float(literal)
    except ValueError:
        raise LexicalError(f"Malformed number '{literal}' at position {start}", position=start)
    return Token.number(value), i


def _read_identifier(expression, start):
    i = start
    n = len(expression)
    while i < n and expression[i] in LETTERS:
        i += 1
    return Token.identifier(expression[start:i]), i


def tokenize(expression):
    """
    单遍从左到右扫描。
    expect_unary 标记下一个 '-' 是否为一元负号：
    开头、'(' 之后、任何操作符之后为 True；数字、标识符、')' 之后为 False。
    Returns:
        token列表；空输入返回空列表
    """
    tokens = []
    expect_unary = True
    i = 0
    n = len(expression)

    while i < n:
        ch = expression[i]

        if ch.isspace():
            i += 1
            continue

        if ch in DIGITS or (ch == '.' and i + 1 < n and expression[i + 1] in DIGITS):
            token, i = _read_number(expression, i)
            tokens.append(token)
            expect_unary = False
            continue

        if ch in LETTERS:
            token, i = _read_identifier(expression, i)
            tokens.append(token)
            expect_unary = False
            continue

        if ch == '(':
            tokens.append(LPAREN)
            expect_unary = True
        elif ch == ')':
            tokens.append(RPAREN)
            expect_unary = False
        elif ch == '*':
            if i + 1 < n and expression[i + 1] == '*':
                tokens.append(Token.operator('**'))
                i += 1
            else:
                tokens.append(Token.operator('*'))
            expect_unary = True
        elif ch == '-':
            tokens.append(Token.operator(UNARY_MINUS if expect_unary else '-'))
            expect_unary = True
        elif ch in SINGLE_CHAR_OPERATORS:
            tokens.append(Token.operator(ch))
            expect_unary = True
        else:
            raise LexicalError(f"Unrecognized character '{ch}' at position {i}", position=i)
        i += 1

    logger.debug(f"Tokenized {expression!r} into {len(tokens)} tokens")
    return tokens
