"""core/calculator.py - 分词、转换、求值三步组合成完整流程"""
import logging

from core.errors import CalculatorError
from core.rpn_evaluator import RPNEvaluator
from core.shunting_yard import to_postfix
from core.tokenizer import tokenize

logger = logging.getLogger(__name__)


class EvaluationResult:
    """单次求值的结果：value 与 error 恰有一个有效"""

    __slots__ = ('value', 'error', 'expression')

    def __init__(self, value=None, error=None, expression=None):
        self.value = value
        self.error = error
        self.expression = expression

    @property
    def ok(self):
        return self.error is None

    @property
    def kind(self):
        """错误种类（ErrorKind），成功时为 None"""
        return None if self.error is None else self.error.kind

    def unwrap(self):
        """成功时返回数值，失败时重新抛出保存的异常"""
        if self.error is not None:
            raise self.error
        return self.value

    def __repr__(self):
        if self.ok:
            return f"EvaluationResult(value={self.value!r})"
        return f"EvaluationResult(error={self.kind.name}: {self.error.message!r})"


def calculate(expression):
    """
    计算中缀表达式的值
    Raises:
        CalculatorError 的子类
    """
    # 1. 分词
    tokens = tokenize(expression)
    # 2. 转换为后缀表达式
    postfix = to_postfix(tokens)
    # 3. 计算后缀表达式
    return RPNEvaluator.evaluate(postfix)


def evaluate(expression):
    """与 calculate 相同，但不抛异常，错误放在返回的 EvaluationResult 中"""
    try:
        value = calculate(expression)
    except CalculatorError as e:
        logger.debug(f"Evaluation of {expression!r} failed: {e.kind.name}")
        return EvaluationResult(error=e, expression=expression)
    return EvaluationResult(value=value, expression=expression)
