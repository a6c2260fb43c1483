"""core/operators.py"""
import numpy as np

from core.errors import EvaluationError, ErrorKind


def _apply(func, *operands):
    """
    在 numpy 下执行运算并转回 Python float。
    定义域错误、溢出等不抛异常，按 IEEE-754 返回 nan / inf。
    """
    with np.errstate(all='ignore'):
        result = func(*(np.float64(x) for x in operands))
    return float(result)


class Operators:
    """所有操作符和函数的静态方法集合"""

    # 一元操作符====================

    @staticmethod
    def neg(operand):
        """取负（一元负号 '#'）"""
        return _apply(np.negative, operand)

    # 二元操作符========================================

    @staticmethod
    def add(operand1, operand2):
        return _apply(np.add, operand1, operand2)

    @staticmethod
    def sub(operand1, operand2):
        return _apply(np.subtract, operand1, operand2)

    @staticmethod
    def mul(operand1, operand2):
        return _apply(np.multiply, operand1, operand2)

    @staticmethod
    def div(operand1, operand2):
        """除法：除数恰为0（含 -0.0）时报错，而不是返回 inf/nan"""
        if operand2 == 0:
            raise EvaluationError("Division by zero", ErrorKind.DIVISION_BY_ZERO)
        return _apply(np.divide, operand1, operand2)

    @staticmethod
    def power(operand1, operand2):
        """乘方：负数的非整数次幂返回 nan，不产生复数"""
        return _apply(np.power, operand1, operand2)

    # 函数=====================================

    @staticmethod
    def ln(operand):
        """自然对数：ln(0) = -inf，ln(负数) = nan"""
        return _apply(np.log, operand)

    @staticmethod
    def exp(operand):
        return _apply(np.exp, operand)

    @staticmethod
    def sin(operand):
        return _apply(np.sin, operand)

    @staticmethod
    def cos(operand):
        return _apply(np.cos, operand)

    @staticmethod
    def tan(operand):
        return _apply(np.tan, operand)

    @staticmethod
    def sqrt(operand):
        return _apply(np.sqrt, operand)

    @staticmethod
    def arcsin(operand):
        return _apply(np.arcsin, operand)

    @staticmethod
    def arccos(operand):
        return _apply(np.arccos, operand)

    @staticmethod
    def arctan(operand):
        return _apply(np.arctan, operand)

    @staticmethod
    def sinh(operand):
        return _apply(np.sinh, operand)

    @staticmethod
    def cosh(operand):
        return _apply(np.cosh, operand)

    @staticmethod
    def tanh(operand):
        return _apply(np.tanh, operand)
