"""utils/formatting.py"""
import numpy as np

from config.config import CLI_CONFIG


def format_result(value, precision=None):
    """
    格式化计算结果
    Args:
        value: float结果
        precision: 小数点后位数（定点格式）；None 时使用最短的可还原形式
    """
    value = float(value)
    if not np.isfinite(value):
        # nan / inf / -inf 原样输出
        return repr(value)
    if precision is None:
        if value.is_integer() and abs(value) < 1e16:
            return str(int(value))
        return repr(value)
    return format(value, f'.{int(precision)}f')


def parse_precision(text, max_precision=None):
    """解析用户输入的小数位数，非法时抛 ValueError"""
    if max_precision is None:
        max_precision = CLI_CONFIG["max_precision"]
    try:
        precision = int(str(text).strip())
    except ValueError:
        raise ValueError(f"Precision must be an integer, got {text!r}")
    if not 0 <= precision <= max_precision:
        raise ValueError(f"Precision must be between 0 and {max_precision}, got {precision}")
    return precision
