"""工具模块"""
from .formatting import format_result, parse_precision

__all__ = ['format_result', 'parse_precision']
