"""管线模块 - 解析、转换、求值一条龙"""
from .evaluator import ExpressionEvaluator, ExpressionOutcome

__all__ = ['ExpressionEvaluator', 'ExpressionOutcome']
