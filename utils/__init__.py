"""工具模块"""
from .messages import format_parse_error, format_eval_error, format_outcome

__all__ = ['format_parse_error', 'format_eval_error', 'format_outcome']
