"""核心模块 - Token系统、解析器、转换器和求值器"""
from .token_system import (
    TokenType, Token, OperatorSpec, OPERATOR_DEFINITIONS, TOKEN_DEFINITIONS,
    PostfixValidator, make_operand, tokens_to_infix, tokens_to_rpn
)
from .parser import TerminalSymbol, lexer, ParseStatus, ParseResult, Parser
from .converter import get_precedence, is_right_associative, has_higher_precedence, infix_to_postfix
from .operators import Operators
from .evaluator import EvalStatus, EvalResult, PostfixEvaluator

__all__ = [
    'TokenType', 'Token', 'OperatorSpec', 'OPERATOR_DEFINITIONS', 'TOKEN_DEFINITIONS',
    'PostfixValidator', 'make_operand', 'tokens_to_infix', 'tokens_to_rpn',
    'TerminalSymbol', 'lexer', 'ParseStatus', 'ParseResult', 'Parser',
    'get_precedence', 'is_right_associative', 'has_higher_precedence', 'infix_to_postfix',
    'Operators', 'EvalStatus', 'EvalResult', 'PostfixEvaluator'
]
