"""
core/parser.py
递归下降解析器：把算术表达式文本转换成中缀Token序列，同时校验语法。

文法（EBNF）:
    expr    := term , { ("+"|"-"|"*"|"/"|"%"|"^") , term } ;
    term    := integer | "(" , expr , ")" ;
    integer := "0" | { "-" } , natural ;
    natural := digit_excl_zero , { digit } ;

优先级在这里不处理，交给 core.converter。
"""
import logging
from enum import Enum

import numpy as np

from config.config import PARSER_CONFIG
from core.token_system import TOKEN_DEFINITIONS, make_operand

logger = logging.getLogger(__name__)


class TerminalSymbol(Enum):
    PLUS = "plus"
    MINUS = "minus"
    MOD = "mod"
    SLASH = "slash"
    ASTERISK = "asterisk"
    CARET = "caret"
    CLOSING_SCOPE = "closing_scope"
    OPENING_SCOPE = "opening_scope"
    ZERO = "zero"
    NON_ZERO_DIGIT = "non_zero_digit"
    WS = "ws"
    TAB = "tab"
    EOS = "eos"
    INVALID = "invalid"


_SYMBOL_TABLE = {
    '+': TerminalSymbol.PLUS,
    '-': TerminalSymbol.MINUS,
    '%': TerminalSymbol.MOD,
    '/': TerminalSymbol.SLASH,
    '*': TerminalSymbol.ASTERISK,
    '^': TerminalSymbol.CARET,
    ')': TerminalSymbol.CLOSING_SCOPE,
    '(': TerminalSymbol.OPENING_SCOPE,
    ' ': TerminalSymbol.WS,
    '\t': TerminalSymbol.TAB,
    '0': TerminalSymbol.ZERO,
    '\0': TerminalSymbol.EOS,
}
_SYMBOL_TABLE.update({d: TerminalSymbol.NON_ZERO_DIGIT for d in '123456789'})

# expression 中可以出现的操作符，按尝试顺序
_EXPRESSION_OPERATORS = (
    (TerminalSymbol.PLUS, '+'),
    (TerminalSymbol.MINUS, '-'),
    (TerminalSymbol.ASTERISK, '*'),
    (TerminalSymbol.SLASH, '/'),
    (TerminalSymbol.MOD, '%'),
    (TerminalSymbol.CARET, '^'),
)


def lexer(char):
    """单个字符 -> 终结符类别"""
    return _SYMBOL_TABLE.get(char, TerminalSymbol.INVALID)


class ParseStatus(Enum):
    OK = "ok"
    UNEXPECTED_END_OF_INPUT = "unexpected_end_of_input"
    ILL_FORMED_INTEGER = "ill_formed_integer"
    MISSING_TERM = "missing_term"
    EXTRANEOUS_SYMBOL = "extraneous_symbol"
    MISSING_CLOSING_PARENTHESIS = "missing_closing_parenthesis"
    INTEGER_OUT_OF_RANGE = "integer_out_of_range"


class ParseResult:
    """解析结果；column 是原始文本中的0起始偏移，仅在出错时有意义"""

    def __init__(self, status=ParseStatus.OK, column=0, tokens=None):
        self.status = status
        self.column = column
        self.tokens = tokens if tokens is not None else []

    @property
    def ok(self):
        return self.status == ParseStatus.OK

    def __eq__(self, other):
        if not isinstance(other, ParseResult):
            return NotImplemented
        return (self.status, self.column, self.tokens) == (other.status, other.column, other.tokens)

    def __repr__(self):
        return f"ParseResult(status={self.status.name}, column={self.column}, tokens={len(self.tokens)})"


class _ParseState:
    """单次解析调用私有的游标状态"""
    __slots__ = ('text', 'pos', 'tokens')

    def __init__(self, text):
        self.text = text
        self.pos = 0
        self.tokens = []

    def end_input(self):
        return self.pos >= len(self.text)

    def current(self):
        return lexer(self.text[self.pos])


class Parser:
    """
    解析器实例只保存配置，游标与Token列表在每次 parse 调用中新建，
    因此同一实例可以重入，也可以在多个线程间共享。
    """

    def __init__(self, bounded_dtype=None):
        info = np.iinfo(bounded_dtype or PARSER_CONFIG["bounded_dtype"])
        self.min_value = int(info.min)
        self.max_value = int(info.max)

    def parse(self, text):
        """
        解析一行表达式
        Args:
            text: 表达式文本
        Returns:
            ParseResult（tokens 为累积的中缀Token序列）
        """
        state = _ParseState(text)
        self._skip_ws(state)
        if state.end_input():
            result = ParseResult(ParseStatus.UNEXPECTED_END_OF_INPUT, state.pos)
        else:
            result = self._expression(state)
            if result.ok:
                self._skip_ws(state)
                if not state.end_input():
                    result = ParseResult(ParseStatus.EXTRANEOUS_SYMBOL, state.pos)

        result.tokens = state.tokens
        if result.ok:
            logger.debug(f"Parsed {text!r} into {len(state.tokens)} tokens")
        else:
            logger.debug(f"Parse of {text!r} failed: {result.status.name} at column {result.column}")
        return result

    # 终结符辅助 ====================

    def _peek(self, state, symbol):
        return not state.end_input() and state.current() == symbol

    def _accept(self, state, symbol):
        if self._peek(state, symbol):
            state.pos += 1
            return True
        return False

    def _expect(self, state, symbol):
        self._skip_ws(state)
        return self._accept(state, symbol)

    def _skip_ws(self, state):
        while not state.end_input() and state.current() in (TerminalSymbol.WS, TerminalSymbol.TAB):
            state.pos += 1

    # 非终结符 ====================

    def _expression(self, state):
        """
        expression 与括号 term 互相嵌套，这里用显式栈代替递归，嵌套深度不受调用栈限制。
        栈中每一项对应一层尚未结束的 expression，记录当前 term 是否跟在操作符之后。
        """
        after_operator = [False]
        self._skip_ws(state)
        while True:
            result = self._term_start(state)
            if result is None:
                # 进入括号内的新一层 expression
                after_operator.append(False)
                self._skip_ws(state)
                continue

            # 把 term 的结果逐层交给外层 expression
            while True:
                if result.ok:
                    if self._operator(state):
                        after_operator[-1] = True
                        break
                elif (after_operator[-1]
                        and result.status != ParseStatus.INTEGER_OUT_OF_RANGE
                        and state.end_input()):
                    result.status = ParseStatus.MISSING_TERM

                after_operator.pop()
                if not after_operator:
                    return result
                result = self._term_finish(state, result)

    def _operator(self, state):
        for symbol, op in _EXPRESSION_OPERATORS:
            if self._expect(state, symbol):
                state.tokens.append(TOKEN_DEFINITIONS[op])
                return True
        return False

    def _term_start(self, state):
        """term 的前半部分：遇到 ( 时返回 None，否则解析 integer"""
        self._skip_ws(state)
        if self._expect(state, TerminalSymbol.OPENING_SCOPE):
            state.tokens.append(TOKEN_DEFINITIONS['('])
            return None
        return self._integer(state)

    def _term_finish(self, state, result):
        """括号内 expression 结束后，term 需要一个 )"""
        if result.ok:
            if not self._expect(state, TerminalSymbol.CLOSING_SCOPE):
                return ParseResult(ParseStatus.MISSING_CLOSING_PARENTHESIS, state.pos)
            state.tokens.append(TOKEN_DEFINITIONS[')'])
        return result

    def _integer(self, state):
        if self._accept(state, TerminalSymbol.ZERO):
            state.tokens.append(make_operand('0'))
            return ParseResult()

        # 连续负号折叠：奇数个为负，偶数个抵消
        minus_count = 0
        while self._expect(state, TerminalSymbol.MINUS):
            minus_count += 1

        begin = state.pos
        result = self._natural_number(state)
        if not result.ok:
            return result

        token_str = state.text[begin:state.pos]
        if minus_count % 2 == 1:
            token_str = "-" + token_str

        try:
            token_int = int(token_str)
        except ValueError:
            return ParseResult(ParseStatus.INTEGER_OUT_OF_RANGE, begin)
        if not self.min_value < token_int < self.max_value:
            return ParseResult(ParseStatus.INTEGER_OUT_OF_RANGE, begin)

        state.tokens.append(make_operand(token_str))
        return result

    def _natural_number(self, state):
        if not self._digit_excl_zero(state):
            return ParseResult(ParseStatus.ILL_FORMED_INTEGER, state.pos)
        while self._digit(state):
            pass
        return ParseResult()

    def _digit_excl_zero(self, state):
        return self._accept(state, TerminalSymbol.NON_ZERO_DIGIT)

    def _digit(self, state):
        return self._accept(state, TerminalSymbol.ZERO) or self._digit_excl_zero(state)
