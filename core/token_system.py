"""core/token_system.py"""
from enum import Enum
from typing import NamedTuple


class TokenType(Enum):
    OPERAND = "operand"  # 整数字面量
    OPERATOR = "operator"  # 二元操作符
    OPENING_SCOPE = "opening_scope"  # (
    CLOSING_SCOPE = "closing_scope"  # )


class Token(NamedTuple):
    """不可变的词法单元：文本 + 类别"""
    value: str
    type: TokenType

    @property
    def is_operand(self):
        return self.type == TokenType.OPERAND

    @property
    def is_operator(self):
        return self.type == TokenType.OPERATOR

    @property
    def is_opening_scope(self):
        return self.type == TokenType.OPENING_SCOPE

    @property
    def is_closing_scope(self):
        return self.type == TokenType.CLOSING_SCOPE

    def __str__(self):
        return self.value


class OperatorSpec(NamedTuple):
    precedence: int
    right_assoc: bool
    method: str  # Operators 中对应的静态方法名


# 操作符定义：优先级、结合性、实现方法
OPERATOR_DEFINITIONS = {
    '^': OperatorSpec(3, True, 'pow'),
    '*': OperatorSpec(2, False, 'mul'),
    '/': OperatorSpec(2, False, 'div'),
    '%': OperatorSpec(2, False, 'mod'),
    '+': OperatorSpec(1, False, 'add'),
    '-': OperatorSpec(1, False, 'sub'),
}

# 固定Token（操作符和括号），操作数在解析时动态创建
TOKEN_DEFINITIONS = {
    '+': Token('+', TokenType.OPERATOR),
    '-': Token('-', TokenType.OPERATOR),
    '*': Token('*', TokenType.OPERATOR),
    '/': Token('/', TokenType.OPERATOR),
    '%': Token('%', TokenType.OPERATOR),
    '^': Token('^', TokenType.OPERATOR),
    '(': Token('(', TokenType.OPENING_SCOPE),
    ')': Token(')', TokenType.CLOSING_SCOPE),
}


def make_operand(text):
    return Token(text, TokenType.OPERAND)


def tokens_to_infix(tokens):
    """
    把中缀Token序列还原为文本。
    操作符两侧加空格，括号紧贴内容；重新解析得到同样的Token序列。
    """
    parts = []
    for tk in tokens:
        if tk.is_operator:
            parts.append(f" {tk.value} ")
        else:
            parts.append(tk.value)
    return "".join(parts)


def tokens_to_rpn(tokens):
    """后缀序列的文本形式，如 '1 2 3 * +'"""
    return " ".join(tk.value for tk in tokens)


class PostfixValidator:
    @staticmethod
    def calculate_stack_size(token_sequence):
        """
        模拟求值栈，只计算深度。
        出现括号或操作数不足时返回 -1。
        """
        stack_size = 0
        for tk in token_sequence:
            if tk.is_operand:
                stack_size += 1
            elif tk.is_operator:
                if stack_size < 2:
                    return -1
                stack_size -= 1
            else:
                return -1
        return stack_size

    @staticmethod
    def is_well_formed(token_sequence):
        """完整后缀表达式：栈最终恰好剩一个值"""
        return PostfixValidator.calculate_stack_size(token_sequence) == 1
