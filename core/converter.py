"""中缀 -> 后缀转换（调度场算法）"""
import logging

from core.token_system import OPERATOR_DEFINITIONS

logger = logging.getLogger(__name__)


def get_precedence(token):
    """^ 为3，* / % 为2，+ - 为1，其余为0"""
    spec = OPERATOR_DEFINITIONS.get(token.value)
    return spec.precedence if spec else 0


def is_right_associative(token):
    return token.value == '^'


def has_higher_precedence(top, incoming):
    """
    栈顶操作符是否应在 incoming 入栈前弹出。
    优先级相同且 incoming 右结合时视为更低。
    """
    w1 = get_precedence(top)
    w2 = get_precedence(incoming)
    if w1 == w2 and is_right_associative(incoming):
        return False
    return w1 >= w2


def infix_to_postfix(infix):
    """
    Args:
        infix: 已通过语法校验的中缀Token序列
    Returns:
        后缀Token序列（不含括号）
    """
    postfix = []
    stack = []

    for s in infix:
        if s.is_operand:
            postfix.append(s)
        elif s.is_opening_scope:
            stack.append(s)
        elif s.is_closing_scope:
            while stack and not stack[-1].is_opening_scope:
                postfix.append(stack.pop())
            stack.pop()  # 丢弃 (
        elif s.is_operator:
            while stack and stack[-1].is_operator and has_higher_precedence(stack[-1], s):
                postfix.append(stack.pop())
            stack.append(s)
        else:
            raise AssertionError(f"Unexpected token type: {s.type}")

    while stack:
        postfix.append(stack.pop())

    logger.debug(f"Converted {len(infix)} infix tokens into {len(postfix)} postfix tokens")
    return postfix
