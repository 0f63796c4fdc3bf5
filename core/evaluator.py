"""后缀表达式求值器 - 调用统一的Operators类"""
import logging
from enum import Enum

import numpy as np

from config.config import PARSER_CONFIG, EVALUATOR_CONFIG
from core.token_system import OPERATOR_DEFINITIONS, tokens_to_rpn
from core.operators import Operators

logger = logging.getLogger(__name__)


class EvalStatus(Enum):
    OK = "ok"
    DIVISION_BY_ZERO = "division_by_zero"
    NUMERIC_OVERFLOW = "numeric_overflow"


class EvalResult:
    """求值结果；value 仅在 status 为 OK 时有意义"""

    def __init__(self, value=0, status=EvalStatus.OK):
        self.value = value
        self.status = status

    @property
    def ok(self):
        return self.status == EvalStatus.OK

    def __eq__(self, other):
        if not isinstance(other, EvalResult):
            return NotImplemented
        return (self.value, self.status) == (other.value, other.status)

    def __repr__(self):
        return f"EvalResult(value={self.value}, status={self.status.name})"


class PostfixEvaluator:
    """用一个数值栈评估后缀Token序列"""

    def __init__(self, bounded_dtype=None):
        info = np.iinfo(bounded_dtype or PARSER_CONFIG["bounded_dtype"])
        self.min_value = int(info.min)
        self.max_value = int(info.max)
        self.placeholder = EVALUATOR_CONFIG["division_by_zero_placeholder"]

    def execute_operator(self, term1, term2, op):
        """
        执行单个操作符
        Returns:
            EvalResult，value 为（可能越界的）宽类型结果
        """
        method = getattr(Operators, OPERATOR_DEFINITIONS[op.value].method)
        try:
            value = method(term1, term2)
        except ZeroDivisionError:
            return EvalResult(self.placeholder, EvalStatus.DIVISION_BY_ZERO)

        if self.min_value <= value <= self.max_value:
            return EvalResult(value)
        return EvalResult(value, EvalStatus.NUMERIC_OVERFLOW)

    def evaluate(self, postfix):
        """
        评估后缀表达式
        Args:
            postfix: 后缀Token序列，必须结构完整
        Returns:
            EvalResult；第一个出现的错误状态会一直保留到最后
        """
        stack = []
        status = EvalStatus.OK

        for token in postfix:
            if token.is_operand:
                stack.append(int(token.value))
            elif token.is_operator:
                assert len(stack) >= 2, f"Insufficient operands for {token.value}"
                term2 = stack.pop()
                term1 = stack.pop()
                result = self.execute_operator(term1, term2, token)
                stack.append(result.value)
                if status == EvalStatus.OK and not result.ok:
                    status = result.status
                    logger.debug(f"{status.name} at '{term1} {token.value} {term2}'")
            else:
                raise AssertionError(f"Unexpected token in postfix: {token.value!r}")

        assert len(stack) == 1, f"Stack has {len(stack)} elements after evaluation, expected 1"
        logger.debug(f"Evaluated '{tokens_to_rpn(postfix)}' -> {stack[0]} ({status.name})")
        return EvalResult(stack[0], status)
