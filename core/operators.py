"""core/operators.py"""
import logging

import numpy as np

from config.config import EVALUATOR_CONFIG

logger = logging.getLogger(__name__)

_WORKING_INFO = np.iinfo(EVALUATOR_CONFIG["working_dtype"])
WORKING_MIN = int(_WORKING_INFO.min)  # 宽类型下限
WORKING_MAX = int(_WORKING_INFO.max)  # 宽类型上限


class Operators:
    """所有二元整数操作符的静态方法集合，div 和 mod 遇到除数为0时抛出 ZeroDivisionError"""

    @staticmethod
    def saturate(value):
        """把任意精度整数截到宽类型范围内"""
        if value > WORKING_MAX:
            return WORKING_MAX
        if value < WORKING_MIN:
            return WORKING_MIN
        return value

    @staticmethod
    def add(term1, term2):
        """加法操作符"""
        return Operators.saturate(term1 + term2)

    @staticmethod
    def sub(term1, term2):
        """减法操作符"""
        return Operators.saturate(term1 - term2)

    @staticmethod
    def mul(term1, term2):
        """乘法操作符"""
        return Operators.saturate(term1 * term2)

    @staticmethod
    def div(term1, term2):
        """整数除法，向零截断（-7 / 2 == -3）"""
        quotient = abs(term1) // abs(term2)
        if (term1 < 0) != (term2 < 0):
            quotient = -quotient
        return Operators.saturate(quotient)

    @staticmethod
    def mod(term1, term2):
        """取余，符号跟随被除数（-7 % 2 == -1）"""
        remainder = abs(term1) % abs(term2)
        return -remainder if term1 < 0 else remainder

    @staticmethod
    def pow(term1, term2):
        """
        整数幂。
        负指数按实数幂向零截断：1 和 -1 保持幅值，其余为 0；
        0 的负数次幂是无穷大，饱和到宽类型上限。
        """
        if term2 < 0:
            if term1 == 0:
                return WORKING_MAX
            if term1 == 1:
                return 1
            if term1 == -1:
                return -1 if term2 % 2 else 1
            return 0

        if abs(term1) >= 2 and term2 >= _WORKING_INFO.bits:
            # 结果必然超出宽类型，不做实际计算
            negative = term1 < 0 and term2 % 2 == 1
            return WORKING_MIN if negative else WORKING_MAX
        return Operators.saturate(term1 ** term2)
