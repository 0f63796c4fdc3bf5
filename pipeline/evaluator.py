import logging
from collections import OrderedDict
from typing import List, Optional

from config.config import PIPELINE_CONFIG
from core import (
    Parser, PostfixEvaluator, ParseResult, EvalResult, Token,
    infix_to_postfix, PostfixValidator
)

logger = logging.getLogger(__name__)


class ExpressionOutcome:
    """一行表达式经过完整管线后的结果"""

    def __init__(self, expression: str, parse_result: ParseResult,
                 postfix: Optional[List[Token]] = None,
                 eval_result: Optional[EvalResult] = None):
        self.expression = expression
        self.parse_result = parse_result
        self.postfix = postfix if postfix is not None else []
        self.eval_result = eval_result

    @property
    def stage(self):
        """出错（或完成）的阶段：'parse' 或 'evaluate'"""
        return "evaluate" if self.eval_result is not None else "parse"

    @property
    def status(self):
        if self.eval_result is not None:
            return self.eval_result.status
        return self.parse_result.status

    @property
    def ok(self):
        return self.eval_result is not None and self.eval_result.ok

    @property
    def value(self):
        return self.eval_result.value if self.ok else None

    @property
    def column(self):
        """语法错误的0起始列；求值阶段没有列"""
        return None if self.eval_result is not None else self.parse_result.column

    def copy(self):
        """复制结果，Token列表与状态对象都不与原结果共享"""
        parse_result = ParseResult(self.parse_result.status, self.parse_result.column,
                                   list(self.parse_result.tokens))
        eval_result = None
        if self.eval_result is not None:
            eval_result = EvalResult(self.eval_result.value, self.eval_result.status)
        return ExpressionOutcome(self.expression, parse_result, list(self.postfix), eval_result)

    def __repr__(self):
        return f"ExpressionOutcome({self.expression!r}, stage={self.stage}, status={self.status.name})"


class ExpressionEvaluator:

    def __init__(self, cache_size=None):
        self.parser = Parser()
        self.postfix_evaluator = PostfixEvaluator()
        # 使用有限大小的OrderedDict实现LRU缓存
        self.cache_size = PIPELINE_CONFIG["cache_size"] if cache_size is None else cache_size
        self._result_cache = OrderedDict()
        self._cache_hits = 0
        self._cache_misses = 0

    def _manage_cache(self):
        """管理缓存大小"""
        while len(self._result_cache) > self.cache_size:
            # 删除最久未使用的条目
            self._result_cache.popitem(last=False)

    def clear_cache(self):
        """清空缓存（供外部调用）"""
        self._result_cache.clear()
        logger.info(f"Cache cleared. Hits: {self._cache_hits}, Misses: {self._cache_misses}")
        self._cache_hits = 0
        self._cache_misses = 0

    @property
    def cache_stats(self):
        return {"hits": self._cache_hits, "misses": self._cache_misses, "size": len(self._result_cache)}

    def evaluate(self, expression: str) -> ExpressionOutcome:
        """
        Args:
            expression: 中缀表达式文本
        Returns:
            ExpressionOutcome；语法错误时不做转换和求值
        """
        if expression in self._result_cache:
            # 移到末尾（最近使用）
            self._result_cache.move_to_end(expression)
            self._cache_hits += 1
            logger.debug(f"Cache hit for expression: {expression[:50]}")
            return self._result_cache[expression].copy()

        self._cache_misses += 1
        outcome = self._evaluate_impl(expression)
        if self.cache_size > 0:
            self._result_cache[expression] = outcome.copy()
            self._manage_cache()
        return outcome

    def _evaluate_impl(self, expression: str) -> ExpressionOutcome:
        parse_result = self.parser.parse(expression)
        if not parse_result.ok:
            return ExpressionOutcome(expression, parse_result)

        postfix = infix_to_postfix(parse_result.tokens)
        assert PostfixValidator.is_well_formed(postfix), f"Malformed postfix for {expression!r}"
        eval_result = self.postfix_evaluator.evaluate(postfix)
        return ExpressionOutcome(expression, parse_result, postfix, eval_result)

    def evaluate_many(self, expressions) -> List[ExpressionOutcome]:
        return [self.evaluate(expr) for expr in expressions]
