import logging

from core import ParseStatus, EvalStatus
from pipeline import ExpressionEvaluator


def test_successful_expression():
    outcome = ExpressionEvaluator().evaluate("1+2*3")
    assert outcome.ok
    assert outcome.value == 7
    assert outcome.stage == "evaluate"
    assert outcome.status == EvalStatus.OK
    assert outcome.column is None
    assert [tk.value for tk in outcome.postfix] == ['1', '2', '3', '*', '+']


def test_syntax_error_skips_evaluation():
    outcome = ExpressionEvaluator().evaluate("(1+2")
    assert not outcome.ok
    assert outcome.stage == "parse"
    assert outcome.status == ParseStatus.MISSING_CLOSING_PARENTHESIS
    assert outcome.column == 4
    assert outcome.eval_result is None
    assert outcome.postfix == []
    assert outcome.value is None


def test_arithmetic_error():
    outcome = ExpressionEvaluator().evaluate("1/0")
    assert outcome.parse_result.ok
    assert outcome.status == EvalStatus.DIVISION_BY_ZERO
    assert outcome.value is None


def test_cache_hits_and_misses():
    evaluator = ExpressionEvaluator()
    first = evaluator.evaluate("2^3^2")
    second = evaluator.evaluate("2^3^2")
    assert first is not second
    assert second.value == first.value == 512
    assert evaluator.cache_stats == {"hits": 1, "misses": 1, "size": 1}


def test_cache_evicts_least_recently_used():
    evaluator = ExpressionEvaluator(cache_size=2)
    evaluator.evaluate("1")
    evaluator.evaluate("2")
    evaluator.evaluate("1")
    evaluator.evaluate("3")
    assert list(evaluator._result_cache) == ["1", "3"]


def test_zero_cache_size_disables_caching():
    evaluator = ExpressionEvaluator(cache_size=0)
    evaluator.evaluate("1")
    evaluator.evaluate("1")
    assert evaluator.cache_stats == {"hits": 0, "misses": 2, "size": 0}


def test_clear_cache_logs_and_resets(caplog):
    evaluator = ExpressionEvaluator()
    evaluator.evaluate("1")
    evaluator.evaluate("1")
    with caplog.at_level(logging.INFO, logger="pipeline.evaluator"):
        evaluator.clear_cache()
    assert "Hits: 1, Misses: 1" in caplog.text
    assert evaluator.cache_stats == {"hits": 0, "misses": 0, "size": 0}


def test_evaluate_many_keeps_order():
    outcomes = ExpressionEvaluator().evaluate_many(["1+1", "", "2*3"])
    assert [o.value for o in outcomes] == [2, None, 6]
    assert outcomes[1].status == ParseStatus.UNEXPECTED_END_OF_INPUT


def test_mutating_returned_outcome_does_not_touch_cache():
    evaluator = ExpressionEvaluator()
    first = evaluator.evaluate("(1+2)*3")
    first.postfix.clear()
    first.parse_result.tokens.append(first.parse_result.tokens[0])
    first.eval_result.value = -1

    second = evaluator.evaluate("(1+2)*3")
    assert [tk.value for tk in second.postfix] == ['1', '2', '+', '3', '*']
    assert len(second.parse_result.tokens) == 7
    assert second.value == 9

    second.postfix.pop()
    assert len(evaluator.evaluate("(1+2)*3").postfix) == 5


def test_outcome_copy_is_independent():
    outcome = ExpressionEvaluator(cache_size=0).evaluate("1+1")
    clone = outcome.copy()
    assert clone is not outcome
    assert clone.parse_result is not outcome.parse_result
    assert clone.postfix == outcome.postfix and clone.postfix is not outcome.postfix
    assert clone.eval_result == outcome.eval_result
    assert clone.eval_result is not outcome.eval_result


def test_deeply_nested_expression_runs_end_to_end():
    depth = 1000
    outcome = ExpressionEvaluator().evaluate("(" * depth + "2^3" + ")" * depth)
    assert outcome.ok
    assert outcome.value == 8
