import pytest

from core import Parser, ParseResult, ParseStatus, EvalResult, EvalStatus
from pipeline import ExpressionEvaluator
from utils.messages import format_parse_error, format_eval_error, format_outcome


@pytest.mark.parametrize("text, message", [
    ("", "Unexpected end of input at column (1)!"),
    ("-0", "Ill formed integer at column (2)!"),
    ("1+", "Missing <term> at column (3)!"),
    ("1)", "Extraneous symbol after valid expression found at column (2)!"),
    ("40000", "Integer constant out of range beginning at column (1)!"),
    ("(1+2", "Missing closing \")\" at column (5)!"),
])
def test_parse_messages_use_one_based_columns(text, message):
    assert format_parse_error(Parser().parse(text)) == message


def test_ok_parse_has_no_message():
    assert format_parse_error(ParseResult(ParseStatus.OK)) == ">>> Unhandled error found!"


def test_eval_messages():
    assert format_eval_error(EvalResult(0, EvalStatus.DIVISION_BY_ZERO)) == "Division by zero!"
    assert format_eval_error(EvalResult(40000, EvalStatus.NUMERIC_OVERFLOW)) == "Numeric overflow error!"
    assert format_eval_error(EvalResult(1)) == "Unhandled error found!"


def test_format_outcome():
    evaluator = ExpressionEvaluator()
    assert format_outcome(evaluator.evaluate("2^3^2")) == "512"
    assert format_outcome(evaluator.evaluate("-3*5")) == "-15"
    assert format_outcome(evaluator.evaluate("200*200")) == "Numeric overflow error!"
    assert format_outcome(evaluator.evaluate("1 +")) == "Missing <term> at column (4)!"
