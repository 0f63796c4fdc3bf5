"""utils/messages.py"""
from config.config import DRIVER_CONFIG
from core import ParseStatus, EvalStatus

PARSE_MESSAGES = {
    ParseStatus.UNEXPECTED_END_OF_INPUT: "Unexpected end of input at column ({col})!",
    ParseStatus.ILL_FORMED_INTEGER: "Ill formed integer at column ({col})!",
    ParseStatus.MISSING_TERM: "Missing <term> at column ({col})!",
    ParseStatus.EXTRANEOUS_SYMBOL: "Extraneous symbol after valid expression found at column ({col})!",
    ParseStatus.INTEGER_OUT_OF_RANGE: "Integer constant out of range beginning at column ({col})!",
    ParseStatus.MISSING_CLOSING_PARENTHESIS: "Missing closing \")\" at column ({col})!",
}

EVAL_MESSAGES = {
    EvalStatus.NUMERIC_OVERFLOW: "Numeric overflow error!",
    EvalStatus.DIVISION_BY_ZERO: "Division by zero!",
}


def format_parse_error(result):
    """语法错误信息，列号从1开始"""
    template = PARSE_MESSAGES.get(result.status)
    if template is None:
        return ">>> Unhandled error found!"
    return template.format(col=result.column + DRIVER_CONFIG["column_offset"])


def format_eval_error(result):
    return EVAL_MESSAGES.get(result.status, "Unhandled error found!")


def format_outcome(outcome):
    """ExpressionOutcome -> 驱动程序打印的一行"""
    if outcome.eval_result is None:
        return format_parse_error(outcome.parse_result)
    if not outcome.eval_result.ok:
        return format_eval_error(outcome.eval_result)
    return str(outcome.value)
