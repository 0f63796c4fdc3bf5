"""主程序入口 - 逐行读取表达式并打印结果"""
import argparse
import logging
import sys

from config.config import DRIVER_CONFIG, validate_config
from data.data_loader import load_expressions, results_to_frame, save_results
from pipeline import ExpressionEvaluator
from utils.messages import format_outcome

logger = logging.getLogger(__name__)


def run(expressions, out=None):
    """
    依次评估表达式并打印，每个表达式一行输出
    Returns:
        ExpressionOutcome 列表
    """
    out = out or sys.stdout
    evaluator = ExpressionEvaluator()
    outcomes = []
    for expr in expressions:
        outcome = evaluator.evaluate(expr)
        outcomes.append(outcome)
        print(format_outcome(outcome), file=out)
    logger.info(f"Evaluated {len(outcomes)} expressions, "
                f"{sum(1 for o in outcomes if o.ok)} succeeded")
    return outcomes


def main(args, stdin=None, stdout=None):
    validate_config()

    try:
        if args.input_path:
            expressions = load_expressions(args.input_path)
        else:
            expressions = load_expressions(stdin or sys.stdin)
    except OSError as e:
        logger.error(f"Failed to read expressions: {e}")
        return 1

    outcomes = run(expressions, out=stdout)

    if args.save_results:
        save_results(results_to_frame(outcomes), args.results_path)

    return 0


def build_arg_parser():
    parser = argparse.ArgumentParser(description="BARES - Basic ARithmetic Expression Evaluator based on Stacks")

    parser.add_argument(
        "--input_path",
        type=str,
        default=None,
        help="File with one expression per line (default: read from stdin)"
    )
    parser.add_argument(
        "--save_results",
        action="store_true",
        help="Save the evaluation results to a CSV file"
    )
    parser.add_argument(
        "--results_path",
        type=str,
        default=DRIVER_CONFIG["results_path"],
        help="Path to save the evaluation results"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)"
    )
    return parser


def cli():
    args = build_arg_parser().parse_args()

    # 设置日志
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    sys.exit(main(args))


if __name__ == "__main__":
    cli()
