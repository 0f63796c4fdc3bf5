"""数据加载和结果导出模块"""
import logging

import pandas as pd

from config.config import DRIVER_CONFIG
from utils.messages import format_outcome

logger = logging.getLogger(__name__)

RESULT_COLUMNS = ['expression', 'stage', 'status', 'column', 'value', 'message']


def load_expressions(source, quit_commands=None):
    """
    读取表达式，每行一个，遇到退出命令即停止。

    Parameters:
    - source: 文件路径，或已打开的文本流
    - quit_commands: 退出命令集合，默认取 DRIVER_CONFIG

    Returns:
    - 表达式字符串列表（不含换行符）
    """
    if quit_commands is None:
        quit_commands = DRIVER_CONFIG["quit_commands"]

    if isinstance(source, (str, bytes)) or hasattr(source, '__fspath__'):
        logger.info(f"Loading expressions from {source}")
        with open(source, 'r', encoding='utf-8') as f:
            return _read_lines(f, quit_commands)
    return _read_lines(source, quit_commands)


def _read_lines(stream, quit_commands):
    expressions = []
    for line in stream:
        line = line.rstrip('\r\n')
        if line in quit_commands:
            break
        expressions.append(line)
    logger.info(f"Loaded {len(expressions)} expressions")
    return expressions


def results_to_frame(outcomes):
    """
    把 ExpressionOutcome 列表整理成 DataFrame。

    column 使用1起始列号（与打印信息一致），求值阶段为空；
    value 只在成功时填写。
    """
    rows = []
    for outcome in outcomes:
        column = outcome.column
        rows.append({
            'expression': outcome.expression,
            'stage': outcome.stage,
            'status': outcome.status.name,
            'column': None if column is None else column + DRIVER_CONFIG["column_offset"],
            'value': outcome.value,
            'message': format_outcome(outcome),
        })
    frame = pd.DataFrame(rows, columns=RESULT_COLUMNS)
    # 可空整数列，避免 None 把整列变成 float
    frame['column'] = frame['column'].astype('Int64')
    frame['value'] = frame['value'].astype('Int64')
    return frame


def save_results(frame, output_path=None):
    output_path = output_path or DRIVER_CONFIG["results_path"]
    logger.info(f"Saving {len(frame)} results to {output_path}")
    frame.to_csv(output_path, index=False)
    return output_path
