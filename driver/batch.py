"""批量求值模块 - 一行一个表达式，结果汇总为 DataFrame"""
import logging

import pandas as pd

from config.config import BATCH_CONFIG
from core.calculator import Calculator

logger = logging.getLogger(__name__)


def load_expressions(file_path):
    """
    读取表达式文件。

    Parameters:
    - file_path: 文本文件路径，每行一个表达式

    Returns:
    - 表达式列表（已去掉首尾空白，跳过空行和注释行）
    """
    logger.info(f"Loading expressions from {file_path}")
    with open(file_path, 'r', encoding='utf-8') as f:
        lines = f.read().splitlines()

    expressions = [line.strip() for line in lines]
    expressions = [e for e in expressions if e and not e.startswith(BATCH_CONFIG["comment_prefix"])]
    logger.info(f"Loaded {len(expressions)} expressions ({len(lines) - len(expressions)} lines skipped)")
    return expressions


def evaluate_expressions(expressions, calculator=None):
    """
    对每个表达式求值，返回列为 expression/result/error_kind/message 的 DataFrame。
    失败的行 result 为空，成功的行 error_kind/message 为空。
    """
    calculator = calculator or Calculator()
    rows = []
    for expression in expressions:
        result = calculator.process_line(expression)
        rows.append({
            'expression': result.expression,
            'result': result.value,
            'error_kind': result.error_kind,
            'message': result.message,
        })

    results = pd.DataFrame(rows, columns=BATCH_CONFIG["columns"])

    failed = results['error_kind'].notna().sum()
    if failed:
        logger.warning(f"{failed} of {len(results)} expressions failed:")
        for kind, count in results['error_kind'].value_counts().items():
            logger.warning(f"  - {kind}: {count}")
    else:
        logger.info(f"All {len(results)} expressions evaluated successfully")
    return results


def save_results(results, output_path=None):
    output_path = output_path or BATCH_CONFIG["default_output_path"]
    logger.info(f"Saving results to {output_path}")
    results.to_csv(output_path, index=False)
    return output_path


def run_batch(input_path, output_path=None, calculator=None):
    """读取 -> 求值 -> 保存；返回结果 DataFrame"""
    expressions = load_expressions(input_path)
    results = evaluate_expressions(expressions, calculator)
    save_results(results, output_path)
    return results
