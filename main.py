"""主程序入口 - 交互式计算器 / 一次性求值 / 批量求值"""
import argparse
import logging
import sys

from config.config import CALC_CONFIG, BATCH_CONFIG, LOGGING_CONFIG, validate_config
from core.calculator import Calculator
from core.errors import InvalidScale
from driver.batch import run_batch
from driver.repl import Repl

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(description="Exact decimal expression calculator")

    parser.add_argument(
        "expression",
        nargs="*",
        help="Expression to evaluate once; starts the interactive prompt when omitted "
             "(put '--' before an expression that starts with '-')"
    )
    parser.add_argument(
        "-s", "--scale",
        type=int,
        default=CALC_CONFIG["scale"],
        help=f"Number of decimal places in results (default: {CALC_CONFIG['scale']})"
    )
    parser.add_argument(
        "--input_file",
        type=str,
        default=None,
        help="Evaluate every line of this file and save a results table"
    )
    parser.add_argument(
        "--output_path",
        type=str,
        default=BATCH_CONFIG["default_output_path"],
        help="Path to save batch results (CSV)"
    )
    parser.add_argument(
        "--banner",
        action="store_true",
        help="Print usage hint when starting the interactive prompt"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG["level"],
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level"
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    # 设置日志
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format=LOGGING_CONFIG["format"]
    )
    validate_config()

    try:
        calculator = Calculator(scale=args.scale)
    except InvalidScale as e:
        sys.stderr.write(f"Error: {e.message}\n")
        return 2

    if args.input_file:
        try:
            results = run_batch(args.input_file, args.output_path, calculator)
        except OSError as e:
            logger.error(f"Batch run failed: {e}")
            sys.stderr.write(f"Error: Cannot access {e.filename or args.input_file}: {e.strerror}\n")
            return 2
        return 1 if results['error_kind'].notna().any() else 0

    repl = Repl(calculator, show_banner=args.banner)
    if args.expression:
        return repl.evaluate_once(" ".join(args.expression))

    repl.run()
    return 0


def cli():
    sys.exit(main())


if __name__ == "__main__":
    cli()
