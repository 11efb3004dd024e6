"""交互式读取-求值-输出循环"""
import logging
import sys

from config.config import REPL_CONFIG
from core.calculator import Calculator

logger = logging.getLogger(__name__)


class Repl:
    """
    读取一行、求值、打印。只负责 I/O 和退出判断，计算全部交给 Calculator。
    输入输出流可注入，便于测试。
    """

    def __init__(self, calculator=None, stdin=None, stdout=None, stderr=None,
                 prompt=None, show_banner=False):
        self.calculator = calculator or Calculator()
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.stderr = stderr or sys.stderr
        self.prompt_text = REPL_CONFIG["prompt"] if prompt is None else prompt
        self.show_banner = show_banner
        self.error_prefix = REPL_CONFIG["error_prefix"]
        self._exit_commands = {cmd.lower() for cmd in REPL_CONFIG["exit_commands"]}

    def is_exit_command(self, line):
        if line is None:
            return False
        return line.strip().lower() in self._exit_commands

    def prompt(self):
        self.stdout.write(self.prompt_text)
        self.stdout.flush()

    def read_line(self):
        """读取一行并去掉行尾换行/回车；EOF 返回 None"""
        line = self.stdin.readline()
        if not line:
            return None
        return line.rstrip('\n').rstrip('\r')

    def print_result(self, text):
        self.stdout.write(text + '\n')
        self.stdout.flush()

    def print_error(self, message):
        self.stderr.write(self.error_prefix + message + '\n')
        self.stderr.flush()

    def evaluate_and_print(self, expression):
        """求值并打印，返回是否成功"""
        result = self.calculator.process_line(expression)
        if result.ok:
            logger.debug(f"{expression!r} -> {result.value}")
            self.print_result(result.value)
            return True
        logger.debug(f"{expression!r} failed: {result.error_kind}: {result.message}")
        self.print_error(result.message or "Invalid expression")
        return False

    def run(self):
        """主循环：EOF 或退出命令时结束，返回成功/失败的计数"""
        logger.info(f"Starting REPL with scale={self.calculator.scale}")
        if self.show_banner:
            self.print_result(REPL_CONFIG["banner"])

        stats = {"ok": 0, "failed": 0}
        while True:
            self.prompt()
            line = self.read_line()
            if line is None:
                # EOF 时补一个换行，避免提示符和 shell 输出粘在一起
                self.stdout.write('\n')
                break
            if self.is_exit_command(line):
                break

            trimmed = line.strip()
            if not trimmed:
                continue

            if self.evaluate_and_print(trimmed):
                stats["ok"] += 1
            else:
                stats["failed"] += 1

        logger.info(f"REPL finished: {stats['ok']} evaluated, {stats['failed']} failed")
        return stats

    def evaluate_once(self, expression):
        """一次性求值（命令行参数），返回进程退出码"""
        if expression is None or not expression.strip():
            self.print_error("Empty expression")
            return 1
        return 0 if self.evaluate_and_print(expression.strip()) else 1
