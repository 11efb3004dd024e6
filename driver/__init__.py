"""驱动模块 - 交互式循环和批量求值"""
from .repl import Repl
from .batch import load_expressions, evaluate_expressions, save_results, run_batch

__all__ = ['Repl', 'load_expressions', 'evaluate_expressions', 'save_results', 'run_batch']
