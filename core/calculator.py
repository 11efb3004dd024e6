"""core/calculator.py - 文本输入/文本输出的计算入口"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from config.config import CALC_CONFIG
from core.errors import CalculatorError
from core.formatter import format_result, validate_scale
from core.parser import ShuntingYardParser
from core.rpn_evaluator import RPNEvaluator
from core.tokenizer import Tokenizer


@dataclass(frozen=True)
class CalcResult:
    """一次求值的结果：成功时 value 为格式化后的字符串，失败时带错误种类和信息"""
    expression: str
    value: Optional[str] = None
    error_kind: Optional[str] = None
    message: Optional[str] = None

    @property
    def ok(self):
        return self.error_kind is None


class Calculator:
    """
    把 tokenize -> to_postfix -> evaluate -> format 串起来。
    scale 在构造时确定，之后不可修改；实例无其他状态，可重复/并发调用。
    """

    def __init__(self, scale=None):
        if scale is None:
            scale = CALC_CONFIG["scale"]
        self._scale = validate_scale(scale)

    @property
    def scale(self):
        return self._scale

    def evaluate(self, text) -> Decimal:
        """求值但不格式化"""
        tokens = Tokenizer.tokenize(text)
        postfix = ShuntingYardParser.to_postfix(tokens)
        return RPNEvaluator.evaluate(postfix)

    def calculate(self, text) -> str:
        return format_result(self.evaluate(text), self._scale)

    def process_line(self, text) -> CalcResult:
        """求值一行文本；CalculatorError 转为结果描述而不是抛出"""
        try:
            value = self.calculate(text)
        except CalculatorError as e:
            return CalcResult(expression=text, error_kind=e.kind, message=e.message)
        return CalcResult(expression=text, value=value)
