"""core/operators.py"""
from decimal import Context, Decimal, Inexact, MAX_PREC, MAX_EMAX, MIN_EMIN

from config.config import CALC_CONFIG
from core.errors import (
    DivisionByZero, NonIntegerExponent, ZeroToNegativePower, ExponentOutOfRange
)

# 加减乘与整数乘方使用不受精度限制的上下文，结果总是精确的
EXACT_CONTEXT = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN,
                        rounding=CALC_CONFIG["rounding"])

# 除法（以及负指数）在固定的内部精度上舍入，与显示位数无关
DIVISION_CONTEXT = Context(prec=CALC_CONFIG["division_precision"], Emax=MAX_EMAX, Emin=MIN_EMIN,
                           rounding=CALC_CONFIG["rounding"])

ONE = Decimal(1)


def _exact_divide(dividend, divisor):
    """
    先尝试精确除法：可以除尽的商不超过 len(a) + 4 * len(b) + 1 位有效数字，
    在这个精度下仍然 Inexact 说明商是无限小数，改用 DIVISION_CONTEXT 舍入。
    """
    prec = len(dividend.as_tuple().digits) + 4 * len(divisor.as_tuple().digits) + 1
    ctx = Context(prec=prec, Emax=MAX_EMAX, Emin=MIN_EMIN, rounding=CALC_CONFIG["rounding"])
    ctx.traps[Inexact] = True
    try:
        return ctx.divide(dividend, divisor)
    except Inexact:
        return DIVISION_CONTEXT.divide(dividend, divisor)


class Operators:
    """所有操作符的静态方法集合"""

    # 一元操作符====================

    @staticmethod
    def pos(operand):
        """一元正号：恒等"""
        return operand

    @staticmethod
    def neg(operand):
        """一元负号"""
        return operand.copy_negate()

    # 二元操作符========================================

    @staticmethod
    def add(operand1, operand2):
        return EXACT_CONTEXT.add(operand1, operand2)

    @staticmethod
    def sub(operand1, operand2):
        return EXACT_CONTEXT.subtract(operand1, operand2)

    @staticmethod
    def mul(operand1, operand2):
        return EXACT_CONTEXT.multiply(operand1, operand2)

    @staticmethod
    def div(operand1, operand2):
        """除法：商为有限小数时结果精确，否则舍入到 DIVISION_CONTEXT 的精度"""
        if operand2.is_zero():
            raise DivisionByZero("Division by zero")
        return _exact_divide(operand1, operand2)

    @staticmethod
    def mod(operand1, operand2):
        """截断取余，结果符号与被除数相同（-7 % 3 == -1）"""
        if operand2.is_zero():
            raise DivisionByZero("Modulo by zero")
        return EXACT_CONTEXT.remainder(operand1, operand2)

    @staticmethod
    def _integer_exponent(exponent, max_exponent):
        """把指数转换为 int；非整数或超出范围时报错"""
        if not exponent.is_finite() or exponent != exponent.to_integral_value(context=EXACT_CONTEXT):
            raise NonIntegerExponent(f"Exponent must be an integer value: {exponent}")
        if exponent.copy_abs() > max_exponent:
            raise ExponentOutOfRange(f"Exponent is out of range: {exponent}")
        return int(exponent)

    @staticmethod
    def _exact_power(base, exponent):
        """平方-乘法计算 base**exponent（exponent >= 0），全程精确"""
        result = ONE
        while exponent:
            if exponent & 1:
                result = EXACT_CONTEXT.multiply(result, base)
            exponent >>= 1
            if exponent:
                base = EXACT_CONTEXT.multiply(base, base)
        return result

    @staticmethod
    def pow(operand1, operand2, max_exponent=None):
        """
        乘方：指数必须是整数。
        非负指数精确计算；负指数计算 1 / base^|exp|，舍入规则与除法相同。
        """
        if max_exponent is None:
            max_exponent = CALC_CONFIG["max_exponent"]
        exponent = Operators._integer_exponent(operand2, max_exponent)

        if exponent >= 0:
            return Operators._exact_power(operand1, exponent)

        if operand1.is_zero():
            raise ZeroToNegativePower("Zero cannot be raised to a negative power")
        return _exact_divide(ONE, Operators._exact_power(operand1, -exponent))
