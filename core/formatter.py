"""core/formatter.py - 结果格式化"""
from decimal import Decimal

from config.config import CALC_CONFIG
from core.errors import InvalidScale
from core.operators import EXACT_CONTEXT


def validate_scale(scale):
    """scale 必须是非负整数（bool 不算）"""
    if isinstance(scale, bool) or not isinstance(scale, int):
        raise InvalidScale(f"Scale must be an integer, got {scale!r}")
    if scale < 0:
        raise InvalidScale(f"Scale must be non-negative, got {scale}")
    return scale


def format_result(value, scale):
    """
    按 scale 位小数四舍五入（ROUND_HALF_UP），去掉小数部分末尾的 0，
    输出不带科学计数法的字符串；舍入后为零时总是 "0"。
    """
    validate_scale(scale)
    rounded = value.quantize(Decimal(1).scaleb(-scale, EXACT_CONTEXT), rounding=CALC_CONFIG["rounding"],
                             context=EXACT_CONTEXT)
    if rounded.is_zero():
        return "0"
    # 只去掉小数部分的 0：整数结果保持原指数（100 不会变成 1E+2 再被渲染）
    if rounded.as_tuple().exponent < 0:
        rounded = rounded.normalize(EXACT_CONTEXT)
        if rounded.as_tuple().exponent > 0:
            rounded = rounded.quantize(Decimal(1), context=EXACT_CONTEXT)
    return format(rounded, 'f')
