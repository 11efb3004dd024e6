"""配置文件"""
from decimal import ROUND_HALF_UP

# 计算参数
CALC_CONFIG = {
    "scale": 2,  # 显示时保留的小数位数
    "rounding": ROUND_HALF_UP,  # 显示与除法共用的舍入方式
    "division_precision": 34,  # 除法/负指数乘方的内部有效位数（与 decimal128 相同）
    "max_exponent": 10000,  # 指数绝对值上限，防止构造出上亿位的结果
}

# 交互式循环配置
REPL_CONFIG = {
    "prompt": "bc> ",
    "exit_commands": ("exit", "quit", "q"),  # 不区分大小写
    "error_prefix": "Error: ",
    "banner": "Enter expressions to evaluate or type 'quit' or 'exit' to terminate.",
}

# 批量求值配置
BATCH_CONFIG = {
    "comment_prefix": "#",
    "default_output_path": "results.csv",
    "columns": ["expression", "result", "error_kind", "message"],
}

# 日志配置
LOGGING_CONFIG = {
    "level": "WARNING",
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    from decimal import Context
    assert isinstance(CALC_CONFIG["scale"], int) and CALC_CONFIG["scale"] >= 0, "scale必须是非负整数"
    assert CALC_CONFIG["division_precision"] > 0, "内部精度必须为正"
    assert CALC_CONFIG["max_exponent"] > 0, "指数上限必须为正"
    # 非法的舍入方式会在构造 Context 时抛出 TypeError
    Context(rounding=CALC_CONFIG["rounding"])
    assert REPL_CONFIG["exit_commands"], "至少需要一个退出命令"
    assert BATCH_CONFIG["comment_prefix"], "注释前缀不能为空"
    return True
