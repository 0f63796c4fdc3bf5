"""配置文件"""
import numpy as np

# 解析器参数
PARSER_CONFIG = {
    "bounded_dtype": np.int16,  # 字面量与结果必须落在 short int 范围内
}

# 求值器参数
EVALUATOR_CONFIG = {
    "working_dtype": np.int64,  # 中间值的宽类型，溢出时饱和而不是回绕
    "division_by_zero_placeholder": 0,  # 除零时压栈的占位值
}

# 管线参数
PIPELINE_CONFIG = {
    "cache_size": 1000,
}

# 命令行驱动
DRIVER_CONFIG = {
    "quit_commands": ("q", "p"),  # 读到这些行时停止读取
    "column_offset": 1,  # 错误信息中的列号从1开始
    "results_path": "bares_results.csv",
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    bounded = np.iinfo(PARSER_CONFIG["bounded_dtype"])
    working = np.iinfo(EVALUATOR_CONFIG["working_dtype"])
    assert bounded.kind == "i" and working.kind == "i", "只支持有符号整数类型"
    assert working.bits > bounded.bits, "工作类型必须严格宽于结果类型，才能检测溢出"
    assert PIPELINE_CONFIG["cache_size"] >= 0, "缓存大小不能为负"
    assert all(len(c) > 0 for c in DRIVER_CONFIG["quit_commands"]), "退出命令不能为空"
    return True
