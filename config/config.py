"""配置文件"""
import logging

logger = logging.getLogger(__name__)

# 计算器参数
CALCULATOR_CONFIG = {
    "check_zero_division": True,  # False时除零直接抛出ZeroDivisionError
}

# 日志配置
LOGGING_CONFIG = {
    "level": "WARNING",
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}

# 命令行参数
CLI_CONFIG = {
    "prog": "rpn",
    "version": "1.0.0",
    "description": "RPN calculator: evaluates one expression per line",
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert isinstance(CALCULATOR_CONFIG["check_zero_division"], bool)
    assert isinstance(logging.getLevelName(LOGGING_CONFIG["level"]), int), "未知的日志级别"
    logger.info("Configuration validated successfully!")
