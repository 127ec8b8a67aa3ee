"""配置模块"""
from .config import CALCULATOR_CONFIG, LOGGING_CONFIG, CLI_CONFIG, validate_config

__all__ = ['CALCULATOR_CONFIG', 'LOGGING_CONFIG', 'CLI_CONFIG', 'validate_config']
