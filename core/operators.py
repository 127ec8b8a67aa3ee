"""core/operators.py"""
import logging

import numpy as np

from core.errors import RPNArithmeticError

MAX_VALUE = int(np.iinfo(np.int32).max)  # 数值上限
MIN_VALUE = int(np.iinfo(np.int32).min)  # 数值下限

logger = logging.getLogger(__name__)

# 操作符符号 -> Operators中的方法名
OPERATOR_TABLE = {
    '+': 'add',
    '-': 'sub',
    '*': 'mul',
    '/': 'div',
    '%': 'mod',
}


def _check_range(value, position):
    """结果必须落在32位有符号整数范围内"""
    if value > MAX_VALUE or value < MIN_VALUE:
        logger.debug(f"Result {value} out of int32 range at token {position}")
        raise RPNArithmeticError("overflow", position)
    return value


class Operators:
    """所有二元整数操作符的静态方法集合"""

    @staticmethod
    def _check_divisor(y, position, check_zero_division):
        """check_zero_division关闭时交给调用方处理ZeroDivisionError"""
        if y == 0 and check_zero_division:
            raise RPNArithmeticError("division by zero", position)

    @staticmethod
    def add(x, y, position=None, check_zero_division=True):
        """加法操作符"""
        return _check_range(x + y, position)

    @staticmethod
    def sub(x, y, position=None, check_zero_division=True):
        """减法操作符"""
        return _check_range(x - y, position)

    @staticmethod
    def mul(x, y, position=None, check_zero_division=True):
        """乘法操作符"""
        return _check_range(x * y, position)

    @staticmethod
    def mod(x, y, position=None, check_zero_division=True):
        """取余：截断除法语义，符号跟随被除数"""
        Operators._check_divisor(y, position, check_zero_division)
        if y == 0:
            raise ZeroDivisionError("integer modulo by zero")
        return int(np.fmod(np.int64(x), np.int64(y)))

    @staticmethod
    def div(x, y, position=None, check_zero_division=True):
        """整数除法，向零截断"""
        Operators._check_divisor(y, position, check_zero_division)
        if y == 0:
            raise ZeroDivisionError("integer division by zero")
        remainder = int(np.fmod(np.int64(x), np.int64(y)))
        # x - r 必能被 y 整除，这里的地板除不会引入舍入
        return _check_range((x - remainder) // y, position)

    @staticmethod
    def apply(symbol, x, y, position=None, check_zero_division=True):
        """按符号调用对应操作符；未知符号返回None"""
        name = OPERATOR_TABLE.get(symbol)
        if name is None:
            return None
        op_method = getattr(Operators, name)
        return op_method(x, y, position, check_zero_division)
