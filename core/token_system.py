"""core/token_system.py"""
import re
from enum import Enum

from core.operators import MAX_VALUE, MIN_VALUE

# 可选的单个符号 + ASCII数字
_OPERAND_PATTERN = re.compile(r'[+-]?[0-9]+')

# Unicode White_Space；不同于str.split()，\x1c-\x1f 不算空白
_WHITESPACE_CHARS = '\t\n\x0b\x0c\r \x85\xa0' + ''.join(
    map(chr, [0x1680, *range(0x2000, 0x200b), 0x2028, 0x2029, 0x202f, 0x205f, 0x3000])
)
_WHITESPACE_PATTERN = re.compile('[' + re.escape(_WHITESPACE_CHARS) + ']+')


class TokenType(Enum):
    OPERAND = "operand"  # 操作数
    OPERATOR = "operator"  # 操作符（含未知符号，应用时才报错）


class Token:
    def __init__(self, token_type, name, position, value=None):
        self.type = token_type
        self.name = name
        self.position = position  # 行内从1开始的序号
        self.value = value

    def __repr__(self):
        return f"Token({self.type.value}, {self.name!r}, {self.position})"


def parse_operand(text):
    """解析32位有符号整数；不是整数或超出范围时返回None"""
    if not _OPERAND_PATTERN.fullmatch(text):
        return None
    value = int(text)
    if value > MAX_VALUE or value < MIN_VALUE:
        return None
    return value


def split_tokens(line):
    """按连续空白切分，丢弃首尾的空串"""
    return [part for part in _WHITESPACE_PATTERN.split(line) if part]


def tokenize(line):
    """按空白切分一行，并标注类型和位置"""
    tokens = []
    for position, name in enumerate(split_tokens(line), start=1):
        value = parse_operand(name)
        if value is not None:
            tokens.append(Token(TokenType.OPERAND, name, position, value=value))
        else:
            tokens.append(Token(TokenType.OPERATOR, name, position))
    return tokens
