"""core/errors.py - RPN求值错误类型"""


class EvalError(Exception):
    """单行求值失败的基类，调用方可按行恢复"""

    kind = "EvalError"

    def __init__(self, message, position=None):
        super().__init__(message)
        self.message = message
        self.position = position

    def render(self):
        """供命令行输出的可读形式"""
        return f"{self.kind}: {self.message}"

    def __eq__(self, other):
        if not isinstance(other, EvalError):
            return NotImplemented
        return (type(self), self.message, self.position) == (type(other), other.message, other.position)

    def __hash__(self):
        return hash((type(self), self.message, self.position))

    def __repr__(self):
        return f"{type(self).__name__}(message={self.message!r}, position={self.position!r})"


class RPNSyntaxError(EvalError):
    """栈下溢（带位置）或最终栈大小不为1（不带位置）"""

    kind = "SyntaxError"

    def __init__(self, position=None):
        if position is None:
            message = "invalid syntax"
        else:
            message = f"invalid syntax at {position}"
        super().__init__(message, position)


class InvalidTokenError(EvalError):
    """既不是整数也不是已知操作符"""

    kind = "InvalidTokenError"

    def __init__(self, position):
        super().__init__(f"invalid token as {position}", position)


class RPNArithmeticError(EvalError, ArithmeticError):
    """除零或结果超出整数范围"""

    kind = "ArithmeticError"

    def __init__(self, message, position):
        super().__init__(message, position)

    def render(self):
        return f"{self.kind}: {self.message} at {self.position}"
