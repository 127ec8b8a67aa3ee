"""RPN表达式求值器 - 调用统一的Operators类"""
import json
import logging

from config.config import CALCULATOR_CONFIG
from core.errors import EvalError, RPNSyntaxError, InvalidTokenError
from core.operators import Operators
from core.token_system import TokenType, tokenize

logger = logging.getLogger(__name__)


def format_trace(remaining, stack):
    """剩余token和当前栈，例如 ["3", "+"] [2]"""
    return f"{json.dumps(remaining)} {json.dumps(stack)}"


def _log_tracer(remaining, stack):
    logger.info(format_trace(remaining, stack))


class EvalResult:
    """单行求值结果：value 与 error 二选一"""

    def __init__(self, line, value=None, error=None):
        self.line = line
        self.value = value
        self.error = error

    @property
    def ok(self):
        return self.error is None

    def __repr__(self):
        if self.ok:
            return f"EvalResult(ok={self.value!r})"
        return f"EvalResult(error={self.error!r})"


class RPNEvaluator:
    """逐行评估RPN表达式的值，行与行之间没有共享状态"""

    def __init__(self, verbose=False, tracer=None, config=None):
        """
        Args:
            verbose: 每处理一个token后输出剩余token和栈
            tracer: 追踪输出函数 tracer(remaining, stack)，默认写入日志
            config: 覆盖CALCULATOR_CONFIG中的键
        """
        self.verbose = verbose
        self.tracer = tracer or _log_tracer
        self.config = {**CALCULATOR_CONFIG, **(config or {})}

    def evaluate(self, line):
        """
        评估一行RPN表达式
        Args:
            line: 空白分隔的token
        Returns:
            整数结果
        Raises:
            EvalError: RPNSyntaxError / InvalidTokenError / RPNArithmeticError
        """
        tokens = tokenize(line)
        stack = []
        check_zero_division = self.config["check_zero_division"]

        for i, token in enumerate(tokens):
            pos = token.position

            if token.type == TokenType.OPERAND:
                stack.append(token.value)
            else:
                # 先出栈再识别操作符：单独的未知符号报告为语法错误
                if len(stack) < 2:
                    raise RPNSyntaxError(pos)
                y = stack.pop()
                x = stack.pop()

                result = Operators.apply(token.name, x, y, pos, check_zero_division)
                if result is None:
                    raise InvalidTokenError(pos)
                stack.append(result)

            if self.verbose:
                self.tracer([t.name for t in tokens[i + 1:]], list(stack))

        if len(stack) != 1:
            raise RPNSyntaxError()

        return stack[0]

    def try_evaluate(self, line):
        """和evaluate相同，但把EvalError作为值返回"""
        try:
            return EvalResult(line, value=self.evaluate(line))
        except EvalError as e:
            logger.debug(f"Error evaluating '{line[:50]}': {e.message}")
            return EvalResult(line, error=e)

    def evaluate_lines(self, lines):
        """按顺序独立评估每一行"""
        for line in lines:
            yield self.try_evaluate(line)


def evaluate(line, verbose=False, tracer=None):
    """便捷函数：用一次性的RPNEvaluator评估一行"""
    return RPNEvaluator(verbose=verbose, tracer=tracer).evaluate(line)
