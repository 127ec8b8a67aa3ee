"""核心模块 - Token系统、RPN评估器和操作符"""
from .token_system import TokenType, Token, tokenize, split_tokens, parse_operand
from .operators import Operators, OPERATOR_TABLE
from .errors import EvalError, RPNSyntaxError, InvalidTokenError, RPNArithmeticError
from .rpn_evaluator import RPNEvaluator, EvalResult, evaluate, format_trace

__all__ = [
    'TokenType', 'Token', 'tokenize', 'split_tokens', 'parse_operand',
    'Operators', 'OPERATOR_TABLE',
    'EvalError', 'RPNSyntaxError', 'InvalidTokenError', 'RPNArithmeticError',
    'RPNEvaluator', 'EvalResult', 'evaluate', 'format_trace'
]
