"""core/errors.py - 计算器错误体系"""


class CalculatorError(Exception):
    """所有计算错误的基类，kind 为错误种类名"""

    def __init__(self, message, position=None):
        super().__init__(message)
        self.message = message
        self.position = position

    @property
    def kind(self):
        return type(self).__name__


# 词法阶段 ====================
class TokenizeError(CalculatorError):
    """Raised when the input text cannot be split into tokens."""


class MalformedNumber(TokenizeError):
    pass


class UnexpectedCharacter(TokenizeError):
    pass


# 语法阶段 ====================
class ParseError(CalculatorError):
    """Raised when the token sequence is structurally invalid."""


class MismatchedParentheses(ParseError):
    pass


class InvalidOperatorSequence(ParseError):
    pass


# 求值阶段 ====================
class EvaluationError(CalculatorError):
    """Raised while executing a postfix sequence."""


class MalformedExpression(EvaluationError):
    pass


class DivisionByZero(EvaluationError):
    pass


class NonIntegerExponent(EvaluationError):
    pass


class ZeroToNegativePower(EvaluationError):
    pass


class ExponentOutOfRange(EvaluationError):
    pass


# 格式化 ====================
class InvalidScale(CalculatorError):
    pass
