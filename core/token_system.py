"""core/token_system.py"""
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from enum import Enum
from types import MappingProxyType
from typing import Optional

from core.errors import MalformedNumber


class TokenType(Enum):
    NUMBER = "number"                  # 数字字面量
    OPERATOR = "operator"              # 二元操作符
    UNARY_OPERATOR = "unary_operator"  # 一元正负号
    LEFT_PAREN = "left_paren"
    RIGHT_PAREN = "right_paren"


class Associativity(Enum):
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class OperatorSpec:
    """操作符描述：符号、优先级、结合性、元数；name 对应 Operators 中的方法名"""
    symbol: str
    name: str
    precedence: int
    associativity: Associativity
    arity: int


# 操作符定义表，键为 (符号, 元数)
OPERATOR_DEFINITIONS = MappingProxyType({
    # 二元操作符 - 加减
    ('+', 2): OperatorSpec('+', 'add', 1, Associativity.LEFT, 2),
    ('-', 2): OperatorSpec('-', 'sub', 1, Associativity.LEFT, 2),

    # 二元操作符 - 乘除取余
    ('*', 2): OperatorSpec('*', 'mul', 2, Associativity.LEFT, 2),
    ('/', 2): OperatorSpec('/', 'div', 2, Associativity.LEFT, 2),
    ('%', 2): OperatorSpec('%', 'mod', 2, Associativity.LEFT, 2),

    # 一元操作符（右结合）
    ('+', 1): OperatorSpec('+', 'pos', 3, Associativity.RIGHT, 1),
    ('-', 1): OperatorSpec('-', 'neg', 3, Associativity.RIGHT, 1),

    # 乘方（右结合）
    ('^', 2): OperatorSpec('^', 'pow', 4, Associativity.RIGHT, 2),
})

BINARY_SYMBOLS = frozenset(sym for sym, arity in OPERATOR_DEFINITIONS if arity == 2)
UNARY_SYMBOLS = frozenset(sym for sym, arity in OPERATOR_DEFINITIONS if arity == 1)

_ARITY_BY_TYPE = {
    TokenType.OPERATOR: 2,
    TokenType.UNARY_OPERATOR: 1,
}


def parse_number(lexeme, position=None):
    """
    解析数字字面量：只允许数字和至多一个小数点，且至少一位数字。
    Decimal 本身接受的 1e5 / NaN / Infinity / 符号等写法在这里都被拒绝。
    """
    digits = sum(1 for ch in lexeme if ch.isdigit())
    dots = lexeme.count('.')
    if digits == 0:
        raise MalformedNumber(f"Invalid number '{lexeme}': no digits", position)
    if dots > 1:
        raise MalformedNumber(f"Invalid number '{lexeme}': multiple decimal points", position)
    if digits + dots != len(lexeme) or not lexeme.isascii():
        raise MalformedNumber(f"Invalid number '{lexeme}'", position)
    try:
        return Decimal(lexeme)
    except InvalidOperation as e:
        raise MalformedNumber(f"Invalid number '{lexeme}'", position) from e


@dataclass(frozen=True)
class Token:
    """
    词法单元。NUMBER 在构造时立即解析出 value，其余种类 value 恒为 None。
    position 是输入中的字符偏移，只用于错误信息，不参与相等比较。
    """
    type: TokenType
    lexeme: str
    position: Optional[int] = field(default=None, compare=False)
    value: Optional[Decimal] = field(default=None, init=False)

    def __post_init__(self):
        if self.type == TokenType.NUMBER:
            object.__setattr__(self, 'value', parse_number(self.lexeme, self.position))
        elif self.type in _ARITY_BY_TYPE:
            if (self.lexeme, _ARITY_BY_TYPE[self.type]) not in OPERATOR_DEFINITIONS:
                raise ValueError(f"Unknown {self.type.value}: {self.lexeme!r}")

    @property
    def is_operator(self):
        return self.type in _ARITY_BY_TYPE

    @property
    def operator(self):
        """操作符的描述信息；非操作符返回 None"""
        arity = _ARITY_BY_TYPE.get(self.type)
        if arity is None:
            return None
        return OPERATOR_DEFINITIONS[(self.lexeme, arity)]

    def __str__(self):
        if self.type == TokenType.UNARY_OPERATOR:
            return f"u{self.lexeme}"
        return self.lexeme

    # 便捷构造 ====================
    @classmethod
    def number(cls, lexeme, position=None):
        return cls(TokenType.NUMBER, lexeme, position)

    @classmethod
    def binary(cls, symbol, position=None):
        return cls(TokenType.OPERATOR, symbol, position)

    @classmethod
    def unary(cls, symbol, position=None):
        return cls(TokenType.UNARY_OPERATOR, symbol, position)

    @classmethod
    def left_paren(cls, position=None):
        return cls(TokenType.LEFT_PAREN, '(', position)

    @classmethod
    def right_paren(cls, position=None):
        return cls(TokenType.RIGHT_PAREN, ')', position)


def rpn_to_string(tokens):
    """把 Token 序列渲染成空格分隔的字符串，一元操作符写作 u+ / u-"""
    return ' '.join(str(tk) for tk in tokens)
