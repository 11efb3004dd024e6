"""核心模块 - Token系统、解析器、RPN评估器、操作符和格式化"""
from .token_system import (
    TokenType, Token, Associativity, OperatorSpec, OPERATOR_DEFINITIONS,
    parse_number, rpn_to_string
)
from .tokenizer import Tokenizer, tokenize
from .parser import ShuntingYardParser, to_postfix
from .rpn_evaluator import RPNEvaluator, evaluate
from .operators import Operators
from .formatter import format_result
from .calculator import Calculator, CalcResult
from .errors import CalculatorError

__all__ = [
    'TokenType', 'Token', 'Associativity', 'OperatorSpec', 'OPERATOR_DEFINITIONS',
    'parse_number', 'rpn_to_string', 'Tokenizer', 'tokenize',
    'ShuntingYardParser', 'to_postfix', 'RPNEvaluator', 'evaluate',
    'Operators', 'format_result', 'Calculator', 'CalcResult', 'CalculatorError'
]
