"""core/tokenizer.py - 把表达式文本切分为 Token 序列"""
from core.errors import UnexpectedCharacter
from core.token_system import Token, BINARY_SYMBOLS, UNARY_SYMBOLS

DIGITS = frozenset('0123456789')
NUMBER_CHARS = DIGITS | {'.'}


class Tokenizer:
    """单遍从左到右扫描的词法分析器"""

    @staticmethod
    def tokenize(text):
        """
        Args:
            text: 表达式文本（None 视为空串）
        Returns:
            Token 列表（中缀顺序）
        Raises:
            MalformedNumber: 数字没有数字位或含多个小数点
            UnexpectedCharacter: 不在支持字符集内的字符
        """
        text = text or ""
        tokens = []
        # 下一个 +/- 是否应视为一元：开头、任何操作符之后、左括号之后
        can_be_unary = True
        i = 0
        n = len(text)

        while i < n:
            ch = text[i]

            if ch.isspace():
                i += 1
                continue

            # 数字：贪婪读取连续的数字和小数点，合法性由 Token 构造时检查
            if ch in NUMBER_CHARS:
                start = i
                while i < n and text[i] in NUMBER_CHARS:
                    i += 1
                tokens.append(Token.number(text[start:i], start))
                can_be_unary = False
                continue

            if ch == '(':
                tokens.append(Token.left_paren(i))
                can_be_unary = True
            elif ch == ')':
                tokens.append(Token.right_paren(i))
                can_be_unary = False
            elif can_be_unary and ch in UNARY_SYMBOLS:
                tokens.append(Token.unary(ch, i))
            elif ch in BINARY_SYMBOLS:
                tokens.append(Token.binary(ch, i))
                can_be_unary = True
            else:
                raise UnexpectedCharacter(f"Unexpected character '{ch}' at position {i}", i)
            i += 1

        return tokens


def tokenize(text):
    return Tokenizer.tokenize(text)
