"""core/parser.py - Shunting-Yard：中缀 Token 序列 -> 后缀(RPN)序列"""
from core.errors import MismatchedParentheses, InvalidOperatorSequence
from core.token_system import TokenType, Associativity


class ShuntingYardParser:
    """调度场算法，优先级/结合性来自 OPERATOR_DEFINITIONS"""

    @staticmethod
    def _should_pop(top, current):
        """栈顶操作符是否应先于当前操作符输出"""
        if not top.is_operator:
            return False
        top_prec = top.operator.precedence
        prec = current.operator.precedence
        if current.operator.associativity == Associativity.LEFT:
            return top_prec >= prec
        # 右结合只让位于严格更高的优先级
        return top_prec > prec

    @staticmethod
    def to_postfix(tokens):
        """
        Args:
            tokens: 中缀 Token 序列（可以不是 Tokenizer 产出的）
        Returns:
            后缀 Token 序列
        Raises:
            MismatchedParentheses: 括号不配对
            InvalidOperatorSequence: 操作符出现在不该出现的位置
        """
        output = []
        stack = []
        expecting_operand = True
        last = None

        for token in tokens:
            if token.type == TokenType.NUMBER:
                output.append(token)
                expecting_operand = False

            elif token.type == TokenType.LEFT_PAREN:
                stack.append(token)
                expecting_operand = True

            elif token.type == TokenType.RIGHT_PAREN:
                if last is not None and last.is_operator:
                    raise InvalidOperatorSequence(
                        f"Missing operand after '{last.lexeme}'", last.position)
                while stack and stack[-1].type != TokenType.LEFT_PAREN:
                    output.append(stack.pop())
                if not stack:
                    raise MismatchedParentheses("Mismatched parentheses: unmatched ')'", token.position)
                stack.pop()  # 丢弃 '('
                expecting_operand = False

            elif token.type == TokenType.UNARY_OPERATOR:
                if not expecting_operand:
                    raise InvalidOperatorSequence(
                        f"Unary operator '{token.lexeme}' cannot follow an operand", token.position)
                # 前缀操作符的操作数尚未出现，不弹出任何栈顶项（否则 2^-3 会先输出 ^）
                stack.append(token)

            elif token.type == TokenType.OPERATOR:
                if expecting_operand:
                    raise InvalidOperatorSequence(f"Unexpected operator: {token.lexeme}", token.position)
                while stack and ShuntingYardParser._should_pop(stack[-1], token):
                    output.append(stack.pop())
                stack.append(token)
                expecting_operand = True

            else:
                raise TypeError(f"Unsupported token type: {token.type}")

            last = token

        if last is not None and last.is_operator:
            raise InvalidOperatorSequence(f"Missing operand after '{last.lexeme}'", last.position)

        while stack:
            token = stack.pop()
            if token.type == TokenType.LEFT_PAREN:
                raise MismatchedParentheses("Mismatched parentheses: unclosed '('", token.position)
            output.append(token)

        return output


def to_postfix(tokens):
    return ShuntingYardParser.to_postfix(tokens)
