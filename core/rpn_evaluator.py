"""RPN表达式求值器 - 调用统一的Operators类"""
from core.errors import MalformedExpression
from core.operators import Operators
from core.token_system import TokenType, rpn_to_string


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def evaluate(token_sequence):
        """
        从左到右扫描后缀序列，在值栈上执行。
        Args:
            token_sequence: 后缀 Token 序列
        Returns:
            Decimal 结果
        Raises:
            MalformedExpression: 操作数不足，或结束时栈中不恰好剩一个值
            以及 Operators 抛出的各类求值错误
        """
        stack = []

        for token in token_sequence:
            if token.type == TokenType.NUMBER:
                stack.append(token.value)
                continue

            op_spec = token.operator
            if op_spec is None:
                # 括号不应出现在后缀序列中
                raise MalformedExpression(f"Unexpected token in postfix expression: {token.lexeme}",
                                          token.position)

            if len(stack) < op_spec.arity:
                raise MalformedExpression(f"Insufficient operands for '{token}'", token.position)

            op_method = getattr(Operators, op_spec.name)

            # ================== 一元操作符处理 ==================
            if op_spec.arity == 1:
                operand = stack.pop()
                stack.append(op_method(operand))

            # ================== 二元操作符处理 ==================
            else:
                # 先弹出的是右操作数
                operand2 = stack.pop()
                operand1 = stack.pop()
                stack.append(op_method(operand1, operand2))

        if not stack:
            raise MalformedExpression("Empty expression")
        if len(stack) != 1:
            raise MalformedExpression(f"Invalid expression: {len(stack)} values left after evaluating "
                                      f"'{rpn_to_string(token_sequence)}'")
        return stack[0]


def evaluate(token_sequence):
    return RPNEvaluator.evaluate(token_sequence)
