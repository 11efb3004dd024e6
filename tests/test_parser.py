import unittest

from core.errors import MismatchedParentheses, InvalidOperatorSequence
from core.parser import to_postfix
from core.token_system import Token, rpn_to_string
from core.tokenizer import tokenize


def rpn(text):
    return rpn_to_string(to_postfix(tokenize(text)))


class TestShuntingYard(unittest.TestCase):
    def test_precedence(self):
        self.assertEqual(rpn("2+3*4"), "2 3 4 * +")
        self.assertEqual(rpn("(2+3)*4"), "2 3 + 4 *")

    def test_left_associativity(self):
        self.assertEqual(rpn("8-3-2"), "8 3 - 2 -")
        self.assertEqual(rpn("8/4%3"), "8 4 / 3 %")

    def test_power_is_right_associative(self):
        self.assertEqual(rpn("2^3^2"), "2 3 2 ^ ^")

    def test_unary_binds_looser_than_power(self):
        self.assertEqual(rpn("-2^2"), "2 2 ^ u-")

    def test_unary_chain(self):
        self.assertEqual(rpn("--5"), "5 u- u-")

    def test_unary_in_exponent(self):
        self.assertEqual(rpn("2^-3"), "2 3 u- ^")

    def test_unary_after_binary(self):
        self.assertEqual(rpn("2*-3"), "2 3 u- *")
        self.assertEqual(rpn("-2+3"), "2 u- 3 +")

    def test_redundant_parentheses_removed(self):
        self.assertEqual(rpn("((2+3))"), rpn("2+3"))

    def test_unmatched_right_paren(self):
        with self.assertRaises(MismatchedParentheses):
            rpn("2+3)")

    def test_unclosed_left_paren(self):
        with self.assertRaises(MismatchedParentheses):
            rpn("(2+3")

    def test_consecutive_binary_operators(self):
        with self.assertRaises(InvalidOperatorSequence):
            rpn("2+*3")

    def test_leading_binary_operator(self):
        with self.assertRaises(InvalidOperatorSequence):
            rpn("*3")

    def test_trailing_operator(self):
        with self.assertRaises(InvalidOperatorSequence):
            rpn("2+")
        with self.assertRaises(InvalidOperatorSequence):
            rpn("-")

    def test_operator_before_right_paren(self):
        with self.assertRaises(InvalidOperatorSequence):
            rpn("(2+)")

    def test_hand_built_tokens_validated(self):
        # 不经过 Tokenizer 构造的错误分类也要被拒绝
        tokens = [Token.number("2"), Token.unary("-"), Token.number("3")]
        with self.assertRaises(InvalidOperatorSequence):
            to_postfix(tokens)
        tokens = [Token.binary("-"), Token.number("3")]
        with self.assertRaises(InvalidOperatorSequence):
            to_postfix(tokens)

    def test_empty_input(self):
        self.assertEqual(to_postfix([]), [])

    def test_adjacent_operands_left_to_evaluator(self):
        self.assertEqual(rpn("2 3"), "2 3")


if __name__ == "__main__":
    unittest.main()
