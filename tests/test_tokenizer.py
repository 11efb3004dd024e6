import unittest
from decimal import Decimal

from core.errors import MalformedNumber, UnexpectedCharacter
from core.token_system import Token, TokenType, OPERATOR_DEFINITIONS, Associativity
from core.tokenizer import tokenize


def kinds(tokens):
    return [t.type for t in tokens]


class TestTokenSystem(unittest.TestCase):
    def test_number_token_parses_eagerly(self):
        tk = Token.number("12.50")
        self.assertEqual(tk.value, Decimal("12.50"))

    def test_number_token_rejects_bad_literal(self):
        for lexeme in (".", "1.2.3", "1e5", "NaN", "", "-1"):
            with self.subTest(lexeme=lexeme):
                with self.assertRaises(MalformedNumber):
                    Token.number(lexeme)

    def test_non_number_tokens_have_no_value(self):
        self.assertIsNone(Token.binary("+").value)
        self.assertIsNone(Token.left_paren().value)

    def test_unknown_operator_rejected(self):
        with self.assertRaises(ValueError):
            Token.unary("*")

    def test_tokens_are_immutable(self):
        tk = Token.number("1")
        with self.assertRaises(AttributeError):
            tk.lexeme = "2"

    def test_position_not_part_of_equality(self):
        self.assertEqual(Token.binary("+", 0), Token.binary("+", 7))

    def test_operator_table(self):
        self.assertEqual(OPERATOR_DEFINITIONS[('+', 2)].precedence, 1)
        self.assertEqual(OPERATOR_DEFINITIONS[('%', 2)].precedence, 2)
        self.assertEqual(OPERATOR_DEFINITIONS[('-', 1)].precedence, 3)
        self.assertEqual(OPERATOR_DEFINITIONS[('^', 2)].precedence, 4)
        self.assertEqual(OPERATOR_DEFINITIONS[('^', 2)].associativity, Associativity.RIGHT)
        self.assertEqual(OPERATOR_DEFINITIONS[('-', 1)].arity, 1)
        with self.assertRaises(TypeError):
            OPERATOR_DEFINITIONS[('&', 2)] = None

    def test_unary_and_binary_share_lexeme(self):
        self.assertEqual(Token.unary("-").operator.arity, 1)
        self.assertEqual(Token.binary("-").operator.arity, 2)
        self.assertIsNone(Token.number("1").operator)


class TestTokenizer(unittest.TestCase):
    def test_simple_expression(self):
        tokens = tokenize("2 + 3*4")
        self.assertEqual([t.lexeme for t in tokens], ["2", "+", "3", "*", "4"])
        self.assertEqual(kinds(tokens), [TokenType.NUMBER, TokenType.OPERATOR, TokenType.NUMBER,
                                         TokenType.OPERATOR, TokenType.NUMBER])

    def test_whitespace_skipped(self):
        self.assertEqual(tokenize("  \t "), [])
        self.assertEqual(tokenize(""), [])
        self.assertEqual(tokenize(None), [])

    def test_unary_at_start_and_after_operator(self):
        tokens = tokenize("-2*-3")
        self.assertEqual(kinds(tokens), [TokenType.UNARY_OPERATOR, TokenType.NUMBER, TokenType.OPERATOR,
                                         TokenType.UNARY_OPERATOR, TokenType.NUMBER])

    def test_unary_after_left_paren_and_chained(self):
        tokens = tokenize("(--5)")
        self.assertEqual(kinds(tokens), [TokenType.LEFT_PAREN, TokenType.UNARY_OPERATOR,
                                         TokenType.UNARY_OPERATOR, TokenType.NUMBER,
                                         TokenType.RIGHT_PAREN])

    def test_binary_after_number_and_right_paren(self):
        tokens = tokenize("(1)-2-3")
        self.assertEqual(tokens[3].type, TokenType.OPERATOR)
        self.assertEqual(tokens[5].type, TokenType.OPERATOR)

    def test_decimal_literals(self):
        tokens = tokenize(".5 + 5.")
        self.assertEqual(tokens[0].value, Decimal("0.5"))
        self.assertEqual(tokens[2].value, Decimal("5"))

    def test_positions_recorded(self):
        tokens = tokenize("12 + 3")
        self.assertEqual([t.position for t in tokens], [0, 3, 5])

    def test_multiple_decimal_points(self):
        with self.assertRaises(MalformedNumber):
            tokenize("2..3")
        with self.assertRaises(MalformedNumber):
            tokenize("1.2.3 + 4")

    def test_lone_decimal_point(self):
        with self.assertRaises(MalformedNumber):
            tokenize("1 + .")

    def test_unexpected_character(self):
        with self.assertRaises(UnexpectedCharacter) as ctx:
            tokenize("2 + x")
        self.assertEqual(ctx.exception.position, 4)
        self.assertEqual(ctx.exception.kind, "UnexpectedCharacter")

    def test_non_ascii_digit_rejected(self):
        with self.assertRaises(UnexpectedCharacter):
            tokenize("٣+1")


if __name__ == "__main__":
    unittest.main()
