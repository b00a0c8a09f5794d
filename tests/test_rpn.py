import unittest
from lexcalc.errors import ConfigurationError, MalformedExpressionError
from lexcalc.scripting.rpn import *
from lexcalc.tokenization.token import Token

def num(text, pos=0):
    return Token(pos, TokenId.NUMBER, text)

def op(token_id, pos=0):
    text = {TokenId.OP_PLUS: '+', TokenId.OP_MINUS: '-', TokenId.OP_MUL: '*', TokenId.OP_DIV: '/'}[token_id]
    return Token(pos, token_id, text)

def postfix(expression):
    return ' '.join(t.text for t in parse(expression))

class TestGrammar(unittest.TestCase):
    def test_tokens(self):
        tokens = list(scan('12 + 3*4'))
        self.assertEqual([t.type for t in tokens], [
            TokenId.NUMBER, TokenId.SPACE, TokenId.OP_PLUS, TokenId.SPACE,
            TokenId.NUMBER, TokenId.OP_MUL, TokenId.NUMBER])
        self.assertEqual([t.position for t in tokens], [0, 2, 3, 4, 5, 6, 7])

    def test_no_leading_zero(self):
        tokenizer = scan('0')
        self.assertEqual(list(tokenizer), [])
        self.assertTrue(tokenizer.failed)

    def test_spaces_removed(self):
        self.assertEqual([t.type for t in significant(scan(' 1  +\t2 '))],
                         [TokenId.NUMBER, TokenId.OP_PLUS, TokenId.NUMBER])

class TestParse(unittest.TestCase):
    def test_empty(self):
        self.assertEqual(list(parse('')), [])

    def test_single_number(self):
        self.assertEqual(list(parse('42')), [Token(0, TokenId.NUMBER, '42')])

    def test_same_tier_is_left_to_right(self):
        self.assertEqual(postfix('1 + 2 + 3 + 4'), '1 2 + 3 + 4 +')
        self.assertEqual(postfix('1 - 2 + 3 - 4'), '1 2 - 3 + 4 -')
        self.assertEqual(postfix('8 / 2 / 2'), '8 2 / 2 /')

    def test_mul_binds_tighter(self):
        self.assertEqual(postfix('1 * 2 + 3 * 4'), '1 2 * 3 4 * +')
        self.assertEqual(postfix('1 + 2 * 3 + 4'), '1 2 3 * + 4 +')
        self.assertEqual(postfix('1 + 2 * 3'), '1 2 3 * +')

    def test_lazy(self):
        notation = parse('1 + 2')
        self.assertEqual(next(notation).text, '1')
        self.assertEqual(next(notation).text, '2')
        self.assertEqual(next(notation).text, '+')
        with self.assertRaises(StopIteration):
            next(notation)

    def test_stops_at_unknown_character(self):
        self.assertEqual(postfix('1 + 2 ? 3'), '1 2 +')

    def test_none(self):
        with self.assertRaises(ConfigurationError):
            parse(None)

    def test_custom_precedence(self):
        # Single tier: everything left to right
        tokens = [num('1'), op(TokenId.OP_PLUS), num('2'), op(TokenId.OP_MUL), num('3')]
        flat = {t: 1 for t in op_map}
        self.assertEqual(' '.join(t.text for t in to_postfix(tokens, flat)), '1 2 + 3 *')

    def test_unknown_operator(self):
        tokens = [num('1'), Token(1, 'pow', '^'), num('2'), op(TokenId.OP_PLUS), num('3')]
        with self.assertRaises(MalformedExpressionError):
            list(to_postfix(tokens))

    def test_lone_unknown_operator(self):
        tokens = [num('1'), Token(1, 'pow', '^'), num('2')]
        with self.assertRaises(MalformedExpressionError):
            list(to_postfix(tokens))

class TestCalc(unittest.TestCase):
    def test_empty(self):
        self.assertEqual(calc([]), 0)
        self.assertEqual(calc(parse('')), 0)

    def test_single(self):
        self.assertEqual(calc([num('7')]), 7)

    def test_operand_order(self):
        self.assertEqual(calc([num('5'), num('2'), op(TokenId.OP_MINUS)]), 3)
        self.assertEqual(calc([num('8'), num('2'), op(TokenId.OP_DIV)]), 4)

    def test_operators(self):
        self.assertEqual(calc([num('5'), num('2'), op(TokenId.OP_PLUS)]), 7)
        self.assertEqual(calc([num('5'), num('2'), op(TokenId.OP_MUL)]), 10)

    def test_truncating_division(self):
        self.assertEqual(calc(parse('7 / 2')), 3)
        self.assertEqual(calc(parse('1 - 8 / 3')), -1)
        self.assertEqual(truncating_div(-7, 2), -3)
        self.assertEqual(truncating_div(7, -2), -3)
        self.assertEqual(truncating_div(-7, -2), 3)
        self.assertEqual(truncating_div(0, 5), 0)

    def test_division_by_zero(self):
        with self.assertRaises(ZeroDivisionError):
            calc([num('5'), Token(1, TokenId.NUMBER, '0'), op(TokenId.OP_DIV)])

    def test_missing_operand(self):
        with self.assertRaises(MalformedExpressionError):
            calc([num('5'), op(TokenId.OP_PLUS)])
        with self.assertRaises(MalformedExpressionError):
            calc(parse('1 +'))
        with self.assertRaises(ArithmeticError):
            calc([op(TokenId.OP_MUL)])

    def test_surplus_operands(self):
        with self.assertRaises(MalformedExpressionError):
            calc([num('1'), num('2')])
        with self.assertRaises(MalformedExpressionError):
            calc(parse('1 2'))

    def test_unknown_operator(self):
        with self.assertRaises(MalformedExpressionError):
            calc([num('1'), num('2'), Token(2, TokenId.SPACE, ' ')])
