'''
Shunting-yard parser tests
'''

import regex

from safecalc.util import InvalidExpression, MismatchedParens
from safecalc.tokens import Number, Operator, LeftParen, RightParen
from safecalc.lexer import tokenize
from safecalc.parser import Parser, to_postfix

from pytest import raises, mark


def rpn(expr):
    return ' '.join(map(str, to_postfix(tokenize(expr))))


@mark.parametrize('expr, postfix', [
    ('1', '1'),
    ('2+3*4', '2 3 4 * +'),
    ('2*3+4', '2 3 * 4 +'),
    ('(2+3)*4', '2 3 + 4 *'),
    ('8-3-2', '8 3 - 2 -'),
    ('8/4/2', '8 4 / 2 /'),
    ('8-(3-2)', '8 3 2 - -'),
    ('1+2*3-4/5', '1 2 3 * + 4 5 / -'),
    ('((7))', '7'),
])
def test_postfix_order(expr, postfix):
    assert rpn(expr) == postfix


def test_no_parentheses_survive():
    p = Parser()
    output = p.parse([LeftParen(), Number('1'), Operator('+'), Number('2'),
                      RightParen()])
    assert output == [Number('1'), Number('2'), Operator('+')]


def test_unmatched_left():
    with raises(MismatchedParens, match=regex.escape('Unmatched (')):
        rpn('(1+2')


def test_unmatched_right():
    with raises(MismatchedParens, match=regex.escape('Unmatched )')):
        rpn('1+2)')


def test_right_before_left():
    with raises(MismatchedParens):
        rpn(')(')


def test_shape_only():
    # Operand counts are the machine's problem.
    assert rpn('1+') == '1 +'
    assert rpn('()') == ''


def test_unknown_token():
    with raises(InvalidExpression, match=regex.escape("Cannot parse '1'")):
        to_postfix(['1'])
