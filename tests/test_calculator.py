'''
End to end evaluation and calculator tests
'''

import math

from safecalc.util import (CalcError,
                           InvalidCharacter,
                           InvalidNumber,
                           MismatchedParens,
                           DivisionByZero,
                           InvalidExpression)
from safecalc.calculator import (evaluate,
                                 preview,
                                 round_result,
                                 convert,
                                 format_number,
                                 Calculator)

from pytest import raises, mark, approx


@mark.parametrize('expr, value', [
    ('2+3*4', 14),
    ('(2+3)*4', 20),
    ('8-3-2', 3),
    ('8/4/2', 1),
    ('2*(3+4)*5', 70),
    ('10/4', 2.5),
    ('1.5+.5', 2),
    ('5.', 5),
    ('((7))', 7),
    ('100-2*3+4/2', 96),
    (' 2 *\t( 3+4 ) ', 14),
    ('1 2', 12),
    ('0/5', 0),
    ('0.1+0.2', 0.3),
])
def test_evaluate(expr, value):
    assert evaluate(expr) == approx(value)


@mark.parametrize('expr, error', [
    ('', InvalidExpression),
    ('   ', InvalidExpression),
    ('1+', InvalidExpression),
    ('-1', InvalidExpression),
    ('()', InvalidExpression),
    ('(1+)', InvalidExpression),
    ('1(2)', InvalidExpression),
    ('.', InvalidExpression),
    ('(1+2', MismatchedParens),
    ('1+2)', MismatchedParens),
    ('2*(3', MismatchedParens),
    (')(', MismatchedParens),
    ('5/0', DivisionByZero),
    ('5/(2-2)', DivisionByZero),
    ('1.2.3+1', InvalidNumber),
    ('abc', InvalidCharacter),
    ('2**3', InvalidExpression),
    ('1e5', InvalidCharacter),
])
def test_evaluate_errors(expr, error):
    with raises(error):
        evaluate(expr)


def test_errors_are_calc_errors():
    for error in (InvalidCharacter, InvalidNumber, MismatchedParens,
                  DivisionByZero, InvalidExpression):
        assert issubclass(error, CalcError)


def test_earliest_stage_wins():
    # Lexer errors before parser errors before machine errors.
    with raises(InvalidNumber):
        evaluate('(1.2.3')
    with raises(MismatchedParens):
        evaluate('(5/0')


def test_idempotent():
    assert evaluate('1/3+2*7') == evaluate('1/3+2*7')


def test_round_result():
    assert round_result(0.1 + 0.2) == 0.3
    assert round_result(1.0000005) == 1.000001
    assert round_result(2.5, 0) == 3
    assert round_result(-2.5, 0) == -3
    assert round_result(1 / 3, None) == 1 / 3


def test_round_result_large():
    assert round_result(1e300) == 1e300
    assert round_result(math.inf) == math.inf


def test_convert():
    converted = convert(1000, 0.22)
    assert converted == 220
    assert isinstance(converted, int)
    assert convert(3, 0.5) == 2


def test_format_number():
    assert format_number(14.0) == '14'
    assert format_number(2.5) == '2.5'
    assert format_number(-0.25) == '-0.25'


def test_preview():
    assert preview('1+2') == 3
    assert preview('1+') is None
    assert preview('(1+2') is None
    assert preview('') is None
    assert preview('  ') is None


def test_calculate(calculator):
    reading = calculator.calculate('0.1+0.2')
    assert reading.ok
    assert reading.value == 0.3
    assert reading.display == '0.3'
    assert reading.converted is None


def test_calculate_error(calculator):
    reading = calculator.calculate('5/0')
    assert not reading.ok
    assert isinstance(reading.error, DivisionByZero)
    assert reading.display == 'Error'
    assert reading.converted is None


def test_calculate_with_rate():
    c = Calculator(rate=0.22)
    reading = c.calculate('500*2')
    assert reading.value == 1000
    assert reading.display == '1000'
    assert reading.converted == 220


def test_calculate_error_with_rate():
    c = Calculator(rate=0.22)
    reading = c.calculate('1.2.3')
    assert reading.display == 'Error'
    assert reading.converted == 0


def test_calculator_preview():
    assert Calculator(rate=0.5).preview('3') == 2
    assert Calculator().preview('0.1+0.2') == 0.3
    assert Calculator(rate=0.5).preview('3*') is None
