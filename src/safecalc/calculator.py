'''
Safe evaluation of infix arithmetic, and the calculator built around it.

evaluate() is the whole pipeline: lexer, parser, machine. Nothing is ever
handed to eval().

The rest is for callers that show results to people: rounding away binary
floating point noise, converting with an exchange rate, and previewing an
expression that is still being typed.
'''

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP, localcontext
import logging
import math

from .util import CalcError
from .lexer import tokenize
from .parser import to_postfix
from .machine import eval_rpn


logger = logging.getLogger(__name__)


def evaluate(expr):
    '''
    Evaluate an infix expression of numbers, + - * / and parentheses.

    Raises the first CalcError any stage runs into.
    '''
    tokens = tokenize(expr)
    logger.debug('tokens: %s', ' '.join(map(str, tokens)))
    rpn = to_postfix(tokens)
    logger.debug('rpn: %s', ' '.join(map(str, rpn)))
    result = eval_rpn(rpn)
    logger.debug('result: %r', result)
    return result


def preview(expr):
    '''
    Evaluate an expression that may be half-typed.

    Returns None for a blank or (not yet) valid expression instead of raising.
    '''
    if not expr.strip():
        return None
    try:
        return evaluate(expr)
    except CalcError as e:
        logger.debug('no preview for %r: %s', expr, e)
        return None


def round_result(value, precision=6):
    '''
    Round half up to precision decimal places. None leaves value alone.

    Goes through the shortest repr, so 0.1 + 0.2 rounds to 0.3.
    '''
    if precision is None or not math.isfinite(value):
        return value
    number = Decimal(repr(value))
    with localcontext() as context:
        # Room for every integral digit plus the requested fraction.
        context.prec = max(context.prec, number.adjusted() + precision + 2)
        quantum = Decimal(1).scaleb(-precision)
        return float(number.quantize(quantum, rounding=ROUND_HALF_UP))


def convert(value, rate):
    '''
    Convert value with an exchange rate, rounded to a whole amount.
    '''
    converted = round_result(value * rate, 0)
    return int(converted) if math.isfinite(converted) else converted


def format_number(value):
    '''
    Format a float for display, dropping the fraction of integral ones.
    '''
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return repr(value)


@dataclass(frozen=True)
class Reading:
    '''
    Outcome of one calculation, ready to display.
    '''
    value: float = None
    error: CalcError = None
    converted: float = None

    @property
    def ok(self):
        return self.error is None

    @property
    def display(self):
        if not self.ok:
            return Calculator.ERROR
        return format_number(self.value)


class Calculator:
    '''
    Calculator as people use it: rounded results, optional conversion.

    :param precision: Decimal places results are rounded to. None to disable.
    :param rate: Exchange rate results are converted with. None to disable.
    '''

    DEFAULT_PRECISION = 6
    DEFAULT_RATE = None
    ERROR = 'Error'

    def __init__(self, precision=DEFAULT_PRECISION, rate=DEFAULT_RATE):
        self.precision = precision
        self.rate = rate

    def calculate(self, expr):
        '''
        Evaluate expr into a Reading. User errors end up in the Reading.
        '''
        try:
            value = round_result(evaluate(expr), self.precision)
        except CalcError as e:
            return Reading(error=e,
                           converted=None if self.rate is None else 0)
        converted = None if self.rate is None else convert(value, self.rate)
        return Reading(value=value, converted=converted)

    def preview(self, expr):
        '''
        Converted amount (or rounded value, without a rate) of a maybe
        half-typed expression, or None.
        '''
        value = preview(expr)
        if value is None:
            return None
        value = round_result(value, self.precision)
        if self.rate is None:
            return value
        return convert(value, self.rate)
