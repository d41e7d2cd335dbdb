'''
Safe infix calculator.

Evaluates plain old arithmetic typed by people: numbers, + - * / and
parentheses. Never hands anything to eval(); the expression goes through a
lexer, a shunting-yard parser and a stack machine, and either a float or a
CalcError comes out.

Not intended to grow into a language! No unary minus, exponents, functions,
constants or variables.
'''

from .util import (CalcError,
                   InvalidCharacter,
                   InvalidNumber,
                   MismatchedParens,
                   DivisionByZero,
                   InvalidExpression)
from .tokens import Token, Number, Operator, LeftParen, RightParen
from .lexer import Lexer, tokenize
from .parser import Parser, to_postfix
from .machine import Machine, eval_rpn
from .calculator import (evaluate,
                         preview,
                         round_result,
                         convert,
                         format_number,
                         Calculator,
                         Reading)
from .cli import CLI


__all__ = (
    'evaluate', 'preview', 'tokenize', 'to_postfix', 'eval_rpn',
    'round_result', 'convert', 'format_number',
    'Calculator', 'Reading', 'Lexer', 'Parser', 'Machine', 'CLI',
    'Token', 'Number', 'Operator', 'LeftParen', 'RightParen',
    'CalcError', 'InvalidCharacter', 'InvalidNumber', 'MismatchedParens',
    'DivisionByZero', 'InvalidExpression',
)
