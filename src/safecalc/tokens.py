'''
Tokens of the infix arithmetic grammar.

The lexer creates them, the parser reorders them, the machine consumes them.
'''

from dataclasses import dataclass


# Higher binds tighter. All of them are left-associative.
PRECEDENCE = {
    '+': 1,
    '-': 1,
    '*': 2,
    '/': 2,
}


class Token:
    '''
    Base of all lexemes.
    '''
    __slots__ = ()


@dataclass(frozen=True)
class Number(Token):
    '''
    Numeral, still as source text. The machine converts it.
    '''
    text: str

    def __str__(self):
        return self.text


@dataclass(frozen=True)
class Operator(Token):
    symbol: str

    def __post_init__(self):
        if self.symbol not in PRECEDENCE:
            raise ValueError('No such operator {0!r}'.format(self.symbol))

    @property
    def precedence(self):
        return PRECEDENCE[self.symbol]

    def __str__(self):
        return self.symbol


@dataclass(frozen=True)
class LeftParen(Token):
    def __str__(self):
        return '('


@dataclass(frozen=True)
class RightParen(Token):
    def __str__(self):
        return ')'
