from functools import reduce
import operator

import regex

from .util import InvalidCharacter, InvalidNumber
from .tokens import PRECEDENCE, Number, Operator, LeftParen, RightParen


class Lexer:
    '''
    Lexer for the infix arithmetic *regular* grammar.

    For consistency with the parser and machine, needs to be instantiated,
    despite holding no internal state.
    '''
    # Any run of digits and dots. 1.2.3 is one numeral, rejected in token(),
    # not 1.2 followed by .3.
    NUMBER = r'''
              [0-9.]+
              '''
    OPERATOR = r'(?:' + r'|'.join(map(regex.escape, PRECEDENCE)) + r')'
    LEFT = r'\('
    RIGHT = r'\)'
    SPACE = r'\s+'

    # All possible lexemes.
    LEXEME = r'(?<number>' + NUMBER + r')|' \
             r'(?<operator>' + OPERATOR + r')|' \
             r'(?<left>' + LEFT + r')|' \
             r'(?<right>' + RIGHT + r')'
    # Anything outside the alphabet of the grammar, whitespace included.
    FOREIGN = r'[^0-9.()+\-*/\s]'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.POSIX,
                    regex.DOTALL,
                    regex.VERSION1,
                    regex.VERBOSE},
                   0)

    assert not [symbol
                for symbol
                in PRECEDENCE
                if len(symbol) != 1]
    assert regex.search(FOREIGN, ''.join(PRECEDENCE), flags=FLAGS) is None

    def lex(self, line):
        '''
        Take a line and return all its tokens, in order.

        All or nothing: raises on the first bad character or numeral.
        '''
        foreign = regex.search(type(self).FOREIGN, line,
                               flags=type(self).FLAGS)
        if foreign is not None:
            raise InvalidCharacter('Invalid character {0!r}'
                                   .format(foreign.group(0)))
        line = regex.sub(type(self).SPACE, '', line, flags=type(self).FLAGS)
        return list(self._scan(line))

    def _scan(self, line):
        '''
        Yield tokens of a line already stripped of whitespace.
        '''
        pos = 0
        while pos < len(line):
            match = regex.match(type(self).LEXEME, line, pos=pos,
                                flags=type(self).FLAGS)
            if match is None:
                raise InvalidCharacter("Couldn't lex {0}".format(line[pos:]))
            yield self.token(self.matchedgroups(match))
            pos = match.end()

    def token(self, groups):
        '''
        Make a token out of the matched groups of one lexeme.
        '''
        if 'number' in groups:
            numeral = groups['number']
            if numeral.count('.') > 1:
                raise InvalidNumber('Invalid number {0}'.format(numeral))
            return Number(numeral)
        elif 'operator' in groups:
            return Operator(groups['operator'])
        elif 'left' in groups:
            return LeftParen()
        elif 'right' in groups:
            return RightParen()
        raise InvalidCharacter("Couldn't lex {0!r}".format(groups))

    def matchedgroups(self, match):
        '''
        Return the groups a lexeme match actually matched.
        '''
        return {key: value
                for key, value
                in match.groupdict().items()
                if value}


def tokenize(expr):
    '''
    Split an infix expression into tokens. See Lexer.lex.
    '''
    return Lexer().lex(expr)
