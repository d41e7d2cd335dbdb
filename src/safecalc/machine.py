from collections import deque
import operator

from .util import InvalidExpression, DivisionByZero, wrap_user_errors
from .tokens import PRECEDENCE, Number, Operator


class Machine:
    '''
    Arithmetic stack machine.

    Takes postfix tokens and runs them. Meant to be used for a single run;
    make a new one for each expression.
    '''

    # Arithmetic operators on the items of a machine.
    BUILTINS = {
        '+': operator.__add__,
        '-': operator.__sub__,
        '*': operator.__mul__,
        '/': operator.__truediv__,
    }

    assert BUILTINS.keys() == PRECEDENCE.keys()

    def __init__(self):
        '''
        Create empty stack machine.
        '''
        self.stack = deque()

    def run(self, tokens):
        '''
        Feed all tokens, then return the one value left on the stack.
        '''
        for token in tokens:
            self.feed(token)
        if len(self.stack) != 1:
            raise InvalidExpression('{0} element(s) left on stack, '
                                    'expected 1'.format(len(self.stack)))
        return self.stack[-1]

    def feed(self, token):
        '''
        Stack a number, or apply an operator to the stack.
        '''
        if isinstance(token, Number):
            self._pshstack(self._iconvert(token.text))
        elif isinstance(token, Operator):
            self._apply(token.symbol)
        else:
            raise InvalidExpression('Cannot run {0!r}'.format(token))

    def _apply(self, symbol):
        '''
        Apply a binary operator to the two elements on top of the stack.
        '''
        # Topmost is the right-hand side. Swap them and 8 3 - gives -5.
        right, left = self._popstack(n=2)
        if symbol == '/' and right == 0:
            raise DivisionByZero('Division by zero: {0} / {1}'
                                 .format(left, right))
        self._pshstack(type(self).BUILTINS[symbol](left, right))

    @wrap_user_errors(InvalidExpression, 'Cannot convert {1}')
    def _iconvert(self, number):
        '''
        Convert numeral to internal representation on input.
        '''
        return float(number)

    def _pshstack(self, *new):
        '''
        Push all elements onto stack, leftmost at the bottom.
        '''
        self.stack.extend(new)

    def _popstack(self, n=1):
        '''
        Pop specified number of args from stack, topmost first.
        '''
        if len(self.stack) < n:
            raise InvalidExpression('Less than {} element(s) on stack'
                                    .format(n))
        return [self.stack.pop() for _ in range(n)]


def eval_rpn(tokens):
    '''
    Evaluate postfix tokens on a fresh machine. See Machine.run.
    '''
    return Machine().run(tokens)
