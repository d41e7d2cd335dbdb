from collections import deque

from .util import InvalidExpression, MismatchedParens
from .tokens import Number, Operator, LeftParen, RightParen


class Parser:
    '''
    Infix to postfix (RPN) converter, after Dijkstra's shunting-yard.

    Only looks at the shape of the token sequence; numerals are the machine's
    business.
    '''

    def parse(self, tokens):
        '''
        Reorder infix tokens into postfix. No parentheses survive.
        '''
        output = []
        # Operators and left parentheses not yet placed.
        stack = deque()
        for token in tokens:
            if isinstance(token, Number):
                output.append(token)
            elif isinstance(token, Operator):
                # >=, not >: left-associative, so 8-3-2 is (8-3)-2.
                while stack and isinstance(stack[-1], Operator) and \
                      stack[-1].precedence >= token.precedence:
                    output.append(stack.pop())
                stack.append(token)
            elif isinstance(token, LeftParen):
                stack.append(token)
            elif isinstance(token, RightParen):
                self._close(stack, output)
            else:
                raise InvalidExpression('Cannot parse {0!r}'.format(token))
        while stack:
            top = stack.pop()
            if isinstance(top, LeftParen):
                raise MismatchedParens('Unmatched (')
            output.append(top)
        return output

    def _close(self, stack, output):
        '''
        Pop operators to output down to the matching left parenthesis.
        '''
        while stack and not isinstance(stack[-1], LeftParen):
            output.append(stack.pop())
        if not stack:
            raise MismatchedParens('Unmatched )')
        stack.pop()


def to_postfix(tokens):
    '''
    Convert infix tokens to postfix. See Parser.parse.
    '''
    return Parser().parse(tokens)
