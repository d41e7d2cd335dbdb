from functools import wraps


class CalcError(Exception):
    '''
    Base of all user errors. args[0] is a message fit to show the user.
    '''
    pass


class InvalidCharacter(CalcError):
    pass


class InvalidNumber(CalcError):
    pass


class MismatchedParens(CalcError):
    pass


class DivisionByZero(CalcError):
    pass


class InvalidExpression(CalcError):
    pass


def wrap_user_errors(error, fmt):
    '''
    Decorator that converts unexpected exceptions to the given CalcError.

    Passes through CalcErrors. The original exception is kept as __cause__.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except CalcError:
                raise
            except Exception as e:
                raise error(fmt.format(*args, **kwargs)) from e
        return wrapper
    return decorator
