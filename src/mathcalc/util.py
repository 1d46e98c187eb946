from functools import wraps


class CalculatorError(Exception):
    pass


class EmptyStackError(CalculatorError, IndexError):
    pass


class UnknownStackError(CalculatorError, KeyError):
    # KeyError reprs its message; keep it readable.
    def __str__(self):
        return str(self.args[0]) if self.args else ''


class InvalidStackNameError(CalculatorError, ValueError):
    pass


def wrap_user_errors(fmt, error=CalculatorError, catch=Exception):
    '''
    Decorator that converts low-level exceptions into calculator errors.

    Passes through CalculatorErrors. The message is formatted from the
    wrapped call's arguments; the original exception is kept as the cause.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except CalculatorError:
                raise
            except catch as e:
                raise error(fmt.format(*args, **kwargs)) from e
        return wrapper
    return decorator
