from functools import wraps


class CalcError(Exception):
    pass


def wrap_user_errors(fmt):
    '''
    Decorator that converts unexpected exceptions into CalcErrors.

    Passes through CalcErrors. The message is fmt formatted with the call's
    arguments.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except CalcError:
                raise
            except Exception as e:
                raise CalcError(fmt.format(*args, **kwargs), e)
        return wrapper
    return decorator
