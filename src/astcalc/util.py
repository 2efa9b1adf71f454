from functools import wraps


class CalcError(Exception):
    '''
    Base of everything that can go wrong with a single expression.

    args[0] is always a message fit for the user.
    '''
    pass


class LexError(CalcError):
    def __init__(self, text, position):
        super().__init__("Couldn't lex {0!r} at position {1}".format(text,
                                                                     position),
                         text, position)
        self.text = text
        self.position = position


class ParseError(CalcError):
    '''
    Tokens that don't make up an expression.

    Carries the offending token, None if the input ran out.
    '''
    MESSAGE = 'Bad expression at {0}'

    def __init__(self, token):
        super().__init__(self.MESSAGE.format(_describe(token)), token)
        self.token = token


class UnmatchedParen(ParseError):
    MESSAGE = "Expected ')', got {0}"


class UnexpectedToken(ParseError):
    MESSAGE = 'Unexpected {0}'


class TrailingInput(ParseError):
    MESSAGE = 'Trailing input from {0}'


class EvalError(CalcError):
    pass


class EmptyExpression(EvalError):
    def __init__(self):
        super().__init__('Cannot evaluate an empty expression')


class FactorialOfNonInteger(EvalError):
    def __init__(self, value):
        super().__init__('Cannot take the factorial of {0}'.format(value),
                         value)
        self.value = value


def _describe(token):
    if token is None:
        return 'end of input'
    return '{0} at position {1}'.format(token, token.position)


def wrap_user_errors(fmt):
    '''
    Decorator that converts stray exceptions to CalcErrors.

    Passes through CalcErrors.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except CalcError:
                raise
            except Exception as e:
                raise CalcError(fmt.format(*args, **kwargs), e) from e
        return wrapper
    return decorator
