'''
Evaluate expression trees to floats.

Python's float operations and math module raise where IEEE 754 would produce
an infinity or NaN; the wrappers here give back the IEEE result instead.
'''

from functools import wraps
import math
import operator

from .tree import (BinaryOp, BinaryOperator, EndMarker, Number, UnaryOp,
                   UnaryOperator)
from .util import EmptyExpression, FactorialOfNonInteger


# Largest n with n! below the float maximum.
MAX_FACTORIAL = 170


def _nan_on_domain_error(f):
    '''
    Return NaN where f raises ValueError, e.g. sin(inf).
    '''
    @wraps(f)
    def wrapped(x):
        try:
            return f(x)
        except ValueError:
            return math.nan
    return wrapped


def _is_odd_integer(x):
    return math.isfinite(x) and x.is_integer() and x % 2 == 1


def divide(left, right):
    if right == 0:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


def power(base, exponent):
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        # pow(±0, negative) is a pole, anything else is outside the domain.
        if base == 0:
            if _is_odd_integer(exponent):
                return math.copysign(math.inf, base)
            return math.inf
        return math.nan


def exp(x):
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


def log(x):
    try:
        return math.log(x)
    except ValueError:
        return -math.inf if x == 0 else math.nan


def factorial(x):
    '''
    Factorial of an integral float. Saturates to inf past MAX_FACTORIAL.

    Negative integers count as 0, so their factorial is 1.
    '''
    if not math.isfinite(x) or not x.is_integer():
        raise FactorialOfNonInteger(x)
    n = max(int(x), 0)
    if n > MAX_FACTORIAL:
        return math.inf
    return float(math.factorial(n))


BINARY = {
    BinaryOperator.PLUS: operator.__add__,
    BinaryOperator.MINUS: operator.__sub__,
    BinaryOperator.MULTIPLY: operator.__mul__,
    BinaryOperator.DIVIDE: divide,
    BinaryOperator.POWER: power,
}

UNARY = {
    UnaryOperator.NEGATE: operator.__neg__,
    UnaryOperator.SIN: _nan_on_domain_error(math.sin),
    UnaryOperator.COS: _nan_on_domain_error(math.cos),
    UnaryOperator.TAN: _nan_on_domain_error(math.tan),
    UnaryOperator.EXP: exp,
    UnaryOperator.LOG: log,
    UnaryOperator.FACTORIAL: factorial,
}


def evaluate(expression):
    '''
    Evaluate expression tree, IEEE double semantics throughout.

    Raises EmptyExpression upon reaching an end marker, and
    FactorialOfNonInteger for e.g. 2.5!.
    '''
    if isinstance(expression, Number):
        return expression.value
    elif isinstance(expression, BinaryOp):
        return BINARY[expression.op](evaluate(expression.left),
                                     evaluate(expression.right))
    elif isinstance(expression, UnaryOp):
        return UNARY[expression.op](evaluate(expression.operand))
    elif isinstance(expression, EndMarker):
        raise EmptyExpression()
    raise TypeError('Not an expression: {0!r}'.format(expression))
