'''
Evaluator tests
'''

import math

import regex

from astcalc.cli import calculate
from astcalc.evaluator import evaluate, divide, power, factorial
from astcalc.tree import EndMarker, Number, UnaryOp, UnaryOperator
from astcalc.util import (CalcError, EmptyExpression, EvalError,
                          FactorialOfNonInteger)

from pytest import approx, raises


def test_calc1():
    assert calculate('sin(4) + exp(3 - 1)^3') == 402.67199099742726


def test_calc2():
    assert calculate('-2 + 4 * -(5^3 + 7 * 3!)') == -670.0


def test_calc3():
    assert calculate('sin(3.14159) + cos(3.14159) + exp(0)^2 - ln(1)/2') == \
        approx(0.0000026535933140836576, rel=1e-9)


def test_calc4():
    assert calculate('tan(-4--4) / ln(4)') == 0.0


def test_calc5():
    assert calculate('ln(exp(-4/5))') == -0.8


def test_precedence():
    assert calculate('2+3*4') == 14.0
    assert calculate('2^3^2') == 512.0
    assert calculate('8-4-2') == 2.0
    assert calculate('3!^2') == 36.0


def test_idempotent(tree):
    expression = tree('sin(4) + exp(3 - 1)^3 / 7!')
    assert evaluate(expression) == evaluate(expression)


def test_empty(tree):
    with raises(EmptyExpression):
        evaluate(tree(''))
    with raises(EvalError, match='empty'):
        calculate('2 *')


def test_factorial():
    assert calculate('0!') == 1.0
    assert calculate('5!') == 120.0
    assert calculate('20!') == 2432902008176640000.0
    assert calculate('(2 - 5)!') == 1.0
    assert calculate('170!') == float(math.factorial(170))


def test_factorial_saturates():
    assert calculate('171!') == math.inf
    assert factorial(1e300) == math.inf


def test_factorial_of_non_integer():
    with raises(FactorialOfNonInteger,
                match=regex.escape('Cannot take the factorial of 2.5')):
        calculate('2.5!')
    with raises(FactorialOfNonInteger):
        evaluate(UnaryOp(UnaryOperator.FACTORIAL, Number(math.inf)))
    with raises(FactorialOfNonInteger):
        evaluate(UnaryOp(UnaryOperator.FACTORIAL, Number(math.nan)))


def test_division_by_zero():
    assert calculate('1/0') == math.inf
    assert calculate('-1/0') == -math.inf
    assert calculate('1/-0') == -math.inf
    assert math.isnan(calculate('0/0'))
    assert math.isnan(divide(math.nan, 0.0))


def test_power():
    assert calculate('0^0') == 1.0
    assert calculate('4^0.5') == 2.0
    assert calculate('2^-1') == 0.5
    assert calculate('0^-1') == math.inf
    assert power(-0.0, -1.0) == -math.inf
    assert power(-0.0, -2.0) == math.inf
    assert calculate('10^400') == math.inf
    assert calculate('-10^401') == -math.inf
    assert math.isnan(calculate('-8^(1/3)'))


def test_transcendental_edges():
    assert calculate('ln(0)') == -math.inf
    assert math.isnan(calculate('ln(-1)'))
    assert calculate('exp(1000)') == math.inf
    assert calculate('exp(-1000)') == 0.0
    assert math.isnan(calculate('sin(10^400)'))
    assert math.isnan(calculate('cos(1/0)'))
    assert math.isnan(calculate('tan(-1/0)'))


def test_infinity_propagates():
    assert calculate('1/0 + 1') == math.inf
    assert math.isnan(calculate('1/0 - 1/0'))
    assert math.isnan(calculate('0 * exp(1000)'))


def test_not_an_expression():
    with raises(TypeError):
        evaluate(3.0)


def test_deep_nesting_is_a_calc_error():
    with raises(CalcError):
        calculate('(' * 100000 + '1' + ')' * 100000)


def test_end_marker_evaluates_nowhere():
    with raises(EmptyExpression):
        evaluate(UnaryOp(UnaryOperator.NEGATE, EndMarker()))
