'''
Expression trees, as built by the parser.

Every node is immutable and owns its children outright; no node is ever
shared between two parents.
'''

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
import math

from .lexer import TokenKind
from .util import UnexpectedToken


# Narrowest display cell, wide enough for any operator label.
MIN_LABEL_LENGTH = 3


class BinaryOperator(Enum):
    PLUS = '+'
    MINUS = '-'
    MULTIPLY = '*'
    DIVIDE = '/'
    POWER = '^'

    @classmethod
    def from_token(cls, token):
        try:
            return _BINARY_TOKENS[token.kind]
        except KeyError:
            raise UnexpectedToken(token) from None


class UnaryOperator(Enum):
    NEGATE = '-'
    SIN = 'sin'
    COS = 'cos'
    TAN = 'tan'
    EXP = 'exp'
    LOG = 'log'
    FACTORIAL = '!'

    @classmethod
    def from_token(cls, token):
        try:
            return _UNARY_TOKENS[token.kind]
        except KeyError:
            raise UnexpectedToken(token) from None


_BINARY_TOKENS = {
    TokenKind.PLUS: BinaryOperator.PLUS,
    TokenKind.MINUS: BinaryOperator.MINUS,
    TokenKind.MULTIPLY: BinaryOperator.MULTIPLY,
    TokenKind.DIVIDE: BinaryOperator.DIVIDE,
    TokenKind.POWER: BinaryOperator.POWER,
}
_UNARY_TOKENS = {
    TokenKind.MINUS: UnaryOperator.NEGATE,
    TokenKind.SIN: UnaryOperator.SIN,
    TokenKind.COS: UnaryOperator.COS,
    TokenKind.TAN: UnaryOperator.TAN,
    TokenKind.EXP: UnaryOperator.EXP,
    TokenKind.LOG: UnaryOperator.LOG,
    TokenKind.FACTORIAL: UnaryOperator.FACTORIAL,
}


def format_number(value):
    '''
    Format float in plain positional notation, shortest round-trip digits.

    Integral values lose their trailing .0: 4, 0.8, 100000000000000000000.
    '''
    if math.isnan(value):
        return 'NaN'
    elif math.isinf(value):
        return 'inf' if value > 0 else '-inf'
    text = repr(value)
    if 'e' in text:
        text = format(Decimal(text), 'f')
    if text.endswith('.0'):
        text = text[:-2]
    return text


class Expression:
    '''
    Base of all expression tree nodes.
    '''

    def children(self):
        return ()

    def label(self):
        '''
        Text shown for this node when rendering.
        '''
        raise NotImplementedError

    def width(self):
        '''
        Number of display cells needed to lay out the tree.
        '''
        raise NotImplementedError

    def max_label_length(self):
        '''
        Longest label in the tree, at least MIN_LABEL_LENGTH.
        '''
        return max([MIN_LABEL_LENGTH, len(self.label())] +
                   [child.max_label_length() for child in self.children()])


@dataclass(frozen=True)
class BinaryOp(Expression):
    op: BinaryOperator
    left: Expression
    right: Expression

    def children(self):
        return self.left, self.right

    def label(self):
        return self.op.value

    def width(self):
        return self.left.width() + self.right.width() + 3


@dataclass(frozen=True)
class UnaryOp(Expression):
    op: UnaryOperator
    operand: Expression

    def children(self):
        return self.operand,

    def label(self):
        return self.op.value

    def width(self):
        return self.operand.width()


@dataclass(frozen=True)
class Number(Expression):
    value: float

    def label(self):
        return format_number(self.value)

    def width(self):
        return 1


@dataclass(frozen=True)
class EndMarker(Expression):
    '''
    No expression at all, e.g. from an empty line.
    '''

    def label(self):
        return ''

    def width(self):
        return 0

    def max_label_length(self):
        return 0
