'''
Operator precedence (Pratt) parser.

See https://matklad.github.io/2020/04/13/simple-but-powerful-pratt-parsing.html
'''

from .lexer import Lexer, TokenKind
from .tree import (BinaryOp, BinaryOperator, EndMarker, Number, UnaryOp,
                   UnaryOperator)
from .util import TrailingInput, UnexpectedToken, UnmatchedParen


class TokenStream:
    '''
    Cursor over tokens with one token of lookahead.
    '''

    _EMPTY = object()

    def __init__(self, tokens):
        self.tokens = iter(tokens)
        self.peeked = self._EMPTY

    def peek(self):
        '''
        Return the next token without consuming it, None at the end.
        '''
        if self.peeked is self._EMPTY:
            self.peeked = next(self.tokens, None)
        return self.peeked

    def next(self):
        '''
        Consume and return the next token, None at the end.
        '''
        token = self.peek()
        self.peeked = self._EMPTY
        return token


class Parser:
    '''
    Builds expression trees out of tokens.

    Holds no state between parses.
    '''

    # (left, right) binding power of infix operators. Power binds tighter on
    # the right, which makes it right-associative.
    INFIX = {
        TokenKind.PLUS: (1, 2),
        TokenKind.MINUS: (1, 2),
        TokenKind.MULTIPLY: (3, 4),
        TokenKind.DIVIDE: (3, 4),
        TokenKind.POWER: (5, 6),
    }
    # Right binding power of prefix operators.
    PREFIX = {
        TokenKind.MINUS: 8,
        TokenKind.SIN: 8,
        TokenKind.COS: 8,
        TokenKind.TAN: 8,
        TokenKind.EXP: 8,
        TokenKind.LOG: 8,
    }
    # Left binding power of postfix operators.
    POSTFIX = {
        TokenKind.FACTORIAL: 9,
    }

    def parse(self, tokens, strict=False):
        '''
        Parse tokens into an expression tree.

        :param tokens: Iterable of tokens, e.g. from Lexer.lex.
        :param strict: Reject tokens left over after the expression.
        '''
        stream = TokenStream(tokens)
        expression = self.expression(stream, 0)
        if strict and stream.peek() is not None:
            raise TrailingInput(stream.peek())
        return expression

    def expression(self, stream, min_bp):
        '''
        Parse the longest expression whose operators bind at least min_bp.
        '''
        token = stream.next()
        if token is None:
            return EndMarker()

        if token.kind is TokenKind.NUMBER:
            lhs = Number(token.value)
        elif token.kind is TokenKind.LEFT_PAREN:
            lhs = self.expression(stream, 0)
            closing = stream.next()
            if closing is None or closing.kind is not TokenKind.RIGHT_PAREN:
                raise UnmatchedParen(closing)
        elif token.kind in type(self).PREFIX:
            rhs = self.expression(stream, type(self).PREFIX[token.kind])
            lhs = UnaryOp(UnaryOperator.from_token(token), rhs)
        else:
            raise UnexpectedToken(token)

        while True:
            op = stream.peek()
            if op is None:
                break

            if op.kind in type(self).POSTFIX:
                if type(self).POSTFIX[op.kind] < min_bp:
                    break
                stream.next()
                lhs = UnaryOp(UnaryOperator.from_token(op), lhs)
                continue

            if op.kind in type(self).INFIX:
                left_bp, right_bp = type(self).INFIX[op.kind]
                if left_bp < min_bp:
                    break
                stream.next()
                rhs = self.expression(stream, right_bp)
                lhs = BinaryOp(BinaryOperator.from_token(op), lhs, rhs)
                continue

            break

        return lhs


def parse(line, strict=True):
    '''
    Lex and parse a line in one go.
    '''
    return Parser().parse(Lexer().lex(line), strict=strict)
