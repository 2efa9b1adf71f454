from dataclasses import dataclass, field
from enum import Enum
from functools import reduce
import operator

import regex

from .util import LexError


class TokenKind(Enum):
    '''
    Kinds of lexemes, valued by their spelling.
    '''
    PLUS = '+'
    MINUS = '-'
    MULTIPLY = '*'
    DIVIDE = '/'
    POWER = '^'
    FACTORIAL = '!'
    SIN = 'sin'
    COS = 'cos'
    TAN = 'tan'
    EXP = 'exp'
    LOG = 'ln'
    LEFT_PAREN = '('
    RIGHT_PAREN = ')'
    NUMBER = 'number'


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    value: float = None
    # Where in the line; diagnostics only.
    position: int = field(default=None, compare=False)

    def __str__(self):
        if self.kind is TokenKind.NUMBER:
            return 'number {0!r}'.format(self.value)
        return repr(self.kind.value)


SYMBOLS = {kind.value: kind
           for kind in TokenKind
           if len(kind.value) == 1}
KEYWORDS = {kind.value: kind
            for kind in TokenKind
            if kind.value.isalpha() and kind is not TokenKind.NUMBER}


class Lexer:
    '''
    Lexer for the calculator's *regular* grammar.

    For consistency, needs to be instantiated, despite holding no internal
    state.
    '''
    # Same as a JSON number, minus the sign; that's the parser's business.
    NUMBER = r'''
              # 0, 7, 42, but not 042
              (?:
                  0
                  |
                  [1-9][0-9]*
              )
              # .5 in 2.5
              (?:
                  \.
                  [0-9]+
              )?
              # e10, E-3, e+7
              (?:
                  [eE]
                  [+-]?
                  [0-9]+
              )?
              '''
    # Function names. Leftmost-longest thanks to POSIX below.
    KEYWORD = r'(?:' + r'|'.join(map(regex.escape, KEYWORDS)) + r')'
    OPERATOR = r'(?:' + r'|'.join(map(regex.escape, SYMBOLS)) + r')'
    SPACE = r'[\ \t\n\f]+'

    # All possible lexemes.
    LEXEME = r'(?<number>' + NUMBER + r')|' \
             r'(?<keyword>' + KEYWORD + r')|' \
             r'(?<operator>' + OPERATOR + r')|' \
             r'(?<space>' + SPACE + r')'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.POSIX,
                    regex.VERSION1,
                    regex.VERBOSE},
                   0)

    def lex(self, line):
        '''
        Take a line and lazily yield all its tokens, skipping whitespace.

        Raises LexError upon the first unrecognized input, having yielded
        every token before it.
        '''
        position = 0
        while line:
            match = regex.match(type(self).LEXEME, line,
                                flags=type(self).FLAGS)
            if match is None:
                raise LexError(line[0], position)
            token = self.token(match, position)
            if token is not None:
                yield token
            position += len(match.group(0))
            line = line[len(match.group(0)):]

    def token(self, match, position=None):
        '''
        Turn lexeme match into a Token, None for whitespace.
        '''
        groups = self.matchedgroups(match)
        if 'number' in groups:
            return Token(TokenKind.NUMBER, float(groups['number']), position)
        elif 'keyword' in groups:
            return Token(KEYWORDS[groups['keyword']], position=position)
        elif 'operator' in groups:
            return Token(SYMBOLS[groups['operator']], position=position)
        return None

    def matchedgroups(self, match):
        '''
        Return the named groups the lexeme matched.
        '''
        return {key: value
                for key, value
                in match.groupdict().items()
                if value}
