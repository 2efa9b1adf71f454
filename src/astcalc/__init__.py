'''
AST calculator.

Parses arithmetic expressions (+, -, *, /, ^, unary minus, sin, cos, tan, exp,
ln, postfix !, parentheses) into a syntax tree, evaluates it in double
precision, and draws the tree, either as an indented hierarchy or as an ASCII
art tree.

Precedence, loosest first: + and -, * and /, ^ (right-associative), prefix
operators, then !.
'''

from .cli import CLI, calculate
from .evaluator import evaluate
from .lexer import Lexer, Token, TokenKind
from .parser import Parser, parse
from .render import render_grid, render_hierarchy


__all__ = ('CLI', 'Lexer', 'Parser', 'Token', 'TokenKind', 'calculate',
           'evaluate', 'parse', 'render_grid', 'render_hierarchy')
