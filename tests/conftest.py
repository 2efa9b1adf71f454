from pytest import fixture

from astcalc.lexer import Lexer
from astcalc.parser import Parser


@fixture
def lexer() -> Lexer:
    return Lexer()


@fixture
def parser() -> Parser:
    return Parser()


@fixture
def tree(lexer: Lexer, parser: Parser):
    '''
    Parse a line strictly, the way the CLI does.
    '''
    def parse(line: str):
        return parser.parse(lexer.lex(line), strict=True)
    return parse
