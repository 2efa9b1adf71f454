from os import isatty, path
import sys
from argparse import ArgumentParser, REMAINDER, OPTIONAL
import traceback

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory

from .util import CalcError, wrap_user_errors
from .lexer import Lexer
from .parser import parse
from .evaluator import evaluate
from .render import render_grid, render_hierarchy
from .tree import format_number


VIEWS = {
    'hierarchy': render_hierarchy,
    'grid': render_grid,
}


@wrap_user_errors("Couldn't parse {0!r}")
def parse_line(line):
    return parse(line, strict=True)


@wrap_user_errors("Couldn't evaluate expression")
def evaluate_tree(expression):
    return evaluate(expression)


def calculate(line):
    '''
    Parse and evaluate one line, rejecting anything left over.
    '''
    return evaluate_tree(parse_line(line))


class InteractiveInput:
    def __init__(self, prompt, history=None):
        self.prompt = prompt
        self.history = history

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    history=self.history,
                                    enable_suspend=True,
                                    prompt_continuation=' ' * len(self.prompt),
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to the calculator.
    '''

    DEFAULT_PROMPT = '>>> '
    HISTORY_FILE = '~/.astcalc_history'
    EXIT_COMMANDS = frozenset({'exit', 'quit', 'q'})
    GREETING = 'Type exit or quit to stop the program!'

    def dumper(self):
        '''
        Dump all tokens: kind, text, and position.
        '''
        lexer = Lexer()
        print('<kind>\t<value>\t<position>')
        for line in self._lines():
            try:
                for token in lexer.lex(line):
                    print(token.kind.name,
                          repr(token.kind.value
                               if token.value is None
                               else token.value),
                          token.position,
                          sep='\t')
            except CalcError as e:
                self._report(e)

    def executor(self):
        '''
        Evaluate expressions, one per line.
        '''
        if self._interactive():
            print(self.GREETING)
        for line in self._lines():
            try:
                self.execute(line)
            # Abort rest of line, carry on with the next one.
            except CalcError as e:
                self._report(e)

    def execute(self, line):
        '''
        Print line's AST, if asked to, and its value.
        '''
        expression = parse_line(line)
        if self.args.ast:
            print('Here is the AST for your expression:')
            print(VIEWS[self.args.view](expression), end='')
        print('The expression evaluates to:',
              format_number(evaluate_tree(expression)))

    def raw_grammar(self):
        '''
        Print current internally defined grammar.
        '''
        print(Lexer.LEXEME)

    def _lines(self):
        '''
        Yield non-blank input lines until told to stop.
        '''
        for line in self.args.expressions:
            line = line.strip()
            if line in self.EXIT_COMMANDS:
                return
            if line:
                yield line

    def _report(self, error):
        print(error.args[0], file=sys.stderr)
        if self.args.verbose:
            traceback.print_exc()

    def _prompting_input(self):
        '''
        Return prompting input if either:

        - prompt explicitly specified.
        - both stdin/out are a tty

        else plain stdin.
        '''
        if self.args.prompt or \
           isatty(sys.stdin.fileno()) and isatty(sys.stdout.fileno()):
            history = FileHistory(path.expanduser(self.HISTORY_FILE))
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT,
                                    history=history)
        else:
            return sys.stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(description='AST calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true',
                                          help='show tracebacks for bad '
                                               'expressions')
        self.argument_parser.add_argument('-a', '--ast',
                                          action='store_true',
                                          help='print the AST of each '
                                               'expression before evaluating')
        self.argument_parser.add_argument('-t', '--view',
                                          choices=sorted(VIEWS),
                                          help='how to print ASTs '
                                               '(default: hierarchy)')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-G', '--raw-grammar',
                                       self.raw_grammar),
                                      ('-D', '--dump', self.dumper)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=sys.stdin)

    def _interactive(self):
        return isinstance(self.args.expressions, InteractiveInput)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        if self.args.view is None:
            self.args.view = 'hierarchy'
        elif not self.args.ast:
            self.argument_parser.error('--view requires --ast')
        if self.args.expressions is sys.stdin:
            self.args.expressions = self._prompting_input()
        try:
            self.args.action()
        except KeyboardInterrupt:
            sys.exit(1)
