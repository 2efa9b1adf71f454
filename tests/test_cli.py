'''
Command line interface tests
'''

from astcalc.cli import CLI

from pytest import raises


def run(*args):
    CLI().run(args=list(args))


def test_evaluates(capsys):
    run('-e', '1+2', '2^10')
    out, err = capsys.readouterr()
    assert out == 'The expression evaluates to: 3\n' \
                  'The expression evaluates to: 1024\n'
    assert err == ''


def test_bad_line_does_not_abort(capsys):
    run('-e', '1+2)', '2 * $', '2.5!', '', '2*3')
    out, err = capsys.readouterr()
    assert out == 'The expression evaluates to: 6\n'
    assert err.splitlines() == ["Trailing input from ')' at position 3",
                                "Couldn't lex '$' at position 4",
                                'Cannot take the factorial of 2.5']


def test_exit(capsys):
    run('-e', '1', 'quit', '2')
    out, _ = capsys.readouterr()
    assert out == 'The expression evaluates to: 1\n'


def test_hierarchy(capsys):
    run('-a', '-e', '1+2')
    out, _ = capsys.readouterr()
    assert out == 'Here is the AST for your expression:\n' \
                  '└── +\n' \
                  '    ├── 1\n' \
                  '    └── 2\n' \
                  'The expression evaluates to: 3\n'


def test_grid(capsys):
    run('-a', '-t', 'grid', '-e', '1+2')
    out, _ = capsys.readouterr()
    assert out == 'Here is the AST for your expression:\n' \
                  '          +\n' \
                  '         / \\\n' \
                  '       1     2\n' \
                  '\n' \
                  'The expression evaluates to: 3\n'


def test_view_requires_ast(capsys):
    with raises(SystemExit):
        run('-t', 'grid', '-e', '1')
    _, err = capsys.readouterr()
    assert '--view requires --ast' in err


def test_infinity(capsys):
    run('-e', '1/0', '0/0')
    out, _ = capsys.readouterr()
    assert out == 'The expression evaluates to: inf\n' \
                  'The expression evaluates to: NaN\n'


def test_verbose(capsys):
    run('-v', '-e', '2.5!')
    _, err = capsys.readouterr()
    assert 'Cannot take the factorial of 2.5' in err
    assert 'Traceback' in err


def test_dump(capsys):
    run('-D', '-e', 'sin(2)')
    out, _ = capsys.readouterr()
    assert out.splitlines() == ['<kind>\t<value>\t<position>',
                                "SIN\t'sin'\t0",
                                "LEFT_PAREN\t'('\t3",
                                'NUMBER\t2.0\t4',
                                "RIGHT_PAREN\t')'\t5"]


def test_raw_grammar(capsys):
    run('-G', '-e')
    out, _ = capsys.readouterr()
    assert '(?<number>' in out
