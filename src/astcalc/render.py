'''
Plain text views of expression trees.
'''

from collections import deque
from enum import Enum

from .tree import BinaryOp, UnaryOp


class Align(Enum):
    LEFT = 'left'
    RIGHT = 'right'


def pad_center(text, width, align=Align.LEFT):
    '''
    Center text in a cell of width.

    Odd leftover padding goes on the right when left aligned, on the left when
    right aligned.
    '''
    diff = width - len(text)
    if diff <= 0:
        return text
    short, long_ = ' ' * (diff // 2), ' ' * ((diff + 1) // 2)
    if align is Align.LEFT:
        return short + text + long_
    else:
        return long_ + text + short


def render_hierarchy(expression):
    '''
    Render tree as an indented listing, like tree(1) does directories.

        └── +
            ├── 1
            └── 2
    '''
    return ''.join(_hierarchy_lines(expression, '', last=True))


def _hierarchy_lines(expression, prefix, last):
    label = expression.label()
    if not label:
        return
    yield prefix + ('└── ' if last else '├── ') + label + '\n'
    prefix += '    ' if last else '│   '
    children = expression.children()
    for i, child in enumerate(children):
        yield from _hierarchy_lines(child, prefix,
                                    last=i == len(children) - 1)


def _odd(n):
    return n if n % 2 else n + 1


def _put(row, column, cell, blank):
    '''
    Write cell into row at column, growing the row if it's too short.
    '''
    if column >= len(row):
        row.extend([blank] * (column + 1 - len(row)))
    row[column] = cell


def _offset(child):
    # Binary subtrees fan out; keep them from overlapping their sibling.
    return 2 if isinstance(child, BinaryOp) else 1


def render_grid(expression):
    '''
    Render tree top down, breadth first, as ASCII art.

            +
           / \\
          1   2

    Each level of the tree is a row of fixed width cells holding labels,
    followed by a row holding the edges to the next level.
    '''
    total_width = _odd(expression.width())
    cell_length = _odd(expression.max_label_length())
    blank = ' ' * cell_length

    lines = []
    level = deque([(expression, (total_width + 1) // 2, Align.LEFT)])
    while level:
        nodes = [blank] * total_width
        edges = [blank] * total_width
        next_level = deque()
        for node, column, align in level:
            label = node.label()
            if not label:
                continue
            _put(nodes, column, pad_center(label, cell_length, align), blank)
            if isinstance(node, BinaryOp):
                _put(edges, column,
                     '/' + ' ' * (cell_length - 2) + '\\', blank)
                next_level.append((node.left,
                                   column - _offset(node.left),
                                   Align.LEFT))
                next_level.append((node.right,
                                   column + _offset(node.right),
                                   Align.RIGHT))
            elif isinstance(node, UnaryOp):
                _put(edges, column, pad_center('|', cell_length, align), blank)
                next_level.append((node.operand, column, Align.LEFT))

        row = ''.join(nodes).rstrip()
        if row:
            lines.append(row)
            lines.append(''.join(edges).rstrip())
        level = next_level

    return ''.join(line + '\n' for line in lines)
