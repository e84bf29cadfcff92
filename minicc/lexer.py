import re
from collections import namedtuple

from minicc.errors import UnrecognizedFragment

Token = namedtuple('Token', ['kind', 'value', 'line', 'column'])

KEYWORDS = {
    'int': 'INT',
    'return': 'RETURN',
}

# MINUS is emitted for both negation and subtraction, the parser decides which
TOKEN_SPEC = [
    ('BADNUM',   r'[0-9]+[A-Za-z_][A-Za-z0-9_]*'),
    ('NUMBER',   r'[0-9]+'),
    ('ID',       r'[A-Za-z_][A-Za-z0-9_]*'),
    ('LBRACE',   r'\{'),
    ('RBRACE',   r'\}'),
    ('LPAREN',   r'\('),
    ('RPAREN',   r'\)'),
    ('SEMI',     r';'),
    ('MINUS',    r'-'),
    ('TILDE',    r'~'),
    ('BANG',     r'!'),
    ('PLUS',     r'\+'),
    ('MUL',      r'\*'),
    ('DIV',      r'/'),
    ('SKIP',     r'[ \t\r\f\v]+'),
    ('NEWLINE',  r'\n'),
    ('MISMATCH', r'.'),
]

TOKEN_REGEX = re.compile('|'.join('(?P<%s>%s)' % pair for pair in TOKEN_SPEC))


def gen_tokens(code):
    line = 1
    line_start = 0
    for mo in TOKEN_REGEX.finditer(code):
        kind = mo.lastgroup
        value = mo.group()
        column = mo.start() - line_start + 1
        if kind == 'NEWLINE':
            line += 1
            line_start = mo.end()
            continue
        elif kind == 'SKIP':
            continue
        elif kind in ('BADNUM', 'MISMATCH'):
            raise UnrecognizedFragment(value, line, column)
        elif kind == 'NUMBER':
            value = int(value)
        elif kind == 'ID':
            kind = KEYWORDS.get(value, 'ID')
        yield Token(kind, value, line, column)


def tokenize(code):
    print("Tokenizing")
    return list(gen_tokens(code))
