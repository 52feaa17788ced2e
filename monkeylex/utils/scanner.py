from dataclasses import dataclass
from collections.abc import Sequence
from functools import cached_property


@dataclass
class SourceCode(Sequence):
    filename: str
    text: str

    @classmethod
    def from_file(cls, filename):
        with open(filename, encoding='utf-8') as file:
            return cls(filename, file.read())

    @classmethod
    def from_string(cls, string, filename='<string>'):
        return cls(filename, string)

    @cached_property
    def lines(self):
        return self.text.split('\n')

    @cached_property
    def data(self):
        return self.text.encode('utf-8')

    def __getitem__(self, item):
        return self.lines[item]

    def __len__(self):
        return len(self.lines)

    def __repr__(self):
        return f'SourceCode.from_file({self.filename!r})'


NEWLINE = ord('\n')


class Scanner:
    """
    Byte cursor over a source buffer.

    ``ch`` is the byte at ``pos`` as an int, or None once the buffer is
    exhausted.  None is never a valid byte, so a NUL in the input is
    just another character.
    """

    def __init__(self, source):
        self.source = source
        self.data = source.data
        self.pos = 0
        self.read_pos = 0
        self.ch = None
        self.line = 0
        self.col = 0
        self.read_char()

    def read_char(self):
        if self.ch == NEWLINE:
            self.line += 1
            self.col = 0
        elif self.ch is not None:
            self.col += 1

        if self.read_pos >= len(self.data):
            self.ch = None
            self.pos = len(self.data)
        else:
            self.ch = self.data[self.read_pos]
            self.pos = self.read_pos
            self.read_pos += 1

    def peek(self):
        if self.read_pos >= len(self.data):
            return None
        return self.data[self.read_pos]

    def read_while(self, accept):
        start = self.pos
        while self.ch is not None and accept(self.ch):
            self.read_char()
        return self.data[start:self.pos].decode('ascii')

    def mark(self):
        return Marker(self, self.cursor)

    @property
    def cursor(self):
        return Cursor(self.line, self.col)

    @cursor.setter
    def cursor(self, cursor):
        offset = sum(len(line.encode('utf-8')) + 1
                     for line in self.source.lines[:cursor.line])
        # Clear ch first so read_char leaves line/col alone
        self.ch = None
        self.read_pos = offset + cursor.col
        self.read_char()
        self.line = cursor.line
        self.col = cursor.col

    def __bool__(self):
        # Is there any more to read?
        return self.ch is not None

    def __repr__(self):
        return f'<Scanner L{self.line+1} {self.data[self.pos:]!r}>'


@dataclass(frozen=True, order=True)
class Cursor:
    line: int
    col: int

    @property
    def start(self):
        return self

    @property
    def end(self):
        return self

    def __str__(self):
        return f'{self.line + 1}:{self.col + 1}'


@dataclass(frozen=True)
class Span:
    start: Cursor
    end: Cursor

    def __or__(self, other):
        if isinstance(other, Cursor):
            return Span(min(self.start, other),
                        max(self.end, other))
        elif isinstance(other, Span):
            return self | other.start | other.end
        return NotImplemented

    def __str__(self):
        return f'{self.start}-{self.end}'


@dataclass
class Marker:
    scan: Scanner
    cursor: Cursor

    def advance(self):
        old_cursor = self.cursor
        self.cursor = self.scan.cursor
        return Span(old_cursor, self.cursor)

    def restore(self):
        self.scan.cursor = self.cursor

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.restore()
