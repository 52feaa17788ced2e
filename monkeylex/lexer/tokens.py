import enum
import dataclasses as dc


class Token:
    pass


@dc.dataclass(frozen=True)
class IntToken(Token):
    # The digit run exactly as written; parsing is left to the consumer
    data: str

    @property
    def value(self):
        return int(self.data)

    def __str__(self):
        return self.data


@dc.dataclass(frozen=True)
class Ident(Token):
    name: str

    def __repr__(self):
        return f'<IdentToken {self.name}>'

    def __str__(self):
        return self.name


@dc.dataclass(frozen=True)
class IllegalToken(Token):
    data: bytes

    def __repr__(self):
        return f'<IllegalToken {self.data!r}>'

    def __str__(self):
        return self.data.decode('latin-1')


@dc.dataclass(frozen=True)
class Eof(Token):
    def __repr__(self):
        return '<Eof>'

    def __str__(self):
        return ''


class EnumToken(Token, enum.Enum):
    # Python 3.11 changed how Enums with mixins get constructed.  Setting
    # _value_ from a __new__ behaves the same on every version.
    def __new__(cls, val):
        member = Token.__new__(cls)
        member._value_ = val
        return member

    def __str__(self):
        return self.value


enum_tokens = set()
def include_enum(cls):
    enum_tokens.update(cls)
    return cls


@include_enum
class OpToken(EnumToken):
    PLUS = '+'
    MINUS = '-'
    BANG = '!'
    ASTERISK = '*'
    SLASH = '/'
    LT = '<'
    GT = '>'
    EQ = '=='
    NOT_EQ = '!='


@include_enum
class StmtToken(EnumToken):
    ASSIGN = '='
    LET = 'let'
    RETURN = 'return'


@include_enum
class SepToken(EnumToken):
    SEMICOLON = ';'
    COMMA = ','


@include_enum
class BracToken(EnumToken):
    LPAREN = '('
    RPAREN = ')'
    LBRACE = '{'
    RBRACE = '}'

    @property
    def pair(self):
        alt_name = 'RL'['LR'.index(self.name[0])] + self.name[1:]
        return type(self)[alt_name]


@include_enum
class BlockToken(EnumToken):
    FUNCTION = 'fn'
    IF = 'if'
    ELSE = 'else'


@include_enum
class BoolToken(EnumToken):
    TRUE = 'true'
    FALSE = 'false'

    @property
    def data(self):
        return self != type(self).FALSE


EOF = Eof()
