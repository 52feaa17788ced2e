from . import tokens
from . import readers
from monkeylex.utils.scanner import Scanner, Span, Cursor, SourceCode
from monkeylex.utils.logger import get_logger
from monkeylex.errors import LexerError

import dataclasses as dc

logger = get_logger(__name__)


@dc.dataclass(frozen=True)
class Lexeme:
    token: tokens.Token
    span: Span


tok_readers = [
    readers.read_symbol_token, readers.read_int_token,
    readers.read_ident_or_keyword_token, readers.read_eof_token
]


class Lexer:
    """
    Turns source text into tokens, one per call to next_token().

    A strict lexer (the default) refuses characters outside the
    language's alphabet with a LexerError and stays put.  A permissive
    one consumes the character and hands back an IllegalToken instead.
    Once the input is used up every call returns EOF.
    """

    def __init__(self, source, *, strict=True):
        if isinstance(source, str):
            source = SourceCode.from_string(source)
        self.source = source
        self.strict = strict
        self.scan = Scanner(source)

    @property
    def position(self):
        return self.scan.cursor

    def next_lexeme(self):
        scan = self.scan
        readers.skip_whitespace(scan)

        marker = scan.mark()
        for reader in tok_readers:
            tok = reader(scan)
            if tok is not None:
                return Lexeme(tok, marker.advance())

        char = chr(scan.ch) if scan.ch < 0x80 else bytes([scan.ch])
        if self.strict:
            raise LexerError.unexpected(scan.cursor, char=char)

        logger.debug('Illegal character %r at %s', char, scan.cursor)
        illegal = tokens.IllegalToken(bytes([scan.ch]))
        scan.read_char()
        return Lexeme(illegal, marker.advance())

    def next_token(self):
        return self.next_lexeme().token

    def __iter__(self):
        while True:
            tok = self.next_token()
            yield tok
            if isinstance(tok, tokens.Eof):
                return


def lex(source, *, strict=True):
    lexer = Lexer(source, strict=strict)

    while True:
        lexeme = lexer.next_lexeme()
        if isinstance(lexeme.token, tokens.Eof):
            return lexeme.span.end
        yield lexeme


def tokenize(source, *, strict=True):
    return list(Lexer(source, strict=strict))
