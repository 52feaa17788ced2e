import re
import string
from monkeylex.lexer import tokens


whitespace = frozenset(b' \t\n\r\f')
def skip_whitespace(scan):
    while scan.ch in whitespace:
        scan.read_char()


digits = frozenset(string.digits.encode('ascii'))
def read_int_token(scan):
    if scan.ch in digits:
        return tokens.IntToken(scan.read_while(digits.__contains__))


ident_chars = frozenset((string.ascii_letters + '_').encode('ascii'))
ident_pattern = re.compile(r'[a-zA-Z_]+')
keyword_tokens = {
    str(tok): tok for tok in tokens.enum_tokens
    if ident_pattern.fullmatch(str(tok))
}

def read_ident_or_keyword_token(scan):
    if scan.ch not in ident_chars:
        return None

    ident = scan.read_while(ident_chars.__contains__)
    if ident in keyword_tokens:
        return keyword_tokens[ident]
    return tokens.Ident(ident)


symbol_tokens = {
    str(tok).encode('ascii'): tok for tok in tokens.enum_tokens
    if not ident_pattern.fullmatch(str(tok))
}

def read_symbol_token(scan):
    if scan.ch is None:
        return None

    # Only one byte of lookahead, which is all == and != need
    first = bytes([scan.ch])
    second = scan.peek()
    if second is not None:
        symbol = symbol_tokens.get(first + bytes([second]))
        if symbol is not None:
            scan.read_char()
            scan.read_char()
            return symbol

    symbol = symbol_tokens.get(first)
    if symbol is not None:
        scan.read_char()
    return symbol


def read_eof_token(scan):
    if not scan:
        return tokens.EOF
