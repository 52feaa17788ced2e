from monkeylex.lexer import lex, SourceCode
from monkeylex.errors import CompilerError
import argparse
import logging
import sys


monkeylex = argparse.ArgumentParser(
    description='Split a source file into tokens, one per line',
    prog='monkeylex'
)

monkeylex.add_argument(
    'input',
    help='the source file to tokenize, or - to read standard input'
)

monkeylex.add_argument(
    '--spans', help='prefix each token with the line:col range it came from',
    action='store_true'
)

monkeylex.add_argument(
    '--permissive',
    help='emit illegal tokens for unknown characters instead of failing',
    action='store_true'
)

monkeylex.add_argument(
    '-v', '--verbose', help='log debugging information to stderr',
    action='store_true'
)


def format_lexeme(lexeme, spans):
    text = f'{type(lexeme.token).__name__} {lexeme.token}'
    if spans:
        return f'{lexeme.span}\t{text}'
    return text


def main(argv=None):
    args = monkeylex.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        if args.input == '-':
            source = SourceCode.from_string(sys.stdin.read(), '<stdin>')
        else:
            source = SourceCode.from_file(args.input)
    except (OSError, UnicodeDecodeError) as err:
        print(f'monkeylex: error: {err}', file=sys.stderr)
        return 1

    try:
        for lexeme in lex(source, strict=not args.permissive):
            print(format_lexeme(lexeme, args.spans))
    except CompilerError as err:
        print(err.get_info(source), file=sys.stderr)
        return 1
    return 0

if __name__ == '__main__':
    sys.exit(main())
