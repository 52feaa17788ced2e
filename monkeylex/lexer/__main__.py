from monkeylex.lexer import lex, SourceCode
from monkeylex.errors import CompilerError
import sys

def main(filename):
    source = SourceCode.from_file(filename)
    try:
        for item in lex(source):
            print(item.token)
    except CompilerError as err:
        print(err.get_info(source), file=sys.stderr)
        return 1

if __name__ == '__main__':
    sys.exit(main(sys.argv[1]))
