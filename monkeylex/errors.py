def _message(m):
    @classmethod
    def builder(cls, *args, **format_vars):
        return cls(m.format(**format_vars), *args)
    return builder


def char_column(line, col):
    # Cursor columns count bytes; the rendered line counts characters
    return len(line.encode('utf-8')[:col].decode('utf-8', 'replace'))


class CompilerError(Exception):
    def __init__(self, message, context):
        from monkeylex.utils.scanner import Span, Cursor
        super().__init__(message)
        if isinstance(context, (Span, Cursor)):
            self.context = (context,)
        else:
            self.context = tuple(context)

    @property
    def cursor(self):
        if self.context:
            return self.context[-1].start

    def get_info(self, source):
        location = f'{source.filename}:{self.cursor}' if self.context else source.filename
        lines = [f'{location}: {self}']

        # gcc style: quote every line in context, caret under the last one
        for span in self.context:
            line = span.start.line
            lines.append(f'{line + 1:5} | {source.lines[line]}')

        if self.context:
            focus = self.cursor
            col = char_column(source.lines[focus.line], focus.col)
            lines.append('      | ' + ' ' * col + '^')

        return '\n'.join(lines)


class LexerError(CompilerError):
    unhelpful = _message('Invalid syntax')
    unexpected = _message('Unexpected character {char!r}')
