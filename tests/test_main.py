import io

from monkeylex.__main__ import main
from monkeylex.lexer import __main__ as lexer_main


def write_source(tmp_path, text):
    path = tmp_path / 'input.mk'
    path.write_text(text)
    return str(path)

def test_dump_tokens(tmp_path, capsys):
    assert main([write_source(tmp_path, 'let x = 5;')]) == 0
    assert capsys.readouterr().out.splitlines() == [
        'StmtToken let', 'Ident x', 'StmtToken =', 'IntToken 5', 'SepToken ;'
    ]

def test_dump_spans(tmp_path, capsys):
    assert main(['--spans', write_source(tmp_path, 'a\n  == b')]) == 0
    assert capsys.readouterr().out.splitlines() == [
        '1:1-1:2\tIdent a', '2:3-2:5\tOpToken ==', '2:6-2:7\tIdent b'
    ]

def test_stdin(monkeypatch, capsys):
    monkeypatch.setattr('sys.stdin', io.StringIO('fn'))
    assert main(['-']) == 0
    assert capsys.readouterr().out == 'BlockToken fn\n'

def test_error(tmp_path, capsys):
    path = write_source(tmp_path, 'x ? y')
    assert main([path]) == 1
    captured = capsys.readouterr()
    assert captured.out == 'Ident x\n'
    assert captured.err.startswith(f"{path}:1:3: Unexpected character '?'")

def test_permissive(tmp_path, capsys):
    assert main(['--permissive', write_source(tmp_path, 'x ? y')]) == 0
    assert capsys.readouterr().out.splitlines() == [
        'Ident x', 'IllegalToken ?', 'Ident y'
    ]

def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / 'nope.mk')]) == 1
    assert 'monkeylex: error:' in capsys.readouterr().err

def test_lexer_main(tmp_path, capsys):
    assert lexer_main.main(write_source(tmp_path, '1 != 2')) is None
    assert capsys.readouterr().out.splitlines() == ['1', '!=', '2']
    assert lexer_main.main(write_source(tmp_path, '@')) == 1

def test_undecodable_file(tmp_path, capsys):
    path = tmp_path / 'latin1.mk'
    path.write_bytes(b'let x = \xff;')
    assert main([str(path)]) == 1
    assert main(['--permissive', str(path)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ''
    assert captured.err.count('monkeylex: error:') == 2
