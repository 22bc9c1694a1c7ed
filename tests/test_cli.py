import io

import pytest

from ttgen.cli import main


def test_stdin(monkeypatch, capsys):
    monkeypatch.setattr('sys.stdin', io.StringIO("A XOR B\n"))
    assert main([]) == 0
    captured = capsys.readouterr()
    assert captured.out == "A B  A XOR B\nT T  F\nT F  T\nF T  T\nF F  F\n\n"
    assert captured.err == ""


def test_files_share_the_declared_order(tmp_path, capsys):
    first = tmp_path / "order.txt"
    first.write_text("/ B A\n")
    second = tmp_path / "expr.txt"
    second.write_text("A AND B\n")
    assert main([str(first), str(second)]) == 0
    assert capsys.readouterr().out.startswith("\nB A  A AND B\n")


def test_options(monkeypatch, capsys):
    monkeypatch.setattr('sys.stdin', io.StringIO("p EQUIV q\n"))
    assert main(['--digits', '--no-header', '-']) == 0
    assert capsys.readouterr().out == "1 1  1\n1 0  0\n0 1  0\n0 0  1\n\n"


def test_line_errors_keep_exit_status_zero(monkeypatch, capsys):
    monkeypatch.setattr('sys.stdin', io.StringIO("(A\nA\n"))
    assert main([]) == 0
    captured = capsys.readouterr()
    assert captured.err == "<stdin>:1: error: mismatched parentheses\n"
    assert captured.out == "\nA  A\nT  T\nF  F\n\n"


def test_variable_capacity_is_fatal(monkeypatch, capsys):
    line = " OR ".join(f"v{i}" for i in range(65))
    monkeypatch.setattr('sys.stdin', io.StringIO(line + "\nA\n"))
    assert main([]) == 1
    captured = capsys.readouterr()
    assert captured.err == "error: maximum of 64 variables\n"
    assert captured.out == ""


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.txt")]) == 2
    assert "nope.txt" in capsys.readouterr().err


@pytest.mark.parametrize("value", ["0", "33", "x"])
def test_bad_max_vars(value):
    with pytest.raises(SystemExit) as info:
        main(['--max-vars', value])
    assert info.value.code == 2


def test_undecodable_byte_in_file_is_a_line_error(tmp_path, capsys):
    path = tmp_path / "bytes.txt"
    path.write_bytes(b"A \xff B\nA XOR B\n")
    assert main([str(path)]) == 0
    captured = capsys.readouterr()
    assert captured.err == f"{path}:1: error: unexpected character '\\udcff'\n"
    assert captured.out == "\nA B  A XOR B\nT T  F\nT F  T\nF T  T\nF F  F\n\n"
