import pytest

from coreopts.outcome import EarlyExit, OutputStream


def test_emit_to_stdout(capsys):
    EarlyExit(0, "usage: prog [OPTION]...\n").emit()
    captured = capsys.readouterr()
    assert captured.out.strip() == "usage: prog [OPTION]..."
    assert captured.err == ""


def test_emit_to_stderr(capsys):
    EarlyExit(1, "prog: bad option\n", OutputStream.STDERR).emit()
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.strip() == "prog: bad option"


def test_emit_keeps_text_literal(capsys):
    EarlyExit(0, "[bold]not markup[/bold] :smile:\n").emit()
    assert capsys.readouterr().out.strip() == "[bold]not markup[/bold] :smile:"


def test_exit_raises_system_exit(capsys):
    with pytest.raises(SystemExit) as exc_info:
        EarlyExit(1, "prog: failure\n", OutputStream.STDERR).exit()
    assert exc_info.value.code == 1
    assert "prog: failure" in capsys.readouterr().err


def test_output_stream_str():
    assert str(OutputStream.STDOUT) == "stdout"
    assert str(OutputStream.STDERR) == "stderr"
