"""Tests for the mdhtml CLI."""

import io
import tempfile
from pathlib import Path

import pytest

from mdhtml.cli import main


def run_cli(argv):
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    return exc_info.value.code


def test_convert_file_to_stdout(capsys):
    """Test converting a file and printing the fragment."""
    with tempfile.TemporaryDirectory() as tmpdir:
        src = Path(tmpdir) / "doc.md"
        src.write_text("# Title\n\nLine one\nLine two\n")

        code = run_cli(["convert", str(src)])

    assert code == 0
    assert capsys.readouterr().out == "<h1>Title</h1><p>Line one Line two</p>\n"


def test_convert_file_to_output(capsys):
    """Test writing the fragment to a file."""
    with tempfile.TemporaryDirectory() as tmpdir:
        src = Path(tmpdir) / "doc.md"
        src.write_text("[home](/index.html)")
        out = Path(tmpdir) / "doc.html"

        code = run_cli(["convert", str(src), "-o", str(out)])

        assert code == 0
        assert out.read_text() == '<p><a href="/index.html">home</a></p>\n'
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Wrote 1 block(s)" in captured.err


def test_convert_stdin(capsys, monkeypatch):
    """Test reading Markdown from stdin."""
    monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(b"Para1\n\n# Head\n\nPara2")))

    code = run_cli(["convert", "-"])

    assert code == 0
    assert capsys.readouterr().out == "<p>Para1</p><h1>Head</h1><p>Para2</p>\n"


def test_convert_stdin_keeps_lone_carriage_return(capsys, monkeypatch):
    """Test that stdin only splits lines on \\n and \\r\\n, like convert()."""
    monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(b"a\rb\r\nc")))

    code = run_cli(["convert"])

    assert code == 0
    assert capsys.readouterr().out == "<p>a\rb c</p>\n"


def test_convert_missing_input(capsys):
    """Test error for a missing input file."""
    code = run_cli(["convert", "/nonexistent/doc.md"])

    assert code == 1
    assert "Input not found" in capsys.readouterr().err


def test_convert_config_final_eol(capsys):
    """Test that the output section of the config is honoured."""
    with tempfile.TemporaryDirectory() as tmpdir:
        config_path = Path(tmpdir) / "mdhtml.toml"
        config_path.write_text("[output]\nfinal_eol = false\n")
        src = Path(tmpdir) / "doc.md"
        src.write_text("# A")

        code = run_cli(["--config", str(config_path), "convert", str(src)])

    assert code == 0
    assert capsys.readouterr().out == "<h1>A</h1>"


def test_version_flag(capsys):
    """Test that --version shows version information."""
    code = run_cli(["--version"])

    assert code == 0
    out = capsys.readouterr().out
    assert "mdhtml" in out
    assert "python" in out
    assert "platform" in out


def test_missing_command():
    """Test that a subcommand is required."""
    assert run_cli([]) == 2
