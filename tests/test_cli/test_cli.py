"""Tests for the command-line entry point."""

import io
import sys

from monkey import __version__
from monkey.cli import main


class TestCommands:
    def test_help(self, capsys):
        assert main(["--help"]) == 0
        assert "Usage:" in capsys.readouterr().out

    def test_version(self, capsys):
        assert main(["--version"]) == 0
        assert capsys.readouterr().out.strip() == f"monkey {__version__}"

    def test_unknown_command(self, capsys):
        assert main(["compile"]) == 1
        assert "unknown command 'compile'" in capsys.readouterr().out

    def test_tokenize_requires_file(self, capsys):
        assert main(["tokenize"]) == 1
        assert "requires a file argument" in capsys.readouterr().out


class TestTokenize:
    def test_prints_rendered_tokens(self, tmp_path, capsys):
        source = tmp_path / "prog.mk"
        source.write_text('let s = "hi";\n', encoding="utf-8")
        assert main(["tokenize", str(source)]) == 0
        assert capsys.readouterr().out.splitlines() == ["LET", "s", "=", "hi", ";", "EOF"]

    def test_repr_flag(self, tmp_path, capsys):
        source = tmp_path / "prog.mk"
        source.write_text("x == 1", encoding="utf-8")
        assert main(["tokenize", str(source), "--repr"]) == 0
        assert capsys.readouterr().out.splitlines() == [
            "Token(IDENT, 'x')",
            "Token(EQ)",
            "Token(INT, 1)",
            "Token(EOF)",
        ]

    def test_repr_flag_before_file(self, tmp_path, capsys):
        source = tmp_path / "prog.mk"
        source.write_text("1", encoding="utf-8")
        assert main(["tokenize", "--repr", str(source)]) == 0
        assert capsys.readouterr().out.splitlines() == ["Token(INT, 1)", "Token(EOF)"]

    def test_missing_file(self, tmp_path, capsys):
        assert main(["tokenize", str(tmp_path / "nope.mk")]) == 1
        assert capsys.readouterr().out.startswith("Error: cannot read")

    def test_verbose_flag_is_accepted(self, tmp_path, capsys):
        source = tmp_path / "prog.mk"
        source.write_text("@", encoding="utf-8")
        assert main(["-v", "tokenize", str(source)]) == 0
        assert capsys.readouterr().out.splitlines() == ["ILLEGAL", "EOF"]


class TestRepl:
    def test_default_command_runs_repl(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "stdin", io.StringIO("1 + 2\n"))
        assert main([]) == 0
        out = capsys.readouterr().out
        assert out.startswith("Hello! This is the Monkey programming language!\n")
        assert ">> 1\n+\n2\nEOF\n>> " in out
