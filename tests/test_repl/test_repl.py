"""Tests for the interactive token loop."""

import io

from monkey.repl import PROMPT, start


def run(text: str, prompt: str = PROMPT) -> str:
    out = io.StringIO()
    start(io.StringIO(text), out, prompt=prompt)
    return out.getvalue()


class TestRepl:
    def test_prints_tokens_then_eof(self):
        assert run("let x = 5;\n") == ">> LET\nx\n=\n5\n;\nEOF\n>> "

    def test_string_does_not_carry_into_next_line(self):
        assert run('"open\n1\n') == '>> open\n\nEOF\n>> 1\nEOF\n>> '

    def test_empty_input_only_prompts(self):
        assert run("") == ">> "

    def test_blank_line_prints_eof(self):
        assert run("\n") == ">> EOF\n>> "

    def test_illegal_characters_are_displayed(self):
        assert run("a @ b\n") == ">> a\nILLEGAL\nb\nEOF\n>> "

    def test_last_line_without_newline(self):
        assert run("fn") == ">> fn\nEOF\n>> "

    def test_custom_prompt(self):
        assert run("1\n", prompt="$ ") == "$ 1\nEOF\n$ "
