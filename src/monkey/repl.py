"""Interactive loop: read a line, print its tokens, repeat."""

from __future__ import annotations

from typing import TextIO

from monkey.lexer.lexer import Lexer

PROMPT = ">> "


def start(reader: TextIO, writer: TextIO, prompt: str = PROMPT) -> None:
    """Run the loop until `reader` is exhausted.

    Every token of a line is written in its display form, one per line,
    ending with the EOF token.
    """
    while True:
        writer.write(prompt)
        writer.flush()
        line = reader.readline()
        if not line:
            return

        for tok in Lexer(line):
            writer.write(f"{tok}\n")
