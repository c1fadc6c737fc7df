"""Monkey lexer — hand-written scanner producing one token per call.

Design decisions:
- Whitespace (newlines included) separates tokens and is never tokenized.
- One character of lookahead decides `==` / `!=` against `=` / `!`.
- Identifiers are runs of letters and underscores; digits end them.
- Character classes follow Unicode: whitespace is the White_Space set
  (so the information separators U+001C..U+001F are not whitespace), letters
  are alphabetic characters including letter numbers such as "Ⅻ". Combining
  vowel signs are not letters.
- Malformed input never raises: unknown characters and integer literals
  beyond the signed 64-bit range become ILLEGAL tokens, and an unterminated
  string yields whatever was read before end of input.
"""

from __future__ import annotations

import logging
import unicodedata
from typing import Iterator

from monkey.lexer.tokens import Token, TokenType, classify

logger = logging.getLogger(__name__)

INT_MAX = 2**63 - 1
INT_MAX_DIGITS = len(str(INT_MAX))

# str.isspace() accepts these, Unicode White_Space does not
INFORMATION_SEPARATORS = frozenset("\x1c\x1d\x1e\x1f")

SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.ASTERISK,
    "/": TokenType.SLASH,
    "<": TokenType.LT,
    ">": TokenType.GT,
    ",": TokenType.COMMA,
    ";": TokenType.SEMICOLON,
    ":": TokenType.COLON,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    "[": TokenType.LBRACKET,
    "]": TokenType.RBRACKET,
}

# First character -> (token if followed by "=", token otherwise)
TWO_CHAR_TOKENS: dict[str, tuple[TokenType, TokenType]] = {
    "=": (TokenType.EQ, TokenType.ASSIGN),
    "!": (TokenType.NEQ, TokenType.BANG),
}


def is_letter(ch: str) -> bool:
    return ch.isalpha() or ch == "_" or unicodedata.category(ch) == "Nl"


def is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def is_whitespace(ch: str) -> bool:
    return ch.isspace() and ch not in INFORMATION_SEPARATORS


class Lexer:
    """Turns Monkey source text into `Token` objects, one per `next_token` call.

    Usage::

        lexer = Lexer("let five = 5;")
        tok = lexer.next_token()
        while tok.type is not TokenType.EOF:
            ...
            tok = lexer.next_token()

    A lexer owns a single cursor over its source and is not meant to be
    shared between threads; tokenize independent inputs with separate
    instances.
    """

    def __init__(self, source: str) -> None:
        self.source = source
        self.pos = 0

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def next_token(self) -> Token:
        """Scan and return the next token, or EOF once the input is exhausted."""
        self._skip_whitespace()
        if self._at_end():
            return Token(TokenType.EOF)

        ch = self._advance()

        if ch in TWO_CHAR_TOKENS:
            paired, single = TWO_CHAR_TOKENS[ch]
            if self._peek() == "=":
                self._advance()
                return Token(paired)
            return Token(single)

        if ch in SINGLE_CHAR_TOKENS:
            return Token(SINGLE_CHAR_TOKENS[ch])

        if is_letter(ch):
            return classify(self._read_identifier(ch))

        if is_digit(ch):
            return self._read_int(ch)

        if ch == '"':
            return Token(TokenType.STRING, self._read_string())

        logger.debug("Illegal character %r at offset %d", ch, self.pos - 1)
        return Token(TokenType.ILLEGAL)

    def tokenize(self) -> list[Token]:
        """Drain the lexer and return the remaining tokens, EOF included."""
        return list(self)

    def __iter__(self) -> Iterator[Token]:
        while True:
            tok = self.next_token()
            yield tok
            if tok.type is TokenType.EOF:
                return

    @property
    def at_end(self) -> bool:
        """True once only whitespace (or nothing) is left to scan."""
        idx = self.pos
        while idx < len(self.source) and is_whitespace(self.source[idx]):
            idx += 1
        return idx >= len(self.source)

    # ------------------------------------------------------------------
    # Token scanning
    # ------------------------------------------------------------------

    def _read_identifier(self, first: str) -> str:
        """Read a maximal run of letters starting with `first`."""
        chars = [first]
        while not self._at_end() and is_letter(self._peek()):
            chars.append(self._advance())
        return "".join(chars)

    def _read_int(self, first: str) -> Token:
        """Read a maximal run of digits; out-of-range values become ILLEGAL."""
        start = self.pos - 1
        chars = [first]
        while not self._at_end() and is_digit(self._peek()):
            chars.append(self._advance())

        digits = "".join(chars).lstrip("0") or "0"
        # int() refuses very long digit strings, so check the length first
        if len(digits) > INT_MAX_DIGITS or int(digits) > INT_MAX:
            logger.debug(
                "Integer literal at offset %d exceeds 64-bit range (%d digits)",
                start, len(chars),
            )
            return Token(TokenType.ILLEGAL)
        return Token(TokenType.INT, int(digits))

    def _read_string(self) -> str:
        """Read up to the closing quote, which is consumed but not kept."""
        start = self.pos - 1
        chars: list[str] = []
        while not self._at_end():
            ch = self._advance()
            if ch == '"':
                return "".join(chars)
            chars.append(ch)

        logger.warning("Unterminated string literal starting at offset %d", start)
        return "".join(chars)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _peek(self) -> str | None:
        """Return the current character without consuming it, or None at end."""
        if self._at_end():
            return None
        return self.source[self.pos]

    def _advance(self) -> str:
        """Consume and return the current character."""
        ch = self.source[self.pos]
        self.pos += 1
        return ch

    def _at_end(self) -> bool:
        return self.pos >= len(self.source)

    def _skip_whitespace(self) -> None:
        while not self._at_end() and is_whitespace(self.source[self.pos]):
            self.pos += 1
