"""Token types and Token dataclass for the Monkey lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from types import MappingProxyType
from typing import Mapping


class TokenType(Enum):
    """Every distinct token the Monkey lexer can produce."""

    # Sentinels
    ILLEGAL = auto()
    EOF = auto()

    # Identifiers & literals
    IDENT = auto()          # add, foobar, x, y
    INT = auto()            # 1343456
    STRING = auto()         # "foo bar"

    # Operators
    ASSIGN = auto()         # =
    PLUS = auto()
    MINUS = auto()
    BANG = auto()
    ASTERISK = auto()
    SLASH = auto()
    LT = auto()
    GT = auto()
    EQ = auto()             # ==
    NEQ = auto()            # !=

    # Delimiters
    COMMA = auto()
    SEMICOLON = auto()
    COLON = auto()
    LPAREN = auto()
    RPAREN = auto()
    LBRACE = auto()
    RBRACE = auto()
    LBRACKET = auto()
    RBRACKET = auto()

    # Keywords
    FUNCTION = auto()
    LET = auto()
    TRUE = auto()
    FALSE = auto()
    IF = auto()
    ELSE = auto()
    RETURN = auto()


# Map keyword spellings to token types
KEYWORDS: Mapping[str, TokenType] = MappingProxyType({
    "fn": TokenType.FUNCTION,
    "let": TokenType.LET,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "return": TokenType.RETURN,
})

# Display form of markers that do not render as their type name.
SYMBOLS: Mapping[TokenType, str] = MappingProxyType({
    TokenType.ASSIGN: "=",
    TokenType.PLUS: "+",
    TokenType.MINUS: "-",
    TokenType.BANG: "!",
    TokenType.ASTERISK: "*",
    TokenType.SLASH: "/",
    TokenType.LT: "<",
    TokenType.GT: ">",
    TokenType.EQ: "==",
    TokenType.NEQ: "!=",
    TokenType.COMMA: ",",
    TokenType.SEMICOLON: ";",
    TokenType.COLON: ":",
    TokenType.LPAREN: "(",
    TokenType.RPAREN: ")",
    TokenType.LBRACE: "{",
    TokenType.RBRACE: "}",
    TokenType.LBRACKET: "[",
    TokenType.RBRACKET: "]",
    TokenType.FUNCTION: "fn",
})

PAYLOAD_TYPES = frozenset({TokenType.IDENT, TokenType.INT, TokenType.STRING})


@dataclass(frozen=True, slots=True)
class Token:
    """A single token produced by the lexer.

    Marker tokens (operators, delimiters, keywords, EOF, ILLEGAL) carry no
    value. IDENT and STRING carry a ``str``, INT carries an ``int``. Two
    tokens are equal when both the type and the value match.
    """

    type: TokenType
    value: str | int | None = None

    def __post_init__(self) -> None:
        if self.type in PAYLOAD_TYPES:
            if self.value is None:
                raise ValueError(f"{self.type.name} token requires a value")
            expected = int if self.type is TokenType.INT else str
            if not isinstance(self.value, expected) or isinstance(self.value, bool):
                raise ValueError(
                    f"{self.type.name} token value must be {expected.__name__}, "
                    f"got {type(self.value).__name__}"
                )
            if self.type is TokenType.IDENT and self.value in KEYWORDS:
                raise ValueError(f"{self.value!r} is a keyword, not an identifier")
        elif self.value is not None:
            raise ValueError(f"{self.type.name} token takes no value")

    def __str__(self) -> str:
        if self.type in PAYLOAD_TYPES:
            return str(self.value)
        return SYMBOLS.get(self.type, self.type.name)

    def __repr__(self) -> str:
        if self.value is None:
            return f"Token({self.type.name})"
        return f"Token({self.type.name}, {self.value!r})"

    def is_ident(self) -> bool:
        return self.type is TokenType.IDENT

    def is_int(self) -> bool:
        return self.type is TokenType.INT

    def is_keyword(self) -> bool:
        return self.type in _KEYWORD_TYPES


_KEYWORD_TYPES = frozenset(KEYWORDS.values())


def classify(spelling: str) -> Token:
    """Resolve an identifier-shaped spelling to a keyword or an IDENT token."""
    token_type = KEYWORDS.get(spelling)
    if token_type is not None:
        return Token(token_type)
    return Token(TokenType.IDENT, spelling)
