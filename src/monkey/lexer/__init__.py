"""Monkey lexer — single-pass scanner over source text."""

from monkey.lexer.tokens import KEYWORDS, Token, TokenType, classify
from monkey.lexer.lexer import Lexer

__all__ = ["KEYWORDS", "Token", "TokenType", "classify", "Lexer"]
