"""Monkey language front end: lexer and interactive token loop."""

__version__ = "0.1.0"
