"""Monkey command-line entry point.

Usage:
    monkey [repl]                       Start the interactive token loop
    monkey tokenize <file> [--repr]     Display the token stream of a file

Options:
    -h, --help       Show this message
    --version        Show the version
    -v, --verbose    Log lexer diagnostics to stderr
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from monkey.lexer.lexer import Lexer
from monkey.repl import start

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    args = argv if argv is not None else sys.argv[1:]

    verbose = any(a in ("-v", "--verbose") for a in args)
    args = [a for a in args if a not in ("-v", "--verbose")]
    show_repr = "--repr" in args
    args = [a for a in args if a != "--repr"]
    _configure_logging(verbose)

    command = args[0] if args else "repl"

    if command in ("--help", "-h"):
        print(__doc__.strip())
        return 0

    if command == "--version":
        from monkey import __version__
        print(f"monkey {__version__}")
        return 0

    if command == "repl":
        return _cmd_repl()
    elif command == "tokenize":
        if len(args) < 2:
            print(f"Error: command '{command}' requires a file argument")
            return 1
        return _cmd_tokenize(Path(args[1]), show_repr=show_repr)
    else:
        print(f"Error: unknown command '{command}'")
        print(__doc__.strip())
        return 1


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s:%(name)s:%(message)s",
        stream=sys.stderr,
    )


def _cmd_repl() -> int:
    """Greet the user and run the interactive loop on stdin/stdout."""
    print("Hello! This is the Monkey programming language!")
    print("Feel free to type in commands")
    try:
        start(sys.stdin, sys.stdout)
    except KeyboardInterrupt:
        print()
    return 0


def _cmd_tokenize(filepath: Path, show_repr: bool = False) -> int:
    """Display the token stream of a file, one token per line."""
    try:
        source = filepath.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: cannot read {filepath}: {e}")
        return 1

    logger.debug("Tokenizing %s (%d characters)", filepath, len(source))
    for tok in Lexer(source):
        print(repr(tok) if show_repr else tok)
    return 0


if __name__ == "__main__":
    sys.exit(main())
