"""Command-line entry point: run a source file or an interactive prompt."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from rlox.errors import LoxError
from rlox.interpret import interpret
from rlox.value import Value

VERSION = "0.0.1"


def repl(debug: bool = False) -> None:
    """Read lines from standard input and run each one until input ends."""
    print(f"Running RLox, mode: REPL, current version: {VERSION}")
    print("Enter program code:")
    while True:
        print("> ", end="", file=sys.stderr, flush=True)
        line = sys.stdin.readline()
        if not line:
            return
        interpret(line, debug)


def run_source(content: str, debug: bool = False) -> Optional[Value]:
    """Run a whole program and return its result."""
    return interpret(content, debug)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="rlox", description="RLox language 2.0")
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    parser.add_argument("-r", "--repl", action="store_true", default=True)
    parser.add_argument("file_name", nargs="?")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    debug = True

    try:
        if args.file_name is None:
            if not args.repl:
                print("Pass the file name or run in REPL mode", file=sys.stderr)
                return 2
            repl(debug)
        else:
            try:
                with open(args.file_name, encoding="utf-8") as source_file:
                    content = source_file.read()
            except OSError as exc:
                print(f"File not found: {exc}", file=sys.stderr)
                return 1
            run_source(content, debug)
    except LoxError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())