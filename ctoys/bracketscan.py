"""Checks that brackets in C source text are balanced.

Brackets inside comments, string literals and character constants are
ignored. Lines may hold at most ``COL_LIMIT - 1`` characters.
"""

from __future__ import annotations

import argparse
import io
import sys
from collections.abc import Sequence
from typing import TextIO

COL_LIMIT = 511
MAX_DEPTH = 2047

_EOF = ""
_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset("([{")
_OCTAL = frozenset("01234567")
_SIMPLE_ESCAPES = frozenset("?\"'\\abfnrvt")


class ScanError(Exception):
    """Raised when the scanned text is malformed."""

    def __init__(self, message: str, line: int, column: int) -> None:
        super().__init__(f"Error at {line}[L]:{column}[C] -- {message}")
        self.message = message
        self.line = line
        self.column = column


class Scanner:
    """Reads a text stream character by character and checks its brackets."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self.line = 1
        self.column = 1
        self._stack: list[str] = []
        self._pairs = 0

    def _error(self, message: str) -> ScanError:
        return ScanError(message, self.line, self.column)

    def _getch(self) -> str:
        ch = self._stream.read(1)
        if ch == "\n":
            self.line += 1
            self.column = 1
            return ch
        if ch == _EOF:
            if self._stack:
                raise self._error("unmatched parenthesis at EOF")
            return ch
        self.column += 1
        if self.column > COL_LIMIT:
            raise self._error("column limit exceeded")
        return ch

    def _comment_start(self) -> tuple[bool, str]:
        ch = self._getch()
        if ch == "/":
            ch = self._getch()
            if ch == "*":
                return True, ch
        return False, ch

    def _skip_comment(self) -> None:
        while True:
            ch = self._getch()
            if ch == "*":
                ch = self._getch()
                if ch in (_EOF, "/"):
                    return
            if ch == _EOF:
                return

    def _escape(self, single: bool) -> str:
        digits = 0
        while True:
            ch = self._getch()
            if ch in _OCTAL:
                if digits < 3:
                    digits += 1
                    continue
                raise self._error("escape sequence is too long")
            if ch == "'":
                return self._getch()
            if digits > 0:
                raise self._error("unknown digit for an escape sequence")
            break
        if ch in _SIMPLE_ESCAPES:
            if single:
                if self._getch() != "'":
                    raise self._error("unmatched single quote in escape")
                return "'"
            return ch
        if single:
            raise self._error("unknown escape character")
        return ch

    def _double_quoted(self) -> None:
        while True:
            ch = self._getch()
            if ch == "\\":
                ch = self._escape(single=False)
                if ch == "\n":
                    return
            if ch == '"':
                return
            if ch == _EOF:
                raise self._error("unterminated string literal")

    def _single_quoted(self) -> None:
        ch = self._getch()
        if ch == "\\":
            self._escape(single=True)
            return
        if self._getch() != "'":
            raise self._error("unmatched single quote")

    def _bracket(self, ch: str) -> None:
        if ch in _OPENERS:
            if len(self._stack) >= MAX_DEPTH:
                raise self._error("bracket nesting too deep")
            self._stack.append(ch)
            return
        if not self._stack:
            raise self._error("unmatched parenthesis")
        if self._stack.pop() != _PAIRS[ch]:
            raise self._error("unmatched parenthesis")
        self._pairs += 1

    def scan(self) -> int:
        """Scan to the end of the stream; return the number of matched bracket pairs."""
        while True:
            in_comment, ch = self._comment_start()
            if in_comment:
                self._skip_comment()
            elif ch == "'":
                self._single_quoted()
            elif ch == '"':
                self._double_quoted()
            elif ch in _OPENERS or ch in _PAIRS:
                self._bracket(ch)
            if ch == _EOF:
                return self._pairs


def scan(text: str) -> int:
    """Scan ``text``; return the number of matched bracket pairs."""
    return Scanner(io.StringIO(text)).scan()


def main(argv: Sequence[str] | None = None) -> int:
    """Check a file, or standard input, for balanced brackets."""
    parser = argparse.ArgumentParser(description="Check C source for balanced brackets.")
    parser.add_argument("file", nargs="?", help="file to check (default: stdin)")
    args = parser.parse_args(argv)
    try:
        if args.file is None:
            Scanner(sys.stdin).scan()
        else:
            with open(args.file, encoding="utf-8") as stream:
                Scanner(stream).scan()
    except ScanError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0