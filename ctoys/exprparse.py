"""A small recursive parser and evaluator for ``+``/``*`` expressions.

The parser works on a stream of lexemes and splits it by index ranges:
the right-most parenthesised group is handled first, then the right-most
``+`` and finally the right-most ``*``.
"""

from __future__ import annotations

import argparse
import enum
import logging
import re
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

logger = logging.getLogger(__name__)

CONST = "const"
DEFAULT_EXPRESSION = "((1+5)+2*(2+3))*4"

_PRIORITY = {"+": 0, "*": 1}
_TOKEN_RE = re.compile(r"(?P<num>\d+)|(?P<op>[()+*])|(?P<space>\s+)|(?P<bad>.)")


class ParseError(ValueError):
    """Raised when a lexeme stream does not form a valid expression."""


class NodeType(enum.Enum):
    """Kind of an expression tree node."""

    PLUS = "+"
    MUL = "*"
    OPAND = "operand"


_BINARY_OPS = {"+": NodeType.PLUS, "*": NodeType.MUL}


@dataclass(frozen=True)
class Node:
    """A node of an expression tree."""

    type: NodeType
    operand: int = 0
    left: Node | None = None
    right: Node | None = None


@dataclass(frozen=True)
class Lexeme:
    """One lexeme: an operator or bracket character, or a constant."""

    kind: str
    value: int = 0

    @property
    def text(self) -> str:
        """The lexeme as it is written."""
        return str(self.value) if self.kind == CONST else self.kind


def tokenize(text: str) -> list[Lexeme]:
    """Split ``text`` into lexemes; whitespace is skipped."""
    lexemes = []
    for match in _TOKEN_RE.finditer(text):
        if match.group("num") is not None:
            lexemes.append(Lexeme(CONST, int(match.group("num"))))
        elif match.group("op") is not None:
            lexemes.append(Lexeme(match.group("op")))
        elif match.group("bad") is not None:
            raise ParseError(
                f"unexpected character {match.group('bad')!r} at {match.start()}"
            )
    return lexemes


def _priority(kind: str) -> int:
    return _PRIORITY.get(kind, -1)


class Parser:
    """Builds an expression tree from a sequence of lexemes."""

    def __init__(self, stream: Iterable[Lexeme]) -> None:
        self.stream: list[Lexeme] = list(stream)

    def parse(self) -> Node:
        """Parse the whole stream and return the root of the tree."""
        node = self._expr(0, len(self.stream) - 1)
        if node is None:
            raise ParseError("cannot parse expression")
        return node

    def _kind(self, index: int) -> str:
        return self.stream[index].kind

    def _rightmost(self, lp: int, rp: int, kind: str) -> int | None:
        return next((p for p in range(rp, lp - 1, -1) if self._kind(p) == kind), None)

    def _expr(
        self, lp: int, rp: int, left: Node | None = None, right: Node | None = None
    ) -> Node | None:
        logger.debug("parse_expr(%d, %d, %r, %r)", lp, rp, left, right)
        if lp > rp:
            return None
        if lp == rp:
            return self._single(lp, left, right)
        node = self._paren(lp, rp)
        if node is None:
            node = self._binary(lp, rp, "+")
        if node is None:
            node = self._binary(lp, rp, "*")
        return node

    def _matching_open(self, lp: int, p: int) -> int:
        depth = 0
        for q in range(p - 1, lp - 1, -1):
            kind = self._kind(q)
            if kind == ")":
                depth += 1
            elif kind == "(":
                if depth == 0:
                    return q
                depth -= 1
        raise ParseError(f"Unmatched ) at {p}")

    def _paren(self, lp: int, rp: int) -> Node | None:
        p = self._rightmost(lp, rp, ")")
        if p is None:
            return None
        q = self._matching_open(lp, p)
        return self._build_paren(lp, rp, q, p)

    def _build_paren(self, lp: int, rp: int, q: int, p: int) -> Node | None:
        logger.debug("build_par(%d, %d, %d, %d)", lp, rp, q, p)
        if q == lp + 1:
            raise ParseError("Wrong placement of (")
        if rp == p + 1:
            raise ParseError("Wrong placement of )")
        inner = self._expr(q + 1, p - 1)
        if lp == q and rp == p:
            return inner
        if lp > q or rp < p:
            raise ParseError("internal error")
        if lp == q:
            return self._expr(p + 1, p + 1, inner, self._expr(p + 2, rp))
        if rp == p:
            return self._expr(q - 1, q - 1, self._expr(lp, q - 2), inner)
        if _priority(self._kind(p + 1)) > _priority(self._kind(q - 1)):
            return self._expr(
                q - 1,
                q - 1,
                self._expr(lp, q - 2),
                self._expr(p + 1, p + 1, inner, self._expr(p + 2, rp)),
            )
        return self._expr(
            p + 1,
            p + 1,
            self._expr(p + 2, rp),
            self._expr(q - 1, q - 1, self._expr(lp, q - 2), inner),
        )

    def _binary(self, lp: int, rp: int, op: str) -> Node | None:
        p = self._rightmost(lp, rp, op)
        if p is None:
            return None
        return self._expr(p, p, self._expr(lp, p - 1), self._expr(p + 1, rp))

    def _single(self, index: int, left: Node | None, right: Node | None) -> Node | None:
        lexeme = self.stream[index]
        if lexeme.kind == CONST:
            if left is not None or right is not None:
                raise ParseError("operand cannot have arguments")
            return Node(NodeType.OPAND, lexeme.value)
        if lexeme.kind in _BINARY_OPS:
            if left is None or right is None:
                raise ParseError("binary operator must have 2 arguments")
            return Node(_BINARY_OPS[lexeme.kind], 0, left, right)
        if lexeme.kind == "(":
            raise ParseError("Unmatched (")
        if lexeme.kind == ")":
            raise ParseError("Unmatched )")
        return None


def evaluate(node: Node) -> int:
    """Compute the value of an expression tree."""
    if node.type is NodeType.OPAND:
        if node.left is not None or node.right is not None:
            raise ParseError("operand has arguments")
        return node.operand
    if node.left is None or node.right is None:
        raise ParseError("operator is missing an argument")
    right = evaluate(node.right)
    left = evaluate(node.left)
    value = left + right if node.type is NodeType.PLUS else left * right
    logger.debug("eval_expr() = %d", value)
    return value


def _tree_lines(node: Node, shift: int) -> Iterator[str]:
    label = str(node.operand) if node.type is NodeType.OPAND else node.type.value
    yield " " * shift + label
    for child in (node.left, node.right):
        if child is not None:
            yield from _tree_lines(child, shift + 4)


def format_expr(node: Node | None) -> str:
    """Render a tree one node per line, children indented by four spaces."""
    if node is None:
        return "Node is NULL"
    return "\n".join(_tree_lines(node, 0))


def format_stream(stream: Sequence[Lexeme]) -> str:
    """Render a lexeme stream under a two-line column ruler."""
    return "\n".join(
        [
            "0...............1...............",
            "0123456789abcdef0123456789abcdef",
            "".join(lexeme.text for lexeme in stream),
        ]
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Parse, print and evaluate an expression given on the command line."""
    parser = argparse.ArgumentParser(description="Parse and evaluate an expression.")
    parser.add_argument("expression", nargs="*", help="expression to evaluate")
    args = parser.parse_args(argv)
    text = " ".join(args.expression) if args.expression else DEFAULT_EXPRESSION
    try:
        stream = tokenize(text)
        print(format_stream(stream))
        tree = Parser(stream).parse()
        print(format_expr(tree))
        print(evaluate(tree))
    except ParseError as exc:
        print(exc)
        print("Error while parsing: 1")
    return 0