"""Token building blocks: C keywords and identifiers."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

IDENT_LEN = 31

_IDENT_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


class Keyword(enum.IntEnum):
    """The reserved words of C89."""

    AUTO = 0
    DOUBLE = enum.auto()
    INT = enum.auto()
    STRUCT = enum.auto()
    BREAK = enum.auto()
    ELSE = enum.auto()
    LONG = enum.auto()
    SWITCH = enum.auto()
    CASE = enum.auto()
    ENUM = enum.auto()
    REGISTER = enum.auto()
    TYPEDEF = enum.auto()
    CHAR = enum.auto()
    EXTERN = enum.auto()
    RETURN = enum.auto()
    UNION = enum.auto()
    CONST = enum.auto()
    FLOAT = enum.auto()
    SHORT = enum.auto()
    UNSIGNED = enum.auto()
    CONTINUE = enum.auto()
    FOR = enum.auto()
    SIGNED = enum.auto()
    VOID = enum.auto()
    DEFAULT = enum.auto()
    GOTO = enum.auto()
    SIZEOF = enum.auto()
    VOLATILE = enum.auto()
    DO = enum.auto()
    IF = enum.auto()
    STATIC = enum.auto()
    WHILE = enum.auto()

    @property
    def text(self) -> str:
        """The keyword as written in source code."""
        return self.name.lower()


_KEYWORDS = {kw.text: kw for kw in Keyword}


def lookup_keyword(word: str) -> Keyword | None:
    """Return the keyword spelled by ``word``, or None if it is not one."""
    return _KEYWORDS.get(word)


@dataclass(frozen=True)
class Ident:
    """An identifier of at most IDENT_LEN characters."""

    name: str

    def __post_init__(self) -> None:
        if len(self.name) > IDENT_LEN:
            raise ValueError(
                f"identifier {self.name!r} is longer than {IDENT_LEN} characters"
            )
        if not _IDENT_RE.fullmatch(self.name):
            raise ValueError(f"{self.name!r} is not a valid identifier")