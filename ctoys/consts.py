"""Scanning of C integer and character constants for a 16/32-bit target.

The target model has a 16-bit ``int`` and a 32-bit ``long``. Integer
constants are typed the way C89 does it. The type depends on the value,
the base and the ``u``/``l`` suffixes.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

TCHAR_BIT = 8
TCHAR_MIN = -128
TCHAR_MAX = 127
TINT_MIN = -32768
TINT_MAX = 32767
TUINT_MAX = 65535
TLONG_MIN = -2147483648
TLONG_MAX = 2147483647
TULONG_MAX = 4294967295

_DIGITS = {
    8: frozenset("01234567"),
    10: frozenset("0123456789"),
    16: frozenset("0123456789abcdefABCDEF"),
}

_SIMPLE_ESCAPES = {
    "n": ord("\n"),
    "t": ord("\t"),
    "v": ord("\v"),
    "b": ord("\b"),
    "r": ord("\r"),
    "f": ord("\f"),
    "a": ord("\a"),
    "\\": ord("\\"),
    "?": ord("?"),
    "'": ord("'"),
    '"': ord('"'),
}


class ConstantError(ValueError):
    """Raised when text is not a valid constant."""


class ConstKind(enum.Enum):
    """Broad kind of a constant."""

    INT = "int"
    CHAR = "char"
    STRING = "string"
    ENUM = "enum"


class IntType(enum.Enum):
    """Type given to an integer constant."""

    INT = "int"
    UINT = "unsigned int"
    LONG = "long"
    ULONG = "unsigned long"


class _Suffix(enum.Enum):
    NONE = ""
    U = "u"
    L = "l"
    UL = "ul"


@dataclass(frozen=True)
class Constant:
    """A scanned constant: its kind, numeric value and, for integers, type."""

    kind: ConstKind
    value: int
    int_type: IntType | None = None


def _split_suffix(body: str) -> tuple[str, _Suffix]:
    if len(body) < 2:
        return body, _Suffix.NONE
    if len(body) > 2 and body[-2:].lower() in ("ul", "lu"):
        return body[:-2], _Suffix.UL
    last = body[-1].lower()
    if last == "l":
        return body[:-1], _Suffix.L
    if last == "u":
        return body[:-1], _Suffix.U
    return body, _Suffix.NONE


def _decode(body: str, base: int) -> tuple[int, _Suffix]:
    digits, suffix = _split_suffix(body)
    if not digits:
        raise ConstantError(f"no digits in {body!r}")
    valid = _DIGITS[base]
    bad = next((c for c in digits if c not in valid), None)
    if bad is not None:
        raise ConstantError(f"invalid digit {bad!r} for base {base}")
    value = int(digits, base)
    if value > TULONG_MAX:
        raise ConstantError(f"constant {body!r} does not fit in unsigned long")
    return value, suffix


def _int_type(value: int, base: int, suffix: _Suffix) -> IntType:
    if suffix is _Suffix.NONE:
        if value <= TINT_MAX:
            return IntType.INT
        if base in (8, 16) and value <= TUINT_MAX:
            return IntType.UINT
        if value <= TLONG_MAX:
            return IntType.LONG
        return IntType.ULONG
    if suffix is _Suffix.U and value <= TUINT_MAX:
        return IntType.UINT
    if suffix is _Suffix.L and value <= TLONG_MAX:
        return IntType.LONG
    return IntType.ULONG


def _split_base(src: str) -> tuple[int, str]:
    if not src:
        raise ConstantError("empty integer constant")
    if len(src) == 1:
        return 10, src
    if len(src) > 2 and src[0] == "0" and src[1] in "xX":
        return 16, src[2:]
    if src[0] == "0":
        return 8, src[1:]
    return 10, src


def scan_iconst(src: str) -> Constant:
    """Scan an integer constant such as ``1264``, ``0x12fbUL`` or ``0177777``."""
    base, body = _split_base(src)
    value, suffix = _decode(body, base)
    return Constant(ConstKind.INT, value, _int_type(value, base, suffix))


def _scan_escape(body: str) -> int:
    if len(body) == 1:
        if body in _SIMPLE_ESCAPES:
            return _SIMPLE_ESCAPES[body]
        if body in _DIGITS[8]:
            return int(body)
        raise ConstantError(f"unknown escape character {body!r}")
    value, _ = _decode(body, 8)
    if value >= 128:
        raise ConstantError(f"octal escape {body!r} is out of range")
    return value


def scan_cconst(src: str) -> Constant:
    """Scan a quoted character constant such as ``'a'``, ``'\\n'`` or ``'\\12'``."""
    if len(src) < 3:
        raise ConstantError(f"character constant {src!r} is too short")
    if src[0] != "'" or src[-1] != "'":
        raise ConstantError(f"character constant {src!r} is not quoted")
    inner = src[1:-1]
    if len(inner) == 1:
        if inner in ("'", "\\"):
            raise ConstantError(f"bad character constant {src!r}")
        return Constant(ConstKind.CHAR, ord(inner))
    if inner[0] != "\\":
        raise ConstantError(f"character constant {src!r} holds several characters")
    return Constant(ConstKind.CHAR, _scan_escape(inner[1:]))