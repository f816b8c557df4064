import pytest

from ctoys.consts import (
    ConstKind,
    ConstantError,
    IntType,
    scan_cconst,
    scan_iconst,
)

VALID_ICONSTS = [
    ("017777", IntType.INT, 0o17777),
    ("0x7bcd", IntType.INT, 0x7BCD),
    ("1264", IntType.INT, 1264),
    ("1284", IntType.INT, 1284),
    ("32767", IntType.INT, 32767),
    ("0x7fff", IntType.INT, 0x7FFF),
    ("077777", IntType.INT, 0o77777),
    ("32767l", IntType.LONG, 32767),
    ("32767u", IntType.UINT, 32767),
    ("32767U", IntType.UINT, 32767),
    ("32767ul", IntType.ULONG, 32767),
    ("65535", IntType.LONG, 65535),
    ("0xffff", IntType.UINT, 0xFFFF),
    ("65535l", IntType.LONG, 65535),
    ("65535u", IntType.UINT, 65535),
    ("65536", IntType.LONG, 65536),
    ("2147483647", IntType.LONG, 2147483647),
    ("2147483647u", IntType.ULONG, 2147483647),
    ("2147483648", IntType.ULONG, 2147483648),
    ("4294967295", IntType.ULONG, 4294967295),
    ("0xffffffff", IntType.ULONG, 0xFFFFFFFF),
    ("0x12fb", IntType.INT, 0x12FB),
    ("0x8000", IntType.UINT, 0x8000),
    ("0000", IntType.INT, 0),
    ("0", IntType.INT, 0),
    ("0x0000", IntType.INT, 0),
    ("01", IntType.INT, 1),
    ("1", IntType.INT, 1),
    ("0x0001", IntType.INT, 1),
    ("0xabcd", IntType.UINT, 0xABCD),
    ("0x12fbu", IntType.UINT, 0x12FB),
    ("0xabcdef", IntType.LONG, 0xABCDEF),
    ("0x12fbl", IntType.LONG, 0x12FB),
    ("0x12fblu", IntType.ULONG, 0x12FB),
    ("0x12fbul", IntType.ULONG, 0x12FB),
    ("0x12fbUL", IntType.ULONG, 0x12FB),
    ("0x12FbUL", IntType.ULONG, 0x12FB),
    ("0x12FbUl", IntType.ULONG, 0x12FB),
    ("0x12F00blU", IntType.ULONG, 0x12F00B),
    ("0x12F00b", IntType.LONG, 0x12F00B),
    ("037777777777", IntType.ULONG, 0o37777777777),
    ("017777777777", IntType.LONG, 0o17777777777),
    ("036543212345", IntType.ULONG, 0o36543212345),
    ("012345", IntType.INT, 0o12345),
    ("0177777", IntType.UINT, 0o177777),
    ("0177777u", IntType.UINT, 0o177777),
    ("0177777l", IntType.LONG, 0o177777),
    ("0177777ul", IntType.ULONG, 0o177777),
    ("0177777lu", IntType.ULONG, 0o177777),
    ("01777777", IntType.LONG, 0o1777777),
    ("01777777l", IntType.LONG, 0o1777777),
    ("01777777ul", IntType.ULONG, 0o1777777),
    ("01777777lu", IntType.ULONG, 0o1777777),
    ("0001777777lu", IntType.ULONG, 0o1777777),
]

INVALID_ICONSTS = [
    "400094967296",
    "4294967296",
    "4000094967296",
    "0x100000000",
    "08000",
    "076543212345",
    "066543212345",
    "056543212345",
    "040000000000",
    "0777777777777",
    "",
]


@pytest.mark.parametrize("text, int_type, value", VALID_ICONSTS)
def test_scan_iconst_valid(text, int_type, value):
    const = scan_iconst(text)
    assert const.kind is ConstKind.INT
    assert const.int_type is int_type
    assert const.value == value


@pytest.mark.parametrize("text", INVALID_ICONSTS)
def test_scan_iconst_invalid(text):
    with pytest.raises(ConstantError):
        scan_iconst(text)


def test_constant_error_is_value_error():
    with pytest.raises(ValueError):
        scan_iconst("12x")


VALID_CCONSTS = [
    ("'a'", ord("a")),
    ("'?'", ord("?")),
    ("'\\n'", ord("\n")),
    ("'\\v'", ord("\v")),
    ("'\\a'", ord("\a")),
    ("'\\t'", ord("\t")),
    ("'\\?'", ord("?")),
    ("'\\0'", 0),
    ("'\\1'", 1),
    ("'\\12'", 0o12),
]


@pytest.mark.parametrize("text, value", VALID_CCONSTS)
def test_scan_cconst_valid(text, value):
    const = scan_cconst(text)
    assert const.kind is ConstKind.CHAR
    assert const.value == value
    assert const.int_type is None


@pytest.mark.parametrize(
    "text",
    ["'ab'", "''", "'a", "'''", "'\\'", "'\\x'", "'\\200'", "'\\8'"],
)
def test_scan_cconst_invalid(text):
    with pytest.raises(ConstantError):
        scan_cconst(text)


@pytest.mark.parametrize("letter", ["n", "t", "v", "b", "r", "f", "a"])
def test_simple_escapes_match_python(letter):
    expected = ord(f"\\{letter}".encode().decode("unicode_escape"))
    assert scan_cconst(f"'\\{letter}'").value == expected


def test_octal_escape_limit():
    assert scan_cconst("'\\177'").value == 0o177