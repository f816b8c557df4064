# ctoys

Small pieces of the front end of a C compiler.

- `ctoys.consts` recognises C integer constants (`123`, `0777`, `0x1fUL`)
  and character constants (`'a'`, `'\n'`, `'\12'`). Integer types follow a
  16-bit `int` / 32-bit `long` model. `32767` is an `int`, `65535` is a
  `long` and `0xffff` is an `unsigned int`.
- `ctoys.tokens` has the C89 keywords (`Keyword`, `lookup_keyword`) and an
  `Ident` type. An `Ident` raises `ValueError` if a name is not a valid
  identifier or is longer than 31 characters.
- `ctoys.exprparse` parses and evaluates expressions made of non-negative
  integers, `+`, `*` and parentheses.
- `ctoys.bracketscan` checks that the brackets `()`, `[]` and `{}` in C source
  are balanced. It ignores brackets inside `/* */` comments, string literals
  and character literals.

## Installing

    pip install .

To run the tests as well:

    pip install ".[test]"
    pytest

## Library use

### Constants

```python
from ctoys.consts import scan_iconst, scan_cconst, IntType, ConstKind

const = scan_iconst("0xffff")
assert const.kind is ConstKind.INT
assert const.int_type is IntType.UINT
assert const.value == 0xFFFF

assert scan_cconst("'\\n'").value == ord("\n")
```

`scan_iconst` and `scan_cconst` return a frozen `Constant` with the fields
`kind`, `value` and `int_type`. `int_type` is `None` for character constants.
If a string is not a valid constant, or its value does not fit in a 32-bit
`unsigned long`, the functions raise `ConstantError`, which is a subclass of
`ValueError`.

### Keywords and identifiers

```python
from ctoys.tokens import Keyword, Ident, lookup_keyword

assert lookup_keyword("while") is Keyword.WHILE
assert lookup_keyword("main") is None
assert Keyword.SIZEOF.text == "sizeof"
Ident("counter")        # valid
```

### Expressions

```python
from ctoys.exprparse import Parser, tokenize, evaluate, format_expr, format_stream

stream = tokenize("((1+5)+2*(2+3))*4")
print(format_stream(stream))
tree = Parser(stream).parse()
print(format_expr(tree))
print(evaluate(tree))  # 64
```

`format_expr` prints the tree with one node on each line and indents each
child by four spaces. `tokenize` skips whitespace. A malformed expression, or
an unexpected character, raises `ParseError`.

### Bracket checking

```python
from ctoys.bracketscan import scan, ScanError

scan("int main(void) { return a[0]; }")  # returns 3, the matched pairs
scan("f(]")                              # raises ScanError
```

`ScanError` has `message`, `line` and `column` attributes. A line can hold at
most 510 characters. Brackets can nest to a depth of at most 2047.

## Commands

`ctoys-expr` prints the token stream, the expression tree and the value of the
expression. With no argument it uses the built-in sample
`((1+5)+2*(2+3))*4`. If you give arguments, it joins them with spaces and uses
that as the expression:

    ctoys-expr "(1+2)*3"

If the expression has an error, the command prints the error and the line
`Error while parsing: 1`.

`ctoys-brackets` checks the brackets in a file. With no file argument it reads
standard input:

    ctoys-brackets program.c
    ctoys-brackets < program.c

On the first problem it writes the line and column to standard error and exits
with status 1.

## What it does not do

These are separate tools. The package does not turn C source into a full token
stream: the constant scanners work on one constant that is already cut out of
the source, and `ctoys.tokens` only provides keywords and identifiers.
`ConstKind` has members for string and enumeration constants, but nothing in
the package scans them. The expression parser knows only `+` and `*`.