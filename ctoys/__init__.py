"""Compiler front-end pieces: C constant scanning, C keywords, bracket checking and an expression parser."""

__version__ = "0.1.0"
__all__ = ["consts", "tokens", "exprparse", "bracketscan"]