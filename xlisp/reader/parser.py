"""
  xlisp reader: lexer and streaming parser.

Emits plain Python values rather than cons cells:

    - nil          -> Nil
    - true/false   -> True/False
    - (a b c)      -> list (a call form when evaluated)
    - [a b c]      -> Vector
    - symbols      -> Symbol (keywords are symbols starting with ':')
    - strings      -> str
    - numbers      -> int/float (#b/#o/#x radix literals supported)
    - 'x `x ,x ,@x -> (quote x) (quasiquote x) (unquote x) (unquote-splicing x)

A `#!` first line is skipped so scripts can carry a shebang.
"""

from __future__ import annotations

import ast
import re
from typing import Iterator, Optional

from xlisp import SExpression
from xlisp.errors import XlispSyntaxError
from xlisp.types.nil import Nil
from xlisp.types.symbol import Symbol
from xlisp.types.vector import Vector
from xlisp.reader.reader_macros import reader_macros


TOKEN_RE = re.compile(
    r"\s*("
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<ml_start>#\|)"  # multi-line comment start
    r"|(?P<quote>[\'`])"  # ' and `
    r"|(?P<unquote>,@|,)"  # , and ,@
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<lbracket>\[)"  # [
    r"|(?P<rbracket>\])"  # ]
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r"|(?P<radix>#b[01]+|#o[0-7]+|#x[0-9A-Fa-f]+)"  # binary, octal, hex
    r'|(?P<symbol>[^\s()\[\]\'`",;]+)'  # fallback: symbols
    r")",
    re.DOTALL,
)

_INT_RE = re.compile(r"[+-]?\d+\Z")
_FLOAT_RE = re.compile(r"[+-]?(?:\d+\.\d*|\.\d+|\d+)(?:[eE][+-]?\d+)?\Z")


def _skip_shebang(source: str) -> int:
    if not source.startswith("#!"):
        return 0
    end = source.find("\n")
    return len(source) if end < 0 else end + 1


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = _skip_shebang(source)
    n = len(source)

    def skip_whitespace_and_comments():
        nonlocal pos
        while pos < n:
            if source[pos].isspace():
                pos += 1
                continue
            match = TOKEN_RE.match(source, pos)
            if not match:
                raise XlispSyntaxError(f"Unexpected char at {pos}: {source[pos]!r}")
            if match.group("comment"):
                pos = match.end()
            elif match.group("ml_start"):
                pos = match.end()
                depth = 1
                while depth > 0:
                    if pos >= n:
                        raise XlispSyntaxError("Unterminated multi-line comment")
                    if source.startswith("#|", pos):
                        depth += 1
                        pos += 2
                    elif source.startswith("|#", pos):
                        depth -= 1
                        pos += 2
                    else:
                        pos += 1
            else:
                break

    while pos < n:
        skip_whitespace_and_comments()
        if pos >= n:
            break

        m = TOKEN_RE.match(source, pos)
        if not m or m.end() == pos:
            raise XlispSyntaxError(f"Unknown token at {pos}: {source[pos]!r}")
        for nm in TOKEN_RE.groupindex:
            if m.group(nm):
                yield nm, m.group(nm)
                pos = m.end()
                break


def _read_atom(token: str) -> SExpression:
    if token == "nil":
        return Nil
    if token == "true":
        return True
    if token == "false":
        return False
    if _INT_RE.match(token):
        return int(token)
    if _FLOAT_RE.match(token):
        return float(token)
    return Symbol(token)


class TokenStream:
    def __init__(self, token_iter: Iterator[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def _parse_sequence(self, closer: str, what: str) -> list[SExpression]:
        items = []
        while True:
            tok_type, _ = self.peek()
            if tok_type == closer:
                self.advance()
                return items
            if tok_type is None:
                raise XlispSyntaxError(f"Unexpected EOF while reading {what}")
            items.append(self.parse_expr())

    def parse_expr(self) -> SExpression:
        """Parse the next expression; returns None at end of input."""
        tok_type, tok_val = self.peek()
        if tok_type is None:
            return None

        if tok_type in ("quote", "unquote") and reader_macros.is_macro(tok_val):
            self.advance()
            if self.peek()[0] is None:
                raise XlispSyntaxError(f"Expected expression after {tok_val!r}")
            return reader_macros.dispatch(tok_val, self)

        self.advance()

        if tok_type == "symbol":
            return _read_atom(tok_val)

        if tok_type == "lparen":
            return self._parse_sequence("rparen", "list")

        if tok_type == "lbracket":
            return Vector(self._parse_sequence("rbracket", "vector"))

        if tok_type == "string":
            return ast.literal_eval(tok_val)

        if tok_type == "radix":
            base = {"b": 2, "o": 8, "x": 16}[tok_val[1]]
            return int(tok_val[2:], base)

        if tok_type in ("rparen", "rbracket"):
            raise XlispSyntaxError(f"Unmatched {tok_val!r}")

        raise XlispSyntaxError(f"Unknown token: {tok_type} {tok_val}")

    def parse_all(self) -> Iterator[SExpression]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def read_string(source: str) -> list[SExpression]:
    """Read every top-level form in `source`."""
    return list(TokenStream(lex(source)).parse_all())
