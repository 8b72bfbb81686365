"""
  Scheme Reader, Lexer and Parser

- Streaming, lazy parsing: one top-level expression per parse_expr() call
- Emits minischeme values directly:

    - integers      -> int
    - #t / #f       -> bool
    - strings       -> SchemeString (raw characters, no escapes)
    - symbols       -> Symbol
    - ()            -> Nil
    - lists         -> Pair chains ending in Nil
    - (a . b)       -> dotted Pair
    - ; comments    -> skipped

End of input is reported as None, which is never a Scheme value.
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from minischeme import SExpression
from minischeme.errors import SchemeReadError
from minischeme.types.nil import Nil
from minischeme.types.pair import Pair
from minischeme.types.scheme_string import SchemeString
from minischeme.types.symbol import Symbol


TOKEN_RE = re.compile(
    r"\s*(?:"
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r'|(?P<string>"[^"]*")'  # double-quoted string, raw contents
    r'|(?P<broken_string>"[^"]*$)'  # string running to end of input
    r'|(?P<symbol>[^\s()";]+)'  # everything else: numbers, booleans, symbols
    r")",
    re.DOTALL,
)

INTEGER_RE = re.compile(r"-?\d+")

Token = tuple[str, str, int]


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields (token_type, token_value, offset) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m:
            # only trailing whitespace left
            if source[pos:].isspace():
                break
            raise SchemeReadError(f"Unexpected char at {pos}: {source[pos]!r}", pos)
        pos = m.end()
        kind = m.lastgroup
        if kind == "comment":
            continue
        if kind == "broken_string":
            raise SchemeReadError("Unterminated string", m.start(kind))
        yield kind, m.group(kind), m.start(kind)


class TokenStream:
    def __init__(self, token_iter: Iterator[Token]):
        self.tokens = iter(token_iter)
        self.buffer: list[Token] = []

    def peek(self) -> tuple[Optional[str], Optional[str], int]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None, -1
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str], int]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None, -1))

    def parse_expr(self) -> Optional[SExpression]:
        """Read one expression, or return None at end of input."""
        tok_type, tok_val, offset = self.advance()
        if tok_type is None:
            return None

        if tok_type == "lparen":
            return self._parse_list(offset)

        if tok_type == "rparen":
            raise SchemeReadError("Unmatched ')'", offset)

        if tok_type == "string":
            return SchemeString(tok_val[1:-1])

        if tok_val == ".":
            raise SchemeReadError("Unexpected '.' outside of a list", offset)
        return atom(tok_val)

    def _parse_list(self, open_offset: int) -> SExpression:
        items: list[SExpression] = []
        tail: SExpression = Nil
        while True:
            tok_type, tok_val, offset = self.peek()
            if tok_type is None:
                raise SchemeReadError("Unmatched '('", open_offset)
            if tok_type == "rparen":
                self.advance()
                break
            if tok_type == "symbol" and tok_val == ".":
                self.advance()
                if not items:
                    raise SchemeReadError("Expected a datum before '.'", offset)
                if self.peek()[0] == "rparen":
                    raise SchemeReadError("Expected a datum after '.'", offset)
                tail = self.parse_expr()
                if tail is None:
                    raise SchemeReadError("Unmatched '('", open_offset)
                closing, _, close_offset = self.advance()
                if closing != "rparen":
                    raise SchemeReadError("Expected ')' after dotted cdr", close_offset)
                break
            items.append(self.parse_expr())

        result = tail
        for item in reversed(items):
            result = Pair(item, result)
        return result

    def parse_all(self) -> Iterator[SExpression]:
        while True:
            expr = self.parse_expr()
            if expr is None:
                break
            yield expr


def atom(token: str) -> SExpression:
    """Turn a bare token into an integer, boolean or symbol."""
    if INTEGER_RE.fullmatch(token):
        return int(token)
    if token == "#t":
        return True
    if token == "#f":
        return False
    return Symbol(token)


def read_all(source: str) -> Iterator[SExpression]:
    """Yield every top-level expression in `source`."""
    return TokenStream(lex(source)).parse_all()


def parse(source: str) -> Optional[SExpression]:
    """Read the first expression in `source`, or None if there is none."""
    return TokenStream(lex(source)).parse_expr()
