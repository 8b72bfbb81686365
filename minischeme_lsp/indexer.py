"""
Lightweight indexer for minischeme files without evaluating code.

We scan for top-level forms and build an index for:
- definitions: (define name ...), marked as functions when the value is a lambda
- paren balance and unmatched string quotes
- the first reader error, found by running the real reader over the text

The scanner is tolerant so partial buffers never crash the server.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple
import re

from minischeme.errors import SchemeReadError
from minischeme.reader.parser import read_all

# Simple token patterns for scanning
TOKEN_REGEX = re.compile(
    r"\s+|;.*$|\(|\)|\"[^\"]*\"|[^\s()\";]+",
    re.MULTILINE,
)


@dataclass
class SymbolDef:
    name: str
    kind: str  # "var" | "function"
    line: int
    col: int


@dataclass
class ReadProblem:
    message: str
    line: int
    col: int


@dataclass
class DocumentIndex:
    symbols: Dict[str, SymbolDef] = field(default_factory=dict)
    paren_balance: int = 0
    has_unmatched_quote: bool = False
    read_error: Optional[ReadProblem] = None


def _iter_tokens(text: str):
    for m in TOKEN_REGEX.finditer(text):
        tok = m.group(0)
        if not tok or tok.isspace() or tok.startswith(';'):
            continue
        yield tok, m.start(), m.end()


def position_from_offset(text: str, offset: int) -> Tuple[int, int]:
    # Return (line, col), 0-based
    line = text.count("\n", 0, offset)
    last_nl = text.rfind("\n", 0, offset)
    col = offset if last_nl == -1 else offset - last_nl - 1
    return line, col


def _find_read_error(text: str) -> Optional[ReadProblem]:
    try:
        for _ in read_all(text):
            pass
    except SchemeReadError as ex:
        line, col = position_from_offset(text, max(ex.offset, 0))
        return ReadProblem(message=str(ex), line=line, col=col)
    return None


def build_index(text: str) -> DocumentIndex:
    idx = DocumentIndex()
    tokens = list(_iter_tokens(text))

    for i, (tok, start, _) in enumerate(tokens):
        if tok == ')':
            idx.paren_balance -= 1
            continue
        if tok != '(':
            continue
        idx.paren_balance += 1
        # (define name value): head, then name, then maybe "(lambda"
        if i + 2 >= len(tokens) or tokens[i + 1][0] != 'define':
            continue
        name, name_start, _ = tokens[i + 2]
        if name in ('(', ')') or name.startswith('"'):
            continue
        kind = 'var'
        if i + 4 < len(tokens) and tokens[i + 3][0] == '(' and tokens[i + 4][0] == 'lambda':
            kind = 'function'
        line, col = position_from_offset(text, name_start)
        idx.symbols[name] = SymbolDef(name=name, kind=kind, line=line, col=col)

    # Strings have no escapes, so every '"' outside a comment toggles
    in_string = False
    in_comment = False
    for ch in text:
        if in_comment:
            in_comment = ch != '\n'
        elif ch == '"':
            in_string = not in_string
        elif ch == ';' and not in_string:
            in_comment = True
    idx.has_unmatched_quote = in_string

    idx.read_error = _find_read_error(text)
    return idx


# Builtin signatures for quick hover/signature help without eval
BUILTIN_SIGNATURES: Dict[str, str] = {
    "+": "(+ n ...)",
    "-": "(- n1 n2 ...)",
    "*": "(* n1 n2 ...)",
    "/": "(/ n1 n2 ...)",
    "=": "(= a b)",
    "cons": "(cons car cdr)",
    "car": "(car pair)",
    "cdr": "(cdr pair)",
    "list": "(list x ...)",
    "if": "(if test consequent alternative)",
    "define": "(define name value)",
    "let": "(let ((name value) ...) body)",
    "lambda": "(lambda (params ...) body)",
}
