"""
  Ballgame Reader: Lexer and Parser

- Lazy lexing: tokens are produced on demand, so anything after the first
  complete expression is never looked at.
- Emits Python primitives:

    - atoms   -> Symbol, except #t / #f -> True / False
    - strings -> str (escapes resolved)
    - chars   -> Character
    - numbers -> int / float
    - lists   -> Python list; (, [ and { open, ), ] and } close
    - 'expr   -> [Symbol("quote"), expr]

Whitespace is a separator only: it may not lead the input, follow a quote,
or sit directly inside brackets.
"""

from __future__ import annotations

import logging
import re
from typing import Iterator, Optional

from ballgame import SExpression
from ballgame.types.character import NAMED_CHARS, Character
from ballgame.types.errors import BallgameSyntaxError
from ballgame.types.symbol import Symbol

logger = logging.getLogger(__name__)

SOURCE_NAME = "lisp"

SYMBOL_CHARS = "!#$%&|*+-/:<=>?@^_~"

_LETTER = r"[^\W\d_]"
_SYMBOL = "[" + re.escape(SYMBOL_CHARS) + "]"

TOKEN_RE = re.compile(
    r"(?P<whitespace>\s+)"
    r"|(?P<lbracket>[(\[{])"
    r"|(?P<rbracket>[)\]}])"
    r"|(?P<quote>')"
    r'|(?P<string>"(?:[^\\"]|\\[\\abtnvfr"])*")'
    rf"|(?P<char>#\\{_LETTER}+)"
    r"|(?P<decimal>[0-9]+\.[0-9]+)"  # before integer: 3.14 is one token
    r"|(?P<integer>[0-9]+)"
    rf"|(?P<atom>(?:{_LETTER}|{_SYMBOL})(?:{_LETTER}|[0-9]|{_SYMBOL})*)"
    r"|(?P<error>.)",
    re.DOTALL,
)

ESCAPES: dict[str, str] = {
    "\\": "\\",
    "a": "\a",
    "b": "\b",
    "t": "\t",
    "n": "\n",
    "v": "\v",
    "f": "\f",
    "r": "\r",
    '"': '"',
}
_ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)

BRACKET_PAIRS: dict[str, str] = {"(": ")", "[": "]", "{": "}"}

QUOTE = Symbol("quote")

Token = tuple[Optional[str], Optional[str], int]


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields (token_type, token_value, offset) tuples."""
    for match in TOKEN_RE.finditer(source):
        yield match.lastgroup, match.group(), match.start()


def unescape(body: str) -> str:
    return _ESCAPE_RE.sub(lambda m: ESCAPES[m.group(1)], body)


def position(source: str, offset: int) -> tuple[int, int]:
    """Return the 1-based (line, column) of an offset."""
    line = source.count("\n", 0, offset) + 1
    column = offset - (source.rfind("\n", 0, offset) + 1) + 1
    return line, column


class TokenStream:
    def __init__(self, source: str, strict_brackets: bool = False):
        self.source = source
        self.tokens = lex(source)
        self.buffer: list[Token] = []
        self.strict_brackets = strict_brackets

    def peek(self) -> Token:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None, len(self.source)
        return self.buffer[0]

    def advance(self) -> Token:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None, len(self.source)))

    def parse_expr(self) -> SExpression:
        tok_type, tok_val, pos = self.peek()

        if tok_type == "atom":
            self.advance()
            if tok_val == "#t":
                return True
            if tok_val == "#f":
                return False
            return Symbol(tok_val)

        if tok_type == "string":
            self.advance()
            return unescape(tok_val[1:-1])

        if tok_type == "char":
            self.advance()
            return self._read_char(tok_val, pos)

        if tok_type == "integer":
            self.advance()
            try:
                return int(tok_val)
            except ValueError:
                # past the interpreter's int/str digit limit
                line, column = position(self.source, pos)
                raise BallgameSyntaxError(
                    f'"{SOURCE_NAME}" (line {line}, column {column}): '
                    f"integer literal too long ({len(tok_val)} digits)",
                    line,
                    column,
                ) from None

        if tok_type == "decimal":
            self.advance()
            return float(tok_val)

        if tok_type == "quote":
            self.advance()
            return [QUOTE, self.parse_expr()]

        if tok_type == "lbracket":
            self.advance()
            return self._parse_list(tok_val)

        raise self._unexpected(tok_type, tok_val, pos, "expression")

    def _parse_list(self, opener: str) -> list[SExpression]:
        items: list[SExpression] = []
        if self.peek()[0] == "rbracket":
            self._close(opener)
            return items
        while True:
            items.append(self.parse_expr())
            tok_type, tok_val, pos = self.peek()
            if tok_type == "rbracket":
                self._close(opener)
                return items
            if tok_type != "whitespace":
                raise self._unexpected(tok_type, tok_val, pos, "space or closing bracket")
            self.advance()

    def _close(self, opener: str) -> None:
        _, closer, pos = self.advance()
        expected = BRACKET_PAIRS[opener]
        if self.strict_brackets and closer != expected:
            raise self._unexpected("rbracket", closer, pos, f'"{expected}"')

    def _read_char(self, tok_val: str, pos: int) -> Character:
        name = tok_val[2:]  # strip off "#\"
        if len(name) == 1:
            return Character(name)
        if name.lower() in NAMED_CHARS:
            return Character(NAMED_CHARS[name.lower()])
        line, column = position(self.source, pos)
        raise BallgameSyntaxError(
            f'"{SOURCE_NAME}" (line {line}, column {column}): unknown character name "{name}"',
            line,
            column,
        )

    def _unexpected(
        self, tok_type: str | None, tok_val: str | None, pos: int, expecting: str
    ) -> BallgameSyntaxError:
        line, column = position(self.source, pos)
        if tok_type is None:
            what = "end of input"
        elif tok_type == "whitespace":
            what = "whitespace"
        elif tok_type == "error" and tok_val == '"':
            what = "malformed string literal"
        else:
            what = f'"{tok_val}"'
        return BallgameSyntaxError(
            f'"{SOURCE_NAME}" (line {line}, column {column}): unexpected {what}; expecting {expecting}',
            line,
            column,
        )


def read_expr(source: str, strict_brackets: bool = False) -> SExpression:
    """Read exactly one expression from the start of ``source``."""
    expr = TokenStream(source, strict_brackets).parse_expr()
    logger.debug("read %r -> %r", source, expr)
    return expr
