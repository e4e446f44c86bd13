"""
Recursive-descent decoder for LWCP array literals.

Array values look like JSON arrays with two relaxations: keywords
(``TRUE``, ``False``, ``NULL`` ...) are case-insensitive, and unquoted
upper-case enumerations such as ``IDLE`` or ``NOT_READY`` are accepted as
strings. Object literals are not part of the grammar.
"""
from __future__ import annotations

import json
import re
from typing import Any

from lwcp.core.text import find_closing_quote, parse_number
from lwcp.errors import ArrayLiteralError

_KEYWORDS: dict[str, Any] = {"true": True, "false": False, "null": None}

# Bare enumerations: upper-case words, optionally joined by underscores.
ENUM_PATTERN = re.compile(r"[A-Z]+(?:_[A-Z]+)*")

_TOKEN_STOP = frozenset(',[]"')


class _ArrayReader:
    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def skip_whitespace(self) -> None:
        while self.pos < len(self.text) and self.text[self.pos].isspace():
            self.pos += 1

    def peek(self) -> str:
        self.skip_whitespace()
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def expect(self, char: str) -> None:
        if self.peek() != char:
            raise ArrayLiteralError(f"expected {char!r}", self.pos)
        self.pos += 1

    def read_array(self) -> list[Any]:
        self.expect("[")
        items: list[Any] = []
        if self.peek() == "]":
            self.pos += 1
            return items
        while True:
            items.append(self.read_value())
            char = self.peek()
            if char == ",":
                self.pos += 1
                continue
            if char == "]":
                self.pos += 1
                return items
            raise ArrayLiteralError("expected ',' or ']'", self.pos)

    def read_value(self) -> Any:
        char = self.peek()
        if char == "[":
            return self.read_array()
        if char == '"':
            return self.read_string()
        if char in ("", ",", "]"):
            raise ArrayLiteralError("missing value", self.pos)
        return self.read_scalar()

    def read_string(self) -> str:
        start = self.pos
        end = find_closing_quote(self.text, start + 1)
        if end == -1:
            raise ArrayLiteralError("unterminated string", start)
        try:
            value = json.loads(self.text[start : end + 1])
        except json.JSONDecodeError as exc:
            raise ArrayLiteralError(exc.msg, start + exc.pos) from exc
        self.pos = end + 1
        return value

    def read_scalar(self) -> Any:
        start = self.pos
        while self.pos < len(self.text):
            char = self.text[self.pos]
            if char in _TOKEN_STOP or char.isspace():
                break
            self.pos += 1
        token = self.text[start:self.pos]
        lowered = token.lower()
        if lowered in _KEYWORDS:
            return _KEYWORDS[lowered]
        number = parse_number(token)
        if number is not None:
            return number
        if ENUM_PATTERN.fullmatch(token):
            return token
        raise ArrayLiteralError(f"unexpected token {token!r}", start)


def parse_array_literal(text: str) -> list[Any]:
    """
    Decode a bracketed LWCP array literal.

    Args:
        text: The literal, including its outer brackets.

    Returns:
        The decoded list; nested arrays become nested lists.

    Raises:
        ArrayLiteralError: If the text is not a well-formed array literal.
    """
    reader = _ArrayReader(text)
    try:
        value = reader.read_array()
    except RecursionError as exc:
        raise ArrayLiteralError("arrays nested too deeply", reader.pos) from exc
    if reader.peek():
        raise ArrayLiteralError("trailing characters after array", reader.pos)
    return value
