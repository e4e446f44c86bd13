from __future__ import annotations

import re

EQUALS = "="
COMMA = ","
WHITESPACE = " "

# Tie-break order when several delimiter kinds share the earliest index.
DELIMITER_PRIORITY: tuple[str, ...] = (EQUALS, WHITESPACE, COMMA)

_NUMBER = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def _find_whitespace(text: str, start: int) -> int:
    for index in range(start, len(text)):
        if text[index].isspace():
            return index
    return -1


def find_delimiter(text: str, start: int = 0) -> tuple[int, str] | None:
    """Return ``(index, kind)`` of the earliest ``=``, whitespace or ``,`` at or after *start*."""
    positions = {
        EQUALS: text.find(EQUALS, start),
        WHITESPACE: _find_whitespace(text, start),
        COMMA: text.find(COMMA, start),
    }
    found = {kind: index for kind, index in positions.items() if index != -1}
    if not found:
        return None
    earliest = min(found.values())
    kind = next(k for k in DELIMITER_PRIORITY if found.get(k) == earliest)
    return earliest, kind


def trim_separator(text: str) -> str:
    text = text.strip()
    if text.startswith(COMMA):
        text = text[1:]
    return text.strip()


def find_closing_quote(text: str, start: int = 1) -> int:
    """Index of the first unescaped ``"`` at or after *start*, or -1."""
    index = start
    while index < len(text):
        char = text[index]
        if char == "\\":
            index += 2
            continue
        if char == '"':
            return index
        index += 1
    return -1


def find_array_close(text: str) -> int:
    """
    Index of the ``]`` matching the ``[`` at ``text[0]``, or -1.

    Brackets inside double-quoted strings do not count towards the depth.
    """
    depth = 1
    index = 1
    while index < len(text):
        char = text[index]
        if char == '"':
            end = find_closing_quote(text, index + 1)
            if end == -1:
                return -1
            index = end + 1
            continue
        if char == "[":
            depth += 1
        elif char == "]":
            depth -= 1
            if depth == 0:
                return index
        index += 1
    return -1


def parse_number(token: str) -> int | float | None:
    """
    Read *token* as a decimal number, or return ``None``.

    The whole token must be a decimal literal: a numeric prefix such as
    ``10abc`` is deliberately not read as 10, and ``Infinity`` or ``nan`` stay
    text. Integer literals too long for ``int`` fall back to ``float``.
    """
    if not _NUMBER.fullmatch(token):
        return None
    if any(c in token for c in ".eE"):
        return float(token)
    try:
        return int(token)
    except ValueError:
        return float(token)
