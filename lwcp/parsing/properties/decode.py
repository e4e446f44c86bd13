"""
Scanner for the property list that trails an LWCP envelope.

A property list is a comma or whitespace separated run of ``name=value``
pairs and bare ``name`` flags::

    id=1, name="Studio name", busy_all=FALSE, line_list=[[IDLE, 0]], online

Values are quoted strings (kept verbatim), bracketed arrays (decoded by
:mod:`lwcp.parsing.arrays`) or bare scalars classified as boolean, null,
number or, failing all of those, a literal string such as ``IDLE``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from lwcp.core.text import (
    EQUALS,
    find_array_close,
    find_closing_quote,
    find_delimiter,
    parse_number,
    trim_separator,
)
from lwcp.errors import ArrayLiteralError, LwcpSyntaxError, SyntaxFault
from lwcp.parsing.arrays import parse_array_literal

_KEYWORDS: dict[str, Any] = {"true": True, "false": False, "null": None}


@dataclass(frozen=True)
class PropertyEntry:
    """
    One scanned property.

    Attributes:
        name: The property name as written on the wire.
        value: The decoded value; ``True`` for bare flags.
        is_flag: Whether the property was written without ``=value``.
    """
    name: str
    value: Any = True
    is_flag: bool = False


def classify_scalar(token: str) -> Any:
    """Turn a bare value token into a bool, ``None``, a number or the token itself."""
    lowered = token.lower()
    if lowered in _KEYWORDS:
        return _KEYWORDS[lowered]
    number = parse_number(token)
    if number is not None:
        return number
    return token


def _read_value(name: str, text: str) -> tuple[Any, str]:
    if text.startswith('"'):
        end = find_closing_quote(text)
        if end == -1:
            raise LwcpSyntaxError(name, SyntaxFault.UNTERMINATED_STRING)
        return text[1:end], text[end + 1:]

    if text.startswith("["):
        end = find_array_close(text)
        if end == -1:
            raise LwcpSyntaxError(name, SyntaxFault.UNTERMINATED_ARRAY)
        try:
            value = parse_array_literal(text[: end + 1])
        except ArrayLiteralError as exc:
            raise LwcpSyntaxError(name, SyntaxFault.INVALID_ARRAY) from exc
        return value, text[end + 1:]

    # Bare scalar: runs up to, but not over, the next delimiter.
    found = find_delimiter(text)
    if found is None:
        return classify_scalar(text), ""
    index, _ = found
    return classify_scalar(text[:index]), text[index:]


def _next_property(text: str) -> tuple[PropertyEntry, str]:
    found = find_delimiter(text)
    if found is None:
        return PropertyEntry(text, is_flag=True), ""

    index, kind = found
    name = text[:index]
    rest = text[index + 1:]
    if kind != EQUALS:
        return PropertyEntry(name, is_flag=True), rest

    value, rest = _read_value(name, rest.lstrip())
    return PropertyEntry(name, value), rest


def scan_properties(tail: str) -> list[PropertyEntry]:
    """
    Scan a property list into its entries, in wire order.

    Args:
        tail: Everything after the envelope of an LWCP message.

    Returns:
        The scanned entries, duplicates included.

    Raises:
        LwcpSyntaxError: On an unterminated string or array, or an array
            body that cannot be decoded.
    """
    entries: list[PropertyEntry] = []
    remaining = tail
    while remaining:
        remaining = trim_separator(remaining)
        if not remaining:
            break
        entry, remaining = _next_property(remaining)
        entries.append(entry)
    return entries


def parse_properties(tail: str) -> dict[str, Any]:
    """
    Scan a property list and fold it into a mapping.

    Bare flags map to ``True``; when a name repeats, the last occurrence wins.

    Raises:
        LwcpSyntaxError: See :func:`scan_properties`.
    """
    return {entry.name: entry.value for entry in scan_properties(tail)}
