"""
Array literal decoding for LWCP property values.

Handles nested arrays, JSON-style strings, case-insensitive keywords and
bare upper-case enumerations.
"""
from lwcp.parsing.arrays.decode import ENUM_PATTERN, parse_array_literal

__all__ = ["ENUM_PATTERN", "parse_array_literal"]
