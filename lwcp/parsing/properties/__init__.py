"""
Property-list scanning for LWCP messages.
"""
from lwcp.parsing.properties.decode import (
    PropertyEntry,
    classify_scalar,
    parse_properties,
    scan_properties,
)

__all__ = [
    "PropertyEntry",
    "classify_scalar",
    "parse_properties",
    "scan_properties",
]
