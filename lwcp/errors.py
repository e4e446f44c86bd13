"""
Exception types raised while decoding LWCP property lists.

Envelope mismatches are not errors: ``parse`` reports them by returning
``None``. Only a malformed property list raises.
"""
from __future__ import annotations

from enum import Enum


class SyntaxFault(str, Enum):
    """The kinds of property-list syntax failure."""
    UNTERMINATED_STRING = "unterminated_string"
    UNTERMINATED_ARRAY = "unterminated_array"
    INVALID_ARRAY = "invalid_array"


_FAULT_MESSAGES: dict[SyntaxFault, str] = {
    SyntaxFault.UNTERMINATED_STRING: "missing closing quotation in string property",
    SyntaxFault.UNTERMINATED_ARRAY: "missing closing bracket for array property",
    SyntaxFault.INVALID_ARRAY: "unable to parse array property",
}


class ArrayLiteralError(ValueError):
    """Raised when the body of a ``[...]`` value is not a valid array literal."""

    def __init__(self, message: str, position: int) -> None:
        super().__init__(f"{message} at offset {position}")
        self.position = position


class LwcpSyntaxError(ValueError):
    """
    A property in the tail of an LWCP message could not be decoded.

    Attributes:
        property_name: The name of the offending property.
        fault: What went wrong with its value.
    """

    def __init__(self, property_name: str, fault: SyntaxFault) -> None:
        super().__init__(f'INVALID SYNTAX: {_FAULT_MESSAGES[fault]} "{property_name}"')
        self.property_name = property_name
        self.fault = fault
