"""
Conversion of parsed LWCP properties into canonical names and shapes.

Exposes the read-only ``DEFAULT_MODEL``, the ``ConversionRule`` type and
the ``convert`` pass.
"""
from lwcp.domain.convert import convert
from lwcp.domain.model import DEFAULT_MODEL, ConversionModel, ConversionRule, load_model

__all__ = ["DEFAULT_MODEL", "ConversionModel", "ConversionRule", "convert", "load_model"]
