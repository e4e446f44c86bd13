from lwcp.parsing.message.decode import parse
from lwcp.parsing.message.model import Message
from lwcp.parsing.properties import parse_properties, scan_properties
from lwcp.domain import DEFAULT_MODEL, ConversionRule, convert, load_model
from lwcp.errors import LwcpSyntaxError, SyntaxFault
from lwcp.config import LwcpSettings, get_settings
from lwcp.logging import recent_diagnostics
from importlib.metadata import PackageNotFoundError, version

__all__ = [
    "parse",
    "convert",
    "Message",
    "ConversionRule",
    "DEFAULT_MODEL",
    "load_model",
    "parse_properties",
    "scan_properties",
    "LwcpSyntaxError",
    "SyntaxFault",
    "LwcpSettings",
    "get_settings",
    "recent_diagnostics",
]

try:
    __version__ = version("lwcp")
except PackageNotFoundError:
    __version__ = "0.0.0"
