"""
Conversion rules that rename raw LWCP properties into friendlier names.

The built-in table covers the studio, show, hybrid, line-list and
caller-id properties reported by VX-Prime servers. It is frozen at import
time; callers customise conversion by passing an override model to
:func:`lwcp.domain.convert.convert`.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, TypeAdapter


class ConversionRule(BaseModel):
    """
    How a single raw property is converted.

    Attributes:
        name: The canonical property name; ``None`` keeps the raw name.
        field_names: Positional labels for the rows of an array-of-arrays
            value. Rows longer than this list get ``index<N>`` labels for
            the extra positions. Also accepted as ``each``.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    name: Optional[str] = None
    field_names: Optional[tuple[str, ...]] = Field(
        None, validation_alias=AliasChoices("field_names", "each")
    )


ConversionModel = Mapping[str, ConversionRule]

_MODEL_ADAPTER = TypeAdapter(dict[str, ConversionRule])

# Raw property name → rule, in the wire dictionary's own notation.
_DEFAULT_RULES: dict[str, dict[str, Any]] = {
    "studio_list": {"name": "studioList", "each": ["studioId", "studioName"]},
    "server_id": {"name": "serverId"},
    "server_version": {"name": "serverVersion"},
    "server_caps": {"name": "serverCapabilites"},
    "lwcp_version": {"name": "lwcpVersion"},
    "id": {"name": "studioId"},
    "name": {"name": "studioName"},
    "show_id": {"name": "showId"},
    "show_name": {"name": "showName"},
    "num_lines": {"name": "numberOfLines"},
    "hybrid_list": {"name": "hybridList"},
    "num_hybrids": {"name": "numberOfHybrids"},
    "num_hyb_fixed": {"name": "numberOfFixedHybrids"},
    "pnext": {"name": "producerNext"},
    "busy_all": {"name": "allBusy"},
    "mute": {"name": "muted"},
    "show_locked": {"name": "showLocked"},
    "auto_answer": {"name": "autoAnswerOn"},
    "show_list": {"name": "showList", "each": ["showId", "showName"]},
    "line_list": {
        "name": "lineList",
        "each": ["state", "callstate", "name", "local", "remote", "hybrid", "time", "comment", "direction"],
    },
    "caller_id": {"name": "callerId"},
    "list": {"name": "list", "each": ["id", "name", "number"]},
}


def load_model(data: Mapping[str, Any] | None) -> dict[str, ConversionRule]:
    """
    Validate a conversion model.

    Args:
        data: Raw property name → rule. Rules may be ``ConversionRule``
            instances or plain mappings with ``name`` and ``each`` /
            ``field_names`` keys.

    Returns:
        A new dict of validated rules.

    Raises:
        pydantic.ValidationError: If a rule is malformed.
    """
    if not data:
        return {}
    return _MODEL_ADAPTER.validate_python(dict(data))


DEFAULT_MODEL: ConversionModel = MappingProxyType(load_model(_DEFAULT_RULES))
