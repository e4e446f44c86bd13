from __future__ import annotations

from typing import Optional

from lwcp.config import get_settings
from lwcp.domain.convert import convert
from lwcp.errors import LwcpSyntaxError
from lwcp.logging import get_logger
from lwcp.parsing.envelope import match_envelope
from lwcp.parsing.message.model import Message
from lwcp.parsing.properties import parse_properties


def parse(raw: str, auto_convert: bool = False, strict: Optional[bool] = None) -> Message | None:
    """
    Parse one raw LWCP message.

    Args:
        raw: The message text. Embedded ``\\r``/``\\n`` characters are dropped.
        auto_convert: Also run the result through ``convert`` with the
            default model.
        strict: Raise on property-syntax errors instead of returning
            ``None``. Defaults to the ``LWCP_STRICT`` setting.

    Returns:
        The decoded ``Message``, or ``None`` if *raw* is not an LWCP message
        or its property list is malformed. Property-syntax failures are
        logged on the ``lwcp`` logger with the property name and fault.

    Raises:
        LwcpSyntaxError: Only in strict mode, for a malformed property list.
    """
    logger = get_logger()
    envelope = match_envelope(raw)
    if envelope is None:
        logger.debug("Not an LWCP message", extra={"details": {"raw": raw}})
        return None

    properties = None
    if envelope.tail is not None:
        try:
            properties = parse_properties(envelope.tail)
        except LwcpSyntaxError as exc:
            logger.warning(
                str(exc),
                extra={"details": {"property": exc.property_name, "fault": exc.fault.value}},
            )
            if strict is None:
                strict = get_settings().strict
            if strict:
                raise
            return None

    message = Message(
        operation=envelope.operation,
        object=envelope.object,
        sub_object=envelope.sub_object,
        sub_object_id=envelope.sub_object_id,
        properties=properties,
    )
    if auto_convert:
        message = convert(message)
    return message
