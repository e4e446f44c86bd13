from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

_NEWLINES = re.compile(r"[\r\n]")

# operation SP+ object ['.' subobject ['#' id]] [SP+ tail]
ENVELOPE_PATTERN = re.compile(
    r"(?P<operation>[a-z]+(?:_[a-z]+)*)\s+"
    r"(?P<object>[a-z]+(?:_[a-z]+)*)"
    r"(?:\.(?P<sub_object>[a-z]+(?:_[a-z]+)*)(?:#(?P<sub_object_id>[0-9]+))?)?"
    r"(?:\s+(?P<tail>.*))?"
)


@dataclass(frozen=True)
class Envelope:
    operation: str
    object: str
    sub_object: Optional[str] = None
    sub_object_id: Optional[str] = None
    tail: Optional[str] = None


def flatten_lines(raw: str) -> str:
    return _NEWLINES.sub("", raw)


def match_envelope(raw: str) -> Envelope | None:
    m = ENVELOPE_PATTERN.fullmatch(flatten_lines(raw))
    if not m:
        return None
    return Envelope(
        operation=m.group("operation"),
        object=m.group("object"),
        sub_object=m.group("sub_object") or None,
        sub_object_id=m.group("sub_object_id") or None,
        tail=m.group("tail") or None,
    )
