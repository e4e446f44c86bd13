from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class Message:
    """
    A decoded LWCP message.

    Attributes:
        operation: The verb, e.g. ``indi`` or ``get``.
        object: The addressed object, e.g. ``studio``.
        sub_object: The optional sub-object after the ``.``.
        sub_object_id: The optional numeric id after ``#``, kept as text.
        properties: The decoded property list, or ``None`` if the message
            carried none.
    """
    operation: Optional[str] = None
    object: Optional[str] = None
    sub_object: Optional[str] = None
    sub_object_id: Optional[str] = None
    properties: Optional[dict[str, Any]] = None

    def get(self, name: str, default: Any = None) -> Any:
        if not self.properties:
            return default
        return self.properties.get(name, default)

    def as_dict(self) -> dict[str, Any]:
        return {
            "op": self.operation,
            "obj": self.object,
            "sub": self.sub_object,
            "id": self.sub_object_id,
            "props": self.properties,
        }
