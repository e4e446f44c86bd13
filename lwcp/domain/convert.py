from __future__ import annotations

from dataclasses import replace
from typing import Any, Mapping

from lwcp.domain.model import DEFAULT_MODEL, ConversionRule, load_model
from lwcp.parsing.message.model import Message


def _label_row(row: list[Any], field_names: tuple[str, ...]) -> dict[str, Any]:
    return {
        field_names[i] if i < len(field_names) else f"index{i}": item
        for i, item in enumerate(row)
    }


def _apply_rule(value: Any, rule: ConversionRule) -> Any:
    if rule.field_names is None or not isinstance(value, list):
        return value
    return [_label_row(row, rule.field_names) if isinstance(row, list) else row for row in value]


def convert(message: Message, model: Mapping[str, Any] | None = None) -> Message:
    """
    Rename and reshape the properties of a parsed message.

    Each property is looked up in *model* first and then in
    ``DEFAULT_MODEL``; an override entry replaces the default entry for
    that key entirely. Properties without a rule pass through unchanged.
    When a renamed property lands on a name that another, unconverted
    property also uses, the renamed value is kept.

    Args:
        message: A message returned by :func:`lwcp.parse`.
        model: Optional override rules, as accepted by ``load_model``.

    Returns:
        A new ``Message``; *message* itself is left untouched.
    """
    if message.properties is None:
        return replace(message)

    overrides = load_model(model)
    converted: dict[str, Any] = {}
    renamed: set[str] = set()
    for key, value in message.properties.items():
        rule = overrides[key] if key in overrides else DEFAULT_MODEL.get(key)
        if rule is None:
            if key not in renamed:
                converted[key] = value
            continue
        target = rule.name or key
        converted[target] = _apply_rule(value, rule)
        renamed.add(target)

    return replace(message, properties=converted)
