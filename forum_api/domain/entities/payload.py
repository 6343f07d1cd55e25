"""
Payload schema - declarative validation for command entities.

A command entity lists its fields once as ``PayloadField`` entries. The
payload is then checked in two passes, before the dataclass is built:

1. presence: every key must exist and be non-empty
   -> MissingPropertyError
2. type: every value must be an instance of the declared type
   -> InvalidDataTypeError

Values are assigned as-is: no trimming, no coercion.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Mapping, TypeVar

from forum_api.domain.exceptions import InvalidDataTypeError, MissingPropertyError

E = TypeVar("E", bound="PayloadEntity")


@dataclass(frozen=True)
class PayloadField:
    key: str  # key in the raw payload (camelCase, as sent by clients)
    name: str  # attribute on the entity
    type: type = str


def _is_missing(payload: Mapping[str, Any], field: PayloadField) -> bool:
    if field.key not in payload:
        return True
    value = payload[field.key]
    return value is None or (field.type is str and value == "")


def _has_type(value: Any, expected: type) -> bool:
    # bool is an int subclass; never let True/False pass for another type
    if isinstance(value, bool) and expected is not bool:
        return False
    return isinstance(value, expected)


def validate_payload(
    entity: str, payload: Any, fields: tuple[PayloadField, ...]
) -> dict[str, Any]:
    """
    Validate a raw payload against a schema.

    Returns:
        Mapping of attribute name -> value, ready for the dataclass constructor

    Raises:
        MissingPropertyError: payload is not a mapping or a field is absent/empty
        InvalidDataTypeError: a field has the wrong primitive type
    """
    if not isinstance(payload, Mapping):
        raise MissingPropertyError(entity)

    if any(_is_missing(payload, field) for field in fields):
        raise MissingPropertyError(entity)

    if not all(_has_type(payload[field.key], field.type) for field in fields):
        raise InvalidDataTypeError(entity)

    return {field.name: payload[field.key] for field in fields}


class PayloadEntity:
    """Mixin for frozen dataclasses that are built from raw request payloads."""

    ENTITY: ClassVar[str]
    SCHEMA: ClassVar[tuple[PayloadField, ...]]

    @classmethod
    def from_payload(cls: type[E], payload: Mapping[str, Any]) -> E:
        values = validate_payload(cls.ENTITY, payload, cls.SCHEMA)
        return cls(**values)
