"""
Element and Value types for the diff engine.

This module defines the core enums and dataclasses used throughout
the flatten/diff/reconcile pipeline. It is the single source of truth
for all change-record type definitions.

Architecture Note:
    This is a pure domain module with NO external dependencies.
    It should only contain enums, dataclasses, and type definitions.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any


class EventType(str, Enum):
    """
    Type of event an Element (or an AuditEvent) originates from.

    For Elements this is the *source* flattening event: an UPDATED record
    is synthesized by pairing a CREATED and a DELETED element at one path.
    """

    CREATED = "CREATED"
    UPDATED = "UPDATED"
    DELETED = "DELETED"


class ValueKind(str, Enum):
    """Tag of the Value union."""

    NULL = "null"
    SCALAR = "scalar"
    STRUCTURED = "structured"


_SCALAR_TYPES = (str, int, float, bool)


def _canonical(data: Any) -> str:
    return json.dumps(data, sort_keys=True, ensure_ascii=False, separators=(",", ":"))


@dataclass(frozen=True, eq=False)
class Value:
    """
    A JSON-compatible field value.

    Equality and hashing use the canonical JSON encoding, so ``true``,
    ``1``, ``1.0`` and ``"1"`` are four distinct values, and two mappings
    are equal regardless of key order.
    """

    kind: ValueKind
    data: Any = None

    @classmethod
    def of(cls, raw: Any) -> Value:
        """Wrap a raw JSON-compatible value."""
        if isinstance(raw, Value):
            return raw
        if raw is None:
            return cls(ValueKind.NULL)
        if isinstance(raw, _SCALAR_TYPES):
            return cls(ValueKind.SCALAR, raw)
        if isinstance(raw, (dict, list, tuple)):
            return cls(ValueKind.STRUCTURED, raw)
        raise TypeError(f"Unsupported value type: {type(raw).__name__}")

    @property
    def canonical(self) -> str:
        return _canonical(self.data)

    @property
    def raw(self) -> Any:
        return self.data

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return self.kind == other.kind and self.canonical == other.canonical

    def __hash__(self) -> int:
        return hash((self.kind, self.canonical))

    def __str__(self) -> str:
        if self.kind == ValueKind.SCALAR and isinstance(self.data, str):
            return self.data
        return self.canonical


@dataclass(frozen=True)
class ElementMetadata:
    """
    Path metadata of an Element.

    Attributes:
        fqdn: Fully-qualified structural path, the grouping key
        identifiers: Identifier field values of the enclosing collection member
    """

    fqdn: str | None = None
    identifiers: dict[str, Any] | None = None


@dataclass(frozen=True)
class Element:
    """
    Before/after record for one field position.

    Only ``previous_value`` set = deletion, only ``updated_value`` set =
    creation, both set = resolved update.
    """

    name: str | None = None
    previous_value: Value | None = None
    updated_value: Value | None = None
    metadata: ElementMetadata = field(default_factory=ElementMetadata)

    @property
    def fqdn(self) -> str | None:
        return self.metadata.fqdn

    @property
    def is_creation(self) -> bool:
        return self.previous_value is None and self.updated_value is not None

    @property
    def is_deletion(self) -> bool:
        return self.previous_value is not None and self.updated_value is None

    @property
    def is_update(self) -> bool:
        return self.previous_value is not None and self.updated_value is not None

    @property
    def change_type(self) -> EventType | None:
        """Nature of the emitted record, None for an empty element."""
        if self.is_update:
            return EventType.UPDATED
        if self.is_creation:
            return EventType.CREATED
        if self.is_deletion:
            return EventType.DELETED
        return None

    def with_updated_value(self, value: Value | None) -> Element:
        return replace(self, updated_value=value)

    def with_previous_value(self, value: Value | None) -> Element:
        return replace(self, previous_value=value)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.name,
            "previousValue": self.previous_value.raw if self.previous_value is not None else None,
            "updatedValue": self.updated_value.raw if self.updated_value is not None else None,
            "metadata": {
                "fqdn": self.metadata.fqdn,
                "identifiers": self.metadata.identifiers,
            },
        }
