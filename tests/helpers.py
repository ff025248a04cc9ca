"""Element builders for diff engine tests."""

from __future__ import annotations

from auditdiff.domain.element import Element, ElementMetadata, Value


def deleted(name: str, value, fqdn: str | None = None) -> Element:
    """Element as flattened from the previous snapshot."""
    return Element(
        name=name,
        previous_value=Value.of(value),
        metadata=ElementMetadata(fqdn=fqdn or name),
    )


def created(name: str, value, fqdn: str | None = None) -> Element:
    """Element as flattened from the updated snapshot."""
    return Element(
        name=name,
        updated_value=Value.of(value),
        metadata=ElementMetadata(fqdn=fqdn or name),
    )


def pairs(changes) -> list[tuple]:
    """(previous, updated) raw values of each change."""
    return [
        (
            None if c.previous_value is None else c.previous_value.raw,
            None if c.updated_value is None else c.updated_value.raw,
        )
        for c in changes
    ]
