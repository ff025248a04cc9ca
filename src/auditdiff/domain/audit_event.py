"""
Audit event domain models.

An AuditEvent wraps the Elements produced by a diff together with who
caused the change and when. Pure data, no I/O.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from auditdiff.domain.element import Element, EventType


class EventSourceType(str, Enum):
    """Who triggered the audited change."""

    USER = "USER"
    SYSTEM = "SYSTEM"


@dataclass(frozen=True)
class EventSourceMetadata:
    """Identity details of the event source."""

    id: str | None = None
    email: str | None = None
    name: str | None = None


@dataclass(frozen=True)
class EventSource:
    type: EventSourceType = EventSourceType.SYSTEM
    metadata: EventSourceMetadata = field(default_factory=EventSourceMetadata)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class AuditEvent:
    """
    One audit-trail entry.

    Attributes:
        id: Unique event id
        application_name: Application emitting the event
        timestamp: When the event was built (UTC)
        type: CREATED / UPDATED / DELETED for the audited object as a whole
        source: Who caused the change
        elements: Field-level change records
        sub_type: Free-form classification (e.g. entity name)
        metadata: Free-form string attributes
    """

    type: EventType
    source: EventSource = field(default_factory=EventSource)
    elements: list[Element] = field(default_factory=list)
    application_name: str | None = None
    sub_type: str | None = None
    metadata: dict[str, str] | None = None
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    timestamp: datetime = field(default_factory=_utcnow)

    def __len__(self) -> int:
        """Number of field-level changes."""
        return len(self.elements)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": str(self.id),
            "applicationName": self.application_name,
            "timestamp": self.timestamp.isoformat(),
            "type": self.type.value,
            "source": {
                "type": self.source.type.value,
                "metadata": {
                    "id": self.source.metadata.id,
                    "email": self.source.metadata.email,
                    "name": self.source.metadata.name,
                },
            },
            "elements": [element.to_dict() for element in self.elements],
            "subType": self.sub_type,
            "metadata": self.metadata,
        }
