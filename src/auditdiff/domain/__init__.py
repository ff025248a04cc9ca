"""
Domain layer package.

Contains pure data models with no I/O dependencies.
"""

from auditdiff.domain.element import (
    EventType,
    ValueKind,
    Value,
    ElementMetadata,
    Element,
)

from auditdiff.domain.audit_event import (
    EventSourceType,
    EventSourceMetadata,
    EventSource,
    AuditEvent,
)

from auditdiff.domain.errors import (
    AuditDiffError,
    ConfigurationError,
    SnapshotLoadError,
    DiffCancelledError,
    BucketCapacityExceededError,
)

__all__ = [
    # Elements
    "EventType",
    "ValueKind",
    "Value",
    "ElementMetadata",
    "Element",
    # Audit events
    "EventSourceType",
    "EventSourceMetadata",
    "EventSource",
    "AuditEvent",
    # Errors
    "AuditDiffError",
    "ConfigurationError",
    "SnapshotLoadError",
    "DiffCancelledError",
    "BucketCapacityExceededError",
]
