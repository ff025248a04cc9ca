"""Audit event wire format."""

from .dto import (
    AuditEventDTO,
    ElementDTO,
    ElementMetadataDTO,
    EventSourceDTO,
    EventSourceMetadataDTO,
)
from .mapper import AuditEventMapper

__all__ = [
    "AuditEventDTO",
    "ElementDTO",
    "ElementMetadataDTO",
    "EventSourceDTO",
    "EventSourceMetadataDTO",
    "AuditEventMapper",
]
