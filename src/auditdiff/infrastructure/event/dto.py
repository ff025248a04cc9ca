"""
Wire models for audit events.

camelCase JSON on the wire, snake_case attributes in Python.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ElementMetadataDTO(_WireModel):
    fqdn: Optional[str] = None
    identifiers: Optional[Dict[str, Any]] = None


class ElementDTO(_WireModel):
    name: Optional[str] = None
    previous_value: Any = None
    updated_value: Any = None
    metadata: Optional[ElementMetadataDTO] = None


class EventSourceMetadataDTO(_WireModel):
    id: Optional[str] = None
    email: Optional[str] = None
    name: Optional[str] = None


class EventSourceDTO(_WireModel):
    type: str = Field(..., description="USER or SYSTEM")
    metadata: Optional[EventSourceMetadataDTO] = None


class AuditEventDTO(_WireModel):
    """Serialized audit event as published to consumers."""

    id: UUID
    application_name: Optional[str] = None
    timestamp: datetime
    type: str = Field(..., description="CREATED, UPDATED or DELETED")
    source: EventSourceDTO
    elements: List[ElementDTO] = Field(default_factory=list)
    sub_type: Optional[str] = None
    metadata: Optional[Dict[str, str]] = None
