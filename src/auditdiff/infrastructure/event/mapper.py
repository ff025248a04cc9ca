"""Conversion between audit event wire models and domain models."""

from __future__ import annotations

from typing import Any

from auditdiff.domain.audit_event import (
    AuditEvent,
    EventSource,
    EventSourceMetadata,
    EventSourceType,
)
from auditdiff.domain.element import Element, ElementMetadata, EventType, Value
from auditdiff.infrastructure.event.dto import (
    AuditEventDTO,
    ElementDTO,
    ElementMetadataDTO,
    EventSourceDTO,
    EventSourceMetadataDTO,
)


def _to_value(raw: Any) -> Value | None:
    return None if raw is None else Value.of(raw)


def _from_value(value: Value | None) -> Any:
    return None if value is None else value.raw


class AuditEventMapper:
    """
    Maps audit events to and from their wire representation.

    Unknown ``type`` strings raise ValueError.
    """

    @staticmethod
    def to_audit_event(dto: AuditEventDTO) -> AuditEvent:
        return AuditEvent(
            id=dto.id,
            application_name=dto.application_name,
            timestamp=dto.timestamp,
            type=EventType(dto.type),
            source=EventSource(
                type=EventSourceType(dto.source.type),
                metadata=AuditEventMapper._to_source_metadata(dto.source.metadata),
            ),
            elements=[AuditEventMapper._to_element(element) for element in dto.elements],
            sub_type=dto.sub_type,
            metadata=dto.metadata,
        )

    @staticmethod
    def to_dto(event: AuditEvent) -> AuditEventDTO:
        return AuditEventDTO(
            id=event.id,
            application_name=event.application_name,
            timestamp=event.timestamp,
            type=event.type.value,
            source=EventSourceDTO(
                type=event.source.type.value,
                metadata=EventSourceMetadataDTO(
                    id=event.source.metadata.id,
                    email=event.source.metadata.email,
                    name=event.source.metadata.name,
                ),
            ),
            elements=[
                ElementDTO(
                    name=element.name,
                    previous_value=_from_value(element.previous_value),
                    updated_value=_from_value(element.updated_value),
                    metadata=ElementMetadataDTO(
                        fqdn=element.metadata.fqdn,
                        identifiers=element.metadata.identifiers,
                    ),
                )
                for element in event.elements
            ],
            sub_type=event.sub_type,
            metadata=event.metadata,
        )

    @staticmethod
    def _to_element(dto: ElementDTO) -> Element:
        return Element(
            name=dto.name,
            previous_value=_to_value(dto.previous_value),
            updated_value=_to_value(dto.updated_value),
            metadata=ElementMetadata(
                fqdn=dto.metadata.fqdn if dto.metadata else None,
                identifiers=dto.metadata.identifiers if dto.metadata else None,
            ),
        )

    @staticmethod
    def _to_source_metadata(dto: EventSourceMetadataDTO | None) -> EventSourceMetadata:
        if dto is None:
            return EventSourceMetadata()
        return EventSourceMetadata(id=dto.id, email=dto.email, name=dto.name)
