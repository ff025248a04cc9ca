"""
Tests for mapping audit events to and from the wire format.
"""

import json
import uuid

import pytest

from auditdiff.domain.audit_event import AuditEvent, EventSource, EventSourceType
from auditdiff.domain.element import Element, ElementMetadata, EventType, Value
from auditdiff.infrastructure.event import AuditEventDTO, AuditEventMapper

WIRE_EVENT = {
    "id": "5f0c6a8e-1b5e-4c1e-9a44-5d2b8f1c0a11",
    "applicationName": "orders",
    "timestamp": "2024-03-01T12:00:00+00:00",
    "type": "UPDATED",
    "source": {
        "type": "USER",
        "metadata": {"id": "u1", "email": "ann@example.com", "name": "Ann"},
    },
    "elements": [
        {
            "name": "v",
            "previousValue": "a",
            "updatedValue": "c",
            "metadata": {"fqdn": "Order.items[id=1].v", "identifiers": {"id": 1}},
        },
        {"name": "note", "updatedValue": "new"},
    ],
    "subType": "Order",
    "metadata": {"tenant": "eu"},
}


class TestToAuditEvent:
    def test_maps_all_fields(self):
        dto = AuditEventDTO.model_validate(WIRE_EVENT)
        event = AuditEventMapper.to_audit_event(dto)

        assert event.id == uuid.UUID(WIRE_EVENT["id"])
        assert event.application_name == "orders"
        assert event.type == EventType.UPDATED
        assert event.source.type == EventSourceType.USER
        assert event.source.metadata.email == "ann@example.com"
        assert event.sub_type == "Order"
        assert event.metadata == {"tenant": "eu"}

        first, second = event.elements
        assert first.previous_value == Value.of("a")
        assert first.updated_value == Value.of("c")
        assert first.metadata.identifiers == {"id": 1}
        assert second.is_creation
        assert second.metadata == ElementMetadata()

    def test_missing_source_metadata(self):
        data = {**WIRE_EVENT, "source": {"type": "SYSTEM"}}
        event = AuditEventMapper.to_audit_event(AuditEventDTO.model_validate(data))
        assert event.source.metadata.id is None

    def test_unknown_type_rejected(self):
        data = {**WIRE_EVENT, "type": "MERGED"}
        with pytest.raises(ValueError):
            AuditEventMapper.to_audit_event(AuditEventDTO.model_validate(data))


class TestToDto:
    def test_serializes_camel_case(self):
        event = AuditEvent(
            type=EventType.CREATED,
            source=EventSource(),
            elements=[
                Element(
                    name="age",
                    updated_value=Value.of(31),
                    metadata=ElementMetadata(fqdn="Person.age"),
                )
            ],
            application_name="crm",
        )
        payload = json.loads(AuditEventMapper.to_dto(event).model_dump_json(by_alias=True))

        assert payload["id"] == str(event.id)
        assert payload["applicationName"] == "crm"
        assert payload["type"] == "CREATED"
        assert payload["source"]["type"] == "SYSTEM"
        assert payload["elements"] == [
            {
                "name": "age",
                "previousValue": None,
                "updatedValue": 31,
                "metadata": {"fqdn": "Person.age", "identifiers": None},
            }
        ]

    def test_wire_event_survives_mapping(self):
        dto = AuditEventDTO.model_validate(WIRE_EVENT)
        again = AuditEventMapper.to_dto(AuditEventMapper.to_audit_event(dto))
        assert AuditEventMapper.to_audit_event(again) == AuditEventMapper.to_audit_event(dto)
