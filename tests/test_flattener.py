"""
Tests for the JSON tree flattener.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum

import pytest
from pydantic import BaseModel

from auditdiff.domain.element import EventType, Value
from auditdiff.infrastructure.flattener import JsonTreeFlattener


def flatten(node, event_type=EventType.CREATED, root="Root", unordered=False, fields=("id",)):
    return JsonTreeFlattener().flatten(node, event_type, root, unordered, list(fields))


def by_fqdn(elements):
    return {e.fqdn: e for e in elements}


class Status(str, Enum):
    ACTIVE = "active"


class Customer(BaseModel):
    name: str
    status: Status = Status.ACTIVE


@dataclass
class Shipment:
    carrier: str
    shipped_on: date
    parcels: list = field(default_factory=list)


class Plain:
    def __init__(self):
        self.a = 1
        self._hidden = 2


class TestMappings:
    def test_flat_mapping(self):
        elements = flatten({"name": "Alice", "age": 30}, root="Person")
        assert [(e.name, e.fqdn) for e in elements] == [
            ("name", "Person.name"),
            ("age", "Person.age"),
        ]
        assert elements[1].updated_value == Value.of(30)
        assert elements[1].previous_value is None

    def test_deleted_side_uses_previous_value(self):
        (element,) = flatten({"age": 30}, event_type=EventType.DELETED, root="Person")
        assert element.previous_value == Value.of(30)
        assert element.updated_value is None

    def test_nested_mapping(self):
        elements = by_fqdn(flatten({"customer": {"name": "Bob"}}, root="Order"))
        assert elements["Order.customer.name"].name == "name"

    def test_key_with_path_syntax_is_bracketed(self):
        elements = by_fqdn(flatten({"a.b": 1, "a": {"b": 2}, "x[0]": 3}, root="Doc"))
        assert set(elements) == {'Doc["a.b"]', "Doc.a.b", 'Doc["x[0]"]'}
        assert elements['Doc["a.b"]'].name == "a.b"
        assert elements["Doc.a.b"].name == "b"

    def test_none_and_empty_containers_skipped(self):
        assert flatten({"a": None, "b": {}, "c": []}) == []

    def test_updated_event_type_rejected(self):
        with pytest.raises(ValueError):
            flatten({"a": 1}, event_type=EventType.UPDATED)


class TestOrderedCollections:
    def test_members_by_index(self):
        node = {"items": [{"sku": "A"}, {"sku": "B"}], "tags": ["x"]}
        elements = by_fqdn(flatten(node, root="Order"))
        assert set(elements) == {"Order.items[0].sku", "Order.items[1].sku", "Order.tags[0]"}
        assert elements["Order.tags[0]"].name == "tags"
        assert elements["Order.items[0].sku"].metadata.identifiers is None

    def test_nested_lists(self):
        elements = by_fqdn(flatten({"matrix": [[1, 2]]}, root="M"))
        assert set(elements) == {"M.matrix[0][0]", "M.matrix[0][1]"}


class TestUnorderedCollections:
    def test_members_keyed_by_identifier(self):
        node = {"items": [{"id": 1, "v": "a"}, {"id": 2, "v": "b"}]}
        elements = by_fqdn(flatten(node, root="Order", unordered=True))
        assert set(elements) == {
            "Order.items[id=1].id",
            "Order.items[id=1].v",
            "Order.items[id=2].id",
            "Order.items[id=2].v",
        }
        assert elements["Order.items[id=2].v"].metadata.identifiers == {"id": 2}

    def test_alternate_identifier_fields(self):
        node = {"items": [{"code": "X", "v": 1}]}
        elements = by_fqdn(flatten(node, root="Order", unordered=True, fields=("id", "code")))
        assert set(elements) == {'Order.items[code="X"].code', 'Order.items[code="X"].v'}

    def test_identifier_values_keep_their_type(self):
        node = {"items": [{"id": 1, "v": "a"}, {"id": "1", "v": "b"}]}
        elements = by_fqdn(flatten(node, root="Order", unordered=True))
        assert elements["Order.items[id=1].v"].updated_value == Value.of("a")
        assert elements['Order.items[id="1"].v'].updated_value == Value.of("b")
        assert elements['Order.items[id="1"].v'].metadata.identifiers == {"id": "1"}

    def test_members_without_identifier_share_a_path(self):
        elements = flatten({"tags": ["x", "x", "y"]}, root="Doc", unordered=True)
        assert {e.fqdn for e in elements} == {"Doc.tags[]"}
        assert [e.name for e in elements] == ["tags", "tags", "tags"]
        assert [e.updated_value.raw for e in elements] == ["x", "x", "y"]

    def test_nested_identifiers_are_merged(self):
        node = {"orders": [{"id": 1, "lines": [{"sku": "A", "qty": 2}]}]}
        elements = by_fqdn(flatten(node, root="C", unordered=True, fields=("id", "sku")))
        qty = elements['C.orders[id=1].lines[sku="A"].qty']
        assert qty.metadata.identifiers == {"id": 1, "sku": "A"}


class TestSnapshotTypes:
    def test_pydantic_model(self):
        elements = by_fqdn(flatten(Customer(name="Ann"), root="Customer"))
        assert elements["Customer.status"].updated_value == Value.of("active")
        assert elements["Customer.name"].updated_value == Value.of("Ann")

    def test_dataclass(self):
        snapshot = Shipment(carrier="DHL", shipped_on=date(2024, 1, 2), parcels=[3])
        elements = by_fqdn(flatten(snapshot, root="Shipment"))
        assert elements["Shipment.shipped_on"].updated_value == Value.of("2024-01-02")
        assert elements["Shipment.parcels[0]"].updated_value == Value.of(3)

    def test_plain_object_public_attributes(self):
        elements = flatten(Plain(), root="Plain")
        assert [(e.fqdn, e.updated_value.raw) for e in elements] == [("Plain.a", 1)]

    def test_scalar_root_is_unnamed(self):
        (element,) = flatten(5, root="int")
        assert element.name is None
        assert element.fqdn == "int"
