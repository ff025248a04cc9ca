"""
JSON tree flattener.

Converts a snapshot into a JSON-compatible tree and emits one Element per
scalar leaf, tagged with its structural path (fqdn).

Path format:
    Order.customer.name        mapping field
    Order.items[0].sku         ordered collection member
    Order.items[id=7].sku      unordered member matched by identifier
    Order.lines[sku="A"].qty   identifier values are written as canonical JSON
    Order.tags[]               unordered member without identifier
    Order.labels["a.b"]        mapping key containing '.', '[' or ']'
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from pydantic_core import to_jsonable_python

from auditdiff.domain.element import Element, ElementMetadata, EventType, Value

logger = logging.getLogger(__name__)

_PATH_SYNTAX = frozenset(".[]")


def _field_path(path: str, key: Any) -> str:
    key = str(key)
    if _PATH_SYNTAX.intersection(key):
        return f"{path}[{Value.of(key).canonical}]"
    return f"{path}.{key}"


def _fallback(obj: Any) -> Any:
    """Serialize objects pydantic does not know about."""
    if hasattr(obj, "__dict__"):
        return {key: val for key, val in vars(obj).items() if not key.startswith("_")}
    return str(obj)


def to_tree(snapshot: Any) -> Any:
    """Convert any snapshot into dicts, lists and scalars."""
    return to_jsonable_python(snapshot, fallback=_fallback)


class JsonTreeFlattener:
    """
    Flattener over the JSON representation of a snapshot.

    Stateless; one instance can serve concurrent flatten calls.
    """

    def flatten(
        self,
        node: Any,
        event_type: EventType,
        root_type_name: str,
        ignore_collection_order: bool,
        identifier_field_names: Sequence[str],
    ) -> list[Element]:
        """
        Flatten a snapshot into leaf Elements.

        Args:
            node: Snapshot object
            event_type: CREATED puts values in updated_value, DELETED in previous_value
            root_type_name: Prefix of every fqdn
            ignore_collection_order: Key collection members by identifier instead of index
            identifier_field_names: Identifier fields for unordered matching

        Returns:
            One Element per scalar leaf
        """
        if event_type == EventType.UPDATED:
            raise ValueError("Snapshots are flattened as CREATED or DELETED only")

        walker = _TreeWalker(
            event_type=event_type,
            ignore_collection_order=ignore_collection_order,
            identifier_fields=list(identifier_field_names),
        )
        walker.walk(to_tree(node), root_type_name, None, None)
        logger.debug(
            "Flattened %s as %s into %d elements",
            root_type_name,
            event_type.value,
            len(walker.elements),
        )
        return walker.elements


class _TreeWalker:
    def __init__(
        self,
        event_type: EventType,
        ignore_collection_order: bool,
        identifier_fields: list[str],
    ):
        self.event_type = event_type
        self.ignore_collection_order = ignore_collection_order
        self.identifier_fields = identifier_fields
        self.elements: list[Element] = []

    def walk(
        self,
        value: Any,
        path: str,
        name: str | None,
        identifiers: dict[str, Any] | None,
    ) -> None:
        if value is None:
            return
        if isinstance(value, dict):
            for key, child in value.items():
                self.walk(child, _field_path(path, key), str(key), identifiers)
        elif isinstance(value, list):
            for index, member in enumerate(value):
                member_path, member_ids = self._member_path(path, index, member)
                if member_ids:
                    member_ids = {**(identifiers or {}), **member_ids}
                self.walk(member, member_path, name, member_ids or identifiers)
        else:
            self.elements.append(self._leaf(value, path, name, identifiers))

    def _member_path(
        self, path: str, index: int, member: Any
    ) -> tuple[str, dict[str, Any] | None]:
        if not self.ignore_collection_order:
            return f"{path}[{index}]", None
        if isinstance(member, dict):
            ids = {
                field: member[field]
                for field in self.identifier_fields
                if member.get(field) is not None
            }
            if ids:
                key = ",".join(
                    f"{field}={Value.of(value).canonical}" for field, value in ids.items()
                )
                return f"{path}[{key}]", ids
        return f"{path}[]", None

    def _leaf(
        self,
        value: Any,
        path: str,
        name: str | None,
        identifiers: dict[str, Any] | None,
    ) -> Element:
        wrapped = Value.of(value)
        metadata = ElementMetadata(fqdn=path, identifiers=identifiers)
        if self.event_type == EventType.CREATED:
            return Element(name=name, updated_value=wrapped, metadata=metadata)
        return Element(name=name, previous_value=wrapped, metadata=metadata)
