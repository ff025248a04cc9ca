"""Flattener seam consumed by the diff orchestrator."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol

from auditdiff.domain.element import Element, EventType


class Flattener(Protocol):
    """Turns one snapshot into leaf-level Elements."""

    def flatten(
        self,
        node: Any,
        event_type: EventType,
        root_type_name: str,
        ignore_collection_order: bool,
        identifier_field_names: Sequence[str],
    ) -> list[Element]:
        """
        Flatten a snapshot.

        Elements carry the value on the side dictated by ``event_type``
        (``updated_value`` for CREATED, ``previous_value`` for DELETED)
        and ``metadata.fqdn`` set to the structural path.
        """
        ...
