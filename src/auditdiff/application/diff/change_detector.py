"""
Change Detector - decide what changed at one path.

Given every element sharing an fqdn, returns zero, one or many
effective change records.
"""

from __future__ import annotations

from collections.abc import Sequence

from auditdiff.application.diff.duplicate_reconciler import reconcile_duplicates
from auditdiff.domain.element import Element


def _detect_pair(first: Element, second: Element) -> list[Element]:
    # Arrival order of the two sides is not guaranteed, so check both ways
    if first.previous_value is not None and first.previous_value != second.updated_value:
        return [first.with_updated_value(second.updated_value)]
    if second.previous_value is not None and second.previous_value != first.updated_value:
        return [second.with_updated_value(first.updated_value)]
    return []


def detect_changes(elements: Sequence[Element]) -> list[Element]:
    """
    Check a list of elements with the same fqdn for changes.

    Args:
        elements: Bucket contents (never empty)

    Returns:
        Change records for this path
    """
    if len(elements) == 1:
        # Lone create or delete
        return list(elements)
    if len(elements) == 2:
        first, second = elements
        if (first.previous_value is None) == (second.previous_value is None):
            # Both from the same side of an unordered path, not an update pair
            return reconcile_duplicates(elements)
        return _detect_pair(first, second)
    # Only reachable with ignored collection order and duplicate members
    return reconcile_duplicates(elements)
