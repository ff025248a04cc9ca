"""
Duplicate Reconciler - multiset diff of one path bucket.

Only reached when collection order is ignored and more than two elements
share a path. Members are matched by value count rather than position:

- values with the same count on both sides are unchanged (maybe reordered)
- surplus previous values become deletions
- surplus updated values become creations
- surpluses are paired off into updates to keep the record count minimal
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from auditdiff.domain.element import Element, Value

logger = logging.getLogger(__name__)


def _group_by_value(
    elements: list[Element], previous: bool
) -> dict[Value, list[Element]]:
    groups: dict[Value, list[Element]] = {}
    for element in elements:
        value = element.previous_value if previous else element.updated_value
        groups.setdefault(value, []).append(element)
    return groups


def reconcile_duplicates(elements: Sequence[Element]) -> list[Element]:
    """
    Reconcile a bucket of elements sharing one fqdn.

    Args:
        elements: All elements of the bucket, in arrival order

    Returns:
        Minimal list of create/update/delete records explaining the
        difference between the previous and updated multisets
    """
    previous_pool: list[Element] = []
    updated_pool: list[Element] = []
    for element in elements:
        if element.previous_value is not None:
            previous_pool.append(element)
        elif element.updated_value is not None:
            updated_pool.append(element)

    previous_groups = _group_by_value(previous_pool, previous=True)
    updated_groups = _group_by_value(updated_pool, previous=False)

    deleted_surplus: list[Element] = []
    updated_surplus: list[Element] = []
    # dict keeps first-appearance order, previous side first
    for value in dict.fromkeys([*previous_groups, *updated_groups]):
        prev_group = previous_groups.get(value, [])
        upd_group = updated_groups.get(value, [])
        if len(prev_group) > len(upd_group):
            deleted_surplus.extend(prev_group[len(upd_group):])
        elif len(upd_group) > len(prev_group):
            updated_surplus.extend(upd_group[len(prev_group):])

    changes: list[Element] = []
    if len(deleted_surplus) >= len(updated_surplus):
        for deleted, created in zip(deleted_surplus, updated_surplus):
            changes.append(deleted.with_updated_value(created.updated_value))
        changes.extend(deleted_surplus[len(updated_surplus):])
    else:
        for deleted, created in zip(deleted_surplus, updated_surplus):
            changes.append(created.with_previous_value(deleted.previous_value))
        changes.extend(updated_surplus[len(deleted_surplus):])

    logger.debug(
        "Reconciled %d elements (%d previous, %d updated) into %d changes",
        len(elements),
        len(previous_pool),
        len(updated_pool),
        len(changes),
    )
    return changes
