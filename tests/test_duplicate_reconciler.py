"""
Tests for multiset reconciliation of unordered duplicate members.
"""

from collections import Counter

import pytest

from auditdiff.application.diff import reconcile_duplicates
from auditdiff.domain.element import Element, ElementMetadata

from helpers import created, deleted, pairs

PATH = "Doc.tags[]"


def bucket(before: list, after: list) -> list[Element]:
    return [deleted("tags", v, PATH) for v in before] + [created("tags", v, PATH) for v in after]


class TestReconcileDuplicates:
    def test_reordered_duplicates_are_unchanged(self):
        assert reconcile_duplicates(bucket(["x", "x", "y"], ["y", "x", "x"])) == []

    def test_swapped_duplicate_becomes_one_update(self):
        """[x, x, y] -> [x, y, y]: one x turned into a y, nothing else."""
        changes = reconcile_duplicates(bucket(["x", "x", "y"], ["x", "y", "y"]))
        assert pairs(changes) == [("x", "y")]
        assert changes[0].name == "tags"
        assert changes[0].fqdn == PATH

    def test_removed_duplicate_is_a_deletion(self):
        changes = reconcile_duplicates(bucket(["x", "x", "y"], ["x", "y"]))
        assert pairs(changes) == [("x", None)]
        assert changes[0].is_deletion

    def test_added_duplicate_is_a_creation(self):
        changes = reconcile_duplicates(bucket(["x", "y"], ["x", "y", "y"]))
        assert pairs(changes) == [(None, "y")]
        assert changes[0].is_creation

    def test_more_deletions_than_creations(self):
        changes = reconcile_duplicates(bucket(["a", "b", "c"], ["d"]))
        assert pairs(changes) == [("a", "d"), ("b", None), ("c", None)]

    def test_more_creations_than_deletions(self):
        changes = reconcile_duplicates(bucket(["a"], ["b", "c", "a", "d"]))
        # a is matched, nothing else was deleted
        assert pairs(changes) == [(None, "b"), (None, "c"), (None, "d")]

    def test_surplus_pairing_keeps_created_element(self):
        changes = reconcile_duplicates(bucket(["a", "z"], ["b", "c", "d"]))
        assert pairs(changes) == [("a", "b"), ("z", "c"), (None, "d")]

    def test_elements_without_values_are_dropped(self):
        empty = Element(name="tags", metadata=ElementMetadata(fqdn=PATH))
        changes = reconcile_duplicates([empty, *bucket(["x"], ["x", "x"])])
        assert pairs(changes) == [(None, "x")]

    def test_idempotent(self):
        elements = bucket(["x", "x", "y", "z"], ["y", "y", "x", "w"])
        assert reconcile_duplicates(elements) == reconcile_duplicates(list(elements))


@pytest.mark.parametrize(
    "before, after",
    [
        (["x", "x", "y"], ["x", "y", "y"]),
        (["a", "a", "a"], ["a"]),
        (["a", "b", "c", "d"], ["d", "c", "e", "e", "e"]),
        ([1, 1, 2, 3], [3, 2, 1, 1]),
    ],
)
def test_count_conservation(before, after):
    """Matched members plus emitted surplus account for every member on each side."""
    changes = reconcile_duplicates(bucket(before, after))
    before_counts, after_counts = Counter(before), Counter(after)
    matched = sum((before_counts & after_counts).values())

    emitted_previous = [p for p, _ in pairs(changes) if p is not None]
    emitted_updated = [u for _, u in pairs(changes) if u is not None]
    assert matched + len(emitted_previous) == len(before)
    assert matched + len(emitted_updated) == len(after)
    assert len(changes) <= max(len(before), len(after)) - matched
    assert Counter(emitted_previous) == before_counts - after_counts
    assert Counter(emitted_updated) == after_counts - before_counts
