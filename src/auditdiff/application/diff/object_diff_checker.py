"""
Object Diff Checker - diff orchestration.

Flattens both snapshots, groups the resulting elements by fqdn and runs
the change detector on every complete bucket. A bucket has to be fully
collected before it is processed (the duplicate reconciler needs the
complete membership), so this is a two-pass batch computation: flatten,
then group, then detect.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from typing import Any

from auditdiff.application.diff.change_detector import detect_changes
from auditdiff.application.diff.flattener_protocol import Flattener
from auditdiff.domain.config import AuditorConfig
from auditdiff.domain.element import Element, EventType
from auditdiff.domain.errors import BucketCapacityExceededError, DiffCancelledError

logger = logging.getLogger(__name__)

MISSING_METADATA_BUCKET = "missingMetadata"


def root_type_name(snapshot: Any) -> str:
    """Qualified type name used as the fqdn root of a snapshot."""
    snapshot_type = type(snapshot)
    if snapshot_type.__module__ == "builtins":
        return snapshot_type.__qualname__
    return f"{snapshot_type.__module__}.{snapshot_type.__qualname__}"


class ObjectDiffChecker:
    """
    Produces field-level change records between two object snapshots.

    Stateless across calls: each ``diff`` works on its own snapshot pair,
    so one instance may be shared between threads.
    """

    def __init__(
        self,
        config: AuditorConfig | None = None,
        flattener: Flattener | None = None,
    ):
        """
        Initialize the diff checker.

        Args:
            config: Auditor configuration (defaults apply when omitted)
            flattener: Snapshot flattener (JSON tree flattener by default)
        """
        if flattener is None:
            from auditdiff.infrastructure.flattener import JsonTreeFlattener

            flattener = JsonTreeFlattener()
        self.config = config or AuditorConfig()
        self.flattener = flattener
        self.bucket_capacity = self.config.bucket_capacity
        self.ignore_collection_order = self.config.is_order_ignored
        self.identifier_fields = list(self.config.identifier_fields)

    def diff(
        self,
        before: Any,
        after: Any,
        root_name: str | None = None,
        cancel_event: threading.Event | None = None,
    ) -> list[Element]:
        """
        Diff two snapshots.

        Args:
            before: Previous state, or None if the object did not exist
            after: Updated state, or None if the object was removed
            root_name: fqdn root; defaults to the type name of the snapshot
            cancel_event: Set by the caller to abandon the diff

        Returns:
            Named change records; order across paths is not meaningful

        Raises:
            BucketCapacityExceededError: Too many elements share one path
            DiffCancelledError: cancel_event was set before completion
        """
        if before is None and after is None:
            return []
        if root_name is None:
            root_name = root_type_name(after if after is not None else before)

        if before is None:
            elements = self._flatten(after, EventType.CREATED, root_name)
        elif after is None:
            elements = self._flatten(before, EventType.DELETED, root_name)
        else:
            elements = self._diff_both(before, after, root_name, cancel_event)

        _check_cancelled(cancel_event)
        changes = [element for element in elements if element.name is not None]
        logger.debug("Diff of %s produced %d changes", root_name, len(changes))
        return changes

    def _flatten(self, snapshot: Any, event_type: EventType, root_name: str) -> list[Element]:
        return self.flattener.flatten(
            snapshot,
            event_type,
            root_name,
            self.ignore_collection_order,
            self.identifier_fields,
        )

    def _diff_both(
        self,
        before: Any,
        after: Any,
        root_name: str,
        cancel_event: threading.Event | None,
    ) -> list[Element]:
        settings = self.config.diff_settings
        if settings.enable_parallel_processing:
            with ThreadPoolExecutor(max_workers=2) as executor:
                deleted_future = executor.submit(self._flatten, before, EventType.DELETED, root_name)
                created_future = executor.submit(self._flatten, after, EventType.CREATED, root_name)
                deleted, created = deleted_future.result(), created_future.result()
        else:
            deleted = self._flatten(before, EventType.DELETED, root_name)
            created = self._flatten(after, EventType.CREATED, root_name)

        _check_cancelled(cancel_event)
        buckets = self._group_by_fqdn([*deleted, *created])
        logger.debug(
            "Grouped %d previous and %d updated elements into %d buckets",
            len(deleted),
            len(created),
            len(buckets),
        )

        def detect(bucket: list[Element]) -> list[Element]:
            _check_cancelled(cancel_event)
            return detect_changes(bucket)

        bucket_lists = list(buckets.values())
        if (
            settings.enable_parallel_processing
            and len(bucket_lists) >= settings.parallel_bucket_threshold
        ):
            with ThreadPoolExecutor(max_workers=settings.max_parallel_buckets) as executor:
                results = list(executor.map(detect, bucket_lists))
        else:
            results = [detect(bucket) for bucket in bucket_lists]

        return [change for result in results for change in result]

    def _group_by_fqdn(self, elements: Iterable[Element]) -> dict[str, list[Element]]:
        buckets: dict[str, list[Element]] = {}
        for element in elements:
            key = element.fqdn or MISSING_METADATA_BUCKET
            bucket = buckets.setdefault(key, [])
            if len(bucket) >= self.bucket_capacity:
                logger.error(
                    "Bucket %s exceeded capacity of %d elements", key, self.bucket_capacity
                )
                raise BucketCapacityExceededError(key, self.bucket_capacity)
            bucket.append(element)
        return buckets


def _check_cancelled(cancel_event: threading.Event | None) -> None:
    if cancel_event is not None and cancel_event.is_set():
        raise DiffCancelledError("Diff cancelled before completion")
