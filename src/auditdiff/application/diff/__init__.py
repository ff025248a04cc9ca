"""
Diff engine.

- object_diff_checker: orchestration (flatten, group, detect)
- change_detector: per-path change rule
- duplicate_reconciler: multiset reconciliation for unordered duplicates
"""

from auditdiff.application.diff.change_detector import detect_changes
from auditdiff.application.diff.duplicate_reconciler import reconcile_duplicates
from auditdiff.application.diff.flattener_protocol import Flattener
from auditdiff.application.diff.object_diff_checker import (
    MISSING_METADATA_BUCKET,
    ObjectDiffChecker,
    root_type_name,
)

__all__ = [
    "ObjectDiffChecker",
    "Flattener",
    "detect_changes",
    "reconcile_duplicates",
    "root_type_name",
    "MISSING_METADATA_BUCKET",
]
