"""
AuditDiff - field-level change detection for audit trails.

Diffs two object snapshots (either may be absent) into minimal
field-level change records, with optional order-independent matching
of collection members.

Usage:
    # CLI
    auditdiff diff before.json after.json

    # Programmatic
    from auditdiff import ObjectDiffChecker

    changes = ObjectDiffChecker().diff(before, after)
"""

__version__ = "0.1.0"
__author__ = "AuditDiff Team"

from auditdiff.application import AuditService, ObjectDiffChecker

__all__ = ["AuditService", "ObjectDiffChecker", "__version__"]
