"""
AuditDiff errors.

The core only defines exceptions; the interface layer (CLI) formats them.
"""

from __future__ import annotations


class AuditDiffError(Exception):
    """Base error for AuditDiff."""


class ConfigurationError(AuditDiffError):
    """Configuration file missing, unparsable or invalid."""


class SnapshotLoadError(AuditDiffError):
    """A snapshot file could not be read or parsed."""


class DiffCancelledError(AuditDiffError):
    """The caller cancelled a diff before it completed."""


class BucketCapacityExceededError(AuditDiffError):
    """
    Too many elements share a single path.

    Raised instead of truncating a bucket, so no change is silently lost.
    """

    def __init__(self, fqdn: str, capacity: int):
        self.fqdn = fqdn
        self.capacity = capacity
        super().__init__(
            f"Bucket '{fqdn}' exceeded capacity of {capacity} elements; "
            "raise max_elements to diff snapshots this large"
        )
