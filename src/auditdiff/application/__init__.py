"""
Application layer.

Use cases built on the domain models: diffing snapshots and building
audit events.
"""

from auditdiff.application.audit_service import AuditService, event_type_for
from auditdiff.application.diff import ObjectDiffChecker

__all__ = ["AuditService", "ObjectDiffChecker", "event_type_for"]
