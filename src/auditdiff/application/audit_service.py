"""
Audit Service - build audit events from snapshot pairs.

Usage:
    service = AuditService(config)
    event = service.audit(before, after, source)
    if event:
        publish(AuditEventMapper.to_dto(event).model_dump_json(by_alias=True))
"""

from __future__ import annotations

import logging
from typing import Any

from auditdiff.application.diff import ObjectDiffChecker
from auditdiff.domain.audit_event import AuditEvent, EventSource
from auditdiff.domain.config import AuditorConfig
from auditdiff.domain.element import EventType

logger = logging.getLogger(__name__)


def event_type_for(before: Any, after: Any) -> EventType:
    """Classify the change to the audited object as a whole."""
    if before is None:
        return EventType.CREATED
    if after is None:
        return EventType.DELETED
    return EventType.UPDATED


class AuditService:
    """Turns before/after snapshots into AuditEvents."""

    def __init__(
        self,
        config: AuditorConfig | None = None,
        diff_checker: ObjectDiffChecker | None = None,
    ):
        self.config = config or AuditorConfig()
        self.diff_checker = diff_checker or ObjectDiffChecker(self.config)

    def audit(
        self,
        before: Any,
        after: Any,
        source: EventSource | None = None,
        sub_type: str | None = None,
        metadata: dict[str, str] | None = None,
    ) -> AuditEvent | None:
        """
        Build an audit event for one object change.

        Returns:
            The event, or None when nothing changed
        """
        elements = self.diff_checker.diff(before, after)
        if not elements:
            logger.debug("No changes detected for %s, skipping event", sub_type or "object")
            return None

        event = AuditEvent(
            type=event_type_for(before, after),
            source=source or EventSource(),
            elements=elements,
            application_name=self.config.application_name,
            sub_type=sub_type,
            metadata=metadata,
        )
        logger.info(
            "Audit event %s (%s) with %d changes", event.id, event.type.value, len(event)
        )
        return event
