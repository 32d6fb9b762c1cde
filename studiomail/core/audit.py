"""Audit trail for template and branding changes."""

from typing import Any, Literal

from studiomail.models.audit_log import AuditLog

AuditEvent = Literal[
    "template_created",
    "template_updated",
    "template_deleted",
    "branding_updated",
]


async def log_event(
    photographer_id: str | None,
    event_type: AuditEvent,
    entity_type: str,
    entity_id: str | None = None,
    metadata: dict[str, Any] | None = None,
) -> AuditLog:
    entry = AuditLog(
        photographer_id=photographer_id,
        event_type=event_type,
        entity_type=entity_type,
        entity_id=entity_id,
        metadata=metadata or {},
    )
    await entry.insert()
    return entry
