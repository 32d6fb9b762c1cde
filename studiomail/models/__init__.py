from studiomail.models.photographer import Photographer
from studiomail.models.email_template import EmailTemplate
from studiomail.models.audit_log import AuditLog

__all__ = [
    "Photographer",
    "EmailTemplate",
    "AuditLog",
]
