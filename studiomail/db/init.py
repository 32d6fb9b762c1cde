import certifi
from beanie import init_beanie
from motor.motor_asyncio import AsyncIOMotorClient

from studiomail.core.config import get_settings
from studiomail.models.audit_log import AuditLog
from studiomail.models.email_template import EmailTemplate
from studiomail.models.photographer import Photographer

DOCUMENT_MODELS = [
    Photographer,
    EmailTemplate,
    AuditLog,
]


def _use_tls(uri: str) -> bool:
    """True if URI uses TLS (Atlas or explicit tls=true)."""
    return "mongodb+srv://" in uri or "tls=true" in uri.lower()


async def init_db() -> None:
    settings = get_settings()
    kwargs = {}
    if _use_tls(settings.mongodb_uri):
        kwargs["tlsCAFile"] = certifi.where()
    client = AsyncIOMotorClient(settings.mongodb_uri, **kwargs)
    await init_beanie(database=client[settings.mongodb_db_name], document_models=DOCUMENT_MODELS)
