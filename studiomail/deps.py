"""Shared FastAPI dependencies."""

from fastapi import Depends, Request

from studiomail.core.exceptions import UnauthorizedError
from studiomail.core.logging import bind_photographer_id
from studiomail.core.security import load_session_cookie
from studiomail.emails.branding import BrandingData
from studiomail.models.photographer import Photographer
from studiomail.services.branding import branding_for_photographer

SESSION_COOKIE_NAME = "studiomail_session"


async def get_current_photographer(request: Request) -> Photographer:
    """Dependency: load session from cookie and return Photographer."""
    cookie = request.cookies.get(SESSION_COOKIE_NAME)
    if not cookie:
        raise UnauthorizedError("Not authenticated")
    payload = load_session_cookie(cookie)
    if not payload:
        raise UnauthorizedError("Invalid or expired session")
    photographer_id = payload.get("photographer_id")
    if not photographer_id:
        raise UnauthorizedError("Invalid session")
    photographer = await Photographer.get(photographer_id)
    if not photographer:
        raise UnauthorizedError("Photographer not found")
    if payload.get("session_version") != photographer.session_version:
        raise UnauthorizedError("Session invalidated")
    bind_photographer_id(str(photographer.id))
    return photographer


async def get_current_branding(
    photographer: Photographer = Depends(get_current_photographer),
) -> BrandingData:
    return branding_for_photographer(photographer)
