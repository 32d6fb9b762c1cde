"""Template variables: the insertable catalogue, caret insertion and substitution."""

import re
from typing import Any, Mapping

from markupsafe import escape

SMART_FILE_LINK = "{{smart_file_link}}"
GALLERY_LINK = "{{gallery_link}}"
CALENDAR_LINK = "{{calendar_link}}"

# Button link placeholders. The client never resolves these; the send-time render does.
LINK_PLACEHOLDERS: dict[str, str] = {
    "SMART_FILE": SMART_FILE_LINK,
    "GALLERY": GALLERY_LINK,
    "CALENDAR": CALENDAR_LINK,
}

VARIABLES: list[tuple[str, str]] = [
    ("{{first_name}}", "First Name"),
    ("{{last_name}}", "Last Name"),
    ("{{full_name}}", "Full Name"),
    ("{{email}}", "Email Address"),
    ("{{phone}}", "Phone Number"),
    ("{{project_type}}", "Project Type"),
    ("{{event_date}}", "Event Date"),
    ("{{business_name}}", "Business Name"),
    ("{{photographer_name}}", "Photographer Name"),
]

_TOKEN_RE = re.compile(r"\{\{\s*([\w.]+)\s*\}\}")


def insert_token(text: str, token: str, start: int, end: int | None = None) -> tuple[str, int]:
    """Splice ``token`` into ``text`` at the caret; return the new text and caret.

    ``start``/``end`` are a selection in ``text``; a selection is replaced.
    Out-of-range positions are clamped to the text. The token is inserted as-is.
    """
    length = len(text)
    start = max(0, min(start, length))
    end = start if end is None else max(start, min(end, length))
    return text[:start] + token + text[end:], start + len(token)


def render_variables(template: str, variables: Mapping[str, Any], *, escape_html: bool = False) -> str:
    """Replace ``{{ name }}`` tokens whose name is in ``variables``.

    Tokens with no value are left untouched so a later pass (or the send-time
    render) can resolve them.
    """
    if not template:
        return template

    def _replace(match: re.Match[str]) -> str:
        key = match.group(1)
        if key not in variables or variables[key] is None:
            return match.group(0)
        value = str(variables[key])
        return str(escape(value)) if escape_html else value

    return _TOKEN_RE.sub(_replace, template)


def find_variables(template: str) -> list[str]:
    """Token names in order of first appearance."""
    seen: list[str] = []
    for match in _TOKEN_RE.finditer(template or ""):
        name = match.group(1)
        if name not in seen:
            seen.append(name)
    return seen
