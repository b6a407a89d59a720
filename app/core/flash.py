from __future__ import annotations

from fastapi import Request

from app.schemas.common import FlashOut


# messages wait in the signed session until the next page that displays them
_SESSION_KEY = "flash"
_LEVELS = ("alert", "notice")


def set_flash(request: Request, *, alert: str | None = None, notice: str | None = None) -> None:
    pending = dict(request.session.get(_SESSION_KEY) or {})
    for level, message in (("alert", alert), ("notice", notice)):
        if message:
            pending[level] = message
    if pending:
        request.session[_SESSION_KEY] = pending


def pop_flash(request: Request) -> FlashOut:
    """Return the pending flash and remove it from the session."""
    pending = request.session.pop(_SESSION_KEY, None) or {}
    return FlashOut(**{level: pending.get(level) for level in _LEVELS})
