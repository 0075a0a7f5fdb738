from pathlib import Path
from typing import Any

from fastapi import Request
from fastapi.templating import Jinja2Templates

from ingredient_admin.core.config import settings
from ingredient_admin.core.notifications import SessionNotificationStore

TEMPLATES_DIR = Path(__file__).parents[1] / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.globals["app_name"] = settings.APP_NAME


def notification_store(request: Request) -> SessionNotificationStore:
    return SessionNotificationStore(request.session)


def render(request: Request, name: str, context: dict[str, Any] | None = None, status_code: int = 200):
    """Render a page, handing it (and clearing) the pending notifications."""
    context = dict(context or {})
    context["notifications"] = notification_store(request).pop_all()
    return templates.TemplateResponse(request, name, context, status_code=status_code)
