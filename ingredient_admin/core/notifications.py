"""
One-shot, category-tagged messages shown after a redirect.

Handlers return a Notification as part of their outcome; the HTTP layer
pushes it into a NotificationStore, and the next rendered page pops it.
"""

from enum import Enum
from typing import Any, MutableMapping, Protocol

from pydantic import BaseModel

SESSION_KEY = "_notifications"


class NotificationCategory(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    NOT_FOUND = "not-found"


class Notification(BaseModel):
    category: NotificationCategory
    message: str


class NotificationStore(Protocol):
    def push(self, notification: Notification) -> None: ...

    def pop_all(self) -> list[Notification]: ...


class SessionNotificationStore:
    """NotificationStore kept in a (cookie) session mapping."""

    def __init__(self, session: MutableMapping[str, Any]):
        self.session = session

    def push(self, notification: Notification) -> None:
        pending = list(self.session.get(SESSION_KEY, []))
        pending.append(notification.model_dump(mode="json"))
        self.session[SESSION_KEY] = pending

    def pop_all(self) -> list[Notification]:
        pending = self.session.pop(SESSION_KEY, [])
        return [Notification.model_validate(item) for item in pending]
