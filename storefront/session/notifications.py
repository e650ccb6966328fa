"""
Single-slot, auto-expiring user notification.

At most one notification is live. ``show`` replaces whatever is pending and the
message disappears once its TTL elapses or ``dismiss`` is called.
"""

import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, MutableMapping, Optional

from django.conf import settings

logger = logging.getLogger(__name__)

NOTIFICATION_SESSION_KEY = "notification"


class NotificationKind(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class Notification:
    text: str
    kind: NotificationKind
    created_at: float

    def to_dict(self):
        return {"text": self.text, "kind": self.kind.value, "createdAt": self.created_at}


class NotificationChannel:
    def __init__(
        self,
        session: MutableMapping,
        ttl_seconds: Optional[float] = None,
        clock: Callable[[], float] = time.time,
    ):
        self.session = session
        self.ttl_seconds = ttl_seconds if ttl_seconds is not None else settings.NOTIFICATION_TTL_SECONDS
        self.clock = clock

    def show(self, text: str, kind: NotificationKind = NotificationKind.SUCCESS) -> Notification:
        notification = Notification(text=text, kind=NotificationKind(kind), created_at=self.clock())
        self.session[NOTIFICATION_SESSION_KEY] = notification.to_dict()
        logger.debug(f"Notification ({notification.kind.value}): {text}")
        return notification

    def success(self, text: str) -> Notification:
        return self.show(text, NotificationKind.SUCCESS)

    def error(self, text: str) -> Notification:
        return self.show(text, NotificationKind.ERROR)

    def dismiss(self) -> None:
        self.session.pop(NOTIFICATION_SESSION_KEY, None)

    @property
    def current(self) -> Optional[Notification]:
        """The live notification, or None once it has expired or been dismissed."""
        raw = self.session.get(NOTIFICATION_SESSION_KEY)
        if not raw:
            return None
        try:
            notification = Notification(
                text=str(raw["text"]),
                kind=NotificationKind(raw["kind"]),
                created_at=float(raw["createdAt"]),
            )
        except (KeyError, TypeError, ValueError):
            self.dismiss()
            return None

        if self.clock() - notification.created_at >= self.ttl_seconds:
            self.dismiss()
            return None
        return notification
