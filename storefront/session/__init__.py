from .cart_store import CART_SESSION_KEY, CartStore
from .gate import AUTH_SESSION_KEY, SessionGate, SessionState
from .navigator import VIEW_SESSION_KEY, Navigator, dashboard_for
from .notifications import NOTIFICATION_SESSION_KEY, Notification, NotificationChannel, NotificationKind

__all__ = [
    "CartStore",
    "CART_SESSION_KEY",
    "SessionGate",
    "SessionState",
    "AUTH_SESSION_KEY",
    "Navigator",
    "VIEW_SESSION_KEY",
    "dashboard_for",
    "NotificationChannel",
    "Notification",
    "NotificationKind",
    "NOTIFICATION_SESSION_KEY",
]
