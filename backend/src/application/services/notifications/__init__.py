"""Notification services"""

from .interfaces import INotificationDispatcher, NullNotificationDispatcher
from .dispatcher import NotificationDispatcher
__all__ = ["INotificationDispatcher", "NullNotificationDispatcher", "NotificationDispatcher"]
