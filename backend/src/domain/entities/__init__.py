"""Domain Entities - Core business objects"""

from .application import Application
from .notification import Notification

__all__ = ["Application", "Notification"]
