"""
Shared data models for the agenda project.
"""

from pydantic import ValidationError

from .contact import ContactRecord, normalize_name
from .notification import Notification, NotificationKind

__all__ = [
    "ContactRecord",
    "Notification",
    "NotificationKind",
    "ValidationError",
    "normalize_name",
]
