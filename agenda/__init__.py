"""
Agenda: a bounded, in-memory contact directory.

Contacts are unique by name (case and surrounding whitespace ignored), kept in
insertion order, and capped at a fixed capacity. An optional auditing wrapper
reports every add and remove.

File: __init__.py
Author: Aidan Allchin
Created: 2026-10-19
"""

from .config import DEFAULT_CAPACITY, AgendaConfig, load_config
from .models import ContactRecord, Notification, NotificationKind, ValidationError, normalize_name
from .store import AuditingContactStore, ContactDirectory, ContactStore

__all__ = [
    "DEFAULT_CAPACITY",
    "AgendaConfig",
    "AuditingContactStore",
    "ContactDirectory",
    "ContactRecord",
    "ContactStore",
    "Notification",
    "NotificationKind",
    "ValidationError",
    "load_config",
    "normalize_name",
]
