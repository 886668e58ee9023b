"""
Contact stores and the notification sinks they report to.

Usage:
    >>> from agenda.models import ContactRecord
    >>> from agenda.store import AuditingContactStore, ContactStore
    >>> store = AuditingContactStore(ContactStore(capacity=5))
    >>> store.add(ContactRecord("Ana", "111"))
    True

File: store/__init__.py
Author: Aidan Allchin
Created: 2026-10-19
"""

from .auditing import AuditingContactStore
from .base import ContactDirectory
from .contacts import ContactStore
from .sinks import ConsoleSink, FanoutSink, LoggingSink, NotificationSink, RecordingSink

__all__ = [
    "AuditingContactStore",
    "ConsoleSink",
    "ContactDirectory",
    "ContactStore",
    "FanoutSink",
    "LoggingSink",
    "NotificationSink",
    "RecordingSink",
]
