"""
Auditing wrapper around any contact store.

File: store/auditing.py
Author: Aidan Allchin
Created: 2026-10-19
Last Modified: 2026-10-19
"""

import logging
from typing import List, Optional

from ..models import ContactRecord, Notification, NotificationKind
from .base import ContactDirectory
from .sinks import LoggingSink, NotificationSink

log = logging.getLogger(__name__)


class AuditingContactStore:
    """
    Reports every add and remove before and after delegating.

    Results are passed through untouched. All read operations are forwarded
    as-is, so the wrapper can stand in wherever a ContactDirectory is expected.
    """

    def __init__(self, wrapped: ContactDirectory, sink: Optional[NotificationSink] = None):
        self._wrapped = wrapped
        self.sink = sink if sink is not None else LoggingSink()

    @property
    def wrapped(self) -> ContactDirectory:
        return self._wrapped

    def add(self, record: ContactRecord) -> bool:
        self.sink.notify(Notification(kind=NotificationKind.ADD_ATTEMPT, name=record.name))
        ok = self._wrapped.add(record)
        log.debug(f"Audit add '{record.name}': {ok}")
        self.sink.notify(Notification(kind=NotificationKind.ADD_RESULT, name=record.name, success=ok))
        return ok

    def remove(self, record: ContactRecord) -> bool:
        self.sink.notify(Notification(kind=NotificationKind.REMOVE_ATTEMPT, name=record.name))
        ok = self._wrapped.remove(record)
        log.debug(f"Audit remove '{record.name}': {ok}")
        self.sink.notify(Notification(kind=NotificationKind.REMOVE_RESULT, name=record.name, success=ok))
        return ok

    def exists(self, record: ContactRecord) -> bool:
        return self._wrapped.exists(record)

    def find(self, name: Optional[str]) -> Optional[ContactRecord]:
        return self._wrapped.find(name)

    def list_contacts(self) -> List[ContactRecord]:
        return self._wrapped.list_contacts()

    def is_full(self) -> bool:
        return self._wrapped.is_full()

    def free_slots(self) -> int:
        return self._wrapped.free_slots()

    def capacity(self) -> int:
        return self._wrapped.capacity()

    def total(self) -> int:
        return self._wrapped.total()

    def __repr__(self) -> str:
        return f"AuditingContactStore({self._wrapped!r})"
