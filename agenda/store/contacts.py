"""
In-memory contact store with fixed capacity.

Contacts are keyed by their normalized name in an insertion-ordered dict, so
lookups are O(1) on average and listing follows the order contacts were added.

File: store/contacts.py
Author: Aidan Allchin
Created: 2026-10-19
Last Modified: 2026-10-19
"""

import logging
from typing import Dict, List, Optional

from ..config import DEFAULT_CAPACITY
from ..models import ContactRecord, Notification, NotificationKind, normalize_name
from .sinks import LoggingSink, NotificationSink

log = logging.getLogger(__name__)


class ContactStore:
    """
    Bounded, duplicate-free contact store.

    Full, duplicate and missing outcomes are reported through the return value
    and a notification on the sink; none of them raise.
    """

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        sink: Optional[NotificationSink] = None,
    ):
        """
        Initialize the store.

        Args:
            capacity: Maximum number of contacts (must be positive)
            sink: Receives store notifications. Defaults to a LoggingSink.

        Raises:
            ValueError: If capacity is not a positive integer
        """
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise ValueError(f"Capacity must be a positive integer, got {capacity!r}")

        self._capacity = capacity
        self._entries: Dict[str, ContactRecord] = {}
        self.sink = sink if sink is not None else LoggingSink()

    def _emit(self, kind: NotificationKind, name: Optional[str] = None) -> None:
        self.sink.notify(Notification(kind=kind, name=name))

    def add(self, record: ContactRecord) -> bool:
        # Fullness is checked before duplication
        if self.is_full():
            log.debug(f"Rejected '{record.name}': store full ({self._capacity})")
            self._emit(NotificationKind.STORE_FULL, record.name)
            return False

        key = record.normalized_key
        if key in self._entries:
            log.debug(f"Rejected '{record.name}': duplicate key '{key}'")
            self._emit(NotificationKind.DUPLICATE, record.name)
            return False

        self._entries[key] = record
        log.debug(f"Added '{record.name}' ({len(self._entries)}/{self._capacity})")
        return True

    def exists(self, record: ContactRecord) -> bool:
        return record.normalized_key in self._entries

    def find(self, name: Optional[str]) -> Optional[ContactRecord]:
        return self._entries.get(normalize_name(name))

    def remove(self, record: ContactRecord) -> bool:
        removed = self._entries.pop(record.normalized_key, None)
        if removed is None:
            log.debug(f"Nothing to remove for '{record.name}'")
            self._emit(NotificationKind.NOT_FOUND, record.name)
            return False

        log.debug(f"Removed '{removed.name}' ({len(self._entries)}/{self._capacity})")
        self._emit(NotificationKind.REMOVED, removed.name)
        return True

    def list_contacts(self) -> List[ContactRecord]:
        """
        Return all contacts in insertion order.

        Emits an EMPTY notification when there is nothing to list.
        """
        if not self._entries:
            self._emit(NotificationKind.EMPTY)
            return []
        return list(self._entries.values())

    def is_full(self) -> bool:
        return len(self._entries) >= self._capacity

    def free_slots(self) -> int:
        return self._capacity - len(self._entries)

    def capacity(self) -> int:
        return self._capacity

    def total(self) -> int:
        return len(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"ContactStore(capacity={self._capacity}, total={len(self._entries)})"
