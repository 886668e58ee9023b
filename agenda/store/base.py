"""
Capability set shared by every contact store.

File: store/base.py
Author: Aidan Allchin
Created: 2026-10-19
"""

from typing import List, Optional, Protocol, runtime_checkable

from ..models import ContactRecord


@runtime_checkable
class ContactDirectory(Protocol):
    """Bounded, duplicate-free, insertion-ordered contact container."""

    def add(self, record: ContactRecord) -> bool:
        """Store a contact. False if the store is full or the name is taken."""
        ...

    def exists(self, record: ContactRecord) -> bool:
        """True if a contact with the same name is stored. Phone is ignored."""
        ...

    def find(self, name: Optional[str]) -> Optional[ContactRecord]:
        """Return the contact with this name (any casing), or None."""
        ...

    def remove(self, record: ContactRecord) -> bool:
        """Remove the contact with the same name. False if not found."""
        ...

    def list_contacts(self) -> List[ContactRecord]:
        """All contacts in insertion order."""
        ...

    def is_full(self) -> bool:
        ...

    def free_slots(self) -> int:
        ...

    def capacity(self) -> int:
        ...

    def total(self) -> int:
        ...
