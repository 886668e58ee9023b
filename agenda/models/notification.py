"""
Notification events emitted by contact stores.

File: models/notification.py
Author: Aidan Allchin
Created: 2026-10-19
Last Modified: 2026-10-19
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class NotificationKind(str, Enum):
    """What happened. Store events first, then audit events."""

    STORE_FULL = "store_full"
    DUPLICATE = "duplicate"
    REMOVED = "removed"
    NOT_FOUND = "not_found"
    EMPTY = "empty"

    ADD_ATTEMPT = "add_attempt"
    ADD_RESULT = "add_result"
    REMOVE_ATTEMPT = "remove_attempt"
    REMOVE_RESULT = "remove_result"


# Kinds that report a rejected operation
REJECTIONS = frozenset({
    NotificationKind.STORE_FULL,
    NotificationKind.DUPLICATE,
    NotificationKind.NOT_FOUND,
})


class Notification(BaseModel):
    """An observable event describing an attempted or completed operation."""
    model_config = ConfigDict(frozen=True)

    kind: NotificationKind = Field(..., description="Event kind")
    name: Optional[str] = Field(None, description="Original name of the contact involved")
    success: Optional[bool] = Field(None, description="Outcome, for *_RESULT events only")

    @property
    def is_rejection(self) -> bool:
        return self.kind in REJECTIONS

    @property
    def message(self) -> str:
        """Human-readable line for this event"""
        kind = self.kind
        if kind is NotificationKind.STORE_FULL:
            return "Cannot add: the agenda is full."
        if kind is NotificationKind.DUPLICATE:
            return "Cannot add: a contact with that name already exists."
        if kind is NotificationKind.REMOVED:
            return f"Contact removed: {self.name}"
        if kind is NotificationKind.NOT_FOUND:
            return "No contact found to remove."
        if kind is NotificationKind.EMPTY:
            return "(empty agenda)"
        if kind is NotificationKind.ADD_ATTEMPT:
            return f"Adding contact: {self.name}"
        if kind is NotificationKind.ADD_RESULT:
            return f"Result: {'added' if self.success else 'not added'}"
        if kind is NotificationKind.REMOVE_ATTEMPT:
            return f"Removing contact: {self.name}"
        return f"Result: {'removed' if self.success else 'not removed'}"
