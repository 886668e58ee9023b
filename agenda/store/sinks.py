"""
Notification sinks.

Stores report full/duplicate/missing outcomes as events instead of printing.
A sink decides what happens to them: record them, log them, or show them.

File: store/sinks.py
Author: Aidan Allchin
Created: 2026-10-19
Last Modified: 2026-10-19
"""

import logging
from typing import Iterable, List, Optional, Protocol

from rich.console import Console
from rich.markup import escape

from ..models import Notification, NotificationKind

log = logging.getLogger(__name__)

_QUIET_KINDS = (
    NotificationKind.EMPTY,
    NotificationKind.ADD_ATTEMPT,
    NotificationKind.REMOVE_ATTEMPT,
)


class NotificationSink(Protocol):
    """Anything that accepts notification events."""

    def notify(self, notification: Notification) -> None:
        ...


class RecordingSink:
    """Keeps every event in order. Used by tests and for inspection."""

    def __init__(self):
        self.events: List[Notification] = []

    def notify(self, notification: Notification) -> None:
        self.events.append(notification)

    def kinds(self) -> List[NotificationKind]:
        return [event.kind for event in self.events]

    def clear(self) -> None:
        self.events.clear()


class LoggingSink:
    """Sends events to a logger. Rejections go out as warnings."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or log

    def notify(self, notification: Notification) -> None:
        level = logging.WARNING if notification.is_rejection else logging.INFO
        self.logger.log(level, notification.message)


class ConsoleSink:
    """Prints events on a Rich console."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def notify(self, notification: Notification) -> None:
        if notification.is_rejection:
            style = "red"
        elif notification.kind in _QUIET_KINDS:
            style = "dim"
        elif notification.success is False:
            style = "yellow"
        else:
            style = "green"
        self.console.print(f"[{style}]{escape(notification.message)}[/]", highlight=False)


class FanoutSink:
    """Forwards each event to several sinks, in order."""

    def __init__(self, sinks: Iterable[NotificationSink]):
        self.sinks = list(sinks)

    def notify(self, notification: Notification) -> None:
        for sink in self.sinks:
            sink.notify(notification)
