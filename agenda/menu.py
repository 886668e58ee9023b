"""
Interactive console menu for the agenda.

Each menu selection builds at most one contact from user input and runs
exactly one store operation. Store notifications (full, duplicate, removed,
...) are shown through a ConsoleSink; the menu itself only renders the
results of queries.

Usage:
    >>> python main.py
    >>> python -m agenda

File: menu.py
Author: Aidan Allchin
Created: 2026-10-19
Last Modified: 2026-10-19
"""

import logging
import sys
from enum import Enum
from typing import Optional, TextIO

from pydantic import ValidationError
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from .config import AgendaConfig, load_config
from .models import ContactRecord
from .store import (
    AuditingContactStore,
    ConsoleSink,
    ContactDirectory,
    ContactStore,
    FanoutSink,
    LoggingSink,
    NotificationSink,
)

log = logging.getLogger(__name__)

# Phone used for records that only carry a name to look up
PROBE_PHONE = "N/A"


class MenuOption(Enum):
    """Menu entries, in display order."""

    ADD = (1, "Add contact")
    EXISTS = (2, "Contact exists (by full name)")
    LIST = (3, "List contacts")
    FIND = (4, "Find contact (shows phone)")
    REMOVE = (5, "Remove contact")
    FULL = (6, "Is the agenda full?")
    FREE = (7, "Free slots")
    TOTALS = (8, "Totals (capacity / used)")
    QUIT = (9, "Quit")

    def __init__(self, number: int, description: str):
        self.number = number
        self.description = description

    @classmethod
    def from_number(cls, number: int) -> Optional["MenuOption"]:
        for option in cls:
            if option.number == number:
                return option
        return None


def show_menu(console: Console):
    """Display the main menu."""
    console.print()
    console.print(Panel.fit("[bold cyan]Agenda[/] - Contacts", border_style="cyan"))

    table = Table(box=box.ROUNDED, show_header=True, header_style="bold")
    table.add_column("#", style="cyan", width=3)
    table.add_column("Option", style="white")

    for option in MenuOption:
        table.add_row(str(option.number), option.description)

    console.print(table)


def ask_non_empty(console: Console, prompt: str, stream: Optional[TextIO] = None) -> str:
    """
    Ask until the user types something other than whitespace.

    Returns:
        The answer, trimmed
    """
    while True:
        value = Prompt.ask(prompt, console=console, stream=stream)
        if value and value.strip():
            return value.strip()
        console.print("[red]The value cannot be empty.[/]")


def ask_capacity(console: Console, default: int, stream: Optional[TextIO] = None) -> int:
    """
    Ask for the agenda capacity.

    Blank input keeps the default. Anything that is not a positive integer is
    reported and replaced with the default.
    """
    console.print(f"[dim]Leave blank to use the default capacity ({default}).[/]")
    raw = Prompt.ask("Desired capacity", console=console, stream=stream, default="", show_default=False)
    raw = raw.strip()
    if not raw:
        return default

    try:
        capacity = int(raw)
    except ValueError:
        console.print(f"[yellow]Not recognized as a number. Using the default capacity of {default}.[/]")
        return default

    if capacity <= 0:
        console.print(f"[yellow]Invalid capacity. Using the default capacity of {default}.[/]")
        return default
    return capacity


def build_store(capacity: int, config: AgendaConfig, console: Console) -> ContactDirectory:
    """
    Create the store used by the menu.

    Notifications are shown on the console, and also logged when the log level
    is INFO or lower. The store is wrapped in the auditor when config.audit is on.
    """
    sink: NotificationSink = ConsoleSink(console)
    if logging.getLevelName(config.log_level) <= logging.INFO:
        sink = FanoutSink([sink, LoggingSink()])

    store: ContactDirectory = ContactStore(capacity=capacity, sink=sink)
    if config.audit:
        store = AuditingContactStore(store, sink=sink)
    return store


def _probe(console: Console, prompt: str, stream: Optional[TextIO]) -> Optional[ContactRecord]:
    name = ask_non_empty(console, prompt, stream)
    try:
        return ContactRecord(name, PROBE_PHONE)
    except ValidationError as e:
        console.print(f"[red]Invalid contact: {escape(str(e))}[/]")
        return None


def handle_option(
    option: MenuOption,
    store: ContactDirectory,
    console: Console,
    stream: Optional[TextIO] = None,
) -> bool:
    """
    Run one menu option against the store.

    Returns:
        False when the user chose to quit, True otherwise
    """
    if option is MenuOption.ADD:
        name = ask_non_empty(console, "Name", stream)
        phone = ask_non_empty(console, "Phone", stream)
        try:
            record = ContactRecord(name, phone)
        except ValidationError as e:
            console.print(f"[red]Invalid contact: {escape(str(e))}[/]")
            return True
        store.add(record)

    elif option is MenuOption.EXISTS:
        record = _probe(console, "Name to check", stream)
        if record is not None:
            if store.exists(record):
                console.print("A contact with that name exists.")
            else:
                console.print("No contact with that name exists.")

    elif option is MenuOption.LIST:
        records = store.list_contacts()
        if records:
            table = Table(box=box.ROUNDED, show_header=True, header_style="bold")
            table.add_column("#", style="dim", width=4)
            table.add_column("Name", style="cyan")
            table.add_column("Phone", style="green")
            for i, record in enumerate(records, 1):
                table.add_row(str(i), escape(record.name), escape(record.phone))
            console.print(table)

    elif option is MenuOption.FIND:
        name = ask_non_empty(console, "Name to find", stream)
        found = store.find(name)
        if found is not None:
            console.print(f"Phone of {escape(found.name)}: [green]{escape(found.phone)}[/]", highlight=False)
        else:
            console.print("No contact found with that name.")

    elif option is MenuOption.REMOVE:
        record = _probe(console, "Name to remove", stream)
        if record is not None:
            store.remove(record)

    elif option is MenuOption.FULL:
        if store.is_full():
            console.print("The agenda is full.")
        else:
            console.print("There is still space available.")

    elif option is MenuOption.FREE:
        console.print(f"Free slots: {store.free_slots()}", highlight=False)

    elif option is MenuOption.TOTALS:
        console.print(f"Capacity: {store.capacity()} | Used: {store.total()}", highlight=False)

    elif option is MenuOption.QUIT:
        console.print("[dim]Goodbye![/]")
        return False

    return True


def run_menu(store: ContactDirectory, console: Console, stream: Optional[TextIO] = None):
    """Show the menu and run selections until the user quits."""
    choices = [str(option.number) for option in MenuOption]

    while True:
        show_menu(console)
        choice = Prompt.ask("Choose an option", console=console, choices=choices, stream=stream)
        option = MenuOption.from_number(int(choice))
        if option is None:
            console.print("[red]Invalid option. Please pick one from the menu.[/]")
            continue

        log.debug(f"Menu option: {option.name}")
        if not handle_option(option, store, console, stream):
            break


def main(stream: Optional[TextIO] = None, console: Optional[Console] = None) -> int:
    """Main entry point with interactive menu."""
    try:
        config = load_config()
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s | %(levelname)-8s | %(message)s",
    )
    log.debug(f"Configuration: {config.to_dict()}")

    if console is None:
        console = Console()
    console.print(Panel.fit("[bold cyan]Welcome to the Agenda[/]", border_style="cyan"))

    try:
        capacity = ask_capacity(console, config.default_capacity, stream)
        store = build_store(capacity, config, console)
        console.print(f"Agenda initialized with capacity: {store.capacity()}", highlight=False)
        run_menu(store, console, stream)
    except (KeyboardInterrupt, EOFError):
        console.print("\n[dim]Goodbye![/]")

    return 0


if __name__ == "__main__":
    sys.exit(main())
