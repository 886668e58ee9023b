"""
Contact record model.

File: models/contact.py
Author: Aidan Allchin
Created: 2026-10-19
Last Modified: 2026-10-19
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr
from rich.text import Text


def normalize_name(name: Optional[str]) -> str:
    """
    Normalize a contact name into its lookup key.

    Args:
        name: Raw name as typed by the user (may be None)

    Returns:
        Trimmed, lowercased name, or "" for None

    Examples:
        >>> normalize_name("  Ana Pérez ")
        'ana pérez'
        >>> normalize_name(None)
        ''
    """
    if name is None:
        return ""
    return name.strip().lower()


class ContactRecord(BaseModel):
    """
    An immutable name/phone pair.

    Identity is the normalized name only: two records whose names differ in
    case or surrounding whitespace are equal and hash alike, whatever their
    phone numbers.
    """
    model_config = ConfigDict(
        frozen=True,
        str_strip_whitespace=True,
        extra='forbid'
    )

    name: str = Field(..., description="Contact name as entered (trimmed)", min_length=1)
    phone: str = Field(..., description="Phone number as entered (trimmed)", min_length=1)

    _normalized_key: str = PrivateAttr(default="")

    def __init__(self, name: Optional[str] = None, phone: Optional[str] = None, **data: Any):
        super().__init__(name=name, phone=phone, **data)

    def model_post_init(self, __context: Any) -> None:
        # Computed once; name is already stripped at this point
        self._normalized_key = normalize_name(self.name)

    @property
    def normalized_key(self) -> str:
        """Lookup key shared by all spellings of this name."""
        return self._normalized_key

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, ContactRecord):
            return NotImplemented
        return self._normalized_key == other._normalized_key

    def __hash__(self) -> int:
        return hash(self._normalized_key)

    def display(self) -> str:
        """Format as "name -> phone" using the original name."""
        return f"{self.name} -> {self.phone}"

    def __str__(self) -> str:
        return self.display()

    def to_rich_text(self) -> Text:
        """Format contact as Rich Text for display"""
        text = Text()
        text.append(self.name, style="bold cyan")
        text.append(" -> ", style="dim")
        text.append(self.phone, style="green")
        return text
