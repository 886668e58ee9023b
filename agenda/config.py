"""
Runtime configuration for the agenda menu.

The store itself takes everything it needs as constructor arguments; only the
interactive entry point reads the environment.

File: config.py
Author: Aidan Allchin
Created: 2026-10-19
Last Modified: 2026-10-19
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv

DEFAULT_CAPACITY = 10
DEFAULT_LOG_LEVEL = "WARNING"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


def parse_capacity(raw: Optional[str], default: int = DEFAULT_CAPACITY) -> int:
    """
    Parse a user-supplied capacity.

    Args:
        raw: Text as typed (may be None or blank)
        default: Value used for blank, non-numeric or non-positive input

    Returns:
        A positive capacity

    Examples:
        >>> parse_capacity("25")
        25
        >>> parse_capacity("")
        10
        >>> parse_capacity("-3")
        10
    """
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    return value if value > 0 else default


def _parse_bool(raw: Optional[str], default: bool) -> bool:
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ValueError(f"Expected a boolean, got {raw!r}")


@dataclass
class AgendaConfig:
    """Configuration for the interactive agenda."""

    default_capacity: int = DEFAULT_CAPACITY
    audit: bool = True  # Wrap the store in AuditingContactStore
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self):
        if isinstance(self.default_capacity, bool) or not isinstance(self.default_capacity, int):
            raise ValueError(f"default_capacity must be an integer, got {self.default_capacity!r}")
        if self.default_capacity <= 0:
            raise ValueError(f"default_capacity must be positive, got {self.default_capacity}")

        self.log_level = self.log_level.upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown log level: {self.log_level}")

    def to_dict(self) -> dict:
        return {
            "default_capacity": self.default_capacity,
            "audit": self.audit,
            "log_level": self.log_level,
        }


def load_config() -> AgendaConfig:
    """
    Build the configuration from the environment.

    Reads the nearest .env file above the working directory, then:
        AGENDA_CAPACITY   default capacity offered at startup
        AGENDA_AUDIT      wrap the store with the auditor (1/0)
        AGENDA_LOG_LEVEL  logging level name

    Raises:
        ValueError: If AGENDA_AUDIT or AGENDA_LOG_LEVEL is malformed
    """
    load_dotenv(find_dotenv(usecwd=True))

    return AgendaConfig(
        default_capacity=parse_capacity(os.getenv("AGENDA_CAPACITY"), DEFAULT_CAPACITY),
        audit=_parse_bool(os.getenv("AGENDA_AUDIT"), True),
        log_level=os.getenv("AGENDA_LOG_LEVEL", DEFAULT_LOG_LEVEL),
    )
