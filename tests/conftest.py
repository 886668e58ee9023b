import io

import pytest
from rich.console import Console

from agenda.store import ContactStore, RecordingSink


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def store(sink: RecordingSink) -> ContactStore:
    return ContactStore(capacity=3, sink=sink)


@pytest.fixture
def console() -> Console:
    return Console(file=io.StringIO(), width=120, color_system=None)
