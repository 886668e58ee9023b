import pytest

from agenda.config import DEFAULT_CAPACITY
from agenda.models import ContactRecord, NotificationKind
from agenda.store import ContactDirectory, ContactStore, LoggingSink, RecordingSink


def _names(store: ContactStore) -> list:
    return [record.name for record in store.list_contacts()]


def test_default_capacity() -> None:
    store = ContactStore()
    assert store.capacity() == DEFAULT_CAPACITY == 10
    assert store.total() == 0
    assert store.free_slots() == 10
    assert isinstance(store.sink, LoggingSink)


@pytest.mark.parametrize("capacity", [0, -1, 2.5, "3", True])
def test_rejects_invalid_capacity(capacity) -> None:
    with pytest.raises(ValueError):
        ContactStore(capacity=capacity)


def test_satisfies_directory_protocol(store: ContactStore) -> None:
    assert isinstance(store, ContactDirectory)


def test_add_then_find_any_casing(store: ContactStore, sink: RecordingSink) -> None:
    record = ContactRecord("Ana Pérez", "111")
    assert store.add(record) is True
    assert store.find("  ANA PÉREZ ") is record
    assert store.find("ana pérez") is record
    assert sink.events == []


def test_find_missing_and_none(store: ContactStore) -> None:
    store.add(ContactRecord("Ana", "111"))
    assert store.find("Luis") is None
    assert store.find(None) is None
    assert store.find("") is None


def test_exists_ignores_phone(store: ContactStore) -> None:
    store.add(ContactRecord("Ana", "111"))
    assert store.exists(ContactRecord(" ana ", "N/A")) is True
    assert store.exists(ContactRecord("Luis", "111")) is False


def test_duplicate_add_is_rejected(store: ContactStore, sink: RecordingSink) -> None:
    original = ContactRecord("Ana", "111")
    store.add(original)

    assert store.add(ContactRecord("  ANA", "222")) is False
    assert store.total() == 1
    assert store.find("ana").phone == "111"
    assert sink.kinds() == [NotificationKind.DUPLICATE]
    assert sink.events[0].name == "ANA"


def test_fill_to_capacity(store: ContactStore, sink: RecordingSink) -> None:
    for i in range(store.capacity()):
        assert store.add(ContactRecord(f"Contact {i}", str(i))) is True

    assert store.is_full() is True
    assert store.free_slots() == 0

    assert store.add(ContactRecord("One too many", "999")) is False
    assert store.total() == store.capacity()
    assert sink.kinds() == [NotificationKind.STORE_FULL]


def test_capacity_one_accepts_exactly_one() -> None:
    sink = RecordingSink()
    store = ContactStore(capacity=1, sink=sink)
    assert store.add(ContactRecord("Ana", "111")) is True
    assert store.is_full() is True
    assert store.add(ContactRecord("Luis", "222")) is False
    assert store.total() == 1


def test_full_is_reported_before_duplicate() -> None:
    sink = RecordingSink()
    store = ContactStore(capacity=1, sink=sink)
    store.add(ContactRecord("Ana", "111"))

    assert store.add(ContactRecord("ana", "222")) is False
    assert sink.kinds() == [NotificationKind.STORE_FULL]


def test_remove_present(store: ContactStore, sink: RecordingSink) -> None:
    store.add(ContactRecord("Ana Pérez", "111"))
    store.add(ContactRecord("Luis", "333"))

    assert store.remove(ContactRecord("ana pérez", "N/A")) is True
    assert store.total() == 1
    assert store.find("Ana Pérez") is None
    assert sink.kinds() == [NotificationKind.REMOVED]
    # The stored record's name is reported, not the probe's
    assert sink.events[0].name == "Ana Pérez"


def test_remove_absent(store: ContactStore, sink: RecordingSink) -> None:
    store.add(ContactRecord("Ana", "111"))

    assert store.remove(ContactRecord("Luis", "N/A")) is False
    assert store.total() == 1
    assert sink.kinds() == [NotificationKind.NOT_FOUND]


def test_list_empty_emits_notification(store: ContactStore, sink: RecordingSink) -> None:
    assert store.list_contacts() == []
    assert sink.kinds() == [NotificationKind.EMPTY]


def test_list_follows_insertion_order(store: ContactStore) -> None:
    for name in ["Zoe", "Ana", "Marta"]:
        store.add(ContactRecord(name, "1"))

    store.find("Marta")
    store.exists(ContactRecord("Zoe", "1"))
    store.find("nobody")

    assert _names(store) == ["Zoe", "Ana", "Marta"]


def test_readd_moves_to_end(store: ContactStore) -> None:
    for name in ["Zoe", "Ana", "Marta"]:
        store.add(ContactRecord(name, "1"))

    store.remove(ContactRecord("Zoe", "N/A"))
    store.add(ContactRecord("zoe", "2"))

    assert _names(store) == ["Ana", "Marta", "zoe"]


def test_list_returns_a_copy(store: ContactStore) -> None:
    store.add(ContactRecord("Ana", "111"))
    listed = store.list_contacts()
    listed.clear()
    assert store.total() == 1


def test_len_and_repr(store: ContactStore) -> None:
    store.add(ContactRecord("Ana", "111"))
    assert len(store) == 1
    assert repr(store) == "ContactStore(capacity=3, total=1)"


def test_reference_scenario() -> None:
    sink = RecordingSink()
    store = ContactStore(capacity=2, sink=sink)

    assert store.add(ContactRecord("Ana Pérez", "111")) is True
    assert store.add(ContactRecord("  ana pérez ", "222")) is False
    assert store.total() == 1

    assert store.add(ContactRecord("Luis", "333")) is True
    assert store.is_full() is True

    assert store.add(ContactRecord("Marta", "444")) is False
    assert store.total() == 2

    found = store.find("ANA PÉREZ")
    assert found is not None
    assert found.phone == "111"

    assert store.remove(ContactRecord("Luis", "N/A")) is True
    assert store.total() == 1
    assert store.free_slots() == 1

    assert sink.kinds() == [
        NotificationKind.DUPLICATE,
        NotificationKind.STORE_FULL,
        NotificationKind.REMOVED,
    ]
