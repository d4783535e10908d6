"""Unit tests for ContactStore. In-memory file for the store rules, real files for I/O."""

import pytest

from phonebook.application import (
    ContactStore,
    CorruptFile,
    CreateFailed,
    FileCreated,
    FileLoaded,
    Saved,
    WriteFailed,
    compare_by_name,
)
from phonebook.domain import Contact, PhoneNumber
from phonebook.infrastructure import (
    BinaryContactFile,
    InMemoryContactFile,
    encode_store,
    load_store,
)


def _store() -> ContactStore:
    return ContactStore.load(InMemoryContactFile())


def _contact(name: str, *digits: str) -> Contact:
    return Contact(full_name=name, numbers=[PhoneNumber("mobile", d) for d in digits])


def test_load_missing_file_creates_empty_one(tmp_path) -> None:
    path = tmp_path / "db.bin"
    store = load_store(path)
    assert path.exists()
    assert path.read_bytes() == b""
    assert store.list() == []
    assert isinstance(store.open_result, FileCreated)
    assert store.open_result.path == str(path)


def test_load_zero_byte_file_is_empty_store(tmp_path) -> None:
    path = tmp_path / "db.bin"
    path.write_bytes(b"")
    store = load_store(path)
    assert store.list() == []
    assert store.open_result == FileLoaded(path=str(path), contact_count=0)


def test_load_sorts_contacts_from_file() -> None:
    data = encode_store([_contact("bob", "1"), _contact("Alice", "2"), _contact("carl", "3")])
    store = ContactStore.load(InMemoryContactFile(data))
    assert [c.full_name for c in store.list()] == ["Alice", "bob", "carl"]
    assert isinstance(store.open_result, FileLoaded)
    assert store.open_result.contact_count == 3
    assert store.path == "<memory>"


def test_load_corrupt_file_raises_and_keeps_file(tmp_path) -> None:
    path = tmp_path / "db.bin"
    truncated = encode_store([_contact("Alice", "1234")])[:8]
    path.write_bytes(truncated)

    with pytest.raises(CorruptFile) as exc_info:
        load_store(path)

    assert exc_info.value.path == str(path)
    assert str(path) in str(exc_info.value)
    assert path.read_bytes() == truncated


def test_load_create_failure_is_reported_not_raised(tmp_path) -> None:
    path = tmp_path / "no-such-dir" / "db.bin"
    store = load_store(path)
    assert isinstance(store.open_result, CreateFailed)
    assert store.add_contact(_contact("Alice", "1"))
    assert len(store) == 1


def test_save_failure_is_reported_and_memory_kept(tmp_path) -> None:
    store = load_store(tmp_path / "no-such-dir" / "db.bin")
    store.add_contact(_contact("Alice", "1"))
    result = store.save()
    assert isinstance(result, WriteFailed)
    assert [c.full_name for c in store.list()] == ["Alice"]


def test_save_unencodable_contact_leaves_file_untouched(tmp_path) -> None:
    path = tmp_path / "db.bin"
    store = load_store(path)
    store.add_contact(_contact("Alice", "1"))
    assert isinstance(store.save(), Saved)
    before = path.read_bytes()

    store.add_contact(_contact("x" * 70000, "2"))
    assert isinstance(store.save(), WriteFailed)
    assert path.read_bytes() == before


def test_save_then_reload_roundtrip(tmp_path) -> None:
    path = tmp_path / "db.bin"
    store = load_store(path)
    store.add_contact(_contact("Bob", "5678"))
    store.add_contact(Contact(full_name="alice", numbers=[PhoneNumber("home", "+7 (911) 000-00-00")]))
    store.add_contact(Contact(full_name=""))
    result = store.save()
    assert isinstance(result, Saved)
    assert result.contact_count == 3
    assert result.byte_count == path.stat().st_size

    reloaded = load_store(path)
    assert reloaded.list() == store.list()
    assert [c.full_name for c in reloaded.list()] == ["", "alice", "Bob"]


def test_save_overwrites_previous_content(tmp_path) -> None:
    path = tmp_path / "db.bin"
    path.write_bytes(encode_store([_contact("Old", "1"), _contact("Older", "2")]))
    store = ContactStore(BinaryContactFile(path), [_contact("New", "3")])
    store.save()
    assert [c.full_name for c in load_store(path).list()] == ["New"]


def test_add_valid_numbers() -> None:
    store = _store()
    assert store.add_contact(_contact("A", "+7 (911) 000-00-00"))
    assert store.add_contact(_contact("B", "1", "2#3*"))
    assert store.add_contact(Contact(full_name="No numbers"))
    assert len(store) == 3


@pytest.mark.parametrize("digits", ["abc123", "", "----", "   ", "12 ext. 5", "٣ab"])
def test_add_invalid_number_rejected(digits: str) -> None:
    store = _store()
    assert store.add_contact(_contact("Alice", digits)) is False
    assert store.list() == []


def test_non_ascii_decimal_digits_count_as_digits() -> None:
    assert _store().add_contact(_contact("Arabic", "٣٤٥"))


def test_rejection_is_all_or_nothing() -> None:
    store = _store()
    store.add_contact(_contact("Zoe", "9"))
    before = store.list()

    candidate = _contact("Alice", "123", "12a", "456")
    assert store.add_contact(candidate) is False
    assert store.list() == before


def test_list_sorted_after_every_add() -> None:
    store = _store()
    for name in ["delta", "Bravo", "alpha", "Charlie", "bravo", ""]:
        assert store.add_contact(_contact(name, "1"))
        contacts = store.list()
        for a, b in zip(contacts, contacts[1:]):
            assert compare_by_name(a, b) <= 0


def test_add_stores_a_copy() -> None:
    store = _store()
    candidate = _contact("Alice", "1234")
    store.add_contact(candidate)

    candidate.full_name = "Mallory"
    candidate.add_phone_number("fax", "999")

    stored = store.list()[0]
    assert stored.full_name == "Alice"
    assert stored.numbers == [PhoneNumber("mobile", "1234")]


def test_list_returns_copies() -> None:
    store = _store()
    store.add_contact(_contact("Alice", "1234"))
    store.list()[0].full_name = "Changed"
    assert store.list()[0].full_name == "Alice"


def test_add_does_not_touch_file_until_save() -> None:
    file = InMemoryContactFile()
    store = ContactStore.load(file)
    store.add_contact(_contact("Alice", "1"))
    assert file.data == b""
    store.save()
    assert file.data == encode_store([_contact("Alice", "1")])


def test_store_search() -> None:
    store = _store()
    store.add_contact(_contact("Alice", "1234"))
    store.add_contact(_contact("Bob", "5678"))
    assert [c.full_name for c in store.search("ali")] == ["Alice"]
    assert [c.full_name for c in store.search("567")] == ["Bob"]
    assert store.search("zzz") == []
    assert [c.full_name for c in store.search("")] == ["Alice", "Bob"]


def test_render_search_with_empty_key_shows_all() -> None:
    store = _store()
    store.add_contact(_contact("Alice", "1234"))
    assert store.render_search("") == store.render_all()
    assert store.render_all().startswith("All contacts:\n")
    assert store.render_search("ali").startswith("Search results:")
    assert "Alice" in store.render_search("ali")
    assert "Alice" not in store.render_search("bob")


def test_contact_equality_ignores_number_order() -> None:
    a = Contact(full_name="A", numbers=[PhoneNumber("x", "1"), PhoneNumber("y", "2")])
    b = Contact(full_name="A", numbers=[PhoneNumber("y", "2"), PhoneNumber("x", "1")])
    assert a == b
    assert a != Contact(full_name="A", numbers=[PhoneNumber("x", "1")])


def test_chars_outside_bmp_are_neither_digits_nor_letters() -> None:
    store = _store()
    # U+1D400 is a letter and U+1D7CE a digit, but both are surrogate pairs
    assert store.add_contact(_contact("Math", "123 \U0001D400"))
    assert store.add_contact(_contact("Emoji", "\U0001F4DE 5"))
    assert store.add_contact(_contact("Bold digit", "\U0001D7CE")) is False
    assert len(store) == 2


def test_load_negative_count_is_empty_store() -> None:
    store = ContactStore.load(InMemoryContactFile(b"\xff\xff\xff\xff"))
    assert store.list() == []
    assert isinstance(store.open_result, FileLoaded)
