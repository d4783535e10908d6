"""
Phonebook core: clean-architecture layout.

- domain: entities (Contact, PhoneNumber) and the phone number rule. No outer dependencies.
- application: ContactStore, search/sort/render queries, ContactFile port, result types.
- infrastructure: modified UTF-8 and record codecs, BinaryContactFile, InMemoryContactFile.
"""

from phonebook.application import (
    ContactFile,
    ContactStore,
    CorruptFile,
    CreateFailed,
    FileCreated,
    FileLoaded,
    Saved,
    WriteFailed,
    compare_by_name,
    render_contacts,
    search_contacts,
)
from phonebook.domain import Contact, PhoneNumber
from phonebook.infrastructure import BinaryContactFile, InMemoryContactFile, load_store

__all__ = [
    "BinaryContactFile",
    "Contact",
    "ContactFile",
    "ContactStore",
    "CorruptFile",
    "CreateFailed",
    "FileCreated",
    "FileLoaded",
    "InMemoryContactFile",
    "PhoneNumber",
    "Saved",
    "WriteFailed",
    "compare_by_name",
    "load_store",
    "render_contacts",
    "search_contacts",
]
