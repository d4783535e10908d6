"""Application layer: contact store, queries, ports, and result types. Depends only on domain."""

from phonebook.application.contact_store import ContactStore
from phonebook.application.dto import (
    CreateFailed,
    FileCreated,
    FileLoaded,
    OpenResult,
    Saved,
    SaveResult,
    WriteFailed,
)
from phonebook.application.errors import CorruptFile
from phonebook.application.ports import ContactFile
from phonebook.application.query import (
    compare_by_name,
    render_all,
    render_contacts,
    render_search,
    search_contacts,
    sort_by_name,
)

__all__ = [
    "ContactFile",
    "ContactStore",
    "CorruptFile",
    "CreateFailed",
    "FileCreated",
    "FileLoaded",
    "OpenResult",
    "SaveResult",
    "Saved",
    "WriteFailed",
    "compare_by_name",
    "render_all",
    "render_contacts",
    "render_search",
    "search_contacts",
    "sort_by_name",
]
