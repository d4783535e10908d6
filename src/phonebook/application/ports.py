"""Application ports (interfaces). Implemented by infrastructure adapters."""

from collections.abc import Sequence
from typing import Protocol

from phonebook.domain import Contact


class ContactFile(Protocol):
    """Whole-file persistence of the contact list. No partial updates."""

    path: str

    def exists(self) -> bool:
        """Return True if the backing file is present."""
        ...

    def create(self) -> None:
        """Create an empty backing file. Raises OSError on failure."""
        ...

    def read_contacts(self) -> list[Contact]:
        """Read and decode every contact in file order.

        An empty file yields []. Raises ValueError for undecodable content
        and OSError when the file cannot be read.
        """
        ...

    def write_contacts(self, contacts: Sequence[Contact]) -> int:
        """Replace the file content with the encoded contacts. Returns bytes written.

        Raises ValueError when a contact cannot be encoded (file untouched)
        and OSError when writing fails.
        """
        ...
