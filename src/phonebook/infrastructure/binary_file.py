"""File-backed ContactFile using the binary record layout."""

import os
from collections.abc import Sequence
from pathlib import Path

from phonebook.application import ContactStore
from phonebook.domain import Contact
from phonebook.infrastructure.record_codec import decode_store, encode_store


class BinaryContactFile:
    """Reads and rewrites the whole contact file on each call."""

    def __init__(self, path: str | os.PathLike) -> None:
        self._path = Path(path)
        self.path = str(path)

    def exists(self) -> bool:
        return self._path.exists()

    def create(self) -> None:
        with open(self._path, "xb"):
            pass

    def read_contacts(self) -> list[Contact]:
        with open(self._path, "rb") as f:
            data = f.read()
        return decode_store(data)

    def write_contacts(self, contacts: Sequence[Contact]) -> int:
        # encode first so an unencodable contact leaves the file as it was
        data = encode_store(contacts)
        with open(self._path, "wb") as f:
            f.write(data)
        return len(data)


def load_store(path: str | os.PathLike) -> ContactStore:
    """Open a ContactStore over the binary file at path. Raises CorruptFile."""
    return ContactStore.load(BinaryContactFile(path))
