"""In-memory implementation of ContactFile (no disk). Same byte layout as the binary file."""

from collections.abc import Sequence

from phonebook.domain import Contact
from phonebook.infrastructure.record_codec import decode_store, encode_store


class InMemoryContactFile:
    """Holds the encoded file content in memory. data is None while the file does not exist."""

    def __init__(self, data: bytes | None = None, path: str = "<memory>") -> None:
        self.data = data
        self.path = path

    def exists(self) -> bool:
        return self.data is not None

    def create(self) -> None:
        if self.data is not None:
            raise FileExistsError(self.path)
        self.data = b""

    def read_contacts(self) -> list[Contact]:
        if self.data is None:
            raise FileNotFoundError(self.path)
        return decode_store(self.data)

    def write_contacts(self, contacts: Sequence[Contact]) -> int:
        self.data = encode_store(contacts)
        return len(self.data)
