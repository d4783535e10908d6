"""Contact store: sorted in-memory contacts backed by a whole-file ContactFile."""

from __future__ import annotations

import logging

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
    render_all,
    render_search,
    search_contacts,
    sort_by_name,
)
from phonebook.domain import Contact, is_valid_number

logger = logging.getLogger(__name__)


class ContactStore:
    """Owns the contact list, kept sorted by case-insensitive name.

    Contacts go in through add_contact only and reach the file only on save.
    Stored contacts are private copies; callers get copies back.
    """

    def __init__(
        self,
        file: ContactFile,
        contacts: list[Contact] | None = None,
        *,
        open_result: OpenResult | None = None,
    ) -> None:
        self._file = file
        self._contacts: list[Contact] = sort_by_name(c.copy() for c in contacts or [])
        self.open_result = open_result

    @classmethod
    def load(cls, file: ContactFile) -> "ContactStore":
        """Open the store over file, creating an empty file if it is missing.

        Raises CorruptFile when an existing file cannot be decoded. Creation
        failures are logged and reported in open_result only.
        """
        path = file.path
        if not file.exists():
            try:
                file.create()
            except OSError as e:
                logger.warning("Could not create contact file %s: %s", path, e)
                return cls(file, open_result=CreateFailed(path=path, reason=str(e)))
            logger.info("Created empty contact file %s", path)
            return cls(file, open_result=FileCreated(path=path))

        try:
            contacts = file.read_contacts()
        except (ValueError, OSError) as e:
            logger.warning("Error reading contact file %s: %s", path, e)
            raise CorruptFile(path, str(e)) from e

        logger.info("Contact file %s was read (%d contacts)", path, len(contacts))
        store = cls(file, open_result=FileLoaded(path=path, contact_count=len(contacts)))
        # decoded contacts are already private, skip the copy in __init__
        store._contacts = sort_by_name(contacts)
        return store

    @property
    def path(self) -> str:
        return self._file.path

    def add_contact(self, candidate: Contact) -> bool:
        """Store a copy of candidate if all its numbers are valid. Returns False otherwise."""
        for number in candidate.numbers:
            if not is_valid_number(number.digits):
                logger.info("Rejected contact: a number has letters or no digits")
                return False
        self._contacts.append(candidate.copy())
        self._contacts = sort_by_name(self._contacts)
        logger.info("A new contact was added")
        return True

    def save(self) -> SaveResult:
        """Rewrite the whole file with the current contacts.

        Not atomic: the file is truncated and rewritten in place, so a crash
        mid-write can leave a corrupt file. Failures are logged and returned.
        """
        path = self._file.path
        try:
            byte_count = self._file.write_contacts(self._contacts)
        except (ValueError, OSError) as e:
            logger.error("Error writing contact file %s: %s", path, e)
            return WriteFailed(path=path, reason=str(e))
        return Saved(path=path, contact_count=len(self._contacts), byte_count=byte_count)

    def list(self) -> list[Contact]:
        """Return all contacts in name order."""
        return [c.copy() for c in self._contacts]

    def search(self, key: str) -> list[Contact]:
        """Contacts matching key by name or number, in name order. Empty key returns all."""
        return [c.copy() for c in search_contacts(self._contacts, key)]

    def render_all(self) -> str:
        return render_all(self._contacts)

    def render_search(self, key: str) -> str:
        """Text view of a search; an empty key shows every contact instead."""
        if not key:
            return render_all(self._contacts)
        return render_search(search_contacts(self._contacts, key))

    def __len__(self) -> int:
        return len(self._contacts)
