"""Result types for opening and saving the contact file."""

from dataclasses import dataclass

# --- ContactStore.load results ---


@dataclass(frozen=True)
class FileLoaded:
    """File existed and was decoded (an empty file counts as zero contacts)."""

    path: str
    contact_count: int


@dataclass(frozen=True)
class FileCreated:
    """File was missing; a new empty one was created."""

    path: str


@dataclass(frozen=True)
class CreateFailed:
    """File was missing and could not be created. The store still works in memory."""

    path: str
    reason: str


# --- ContactStore.save results ---


@dataclass(frozen=True)
class Saved:
    """All contacts were written to the file."""

    path: str
    contact_count: int
    byte_count: int


@dataclass(frozen=True)
class WriteFailed:
    """Contacts could not be written; in-memory state is unchanged."""

    path: str
    reason: str


OpenResult = FileLoaded | FileCreated | CreateFailed
SaveResult = Saved | WriteFailed
