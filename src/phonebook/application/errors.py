"""Errors surfaced to callers of the contact store."""


class CorruptFile(Exception):
    """
    The contact file exists and has content but cannot be decoded.
    The file is left untouched so the user can move it aside.
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(
            f"The contact file {path} could not be read ({reason}). "
            f"Rename {path} or move it to another directory; "
            f"a new contact file {path} will be created on the next start."
        )
