"""Sorting, search and text rendering over a sequence of contacts."""

from collections.abc import Iterable, Sequence

from phonebook.domain import Contact

SEPARATOR = "-" * 32
UNKNOWN_NAME = "Unknown contact name"
UNKNOWN_KIND = "Unknown number type"
UNKNOWN_DIGITS = "Unknown number"
ALL_CONTACTS_HEADER = "All contacts:"
SEARCH_HEADER = "Search results: (clear the search to show all contacts)"


def name_sort_key(contact: Contact) -> bytes:
    # ordered by UTF-16 code units, not code points
    return contact.full_name.lower().encode("utf-16-be", "surrogatepass")


def compare_by_name(a: Contact, b: Contact) -> int:
    """Case-insensitive comparison on full_name. Negative, zero or positive."""
    ka, kb = name_sort_key(a), name_sort_key(b)
    return (ka > kb) - (ka < kb)


def sort_by_name(contacts: Iterable[Contact]) -> list[Contact]:
    """Stable sort by case-insensitive name."""
    return sorted(contacts, key=name_sort_key)


def search_contacts(contacts: Iterable[Contact], key: str) -> list[Contact]:
    """Return contacts whose name (case-insensitive) or any number contains key.

    Numbers are matched against the lower-cased key as typed. An empty key
    matches every contact.
    """
    needle = key.lower()
    found = []
    for contact in contacts:
        if needle in contact.full_name.lower() or any(
            needle in number.digits for number in contact.numbers
        ):
            found.append(contact)
    return sort_by_name(found)


def _or_placeholder(value: str, placeholder: str) -> str:
    return value if value.strip() else placeholder


def render_contacts(contacts: Sequence[Contact]) -> str:
    """Render contacts as separator-delimited text blocks, closed by a separator."""
    lines = []
    for contact in contacts:
        lines.append(SEPARATOR)
        lines.append(_or_placeholder(contact.full_name, UNKNOWN_NAME))
        for number in contact.numbers:
            kind = _or_placeholder(number.kind, UNKNOWN_KIND)
            digits = _or_placeholder(number.digits, UNKNOWN_DIGITS)
            lines.append(f"{kind}: {digits}")
    lines.append(SEPARATOR)
    return "\n".join(lines)


def render_all(contacts: Sequence[Contact]) -> str:
    return f"{ALL_CONTACTS_HEADER}\n{render_contacts(contacts)}"


def render_search(contacts: Sequence[Contact]) -> str:
    return f"{SEARCH_HEADER}\n{render_contacts(contacts)}"
