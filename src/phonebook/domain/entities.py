"""Domain entities: PhoneNumber and Contact, plus the phone number rule."""

from collections import Counter
from dataclasses import dataclass, field


@dataclass(frozen=True)
class PhoneNumber:
    """
    One typed phone number of a contact (mobile, home, fax...).
    Not validated at construction; the store checks digits on insert.
    """

    kind: str = ""
    digits: str = ""


@dataclass(eq=False)
class Contact:
    """
    A named entry of the address book with its phone numbers in form order.
    Number order is kept for display but does not take part in equality.
    """

    full_name: str = ""
    numbers: list[PhoneNumber] = field(default_factory=list)

    def add_phone_number(self, kind: str, digits: str) -> None:
        self.numbers.append(PhoneNumber(kind=kind, digits=digits))

    def copy(self) -> "Contact":
        """Return a structural copy sharing no mutable state with self."""
        return Contact(
            full_name=self.full_name,
            numbers=[PhoneNumber(kind=n.kind, digits=n.digits) for n in self.numbers],
        )

    def __eq__(self, other):
        if not isinstance(other, Contact):
            return NotImplemented
        return self.full_name == other.full_name and Counter(self.numbers) == Counter(
            other.numbers
        )

    __hash__ = None


def is_valid_number(digits: str) -> bool:
    """At least one decimal digit and no letters; anything else is kept as typed.

    Checked per UTF-16 code unit, so characters above U+FFFF (stored as
    surrogate pairs) count as neither digits nor letters.
    """
    units = [ch for ch in digits if ord(ch) <= 0xFFFF]
    return any(ch.isdecimal() for ch in units) and not any(ch.isalpha() for ch in units)
