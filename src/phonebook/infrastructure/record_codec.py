"""Binary layout of the whole contact file.

    File        := count:int32 Contact*
    Contact     := full_name:LPString count:int32 PhoneNumber*
    PhoneNumber := kind:LPString digits:LPString

All integers are big-endian. A zero-length buffer means no contacts.
"""

import struct
from collections.abc import Sequence

from phonebook.domain import Contact, PhoneNumber
from phonebook.infrastructure.mutf8 import DecodeError, decode_string, encode_string

_COUNT = struct.Struct(">i")


def encode_store(contacts: Sequence[Contact]) -> bytes:
    parts = [_COUNT.pack(len(contacts))]
    for contact in contacts:
        parts.append(encode_string(contact.full_name))
        parts.append(_COUNT.pack(len(contact.numbers)))
        for number in contact.numbers:
            parts.append(encode_string(number.kind))
            parts.append(encode_string(number.digits))
    return b"".join(parts)


def _read_count(data: bytes, offset: int) -> tuple[int, int]:
    if offset + _COUNT.size > len(data):
        raise DecodeError(f"Truncated count at byte {offset}.")
    (count,) = _COUNT.unpack_from(data, offset)
    # a negative count reads as no records
    return max(count, 0), offset + _COUNT.size


def decode_store(data: bytes) -> list[Contact]:
    """Decode every contact in file order. Bytes after the last contact are ignored."""
    if not data:
        return []
    contact_count, offset = _read_count(data, 0)
    contacts = []
    for _ in range(contact_count):
        full_name, offset = decode_string(data, offset)
        number_count, offset = _read_count(data, offset)
        numbers = []
        for _ in range(number_count):
            kind, offset = decode_string(data, offset)
            digits, offset = decode_string(data, offset)
            numbers.append(PhoneNumber(kind=kind, digits=digits))
        contacts.append(Contact(full_name=full_name, numbers=numbers))
    return contacts
