"""Length-prefixed "modified UTF-8" strings used by the legacy contact file format.

Layout: uint16 big-endian byte length, then the encoded bytes. Differs from
UTF-8 in two places: U+0000 is written as C0 80, and code points above U+FFFF
are split into a UTF-16 surrogate pair with each half written as 3 bytes.
"""

import struct

MAX_ENCODED_LENGTH = 0xFFFF

_LENGTH = struct.Struct(">H")


class DecodeError(ValueError):
    """Bytes do not hold a valid length-prefixed modified UTF-8 string."""


class EncodeError(ValueError):
    """String is too long for a 16-bit length prefix."""


def _utf16_units(text: str):
    for ch in text:
        cp = ord(ch)
        if cp > 0xFFFF:
            cp -= 0x10000
            yield 0xD800 | (cp >> 10)
            yield 0xDC00 | (cp & 0x3FF)
        else:
            yield cp


def encode_string(text: str) -> bytes:
    """Encode text with its 2-byte length prefix. Raises EncodeError if over 65535 bytes."""
    body = bytearray()
    for unit in _utf16_units(text):
        if 0x0001 <= unit <= 0x007F:
            body.append(unit)
        elif unit <= 0x07FF:
            body.append(0xC0 | (unit >> 6))
            body.append(0x80 | (unit & 0x3F))
        else:
            body.append(0xE0 | (unit >> 12))
            body.append(0x80 | ((unit >> 6) & 0x3F))
            body.append(0x80 | (unit & 0x3F))
    if len(body) > MAX_ENCODED_LENGTH:
        raise EncodeError(
            f"Encoded string is {len(body)} bytes, at most {MAX_ENCODED_LENGTH} allowed."
        )
    return _LENGTH.pack(len(body)) + bytes(body)


def _join_units(units: list[int]) -> str:
    """Turn UTF-16 code units into a str, pairing surrogates; lone ones are kept."""
    chars = []
    i = 0
    while i < len(units):
        unit = units[i]
        if 0xD800 <= unit <= 0xDBFF and i + 1 < len(units) and 0xDC00 <= units[i + 1] <= 0xDFFF:
            chars.append(chr(0x10000 + ((unit - 0xD800) << 10) + (units[i + 1] - 0xDC00)))
            i += 2
        else:
            chars.append(chr(unit))
            i += 1
    return "".join(chars)


def decode_string(data: bytes, offset: int = 0) -> tuple[str, int]:
    """Decode one string starting at offset. Returns (text, offset after the string)."""
    if offset + _LENGTH.size > len(data):
        raise DecodeError(f"Truncated string length at byte {offset}.")
    (length,) = _LENGTH.unpack_from(data, offset)
    start = offset + _LENGTH.size
    end = start + length
    if end > len(data):
        raise DecodeError(
            f"String at byte {offset} declares {length} bytes, "
            f"only {len(data) - start} remain."
        )

    units = []
    i = start
    while i < end:
        b = data[i]
        high = b >> 4
        if high <= 0x7:
            units.append(b)
            i += 1
        elif high in (0xC, 0xD):
            if i + 2 > end:
                raise DecodeError(f"Partial character at end of string (byte {i}).")
            b2 = data[i + 1]
            if b2 & 0xC0 != 0x80:
                raise DecodeError(f"Malformed input around byte {i + 1}.")
            units.append(((b & 0x1F) << 6) | (b2 & 0x3F))
            i += 2
        elif high == 0xE:
            if i + 3 > end:
                raise DecodeError(f"Partial character at end of string (byte {i}).")
            b2, b3 = data[i + 1], data[i + 2]
            if b2 & 0xC0 != 0x80 or b3 & 0xC0 != 0x80:
                raise DecodeError(f"Malformed input around byte {i + 1}.")
            units.append(((b & 0x0F) << 12) | ((b2 & 0x3F) << 6) | (b3 & 0x3F))
            i += 3
        else:
            raise DecodeError(f"Malformed input around byte {i}.")
    return _join_units(units), end
