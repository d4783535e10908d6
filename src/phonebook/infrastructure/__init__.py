"""Infrastructure layer: byte codecs and concrete implementations of application ports."""

from phonebook.infrastructure.binary_file import BinaryContactFile, load_store
from phonebook.infrastructure.memory_file import InMemoryContactFile
from phonebook.infrastructure.mutf8 import (
    DecodeError,
    EncodeError,
    decode_string,
    encode_string,
)
from phonebook.infrastructure.record_codec import decode_store, encode_store

__all__ = [
    "BinaryContactFile",
    "DecodeError",
    "EncodeError",
    "InMemoryContactFile",
    "decode_store",
    "decode_string",
    "encode_store",
    "encode_string",
    "load_store",
]
