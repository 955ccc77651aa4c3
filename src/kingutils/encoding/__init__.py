"""Encoding helpers: configurable-alphabet Base32, hex, and UUID rendering."""

from .base32 import (
    CROCKFORD,
    CROCKFORD_ALPHABET,
    CROCKFORD_LENIENT,
    RFC4648,
    RFC4648_ALPHABET,
    WORD_SAFE,
    WORD_SAFE_ALPHABET,
    Base32Codec,
    CrockfordCodec,
    get_codec,
)
from .guid import uuid_from_base32, uuid_to_base32

__all__ = [
    "Base32Codec",
    "CrockfordCodec",
    "RFC4648",
    "CROCKFORD",
    "CROCKFORD_LENIENT",
    "WORD_SAFE",
    "RFC4648_ALPHABET",
    "CROCKFORD_ALPHABET",
    "WORD_SAFE_ALPHABET",
    "get_codec",
    "uuid_to_base32",
    "uuid_from_base32",
]
