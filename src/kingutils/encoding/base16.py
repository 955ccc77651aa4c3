"""Hex (Base16) helpers."""

from __future__ import annotations

import binascii

from kingutils.core.exceptions import InvalidSymbolError

HEX_ALPHABET = "0123456789ABCDEF"


def encode(data: bytes) -> str:
    """Return ``data`` as uppercase hex, two digits per byte."""
    if data is None:
        raise TypeError("data must not be None")
    return bytes(data).hex().upper()


def to_hex_string(data: bytes) -> str:
    """Return ``data`` as lowercase hex."""
    if data is None:
        raise TypeError("data must not be None")
    return bytes(data).hex()


def decode(text: str) -> bytes:
    """
    Decode a hex string (either case) into bytes.

    Raises ``ValueError`` for an odd number of digits and
    :class:`InvalidSymbolError` for anything that is not a hex digit.
    """
    if text is None:
        raise TypeError("text must not be None")
    if len(text) % 2 != 0:
        raise ValueError("Value cannot have an odd number of digits")

    for ch in text:
        if ch.upper() not in HEX_ALPHABET:
            raise InvalidSymbolError(ch, HEX_ALPHABET)

    return binascii.unhexlify(text)
