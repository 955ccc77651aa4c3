"""Compact Base32 rendering of UUIDs.

The 16 bytes are taken in the mixed-endian GUID layout
(``uuid.UUID.bytes_le``) so identifiers match those produced by .NET
``Guid.ToByteArray()`` consumers of the same format.
"""

from __future__ import annotations

import uuid

from .base32 import CROCKFORD, Base32Codec


def uuid_to_base32(value: uuid.UUID, codec: Base32Codec = CROCKFORD) -> str:
    """Encode ``value`` as 26 Base32 symbols."""
    if not isinstance(value, uuid.UUID):
        raise TypeError(f"expected uuid.UUID, got {type(value).__name__}")
    return codec.encode(value.bytes_le)


def uuid_from_base32(text: str, codec: Base32Codec = CROCKFORD) -> uuid.UUID:
    """Inverse of :func:`uuid_to_base32`."""
    raw = codec.decode(text)
    if len(raw) != 16:
        raise ValueError(f"expected 16 decoded bytes for a UUID, got {len(raw)}")
    return uuid.UUID(bytes_le=raw)
