"""Unit tests for UUID <-> Base32 helpers."""

import uuid

import pytest

from kingutils.encoding.base32 import CROCKFORD, RFC4648
from kingutils.encoding.guid import uuid_from_base32, uuid_to_base32


def test_uuid_roundtrip_default_codec():
    value = uuid.uuid4()
    text = uuid_to_base32(value)
    assert len(text) == 26
    assert uuid_from_base32(text) == value


def test_uses_mixed_endian_layout():
    value = uuid.UUID("00112233-4455-6677-8899-aabbccddeeff")
    assert uuid_to_base32(value) == CROCKFORD.encode(value.bytes_le)
    assert uuid_to_base32(value) != CROCKFORD.encode(value.bytes)


def test_custom_codec():
    value = uuid.uuid4()
    text = uuid_to_base32(value, codec=RFC4648)
    assert uuid_from_base32(text, codec=RFC4648) == value


def test_nil_uuid():
    assert uuid_to_base32(uuid.UUID(int=0)) == "0" * 26


def test_rejects_non_uuid():
    with pytest.raises(TypeError):
        uuid_to_base32("00112233-4455-6677-8899-aabbccddeeff")


def test_from_base32_wrong_length():
    with pytest.raises(ValueError, match="16 decoded bytes"):
        uuid_from_base32(CROCKFORD.encode(b"\x01" * 8))
