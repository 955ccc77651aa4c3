"""Unit tests for the hex helpers."""

import pytest

from kingutils.core.exceptions import InvalidSymbolError
from kingutils.encoding import base16


def test_encode_uppercase():
    assert base16.encode(b"\x00\x0f\xab\xff") == "000FABFF"


def test_to_hex_string_lowercase():
    assert base16.to_hex_string(b"\x00\x0f\xab\xff") == "000fabff"


def test_empty():
    assert base16.encode(b"") == ""
    assert base16.decode("") == b""


@pytest.mark.parametrize("text", ["000FABFF", "000fabff", "000FabFf"])
def test_decode_either_case(text):
    assert base16.decode(text) == b"\x00\x0f\xab\xff"


def test_decode_odd_length():
    with pytest.raises(ValueError, match="odd number of digits"):
        base16.decode("ABC")


def test_decode_invalid_digit():
    with pytest.raises(InvalidSymbolError) as excinfo:
        base16.decode("0G")
    assert excinfo.value.symbol == "G"


def test_none_rejected():
    with pytest.raises(TypeError):
        base16.encode(None)
    with pytest.raises(TypeError):
        base16.to_hex_string(None)
    with pytest.raises(TypeError):
        base16.decode(None)
