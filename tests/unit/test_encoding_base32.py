"""Unit tests for the Base32 codec and its presets."""

import os
import threading

import pytest

from kingutils.core.exceptions import InvalidSymbolError
from kingutils.encoding.base32 import (
    CROCKFORD,
    CROCKFORD_ALPHABET,
    CROCKFORD_LENIENT,
    RFC4648,
    RFC4648_ALPHABET,
    WORD_SAFE,
    Base32Codec,
    CrockfordCodec,
    get_codec,
)

ALL_PRESETS = [RFC4648, CROCKFORD, WORD_SAFE, CROCKFORD_LENIENT]


# ==============================================================================
# Known vectors
# ==============================================================================

@pytest.mark.parametrize(
    "raw, expected",
    [
        (b"f", "MY"),
        (b"fo", "MZXQ"),
        (b"foo", "MZXW6"),
        (b"foob", "MZXW6YQ"),
        (b"fooba", "MZXW6YTB"),
        (b"foobar", "MZXW6YTBOI"),
        (b"Hello", "JBSWY3DP"),
    ],
)
def test_rfc4648_vectors(raw, expected):
    """RFC 4648 section 10 vectors, without '=' padding."""
    assert RFC4648.encode(raw) == expected
    assert RFC4648.decode(expected) == raw


def test_crockford_hello():
    assert CROCKFORD.encode(b"Hello") == "91JPRV3F"
    assert CROCKFORD.decode("91JPRV3F") == b"Hello"


def test_single_byte_is_left_aligned():
    """0x07 = 00000|111 -> the last group is padded to 11100 (28)."""
    assert CROCKFORD.encode(b"\x07") == "0W"
    assert CROCKFORD.decode("0W") == b"\x07"


# ==============================================================================
# Length rules and empties
# ==============================================================================

@pytest.mark.parametrize("codec", ALL_PRESETS)
def test_empty_input(codec):
    assert codec.encode(b"") == ""
    assert codec.decode("") == b""


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5, 6, 7, 15, 16, 31, 100])
def test_encoded_length_is_ceil_of_bits(n):
    assert len(CROCKFORD.encode(os.urandom(n))) == (n * 8 + 4) // 5


def test_decode_drops_incomplete_trailing_bits():
    # a single symbol holds only 5 bits: not enough for one byte
    assert RFC4648.decode("A") == b""
    # 3 symbols = 15 bits -> one byte, 7 bits discarded
    assert len(RFC4648.decode("MZX")) == 1


@pytest.mark.parametrize("codec", ALL_PRESETS)
def test_roundtrip_random(codec):
    for n in (1, 5, 13, 64, 257):
        data = os.urandom(n)
        assert codec.decode(codec.encode(data)) == data


def test_accepts_bytearray_and_memoryview():
    assert CROCKFORD.encode(bytearray(b"Hello")) == "91JPRV3F"
    assert CROCKFORD.encode(memoryview(b"Hello")) == "91JPRV3F"


def test_rejects_non_bytes():
    with pytest.raises(TypeError):
        CROCKFORD.encode("Hello")
    with pytest.raises(TypeError):
        CROCKFORD.encode(None)
    with pytest.raises(TypeError):
        CROCKFORD.decode(b"91JP")


# ==============================================================================
# Invalid symbols and case policy
# ==============================================================================

def test_invalid_symbol_names_char_and_alphabet():
    with pytest.raises(InvalidSymbolError) as excinfo:
        CROCKFORD.decode("91JU")
    assert excinfo.value.symbol == "U"
    assert excinfo.value.alphabet == CROCKFORD_ALPHABET
    assert "'U'" in str(excinfo.value)


def test_invalid_symbol_is_a_value_error():
    with pytest.raises(ValueError):
        RFC4648.decode("abc")


def test_strict_crockford_is_case_sensitive():
    with pytest.raises(InvalidSymbolError):
        CROCKFORD.decode("91jprv3f")
    with pytest.raises(InvalidSymbolError):
        CROCKFORD.decode("u")


def test_word_safe_is_case_sensitive():
    # both cases are distinct symbols in this alphabet
    assert WORD_SAFE.decode("cc") != WORD_SAFE.decode("CC")


# ==============================================================================
# Crockford reading rules (lenient variant)
# ==============================================================================

def test_lenient_encode_matches_strict():
    data = os.urandom(40)
    assert CROCKFORD_LENIENT.encode(data) == CROCKFORD.encode(data)


def test_lenient_folds_case_and_hyphens():
    assert CROCKFORD_LENIENT.decode("91jprv3f") == b"Hello"
    assert CROCKFORD_LENIENT.decode("91JP-RV3F") == b"Hello"


def test_lenient_aliases():
    assert CROCKFORD_LENIENT.decode("Oo") == CROCKFORD.decode("00")
    assert CROCKFORD_LENIENT.decode("IL") == CROCKFORD.decode("11")
    assert CROCKFORD_LENIENT.decode("il") == CROCKFORD.decode("11")


@pytest.mark.parametrize("text", ["u", "U", "9U"])
def test_lenient_still_rejects_u(text):
    with pytest.raises(InvalidSymbolError):
        CROCKFORD_LENIENT.decode(text)


# ==============================================================================
# Construction
# ==============================================================================

def test_custom_alphabet():
    codec = Base32Codec(CROCKFORD_ALPHABET.lower())
    assert codec.encode(b"Hello") == "91jprv3f"
    assert codec.alphabet == CROCKFORD_ALPHABET.lower()


@pytest.mark.parametrize("alphabet", ["", "ABC", RFC4648_ALPHABET + "8"])
def test_alphabet_must_be_32_symbols(alphabet):
    with pytest.raises(ValueError, match="exactly 32"):
        Base32Codec(alphabet)


def test_alphabet_must_be_distinct():
    with pytest.raises(ValueError, match="distinct"):
        Base32Codec("A" * 32)


def test_alphabet_must_be_str():
    with pytest.raises(TypeError):
        Base32Codec(None)


def test_repr():
    assert repr(CROCKFORD) == f"Base32Codec({CROCKFORD_ALPHABET!r})"
    assert repr(CrockfordCodec()) == "CrockfordCodec()"


# ==============================================================================
# Preset lookup
# ==============================================================================

@pytest.mark.parametrize(
    "name, codec",
    [
        ("rfc4648", RFC4648),
        ("Crockford", CROCKFORD),
        ("crockford_lenient", CROCKFORD_LENIENT),
        ("WORD-SAFE", WORD_SAFE),
        (" word_safe ", WORD_SAFE),
    ],
)
def test_get_codec(name, codec):
    assert get_codec(name) is codec


def test_get_codec_unknown():
    with pytest.raises(KeyError, match="unknown Base32 preset"):
        get_codec("base58")


# ==============================================================================
# Shared presets across threads
# ==============================================================================

def test_presets_are_safe_across_threads():
    payloads = [os.urandom(i + 1) for i in range(64)]
    failures = []

    def worker():
        for p in payloads:
            if CROCKFORD.decode(CROCKFORD.encode(p)) != p:
                failures.append(p)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert failures == []
