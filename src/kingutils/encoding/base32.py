"""Base32 encoding and decoding over a configurable 32-symbol alphabet.

Input bytes are treated as one big-endian bit stream and cut into 5-bit
groups, most significant bits first. The final group is zero-padded on
the low-order side. No ``=`` padding is emitted and none is accepted.

Decoding is lossy for symbol strings that were not produced by
:meth:`Base32Codec.encode`: bits left over after the last full byte are
dropped. For every byte string ``b``, ``decode(encode(b)) == b``.

Codecs hold no mutable state once built, so the module-level presets can
be shared freely between threads.
"""

from __future__ import annotations

from typing import Dict, Union

from kingutils.core.exceptions import InvalidSymbolError

SHIFT = 5
MASK = 0x1F

RFC4648_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
CROCKFORD_ALPHABET = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"
WORD_SAFE_ALPHABET = "23456789CFGHJMPQRVWXcfghjmpqrvwx"

BytesLike = Union[bytes, bytearray, memoryview]


class Base32Codec:
    """Bit-packing Base32 codec bound to a single alphabet."""

    __slots__ = ("_alphabet", "_lookup")

    def __init__(self, alphabet: str):
        if not isinstance(alphabet, str):
            raise TypeError("alphabet must be a str")
        if len(alphabet) != 32:
            raise ValueError(f"alphabet must have exactly 32 symbols, got {len(alphabet)}")
        if len(set(alphabet)) != 32:
            raise ValueError("alphabet symbols must be distinct")

        self._alphabet = alphabet
        self._lookup: Dict[str, int] = {ch: i for i, ch in enumerate(alphabet)}

    @property
    def alphabet(self) -> str:
        return self._alphabet

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._alphabet!r})"

    def encode(self, data: BytesLike) -> str:
        """Encode ``data`` and return ceil(8 * len(data) / 5) symbols."""
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(f"expected a bytes-like object, got {type(data).__name__}")
        if not data:
            return ""

        out = []
        buffer = 0
        bits = 0
        for byte in bytes(data):
            buffer = (buffer << 8) | byte
            bits += 8
            while bits >= SHIFT:
                bits -= SHIFT
                out.append(self._alphabet[(buffer >> bits) & MASK])
            buffer &= (1 << bits) - 1

        if bits:
            # left-align the leftover bits in a final 5-bit group
            out.append(self._alphabet[(buffer << (SHIFT - bits)) & MASK])

        return "".join(out)

    def decode(self, text: str) -> bytes:
        """
        Decode ``text`` into floor(5 * len(text) / 8) bytes.

        Raises :class:`InvalidSymbolError` on the first character that is
        not part of the alphabet.
        """
        if not isinstance(text, str):
            raise TypeError(f"expected a str, got {type(text).__name__}")

        text = self._normalize(text)
        if not text:
            return b""

        out = bytearray()
        buffer = 0
        bits = 0
        for ch in text:
            value = self._lookup.get(ch)
            if value is None:
                raise InvalidSymbolError(ch, self._alphabet)
            buffer = (buffer << SHIFT) | value
            bits += SHIFT
            if bits >= 8:
                bits -= 8
                out.append((buffer >> bits) & 0xFF)
            buffer &= (1 << bits) - 1

        return bytes(out)

    def _normalize(self, text: str) -> str:
        # exact match: no case folding, no aliases
        return text


class CrockfordCodec(Base32Codec):
    """
    Crockford Base32 with Crockford's reading rules on decode.

    Encoding is identical to the strict ``CROCKFORD`` preset. Decoding
    folds lowercase to uppercase, reads ``O`` as ``0`` and ``I``/``L`` as
    ``1``, and skips hyphens. ``U`` is still rejected.
    """

    __slots__ = ()

    _ALIASES = str.maketrans({"O": "0", "I": "1", "L": "1", "-": None})

    def __init__(self):
        super().__init__(CROCKFORD_ALPHABET)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def _normalize(self, text: str) -> str:
        return text.upper().translate(self._ALIASES)


RFC4648 = Base32Codec(RFC4648_ALPHABET)
CROCKFORD = Base32Codec(CROCKFORD_ALPHABET)
WORD_SAFE = Base32Codec(WORD_SAFE_ALPHABET)
CROCKFORD_LENIENT = CrockfordCodec()

PRESETS: Dict[str, Base32Codec] = {
    "rfc4648": RFC4648,
    "crockford": CROCKFORD,
    "crockford-lenient": CROCKFORD_LENIENT,
    "word-safe": WORD_SAFE,
}


def get_codec(name: str) -> Base32Codec:
    """Return the preset codec registered under ``name``."""
    key = name.strip().lower().replace("_", "-")
    try:
        return PRESETS[key]
    except KeyError:
        raise KeyError(f"unknown Base32 preset {name!r}; choose from {sorted(PRESETS)}") from None
