"""
Password-based encryption envelope.

An envelope is one line of text carrying everything needed to decrypt,
given only the password::

    <salt> U <iterations> U <hash tag> U <ciphertext>

Each field is Crockford Base32. ``U`` is the delimiter because the
Crockford alphabet does not contain it, so it can never appear inside an
encoded field.

- salt: random bytes, fresh for every call
- iterations: PBKDF2 work factor, little-endian with trailing zero bytes
  stripped (0 is stored as a single zero byte)
- hash tag: one byte, see :class:`HashAlgorithm`
- ciphertext: AES-256-CBC with PKCS7 padding under a PBKDF2-derived key/IV

The format carries no version byte and no MAC.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

from kingutils.core.exceptions import (
    DecryptionFailedError,
    InvalidSymbolError,
    MalformedEnvelopeError,
)
from kingutils.encoding.base32 import CROCKFORD

from .algorithms import HashAlgorithm
from .crypto import decrypt_cbc, encrypt_cbc
from .kdf import derive_key_and_iv, generate_salt

logger = logging.getLogger(__name__)

DELIMITER = "U"
FIELD_COUNT = 4
ITERATIONS_WIDTH = 4
MAX_ITERATIONS = 2**31 - 1

DEFAULT_SALT_LENGTH = 16
DEFAULT_ITERATIONS = 100_000
DEFAULT_HASH_ALGORITHM = HashAlgorithm.SHA256

WIRE_CODEC = CROCKFORD

# the delimiter must never collide with an encoded field
if DELIMITER in WIRE_CODEC.alphabet:
    raise ImportError(f"envelope delimiter {DELIMITER!r} is part of the wire alphabet")


def encode_iterations(iterations: int) -> bytes:
    """Little-endian bytes of ``iterations`` with trailing zero bytes stripped."""
    if iterations < 0 or iterations > MAX_ITERATIONS:
        raise ValueError(f"iterations must be between 0 and {MAX_ITERATIONS}")
    raw = iterations.to_bytes(ITERATIONS_WIDTH, "little")
    return raw.rstrip(b"\x00") or b"\x00"


def decode_iterations(raw: bytes) -> int:
    if not raw or len(raw) > ITERATIONS_WIDTH:
        raise MalformedEnvelopeError(f"iteration field must be 1 to {ITERATIONS_WIDTH} bytes, got {len(raw)}")
    return int.from_bytes(raw.ljust(ITERATIONS_WIDTH, b"\x00"), "little", signed=True)


@dataclass(frozen=True)
class EnvelopeFields:
    """The four fields carried by an envelope string."""

    salt: bytes
    iterations: int
    hash_algorithm: HashAlgorithm
    ciphertext: bytes

    def serialize(self) -> str:
        algorithm = HashAlgorithm.resolve(self.hash_algorithm)
        segments = (
            WIRE_CODEC.encode(self.salt),
            WIRE_CODEC.encode(encode_iterations(self.iterations)),
            WIRE_CODEC.encode(bytes([algorithm.tag])),
            WIRE_CODEC.encode(self.ciphertext),
        )
        return DELIMITER.join(segments)

    @classmethod
    def parse(cls, value: str) -> "EnvelopeFields":
        """
        Split and decode an envelope string.

        Raises :class:`MalformedEnvelopeError` when the segment count is
        wrong or a segment is not valid Base32, and
        :class:`UnsupportedAlgorithmError` for an unknown hash tag.
        """
        if not isinstance(value, str):
            raise MalformedEnvelopeError(f"envelope must be a str, got {type(value).__name__}")

        segments = value.split(DELIMITER)
        if len(segments) != FIELD_COUNT:
            raise MalformedEnvelopeError(
                f"expected {FIELD_COUNT} '{DELIMITER}'-delimited segments, got {len(segments)}"
            )

        try:
            salt, iterations_raw, tag_raw, ciphertext = (WIRE_CODEC.decode(s) for s in segments)
        except InvalidSymbolError as exc:
            raise MalformedEnvelopeError(f"envelope segment is not valid Base32: {exc}") from exc

        iterations = decode_iterations(iterations_raw)

        if len(tag_raw) != 1:
            raise MalformedEnvelopeError(f"hash algorithm tag must be 1 byte, got {len(tag_raw)}")
        hash_algorithm = HashAlgorithm.from_tag(tag_raw[0])

        return cls(
            salt=salt,
            iterations=iterations,
            hash_algorithm=hash_algorithm,
            ciphertext=ciphertext,
        )


def encrypt_bytes(
    data: bytes,
    password: Union[str, bytes],
    salt_length: int = DEFAULT_SALT_LENGTH,
    iterations: int = DEFAULT_ITERATIONS,
    hash_algorithm: Union[HashAlgorithm, int, str] = DEFAULT_HASH_ALGORITHM,
) -> str:
    """
    Encrypt ``data`` under ``password`` and return an envelope string.

    A new random salt of ``salt_length`` bytes is drawn on every call, so
    encrypting the same input twice gives different envelopes.
    """
    if salt_length < 0:
        raise ValueError("salt_length must be non-negative")
    if iterations < 1 or iterations > MAX_ITERATIONS:
        raise ValueError(f"iterations must be between 1 and {MAX_ITERATIONS}")
    algorithm = HashAlgorithm.resolve(hash_algorithm)

    salt = generate_salt(salt_length)
    material = derive_key_and_iv(password, salt, iterations, algorithm)
    ciphertext = encrypt_cbc(material.key, material.iv, bytes(data))

    logger.debug(
        "encrypted %d bytes (salt=%d bytes, iterations=%d, hash=%s)",
        len(data), salt_length, iterations, algorithm.name,
    )
    return EnvelopeFields(
        salt=salt,
        iterations=iterations,
        hash_algorithm=algorithm,
        ciphertext=ciphertext,
    ).serialize()


def decrypt_bytes(value: str, password: Union[str, bytes]) -> bytes:
    """
    Decrypt an envelope produced by :func:`encrypt_bytes`.

    Raises :class:`MalformedEnvelopeError`, :class:`UnsupportedAlgorithmError`
    or :class:`DecryptionFailedError`.
    """
    fields = EnvelopeFields.parse(value)
    if fields.iterations < 1:
        raise MalformedEnvelopeError(f"iteration count must be positive, got {fields.iterations}")

    material = derive_key_and_iv(password, fields.salt, fields.iterations, fields.hash_algorithm)
    plaintext = decrypt_cbc(material.key, material.iv, fields.ciphertext)

    logger.debug(
        "decrypted %d bytes (iterations=%d, hash=%s)",
        len(plaintext), fields.iterations, fields.hash_algorithm.name,
    )
    return plaintext


def encrypt_string(
    data: str,
    password: Union[str, bytes],
    salt_length: int = DEFAULT_SALT_LENGTH,
    iterations: int = DEFAULT_ITERATIONS,
    hash_algorithm: Union[HashAlgorithm, int, str] = DEFAULT_HASH_ALGORITHM,
) -> str:
    """UTF-8 encode ``data`` and pass it through :func:`encrypt_bytes`."""
    return encrypt_bytes(data.encode("utf-8"), password, salt_length, iterations, hash_algorithm)


def decrypt_string(value: str, password: Union[str, bytes]) -> str:
    """Decrypt with :func:`decrypt_bytes` and UTF-8 decode the result."""
    raw = decrypt_bytes(value, password)
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DecryptionFailedError("Decrypted data is not valid UTF-8") from exc
