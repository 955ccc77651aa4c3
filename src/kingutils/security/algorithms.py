"""Hash algorithms usable with PBKDF2 and their one-byte envelope tags."""

from __future__ import annotations

from enum import IntEnum
from typing import Union

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes

from kingutils.core.exceptions import UnsupportedAlgorithmError


class HashAlgorithm(IntEnum):
    """PBKDF2 hash algorithm; the value is the tag stored on the wire."""

    SHA1 = 0
    SHA256 = 1
    SHA384 = 2
    SHA512 = 3
    SHA3_256 = 4
    SHA3_384 = 5
    SHA3_512 = 6

    @classmethod
    def from_tag(cls, tag: int) -> "HashAlgorithm":
        try:
            return cls(tag)
        except ValueError:
            raise UnsupportedAlgorithmError(f"Unknown hash algorithm tag {tag}") from None

    @classmethod
    def resolve(cls, value: Union["HashAlgorithm", int, str, hashes.HashAlgorithm]) -> "HashAlgorithm":
        """
        Coerce ``value`` into a member.

        Accepts a member, an integer tag, a name such as ``"SHA256"``,
        ``"sha-256"`` or ``"sha3_256"``, or a ``cryptography`` hash
        instance. Anything outside the table raises
        :class:`UnsupportedAlgorithmError`.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return cls.from_tag(value)

        if isinstance(value, hashes.HashAlgorithm):
            name = value.name
        elif isinstance(value, str):
            name = value
        else:
            raise UnsupportedAlgorithmError(f"Unsupported hash algorithm {value!r}")

        key = name.strip().upper().replace("-", "").replace("_", "")
        member = _BY_KEY.get(key)
        if member is None:
            raise UnsupportedAlgorithmError(f"Unsupported hash algorithm {name!r}")
        return member

    @property
    def tag(self) -> int:
        return int(self)

    def to_cryptography(self) -> hashes.HashAlgorithm:
        return _HASH_FACTORIES[self]()

    def is_supported(self) -> bool:
        """Return True if the installed crypto backend can compute this hash."""
        try:
            hashes.Hash(self.to_cryptography())
        except UnsupportedAlgorithm:
            return False
        return True


_BY_KEY = {member.name.replace("_", ""): member for member in HashAlgorithm}

_HASH_FACTORIES = {
    HashAlgorithm.SHA1: hashes.SHA1,
    HashAlgorithm.SHA256: hashes.SHA256,
    HashAlgorithm.SHA384: hashes.SHA384,
    HashAlgorithm.SHA512: hashes.SHA512,
    HashAlgorithm.SHA3_256: hashes.SHA3_256,
    HashAlgorithm.SHA3_384: hashes.SHA3_384,
    HashAlgorithm.SHA3_512: hashes.SHA3_512,
}
