"""Password-based key derivation for the envelope."""
import os
from typing import NamedTuple, Union

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from kingutils.core.exceptions import UnsupportedAlgorithmError

from .algorithms import HashAlgorithm

KEY_LENGTH = 32
IV_LENGTH = 16
DERIVED_LENGTH = KEY_LENGTH + IV_LENGTH


class DerivedKeyMaterial(NamedTuple):
    key: bytes
    iv: bytes


def generate_salt(length: int = 16) -> bytes:
    """Return a cryptographically secure random salt."""
    if length < 0:
        raise ValueError("salt length must be non-negative")
    return os.urandom(length)


def derive_key_and_iv(
    password: Union[str, bytes],
    salt: bytes,
    iterations: int,
    hash_algorithm: HashAlgorithm,
) -> DerivedKeyMaterial:
    """
    Derive an AES-256 key and CBC IV from a password using PBKDF2.

    48 bytes are derived in one pass: the first 32 are the key, the last
    16 are the IV.
    """
    if isinstance(password, str):
        password = password.encode("utf-8")

    algorithm = HashAlgorithm.resolve(hash_algorithm)
    try:
        kdf = PBKDF2HMAC(
            algorithm=algorithm.to_cryptography(),
            length=DERIVED_LENGTH,
            salt=salt,
            iterations=iterations,
        )
        material = kdf.derive(password)
    except UnsupportedAlgorithm as exc:
        raise UnsupportedAlgorithmError(
            f"{algorithm.name} is not available from the installed crypto backend"
        ) from exc

    return DerivedKeyMaterial(key=material[:KEY_LENGTH], iv=material[KEY_LENGTH:])
