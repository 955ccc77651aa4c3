"""AES-256-CBC with PKCS7 padding.

There is no MAC: a wrong key and a tampered ciphertext both surface as
:class:`DecryptionFailedError` and cannot be told apart. A wrong key can
also, rarely, produce valid-looking padding and return garbage.
"""
from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from kingutils.core.exceptions import DecryptionFailedError

from .kdf import IV_LENGTH, KEY_LENGTH

BLOCK_SIZE_BITS = 128


def _cipher(key: bytes, iv: bytes) -> Cipher:
    if len(key) != KEY_LENGTH:
        raise ValueError(f"AES-256 requires a {KEY_LENGTH}-byte key")
    if len(iv) != IV_LENGTH:
        raise ValueError(f"CBC needs a {IV_LENGTH}-byte IV")
    return Cipher(algorithms.AES(key), modes.CBC(iv))


def encrypt_cbc(key: bytes, iv: bytes, data: bytes) -> bytes:
    padder = padding.PKCS7(BLOCK_SIZE_BITS).padder()
    padded = padder.update(data) + padder.finalize()

    encryptor = _cipher(key, iv).encryptor()
    return encryptor.update(padded) + encryptor.finalize()


def decrypt_cbc(key: bytes, iv: bytes, data: bytes) -> bytes:
    decryptor = _cipher(key, iv).decryptor()
    unpadder = padding.PKCS7(BLOCK_SIZE_BITS).unpadder()
    try:
        padded = decryptor.update(data) + decryptor.finalize()
        return unpadder.update(padded) + unpadder.finalize()
    except ValueError as exc:
        # block-length mismatch or bad padding
        raise DecryptionFailedError("Decryption failed: wrong password or corrupted data") from exc
