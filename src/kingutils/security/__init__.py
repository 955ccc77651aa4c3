"""Security helpers: PBKDF2 key derivation, AES-CBC and the text envelope.

This package provides:
- PBKDF2 derivation of an AES-256 key and CBC IV from a password
- AES-256-CBC encryption/decryption with PKCS7 padding
- a single-line, Base32-encoded envelope holding salt, iteration count,
  hash algorithm tag and ciphertext
"""

from .algorithms import HashAlgorithm
from .kdf import DerivedKeyMaterial, generate_salt, derive_key_and_iv
from .crypto import encrypt_cbc, decrypt_cbc
from .envelope import (
    DELIMITER,
    EnvelopeFields,
    encrypt_bytes,
    decrypt_bytes,
    encrypt_string,
    decrypt_string,
)

__all__ = [
    "HashAlgorithm",
    "DerivedKeyMaterial",
    "generate_salt",
    "derive_key_and_iv",
    "encrypt_cbc",
    "decrypt_cbc",
    "DELIMITER",
    "EnvelopeFields",
    "encrypt_bytes",
    "decrypt_bytes",
    "encrypt_string",
    "decrypt_string",
]
