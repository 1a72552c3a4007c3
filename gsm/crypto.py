"""Password-based AES-256-GCM encryption of secret values."""

from __future__ import annotations

import hashlib
import os

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from gsm.errors import CryptoKeyError, DecryptionFailed, EncryptionFailed

PBKDF2_ITER = 100_000
SALT_LEN = 16
NONCE_LEN = 12
KEY_LEN = 32


def derive_key(password: bytes, salt: bytes) -> bytes:
    """Derive a 256-bit key from a password with PBKDF2-HMAC-SHA256."""
    return hashlib.pbkdf2_hmac("sha256", password, salt, PBKDF2_ITER, KEY_LEN)


def _cipher(key: bytes) -> AESGCM:
    try:
        return AESGCM(key)
    except ValueError as exc:
        raise CryptoKeyError(str(exc)) from exc


def encrypt(plaintext: bytes, password: bytes) -> tuple[bytes, bytes, bytes]:
    """Encrypt with a fresh random salt and nonce; return (salt, nonce, ciphertext)."""
    salt = os.urandom(SALT_LEN)
    cipher = _cipher(derive_key(password, salt))
    nonce = os.urandom(NONCE_LEN)
    try:
        ciphertext = cipher.encrypt(nonce, plaintext, None)
    except (ValueError, OverflowError) as exc:
        raise EncryptionFailed(str(exc)) from exc
    return salt, nonce, ciphertext


def decrypt(ciphertext: bytes, password: bytes, salt: bytes, nonce: bytes) -> bytes:
    """Decrypt a value produced by :func:`encrypt`."""
    cipher = _cipher(derive_key(password, salt))
    if len(nonce) != NONCE_LEN:
        raise DecryptionFailed(f"nonce must be {NONCE_LEN} bytes, got {len(nonce)}")
    try:
        return cipher.decrypt(nonce, ciphertext, None)
    except InvalidTag as exc:
        raise DecryptionFailed("aead::Error") from exc
    except ValueError as exc:
        raise DecryptionFailed(str(exc)) from exc