"""AES-CBC with PKCS#7 padding and the envelope MAC."""

from __future__ import annotations

import hashlib
import hmac

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from ..errors import CryptoError, DecodeError
from .constants import AES_BLOCK_SIZE, IV_SIZE


def _cipher(key: bytes, iv: bytes) -> Cipher:
    if len(iv) != IV_SIZE:
        raise CryptoError(f"Invalid IV length: {len(iv)}, expected {IV_SIZE}")
    try:
        return Cipher(algorithms.AES(key), modes.CBC(iv))
    except ValueError as e:
        raise CryptoError(f"Invalid AES parameters: {e}") from e


def aes_cbc_encrypt(key: bytes, iv: bytes, plaintext: bytes) -> bytes:
    """Pad ``plaintext`` with PKCS#7 and encrypt it with AES-CBC."""
    padder = padding.PKCS7(AES_BLOCK_SIZE * 8).padder()
    padded = padder.update(plaintext) + padder.finalize()

    encryptor = _cipher(key, iv).encryptor()
    return encryptor.update(padded) + encryptor.finalize()


def aes_cbc_decrypt(key: bytes, iv: bytes, ciphertext: bytes) -> bytes:
    """Decrypt AES-CBC ciphertext and strip PKCS#7 padding.

    Raises:
        DecodeError: If the padding is invalid.
        CryptoError: If the ciphertext is not a whole number of blocks.
    """
    decryptor = _cipher(key, iv).decryptor()
    try:
        padded = decryptor.update(ciphertext) + decryptor.finalize()
    except ValueError as e:
        raise CryptoError(f"AES-CBC decryption failed: {e}") from e

    unpadder = padding.PKCS7(AES_BLOCK_SIZE * 8).unpadder()
    try:
        return unpadder.update(padded) + unpadder.finalize()
    except ValueError as e:
        raise DecodeError(f"Invalid padding in decrypted message: {e}") from e


def compute_mac(mac_key: bytes, ciphertext: bytes) -> bytes:
    """HMAC-SHA256 of the ciphertext."""
    return hmac.new(mac_key, ciphertext, hashlib.sha256).digest()


def verify_mac(mac_key: bytes, ciphertext: bytes, mac: bytes) -> bool:
    """Check a MAC using constant-time comparison."""
    return hmac.compare_digest(compute_mac(mac_key, ciphertext), mac)
