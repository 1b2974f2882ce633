"""Error hierarchy for wanecies."""

from __future__ import annotations


class EciesError(Exception):
    """Base exception for all wanecies errors."""

    pass


class FormatError(EciesError):
    """Malformed envelope: bad hex, wrong sizes or an invalid ephemeral key."""

    pass


class AuthenticationError(EciesError):
    """MAC mismatch on decryption.

    CRITICAL: This error indicates the envelope was tampered with or was not
    encrypted to the key used for decryption. No plaintext is produced.
    """

    pass


class CryptoError(EciesError):
    """Failure of an underlying primitive (KDF, cipher, key agreement)."""

    pass


class InvalidKeyError(CryptoError):
    """Private scalar out of range or public key not on secp256k1."""

    pass


class DecodeError(CryptoError):
    """Invalid padding after a successful MAC check."""

    pass
