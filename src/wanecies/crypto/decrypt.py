"""Decryption operations for wanecies."""

from __future__ import annotations

import logging

from ..constants import LOGGER_NAME
from ..errors import AuthenticationError, CryptoError, EciesError
from ..types import DEFAULT_PARAMS, DecryptResult, EciesParams
from .cipher import aes_cbc_decrypt, verify_mac
from .kdf import compute_shared_secret, derive_keys
from .keypair import load_private_key
from .validation import load_ephemeral_key, parse_envelope

logger = logging.getLogger(LOGGER_NAME)


def decrypt(
    private_key: bytes | str,
    envelope: bytes | str,
    params: EciesParams = DEFAULT_PARAMS,
) -> bytes:
    """Decrypt an envelope.

    CRITICAL: The MAC is verified BEFORE decryption, in constant time.

    Args:
        private_key: Recipient private key, bytes or hex.
        envelope: The envelope, bytes or hex.
        params: Key derivation settings.

    Returns:
        The decrypted plaintext bytes.

    Raises:
        FormatError: If the envelope is malformed.
        AuthenticationError: If the MAC does not match.
        DecodeError: If the padding is invalid after a valid MAC.
        CryptoError: If any other primitive fails.
    """
    key = load_private_key(private_key)

    # Step 1: Parse and validate the envelope
    parsed = parse_envelope(envelope)
    ephemeral_public_key = load_ephemeral_key(parsed)

    try:
        # Step 2: Key agreement and key derivation
        shared_secret = compute_shared_secret(key, ephemeral_public_key)
        keys = derive_keys(shared_secret, params)

        # Step 3: Authenticate FIRST (security-critical)
        if not verify_mac(keys.mac_key, parsed.ciphertext, parsed.mac):
            logger.debug("Envelope MAC mismatch (%d bytes)", len(parsed))
            raise AuthenticationError("MAC verification failed - envelope tampered or wrong key")

        # Step 4: AES-CBC decryption
        return aes_cbc_decrypt(keys.enc_key, parsed.iv, parsed.ciphertext)

    except EciesError:
        raise
    except Exception as e:
        raise CryptoError(f"Decryption failed: {e}") from e


def decrypt_hex(
    private_key: bytes | str,
    envelope_hex: str,
    params: EciesParams = DEFAULT_PARAMS,
) -> str:
    """Decrypt an envelope and return the plaintext as lowercase hex.

    Raises:
        FormatError: If the envelope is malformed.
        AuthenticationError: If the MAC does not match.
        CryptoError: If decryption fails.
    """
    return decrypt(private_key, envelope_hex, params).hex()


def decrypt_safe(
    private_key: bytes | str,
    envelope: bytes | str,
    params: EciesParams = DEFAULT_PARAMS,
) -> DecryptResult:
    """Decrypt an envelope without raising exceptions.

    Args:
        private_key: Recipient private key, bytes or hex.
        envelope: The envelope, bytes or hex.
        params: Key derivation settings.

    Returns:
        A DecryptResult carrying either the plaintext or the error.
    """
    try:
        return DecryptResult(ok=True, plaintext=decrypt(private_key, envelope, params))
    except EciesError as e:
        return DecryptResult(ok=False, error=e)
