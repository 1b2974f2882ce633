"""Encryption operations for wanecies."""

from __future__ import annotations

import logging
import os

from cryptography.hazmat.primitives.asymmetric import ec

from ..constants import LOGGER_NAME
from ..errors import CryptoError, EciesError
from ..types import DEFAULT_PARAMS, EciesParams, Envelope
from .cipher import aes_cbc_encrypt, compute_mac
from .constants import IV_SIZE
from .kdf import compute_shared_secret, derive_keys
from .keypair import CURVE, load_private_key, load_public_key, serialize_public_key
from .utils import HexDecodeError, as_bytes, from_hex

logger = logging.getLogger(LOGGER_NAME)


def _message_bytes(data: bytes) -> bytes:
    # Hex text goes through encrypt_hex
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise CryptoError(f"Invalid message type: expected bytes, got {type(data).__name__}")
    return bytes(data)


def seal(
    ephemeral_key: ec.EllipticCurvePrivateKey,
    public_key: ec.EllipticCurvePublicKey,
    iv: bytes,
    data: bytes,
    params: EciesParams = DEFAULT_PARAMS,
) -> Envelope:
    """Build an envelope from fully specified inputs.

    Args:
        ephemeral_key: The sender's ephemeral private key.
        public_key: The recipient's public key.
        iv: The 16-byte AES-CBC IV.
        data: The plaintext.
        params: Key derivation settings.

    Returns:
        The sealed Envelope.

    Raises:
        CryptoError: If any primitive fails.
    """
    try:
        shared_secret = compute_shared_secret(ephemeral_key, public_key)
        keys = derive_keys(shared_secret, params)

        ciphertext = aes_cbc_encrypt(keys.enc_key, iv, data)
        mac = compute_mac(keys.mac_key, ciphertext)

        envelope = Envelope(
            ephemeral_public_key=serialize_public_key(ephemeral_key.public_key(), compressed=False),
            iv=iv,
            ciphertext=ciphertext,
            mac=mac,
        )
    except EciesError:
        raise
    except Exception as e:
        raise CryptoError(f"Encryption failed: {e}") from e

    logger.debug(
        "Sealed envelope: %d bytes (%d bytes ciphertext)", len(envelope), len(ciphertext)
    )
    return envelope


def encrypt(
    public_key: bytes | str,
    data: bytes,
    params: EciesParams = DEFAULT_PARAMS,
) -> str:
    """Encrypt a message to a secp256k1 public key.

    A fresh ephemeral key and IV are drawn for every call, so encrypting the
    same message twice yields different envelopes.

    Args:
        public_key: Recipient public key, compressed or uncompressed, bytes or hex.
        data: The plaintext bytes.
        params: Key derivation settings.

    Returns:
        The envelope as lowercase hex.

    Raises:
        InvalidKeyError: If the public key is invalid.
        CryptoError: If the message is not bytes or encryption fails.
    """
    recipient = load_public_key(public_key)
    ephemeral_key = ec.generate_private_key(CURVE)
    iv = os.urandom(IV_SIZE)
    return seal(ephemeral_key, recipient, iv, _message_bytes(data), params).to_hex()


def encrypt_hex(
    public_key: bytes | str,
    message_hex: str,
    params: EciesParams = DEFAULT_PARAMS,
) -> str:
    """Encrypt a hex-encoded message.

    Args:
        public_key: Recipient public key, bytes or hex.
        message_hex: The plaintext as hex (``0x`` prefix allowed).
        params: Key derivation settings.

    Returns:
        The envelope as lowercase hex.

    Raises:
        CryptoError: If the message is not valid hex or encryption fails.
    """
    try:
        data = from_hex(message_hex)
    except HexDecodeError as e:
        raise CryptoError(f"Invalid message: {e}") from e
    return encrypt(public_key, data, params)


def encrypt_with_random(
    ephemeral_private_key: bytes | str,
    public_key: bytes | str,
    iv: bytes | str,
    data: bytes,
    params: EciesParams = DEFAULT_PARAMS,
) -> str:
    """Encrypt with a caller-supplied ephemeral key and IV.

    Deterministic: identical inputs produce identical envelopes. Only use this
    for test vectors; reusing an ephemeral key or IV breaks confidentiality.

    Args:
        ephemeral_private_key: The ephemeral private key, bytes or hex.
        public_key: Recipient public key, bytes or hex.
        iv: The 16-byte IV, bytes or hex.
        data: The plaintext bytes.
        params: Key derivation settings.

    Returns:
        The envelope as lowercase hex.

    Raises:
        InvalidKeyError: If either key is invalid.
        CryptoError: If the IV or message is invalid or encryption fails.
    """
    ephemeral_key = load_private_key(ephemeral_private_key)
    recipient = load_public_key(public_key)
    try:
        iv_bytes = as_bytes(iv)
    except (HexDecodeError, TypeError) as e:
        raise CryptoError(f"Invalid IV: {e}") from e
    if len(iv_bytes) != IV_SIZE:
        raise CryptoError(f"Invalid IV length: {len(iv_bytes)}, expected {IV_SIZE}")
    return seal(ephemeral_key, recipient, iv_bytes, _message_bytes(data), params).to_hex()
