"""Envelope parsing and validation for wanecies.

Validation steps (performed in order):
1. Decode - hex text is decoded to bytes
2. Validate size - at least ephemeral key, IV and MAC must be present
3. Validate ciphertext - a non-empty whole number of AES blocks
4. Validate ephemeral key - an uncompressed point on secp256k1
"""

from __future__ import annotations

from cryptography.hazmat.primitives.asymmetric import ec

from ..errors import FormatError, InvalidKeyError
from ..types import Envelope
from .constants import (
    AES_BLOCK_SIZE,
    ENVELOPE_OVERHEAD,
    IV_SIZE,
    MAC_SIZE,
    UNCOMPRESSED_POINT_PREFIX,
    UNCOMPRESSED_PUBLIC_KEY_SIZE,
)
from .keypair import load_public_key
from .utils import HexDecodeError, as_bytes


def parse_envelope(envelope: bytes | str) -> Envelope:
    """Split an envelope into its fields.

    Args:
        envelope: Envelope bytes, or their hex form.

    Returns:
        The parsed Envelope.

    Raises:
        FormatError: If the envelope cannot be decoded or has invalid sizes.
    """
    data = _decode(envelope)
    _validate_size(data)

    iv_end = UNCOMPRESSED_PUBLIC_KEY_SIZE + IV_SIZE
    parsed = Envelope(
        ephemeral_public_key=data[:UNCOMPRESSED_PUBLIC_KEY_SIZE],
        iv=data[UNCOMPRESSED_PUBLIC_KEY_SIZE:iv_end],
        ciphertext=data[iv_end:-MAC_SIZE],
        mac=data[-MAC_SIZE:],
    )

    _validate_ciphertext(parsed)
    return parsed


def load_ephemeral_key(envelope: Envelope) -> ec.EllipticCurvePublicKey:
    """Load the sender's ephemeral public key from an envelope.

    Raises:
        FormatError: If the key is not an uncompressed secp256k1 point.
    """
    if envelope.ephemeral_public_key[0] != UNCOMPRESSED_POINT_PREFIX:
        raise FormatError(
            f"Invalid ephemeral public key prefix: 0x{envelope.ephemeral_public_key[0]:02x}, "
            f"expected 0x{UNCOMPRESSED_POINT_PREFIX:02x}"
        )
    try:
        return load_public_key(envelope.ephemeral_public_key)
    except InvalidKeyError as e:
        raise FormatError(f"Invalid ephemeral public key: {e}") from e


def _decode(envelope: bytes | str) -> bytes:
    try:
        return as_bytes(envelope)
    except (HexDecodeError, TypeError) as e:
        raise FormatError(f"Failed to decode envelope: {e}") from e


def _validate_size(data: bytes) -> None:
    if len(data) < ENVELOPE_OVERHEAD:
        raise FormatError(
            f"Envelope too short: {len(data)} bytes, expected at least {ENVELOPE_OVERHEAD}"
        )


def _validate_ciphertext(envelope: Envelope) -> None:
    size = len(envelope.ciphertext)
    if size == 0:
        raise FormatError("Envelope contains no ciphertext")
    if size % AES_BLOCK_SIZE:
        raise FormatError(
            f"Invalid ciphertext size: {size} bytes, expected a multiple of {AES_BLOCK_SIZE}"
        )
