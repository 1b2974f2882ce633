"""secp256k1 keypair generation and key import/export for wanecies."""

from __future__ import annotations

from dataclasses import dataclass

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec

from ..errors import InvalidKeyError
from .constants import (
    COMPRESSED_PUBLIC_KEY_SIZE,
    PRIVATE_KEY_SIZE,
    SECP256K1_ORDER,
    UNCOMPRESSED_PUBLIC_KEY_SIZE,
)
from .utils import HexDecodeError, as_bytes, to_hex

CURVE = ec.SECP256K1()


@dataclass(frozen=True)
class KeyPair:
    """secp256k1 keypair for encryption/decryption.

    Attributes:
        private_key: The private scalar, 32 bytes big-endian.
        public_key: The compressed public key (33 bytes).
        public_key_uncompressed: The uncompressed public key (65 bytes).
    """

    private_key: bytes
    public_key: bytes
    public_key_uncompressed: bytes

    @property
    def private_key_hex(self) -> str:
        return to_hex(self.private_key)

    @property
    def public_key_hex(self) -> str:
        return to_hex(self.public_key)

    def __repr__(self) -> str:
        # Keep the private key out of logs and tracebacks
        return f"KeyPair(public_key={self.public_key_hex!r})"


def serialize_public_key(key: ec.EllipticCurvePublicKey, compressed: bool = True) -> bytes:
    """Serialize a public key as a SEC1 point.

    Args:
        key: The public key object.
        compressed: Emit the 33-byte compressed form if True, else 65 bytes.

    Returns:
        The encoded point.
    """
    point_format = (
        serialization.PublicFormat.CompressedPoint
        if compressed
        else serialization.PublicFormat.UncompressedPoint
    )
    return key.public_bytes(serialization.Encoding.X962, point_format)


def private_key_to_bytes(key: ec.EllipticCurvePrivateKey) -> bytes:
    """Return the 32-byte big-endian private scalar."""
    return key.private_numbers().private_value.to_bytes(PRIVATE_KEY_SIZE, "big")


def load_private_key(private_key: bytes | str) -> ec.EllipticCurvePrivateKey:
    """Load a raw secp256k1 private scalar.

    Args:
        private_key: 32 bytes, or their hex form (``0x`` prefix allowed).

    Returns:
        The private key object.

    Raises:
        InvalidKeyError: If the key has the wrong size or is out of range.
    """
    try:
        raw = as_bytes(private_key)
    except (HexDecodeError, TypeError) as e:
        raise InvalidKeyError(f"Invalid private key encoding: {e}") from e

    if len(raw) != PRIVATE_KEY_SIZE:
        raise InvalidKeyError(
            f"Invalid private key length: {len(raw)}, expected {PRIVATE_KEY_SIZE}"
        )

    value = int.from_bytes(raw, "big")
    if not 0 < value < SECP256K1_ORDER:
        raise InvalidKeyError("Private key out of range for secp256k1")

    return ec.derive_private_key(value, CURVE)


def load_public_key(public_key: bytes | str) -> ec.EllipticCurvePublicKey:
    """Load a compressed or uncompressed secp256k1 public key.

    Args:
        public_key: 33 or 65 SEC1 bytes, or their hex form.

    Returns:
        The public key object.

    Raises:
        InvalidKeyError: If the key has the wrong size or is not on the curve.
    """
    try:
        raw = as_bytes(public_key)
    except (HexDecodeError, TypeError) as e:
        raise InvalidKeyError(f"Invalid public key encoding: {e}") from e

    if len(raw) not in (COMPRESSED_PUBLIC_KEY_SIZE, UNCOMPRESSED_PUBLIC_KEY_SIZE):
        raise InvalidKeyError(
            f"Invalid public key length: {len(raw)}, expected "
            f"{COMPRESSED_PUBLIC_KEY_SIZE} or {UNCOMPRESSED_PUBLIC_KEY_SIZE}"
        )

    try:
        return ec.EllipticCurvePublicKey.from_encoded_point(CURVE, raw)
    except ValueError as e:
        raise InvalidKeyError(f"Invalid secp256k1 public key: {e}") from e


def _keypair_from_key(key: ec.EllipticCurvePrivateKey) -> KeyPair:
    public = key.public_key()
    return KeyPair(
        private_key=private_key_to_bytes(key),
        public_key=serialize_public_key(public, compressed=True),
        public_key_uncompressed=serialize_public_key(public, compressed=False),
    )


def generate_keypair() -> KeyPair:
    """Generate a new secp256k1 keypair from the system CSPRNG.

    Returns:
        A new KeyPair instance.
    """
    return _keypair_from_key(ec.generate_private_key(CURVE))


def keypair_from_private_key(private_key: bytes | str) -> KeyPair:
    """Build a keypair from an existing private key.

    Args:
        private_key: 32 bytes, or their hex form.

    Returns:
        The KeyPair with both public key encodings filled in.

    Raises:
        InvalidKeyError: If the private key is invalid.
    """
    return _keypair_from_key(load_private_key(private_key))


def derive_public_key(private_key: bytes | str, compressed: bool = True) -> bytes:
    """Derive the public key for a private key.

    Args:
        private_key: 32 bytes, or their hex form.
        compressed: Return the 33-byte form if True, else 65 bytes.

    Returns:
        The encoded public key.

    Raises:
        InvalidKeyError: If the private key is invalid.
    """
    key = load_private_key(private_key)
    return serialize_public_key(key.public_key(), compressed=compressed)


def validate_keypair(keypair: KeyPair) -> bool:
    """Validate that a keypair is well formed and self consistent.

    Args:
        keypair: The keypair to validate.

    Returns:
        True if valid, False otherwise.
    """
    if len(keypair.public_key) != COMPRESSED_PUBLIC_KEY_SIZE:
        return False
    if len(keypair.public_key_uncompressed) != UNCOMPRESSED_PUBLIC_KEY_SIZE:
        return False
    try:
        expected = keypair_from_private_key(keypair.private_key)
    except InvalidKeyError:
        return False
    return (
        expected.public_key == keypair.public_key
        and expected.public_key_uncompressed == keypair.public_key_uncompressed
    )
