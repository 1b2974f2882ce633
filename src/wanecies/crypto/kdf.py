"""ECDH key agreement and key derivation for wanecies."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from ..errors import CryptoError
from ..types import DEFAULT_PARAMS, EciesParams
from .utils import to_hex


@dataclass(frozen=True)
class DerivedKeys:
    """Symmetric keys derived from an ECDH shared secret.

    Attributes:
        enc_key: AES key.
        mac_key: HMAC-SHA256 key (SHA-256 of the raw MAC key material).
    """

    enc_key: bytes
    mac_key: bytes

    def __repr__(self) -> str:
        return "DerivedKeys(<redacted>)"


def compute_shared_secret(
    private_key: ec.EllipticCurvePrivateKey,
    public_key: ec.EllipticCurvePublicKey,
) -> bytes:
    """Compute the ECDH shared secret (x-coordinate of ``d * Q``).

    Args:
        private_key: One party's private key.
        public_key: The other party's public key.

    Returns:
        The 32-byte shared secret.

    Raises:
        CryptoError: If key agreement fails.
    """
    try:
        return private_key.exchange(ec.ECDH(), public_key)
    except ValueError as e:
        raise CryptoError(f"ECDH key agreement failed: {e}") from e


def derive_keys(shared_secret: bytes, params: EciesParams = DEFAULT_PARAMS) -> DerivedKeys:
    """Stretch a shared secret into encryption and MAC keys.

    The PBKDF2 password is the lowercase hex text of the shared secret, not
    the raw bytes; deployed peers hash the hex string.

    Args:
        shared_secret: The ECDH shared secret.
        params: Key derivation settings.

    Returns:
        The derived encryption and MAC keys.
    """
    password = to_hex(shared_secret).encode("ascii")

    kdf = PBKDF2HMAC(
        algorithm=hashes.SHA256(),
        length=params.kdf_length,
        salt=params.kdf_salt,
        iterations=params.kdf_iterations,
    )
    derived = kdf.derive(password)

    enc_key = derived[: params.enc_key_size]
    raw_mac_key = derived[params.enc_key_size : params.enc_key_size + params.mac_key_size]

    return DerivedKeys(enc_key=enc_key, mac_key=hashlib.sha256(raw_mac_key).digest())
