"""Cryptographic operations for wanecies."""

from .constants import ENVELOPE_OVERHEAD, IV_SIZE, MAC_SIZE, UNCOMPRESSED_PUBLIC_KEY_SIZE
from .decrypt import decrypt, decrypt_hex, decrypt_safe
from .encrypt import encrypt, encrypt_hex, encrypt_with_random, seal
from .kdf import DerivedKeys, compute_shared_secret, derive_keys
from .keypair import (
    KeyPair,
    derive_public_key,
    generate_keypair,
    keypair_from_private_key,
    load_private_key,
    load_public_key,
    serialize_public_key,
    validate_keypair,
)
from .utils import from_hex, to_hex
from .validation import parse_envelope

__all__ = [
    "ENVELOPE_OVERHEAD",
    "IV_SIZE",
    "MAC_SIZE",
    "UNCOMPRESSED_PUBLIC_KEY_SIZE",
    "DerivedKeys",
    "KeyPair",
    "compute_shared_secret",
    "decrypt",
    "decrypt_hex",
    "decrypt_safe",
    "derive_keys",
    "derive_public_key",
    "encrypt",
    "encrypt_hex",
    "encrypt_with_random",
    "from_hex",
    "generate_keypair",
    "keypair_from_private_key",
    "load_private_key",
    "load_public_key",
    "parse_envelope",
    "seal",
    "serialize_public_key",
    "to_hex",
    "validate_keypair",
]
