"""wanecies - secp256k1 ECIES envelopes for the Wanchain node console.

Encrypts a message to a secp256k1 public key with an ephemeral ECDH key
agreement, PBKDF2-HMAC-SHA256 key stretching, AES-128-CBC and an
HMAC-SHA256 tag, producing the hex envelope understood by the node's
console scripts.

Example:
    ```python
    from wanecies import decrypt_hex, encrypt_hex, keypair_from_private_key

    keypair = keypair_from_private_key("01" * 32)
    envelope = encrypt_hex(keypair.public_key, "48656c6c6f")
    assert decrypt_hex(keypair.private_key, envelope) == "48656c6c6f"
    ```
"""

from .codec import EciesCodec
from .constants import (
    DEFAULT_ENC_KEY_SIZE,
    DEFAULT_KDF_ITERATIONS,
    DEFAULT_KDF_LENGTH,
    DEFAULT_KDF_SALT,
    DEFAULT_MAC_KEY_SIZE,
)
from .crypto import (
    KeyPair,
    decrypt,
    decrypt_hex,
    decrypt_safe,
    derive_public_key,
    encrypt,
    encrypt_hex,
    encrypt_with_random,
    generate_keypair,
    keypair_from_private_key,
    parse_envelope,
    validate_keypair,
)
from .errors import (
    AuthenticationError,
    CryptoError,
    DecodeError,
    EciesError,
    FormatError,
    InvalidKeyError,
)
from .types import DEFAULT_PARAMS, DecryptResult, EciesParams, Envelope

__version__ = "0.1.0"

__all__ = [
    # Main classes
    "EciesCodec",
    "KeyPair",
    # Operations
    "decrypt",
    "decrypt_hex",
    "decrypt_safe",
    "derive_public_key",
    "encrypt",
    "encrypt_hex",
    "encrypt_with_random",
    "generate_keypair",
    "keypair_from_private_key",
    "parse_envelope",
    "validate_keypair",
    # Errors
    "AuthenticationError",
    "CryptoError",
    "DecodeError",
    "EciesError",
    "FormatError",
    "InvalidKeyError",
    # Types
    "DEFAULT_PARAMS",
    "DecryptResult",
    "EciesParams",
    "Envelope",
    # Constants
    "DEFAULT_ENC_KEY_SIZE",
    "DEFAULT_KDF_ITERATIONS",
    "DEFAULT_KDF_LENGTH",
    "DEFAULT_KDF_SALT",
    "DEFAULT_MAC_KEY_SIZE",
    # Version
    "__version__",
]
