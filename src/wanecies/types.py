"""Type definitions for wanecies."""

from __future__ import annotations

from dataclasses import dataclass

from .constants import (
    DEFAULT_ENC_KEY_SIZE,
    DEFAULT_KDF_ITERATIONS,
    DEFAULT_KDF_LENGTH,
    DEFAULT_KDF_SALT,
    DEFAULT_MAC_KEY_SIZE,
)
from .errors import CryptoError, EciesError, FormatError

# AES key sizes accepted for the encryption key
AES_KEY_SIZES = (16, 24, 32)


@dataclass(frozen=True)
class EciesParams:
    """Key derivation settings for the ECIES envelope.

    The defaults match the scheme used by the node console scripts. Peers must
    agree on every field to interoperate.

    Attributes:
        kdf_salt: PBKDF2 salt.
        kdf_iterations: PBKDF2 iteration count.
        kdf_length: Number of bytes derived by PBKDF2.
        enc_key_size: Bytes of derived material used as the AES key.
        mac_key_size: Bytes of derived material hashed into the HMAC key.
    """

    kdf_salt: bytes = DEFAULT_KDF_SALT
    kdf_iterations: int = DEFAULT_KDF_ITERATIONS
    kdf_length: int = DEFAULT_KDF_LENGTH
    enc_key_size: int = DEFAULT_ENC_KEY_SIZE
    mac_key_size: int = DEFAULT_MAC_KEY_SIZE

    def __post_init__(self) -> None:
        if self.enc_key_size not in AES_KEY_SIZES:
            raise CryptoError(
                f"Unsupported encryption key size: {self.enc_key_size}, "
                f"expected one of {AES_KEY_SIZES}"
            )
        if self.kdf_iterations < 1:
            raise CryptoError(f"KDF iterations must be positive, got {self.kdf_iterations}")
        if self.mac_key_size < 1:
            raise CryptoError(f"MAC key size must be positive, got {self.mac_key_size}")
        if self.kdf_length < self.enc_key_size + self.mac_key_size:
            raise CryptoError(
                f"KDF length {self.kdf_length} too short for "
                f"{self.enc_key_size}-byte encryption key and {self.mac_key_size}-byte MAC key"
            )


DEFAULT_PARAMS = EciesParams()


@dataclass(frozen=True)
class Envelope:
    """Parsed ECIES envelope.

    Wire layout: ``ephemeral_public_key(65) || iv(16) || ciphertext || mac(32)``.

    Attributes:
        ephemeral_public_key: Uncompressed secp256k1 point of the sender's ephemeral key.
        iv: AES-CBC initialization vector.
        ciphertext: AES-CBC ciphertext, a whole number of blocks.
        mac: HMAC-SHA256 tag over the ciphertext.
    """

    ephemeral_public_key: bytes
    iv: bytes
    ciphertext: bytes
    mac: bytes

    @classmethod
    def from_bytes(cls, data: bytes) -> Envelope:
        """Parse envelope wire bytes.

        Args:
            data: The envelope bytes.

        Returns:
            The parsed Envelope.

        Raises:
            FormatError: If ``data`` is not bytes or has invalid sizes.
        """
        from .crypto.validation import parse_envelope

        if not isinstance(data, (bytes, bytearray)):
            raise FormatError(f"Expected envelope bytes, got {type(data).__name__}")
        return parse_envelope(bytes(data))

    @classmethod
    def from_hex(cls, s: str) -> Envelope:
        """Parse a hex envelope (``0x`` prefix allowed).

        Raises:
            FormatError: If ``s`` is not valid hex or has invalid sizes.
        """
        from .crypto.validation import parse_envelope

        if not isinstance(s, str):
            raise FormatError(f"Expected envelope hex string, got {type(s).__name__}")
        return parse_envelope(s)

    def to_bytes(self) -> bytes:
        """Serialize the envelope to its wire bytes."""
        return self.ephemeral_public_key + self.iv + self.ciphertext + self.mac

    def to_hex(self) -> str:
        """Serialize the envelope to lowercase hex."""
        return self.to_bytes().hex()

    def __len__(self) -> int:
        return (
            len(self.ephemeral_public_key) + len(self.iv) + len(self.ciphertext) + len(self.mac)
        )


@dataclass
class DecryptResult:
    """Outcome of a non-raising decryption.

    Attributes:
        ok: True if the envelope authenticated and decrypted.
        plaintext: The decrypted message, set only when ``ok`` is True.
        error: The failure, set only when ``ok`` is False.
    """

    ok: bool
    plaintext: bytes | None = None
    error: EciesError | None = None

    @property
    def message_hex(self) -> str | None:
        """Plaintext as lowercase hex, or None on failure."""
        if self.plaintext is None:
            return None
        return self.plaintext.hex()
