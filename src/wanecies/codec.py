"""ECIES codec bound to a recipient keypair."""

from __future__ import annotations

from .crypto import decrypt as _decrypt
from .crypto import encrypt as _encrypt
from .crypto.decrypt import decrypt_safe as _decrypt_safe
from .crypto.keypair import KeyPair, generate_keypair, keypair_from_private_key
from .types import DEFAULT_PARAMS, DecryptResult, EciesParams


class EciesCodec:
    """Encrypts to and decrypts for a single secp256k1 keypair.

    Example:
        ```python
        codec = EciesCodec()
        envelope = codec.encrypt(b"Hello")
        assert codec.decrypt(envelope) == b"Hello"
        ```
    """

    def __init__(
        self,
        keypair: KeyPair | None = None,
        params: EciesParams = DEFAULT_PARAMS,
    ) -> None:
        """Initialize the codec.

        Args:
            keypair: The recipient keypair. A new one is generated if None.
            params: Key derivation settings shared with peers.
        """
        self._keypair = keypair if keypair is not None else generate_keypair()
        self._params = params

    @classmethod
    def from_private_key(
        cls,
        private_key: bytes | str,
        params: EciesParams = DEFAULT_PARAMS,
    ) -> EciesCodec:
        """Create a codec from an existing private key (bytes or hex)."""
        return cls(keypair_from_private_key(private_key), params)

    @property
    def keypair(self) -> KeyPair:
        return self._keypair

    @property
    def params(self) -> EciesParams:
        return self._params

    @property
    def public_key_hex(self) -> str:
        """Compressed public key to hand to senders."""
        return self._keypair.public_key_hex

    def encrypt(self, data: bytes, to: bytes | str | None = None) -> str:
        """Encrypt ``data`` to ``to``, or to this codec's own key if omitted.

        Returns:
            The envelope as lowercase hex.
        """
        recipient = to if to is not None else self._keypair.public_key
        return _encrypt(recipient, data, self._params)

    def decrypt(self, envelope: bytes | str) -> bytes:
        """Decrypt an envelope addressed to this codec's key.

        Raises:
            FormatError: If the envelope is malformed.
            AuthenticationError: If the MAC does not match.
            CryptoError: If decryption fails.
        """
        return _decrypt(self._keypair.private_key, envelope, self._params)

    def decrypt_safe(self, envelope: bytes | str) -> DecryptResult:
        """Decrypt without raising; see :func:`wanecies.crypto.decrypt_safe`."""
        return _decrypt_safe(self._keypair.private_key, envelope, self._params)

    def __repr__(self) -> str:
        return f"EciesCodec(public_key={self.public_key_hex!r})"
