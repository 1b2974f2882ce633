"""Tests for EciesCodec."""

import pytest

from wanecies import (
    AuthenticationError,
    EciesCodec,
    EciesParams,
    FormatError,
    KeyPair,
    generate_keypair,
    keypair_from_private_key,
)


class TestEciesCodec:
    """Tests for the codec facade."""

    def test_generates_keypair(self) -> None:
        codec = EciesCodec()
        assert isinstance(codec.keypair, KeyPair)
        assert codec.public_key_hex == codec.keypair.public_key.hex()

    def test_round_trip_to_self(self) -> None:
        codec = EciesCodec()
        envelope = codec.encrypt(b"Hello")
        assert codec.decrypt(envelope) == b"Hello"

    def test_encrypt_to_peer(self) -> None:
        """Envelopes addressed to a peer are only readable by that peer."""
        alice = EciesCodec()
        bob = EciesCodec()
        envelope = alice.encrypt(b"for bob", to=bob.public_key_hex)
        assert bob.decrypt(envelope) == b"for bob"
        with pytest.raises(AuthenticationError):
            alice.decrypt(envelope)

    def test_from_private_key(self) -> None:
        codec = EciesCodec.from_private_key("01" * 32)
        assert codec.keypair == keypair_from_private_key("01" * 32)

    def test_existing_keypair(self) -> None:
        kp = generate_keypair()
        codec = EciesCodec(kp)
        assert codec.keypair is kp

    def test_params_shared(self) -> None:
        """Codecs must agree on params to interoperate."""
        params = EciesParams(kdf_iterations=5)
        sender = EciesCodec(params=params)
        recipient = EciesCodec(params=params)
        default = EciesCodec(recipient.keypair)
        envelope = sender.encrypt(b"tuned", to=recipient.keypair.public_key)
        assert recipient.params is params
        assert recipient.decrypt(envelope) == b"tuned"
        with pytest.raises(AuthenticationError):
            default.decrypt(envelope)

    def test_decrypt_safe(self) -> None:
        codec = EciesCodec()
        assert codec.decrypt_safe(codec.encrypt(b"ok")).plaintext == b"ok"
        result = codec.decrypt_safe("00")
        assert result.ok is False
        assert isinstance(result.error, FormatError)

    def test_repr_hides_private_key(self) -> None:
        codec = EciesCodec.from_private_key("cd" * 32)
        assert "cd" * 32 not in repr(codec)
        assert codec.public_key_hex in repr(codec)
