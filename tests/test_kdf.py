"""Tests for ECDH key agreement and key derivation."""

import hashlib

import pytest

from wanecies.crypto.kdf import DerivedKeys, compute_shared_secret, derive_keys
from wanecies.crypto.keypair import generate_keypair, load_private_key, load_public_key
from wanecies.errors import CryptoError
from wanecies.types import DEFAULT_PARAMS, EciesParams

G_X = "79be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"
G_COMPRESSED = "02" + G_X


def reference_keys(shared_secret: bytes) -> tuple[bytes, bytes]:
    """Independent derivation with hashlib, as the node console does it."""
    derived = hashlib.pbkdf2_hmac("sha256", shared_secret.hex().encode(), b" ", 2, 64)
    return derived[:16], hashlib.sha256(derived[16:32]).digest()


class TestComputeSharedSecret:
    """Tests for ECDH."""

    def test_symmetric(self) -> None:
        """Both parties compute the same secret."""
        alice = generate_keypair()
        bob = generate_keypair()
        s1 = compute_shared_secret(
            load_private_key(alice.private_key), load_public_key(bob.public_key)
        )
        s2 = compute_shared_secret(
            load_private_key(bob.private_key), load_public_key(alice.public_key)
        )
        assert s1 == s2
        assert len(s1) == 32

    def test_x_coordinate(self) -> None:
        """1 * G has the x-coordinate of G."""
        secret = compute_shared_secret(
            load_private_key("00" * 31 + "01"), load_public_key(G_COMPRESSED)
        )
        assert secret.hex() == G_X


class TestDeriveKeys:
    """Tests for PBKDF2 key stretching."""

    def test_matches_reference(self) -> None:
        """Derivation hashes the hex text of the secret, not the raw bytes."""
        secret = bytes(range(32))
        keys = derive_keys(secret)
        enc_key, mac_key = reference_keys(secret)
        assert keys.enc_key == enc_key
        assert keys.mac_key == mac_key

    def test_key_sizes(self) -> None:
        keys = derive_keys(b"\x42" * 32)
        assert len(keys.enc_key) == 16
        assert len(keys.mac_key) == 32

    def test_not_raw_bytes_password(self) -> None:
        """Hashing the raw secret would give different keys."""
        secret = b"\x07" * 32
        raw = hashlib.pbkdf2_hmac("sha256", secret, b" ", 2, 64)
        assert derive_keys(secret).enc_key != raw[:16]

    def test_params_change_keys(self) -> None:
        secret = b"\x01" * 32
        assert derive_keys(secret, EciesParams(kdf_iterations=3)) != derive_keys(secret)
        assert derive_keys(secret, EciesParams(kdf_salt=b"salt")) != derive_keys(secret)

    def test_larger_enc_key(self) -> None:
        """AES-256 params yield a 32-byte encryption key."""
        params = EciesParams(enc_key_size=32, mac_key_size=16, kdf_length=64)
        keys = derive_keys(b"\x01" * 32, params)
        assert len(keys.enc_key) == 32

    def test_repr_redacted(self) -> None:
        keys = derive_keys(b"\x01" * 32)
        assert keys.enc_key.hex() not in repr(keys)
        assert repr(keys) == "DerivedKeys(<redacted>)"

    def test_default_params(self) -> None:
        assert derive_keys(b"\x01" * 32, DEFAULT_PARAMS) == derive_keys(b"\x01" * 32)


class TestEciesParams:
    """Tests for EciesParams validation."""

    def test_defaults(self) -> None:
        params = EciesParams()
        assert params.kdf_salt == b" "
        assert params.kdf_iterations == 2
        assert params.kdf_length == 64
        assert params.enc_key_size == 16
        assert params.mac_key_size == 16

    def test_unsupported_key_size(self) -> None:
        with pytest.raises(CryptoError, match="Unsupported encryption key size"):
            EciesParams(enc_key_size=20)

    def test_zero_iterations(self) -> None:
        with pytest.raises(CryptoError, match="iterations must be positive"):
            EciesParams(kdf_iterations=0)

    def test_zero_mac_key(self) -> None:
        with pytest.raises(CryptoError, match="MAC key size must be positive"):
            EciesParams(mac_key_size=0)

    def test_kdf_length_too_short(self) -> None:
        with pytest.raises(CryptoError, match="too short"):
            EciesParams(kdf_length=16)

    def test_frozen(self) -> None:
        """Params cannot be mutated after construction."""
        params = EciesParams()
        with pytest.raises(AttributeError):
            params.kdf_iterations = 5  # type: ignore[misc]


def test_derived_keys_equality() -> None:
    assert DerivedKeys(b"a", b"b") == DerivedKeys(b"a", b"b")
