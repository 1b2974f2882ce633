"""Hex encoding/decoding utilities for wanecies."""

from __future__ import annotations

import binascii
import re

# Hex digits only, even length checked separately
HEX_PATTERN = re.compile(r"^[0-9a-fA-F]*$")


class HexDecodeError(ValueError):
    """Raised when a string is not valid hex."""

    pass


def to_hex(data: bytes) -> str:
    """Encode bytes to lowercase hex without a ``0x`` prefix.

    Args:
        data: The bytes to encode.

    Returns:
        Lowercase hex string.
    """
    return binascii.hexlify(data).decode("ascii")


def strip_hex_prefix(s: str) -> str:
    """Remove a leading ``0x``/``0X`` prefix if present."""
    if s[:2] in ("0x", "0X"):
        return s[2:]
    return s


def from_hex(s: str) -> bytes:
    """Decode a hex string to bytes.

    Accepts an optional ``0x`` prefix and mixed case digits, as produced by
    the node console.

    Args:
        s: The hex string to decode.

    Returns:
        The decoded bytes.

    Raises:
        HexDecodeError: If the string has odd length or non-hex characters.
    """
    s = strip_hex_prefix(s.strip())
    if not HEX_PATTERN.match(s):
        raise HexDecodeError(f"Invalid hex string: contains non-hex characters: {s[:16]!r}")
    if len(s) % 2:
        raise HexDecodeError(f"Invalid hex string: odd length {len(s)}")
    return binascii.unhexlify(s)


def as_bytes(value: bytes | bytearray | str) -> bytes:
    """Coerce bytes or a hex string to bytes.

    Args:
        value: Raw bytes or hex text.

    Returns:
        The value as immutable bytes.

    Raises:
        HexDecodeError: If ``value`` is a string that is not valid hex.
        TypeError: If ``value`` is neither bytes nor str.
    """
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    if isinstance(value, str):
        return from_hex(value)
    raise TypeError(f"Expected bytes or hex string, got {type(value).__name__}")
