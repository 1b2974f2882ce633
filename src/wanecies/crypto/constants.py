"""Cryptographic constants for wanecies."""

# secp256k1 key sizes in bytes
PRIVATE_KEY_SIZE = 32
COMPRESSED_PUBLIC_KEY_SIZE = 33
UNCOMPRESSED_PUBLIC_KEY_SIZE = 65
SHARED_SECRET_SIZE = 32

# Order of the secp256k1 base point
SECP256K1_ORDER = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141

# SEC1 point prefixes
UNCOMPRESSED_POINT_PREFIX = 0x04

# AES-CBC constants
AES_BLOCK_SIZE = 16
IV_SIZE = 16

# HMAC-SHA256 tag size
MAC_SIZE = 32

# ephemeral_public_key || iv || mac, without any ciphertext
ENVELOPE_OVERHEAD = UNCOMPRESSED_PUBLIC_KEY_SIZE + IV_SIZE + MAC_SIZE
