"""Default configuration constants for wanecies."""

# Logger shared by all modules
LOGGER_NAME = "wanecies"

# PBKDF2-HMAC-SHA256 settings used by the deployed console scripts
DEFAULT_KDF_SALT = b" "
DEFAULT_KDF_ITERATIONS = 2
DEFAULT_KDF_LENGTH = 64

# Split of the derived key material (bytes)
DEFAULT_ENC_KEY_SIZE = 16
DEFAULT_MAC_KEY_SIZE = 16
