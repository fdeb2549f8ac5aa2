"""
Configuration constants for the credvault storage engine.
"""

import os
import string

# Application Metadata
APP_NAME = "credvault"  # Use: Package name; the default config directory is derived from it. Type: str. Range: Any valid string.

# Vault File Layout
SALT_SIZE = 16  # Use: Size of the key-derivation salt stored at offset 0 of the vault file. Type: int. Range: Fixed at 16 bytes for the file format.
KEY_SIZE = 32  # Use: Size of the derived encryption key in bytes. Corresponds to AES-256. Type: int. Range: 32 bytes.
NONCE_SIZE = 12  # Use: Size of the AES-GCM nonce stored at offset 16 of the vault file. Type: int. Range: 12 bytes (96 bits).
TAG_SIZE = 16  # Use: Size of the AES-GCM authentication tag appended to the ciphertext. Type: int. Range: 16 bytes (128 bits).
MIN_FILE_SIZE = SALT_SIZE + NONCE_SIZE  # Use: Smallest vault file that is not considered corrupt. Type: int. Range: Derived value (28).

# Key Derivation (Argon2id defaults, compatible with vaults written by the original tool)
ARGON2_TIME_COST = 2  # Use: Argon2id time cost (iterations). Type: int. Range: Positive integer.
ARGON2_MEMORY_COST = 19456  # Use: Argon2id memory cost in KiB (19 MiB). Type: int. Range: At least 8 * ARGON2_PARALLELISM.
ARGON2_PARALLELISM = 1  # Use: Argon2id lanes. Type: int. Range: Positive integer.

# Password Generator Settings
PASSWORD_SYMBOLS = "!@#$%^&*~()-_=+[]{}|;:,.<>?/"  # Use: Symbol characters available to the generator. Type: str. Range: Printable ASCII punctuation.
PASSWORD_CHARSET = string.ascii_uppercase + string.ascii_lowercase + string.digits + PASSWORD_SYMBOLS  # Use: The 90 characters generated passwords are drawn from. Type: str. Range: Derived value.
PASSWORD_GENERATOR_DEFAULT_LENGTH = 16  # Use: Default length for generated passwords. Type: int. Range: PASSWORD_GENERATOR_MIN_LENGTH to PASSWORD_GENERATOR_MAX_LENGTH.
PASSWORD_GENERATOR_MIN_LENGTH = 8  # Use: Smallest length a caller should offer for generated passwords. Type: int. Range: Positive integer.
PASSWORD_GENERATOR_MAX_LENGTH = 64  # Use: Largest length a caller should offer for generated passwords. Type: int. Range: Positive integer.

# File and Directory Names
CONFIG_DIR_NAME = f".{APP_NAME}"  # Use: Hidden directory in the user's home directory holding the default vault. Type: str. Range: Derived value (".credvault").
DEFAULT_VAULT_FILE = "credentials.encrypted"  # Use: Default filename for the encrypted vault. Type: str. Range: Any valid filename.


def default_vault_path() -> str:
    """Get the default path for the encrypted vault file."""
    return os.path.join(os.path.expanduser("~"), CONFIG_DIR_NAME, DEFAULT_VAULT_FILE)
