"""
credvault - local encrypted credential vault.

A single file holds an ordered list of (service, username, password) entries,
encrypted with AES-256-GCM under a key derived from a master password with
Argon2id. Presentation layers call unlock(), persist() and
generate_password(); failures are raised as VaultError subclasses.
"""

from .errors import (
    VaultError,
    VaultIOError,
    CorruptFileError,
    DerivationError,
    MalformedInputError,
    AuthenticationError,
    EncodingError,
    SerializationError,
    EncryptionError,
)
from .storage import SecretEntry, SecretCollection, VaultStore
from .vault_manager import unlock, persist, generate_password

__all__ = [
    "VaultError",
    "VaultIOError",
    "CorruptFileError",
    "DerivationError",
    "MalformedInputError",
    "AuthenticationError",
    "EncodingError",
    "SerializationError",
    "EncryptionError",
    "SecretEntry",
    "SecretCollection",
    "VaultStore",
    "unlock",
    "persist",
    "generate_password",
]
