"""
Exception hierarchy for vault operations.

Every failure surfaced to a caller is a VaultError carrying a human-readable
message (str(error)) and a short machine-readable ``kind``.
"""


class VaultError(Exception):
    """Base class for all vault failures."""
    kind = "vault"


class VaultIOError(VaultError):
    """The vault file could not be read or written."""
    kind = "io"


class CorruptFileError(VaultError):
    """The vault file exists but is shorter than the minimum envelope."""
    kind = "corrupt_file"


class DerivationError(VaultError):
    """The key-derivation primitive failed."""
    kind = "derivation"


class MalformedInputError(VaultError):
    """An encrypted blob is too short to contain a nonce."""
    kind = "malformed_input"


class AuthenticationError(VaultError):
    """Tag verification failed: wrong master password or tampered data."""
    kind = "authentication"


class EncodingError(VaultError):
    """Decrypted bytes are not valid text or not a valid secret collection."""
    kind = "encoding"


class SerializationError(VaultError):
    """The secret collection could not be serialized for saving."""
    kind = "serialization"


class EncryptionError(VaultError):
    """The encryption primitive failed."""
    kind = "encryption"
