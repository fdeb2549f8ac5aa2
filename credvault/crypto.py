"""
Cryptographic operations for the credential vault.

Key derivation uses Argon2id; payloads are sealed with AES-256-GCM using a
fresh random nonce on every call. Never log keys, plaintext or ciphertext.
"""

import os
import logging
from argon2 import Type
from argon2.low_level import hash_secret_raw
from argon2.exceptions import HashingError
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from cryptography.exceptions import InvalidTag

from . import config
from .errors import (
    AuthenticationError,
    DerivationError,
    EncodingError,
    EncryptionError,
    MalformedInputError,
)

logger = logging.getLogger(__name__)

AUTHENTICATION_FAILED = "Failed to decrypt vault (wrong master password or tampered file)"


class KeyDeriver:
    """Turns a master password and a salt into a symmetric key."""

    SALT_SIZE = config.SALT_SIZE
    KEY_SIZE = config.KEY_SIZE

    def __init__(self,
                 time_cost: int = config.ARGON2_TIME_COST,
                 memory_cost: int = config.ARGON2_MEMORY_COST,
                 parallelism: int = config.ARGON2_PARALLELISM):
        self.time_cost = time_cost
        self.memory_cost = memory_cost
        self.parallelism = parallelism

    @classmethod
    def generate_salt(cls) -> bytes:
        """Generate a cryptographically secure random salt."""
        return os.urandom(cls.SALT_SIZE)

    def derive(self, password: str, salt: bytes) -> bytes:
        """
        Derive an encryption key from a password using Argon2id.

        The same (password, salt) pair always yields the same key, which is
        how an unlock attempt is checked: a wrong password produces a key
        that later fails authentication.

        Args:
            password: The master password
            salt: Salt stored at the head of the vault file

        Returns:
            32-byte encryption key

        Raises:
            DerivationError: If the Argon2 primitive rejects its inputs
        """
        try:
            return hash_secret_raw(
                secret=password.encode('utf-8'),
                salt=salt,
                time_cost=self.time_cost,
                memory_cost=self.memory_cost,
                parallelism=self.parallelism,
                hash_len=self.KEY_SIZE,
                type=Type.ID,
            )
        except (HashingError, ValueError, TypeError) as e:
            logger.error(f"Key derivation failed: {e}")
            raise DerivationError(f"Key derivation failure: {e}") from e


class AuthenticatedCipher:
    """AES-256-GCM bound to one derived key for the lifetime of a session."""

    NONCE_SIZE = config.NONCE_SIZE
    TAG_SIZE = config.TAG_SIZE

    def __init__(self, key: bytes):
        if not isinstance(key, bytes) or len(key) != config.KEY_SIZE:
            raise DerivationError(f"Derived key must be exactly {config.KEY_SIZE} bytes")
        self._key = key

    def encrypt(self, plaintext: bytes) -> bytes:
        """
        Encrypt data under a freshly drawn nonce.

        Returns:
            nonce || ciphertext || tag
        """
        nonce = os.urandom(self.NONCE_SIZE)
        try:
            encryptor = Cipher(algorithms.AES(self._key), modes.GCM(nonce)).encryptor()
            ciphertext = encryptor.update(plaintext) + encryptor.finalize()
        except (TypeError, ValueError) as e:
            raise EncryptionError(f"Failed to encrypt: {e}") from e
        return nonce + ciphertext + encryptor.tag

    def decrypt(self, blob: bytes) -> bytes:
        """
        Verify and decrypt a blob produced by encrypt().

        Raises:
            MalformedInputError: If the blob cannot even hold a nonce
            AuthenticationError: If the tag does not verify
        """
        if len(blob) < self.NONCE_SIZE:
            raise MalformedInputError("Corrupted data: encrypted blob is shorter than a nonce")

        nonce, body = blob[:self.NONCE_SIZE], blob[self.NONCE_SIZE:]
        # A truncated tag is indistinguishable from a forged one.
        if len(body) < self.TAG_SIZE:
            raise AuthenticationError(AUTHENTICATION_FAILED)
        ciphertext, tag = body[:-self.TAG_SIZE], body[-self.TAG_SIZE:]

        decryptor = Cipher(algorithms.AES(self._key), modes.GCM(nonce, tag)).decryptor()
        try:
            return decryptor.update(ciphertext) + decryptor.finalize()
        except InvalidTag as e:
            raise AuthenticationError(AUTHENTICATION_FAILED) from e

    def decrypt_text(self, blob: bytes) -> str:
        """Decrypt a blob and decode the plaintext as UTF-8."""
        plaintext = self.decrypt(blob)
        try:
            return plaintext.decode('utf-8')
        except UnicodeDecodeError as e:
            raise EncodingError(f"Invalid UTF-8 sequence: {e}") from e
