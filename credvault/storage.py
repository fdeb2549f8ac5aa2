"""
Storage management for the credential vault.

Vault file layout:

    SALT(16 bytes)
    NONCE(12 bytes)
    CIPHERTEXT || TAG(16 bytes)

The plaintext is UTF-8 JSON of the form
``{"entries":[{"service":...,"username":...,"password":...}, ...]}``.
The salt is fixed when the vault is created and rewritten unchanged on every
save; the nonce is redrawn on every save. Saving overwrites the file in place,
so a crash mid-write can corrupt the vault.
"""

import os
import json
import logging
from typing import List, Dict, Tuple, Optional, Any
from dataclasses import dataclass, field, asdict, fields

from . import config
from .crypto import KeyDeriver, AuthenticatedCipher, AUTHENTICATION_FAILED
from .errors import (
    AuthenticationError,
    CorruptFileError,
    EncodingError,
    MalformedInputError,
    SerializationError,
    VaultIOError,
)
from .utils import restrict_file_permissions

logger = logging.getLogger(__name__)


@dataclass
class SecretEntry:
    """Represents a single stored credential."""
    service: str
    username: str
    password: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SecretEntry':
        """Create from dictionary, ignoring unknown keys."""
        if not isinstance(data, dict):
            raise EncodingError(f"Entry must be an object, got {type(data).__name__}")
        values = {}
        for f in fields(cls):
            value = data.get(f.name)
            if not isinstance(value, str):
                raise EncodingError(f"Entry field '{f.name}' is missing or not a string")
            values[f.name] = value
        return cls(**values)


@dataclass
class SecretCollection:
    """
    Ordered list of entries; insertion order is storage and display order.

    Entries are addressed by position. Removing or replacing entries shifts
    or invalidates indices captured earlier, so callers must re-read indices
    after every edit.
    """
    entries: List[SecretEntry] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.entries)

    def add(self, entry: SecretEntry) -> int:
        """Append an entry and return its index."""
        self.entries.append(entry)
        return len(self.entries) - 1

    def replace(self, index: int, entry: SecretEntry) -> None:
        self.entries[index] = entry

    def remove(self, index: int) -> SecretEntry:
        return self.entries.pop(index)

    def search(self, query: str) -> List[Tuple[int, SecretEntry]]:
        """Case-insensitive substring match on the service name."""
        needle = query.lower()
        return [(i, e) for i, e in enumerate(self.entries) if needle in e.service.lower()]

    def find_duplicates(self) -> List[List[Tuple[int, SecretEntry]]]:
        """Find entries with duplicate service and username."""
        from collections import defaultdict
        groups = defaultdict(list)
        for i, entry in enumerate(self.entries):
            groups[(entry.service.lower(), entry.username.lower())].append((i, entry))
        return [group for group in groups.values() if len(group) > 1]

    def to_dict(self) -> Dict[str, Any]:
        return {'entries': [e.to_dict() for e in self.entries]}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SecretCollection':
        if not isinstance(data, dict) or not isinstance(data.get('entries'), list):
            raise EncodingError("Vault payload has no 'entries' list")
        return cls(entries=[SecretEntry.from_dict(e) for e in data['entries']])


def serialize_collection(collection: SecretCollection) -> bytes:
    """Encode a collection as canonical compact UTF-8 JSON."""
    if not isinstance(collection, SecretCollection):
        raise SerializationError(f"Expected a SecretCollection, got {type(collection).__name__}")
    for i, entry in enumerate(collection.entries):
        if not isinstance(entry, SecretEntry):
            raise SerializationError(f"Entry {i} is not a SecretEntry")
        for f in fields(entry):
            if not isinstance(getattr(entry, f.name), str):
                raise SerializationError(f"Entry {i} field '{f.name}' is not a string")
    try:
        return json.dumps(collection.to_dict(), ensure_ascii=False, separators=(',', ':')).encode('utf-8')
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Failed to serialize: {e}") from e


def deserialize_collection(text: str) -> SecretCollection:
    """Parse the JSON payload of a decrypted vault."""
    try:
        data = json.loads(text)
    except (ValueError, RecursionError) as e:
        raise EncodingError(f"Failed to deserialize: {e}") from e
    return SecretCollection.from_dict(data)


class VaultStore:
    """
    An unlocked vault: the file path, its salt and the session cipher.

    Instances are only obtained through open(). There is no lock operation;
    discard the instance to end the session.
    """

    def __init__(self, filepath: str, salt: bytes, cipher: AuthenticatedCipher):
        self._filepath = filepath
        self._salt = salt
        self._cipher = cipher

    @property
    def filepath(self) -> str:
        return self._filepath

    @property
    def salt(self) -> bytes:
        return self._salt

    def is_persisted(self) -> bool:
        """Check whether the vault file exists on disk."""
        return os.path.exists(self._filepath)

    @classmethod
    def open(cls, master_password: str, filepath: Optional[str] = None,
             deriver: Optional[KeyDeriver] = None) -> Tuple['VaultStore', SecretCollection]:
        """
        Unlock an existing vault, or start a new one if the file is absent.

        A new vault gets a fresh salt and an empty collection; nothing is
        written until the first save().

        Args:
            master_password: The master password
            filepath: Path to the vault file, defaults to config.default_vault_path()
            deriver: Key deriver, defaults to Argon2id with config parameters

        Returns:
            (store, collection)

        Raises:
            VaultIOError, CorruptFileError, DerivationError,
            AuthenticationError, EncodingError
        """
        filepath = filepath or config.default_vault_path()
        deriver = deriver or KeyDeriver()

        if not os.path.exists(filepath):
            salt = deriver.generate_salt()
            cipher = AuthenticatedCipher(deriver.derive(master_password, salt))
            logger.info(f"Creating new vault at {filepath}")
            return cls(filepath, salt, cipher), SecretCollection()

        try:
            with open(filepath, 'rb') as f:
                data = f.read()
        except OSError as e:
            logger.error(f"Error reading vault file {filepath}: {e}", exc_info=True)
            raise VaultIOError(f"Failed to read file: {e}") from e

        if len(data) < config.MIN_FILE_SIZE:
            logger.warning(f"Vault file {filepath} is {len(data)} bytes, below the {config.MIN_FILE_SIZE}-byte minimum")
            raise CorruptFileError(f"File corrupted: {filepath} is too short to be a vault")

        salt, blob = data[:config.SALT_SIZE], data[config.SALT_SIZE:]
        cipher = AuthenticatedCipher(deriver.derive(master_password, salt))

        try:
            text = cipher.decrypt_text(blob)
        except (AuthenticationError, MalformedInputError) as e:
            logger.warning(f"Unlock failed for {filepath}: authentication error")
            raise AuthenticationError(AUTHENTICATION_FAILED) from e

        collection = deserialize_collection(text)
        logger.info(f"Unlocked vault {filepath} ({len(collection)} entries)")
        return cls(filepath, salt, cipher), collection

    def save(self, collection: SecretCollection) -> None:
        """
        Encrypt the collection and overwrite the vault file.

        The salt fixed at open() is always reused; the nonce is fresh. The
        collection itself is never modified, so a failed save can be retried.

        Raises:
            SerializationError, EncryptionError, VaultIOError
        """
        plaintext = serialize_collection(collection)
        encrypted = self._salt + self._cipher.encrypt(plaintext)

        try:
            directory = os.path.dirname(self._filepath)
            if directory:
                os.makedirs(directory, exist_ok=True)
            # New files are created owner-only; existing ones are tightened below.
            fd = os.open(self._filepath, os.O_WRONLY | os.O_CREAT | os.O_TRUNC | getattr(os, 'O_BINARY', 0), 0o600)
            with os.fdopen(fd, 'wb') as f:
                f.write(encrypted)
        except OSError as e:
            logger.error(f"Error saving vault file {self._filepath}: {e}", exc_info=True)
            raise VaultIOError(f"Failed to write: {e}") from e

        restrict_file_permissions(self._filepath)
        logger.info(f"Saved vault {self._filepath} ({len(collection)} entries, {len(encrypted)} bytes)")
