"""
Caller-facing entry points used by a presentation layer.

The caller owns the SecretCollection between calls; nothing here keeps a
reference to it.
"""

from typing import Optional, Tuple

from . import config
from .generator import SecretGenerator
from .storage import SecretCollection, VaultStore

_generator = SecretGenerator()


def unlock(master_password: str, filepath: Optional[str] = None) -> Tuple[VaultStore, SecretCollection]:
    """Open the vault at filepath (or the default path) with the master password."""
    return VaultStore.open(master_password, filepath)


def persist(handle: VaultStore, collection: SecretCollection) -> None:
    """Write the caller's collection back through an unlocked handle."""
    handle.save(collection)


def generate_password(length: int = config.PASSWORD_GENERATOR_DEFAULT_LENGTH) -> str:
    return _generator.generate(length)
