"""
Random password generation.
"""

import secrets

from . import config


class SecretGenerator:
    """Draws passwords uniformly from a fixed printable character set."""

    CHARSET = config.PASSWORD_CHARSET

    def generate(self, length: int) -> str:
        """
        Generate a password of exactly ``length`` characters.

        Each character is drawn independently with ``secrets.choice``; no
        character-class guarantees are made. A length of 0 yields "".
        """
        if isinstance(length, bool) or not isinstance(length, int):
            raise ValueError(f"Password length must be an integer, got {length!r}")
        if length < 0:
            raise ValueError(f"Password length must not be negative, got {length}")
        return ''.join(secrets.choice(self.CHARSET) for _ in range(length))
