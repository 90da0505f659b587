"""Password hashing domain service."""

import asyncio

import bcrypt
import logfire

from linkshare.config import AuthSettings
from linkshare.domain.error import PasswordTooLongError

from .base import Service

# bcrypt only reads the first 72 bytes of its input
MAX_PASSWORD_BYTES = 72


class PasswordService(Service):
    """One-way salted password hashing with bcrypt.

    Hashing is CPU bound, so it runs in a worker thread to keep the event
    loop serving other requests.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.rounds = auth_settings.bcrypt_rounds

    async def hash_password(self, password: str) -> str:
        """Hash a password with a fresh salt.

        Args:
            password: Plain password

        Returns:
            bcrypt hash string (salt and cost embedded)

        Raises:
            PasswordTooLongError: If the password exceeds 72 UTF-8 bytes
        """
        encoded = self._encode(password)
        hashed = await asyncio.to_thread(
            bcrypt.hashpw, encoded, bcrypt.gensalt(self.rounds)
        )
        return hashed.decode("utf-8")

    async def verify_password(self, password: str, password_hash: str) -> bool:
        """Check a password against a stored hash.

        Args:
            password: Plain password supplied by the caller
            password_hash: Stored bcrypt hash

        Returns:
            True if the password matches

        Raises:
            PasswordTooLongError: If the password exceeds 72 UTF-8 bytes
        """
        encoded = self._encode(password)
        try:
            return await asyncio.to_thread(
                bcrypt.checkpw, encoded, password_hash.encode("utf-8")
            )
        except ValueError as e:
            logfire.warn("Stored password hash is unreadable", error=str(e))
            return False

    @staticmethod
    def _encode(password: str) -> bytes:
        encoded = password.encode("utf-8")
        if len(encoded) > MAX_PASSWORD_BYTES:
            raise PasswordTooLongError(MAX_PASSWORD_BYTES)
        return encoded
