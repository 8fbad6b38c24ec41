"""
Session Store

Single source of truth for the current bearer token. The token lives in
memory and in one durable slot so a session survives restarts.
"""
from pathlib import Path
from typing import Optional, Protocol

from src.leasify.utils.logger import get_logger

logger = get_logger(__name__)


class TokenStorage(Protocol):
    """Durable key-value slot holding one token."""

    def read(self) -> Optional[str]:
        ...

    def write(self, token: str) -> None:
        ...

    def delete(self) -> None:
        ...


class FileTokenStorage:
    """Token stored as plain text in a single file."""

    def __init__(self, path: Path):
        self.path = Path(path).expanduser()

    def read(self) -> Optional[str]:
        if not self.path.exists():
            return None
        token = self.path.read_text(encoding="utf-8").strip()
        return token or None

    def write(self, token: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(token, encoding="utf-8")

    def delete(self) -> None:
        self.path.unlink(missing_ok=True)


class MemoryTokenStorage:
    """Non-durable slot for tests and demo mode."""

    def __init__(self, token: Optional[str] = None):
        self.token = token

    def read(self) -> Optional[str]:
        return self.token

    def write(self, token: str) -> None:
        self.token = token

    def delete(self) -> None:
        self.token = None


class SessionStore:
    """
    Holds the one live credential.

    The store is restored from storage on construction. It performs no
    network calls and never checks whether the token is still accepted
    remotely; a stale token shows up as a 401 on the next request.
    """

    def __init__(self, storage: TokenStorage):
        """
        Initialize the store and restore any saved token.

        Args:
            storage: Durable slot backing the store
        """
        self.storage = storage
        self._token: Optional[str] = None
        self.load()

    @property
    def token(self) -> Optional[str]:
        return self._token

    def load(self) -> Optional[str]:
        """
        Read the token from durable storage into memory.

        Returns:
            The stored token, or None if the slot is empty
        """
        self._token = self.storage.read()
        logger.debug("session_loaded", has_token=self._token is not None)
        return self._token

    def save(self, token: str) -> None:
        """Replace the current token, in memory and in storage."""
        self.storage.write(token)
        self._token = token
        logger.debug("session_saved")

    def clear(self) -> None:
        """Forget the current token, in memory and in storage."""
        self.storage.delete()
        self._token = None
        logger.debug("session_cleared")

    def is_present(self) -> bool:
        return self._token is not None
