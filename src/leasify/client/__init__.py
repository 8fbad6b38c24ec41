"""
Leasify Client Package

Session store, API client, and authentication state for the Leasify API.
"""

from .api_client import LeasifyClient
from .auth import AuthManager
from .errors import ApiError
from .session_store import FileTokenStorage, MemoryTokenStorage, SessionStore

__all__ = [
    "LeasifyClient",
    "AuthManager",
    "ApiError",
    "FileTokenStorage",
    "MemoryTokenStorage",
    "SessionStore",
]
