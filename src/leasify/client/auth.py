"""
Authentication State

Keeps the signed-in user for the lifetime of a dashboard session and runs
the startup bootstrap that restores a saved token.
"""
from typing import Optional

import requests
from pydantic import ValidationError

from config.settings import settings
from src.leasify.client.errors import ApiError
from src.leasify.client.models import User
from src.leasify.client.tokens import is_placeholder_token
from src.leasify.utils.logger import get_logger

logger = get_logger(__name__)


class AuthManager:
    """
    Signed-in state on top of a Leasify client.

    The user is cached in memory only. A session counts as authenticated
    once a user is known, not merely when a token is stored.
    """

    def __init__(self, client, device_name: Optional[str] = None):
        """
        Initialize the auth manager.

        Args:
            client: LeasifyClient (or MockLeasifyClient in demo mode)
            device_name: Device label sent on login (default: settings.device_name)
        """
        self.client = client
        self.device_name = device_name or settings.device_name
        self.user: Optional[User] = None
        self.bootstrapped = False

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    @property
    def has_placeholder_token(self) -> bool:
        """True when login succeeded but the server handed out no token."""
        return is_placeholder_token(self.client.session_store.token)

    def bootstrap(self) -> Optional[User]:
        """
        Restore the session from a saved token.

        Without a saved token nothing is requested. If the who-am-I lookup
        fails, or returns a body that is not a user, the token is treated as
        stale: it is cleared and the session falls back to signed-out
        without raising.

        Returns:
            The restored user, or None
        """
        self.bootstrapped = True
        if not self.client.is_authenticated():
            logger.info("bootstrap_skipped", reason="no_stored_token")
            return None

        try:
            self.user = self.client.whoami()
        except (ApiError, ValidationError, requests.RequestException) as e:
            logger.warning(
                "bootstrap_failed",
                error=str(e),
                error_type=type(e).__name__,
            )
            self.client.logout()
            self.user = None
            return None

        logger.info("bootstrap_complete", user_id=self.user.id)
        return self.user

    def login(self, email: str, password: str) -> User:
        """
        Sign in and remember the user.

        Raises:
            ApiError: If the API rejects the login
            requests.RequestException: If the API cannot be reached
        """
        response = self.client.login(email, password, self.device_name)
        self.user = response.user
        return self.user

    def logout(self) -> None:
        self.client.logout()
        self.user = None
