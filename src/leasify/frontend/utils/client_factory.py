"""
Client Factory

Builds the client stack the dashboard runs on: the live Leasify client with a
file-backed session, or the demo client with an in-memory one.
"""
from pathlib import Path
from typing import Optional

from config.settings import settings
from src.leasify.client.api_client import LeasifyClient
from src.leasify.client.auth import AuthManager
from src.leasify.client.session_store import FileTokenStorage, MemoryTokenStorage, SessionStore
from src.leasify.frontend.utils.mock_api_client import MockLeasifyClient
from src.leasify.utils.logger import get_logger

logger = get_logger(__name__)


def build_auth_manager(
    demo_mode: Optional[bool] = None,
    token_file: Optional[Path] = None,
) -> AuthManager:
    """
    Create the auth manager and its client.

    Args:
        demo_mode: Serve demo data instead of the live API (default: settings.demo_mode)
        token_file: Durable token location (default: settings.token_file)

    Returns:
        AuthManager wrapping the selected client
    """
    if demo_mode is None:
        demo_mode = settings.demo_mode

    if demo_mode:
        logger.info("client_created", mode="demo")
        client = MockLeasifyClient(SessionStore(MemoryTokenStorage()))
    else:
        store = SessionStore(FileTokenStorage(token_file or settings.token_file))
        client = LeasifyClient(store)
        logger.info("client_created", mode="live", base_url=client.base_url)

    return AuthManager(client)
