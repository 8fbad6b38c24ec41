"""
Bearer Token Extraction

The login endpoint is inconsistent about where it puts the token, so the
lookup order below must be kept as is.
"""
import time
from typing import Any, Mapping, Optional

BODY_TOKEN_FIELDS = ("bearer", "token", "access_token")
HEADER_TOKEN_FIELDS = ("Authorization", "X-Auth-Token", "Access-Token")
BEARER_PREFIX = "Bearer "
PLACEHOLDER_PREFIX = "demo-token-"


def extract_token(body: Mapping[str, Any], headers: Mapping[str, str]) -> Optional[str]:
    """
    Find the bearer token in a login response.

    Body fields are checked first (bearer, token, access_token), then headers
    (Authorization, X-Auth-Token, Access-Token). A "Bearer " prefix on a header
    value is stripped.

    Args:
        body: Parsed JSON body ({} when the response had none)
        headers: Response headers

    Returns:
        The token, or None if the response carries none
    """
    for field in BODY_TOKEN_FIELDS:
        value = body.get(field)
        if value:
            return str(value)

    lowered = {key.lower(): value for key, value in headers.items()}
    for name in HEADER_TOKEN_FIELDS:
        value = lowered.get(name.lower())
        if value:
            return value.replace(BEARER_PREFIX, "", 1)

    return None


def make_placeholder_token() -> str:
    """Local stand-in token for responses without one; the API will not accept it."""
    return f"{PLACEHOLDER_PREFIX}{int(time.time() * 1000)}"


def is_placeholder_token(token: Optional[str]) -> bool:
    return bool(token) and token.startswith(PLACEHOLDER_PREFIX)
