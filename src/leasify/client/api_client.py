"""
Leasify API Client

Handles all HTTP requests to the Leasify REST API: attaches the session's
bearer token, performs the login handshake, and turns failed responses into
ApiError. Transport errors from requests propagate unchanged.
"""
from functools import lru_cache
from typing import Any, Dict, List, Mapping, Optional, Union

import requests
from pydantic import TypeAdapter

from config.settings import settings
from src.leasify.client.errors import ApiError, DEFAULT_ERROR_MESSAGE, login_error_message
from src.leasify.client.models import (
    CreateReportRequest,
    LoginRequest,
    LoginResponse,
    PingResponse,
    Report,
    Template,
    User,
)
from src.leasify.client.session_store import SessionStore
from src.leasify.client.tokens import extract_token, make_placeholder_token
from src.leasify.utils.logger import get_logger

logger = get_logger(__name__)


@lru_cache(maxsize=None)
def _adapter(response_model: Any) -> TypeAdapter:
    return TypeAdapter(response_model)


def _json_or_empty(response: requests.Response) -> Dict[str, Any]:
    """Parse a JSON object body, treating anything unparseable as {}."""
    try:
        data = response.json()
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}


class LeasifyClient:
    """Client for interacting with the Leasify API."""

    def __init__(
        self,
        session_store: SessionStore,
        base_url: Optional[str] = None,
        http_session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize API client.

        Args:
            session_store: Store holding the bearer token
            base_url: Base URL for API endpoints (default: settings.leasify_api_base_url)
            http_session: Preconfigured requests session (for testing)
            timeout: Per-request timeout in seconds (default: settings.request_timeout_seconds)
        """
        self.session_store = session_store
        self.base_url = (base_url or settings.leasify_api_base_url).rstrip("/")
        self.session = http_session or requests.Session()
        self.timeout = timeout if timeout is not None else settings.request_timeout_seconds

    def _send(
        self,
        method: str,
        endpoint: str,
        headers: Dict[str, str],
        body: Any = None,
    ) -> requests.Response:
        url = f"{self.base_url}{endpoint}"
        logger.debug("api_request", method=method, endpoint=endpoint)
        response = self.session.request(
            method,
            url,
            headers=headers,
            json=body,
            timeout=self.timeout,
        )
        logger.debug("api_response", method=method, endpoint=endpoint, status_code=response.status_code)
        return response

    def request(
        self,
        endpoint: str,
        method: str = "GET",
        body: Any = None,
        headers: Optional[Mapping[str, str]] = None,
        response_model: Any = None,
    ) -> Any:
        """
        Make an authenticated request to the API.

        Args:
            endpoint: API endpoint path (e.g. "/reports")
            method: HTTP method
            body: JSON-serializable request body
            headers: Extra headers; these override the defaults
            response_model: Type to validate the JSON response against

        Returns:
            Parsed JSON response, validated as response_model when given

        Raises:
            ApiError: If the API answers with a non-success status
            requests.RequestException: If the request never got a response
        """
        request_headers = {"Content-Type": "application/json"}
        if self.session_store.is_present():
            request_headers["Authorization"] = f"Bearer {self.session_store.token}"
        if headers:
            request_headers.update(headers)

        response = self._send(method, endpoint, request_headers, body)

        if not response.ok:
            error_data = _json_or_empty(response)
            logger.warning(
                "api_request_failed",
                method=method,
                endpoint=endpoint,
                status_code=response.status_code,
            )
            raise ApiError(
                response.status_code,
                error_data.get("message") or DEFAULT_ERROR_MESSAGE,
                error_data.get("errors"),
            )

        if response.status_code == 204:
            return None

        data = response.json()
        if response_model is None:
            return data
        return _adapter(response_model).validate_python(data)

    def login(self, email: str, password: str, device_name: str) -> LoginResponse:
        """
        Exchange email and password for a bearer token.

        The token is taken from the response body or headers; if the response
        carries none, a local placeholder token is stored so the session can
        continue in demo mode. The user is then looked up with the new token.

        Args:
            email: Account email
            password: Account password
            device_name: Label for the token on the server side

        Returns:
            Token and user of the new session

        Raises:
            ApiError: If login or the follow-up who-am-I lookup fails
        """
        logger.info("login_started", endpoint="/login")
        payload = LoginRequest(email=email, password=password, device_name=device_name)
        response = self._send(
            "POST",
            "/login",
            {"Content-Type": "application/json"},
            payload.model_dump(),
        )

        if not response.ok:
            error_data = _json_or_empty(response)
            message = login_error_message(response.status_code, response.reason, error_data)
            logger.error("login_failed", status_code=response.status_code, error=message)
            raise ApiError(response.status_code, message, error_data.get("errors"))

        token = extract_token(_json_or_empty(response), response.headers)
        if token is None:
            logger.warning("login_token_missing", fallback="placeholder")
            token = make_placeholder_token()

        self.session_store.save(token)
        user = self.whoami()
        logger.info("login_successful", user_id=user.id)
        return LoginResponse(token=token, user=user)

    def whoami(self) -> User:
        """
        Get the user behind the current token.

        Returns:
            Current user
        """
        return self.request("/whoami", response_model=User)

    def ping(self) -> PingResponse:
        """
        Check API liveness.

        Returns:
            Ping message and server timestamp
        """
        return self.request("/ping", response_model=PingResponse)

    def list_templates(self) -> List[Template]:
        """
        List report templates.

        Returns:
            All templates visible to the user
        """
        return self.request("/templates", response_model=List[Template])

    def list_reports(self) -> List[Report]:
        """
        List reports.

        Returns:
            All reports visible to the user, unfiltered and unsorted
        """
        return self.request("/reports", response_model=List[Report])

    def list_template_reports(self, template_id: int) -> List[Report]:
        """
        List reports generated from one template.

        Args:
            template_id: Template identifier

        Returns:
            Reports of the template
        """
        return self.request(f"/template/{template_id}/reports", response_model=List[Report])

    def get_report(self, report_id: int) -> Report:
        """
        Get full report information.

        Args:
            report_id: Report identifier

        Returns:
            Report
        """
        return self.request(f"/report/{report_id}", response_model=Report)

    def create_report(self, report: Union[CreateReportRequest, Mapping[str, Any]]) -> Report:
        """
        Create a report.

        Args:
            report: Report definition; mappings are validated into CreateReportRequest

        Returns:
            The report as created by the server
        """
        if not isinstance(report, CreateReportRequest):
            report = CreateReportRequest.model_validate(report)
        logger.info("creating_report", name=report.name, type=report.type, template_id=report.template_id)
        return self.request("/report", method="POST", body=report.to_payload(), response_model=Report)

    def logout(self) -> None:
        """Drop the current token. The server is not contacted."""
        self.session_store.clear()
        logger.info("logged_out")

    def is_authenticated(self) -> bool:
        return self.session_store.is_present()
