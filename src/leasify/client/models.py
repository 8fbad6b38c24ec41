"""
Leasify API Data Models

Pydantic models for the payloads exchanged with the Leasify API.

Response models are read-only views of what the server returned: every field
is optional, unknown fields are kept, and date values stay as the strings the
server sent. Each model remembers the payload it was validated from, so
``to_dict()`` gives it back unchanged even where a field was coerced.
"""
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, model_validator

ReportType = Literal["IFRS16", "LOCALGAAP", "RKRR5", "GENERATOR"]

REPORT_TYPES: List[str] = ["IFRS16", "LOCALGAAP", "RKRR5", "GENERATOR"]
REPORT_STATUSES: List[str] = ["pending", "processing", "finished", "failed"]


def _plain(value: Any) -> Any:
    if isinstance(value, ApiModel):
        return value.to_dict()
    if isinstance(value, dict):
        return {key: _plain(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_plain(item) for item in value]
    return value


class ApiModel(BaseModel):
    """Base for models returned by the API."""

    model_config = ConfigDict(extra="allow", frozen=True)

    _payload: Optional[Dict[str, Any]] = PrivateAttr(default=None)

    @model_validator(mode="wrap")
    @classmethod
    def keep_received_payload(cls, data: Any, handler):
        model = handler(data)
        if isinstance(data, dict) and isinstance(model, ApiModel):
            model._payload = _plain(data)
        return model

    def to_dict(self) -> Dict[str, Any]:
        """Return the payload as received from the server."""
        if self._payload is not None:
            return _plain(self._payload)
        return self.model_dump(exclude_unset=True)


class User(ApiModel):
    """
    Identity returned by the who-am-I lookup.

    Attributes:
        id: User identifier
        email: Login email
        name: Display name
        company: Company name, or a ``{id, name}`` object
    """

    id: Optional[int] = None
    email: Optional[str] = None
    name: Optional[str] = None
    company: Optional[Union[str, Dict[str, Any]]] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @property
    def company_name(self) -> Optional[str]:
        if isinstance(self.company, dict):
            return self.company.get("name")
        return self.company


class Template(ApiModel):
    """Report template; templates nest through ``children``."""

    id: Optional[int] = None
    name: Optional[str] = None
    generator_template: Any = None
    children: Optional[List["Template"]] = Field(default_factory=list)
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class Report(ApiModel):
    """
    Lease-accounting report as listed or fetched by id.

    Attributes:
        type: One of REPORT_TYPES
        break_at: Break date (YYYY-MM-DD)
        months: Reporting duration in months
        parent_id: Set on child reports generated under another report
        status: One of REPORT_STATUSES
    """

    id: Optional[int] = None
    name: Optional[str] = None
    type: Optional[str] = None
    template_id: Optional[int] = None
    template: Optional[Template] = None
    break_at: Optional[str] = None
    months: Optional[int] = None
    years: Optional[int] = None
    language: Optional[str] = None
    linked_report_id: Optional[int] = None
    parent_id: Optional[int] = None
    status: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class PingResponse(ApiModel):
    """Liveness check response."""

    message: Optional[str] = None
    timestamp: Optional[str] = None


class CreateReportRequest(BaseModel):
    """Body of ``POST /report``."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1)
    type: ReportType
    template_id: int
    break_at: str = Field(..., description="Break date (YYYY-MM-DD)")
    months: int = Field(..., ge=1)
    linked_report_id: Optional[int] = None
    years: Optional[int] = Field(None, ge=1)
    language: Optional[str] = None
    linked_reports: Optional[List[str]] = None
    webhook: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        """Serialize for the wire, leaving out optionals that were not given."""
        return self.model_dump(exclude_none=True)


class LoginRequest(BaseModel):
    """Body of ``POST /login``."""

    email: str
    password: str
    device_name: str


class LoginResponse(BaseModel):
    """Outcome of a completed login handshake."""

    token: str
    user: User
