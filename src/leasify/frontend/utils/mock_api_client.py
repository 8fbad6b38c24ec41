"""
Mock API Client for Streamlit Demo Mode

Allows the frontend to run without a live backend by serving static demo data
through the same interface as LeasifyClient.
"""
import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from src.leasify.client.errors import ApiError, LOGIN_MESSAGES
from src.leasify.client.models import (
    CreateReportRequest,
    LoginResponse,
    PingResponse,
    Report,
    Template,
    User,
)
from src.leasify.client.session_store import MemoryTokenStorage, SessionStore
from src.leasify.client.tokens import make_placeholder_token
from src.leasify.utils.logger import get_logger

logger = get_logger(__name__)

DEMO_DATA_PATH = Path(__file__).parent.parent / "data" / "demo_data.json"


class MockLeasifyClient:
    """Mock client that serves bundled demo reports and templates."""

    def __init__(self, session_store: Optional[SessionStore] = None, data_path: Optional[Path] = None):
        self.base_url = "mock://leasify"
        self.session_store = session_store or SessionStore(MemoryTokenStorage())
        self.data_path = data_path or DEMO_DATA_PATH
        self._load_data()

    def _load_data(self):
        """Load demo data."""
        if not self.data_path.exists():
            logger.warning("demo_data_missing", path=str(self.data_path))
            self.data = {"user": {}, "templates": [], "reports": []}
            return

        with open(self.data_path, "r", encoding="utf-8") as f:
            self.data = json.load(f)

    def _require_session(self) -> None:
        if not self.session_store.is_present():
            raise ApiError(401, "Unauthenticated.")

    def login(self, email: str, password: str, device_name: str) -> LoginResponse:
        if not email or not password:
            raise ApiError(401, LOGIN_MESSAGES[401])
        token = make_placeholder_token()
        self.session_store.save(token)
        user = self.whoami()
        logger.info("demo_login", device_name=device_name)
        return LoginResponse(token=token, user=user)

    def whoami(self) -> User:
        self._require_session()
        return User.model_validate(self.data.get("user", {}))

    def ping(self) -> PingResponse:
        return PingResponse(message="pong", timestamp=datetime.now(timezone.utc).isoformat())

    def list_templates(self) -> List[Template]:
        self._require_session()
        return [Template.model_validate(t) for t in self.data.get("templates", [])]

    def list_reports(self) -> List[Report]:
        self._require_session()
        return [Report.model_validate(r) for r in self.data.get("reports", [])]

    def list_template_reports(self, template_id: int) -> List[Report]:
        return [r for r in self.list_reports() if r.template_id == template_id]

    def get_report(self, report_id: int) -> Report:
        for report in self.list_reports():
            if report.id == report_id:
                return report
        raise ApiError(404, "Report not found")

    def create_report(self, report: Union[CreateReportRequest, Mapping[str, Any]]) -> Report:
        self._require_session()
        if not isinstance(report, CreateReportRequest):
            report = CreateReportRequest.model_validate(report)

        reports = self.data.setdefault("reports", [])
        template = self._find_template(report.template_id)
        if template is None:
            raise ApiError(422, "The given data was invalid.", {"template_id": ["The selected template id is invalid."]})

        now = datetime.now(timezone.utc).isoformat()
        record: Dict[str, Any] = {
            **report.to_payload(),
            "id": max((r.get("id", 0) for r in reports), default=0) + 1,
            "template": template,
            "status": "pending",
            "created_at": now,
            "updated_at": now,
        }
        reports.append(record)
        return Report.model_validate(record)

    def _find_template(self, template_id: int) -> Optional[Dict[str, Any]]:
        stack = list(self.data.get("templates", []))
        while stack:
            node = stack.pop()
            if node.get("id") == template_id:
                return node
            stack.extend(node.get("children", []))
        return None

    def logout(self) -> None:
        self.session_store.clear()

    def is_authenticated(self) -> bool:
        return self.session_store.is_present()
