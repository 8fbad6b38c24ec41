"""
Frontend Utilities

Helper modules for client setup, report shaping, and formatting.
"""
from src.leasify.frontend.utils.client_factory import build_auth_manager
from src.leasify.frontend.utils.mock_api_client import MockLeasifyClient
from src.leasify.frontend.utils.formatting import (
    format_date,
    format_datetime,
    format_duration,
    get_status_color,
    get_type_color,
    get_type_label,
)
from src.leasify.frontend.utils.report_view import (
    Page,
    build_create_request,
    filter_reports,
    page_window,
    paginate,
    prepend_report,
    template_options,
    visible_reports,
)

__all__ = [
    "build_auth_manager",
    "MockLeasifyClient",
    "format_date",
    "format_datetime",
    "format_duration",
    "get_status_color",
    "get_type_color",
    "get_type_label",
    "Page",
    "build_create_request",
    "filter_reports",
    "page_window",
    "paginate",
    "prepend_report",
    "template_options",
    "visible_reports",
]
