"""
Leasify Report Dashboard

Main Streamlit application for listing, inspecting and creating
lease-accounting reports through the Leasify API.
"""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent.parent.parent))

import requests
import streamlit as st
from pydantic import ValidationError

from config.settings import settings
from src.leasify.client.auth import AuthManager
from src.leasify.client.errors import ApiError
from src.leasify.client.models import Report
from src.leasify.frontend.components.charts import (
    create_status_distribution_chart,
    create_type_distribution_chart,
)
from src.leasify.frontend.components.details import load_report_details, render_report_details
from src.leasify.frontend.components.filters import render_report_filters
from src.leasify.frontend.components.forms import render_create_report_form, render_login_form
from src.leasify.frontend.components.tables import render_export_button, render_reports_table
from src.leasify.frontend.utils import (
    build_auth_manager,
    filter_reports,
    page_window,
    paginate,
    prepend_report,
    visible_reports,
)
from src.leasify.utils.logger import get_logger, setup_logging

logger = get_logger(__name__)

# Page configuration
st.set_page_config(
    page_title="ACME - Report Management",
    page_icon="",
    layout="wide",
    initial_sidebar_state="expanded",
)

SESSION_DEFAULTS = {
    "reports": [],
    "templates": [],
    "current_page": 1,
    "table_nonce": 0,
    "details": None,
}


def init_session() -> None:
    if "logging_configured" not in st.session_state:
        setup_logging()
        st.session_state.logging_configured = True
    for key, default in SESSION_DEFAULTS.items():
        if key not in st.session_state:
            st.session_state[key] = default


def get_auth_manager() -> AuthManager:
    """Auth manager for this browser session, bootstrapped on first use."""
    if "auth" not in st.session_state:
        st.session_state.auth = build_auth_manager()
    auth = st.session_state.auth
    if not auth.bootstrapped:
        with st.spinner("Restoring session..."):
            auth.bootstrap()
    return auth


def reset_dashboard_state() -> None:
    for key, default in SESSION_DEFAULTS.items():
        st.session_state[key] = default


def load_data(auth: AuthManager) -> None:
    """Refresh reports and templates; keep the previous data if the API fails."""
    try:
        st.session_state.reports = auth.client.list_reports()
        st.session_state.templates = auth.client.list_templates()
    except ApiError as e:
        logger.error("dashboard_load_failed", status_code=e.status, error=e.message)
        if e.status == 401:
            auth.logout()
            reset_dashboard_state()
            st.rerun()
        st.toast(f"Failed to load reports: {e.message}")
    except requests.RequestException as e:
        logger.error("dashboard_load_failed", error=str(e), error_type=type(e).__name__)
        st.toast("Failed to load reports. Retrying shortly.")
    except ValidationError as e:
        logger.error("dashboard_load_invalid_response", error_count=e.error_count())
        st.toast("Failed to load reports: unexpected response from the Leasify API.")


@st.dialog("Create New Report", width="large")
def create_report_dialog(auth: AuthManager) -> None:
    report = render_create_report_form(auth.client, st.session_state.templates)
    if report is not None:
        st.session_state.reports = prepend_report(st.session_state.reports, report)
        st.session_state.current_page = 1
        st.rerun()


def render_login_page(auth: AuthManager) -> None:
    left, right = st.columns([3, 2], gap="large")

    with left:
        st.title("ACME")
        st.subheader("Professional Lease Accounting")
        st.markdown(
            "Streamlined lease accounting reports powered by the Leasify API. "
            "Generate, manage, and track your IFRS compliance reports with ease."
        )
        if settings.demo_mode:
            st.info("Demo mode: any email and password will sign you in with sample data.")

    with right:
        st.subheader("Sign in to your account")
        if render_login_form(auth):
            reset_dashboard_state()
            st.rerun()


def render_pagination(page_number: int, total_pages: int) -> None:
    numbers = page_window(page_number, total_pages)
    cols = st.columns(len(numbers) + 2)

    if cols[0].button("Previous", disabled=page_number <= 1, key="page_prev"):
        st.session_state.current_page = page_number - 1
        st.rerun(scope="fragment")

    for col, number in zip(cols[1:-1], numbers):
        button_type = "primary" if number == page_number else "secondary"
        if col.button(str(number), type=button_type, key=f"page_{number}"):
            st.session_state.current_page = number
            st.rerun(scope="fragment")

    if cols[-1].button("Next", disabled=page_number >= total_pages, key="page_next"):
        st.session_state.current_page = page_number + 1
        st.rerun(scope="fragment")


def show_selected_report(auth: AuthManager, report: Report) -> None:
    details = st.session_state.details
    if details is None or details[0] != report.id:
        with st.spinner("Loading report details..."):
            full_report, error = load_report_details(auth.client, report)
        details = (report.id, full_report, error)
        st.session_state.details = details

    st.markdown("---")
    header, close = st.columns([6, 1])
    header.subheader(f"Report Details - {report.name}")
    if close.button("Close", key="close_details"):
        st.session_state.details = None
        st.session_state.table_nonce += 1
        st.rerun(scope="fragment")

    render_report_details(report, details[1], details[2])


@st.fragment(run_every=settings.poll_interval_seconds)
def reports_panel(auth: AuthManager, filters: dict) -> None:
    load_data(auth)

    reports = filter_reports(visible_reports(st.session_state.reports), **filters)
    page = paginate(reports, st.session_state.current_page, settings.page_size)
    st.session_state.current_page = page.number

    col1, col2, col3 = st.columns([4, 1, 1])
    with col1:
        st.header("Reports")
        st.caption("Manage your IFRS compliance reports")
    with col2:
        st.button("Refresh", use_container_width=True)
    with col3:
        if st.button("Create Report", type="primary", use_container_width=True):
            create_report_dialog(auth)

    with st.expander("Overview", expanded=False):
        chart1, chart2 = st.columns(2)
        chart1.plotly_chart(create_status_distribution_chart(reports), use_container_width=True)
        chart2.plotly_chart(create_type_distribution_chart(reports), use_container_width=True)

    selected = render_reports_table(page, key=f"reports_table_{page.number}_{st.session_state.table_nonce}")

    if page.total_items > 0:
        render_pagination(page.number, page.total_pages)

    if selected is not None:
        show_selected_report(auth, selected)


def render_dashboard(auth: AuthManager) -> None:
    user = auth.user
    with st.sidebar:
        st.markdown(f"**{user.name or user.email}**")
        if user.company_name:
            st.caption(user.company_name)
        if auth.has_placeholder_token and not settings.demo_mode:
            st.warning("Signed in without a session token. Requests may be rejected until you sign in again.")
        if st.button("Logout", use_container_width=True):
            auth.logout()
            reset_dashboard_state()
            st.rerun()
        st.markdown("---")

    filters = render_report_filters()
    reports_panel(auth, filters)

    with st.sidebar:
        st.markdown("---")
        render_export_button(filter_reports(visible_reports(st.session_state.reports), **filters))


init_session()
auth = get_auth_manager()

if auth.is_authenticated:
    render_dashboard(auth)
else:
    render_login_page(auth)

# Footer
st.markdown("---")
st.markdown("**ACME Report Management** | Built with Streamlit + Leasify API")
