"""
Form Components

Login and report creation forms.
"""
import streamlit as st
import requests
from datetime import date
from typing import List, Optional

from pydantic import ValidationError

from src.leasify.client.auth import AuthManager
from src.leasify.client.errors import ApiError, describe_error
from src.leasify.client.models import Report, Template, REPORT_TYPES
from src.leasify.frontend.utils.formatting import get_type_label
from src.leasify.frontend.utils.report_view import build_create_request, template_options
from src.leasify.utils.logger import get_logger

logger = get_logger(__name__)

LANGUAGE_OPTIONS = {
    "": "Default",
    "en": "English",
    "sv": "Swedish",
    "no": "Norwegian",
    "da": "Danish",
}


def render_login_form(auth: AuthManager) -> bool:
    """
    Render the sign-in form.

    Args:
        auth: Auth manager to sign in with

    Returns:
        True once the user is signed in
    """
    with st.form("login_form", clear_on_submit=False):
        email = st.text_input("Email", placeholder="Enter your email")
        password = st.text_input("Password", type="password", placeholder="Enter your password")
        submitted = st.form_submit_button("Sign In", use_container_width=True, type="primary")

    if not submitted:
        return False

    if not email or not password:
        st.warning("Please enter both email and password.")
        return False

    try:
        with st.spinner("Signing in..."):
            auth.login(email, password)
    except ApiError as e:
        st.error(e.message)
        return False
    except requests.RequestException as e:
        logger.error("login_request_failed", error=str(e), error_type=type(e).__name__)
        st.error(f"Could not reach the Leasify API: {e}")
        return False
    except ValidationError as e:
        logger.error("login_invalid_response", error_count=e.error_count())
        st.error("Unexpected response from the Leasify API. Please try again.")
        return False

    return True


def render_create_report_form(client, templates: List[Template]) -> Optional[Report]:
    """
    Render the create-report form.

    Args:
        client: Leasify client used to submit the report
        templates: Templates to choose from

    Returns:
        The created report, or None when nothing was created
    """
    options = template_options(templates)
    if not options:
        st.warning("No templates available. A template is required to create a report.")
        return None
    template_labels = dict(options)

    with st.form("create_report_form", clear_on_submit=False):
        name = st.text_input("Report Name", placeholder="Enter report name")

        col1, col2 = st.columns(2)
        with col1:
            report_type = st.selectbox("Report Type", REPORT_TYPES, index=0, format_func=get_type_label)
        with col2:
            template_id = st.selectbox(
                "Template",
                list(template_labels.keys()),
                format_func=lambda template_key: template_labels[template_key],
            )

        col1, col2 = st.columns(2)
        with col1:
            break_at = st.date_input("Break Date", value=date(date.today().year - 1, 12, 31))
        with col2:
            months = st.number_input("Duration (Months)", min_value=1, max_value=120, value=12, step=1)

        col1, col2 = st.columns(2)
        with col1:
            years = st.number_input(
                "Years (Optional)",
                min_value=1,
                max_value=10,
                value=None,
                step=1,
                placeholder="Leave empty for default",
            )
        with col2:
            language = st.selectbox(
                "Language",
                list(LANGUAGE_OPTIONS.keys()),
                format_func=lambda code: LANGUAGE_OPTIONS[code],
            )

        webhook = st.text_input("Webhook URL (Optional)", placeholder="https://your-webhook-url.com")

        st.info(
            "Reports are processed asynchronously and may take a few minutes to complete. "
            "You can track the progress in the reports table. "
            "Webhook notifications are sent when processing is complete (if provided)."
        )

        submitted = st.form_submit_button("Create Report", type="primary")

    if not submitted:
        return None

    if not name.strip():
        st.error("Report name is required.")
        return None

    try:
        request = build_create_request({
            "name": name,
            "type": report_type,
            "template_id": template_id,
            "break_at": break_at,
            "months": months,
            "years": years,
            "language": language,
            "webhook": webhook,
        })
    except ValidationError as e:
        st.error(e.errors()[0]["msg"])
        return None

    try:
        with st.spinner("Creating..."):
            return client.create_report(request)
    except ApiError as e:
        st.error(describe_error(e))
    except requests.RequestException as e:
        logger.error("create_report_request_failed", error=str(e), error_type=type(e).__name__)
        st.error(describe_error(e))
    except ValidationError as e:
        logger.error("create_report_invalid_response", error_count=e.error_count())
        st.error(describe_error(e))
    return None
