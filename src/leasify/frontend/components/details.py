"""
Report Details Component

Full view of a single report.
"""
import json
from typing import Optional, Tuple

import requests
import streamlit as st
from pydantic import ValidationError

from src.leasify.client.errors import ApiError
from src.leasify.client.models import Report
from src.leasify.frontend.utils.formatting import (
    format_date,
    format_datetime,
    get_status_color,
    get_type_label,
)
from src.leasify.utils.logger import get_logger

logger = get_logger(__name__)


def load_report_details(client, report: Report) -> Tuple[Report, Optional[str]]:
    """
    Fetch the full report, falling back to the listing data on failure.

    Returns:
        The report to show and an error message if the fetch failed
    """
    try:
        return client.get_report(report.id), None
    except (ApiError, requests.RequestException) as e:
        logger.warning("report_details_failed", report_id=report.id, error=str(e))
        message = e.message if isinstance(e, ApiError) else str(e)
        return report, message or "Failed to fetch report details"
    except ValidationError as e:
        logger.warning("report_details_invalid", report_id=report.id, error_count=e.error_count())
        return report, "Unexpected response from the Leasify API"


def render_report_details(report: Report, full_report: Report, error: Optional[str] = None) -> None:
    """
    Render report summary and raw JSON.

    Args:
        report: Report selected from the listing
        full_report: Report as fetched by id (or the listing data as fallback)
        error: Message of a failed fetch
    """
    if error:
        st.error(f"Could not load full report details: {error}")

    col1, col2, col3 = st.columns(3)
    with col1:
        st.markdown(f"**ID:** {report.id}")
        st.markdown(f"**Type:** {get_type_label(report.type)}")
        st.markdown(
            f"**Status:** <span style='color:{get_status_color(report.status)};font-weight:bold'>"
            f"{report.status}</span>",
            unsafe_allow_html=True,
        )
    with col2:
        st.markdown(f"**Template:** {report.template.name if report.template else 'Unknown'}")
        st.markdown(f"**Break Date:** {format_date(report.break_at)}")
        st.markdown(f"**Duration:** {report.months} months")
        if report.years:
            st.markdown(f"**Years:** {report.years}")
    with col3:
        if report.language:
            st.markdown(f"**Language:** {report.language}")
        st.markdown(f"**Created:** {format_datetime(report.created_at)}")
        st.markdown(f"**Updated:** {format_datetime(report.updated_at)}")
        if report.linked_report_id:
            st.markdown(f"**Linked Report:** {report.linked_report_id}")

    st.subheader("Report Data")
    payload = full_report.to_dict()
    st.json(payload, expanded=2)

    st.download_button(
        label="Download JSON",
        data=json.dumps(payload, indent=2),
        file_name=f"report_{report.id}.json",
        mime="application/json",
    )
