"""
Filter Components

Sidebar filter widgets for the report list.
"""
import streamlit as st
from typing import Dict, Any

from src.leasify.client.models import REPORT_STATUSES, REPORT_TYPES
from src.leasify.frontend.utils.formatting import get_type_label


def render_report_filters() -> Dict[str, Any]:
    """
    Render report filter sidebar.

    Returns:
        Keyword arguments for filter_reports
    """
    st.sidebar.header("Filters")

    filters: Dict[str, Any] = {}

    search = st.sidebar.text_input("Search by name", "")
    if search:
        filters["search"] = search

    status_options = ["All"] + REPORT_STATUSES
    selected_status = st.sidebar.selectbox(
        "Status",
        status_options,
        index=0,
        format_func=lambda s: s.capitalize(),
    )
    if selected_status != "All":
        filters["status"] = selected_status

    type_options = ["All"] + REPORT_TYPES
    selected_type = st.sidebar.selectbox(
        "Type",
        type_options,
        index=0,
        format_func=lambda t: t if t == "All" else get_type_label(t),
    )
    if selected_type != "All":
        filters["report_type"] = selected_type

    return filters
