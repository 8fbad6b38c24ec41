"""
Table Components

Reusable table displays for reports.
"""
import streamlit as st
import pandas as pd
from typing import List, Optional

from src.leasify.client.models import Report
from src.leasify.frontend.utils.formatting import (
    format_date,
    format_datetime,
    format_duration,
    get_status_color,
    get_type_color,
)
from src.leasify.frontend.utils.report_view import Page


def reports_to_dataframe(reports: List[Report]) -> pd.DataFrame:
    """
    Convert reports to a display DataFrame.

    Args:
        reports: Reports to show

    Returns:
        One row per report
    """
    rows = []
    for report in reports:
        template_name = report.template.name if report.template and report.template.name else "Unknown"
        rows.append({
            "ID": report.id,
            "Name": report.name,
            "Type": report.type,
            "Template": template_name,
            "Template ID": report.template_id,
            "Status": report.status,
            "Break Date": format_date(report.break_at),
            "Duration": format_duration(report.months, report.years),
            "Created": format_datetime(report.created_at),
        })
    return pd.DataFrame(rows, columns=[
        "ID", "Name", "Type", "Template", "Template ID",
        "Status", "Break Date", "Duration", "Created",
    ])


def render_reports_table(page: Page, key: str = "reports_table") -> Optional[Report]:
    """
    Render one page of the reports table.

    Args:
        page: Current page of reports
        key: Widget key for the table

    Returns:
        The report the user selected, if any
    """
    if page.total_items == 0:
        st.info("No reports found. Create your first report to get started.")
        return None
    if not page.items:
        st.info("No reports on this page. Try a different page.")
        return None

    df = reports_to_dataframe(page.items)

    def style_status(val):
        """Style status cells with color."""
        return f"color: {get_status_color(val)}; font-weight: bold; text-transform: capitalize;"

    def style_type(val):
        """Style type cells with color."""
        return f"color: {get_type_color(val)}; font-weight: bold;"

    styled_df = df.style.map(
        style_status,
        subset=["Status"]
    ).map(
        style_type,
        subset=["Type"]
    )

    event = st.dataframe(
        styled_df,
        use_container_width=True,
        hide_index=True,
        on_select="rerun",
        selection_mode="single-row",
        key=key,
    )

    st.caption(page.summary())

    selected_rows = event.selection.rows if event else []
    if selected_rows:
        return page.items[selected_rows[0]]
    return None


def render_export_button(reports: List[Report]) -> None:
    """Offer the filtered report list as CSV."""
    if not reports:
        return
    csv = reports_to_dataframe(reports).to_csv(index=False)
    st.download_button(
        label="Download CSV",
        data=csv,
        file_name="reports_export.csv",
        mime="text/csv",
    )
