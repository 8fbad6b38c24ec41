"""
Formatting Utilities for Streamlit Frontend

Helper functions for formatting data display.
"""
from typing import Optional, Union
from datetime import datetime, date


def _parse_iso(value: str) -> Optional[datetime]:
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None


def format_date(date_value: Optional[Union[date, str]]) -> str:
    """
    Format date as "Dec 31, 2024".

    Args:
        date_value: Date object or ISO date string

    Returns:
        Formatted date string
    """
    if not date_value:
        return "N/A"
    if isinstance(date_value, str):
        parsed = _parse_iso(date_value)
        if parsed is None:
            return date_value
        date_value = parsed.date()
    return date_value.strftime("%b %d, %Y")


def format_datetime(datetime_value: Optional[Union[datetime, str]]) -> str:
    """
    Format datetime as "Dec 31, 2024 02:30 PM".

    Args:
        datetime_value: Datetime object or ISO datetime string

    Returns:
        Formatted datetime string
    """
    if not datetime_value:
        return "N/A"
    if isinstance(datetime_value, str):
        parsed = _parse_iso(datetime_value)
        if parsed is None:
            return datetime_value
        datetime_value = parsed
    return datetime_value.strftime("%b %d, %Y %I:%M %p")


def format_duration(months: Optional[int], years: Optional[int] = None) -> str:
    """
    Format report duration.

    Args:
        months: Duration in months
        years: Optional number of years

    Returns:
        Duration label (e.g., "12 months", "12 months x 3 years")
    """
    if months is None:
        return "N/A"
    label = f"{months} month" if months == 1 else f"{months} months"
    if years:
        label += f" x {years} years" if years > 1 else " x 1 year"
    return label


def get_status_color(status: Optional[str]) -> str:
    """
    Get color code for report status badge.

    Args:
        status: Report status

    Returns:
        Hex color code
    """
    colors = {
        "finished": "#28a745",  # Green
        "processing": "#ffc107",  # Yellow
        "pending": "#17a2b8",  # Blue
        "failed": "#dc3545",  # Red
    }
    return colors.get(status, "#6c757d")


def get_type_color(report_type: Optional[str]) -> str:
    """
    Get color code for report type badge.

    Args:
        report_type: IFRS16, LOCALGAAP, RKRR5 or GENERATOR

    Returns:
        Hex color code
    """
    colors = {
        "IFRS16": "#1f77b4",
        "LOCALGAAP": "#ff7f0e",
        "RKRR5": "#9467bd",
        "GENERATOR": "#17becf",
    }
    return colors.get(report_type, "#6c757d")


def get_type_label(report_type: Optional[str]) -> str:
    """
    Get display label for report type.

    Args:
        report_type: Report type code

    Returns:
        Human-readable report type
    """
    labels = {
        "IFRS16": "IFRS 16",
        "LOCALGAAP": "Local GAAP",
        "RKRR5": "RKR R5",
        "GENERATOR": "Generator",
    }
    return labels.get(report_type, report_type or "Unknown")
