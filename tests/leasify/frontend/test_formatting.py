"""
Unit tests for formatting helpers
"""
import sys
from datetime import date, datetime
from pathlib import Path

ROOT = Path(__file__).resolve().parents[3]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.leasify.frontend.utils.formatting import (
    format_date,
    format_datetime,
    format_duration,
    get_status_color,
    get_type_color,
    get_type_label,
)


def test_format_date():
    assert format_date("2024-12-31") == "Dec 31, 2024"
    assert format_date(date(2024, 1, 5)) == "Jan 05, 2024"
    assert format_date(None) == "N/A"
    assert format_date("2024-02-30") == "2024-02-30"


def test_format_datetime():
    assert format_datetime("2024-07-10T16:25:00Z") == "Jul 10, 2024 04:25 PM"
    assert format_datetime(datetime(2024, 1, 1, 9, 5)) == "Jan 01, 2024 09:05 AM"
    assert format_datetime("") == "N/A"


def test_format_duration():
    assert format_duration(12) == "12 months"
    assert format_duration(1) == "1 month"
    assert format_duration(12, 5) == "12 months x 5 years"
    assert format_duration(12, 1) == "12 months x 1 year"
    assert format_duration(None) == "N/A"


def test_colors_and_labels():
    assert get_status_color("finished") == "#28a745"
    assert get_status_color("unknown") == "#6c757d"
    assert get_type_color("RKRR5") == "#9467bd"
    assert get_type_color(None) == "#6c757d"
    assert get_type_label("LOCALGAAP") == "Local GAAP"
    assert get_type_label("OTHER") == "OTHER"
    assert get_type_label(None) == "Unknown"
