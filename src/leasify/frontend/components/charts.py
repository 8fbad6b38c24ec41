"""
Chart Components

Reusable chart visualizations using Plotly.
"""
import plotly.graph_objects as go
from collections import Counter
from typing import List

from src.leasify.client.models import Report, REPORT_STATUSES, REPORT_TYPES
from src.leasify.frontend.utils.formatting import get_status_color, get_type_color, get_type_label


def create_status_distribution_chart(reports: List[Report]) -> go.Figure:
    """
    Create donut chart showing reports per status.

    Args:
        reports: Reports to count

    Returns:
        Plotly figure
    """
    counts = Counter(report.status for report in reports)

    fig = go.Figure(data=[
        go.Pie(
            labels=[status.capitalize() for status in REPORT_STATUSES],
            values=[counts.get(status, 0) for status in REPORT_STATUSES],
            marker=dict(colors=[get_status_color(status) for status in REPORT_STATUSES]),
            hole=0.4,
            textinfo="label+value",
            textposition="auto",
        )
    ])

    fig.update_layout(
        title="Reports by Status",
        height=320,
        showlegend=False,
    )

    return fig


def create_type_distribution_chart(reports: List[Report]) -> go.Figure:
    """
    Create bar chart showing reports per type.

    Args:
        reports: Reports to count

    Returns:
        Plotly figure
    """
    counts = Counter(report.type for report in reports)

    fig = go.Figure(data=[
        go.Bar(
            x=[get_type_label(report_type) for report_type in REPORT_TYPES],
            y=[counts.get(report_type, 0) for report_type in REPORT_TYPES],
            marker_color=[get_type_color(report_type) for report_type in REPORT_TYPES],
        )
    ])

    fig.update_layout(
        title="Reports by Type",
        xaxis_title="Type",
        yaxis_title="Reports",
        height=320,
    )

    return fig
