"""
Report View Helpers

Client-side shaping of the report list: the API returns everything, so
filtering, ordering and paging all happen here.
"""
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Any, Dict, List, Optional, Sequence, Tuple

from src.leasify.client.models import CreateReportRequest, Report, Template

_OLDEST = datetime.min.replace(tzinfo=timezone.utc)


def _created_at(report: Report) -> datetime:
    if not report.created_at:
        return _OLDEST
    try:
        value = datetime.fromisoformat(report.created_at.replace("Z", "+00:00"))
    except ValueError:
        return _OLDEST
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value


def visible_reports(reports: Sequence[Report]) -> List[Report]:
    """
    Top-level reports, newest first.

    Reports with a parent_id are generated under another report and are
    not listed on their own.
    """
    top_level = [report for report in reports if not report.parent_id]
    return sorted(top_level, key=_created_at, reverse=True)


def filter_reports(
    reports: Sequence[Report],
    status: Optional[str] = None,
    report_type: Optional[str] = None,
    search: str = "",
) -> List[Report]:
    """
    Filter reports by status, type and a case-insensitive name search.

    Args:
        reports: Reports to filter
        status: Keep only this status (None for all)
        report_type: Keep only this type (None for all)
        search: Substring of the report name

    Returns:
        Matching reports in their original order
    """
    needle = search.strip().lower()
    result = []
    for report in reports:
        if status and report.status != status:
            continue
        if report_type and report.type != report_type:
            continue
        if needle and needle not in (report.name or "").lower():
            continue
        result.append(report)
    return result


@dataclass
class Page:
    """One page of a client-side paginated list."""

    items: List[Any]
    number: int
    total_pages: int
    total_items: int
    start: int  # 1-based index of the first item, 0 when empty
    end: int

    @property
    def has_previous(self) -> bool:
        return self.number > 1

    @property
    def has_next(self) -> bool:
        return self.number < self.total_pages

    def summary(self, noun: str = "reports") -> str:
        return f"Showing {self.start} to {self.end} of {self.total_items} {noun}"


def paginate(items: Sequence[Any], page: int, per_page: int) -> Page:
    """
    Slice out one page. Out-of-range page numbers are clamped.

    Args:
        items: Full list
        page: Requested 1-based page number
        per_page: Items per page

    Returns:
        The page
    """
    total_items = len(items)
    total_pages = max(1, -(-total_items // per_page))
    number = min(max(page, 1), total_pages)
    offset = (number - 1) * per_page
    page_items = list(items[offset:offset + per_page])
    return Page(
        items=page_items,
        number=number,
        total_pages=total_pages,
        total_items=total_items,
        start=offset + 1 if page_items else 0,
        end=offset + len(page_items),
    )


def page_window(current: int, total_pages: int, size: int = 5) -> List[int]:
    """
    Page numbers to show as buttons, keeping the current page centred.

    Examples (size 5): page 1 of 10 -> 1..5, page 6 of 10 -> 4..8,
    page 10 of 10 -> 6..10.
    """
    if total_pages <= size:
        return list(range(1, total_pages + 1))
    half = size // 2
    if current <= half + 1:
        first = 1
    elif current >= total_pages - half:
        first = total_pages - size + 1
    else:
        first = current - half
    return list(range(first, first + size))


def template_options(templates: Sequence[Template]) -> List[Tuple[int, str]]:
    """
    Flatten the template tree into (id, label) pairs for a select box.

    Child templates are indented under their parent.
    """
    options: List[Tuple[int, str]] = []

    def walk(nodes: Sequence[Template], depth: int) -> None:
        for node in nodes:
            if node.id is not None:
                options.append((node.id, f"{'  ' * depth}{node.name or f'Template {node.id}'}"))
            walk(node.children or [], depth + 1)

    walk(templates, 0)
    return options


def build_create_request(form: Dict[str, Any]) -> CreateReportRequest:
    """
    Turn create-report form values into a request.

    Empty optional fields (years, language, webhook) are left out.

    Raises:
        pydantic.ValidationError: If required values are missing or invalid
    """
    break_at = form.get("break_at")
    if isinstance(break_at, date):
        break_at = break_at.isoformat()

    data: Dict[str, Any] = {
        "name": (form.get("name") or "").strip(),
        "type": form.get("type") or "IFRS16",
        "template_id": form.get("template_id"),
        "break_at": break_at,
        "months": form.get("months"),
    }
    for field in ("years", "language", "webhook"):
        value = form.get(field)
        if isinstance(value, str):
            value = value.strip()
        if value:
            data[field] = value
    return CreateReportRequest.model_validate(data)


def prepend_report(reports: Sequence[Report], report: Report) -> List[Report]:
    return [report] + [r for r in reports if r.id is None or r.id != report.id]
