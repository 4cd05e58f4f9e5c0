from collections.abc import Iterable

from complaint_tracker.model.complaint.complaint_response import ComplaintResponse
from complaint_tracker.model.complaint.complaint_status import ComplaintStatus


def _matches_search(complaint: ComplaintResponse, needle: str) -> bool:
    haystack = (complaint.title, complaint.description, complaint.customer_email)
    return any(needle in field.lower() for field in haystack)


def filter_complaints(
    complaints: Iterable[ComplaintResponse],
    search: str | None = None,
    status: ComplaintStatus | None = None,
) -> list[ComplaintResponse]:
    """
    Narrow an already-fetched list the way the admin dashboard does:
    case-insensitive substring search over title, description and email,
    plus an exact status match. Input order is kept.
    """
    needle = (search or "").strip().lower()
    result: list[ComplaintResponse] = []
    for complaint in complaints:
        if status is not None and complaint.status != status:
            continue
        if needle and not _matches_search(complaint, needle):
            continue
        result.append(complaint)
    return result


def count_by_status(complaints: Iterable[ComplaintResponse]) -> dict[str, int]:
    counts = {status.value: 0 for status in ComplaintStatus}
    total = 0
    for complaint in complaints:
        counts[complaint.status.value] += 1
        total += 1
    return {"total": total, **counts}
