"""
Filtering, search, sorting and pagination over a registry snapshot.
"""
import math
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Sequence

from business_registry.models.business import BusinessRecord
from business_registry.schemas.business import BusinessListResponse, BusinessQuery, SortField, SortOrder

# Filter value meaning "do not filter on this field"
ALL = "All"

EARLIEST = datetime.min.replace(tzinfo=timezone.utc)


def parse_instant(value: Optional[str]) -> datetime:
    """Date or date-time string as an aware datetime; unparseable values sort first"""
    if not value:
        return EARLIEST
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        moment = datetime.fromisoformat(text)
    except ValueError:
        return EARLIEST
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment


SORT_KEYS: Dict[SortField, Callable[[BusinessRecord], Any]] = {
    SortField.NAME: lambda record: (record.name or "").casefold(),
    SortField.REGISTRATION_DATE: lambda record: parse_instant(record.registration_date),
    SortField.EMPLOYEES: lambda record: record.employees or 0,
}


def _is_active_filter(value: Optional[str]) -> bool:
    return bool(value) and value != ALL


def matches_search(record: BusinessRecord, term: str) -> bool:
    """Case-insensitive substring match on name, Udyam number, location or owner"""
    needle = term.casefold()
    haystacks = (record.name, record.udyam_number, record.location, record.owner_name)
    return any(needle in (value or "").casefold() for value in haystacks)


class QueryEngine:
    """Runs a BusinessQuery against a list of records"""

    def filter(self, records: Sequence[BusinessRecord], query: BusinessQuery) -> List[BusinessRecord]:
        matched = list(records)
        if _is_active_filter(query.status):
            matched = [record for record in matched if record.status == query.status]
        if _is_active_filter(query.category):
            matched = [record for record in matched if record.category == query.category]
        if query.search:
            matched = [record for record in matched if matches_search(record, query.search)]
        return matched

    def sort(self, records: List[BusinessRecord], query: BusinessQuery) -> List[BusinessRecord]:
        # sorted() is stable in both directions, so equal keys keep input order
        return sorted(
            records,
            key=SORT_KEYS[query.sort_by],
            reverse=query.sort_order == SortOrder.DESC,
        )

    def execute(self, records: Sequence[BusinessRecord], query: BusinessQuery) -> BusinessListResponse:
        matched = self.sort(self.filter(records, query), query)
        total = len(matched)
        start = (query.page - 1) * query.limit

        return BusinessListResponse(
            records=matched[start:start + query.limit],
            total=total,
            page=query.page,
            limit=query.limit,
            total_pages=math.ceil(total / query.limit),
        )
