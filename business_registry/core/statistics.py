from collections import Counter
from typing import Sequence

from business_registry.models.business import BusinessRecord, BusinessStatus
from business_registry.schemas.business import StatsResponse


def compute_statistics(records: Sequence[BusinessRecord]) -> StatsResponse:
    """Counts by status and category over the whole, unfiltered registry"""
    by_status = Counter(record.status for record in records)
    by_category = Counter(record.category for record in records)

    return StatsResponse(
        total=len(records),
        active=by_status[BusinessStatus.ACTIVE],
        pending=by_status[BusinessStatus.PENDING],
        inactive=by_status[BusinessStatus.INACTIVE],
        categories=dict(by_category),
    )
