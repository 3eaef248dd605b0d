"""
Validated mutation of the business registry.

Create, update and delete each perform one full read-modify-write cycle of
the registry document under the mutation gate.
"""
import logging
from datetime import datetime, timezone
from typing import Callable, List, Optional, Tuple

from business_registry.core.concurrency import MutationGate
from business_registry.core.exceptions import NotFoundError
from business_registry.core.identifiers import IdentifierGenerator
from business_registry.core.validation import build_record
from business_registry.models.business import BusinessRecord, BusinessStatus
from business_registry.schemas.business import BusinessCreate, BusinessUpdate
from business_registry.storage import JsonRecordStore

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 UTC with millisecond precision and a Z suffix"""
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def derive_location(city: Optional[str], state: Optional[str]) -> Optional[str]:
    if city and state:
        return f"{city}, {state}"
    return None


def _find(records: List[BusinessRecord], business_id: str) -> Tuple[int, BusinessRecord]:
    for index, record in enumerate(records):
        if record.id == business_id:
            return index, record
    raise NotFoundError(business_id)


class MutationEngine:
    """Creates, updates and deletes businesses"""

    def __init__(
        self,
        store: JsonRecordStore,
        gate: MutationGate,
        ids: Optional[IdentifierGenerator] = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.store = store
        self.gate = gate
        self.ids = ids or IdentifierGenerator()
        self.clock = clock

    async def get(self, business_id: str) -> BusinessRecord:
        """Single business by id; reads do not take the gate"""
        records = await self.store.load_all()
        return _find(records, business_id)[1]

    async def create(self, data: BusinessCreate) -> BusinessRecord:
        async with self.gate.exclusive():
            records = await self.store.load_all()

            fields = data.model_dump(exclude_none=True)
            fields["id"] = self.ids.new_id({record.id for record in records})
            fields["status"] = data.status or BusinessStatus.PENDING
            fields["registration_date"] = data.registration_date or format_timestamp(self.clock())

            if not data.location:
                location = derive_location(data.city, data.state)
                if location:
                    fields["location"] = location

            if not data.udyam_number:
                fields["udyam_number"] = self.ids.udyam_number(
                    data.state,
                    taken={record.udyam_number for record in records},
                )

            business = build_record(fields)
            records.append(business)
            await self.store.save_all(records)

        logger.info(f"Created business {business.id} ({business.udyam_number})")
        return business

    async def update(self, business_id: str, data: BusinessUpdate) -> BusinessRecord:
        changes = data.model_dump(exclude_unset=True)

        async with self.gate.exclusive():
            records = await self.store.load_all()
            index, existing = _find(records, business_id)

            merged = existing.model_dump()
            merged.update(changes)
            merged["id"] = existing.id

            if "location" not in changes and ("city" in changes or "state" in changes):
                location = derive_location(merged.get("city"), merged.get("state"))
                if location:
                    merged["location"] = location

            business = build_record(merged)
            records[index] = business
            await self.store.save_all(records)

        logger.info(f"Updated business {business_id} (fields: {', '.join(sorted(changes)) or 'none'})")
        return business

    async def delete(self, business_id: str) -> None:
        async with self.gate.exclusive():
            records = await self.store.load_all()
            index, _ = _find(records, business_id)
            del records[index]
            await self.store.save_all(records)

        logger.info(f"Deleted business {business_id}")
