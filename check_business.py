"""
Script to look up a business in the registry document by id or Udyam number
Run with: python check_business.py <id-or-udyam-number>
"""
import asyncio
import sys

from business_registry.config import get_settings
from business_registry.core.exceptions import StorageError
from business_registry.core.statistics import compute_statistics
from business_registry.storage import JsonRecordStore


async def check_business(key: str, store: JsonRecordStore) -> bool:
    """Print a business's details and the registry totals"""
    try:
        records = await store.load_all()
    except StorageError as e:
        print(f"❌ Registry unreadable: {e}")
        return False

    wanted = key.strip().upper()
    business = next(
        (r for r in records if r.id == key or r.udyam_number.upper() == wanted),
        None,
    )

    if not business:
        print(f"❌ Business not found: {key}")
    else:
        print(f"✅ Business Found!")
        print(f"   ID: {business.id}")
        print(f"   Name: {business.name}")
        print(f"   Udyam Number: {business.udyam_number}")
        print(f"   Category: {business.category}")
        print(f"   Status: {business.status.value}")
        print(f"   Registered: {business.registration_date}")
        print(f"   Location: {business.location or 'N/A'}")
        print(f"   Owner: {business.owner_name} <{business.email}>, {business.phone}")
        print(f"   Employees: {business.employees if business.employees is not None else 'N/A'}")

    stats = compute_statistics(records)
    print(f"\n📊 Registry: {stats.total} businesses "
          f"({stats.active} active, {stats.pending} pending, {stats.inactive} inactive)")
    for category, count in stats.categories.items():
        print(f"   {category}: {count}")

    return business is not None


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python check_business.py <id-or-udyam-number>")
        sys.exit(1)

    settings = get_settings()
    found = asyncio.run(check_business(sys.argv[1], JsonRecordStore(settings.data_path)))
    sys.exit(0 if found else 1)
