"""
Script to generate simulated "scraped" Udyam business records
Run with: python -m business_registry.scripts.generate_sample_data [--count N] [--import]
"""
import argparse
import asyncio
import csv
import json
import logging
import random
import sys
import time
from collections import Counter
from datetime import date, datetime, timedelta, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

from business_registry.config import get_settings
from business_registry.core.concurrency import MutationGate
from business_registry.core.mutation_engine import MutationEngine, format_timestamp
from business_registry.core.validation import parse_create
from business_registry.logging_config import setup_logging
from business_registry.storage import JsonRecordStore

logger = logging.getLogger(__name__)

STATES = [
    "Andhra Pradesh", "Assam", "Bihar", "Chhattisgarh", "Goa",
    "Gujarat", "Haryana", "Himachal Pradesh", "Jharkhand", "Karnataka",
    "Kerala", "Madhya Pradesh", "Maharashtra", "Manipur", "Meghalaya",
    "Mizoram", "Nagaland", "Odisha", "Punjab", "Rajasthan", "Sikkim",
    "Tamil Nadu", "Telangana", "Tripura", "Uttar Pradesh", "Uttarakhand",
    "West Bengal", "Delhi",
]

CATEGORIES = [
    "Manufacturing", "Services", "Trading", "Agriculture", "Technology",
    "Healthcare", "Education", "Construction", "Transportation", "Energy",
    "Textiles", "Food Processing", "Handicrafts", "Tourism", "Finance",
]

BUSINESS_TYPES = [
    "Pvt Ltd", "Ltd", "LLP", "Partnership", "Proprietorship", "Co-operative",
    "Trust", "Society", "Company", "Enterprise", "Industries", "Solutions",
]

CSV_COLUMNS = [
    ("ID", "id"), ("Name", "name"), ("Udyam Number", "udyamNumber"),
    ("Category", "category"), ("Status", "status"), ("Registration Date", "registrationDate"),
    ("Location", "location"), ("State", "state"), ("Employees", "employees"),
    ("Owner Name", "ownerName"), ("Email", "email"), ("Phone", "phone"),
    ("Annual Turnover", "annualTurnover"), ("Investment in Plant", "investmentInPlant"),
    ("Scraped At", "scrapedAt"),
]


def state_initials(state: str) -> str:
    """Two-letter code from the state's initials ("Tamil Nadu" -> "TN", "Goa" -> "GO")"""
    words = state.split()
    if len(words) > 1:
        return "".join(word[0] for word in words[:2]).upper()
    return state[:2].upper()


def random_registration_date(rng: random.Random, today: date) -> str:
    start = date(2020, 1, 1)
    return (start + timedelta(days=rng.randint(0, (today - start).days))).isoformat()


def random_status(rng: random.Random) -> str:
    if rng.random() > 0.2:
        return "Active"
    return "Pending" if rng.random() > 0.5 else "Inactive"


def simulate_businesses(count: int, rng: random.Random, now: Optional[datetime] = None) -> List[Dict[str, Any]]:
    """Fabricate ``count`` business records in the registry document format"""
    now = now or datetime.now(timezone.utc)
    scraped_at = format_timestamp(now)
    businesses = []

    for i in range(1, count + 1):
        state = rng.choice(STATES)
        category = rng.choice(CATEGORIES)
        business_type = rng.choice(BUSINESS_TYPES)
        domain = f"{category}{business_type}".lower().replace(" ", "")

        businesses.append({
            "id": str(i),
            "name": f"{category} {business_type} {i}",
            "udyamNumber": f"UDYAM-{state_initials(state)}-{rng.randint(1, 99):02d}-{rng.randint(1000000, 9999999)}",
            "category": category,
            "status": random_status(rng),
            "registrationDate": random_registration_date(rng, now.date()),
            "location": f"City {i}, {state}",
            "city": f"City {i}",
            "state": state,
            "employees": rng.randint(1, 500),
            "ownerName": f"Owner {i}",
            "email": f"owner{i}@{domain}.com",
            "phone": f"+91-{rng.randint(1000000000, 9999999999)}",
            "annualTurnover": rng.randint(100000, 10099999),
            "investmentInPlant": rng.randint(50000, 5049999),
            "scrapedAt": scraped_at,
        })

        if i % 10 == 0:
            logger.info(f"Generated {i}/{count} businesses...")

    return businesses


def build_report(businesses: List[Dict[str, Any]], started_at: float) -> Dict[str, Any]:
    """Summary of a generated batch"""
    count = len(businesses)
    return {
        "scrapeSession": {
            "timestamp": format_timestamp(datetime.now(timezone.utc)),
            "duration": f"{time.time() - started_at:.3f}s",
            "status": "completed",
        },
        "summary": {
            "businessRecordsGenerated": count,
        },
        "statistics": {
            "businessesByStatus": dict(Counter(b["status"] for b in businesses)),
            "businessesByCategory": dict(Counter(b["category"] for b in businesses)),
            "businessesByState": dict(Counter(b["state"] for b in businesses)),
            "averageEmployees": round(sum(b["employees"] for b in businesses) / count) if count else 0,
            "totalInvestment": sum(b["investmentInPlant"] for b in businesses),
        },
    }


def write_json(data: Any, path: Path) -> Path:
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
    logger.info(f"Data saved to: {path}")
    return path


def write_csv(businesses: List[Dict[str, Any]], path: Path) -> Path:
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow([header for header, _ in CSV_COLUMNS])
        for business in businesses:
            writer.writerow([business.get(key, "") for _, key in CSV_COLUMNS])
    logger.info(f"CSV file saved to: {path}")
    return path


async def import_businesses(businesses: List[Dict[str, Any]], store: JsonRecordStore) -> int:
    """Append generated records to the registry; ids are reassigned by the engine"""
    engine = MutationEngine(store, MutationGate())
    for business in businesses:
        payload = {key: value for key, value in business.items() if key != "id"}
        await engine.create(parse_create(payload))
    return len(businesses)


async def generate(
    output_dir: Path,
    count: Optional[int] = None,
    seed: Optional[int] = None,
    store: Optional[JsonRecordStore] = None,
) -> Dict[str, Any]:
    """Generate a batch, write JSON/CSV/report files and optionally import it"""
    started_at = time.time()
    rng = random.Random(seed)
    count = count if count is not None else rng.randint(50, 150)

    output_dir.mkdir(parents=True, exist_ok=True)
    businesses = simulate_businesses(count, rng)
    report = build_report(businesses, started_at)

    stamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H-%M-%S-%fZ")
    files = [
        write_json(businesses, output_dir / f"business-data-{stamp}.json"),
        write_csv(businesses, output_dir / f"business-data-{stamp}.csv"),
        write_json(report, output_dir / f"scrape-report-{stamp}.json"),
    ]

    imported = 0
    if store is not None:
        imported = await import_businesses(businesses, store)
        logger.info(f"Imported {imported} businesses into {store.path}")

    return {"businesses": businesses, "report": report, "files": files, "imported": imported}


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate simulated Udyam business records")
    parser.add_argument("--count", type=int, default=None, help="number of records (default: random 50-150)")
    parser.add_argument("--output", type=Path, default=Path("scraped-data"), help="output directory")
    parser.add_argument("--seed", type=int, default=None, help="random seed for reproducible output")
    parser.add_argument("--import", dest="import_records", action="store_true",
                        help="append the generated records to the registry document")
    args = parser.parse_args(argv)
    if args.count is not None and args.count < 1:
        parser.error("--count must be at least 1")
    return args


def main(argv: Optional[List[str]] = None) -> int:
    settings = get_settings()
    setup_logging(settings.LOG_LEVEL)
    args = parse_args(argv)

    store = JsonRecordStore(settings.data_path) if args.import_records else None
    try:
        result = asyncio.run(generate(args.output, count=args.count, seed=args.seed, store=store))
    except Exception as e:
        logger.error(f"Sample data generation failed: {e}")
        return 1

    print(f"✅ Generated {len(result['businesses'])} businesses")
    for path in result["files"]:
        print(f"   {path}")
    if args.import_records:
        print(f"   Imported {result['imported']} into {store.path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
