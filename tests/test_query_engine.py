import math
from datetime import datetime, timezone

import pytest

from business_registry.core.query_engine import EARLIEST, QueryEngine, matches_search, parse_instant
from business_registry.schemas.business import BusinessQuery, SortField, SortOrder
from tests.conftest import make_record


@pytest.fixture()
def records():
    return [
        make_record(id="1", name="banyan Tech", category="Technology", status="Active",
                    registrationDate="2023-03-01", employees=25, location="Mumbai, Maharashtra",
                    ownerName="Rajesh Kumar", udyamNumber="UDYAM-MH-03-1234567"),
        make_record(id="2", name="Amber Farms", category="Agriculture", status="Pending",
                    registrationDate="2023-01-15T08:00:00.000Z", employees=30, location="Ludhiana, Punjab",
                    ownerName="Harpreet Singh", udyamNumber="UDYAM-PB-04-4567890"),
        make_record(id="3", name="Craft House", category="Handicrafts", status="Inactive",
                    registrationDate="2023-02-10", employees=5, location="Jaipur, Rajasthan",
                    ownerName="Meera Agarwal", udyamNumber="UDYAM-RJ-02-3456789"),
        make_record(id="4", name="Apex Tech", category="Technology", status="Active",
                    registrationDate="2022-12-31", employees=25, location="Pune, Maharashtra",
                    ownerName="Priya Sharma", udyamNumber="UDYAM-MH-09-7654321"),
    ]


@pytest.fixture()
def engine():
    return QueryEngine()


def ids(response):
    return [r.id for r in response.records]


def test_empty_registry(engine):
    response = engine.execute([], BusinessQuery(page=1, limit=10))

    assert response.records == []
    assert response.total == 0
    assert response.page == 1
    assert response.limit == 10
    assert response.total_pages == 0


def test_defaults_sort_by_name_ascending_case_insensitive(engine, records):
    response = engine.execute(records, BusinessQuery())

    assert ids(response) == ["2", "4", "1", "3"]


@pytest.mark.parametrize("status, expected", [
    ("Active", ["4", "1"]),
    ("Pending", ["2"]),
    ("Inactive", ["3"]),
    ("All", ["2", "4", "1", "3"]),
    (None, ["2", "4", "1", "3"]),
])
def test_status_filter(engine, records, status, expected):
    assert ids(engine.execute(records, BusinessQuery(status=status))) == expected


def test_category_filter_is_exact(engine, records):
    assert ids(engine.execute(records, BusinessQuery(category="Technology"))) == ["4", "1"]
    assert ids(engine.execute(records, BusinessQuery(category="technology"))) == []
    assert engine.execute(records, BusinessQuery(category="All")).total == 4


def test_filters_combine_with_and(engine, records):
    query = BusinessQuery(status="Active", category="Technology", search="apex")

    assert ids(engine.execute(records, query)) == ["4"]


@pytest.mark.parametrize("term, expected", [
    ("TECH", ["4", "1"]),
    ("udyam-pb", ["2"]),
    ("maharashtra", ["4", "1"]),
    ("meera", ["3"]),
    ("nothing-matches", []),
])
def test_search_matches_any_field(engine, records, term, expected):
    assert ids(engine.execute(records, BusinessQuery(search=term))) == expected


def test_search_ignores_email_and_category(records):
    assert not matches_search(records[0], "asha@acme.com")
    assert not matches_search(records[1], "Agriculture")


def test_search_never_increases_total(engine, records):
    for status in (None, "Active", "Pending"):
        without = engine.execute(records, BusinessQuery(status=status)).total
        for term in ("a", "tech", "zzz", "UDYAM"):
            assert engine.execute(records, BusinessQuery(status=status, search=term)).total <= without


def test_sort_by_registration_date_compares_instants(engine, records):
    query = BusinessQuery(sort_by=SortField.REGISTRATION_DATE)

    assert ids(engine.execute(records, query)) == ["4", "2", "3", "1"]


def test_sort_descending(engine, records):
    query = BusinessQuery(sort_by=SortField.REGISTRATION_DATE, sort_order=SortOrder.DESC)

    assert ids(engine.execute(records, query)) == ["1", "3", "2", "4"]


def test_sort_by_employees_is_stable_for_ties(engine, records):
    asc = engine.execute(records, BusinessQuery(sort_by=SortField.EMPLOYEES))
    desc = engine.execute(records, BusinessQuery(sort_by=SortField.EMPLOYEES, sort_order=SortOrder.DESC))

    # records 1 and 4 both have 25 employees and keep their input order
    assert ids(asc) == ["3", "1", "4", "2"]
    assert ids(desc) == ["2", "1", "4", "3"]


def test_missing_sort_values_sort_first(engine, records):
    records.append(make_record(id="5", name="No Data", employees=None, registrationDate="not-a-date"))

    by_employees = engine.execute(records, BusinessQuery(sort_by=SortField.EMPLOYEES))
    by_date = engine.execute(records, BusinessQuery(sort_by=SortField.REGISTRATION_DATE))

    assert ids(by_employees)[0] == "5"
    assert ids(by_date)[0] == "5"


@pytest.mark.parametrize("count, limit", [(0, 1), (1, 1), (7, 3), (9, 3), (10, 4), (25, 10)])
def test_pagination_arithmetic(engine, count, limit):
    records = [make_record(id=str(i), name=f"Business {i:03d}") for i in range(count)]

    total_seen = 0
    pages = math.ceil(count / limit)
    for page in range(1, pages + 2):
        response = engine.execute(records, BusinessQuery(page=page, limit=limit))
        assert response.total == count
        assert response.total_pages == pages
        assert len(response.records) <= limit
        total_seen += len(response.records)

    assert total_seen == count


def test_page_slices_sorted_set(engine, records):
    response = engine.execute(records, BusinessQuery(page=2, limit=3))

    assert ids(response) == ["3"]
    assert response.page == 2
    assert response.total_pages == 2


def test_page_beyond_end_is_empty(engine, records):
    response = engine.execute(records, BusinessQuery(page=5, limit=10))

    assert response.records == []
    assert response.total == 4


def test_parse_instant_handles_dates_and_datetimes():
    assert parse_instant("2023-01-15") == datetime(2023, 1, 15, tzinfo=timezone.utc)
    assert parse_instant("2023-01-15T08:00:00.000Z") == datetime(2023, 1, 15, 8, tzinfo=timezone.utc)
    assert parse_instant("2023-01-15T13:30:00+05:30") == datetime(2023, 1, 15, 8, tzinfo=timezone.utc)
    assert parse_instant("garbage") == EARLIEST
    assert parse_instant(None) == EARLIEST
