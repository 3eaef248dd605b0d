# tests/conftest.py
import itertools
import random
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from business_registry.config import Settings
from business_registry.core.concurrency import MutationGate
from business_registry.core.identifiers import IdentifierGenerator
from business_registry.core.mutation_engine import MutationEngine
from business_registry.main import create_app
from business_registry.models.business import BusinessRecord
from business_registry.storage import JsonRecordStore

FIXED_NOW = datetime(2024, 5, 1, 10, 30, tzinfo=timezone.utc)


def make_record(**overrides) -> BusinessRecord:
    """A valid stored business; keyword overrides use document (camelCase) names"""
    data = {
        "id": "b-1",
        "name": "Acme Traders",
        "udyamNumber": "UDYAM-MH-01-0000001",
        "category": "Services",
        "status": "Active",
        "registrationDate": "2023-01-01",
        "location": "Pune, Maharashtra",
        "employees": 10,
        "ownerName": "Asha Rao",
        "email": "asha@acme.com",
        "phone": "+91-9000000001",
    }
    data.update(overrides)
    return BusinessRecord.model_validate(data)


@pytest.fixture()
def valid_payload():
    return {
        "name": "Acme",
        "category": "Services",
        "ownerName": "A",
        "email": "a@b.com",
        "phone": "123",
    }


@pytest.fixture()
def data_file(tmp_path):
    return tmp_path / "data" / "businesses.json"


@pytest.fixture()
def store(data_file):
    return JsonRecordStore(data_file)


@pytest.fixture()
def ids():
    """Predictable ids (biz-1, biz-2, ...) and a seeded random source"""
    counter = itertools.count(1)
    return IdentifierGenerator(rng=random.Random(1234), id_factory=lambda: f"biz-{next(counter)}")


@pytest.fixture()
def engine(store, ids):
    return MutationEngine(store, MutationGate(), ids, clock=lambda: FIXED_NOW)


@pytest.fixture()
def settings(data_file):
    return Settings(DATA_FILE=str(data_file), SEED_ON_START=False, LOG_LEVEL="WARNING")


@pytest.fixture()
def client(settings, ids):
    """Client against an empty registry"""
    with TestClient(create_app(settings, ids=ids)) as test_client:
        yield test_client


@pytest.fixture()
def seeded_client(data_file, ids):
    """Client against a registry seeded with the example businesses"""
    settings = Settings(DATA_FILE=str(data_file), SEED_ON_START=True, LOG_LEVEL="WARNING")
    with TestClient(create_app(settings, ids=ids)) as test_client:
        yield test_client
