import json

import pytest

from business_registry.core.exceptions import StorageError
from business_registry.seed import sample_businesses
from business_registry.storage import JsonRecordStore
from tests.conftest import make_record


@pytest.mark.asyncio
class TestJsonRecordStore:

    async def test_missing_document_is_empty_registry(self, store):
        assert await store.load_all() == []

    async def test_empty_file_is_empty_registry(self, store, data_file):
        data_file.parent.mkdir(parents=True)
        data_file.write_text("", encoding="utf-8")

        assert await store.load_all() == []

    async def test_save_then_load_preserves_order(self, store):
        records = [make_record(id=str(i), name=f"Business {i}") for i in (3, 1, 2)]

        await store.save_all(records)
        loaded = await store.load_all()

        assert [r.id for r in loaded] == ["3", "1", "2"]
        assert loaded == records

    async def test_document_is_pretty_printed_camel_case(self, store, data_file):
        await store.save_all([make_record(website=None)])

        text = data_file.read_text(encoding="utf-8")
        document = json.loads(text)

        assert text.startswith("[\n  {")
        assert document[0]["udyamNumber"] == "UDYAM-MH-01-0000001"
        assert document[0]["ownerName"] == "Asha Rao"
        assert "website" not in document[0]

    async def test_save_leaves_no_temporary_files(self, store, data_file):
        await store.save_all([make_record()])
        await store.save_all([make_record(), make_record(id="b-2")])

        assert sorted(p.name for p in data_file.parent.iterdir()) == ["businesses.json"]

    async def test_corrupt_document_raises_storage_error(self, store, data_file):
        data_file.parent.mkdir(parents=True)
        data_file.write_text("{not json", encoding="utf-8")

        with pytest.raises(StorageError):
            await store.load_all()

    async def test_non_array_document_raises_storage_error(self, store, data_file):
        data_file.parent.mkdir(parents=True)
        data_file.write_text('{"id": "1"}', encoding="utf-8")

        with pytest.raises(StorageError):
            await store.load_all()

    async def test_invalid_record_raises_storage_error(self, store, data_file):
        data_file.parent.mkdir(parents=True)
        data_file.write_text('[{"id": "1", "status": "Bogus"}]', encoding="utf-8")

        with pytest.raises(StorageError):
            await store.load_all()

    async def test_legacy_mode_serves_empty_registry_on_read_failure(self, data_file):
        data_file.parent.mkdir(parents=True)
        data_file.write_text("{not json", encoding="utf-8")
        lenient = JsonRecordStore(data_file, read_failure_as_empty=True)

        assert await lenient.load_all() == []

    async def test_write_failure_raises_storage_error(self, tmp_path):
        blocker = tmp_path / "not-a-directory"
        blocker.write_text("x", encoding="utf-8")
        broken = JsonRecordStore(blocker / "businesses.json")

        with pytest.raises(StorageError):
            await broken.save_all([make_record()])

    async def test_ensure_initialized_seeds_only_once(self, store):
        assert await store.ensure_initialized(sample_businesses()) is True
        await store.save_all([make_record()])

        assert await store.ensure_initialized(sample_businesses()) is False
        assert [r.id for r in await store.load_all()] == ["b-1"]

    async def test_seed_set_round_trips(self, store):
        await store.ensure_initialized(sample_businesses())

        loaded = await store.load_all()

        assert [r.id for r in loaded] == ["1", "2", "3", "4", "5", "6"]
        assert loaded[0].name == "Tech Innovations Pvt Ltd"
