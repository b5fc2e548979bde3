"""Tests for the SQLite-backed durable map."""

import pytest

from shoe_store_api.app.core.db import init_db
from shoe_store_api.app.core.exceptions import StorageError
from shoe_store_api.app.core.storage import DurableMap
from shoe_store_api.app.schemas.shoe import Shoe


class TestDurableMap:
    """Tests for DurableMap primitives."""

    def test_get_missing_key(self, storage):
        """Test that an unknown key yields None."""
        assert storage.get("missing") is None

    def test_insert_then_get(self, storage, sample_shoe):
        """Test that an inserted value is returned unchanged."""
        storage.insert(sample_shoe.id, sample_shoe)

        assert storage.get(sample_shoe.id) == sample_shoe

    def test_insert_overwrites(self, storage, sample_shoe):
        """Test that inserting an existing key replaces its value."""
        storage.insert(sample_shoe.id, sample_shoe)
        changed = sample_shoe.model_copy(update={"rating": 2.5})

        storage.insert(changed.id, changed)

        assert storage.get(sample_shoe.id).rating == 2.5
        assert len(storage) == 1

    def test_remove_returns_value(self, storage, sample_shoe):
        """Test that remove hands back the deleted value."""
        storage.insert(sample_shoe.id, sample_shoe)

        removed = storage.remove(sample_shoe.id)

        assert removed == sample_shoe
        assert storage.get(sample_shoe.id) is None
        assert len(storage) == 0

    def test_remove_missing_key(self, storage):
        """Test that removing an unknown key yields None."""
        assert storage.remove("missing") is None

    def test_values_ordered_by_key(self, storage, sample_shoe):
        """Test that values come back in key order, not insertion order."""
        for key in ["c", "a", "b"]:
            storage.insert(key, sample_shoe.model_copy(update={"id": key}))

        assert [shoe.id for shoe in storage.values()] == ["a", "b", "c"]

    def test_values_survive_reopen(self, db_path, sample_shoe):
        """Test that records persist across map instances on the same file."""
        DurableMap(db_path, Shoe).insert(sample_shoe.id, sample_shoe)

        reopened = DurableMap(db_path, Shoe)

        assert reopened.values() == [sample_shoe]

    def test_key_size_bound(self, db_path, sample_shoe):
        """Test that oversized keys are refused."""
        small = DurableMap(db_path, Shoe, max_key_size=8)

        with pytest.raises(StorageError, match="Key exceeds 8 bytes"):
            small.insert(sample_shoe.id, sample_shoe)

    def test_value_size_bound(self, storage, sample_shoe):
        """Test that oversized values are refused and nothing is written."""
        big = sample_shoe.model_copy(update={"name": "x" * 2048})

        with pytest.raises(StorageError, match="Value exceeds 1024 bytes"):
            storage.insert(big.id, big)
        assert len(storage) == 0

    def test_stored_document_uses_wire_names(self, storage, sample_shoe):
        """Test that the JSON on disk keeps the camelCase field names."""
        storage.insert(sample_shoe.id, sample_shoe)

        from shoe_store_api.app.core.db import get_connection
        conn = get_connection(storage.db_path)
        try:
            row = conn.execute("SELECT value FROM shoes WHERE key = ?", (sample_shoe.id,)).fetchone()
        finally:
            conn.close()

        assert '"shoeURL"' in row["value"]
        assert '"createdAt"' in row["value"]


class TestInitDb:
    """Tests for database migrations."""

    def test_init_db_is_idempotent(self, db_path, sample_shoe):
        """Test that re-running migrations keeps existing records."""
        DurableMap(db_path, Shoe).insert(sample_shoe.id, sample_shoe)

        init_db(db_path)

        assert len(DurableMap(db_path, Shoe)) == 1

    def test_invalid_table_name(self, tmp_path):
        """Test that table names must be identifiers."""
        with pytest.raises(ValueError, match="Invalid table name"):
            init_db(str(tmp_path / "x.db"), table="shoes; DROP TABLE x")
