# ==============================================
# Tests for CellStore
# ==============================================

import pytest

from cellstats.errors import UnknownFieldError
from cellstats.storage import CellStore


class TestInsert:

    def test_keys_start_at_one(self, store, make_cell):
        assert store.insert(make_cell()) == 1

    def test_keys_in_order(self, store, make_cell):
        keys = [store.insert(make_cell(model=f"M{i}")) for i in range(5)]
        assert keys == [1, 2, 3, 4, 5]
        assert [key for key, _ in store.all()] == keys

    def test_deleted_key_never_reused(self, store, make_cell):
        for _ in range(3):
            store.insert(make_cell())

        assert store.delete(2)
        assert store.insert(make_cell()) == 4

    def test_deleting_highest_key_does_not_reuse_it(self, store, make_cell):
        store.insert(make_cell())
        store.insert(make_cell())
        store.delete(2)

        assert store.insert(make_cell()) == 3


class TestDeleteAndGet:

    def test_delete_missing_returns_false(self, store):
        assert store.delete(42) is False

    def test_delete_twice(self, store, make_cell):
        key = store.insert(make_cell())
        assert store.delete(key) is True
        assert store.delete(key) is False

    def test_get(self, store, make_cell):
        cell = make_cell(oem="Apple")
        key = store.insert(cell)

        assert store.get(key) is cell
        assert store.get(key + 1) is None

    def test_len_contains_iter(self, store, make_cell):
        first = make_cell(model="A")
        second = make_cell(model="B")
        store.insert(first)
        store.insert(second)
        store.delete(1)

        assert len(store) == 1
        assert 2 in store
        assert 1 not in store
        assert list(store) == [second]

    def test_empty(self):
        store = CellStore()
        assert store.all() == []
        assert len(store) == 0


class TestUpdateField:

    def test_update_renormalizes(self, store, make_cell):
        key = store.insert(make_cell())

        assert store.update_field(key, "launch_status", "Cancelled")
        assert store.get(key).launch_status == "Cancelled"

    def test_update_missing_key(self, store):
        assert store.update_field(7, "oem", "Nokia") is False

    def test_update_unknown_field(self, store, make_cell):
        key = store.insert(make_cell())
        with pytest.raises(UnknownFieldError):
            store.update_field(key, "colour", "red")

    def test_update_keeps_order(self, store, make_cell):
        store.insert(make_cell(model="A"))
        store.insert(make_cell(model="B"))
        store.update_field(1, "model", "A2")

        assert [cell.model for cell in store] == ["A2", "B"]
