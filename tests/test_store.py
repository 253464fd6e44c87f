"""Tests for the in-memory product store.

Covers the CRUD contract, not-found behaviour and both id policies.
"""

import pytest

from app.core import SEED_PRODUCTS, shallow_merge
from app.database import ProductNotFound, ProductStore, parse_product_id


def _seed(*ids):
    return [{"id": i, "name": f"p{i}"} for i in ids]


@pytest.fixture
def store():
    return ProductStore(seed=_seed(1, 2, 3))


def test_default_seed_has_ten_products():
    s = ProductStore()
    assert [p["id"] for p in s.list()] == list(range(1, 11))
    assert s.list() == SEED_PRODUCTS


def test_seed_is_copied():
    s = ProductStore()
    s.update(1, {"name": "changed"})
    assert SEED_PRODUCTS[0]["name"] == "Smartphone X"


def test_list_empty_store():
    assert ProductStore(seed=[]).list() == []


def test_created_product_is_listed_and_gettable(store):
    p = store.create({"name": "X", "price": 10})
    assert p in store.list()
    assert store.get(p["id"]) == p


def test_create_appends_at_end(store):
    p = store.create({"name": "X"})
    assert store.list()[-1] == p


def test_create_never_reuses_a_live_id_without_deletes(store):
    for _ in range(5):
        before = {p["id"] for p in store.list()}
        p = store.create({"name": "n"})
        assert p["id"] not in before


def test_create_on_empty_store_starts_at_one():
    s = ProductStore(seed=[])
    assert s.create({"name": "a"})["id"] == 1
    assert s.create({"name": "b"})["id"] == 2


def test_create_ignores_client_id(store):
    p = store.create({"id": 1, "name": "dup"})
    assert p["id"] == 4
    assert store.get(1)["name"] == "p1"


def test_returned_records_are_copies(store):
    p = store.get(1)
    p["name"] = "mutated"
    assert store.get(1)["name"] == "p1"
    store.list()[0]["name"] = "mutated"
    assert store.get(1)["name"] == "p1"


def test_update_changes_only_supplied_keys():
    s = ProductStore()
    before = s.get(3)
    after = s.update(3, {"stock": 0, "badge": "sold out"})
    assert after["stock"] == 0
    assert after["badge"] == "sold out"
    for key, value in before.items():
        if key != "stock":
            assert after[key] == value


def test_update_keeps_id(store):
    assert store.update(2, {"id": 99})["id"] == 2
    with pytest.raises(ProductNotFound):
        store.get(99)


def test_delete_removes_exactly_one(store):
    removed = store.delete(2)
    assert removed["id"] == 2
    assert len(store) == 2
    assert [p["id"] for p in store.list()] == [1, 3]
    with pytest.raises(ProductNotFound):
        store.get(2)


@pytest.mark.parametrize("op", [
    lambda s: s.get(42),
    lambda s: s.update(42, {"name": "x"}),
    lambda s: s.delete(42),
])
def test_missing_id_is_not_found_and_nothing_changes(store, op):
    before = store.list()
    with pytest.raises(ProductNotFound) as excinfo:
        op(store)
    assert excinfo.value.product_id == 42
    assert store.list() == before


def test_not_found_is_a_lookup_error(store):
    with pytest.raises(LookupError):
        store.get(0)


@pytest.mark.parametrize("policy", ["max", "last"])
def test_delete_last_then_create_reuses_freed_id(policy):
    s = ProductStore(seed=_seed(1, 2, 3), id_policy=policy)
    s.delete(3)
    assert s.create({"name": "X"})["id"] == 3


@pytest.mark.parametrize("policy", ["max", "last"])
def test_delete_middle_then_create(policy):
    s = ProductStore(seed=_seed(1, 2, 3), id_policy=policy)
    s.delete(2)
    assert s.create({"name": "X"})["id"] == 4


def test_max_policy_never_collides_when_last_is_not_highest():
    s = ProductStore(seed=_seed(1, 3, 2), id_policy="max")
    p = s.create({"name": "X"})
    assert p["id"] == 4
    ids = [r["id"] for r in s.list()]
    assert len(ids) == len(set(ids))


def test_last_policy_collides_when_last_is_not_highest():
    s = ProductStore(seed=_seed(1, 3, 2), id_policy="last")
    p = s.create({"name": "X"})
    assert p["id"] == 3
    ids = [r["id"] for r in s.list()]
    assert ids.count(3) == 2


def test_max_policy_across_interleaved_deletes_and_creates():
    s = ProductStore(seed=_seed(5, 2), id_policy="max")
    assert s.create({})["id"] == 6
    s.delete(6)
    s.delete(2)
    assert s.create({})["id"] == 6
    s.delete(5)
    assert s.create({})["id"] == 7
    ids = [r["id"] for r in s.list()]
    assert len(ids) == len(set(ids))


def test_unknown_policy_rejected():
    with pytest.raises(ValueError):
        ProductStore(id_policy="counter")


def test_reset_restores_seed(store):
    store.delete(1)
    store.reset()
    assert len(store) == 10


def test_shallow_merge_skips_id():
    record = {"id": 1, "name": "a", "stock": 2}
    shallow_merge(record, {"id": 5, "name": "b"})
    assert record == {"id": 1, "name": "b", "stock": 2}


def test_seed_record_without_id_is_rejected():
    with pytest.raises(ValueError):
        ProductStore(seed=[{"id": 1}, {"name": "no id"}])


def test_rejected_seed_leaves_store_untouched(store):
    with pytest.raises(ValueError):
        store.reset([{"id": "7"}])
    assert [p["id"] for p in store.list()] == [1, 2, 3]


@pytest.mark.parametrize("raw,expected", [("7", 7), (" 12abc", 12), ("-3", -3), ("2.9", 2)])
def test_parse_product_id_reads_leading_integer(raw, expected):
    assert parse_product_id(raw) == expected


@pytest.mark.parametrize("raw", ["abc", "", "x1"])
def test_parse_product_id_without_digits_is_not_found(raw):
    with pytest.raises(ProductNotFound):
        parse_product_id(raw)
