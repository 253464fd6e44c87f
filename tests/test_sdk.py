# tests/test_sdk.py
from fastapi.testclient import TestClient

from app.main import app
from sdk.pystore import StoreClient, _parse_fields

c = StoreClient(base_url="http://testserver", session=TestClient(app))

def test_sdk_crud_round():
    assert c.reset() == {"status": "reset"}
    assert c.health() == {"status": "ok"}
    assert len(c.list_products()) == 10

    p = c.create_product(name="Hub", price=4500, stock=3)
    assert p["id"] == 11
    assert c.get_product(11) == p

    updated = c.update_product(11, stock=2)
    assert updated["stock"] == 2
    assert updated["name"] == "Hub"

    assert c.delete_product(11) == {"message": "Product deleted"}
    assert c.get_product(11) is None

def test_sdk_not_found_returns_none():
    c.reset()
    assert c.get_product(999) is None
    assert c.update_product(999, name="x") is None
    assert c.delete_product(999) is None
    assert len(c.list_products()) == 10

def test_parse_fields_casts_numbers():
    assert _parse_fields(["name=Mouse", "price=49.5", "stock=3"]) == {
        "name": "Mouse", "price": 49.5, "stock": 3,
    }
