# sdk/pystore.py
import os
import requests
import httpx
from typing import Any, Dict, List, Optional
from rich import print

DEFAULT_BASE_URL = os.getenv("STORE_API_URL", "http://127.0.0.1:3000")

class StoreClient:
    """
    Thin client for the catalog API.

    `session` may be any requests-compatible client (a requests.Session by
    default; tests pass a FastAPI TestClient).
    """

    def __init__(self, base_url: str = DEFAULT_BASE_URL, timeout: int = 10, session: Any = None):
        self.base_url = base_url.rstrip("/")
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def health(self) -> Dict[str, Any]:
        r = self.session.get(self._url("/health"), timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def reset(self) -> Dict[str, Any]:
        r = self.session.post(self._url("/reset"), timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    # Products
    def list_products(self) -> List[Dict[str, Any]]:
        r = self.session.get(self._url("/api/products"), timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def get_product(self, product_id: int) -> Optional[Dict[str, Any]]:
        r = self.session.get(self._url(f"/api/products/{product_id}"), timeout=self.timeout)
        # missing product -> None, caller decides
        if r.status_code == 404:
            return None
        r.raise_for_status()
        return r.json()

    def create_product(self, **fields: Any) -> Dict[str, Any]:
        r = self.session.post(self._url("/api/products"), json=fields, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def update_product(self, product_id: int, **fields: Any) -> Optional[Dict[str, Any]]:
        r = self.session.patch(self._url(f"/api/products/{product_id}"), json=fields, timeout=self.timeout)
        if r.status_code == 404:
            return None
        r.raise_for_status()
        return r.json()

    def delete_product(self, product_id: int) -> Optional[Dict[str, Any]]:
        r = self.session.delete(self._url(f"/api/products/{product_id}"), timeout=self.timeout)
        if r.status_code == 404:
            return None
        r.raise_for_status()
        return r.json()

    # Async create (example)
    async def create_product_async(self, **fields: Any) -> Dict[str, Any]:
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            r = await client.post(self._url("/api/products"), json=fields)
            r.raise_for_status()
            return r.json()


def _parse_fields(pairs: List[str]) -> Dict[str, Any]:
    # key=value pairs; numbers are sent as numbers
    out: Dict[str, Any] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep:
            raise SystemExit(f"expected key=value, got '{pair}'")
        for cast in (int, float):
            try:
                out[key] = cast(value)
                break
            except ValueError:
                continue
        else:
            out[key] = value
    return out


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="PyStore CLI")
    parser.add_argument("--base-url", default=DEFAULT_BASE_URL, help="API base URL")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list-products", help="List all products")

    gp = subparsers.add_parser("get-product", help="Get a product by its ID")
    gp.add_argument("--product-id", type=int, required=True, help="ID of the product")

    cp = subparsers.add_parser("create-product", help="Create a product from key=value pairs")
    cp.add_argument("fields", nargs="+", help="e.g. name=Mouse price=5000 stock=3")

    up = subparsers.add_parser("update-product", help="Patch a product with key=value pairs")
    up.add_argument("--product-id", type=int, required=True, help="ID of the product")
    up.add_argument("fields", nargs="+", help="fields to change")

    dp = subparsers.add_parser("delete-product", help="Delete a product")
    dp.add_argument("--product-id", type=int, required=True, help="ID of the product")

    subparsers.add_parser("reset", help="Restore the seed catalog")

    args = parser.parse_args()
    c = StoreClient(base_url=args.base_url)

    if args.command == "list-products":
        print(c.list_products())
    elif args.command == "get-product":
        print(c.get_product(args.product_id) or f"[red]Product {args.product_id} not found[/red]")
    elif args.command == "create-product":
        print(c.create_product(**_parse_fields(args.fields)))
    elif args.command == "update-product":
        print(c.update_product(args.product_id, **_parse_fields(args.fields))
              or f"[red]Product {args.product_id} not found[/red]")
    elif args.command == "delete-product":
        print(c.delete_product(args.product_id) or f"[red]Product {args.product_id} not found[/red]")
    elif args.command == "reset":
        print(c.reset())
