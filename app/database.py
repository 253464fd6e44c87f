import copy
import logging
import re
import threading
from typing import Dict, Any, Iterable, List, Mapping, Optional, Union

from .core import SEED_PRODUCTS, shallow_merge

# This file holds the in-memory product collection and its lock.

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class ProductNotFound(LookupError):
    """Raised when an operation targets an id that is not in the store."""

    def __init__(self, product_id: Union[int, str]):
        super().__init__(f"product {product_id} not found")
        self.product_id = product_id


def parse_product_id(raw: str) -> int:
    """
    Read an id from a URL segment: leading whitespace, an optional sign and
    the leading digits ("12abc" is 12). Anything else is an unknown product.
    """
    m = _LEADING_INT.match(raw)
    if not m:
        logger.debug("unparseable product id %r", raw)
        raise ProductNotFound(raw)
    return int(m.group(1))


class ProductStore:
    """
    Ordered in-memory collection of product records.

    Records are plain dicts and never leave the store: every read returns a
    copy. All operations run under one lock because FastAPI serves sync
    endpoints from a thread pool.

    id_policy chooses how create picks the next id:
      - "max":  highest id among all records + 1
      - "last": id of the last record in insertion order + 1. Can hand out
                a live id when the last record is not the highest one.
    """

    def __init__(self, seed: Optional[Iterable[Mapping[str, Any]]] = None, id_policy: str = "max"):
        if id_policy not in ("max", "last"):
            raise ValueError(f"unknown id policy: {id_policy!r}")
        self.id_policy = id_policy
        self._lock = threading.RLock()
        self._products: List[Dict[str, Any]] = []
        self.reset(seed)

    def __len__(self) -> int:
        with self._lock:
            return len(self._products)

    def _index_of(self, product_id: int) -> int:
        for i, p in enumerate(self._products):
            if p["id"] == product_id:
                return i
        logger.debug("product %s not found", product_id)
        raise ProductNotFound(product_id)

    def _next_id(self) -> int:
        if not self._products:
            return 1
        if self.id_policy == "last":
            return self._products[-1]["id"] + 1
        return max(p["id"] for p in self._products) + 1

    def reset(self, seed: Optional[Iterable[Mapping[str, Any]]] = None) -> None:
        records = SEED_PRODUCTS if seed is None else seed
        with self._lock:
            products = [dict(copy.deepcopy(r)) for r in records]
            for p in products:
                if not isinstance(p.get("id"), int):
                    raise ValueError(f"seed record without an integer id: {p!r}")
            self._products = products

    def list(self) -> List[Dict[str, Any]]:
        with self._lock:
            return copy.deepcopy(self._products)

    def get(self, product_id: int) -> Dict[str, Any]:
        with self._lock:
            return copy.deepcopy(self._products[self._index_of(product_id)])

    def create(self, fields: Mapping[str, Any]) -> Dict[str, Any]:
        with self._lock:
            product = {"id": self._next_id()}
            shallow_merge(product, copy.deepcopy(dict(fields)))
            self._products.append(product)
            logger.info("created product %s", product["id"])
            return copy.deepcopy(product)

    def update(self, product_id: int, fields: Mapping[str, Any]) -> Dict[str, Any]:
        with self._lock:
            product = self._products[self._index_of(product_id)]
            shallow_merge(product, copy.deepcopy(dict(fields)))
            logger.info("updated product %s (%s)", product_id, ", ".join(sorted(fields)) or "no fields")
            return copy.deepcopy(product)

    def delete(self, product_id: int) -> Dict[str, Any]:
        with self._lock:
            removed = self._products.pop(self._index_of(product_id))
            logger.info("deleted product %s", product_id)
            return removed
