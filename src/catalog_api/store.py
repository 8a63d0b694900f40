"""In-memory product catalog. Every method locks and hands out deep copies."""

from __future__ import annotations

import copy
import uuid
from threading import Lock
from typing import Any, Dict, Iterable, List, Optional

from catalog_api.errors import AppError

Product = Dict[str, Any]

SEED_PRODUCTS: List[Product] = [
    {
        "id": "1",
        "name": "Laptop",
        "description": "High-performance laptop with 16GB RAM",
        "price": 1200,
        "category": "electronics",
        "inStock": True,
    },
    {
        "id": "2",
        "name": "Smartphone",
        "description": "Latest model with 128GB storage",
        "price": 800,
        "category": "electronics",
        "inStock": True,
    },
    {
        "id": "3",
        "name": "Coffee Maker",
        "description": "Programmable coffee maker with timer",
        "price": 50,
        "category": "kitchen",
        "inStock": False,
    },
]


def _not_found(product_id: str) -> AppError:
    return AppError.not_found(f"Product with ID {product_id} not found.")


def _without_id(fields: Product) -> Product:
    return {k: v for k, v in fields.items() if k != "id"}


class CatalogStore:
    def __init__(self, products: Optional[Iterable[Product]] = None) -> None:
        self._lock = Lock()
        seed = SEED_PRODUCTS if products is None else products
        self._products: List[Product] = copy.deepcopy(list(seed))

    def _index_of(self, product_id: str) -> int:
        for i, product in enumerate(self._products):
            if product.get("id") == product_id:
                return i
        return -1

    def find_by_id(self, product_id: str) -> Optional[Product]:
        with self._lock:
            i = self._index_of(product_id)
            return copy.deepcopy(self._products[i]) if i != -1 else None

    def insert(self, fields: Product) -> Product:
        """Store a new product under a fresh id; any caller-supplied id is dropped."""
        product = {"id": str(uuid.uuid4())}
        product.update(copy.deepcopy(_without_id(fields)))
        with self._lock:
            self._products.append(product)
            return copy.deepcopy(product)

    def update(self, product_id: str, fields: Product) -> Product:
        """Merge ``fields`` into an existing product. The id never changes."""
        with self._lock:
            i = self._index_of(product_id)
            if i == -1:
                raise _not_found(product_id)
            self._products[i].update(copy.deepcopy(_without_id(fields)))
            return copy.deepcopy(self._products[i])

    def delete(self, product_id: str) -> None:
        with self._lock:
            i = self._index_of(product_id)
            if i == -1:
                raise _not_found(product_id)
            del self._products[i]

    def list(self) -> List[Product]:
        with self._lock:
            return copy.deepcopy(self._products)

    def __len__(self) -> int:
        with self._lock:
            return len(self._products)
