"""In-memory product store.

Records keep insertion order and live for the lifetime of the process. All
operations take the store lock, since FastAPI runs sync endpoints in a thread
pool and concurrent inserts would otherwise race.
"""

from __future__ import annotations

import threading
from collections import Counter
from typing import Iterable
from uuid import uuid4

from common.models import Product, ProductBase, ProductPage, ProductStats

from product_service.errors import NotFoundError

PRODUCT_NOT_FOUND = "Product not found"

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 5

SEED_PRODUCTS: tuple[Product, ...] = (
    Product(
        id="1",
        name="Laptop",
        description="High-performance laptop with 16GB RAM",
        price=1200,
        category="electronics",
        in_stock=True,
    ),
    Product(
        id="2",
        name="Smartphone",
        description="Latest model with 128GB storage",
        price=800,
        category="electronics",
        in_stock=True,
    ),
    Product(
        id="3",
        name="Coffee Maker",
        description="Programmable coffee maker with timer",
        price=50,
        category="kitchen",
        in_stock=False,
    ),
)


class ProductStore:
    def __init__(self, initial: Iterable[Product] | None = None):
        self._lock = threading.RLock()
        self._products: list[Product] = [p.model_copy() for p in (initial or ())]

    def __len__(self) -> int:
        with self._lock:
            return len(self._products)

    def list(self) -> list[Product]:
        with self._lock:
            return list(self._products)

    def find(self, product_id: str) -> Product | None:
        with self._lock:
            return next((p for p in self._products if p.id == product_id), None)

    def insert(self, product: Product) -> Product:
        # No duplicate-id check; ids come from uuid4 in create().
        with self._lock:
            self._products.append(product)
        return product

    def create(self, fields: ProductBase) -> Product:
        product = Product(id=str(uuid4()), **fields.model_dump())
        return self.insert(product)

    def replace(self, product_id: str, fields: ProductBase) -> Product:
        """Overwrite every field of the record, keeping only its id."""
        with self._lock:
            index = self._index_of(product_id)
            product = Product(id=product_id, **fields.model_dump())
            self._products[index] = product
            return product

    def remove(self, product_id: str) -> Product:
        with self._lock:
            return self._products.pop(self._index_of(product_id))

    def query(
        self,
        category: str | None = None,
        search: str | None = None,
        page: int = DEFAULT_PAGE,
        limit: int = DEFAULT_LIMIT,
    ) -> ProductPage:
        """Filter by category and name search, then paginate the result."""
        results = self.list()
        if category:
            wanted = category.lower()
            results = [p for p in results if p.category.lower() == wanted]
        if search:
            needle = search.lower()
            results = [p for p in results if needle in p.name.lower()]

        start = (page - 1) * limit
        return ProductPage(
            total=len(results),
            page=page,
            limit=limit,
            data=results[start : start + limit],
        )

    def stats(self) -> ProductStats:
        with self._lock:
            counts = Counter(p.category for p in self._products)
            return ProductStats(total_products=len(self._products), count_by_category=dict(counts))

    def _index_of(self, product_id: str) -> int:
        for index, product in enumerate(self._products):
            if product.id == product_id:
                return index
        raise NotFoundError(PRODUCT_NOT_FOUND)
