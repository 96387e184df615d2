"""In-memory implementation of ProductRepository."""

import threading
from dataclasses import replace
from datetime import datetime, timedelta, timezone

from domain.model.product import Product


class InMemoryProductRepository:
    def __init__(self):
        self.store: dict[str, Product] = {}
        self._lock = threading.Lock()

    # ── write operations ─────────────────────────────────────

    def create(
        self,
        name: str,
        price: str,
        sku: str,
        stock: int | None = None,
        status: str | None = None,
        description: str | None = None,
        image: str | None = None,
    ) -> Product:
        product = Product.create(
            name=name,
            price=price,
            sku=sku,
            stock=stock,
            status=status,
            description=description,
            image=image,
        )
        with self._lock:
            self.store[product.id] = product
        return product

    def create_if_absent(
        self,
        name: str,
        price: str,
        sku: str,
        stock: int | None = None,
        status: str | None = None,
        description: str | None = None,
        image: str | None = None,
    ) -> Product | None:
        product = Product.create(
            name=name,
            price=price,
            sku=sku,
            stock=stock,
            status=status,
            description=description,
            image=image,
        )
        with self._lock:
            if self._find_by_sku(sku):
                return None
            self.store[product.id] = product
        return product

    def add(self, product: Product) -> Product:
        """Insert a fully built product as-is (bootstrap data)."""
        with self._lock:
            self.store[product.id] = product
        return product

    def update(self, product_id: str, changes: dict) -> Product | None:
        allowed = {
            k: v for k, v in changes.items()
            if k in Product.__dataclass_fields__ and k not in Product.IMMUTABLE_FIELDS
        }
        with self._lock:
            product = self.store.get(product_id)
            if not product:
                return None
            # updated_at must strictly advance, even on a coarse clock
            now = max(
                datetime.now(timezone.utc),
                product.updated_at + timedelta(microseconds=1),
            )
            updated = replace(product, **allowed, updated_at=now)
            self.store[product_id] = updated
        return updated

    def delete(self, product_id: str) -> bool:
        with self._lock:
            return self.store.pop(product_id, None) is not None

    # ── read operations ──────────────────────────────────────

    def get_by_id(self, product_id: str) -> Product | None:
        return self.store.get(product_id)

    def get_by_sku(self, sku: str) -> Product | None:
        with self._lock:
            return self._find_by_sku(sku)

    def list_all(self) -> list[Product]:
        with self._lock:
            return list(self.store.values())

    def count(self) -> int:
        return len(self.store)

    def _find_by_sku(self, sku: str) -> Product | None:
        for product in self.store.values():
            if product.sku == sku:
                return product
        return None
