from typing import Protocol

from domain.model.product import Product


class ProductRepository(Protocol):
    """Protocol defining the interface for product data access."""

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
        """Insert a new product. Does not check SKU uniqueness."""
        ...

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
        """Atomically insert a new product unless the SKU is taken. Return None on conflict."""
        ...

    def get_by_id(self, product_id: str) -> Product | None:
        ...

    def get_by_sku(self, sku: str) -> Product | None:
        """Find a product by SKU (exact match)."""
        ...

    def update(self, product_id: str, changes: dict) -> Product | None:
        """Merge supplied fields and refresh updated_at. Return None if not found."""
        ...

    def delete(self, product_id: str) -> bool:
        ...

    def list_all(self) -> list[Product]:
        ...

    def count(self) -> int:
        ...
