"""Product service — CRUD business logic over a ProductRepository.

Enforces SKU uniqueness.
"""

import logging

from domain.model.errors import DuplicateError, NotFoundError
from domain.model.product import Product
from port.product_repository import ProductRepository

logger = logging.getLogger(__name__)

PRODUCT_NOT_FOUND = "Product not found"
SKU_EXISTS = "Product with this SKU already exists"


def list_products(repo: ProductRepository) -> list[Product]:
    return repo.list_all()


def get_product(repo: ProductRepository, product_id: str) -> Product:
    product = repo.get_by_id(product_id)
    if not product:
        raise NotFoundError(PRODUCT_NOT_FOUND)
    return product


def create_product(
    repo: ProductRepository,
    name: str,
    price: str,
    sku: str,
    stock: int | None = None,
    status: str | None = None,
    description: str | None = None,
    image: str | None = None,
) -> Product:
    """Create a product with a unique SKU.

    Raises:
        DuplicateError: SKU already used
    """
    if repo.get_by_sku(sku):
        raise DuplicateError(SKU_EXISTS)

    product = repo.create_if_absent(
        name=name,
        price=price,
        sku=sku,
        stock=stock,
        status=status,
        description=description,
        image=image,
    )
    if not product:
        raise DuplicateError(SKU_EXISTS)

    logger.info("Product created", extra={"productId": product.id, "sku": product.sku})
    return product


def update_product(repo: ProductRepository, product_id: str, changes: dict) -> Product:
    """Apply a partial update; ``updated_at`` always advances.

    Raises:
        NotFoundError: unknown id
        DuplicateError: new SKU belongs to another product
    """
    sku = changes.get("sku")
    if sku is not None:
        owner = repo.get_by_sku(sku)
        if owner and owner.id != product_id:
            raise DuplicateError(SKU_EXISTS)

    product = repo.update(product_id, changes)
    if not product:
        raise NotFoundError(PRODUCT_NOT_FOUND)

    logger.info("Product updated", extra={"productId": product_id, "fields": sorted(changes)})
    return product


def delete_product(repo: ProductRepository, product_id: str) -> None:
    if not repo.delete(product_id):
        raise NotFoundError(PRODUCT_NOT_FOUND)
    logger.info("Product deleted", extra={"productId": product_id})
