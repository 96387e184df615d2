"""Product API routes for product CRUD operations.

Endpoints mirror /users, keyed for uniqueness by SKU instead of email.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status

from api.dependencies import get_product_repo
from api.models import ProductCreate, ProductResponse, ProductUpdate
from domain.model.errors import DuplicateError, NotFoundError
from port.product_repository import ProductRepository
from services import product_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/products", tags=["products"])


@router.get("", response_model=list[ProductResponse])
async def list_products(repo: ProductRepository = Depends(get_product_repo)):
    return [ProductResponse.model_validate(p) for p in product_service.list_products(repo)]


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str, repo: ProductRepository = Depends(get_product_repo)):
    try:
        product = product_service.get_product(repo, product_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ProductResponse.model_validate(product)


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_product(request: ProductCreate, repo: ProductRepository = Depends(get_product_repo)):
    """Create a product.

    Raises:
        HTTPException: 409 if the SKU is already used
    """
    try:
        product = product_service.create_product(repo, **request.model_dump())
    except DuplicateError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return ProductResponse.model_validate(product)


@router.patch("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: str,
    request: ProductUpdate,
    repo: ProductRepository = Depends(get_product_repo),
):
    try:
        product = product_service.update_product(
            repo, product_id, request.model_dump(exclude_unset=True),
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except DuplicateError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return ProductResponse.model_validate(product)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(product_id: str, repo: ProductRepository = Depends(get_product_repo)):
    try:
        product_service.delete_product(repo, product_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
