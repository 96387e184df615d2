"""Health check endpoint."""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from api.dependencies import get_product_repo, get_user_repo
from port.product_repository import ProductRepository
from port.user_repository import UserRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health(
    users: UserRepository = Depends(get_user_repo),
    products: ProductRepository = Depends(get_product_repo),
):
    """Health check endpoint with storage status."""
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
        "services": {
            "storage": {
                "status": "healthy",
                "backend": "memory",
                "users": users.count(),
                "products": products.count(),
            }
        },
    }
