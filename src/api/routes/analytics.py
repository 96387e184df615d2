"""Analytics API routes for the dashboard charts."""

from fastapi import APIRouter, Depends

from api.dependencies import get_product_repo, get_user_repo
from api.models import RevenuePoint, SalesPoint, StatsResponse, TrafficSource
from port.product_repository import ProductRepository
from port.user_repository import UserRepository
from services import analytics_service

router = APIRouter(prefix="/analytics", tags=["analytics"])


@router.get("/stats", response_model=StatsResponse)
async def get_stats(
    users: UserRepository = Depends(get_user_repo),
    products: ProductRepository = Depends(get_product_repo),
):
    """Collection counts plus placeholder revenue and session metrics."""
    return StatsResponse(**analytics_service.get_stats(users, products))


@router.get("/revenue", response_model=list[RevenuePoint])
async def get_revenue():
    return analytics_service.get_revenue_series()


@router.get("/sales", response_model=list[SalesPoint])
async def get_sales():
    return analytics_service.get_sales_series()


@router.get("/traffic", response_model=list[TrafficSource])
async def get_traffic():
    return analytics_service.get_traffic_sources()
