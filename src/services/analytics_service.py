"""Analytics service — dashboard statistics and chart series.

Collection counts are derived from the repositories. Revenue, orders and
the session metrics are fixed placeholders, as are the chart series.
"""

from port.product_repository import ProductRepository
from port.user_repository import UserRepository

PLACEHOLDER_METRICS = {
    "revenue": 89547,
    "orders": 892,
    "conversion_rate": 3.24,
    "avg_session_duration": "4:35",
    "bounce_rate": 42.3,
}

REVENUE_SERIES = [
    {"month": "Jan", "revenue": 12000, "users": 1200},
    {"month": "Feb", "revenue": 15000, "users": 1400},
    {"month": "Mar", "revenue": 18000, "users": 1600},
    {"month": "Apr", "revenue": 22000, "users": 1800},
    {"month": "May", "revenue": 25000, "users": 2000},
    {"month": "Jun", "revenue": 28000, "users": 2200},
]

SALES_SERIES = [
    {"name": "Jan", "sales": 4000, "orders": 240},
    {"name": "Feb", "sales": 3000, "orders": 138},
    {"name": "Mar", "sales": 2000, "orders": 98},
    {"name": "Apr", "sales": 2780, "orders": 108},
    {"name": "May", "sales": 1890, "orders": 48},
    {"name": "Jun", "sales": 2390, "orders": 200},
]

TRAFFIC_SOURCES = [
    {"name": "Direct", "value": 35, "color": "#3b82f6"},
    {"name": "Social", "value": 25, "color": "#10b981"},
    {"name": "Search", "value": 20, "color": "#f59e0b"},
    {"name": "Email", "value": 15, "color": "#ef4444"},
    {"name": "Referral", "value": 5, "color": "#8b5cf6"},
]


def get_stats(users: UserRepository, products: ProductRepository) -> dict:
    """Summarize current collections merged with the placeholder metrics."""
    all_products = products.list_all()
    return {
        "total_users": users.count(),
        "total_products": len(all_products),
        "active_products": sum(1 for p in all_products if p.is_active),
        "total_stock": sum(p.stock for p in all_products),
        **PLACEHOLDER_METRICS,
    }


def get_revenue_series() -> list[dict]:
    return [dict(point) for point in REVENUE_SERIES]


def get_sales_series() -> list[dict]:
    return [dict(point) for point in SALES_SERIES]


def get_traffic_sources() -> list[dict]:
    return [dict(source) for source in TRAFFIC_SOURCES]
