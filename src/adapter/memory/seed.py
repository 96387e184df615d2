"""Bootstrap dataset loaded into fresh in-memory repositories.

Restarting the process discards all data and reloads exactly this set:
one admin user, two sample users and four sample products.
"""

import logging
import random
from datetime import datetime, timedelta, timezone

from adapter.memory.product_repository import InMemoryProductRepository
from adapter.memory.user_repository import InMemoryUserRepository
from domain.model.product import Product
from domain.model.user import User

logger = logging.getLogger(__name__)

SEED_PASSWORD = 'password'
SEED_PHONE = '+1 (555) 123-4567'

ADMIN_USER = {
    'email': 'admin@example.com',
    'first_name': 'John',
    'last_name': 'Anderson',
    'role': 'admin',
    'avatar': 'https://images.unsplash.com/photo-1472099645785-5658abf4ff4e?ixlib=rb-4.0.3&auto=format&fit=crop&w=150&h=150',
    'bio': 'System administrator with 8+ years of experience managing enterprise applications and infrastructure.',
}

SAMPLE_USERS = [
    {
        'email': 'emma@example.com',
        'first_name': 'Emma',
        'last_name': 'Watson',
        'role': 'admin',
        'avatar': 'https://pixabay.com/get/gd9bc21d391777b0cac00bc8e15c1b06c354388057ba14582b48f7f04b7516f02f8ca9bf53588292e26db1db28e190b0ad83441ba635e52003ac083064b1610c9_1280.jpg',
    },
    {
        'email': 'james@example.com',
        'first_name': 'James',
        'last_name': 'Wilson',
        'role': 'manager',
        'avatar': 'https://images.unsplash.com/photo-1507003211169-0a1dd7228f2d?ixlib=rb-4.0.3&auto=format&fit=crop&w=150&h=150',
    },
]

SAMPLE_PRODUCTS = [
    {
        'name': 'Wireless Headphones',
        'description': 'Premium quality wireless headphones with noise cancellation',
        'price': '199.99',
        'stock': 47,
        'sku': 'WH001',
        'image': 'https://images.unsplash.com/photo-1505740420928-5e560c06d30e?ixlib=rb-4.0.3&auto=format&fit=crop&w=400&h=250',
        'status': 'active',
    },
    {
        'name': 'Smartphone Pro',
        'description': 'Latest generation smartphone with advanced features',
        'price': '899.99',
        'stock': 3,
        'sku': 'SP001',
        'image': 'https://images.unsplash.com/photo-1511707171634-5f897ff02aa9?ixlib=rb-4.0.3&auto=format&fit=crop&w=400&h=250',
        'status': 'active',
    },
    {
        'name': 'Laptop Pro',
        'description': 'High-performance laptop for professionals and creators',
        'price': '1299.99',
        'stock': 23,
        'sku': 'LP001',
        'image': 'https://images.unsplash.com/photo-1496181133206-80ce9b88a853?ixlib=rb-4.0.3&auto=format&fit=crop&w=400&h=250',
        'status': 'active',
    },
    {
        'name': 'Smart Watch',
        'description': 'Advanced smartwatch with health monitoring features',
        'price': '349.99',
        'stock': 0,
        'sku': 'SW001',
        'image': 'https://images.unsplash.com/photo-1523275335684-37898b6baf30?ixlib=rb-4.0.3&auto=format&fit=crop&w=400&h=250',
        'status': 'inactive',
    },
]


def _random_past(now: datetime, max_days: int) -> datetime:
    return now - timedelta(seconds=random.uniform(0, max_days * 86400))


def seed_repositories(
    users: InMemoryUserRepository,
    products: InMemoryProductRepository,
    password_hash: str,
) -> None:
    """Load the bootstrap dataset.

    Args:
        users: Empty user repository
        products: Empty product repository
        password_hash: Hash of ``SEED_PASSWORD``, shared by every seeded user
    """
    now = datetime.now(timezone.utc)

    admin = User.create(password_hash=password_hash, phone=SEED_PHONE, **ADMIN_USER)
    admin.last_login = now
    users.add(admin)

    for data in SAMPLE_USERS:
        user = User.create(password_hash=password_hash, phone=SEED_PHONE, **data)
        user.bio = ''
        user.created_at = _random_past(now, 30)
        user.last_login = _random_past(now, 7)
        users.add(user)

    for data in SAMPLE_PRODUCTS:
        product = Product.create(**data)
        product.created_at = _random_past(now, 30)
        product.updated_at = max(product.created_at, _random_past(now, 7))
        products.add(product)

    logger.info("Seeded bootstrap data", extra={
        "users": users.count(),
        "products": products.count(),
    })
