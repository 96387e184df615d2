from fastapi import Request

from port.product_repository import ProductRepository
from port.user_repository import UserRepository


def get_user_repo(request: Request) -> UserRepository:
    return request.app.state.user_repo


def get_product_repo(request: Request) -> ProductRepository:
    return request.app.state.product_repo
