"""User API routes for user CRUD operations.

Endpoints:
- GET /users: List users
- GET /users/{id}: Get a user
- POST /users: Create a user (409 on duplicate email)
- PATCH /users/{id}: Partial update
- DELETE /users/{id}: Delete a user
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status

from api.dependencies import get_user_repo
from api.models import UserCreate, UserResponse, UserUpdate
from domain.model.errors import DuplicateError, NotFoundError, ValidationError
from port.user_repository import UserRepository
from services import user_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=list[UserResponse])
async def list_users(repo: UserRepository = Depends(get_user_repo)):
    """List all users."""
    return [UserResponse.model_validate(u) for u in user_service.list_users(repo)]


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: str, repo: UserRepository = Depends(get_user_repo)):
    try:
        user = user_service.get_user(repo, user_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return UserResponse.model_validate(user)


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(request: UserCreate, repo: UserRepository = Depends(get_user_repo)):
    """Create a user.

    Raises:
        HTTPException: 409 if email already exists, 400 if the password cannot be stored
    """
    try:
        user = user_service.create_user(repo, **request.model_dump())
    except DuplicateError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return UserResponse.model_validate(user)


@router.patch("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: str,
    request: UserUpdate,
    repo: UserRepository = Depends(get_user_repo),
):
    """Update only the supplied fields of a user."""
    try:
        user = user_service.update_user(repo, user_id, request.model_dump(exclude_unset=True))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except DuplicateError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return UserResponse.model_validate(user)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: str, repo: UserRepository = Depends(get_user_repo)):
    try:
        user_service.delete_user(repo, user_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
