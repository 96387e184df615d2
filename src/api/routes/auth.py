"""Authentication routes (login)."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from api.dependencies import get_user_repo
from api.models import LoginRequest, LoginResponse, UserResponse
from domain.model.errors import AuthenticationError
from port.user_repository import UserRepository
from services import auth_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=LoginResponse)
async def login(request: LoginRequest, repo: UserRepository = Depends(get_user_repo)):
    """Check credentials and return the user without password.

    Raises:
        HTTPException: 401 if credentials are invalid (same message whether
            the email is unknown or the password is wrong)
    """
    try:
        user = auth_service.authenticate(repo, request.email, request.password)
    except AuthenticationError as e:
        logger.info("Login rejected", extra={"email": request.email})
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))

    logger.info("User logged in", extra={"userId": user.id, "email": user.email})
    return LoginResponse(user=UserResponse.model_validate(user))
