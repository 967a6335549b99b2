"""User and authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from src.api.dependencies import (
    get_current_identity,
    get_current_user,
    get_token_service,
    get_user_service,
)
from src.exceptions import UnauthorizedError
from src.models.user import User
from src.schemas.auth import (
    UserData,
    UserLoginRequest,
    UserRegisterRequest,
    UserResponse,
    UserUpdateRequest,
)
from src.services.auth import Identity, TokenService
from src.services.user_service import UserService

router = APIRouter(prefix="/api", tags=["users"])


@router.post("/users", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register(
    payload: UserRegisterRequest,
    users: Annotated[UserService, Depends(get_user_service)],
    token_service: Annotated[TokenService, Depends(get_token_service)],
):
    """Register a new user."""
    user = users.register(payload.user)
    return UserResponse(user=UserData.from_user(user, token_service.issue(user)))


@router.post("/users/login", response_model=UserResponse)
def login(
    payload: UserLoginRequest,
    users: Annotated[UserService, Depends(get_user_service)],
    token_service: Annotated[TokenService, Depends(get_token_service)],
):
    """Login with email and password."""
    user = users.authenticate(payload.user.email, payload.user.password)
    if not user:
        raise UnauthorizedError("Invalid email or password")

    return UserResponse(user=UserData.from_user(user, token_service.issue(user)))


@router.get("/user", response_model=UserResponse)
def get_me(
    identity: Annotated[Identity, Depends(get_current_identity)],
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Get current user information with the token that was presented."""
    return UserResponse(user=UserData.from_user(current_user, identity.token))


@router.put("/user", response_model=UserResponse)
def update_me(
    payload: UserUpdateRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    users: Annotated[UserService, Depends(get_user_service)],
    token_service: Annotated[TokenService, Depends(get_token_service)],
):
    """Update the current user; a new token is issued since the username may change."""
    user = users.update(current_user, payload.user)
    return UserResponse(user=UserData.from_user(user, token_service.issue(user)))
