"""Profile API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.api.dependencies import get_user_service
from src.schemas.profile import ProfileData, ProfileResponse
from src.services.user_service import UserService

router = APIRouter(prefix="/api/profiles", tags=["profiles"])


@router.get("/{username}", response_model=ProfileResponse)
def get_profile(
    username: str,
    users: Annotated[UserService, Depends(get_user_service)],
):
    """Get a user's public profile."""
    return ProfileResponse(profile=ProfileData.from_user(users.get_profile(username)))
