"""Profile schemas."""

from src.models.user import User
from src.schemas.common import CamelModel


class ProfileData(CamelModel):
    """Public view of a user, used for article and comment authors."""

    username: str
    bio: str
    image: str
    following: bool = False

    @classmethod
    def from_user(cls, user: User) -> "ProfileData":
        return cls(username=user.username, bio=user.bio or "", image=user.image_url or "")


class ProfileResponse(CamelModel):
    profile: ProfileData
