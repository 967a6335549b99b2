"""Authentication service for JWT and password handling."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext

from src.config import Settings
from src.exceptions import TokenExpiredError, TokenInvalidError
from src.models.user import User


def create_password_context(rounds: int = 12) -> CryptContext:
    """Password hashing context."""
    return CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)


@dataclass(frozen=True)
class Identity:
    """The caller, as established by a verified token."""

    user_id: int
    username: str
    token: str


class TokenService:
    """Issues and verifies signed, time-limited access tokens.

    Stateless: any process configured with the same secret can verify tokens
    issued by any other. There is no revocation list.
    """

    def __init__(
        self,
        secret: str,
        ttl: timedelta,
        algorithm: str = "HS256",
        issuer: str = "conduit-api",
    ):
        self.secret = secret
        self.ttl = ttl
        self.algorithm = algorithm
        self.issuer = issuer

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenService":
        return cls(
            secret=settings.jwt_secret,
            ttl=settings.token_ttl,
            algorithm=settings.jwt_algorithm,
            issuer=settings.jwt_issuer,
        )

    def issue(self, user: User, now: datetime | None = None) -> str:
        """Create a token for a user."""
        issued_at = now or datetime.now(UTC)
        claims = {
            "user_id": user.id,
            "username": user.username,
            "iat": issued_at,
            "nbf": issued_at,
            "exp": issued_at + self.ttl,
            "iss": self.issuer,
            "sub": f"user:{user.id}",
        }
        return jwt.encode(claims, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> dict:
        """Verify a token and return its claims.

        Raises:
            TokenExpiredError: the expiry has passed.
            TokenInvalidError: bad signature, malformed, wrong algorithm or issuer.
        """
        try:
            return jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                issuer=self.issuer,
                options={"verify_aud": False},
            )
        except ExpiredSignatureError as e:
            raise TokenExpiredError() from e
        except JWTError as e:
            raise TokenInvalidError() from e

    def get_user_id(self, token: str) -> int:
        return _user_id_claim(self.verify(token))

    def get_username(self, token: str) -> str:
        return _username_claim(self.verify(token))

    def identify(self, token: str) -> Identity:
        """Verify a token once and build the caller identity from it."""
        claims = self.verify(token)
        return Identity(
            user_id=_user_id_claim(claims), username=_username_claim(claims), token=token
        )


def _user_id_claim(claims: dict) -> int:
    user_id = claims.get("user_id")
    # bool is an int subclass
    if not isinstance(user_id, int) or isinstance(user_id, bool):
        raise TokenInvalidError("user_id not found in token")
    return user_id


def _username_claim(claims: dict) -> str:
    username = claims.get("username")
    if not isinstance(username, str):
        raise TokenInvalidError("username not found in token")
    return username
