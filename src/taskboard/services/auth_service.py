"""Authentication service - registration, login and profile lookup."""

from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.taskboard.core.exceptions import (
    DuplicateEmailError,
    InvalidCredentialsError,
    NotFoundError,
)
from src.taskboard.core.logging import get_logger
from src.taskboard.core.security import (
    DUMMY_PASSWORD_HASH,
    create_access_token,
    hash_password,
    verify_password,
)
from src.taskboard.models import User
from src.taskboard.repositories import UserRepository
from src.taskboard.schemas.auth import AuthResponse
from src.taskboard.schemas.user import UserRead

logger = get_logger(__name__)


class AuthService:
    """Credential store front: owns user creation and token issuing."""

    def __init__(self, user_repo: UserRepository, session: AsyncSession):
        self.user_repo = user_repo
        self.session = session

    @staticmethod
    def _issue(user: User) -> AuthResponse:
        return AuthResponse(
            id=user.id,
            name=user.name,
            email=user.email,
            country=user.country,
            token=create_access_token(user.id),
        )

    async def register(self, name: str, email: str, password: str, country: str) -> AuthResponse:
        """Create a user and return its public fields with a fresh token.

        Raises:
            DuplicateEmailError: If the email is already registered.
        """
        if await self.user_repo.exists_by_email(email):
            raise DuplicateEmailError()

        user = User(
            name=name,
            email=email,
            hashed_password=hash_password(password),
            country=country,
        )
        self.user_repo.add(user)

        try:
            await self.session.commit()
            await self.session.refresh(user)
        except IntegrityError as e:
            # Unique index caught a concurrent registration
            await self.session.rollback()
            raise DuplicateEmailError() from e
        except Exception:
            await self.session.rollback()
            raise

        logger.info("User registered", user_id=str(user.id))
        return self._issue(user)

    async def authenticate(self, email: str, password: str) -> AuthResponse:
        """Verify credentials and return public fields with a fresh token.

        Unknown email and wrong password fail identically, and both run a
        full hash verification.

        Raises:
            InvalidCredentialsError: On any credential mismatch.
        """
        user = await self.user_repo.get_by_email(email)

        password_hash = user.hashed_password if user else DUMMY_PASSWORD_HASH
        password_valid = verify_password(password, password_hash)

        if user is None or not password_valid:
            logger.warning("Login failed")
            raise InvalidCredentialsError()

        return self._issue(user)

    async def get_profile(self, user_id: UUID) -> UserRead:
        """Public fields of a user.

        Raises:
            NotFoundError: If no such user exists.
        """
        user = await self.user_repo.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return UserRead.model_validate(user)
