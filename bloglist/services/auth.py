"""Authentication service: credential checks and access tokens."""

from datetime import timedelta
from logging import getLogger

from bloglist.configs import file_logger, settings
from bloglist.errors.auth import InvalidCredentialsError, InvalidTokenError
from bloglist.managers.password_manager import verify_password
from bloglist.managers.token_manager import create_access_token, decode_access_token
from bloglist.models import UserDB
from bloglist.repositories.protocols import UserStore
from bloglist.schemas.auth import LoginResponse

logger = file_logger(getLogger(__name__))


class AuthService:
    """Service for logging users in and resolving bearer tokens."""

    def __init__(self, user_repo: UserStore) -> None:
        """
        Initialize the auth service.

        Args:
            user_repo: User store for lookups
        """
        self.user_repo = user_repo

    async def authenticate_user(self, username: str, password: str | None) -> UserDB:
        """
        Authenticate a user by username and password.

        Unknown users and wrong passwords fail the same way.

        Args:
            username: User username
            password: User password

        Returns:
            UserDB: Authenticated user

        Raises:
            InvalidCredentialsError: If authentication fails
        """
        user = await self.user_repo.get_by_username(username)
        hashed = user.password_hash if user else None

        if not await verify_password(password or "", hashed) or user is None:
            logger.info(f"Failed login for username: {username}")
            raise InvalidCredentialsError
        return user

    def create_token_for_user(self, user: UserDB) -> LoginResponse:
        """
        Create an access token for a user.

        Args:
            user: User entity

        Returns:
            LoginResponse: Token together with the user's public identity
        """
        token = create_access_token(
            user_id=user.uuid,
            username=user.username,
            expires_delta=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
        )
        return LoginResponse(token=token, username=user.username, name=user.name)

    async def login(self, username: str, password: str | None) -> LoginResponse:
        """Authenticate and issue a token in one step."""
        user = await self.authenticate_user(username, password)
        logger.info(f"User logged in: {user.username}")
        return self.create_token_for_user(user)

    async def resolve_token(self, token: str | None) -> UserDB:
        """
        Resolve a bearer token to the user it was issued for.

        Raises:
            InvalidTokenError: If the token is missing, invalid, expired or
                names a user that no longer exists
        """
        if not token:
            raise InvalidTokenError
        token_data = decode_access_token(token)
        if token_data is None:
            raise InvalidTokenError
        user = await self.user_repo.get_by_id(token_data.user_id)
        if user is None:
            raise InvalidTokenError("User for token no longer exists")
        return user
