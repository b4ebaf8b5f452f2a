"""User registration and listing."""

from logging import getLogger

from bloglist.auth.guard import canonical_id
from bloglist.configs import file_logger
from bloglist.errors.database import DuplicateEntryError
from bloglist.errors.validation import ValidationError
from bloglist.managers.password_manager import hash_password
from bloglist.models import BlogDB, UserDB
from bloglist.repositories.protocols import BlogStore, UserStore
from bloglist.services.validation import Payload, validate_user_registration

logger = file_logger(getLogger(__name__))


def _username_taken(username: str) -> ValidationError:
    return ValidationError(
        detail="User validation failed",
        errors=[
            {
                "field": "username",
                "message": f"Username '{username}' is already taken",
                "type": "unique",
            },
        ],
    )


class UserService:
    """Service for registering users and listing them with their blogs."""

    def __init__(self, user_repo: UserStore, blog_repo: BlogStore) -> None:
        self.user_repo = user_repo
        self.blog_repo = blog_repo

    async def register_user(self, payload: Payload) -> UserDB:
        """
        Register a new user with an empty blog list.

        Args:
            payload: Raw or validated registration payload

        Returns:
            UserDB: The created user

        Raises:
            ValidationError: If the payload is invalid or the username is taken
        """
        user_in = validate_user_registration(payload)

        if await self.user_repo.get_by_username(user_in.username):
            raise _username_taken(user_in.username)

        password_hash = await hash_password(user_in.password.get_secret_value())
        try:
            user = await self.user_repo.create(user_in, password_hash=password_hash)
        except DuplicateEntryError as e:
            # Lost a race with a concurrent registration
            raise _username_taken(user_in.username) from e

        logger.info(f"User registered: {user.username}")
        return user

    async def list_users(self) -> list[tuple[UserDB, list[BlogDB]]]:
        """
        List users, each paired with the blogs their back-reference list names.

        Ids in a user's list that no longer resolve to a blog are skipped.

        Returns:
            list[tuple[UserDB, list[BlogDB]]]: Users oldest first, with blogs
                in the order of the user's list
        """
        users = await self.user_repo.get_all()
        blogs = {canonical_id(blog.id): blog for blog in await self.blog_repo.get_all()}
        return [
            (
                user,
                [blogs[key] for key in map(canonical_id, user.blogs) if key in blogs],
            )
            for user in users
        ]
