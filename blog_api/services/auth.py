"""Authentication service handling signup, login and token issuance."""

from blog_api.errors import InvalidCredentialsError
from blog_api.managers.password_manager import hash_password, verify_and_update_password
from blog_api.managers.token_manager import access_token_lifetime, create_access_token
from blog_api.models import UserDB
from blog_api.monitoring import get_logger
from blog_api.repositories import UserRepository
from blog_api.schemas.auth import Token
from blog_api.schemas.user import UserCreate

logger = get_logger(__name__)


class AuthService:
    """Service for handling user authentication."""

    def __init__(self, user_repo: UserRepository) -> None:
        """
        Initialize the auth service.

        Args:
            user_repo: User repository for database operations
        """
        self.user_repo = user_repo

    async def register_user(self, user: UserCreate) -> UserDB:
        """
        Register a new user with a hashed password.

        Args:
            user: Signup payload

        Returns:
            UserDB: Created user

        Raises:
            DuplicateEntryError: If the email is already registered
        """
        password_hash = await hash_password(user.password.get_secret_value())
        db_user = await self.user_repo.create(user, password_hash)
        logger.info(f"User {db_user.id} registered")
        return db_user

    async def authenticate_user(self, email: str, password: str) -> UserDB:
        """
        Authenticate a user by email and password.

        Outdated hashes are upgraded transparently on success.

        Args:
            email: User email
            password: User password

        Returns:
            UserDB: Authenticated user

        Raises:
            InvalidCredentialsError: If the email is unknown or the password is wrong
        """
        user = await self.user_repo.get_by_email(email)
        is_valid, new_hash = await verify_and_update_password(
            password,
            user.password_hash if user else None,
        )
        if not user or not is_valid:
            logger.info("Failed login attempt")
            raise InvalidCredentialsError

        if new_hash:
            await self.user_repo.update_password_hash(user, new_hash)
            logger.info(f"Password hash upgraded for user {user.id}")

        return user

    def create_token_for_user(self, user: UserDB) -> Token:
        """
        Issue an access token for a user.

        Args:
            user: Authenticated user

        Returns:
            Token: Access token and its lifetime in seconds
        """
        return Token(
            token=create_access_token(user_id=user.id, email=user.email),
            expires_in=int(access_token_lifetime().total_seconds()),
        )
