"""
Password hashing module using Argon2 with passlib's CryptContext.

Hashing and verification are CPU bound, so the async helpers push them onto
a small thread pool to keep the event loop responsive.
"""

from asyncio import get_running_loop
from concurrent.futures import ThreadPoolExecutor

from passlib.context import CryptContext
from passlib.exc import InternalBackendError

from blog_api.configs import CONFIG_MAP, settings
from blog_api.errors import PasswordHashingError, PasswordRehashError
from blog_api.monitoring import get_logger

executor = ThreadPoolExecutor(max_workers=4)
logger = get_logger(__name__)


class PasswordHasher:
    """
    A secure password hashing and verification manager using Argon2id.

    This class wraps passlib's CryptContext to provide:
    - Secure password hashing with Argon2id
    - Password verification that never raises
    - Transparent upgrade of PBKDF2 hashes on login
    """

    def __init__(self, level: str | None = None) -> None:
        self.level = level or settings.PASSWORD_SECURITY_LEVEL
        params = CONFIG_MAP[self.level]
        self.pwd_context = CryptContext(
            schemes=["argon2", "pbkdf2_sha256"],
            deprecated="pbkdf2_sha256",
            argon2__memory_cost=params.memory_cost,
            argon2__time_cost=params.time_cost,
            argon2__parallelism=params.parallelism,
        )
        logger.info(f"PasswordHasher initialized with Argon2id on level {self.level}")

    def hash(self, password: str) -> str:
        """
        Hash a plaintext password using Argon2id.

        Args:
            password: The plaintext password to hash

        Returns:
            str: The hashed password in Argon2id format

        Raises:
            ValueError: If password is empty
            PasswordHashingError: If hashing fails

        Example:
            >>> hasher = PasswordHasher()
            >>> hasher.hash("my_secure_password")  # $argon2id$v=19$m=65536,t=3,p=4$...
        """
        if not password:
            msg = "Password cannot be empty"
            raise ValueError(msg)

        try:
            hashed_password = self.pwd_context.hash(password)
        except (ValueError, InternalBackendError, UnicodeError) as e:
            logger.exception("Invalid password format")
            mssg = "Failed to hash password"
            raise PasswordHashingError(mssg) from e
        logger.debug(f"Password hashed successfully on level {self.level}")
        return hashed_password

    def verify(self, password: str, hashed_password: str | None) -> bool:
        """
        Verify a plaintext password against a hashed password.

        A missing hash still costs one dummy verification so that unknown
        accounts take as long to reject as wrong passwords.

        Args:
            password: The plaintext password to verify
            hashed_password: The stored hash, or None when no account matched

        Returns:
            bool: True if password matches, False otherwise
        """
        if not isinstance(hashed_password, str) or not hashed_password.strip():
            self.pwd_context.dummy_verify()
            return False

        try:
            return self.pwd_context.verify(password, hashed_password)
        except (ValueError, TypeError, InternalBackendError):
            logger.exception("Stored hash is corrupted or invalid format")
            return False

    def check_needs_rehash(self, hashed_password: str) -> bool:
        """Check whether a hash uses a deprecated scheme or outdated parameters."""
        try:
            return self.pwd_context.needs_update(hashed_password)
        except (ValueError, TypeError):
            logger.exception(f"Error checking hash currency on level {self.level}")
            return False

    def verify_and_update(
        self,
        password: str,
        hashed_password: str | None,
    ) -> tuple[bool, str | None]:
        """
        Verify a password and return a new hash if the current one needs updating.

        Args:
            password: The plaintext password to verify
            hashed_password: The hashed password (can be None for unknown accounts)

        Returns:
            tuple[bool, str | None]: Verification result and a new hash when rehashing is due
        """
        if not self.verify(password, hashed_password):
            return False, None

        new_hash = None
        if hashed_password and self.check_needs_rehash(hashed_password):
            try:
                new_hash = self.hash(password)
            except PasswordHashingError as e:
                mssg = "Failed to rehash password"
                raise PasswordRehashError(mssg) from e
            logger.info(f"Password needs rehashing, new hash generated on level {self.level}")

        return True, new_hash


_default_hasher = PasswordHasher()


def get_password_hasher() -> PasswordHasher:
    """Return the process-wide password hasher."""
    return _default_hasher


async def hash_password(password: str) -> str:
    """
    Hash a password with the default hasher off the event loop.

    Args:
        password: The plaintext password to hash

    Returns:
        str: The hashed password
    """
    return await get_running_loop().run_in_executor(
        executor,
        get_password_hasher().hash,
        password,
    )


async def verify_password(password: str, hashed_password: str | None) -> bool:
    """
    Verify a password with the default hasher off the event loop.

    Args:
        password: The plaintext password to verify
        hashed_password: The hashed password to verify against

    Returns:
        bool: True if password matches, False otherwise
    """
    return await get_running_loop().run_in_executor(
        executor,
        get_password_hasher().verify,
        password,
        hashed_password,
    )


async def verify_and_update_password(
    password: str,
    hashed_password: str | None,
) -> tuple[bool, str | None]:
    """Verify a password and get a replacement hash if the stored one is outdated."""
    return await get_running_loop().run_in_executor(
        executor,
        get_password_hasher().verify_and_update,
        password,
        hashed_password,
    )
