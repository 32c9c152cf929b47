from blog_api.errors.base import BaseAppError


class PasswordHashingError(BaseAppError):
    """Base error for password hasher module."""

    kind = "password_hashing"
    is_operational = False

    def __init__(self, detail: str = "Password hashing failed") -> None:
        super().__init__(detail)


class PasswordRehashError(PasswordHashingError):
    """Error for password rehashing."""

    def __init__(self, detail: str = "Password rehashing failed") -> None:
        super().__init__(detail)
