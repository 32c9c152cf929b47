from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field, SecretStr, field_validator

from blog_api.configs.settings import MAX_NAME_LENGTH, MIN_PASSWORD_LENGTH


class UserCreate(BaseModel):
    """Signup payload."""

    model_config = ConfigDict(str_strip_whitespace=True)

    first_name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH, examples=["Ada"])
    last_name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH, examples=["Lovelace"])
    email: EmailStr = Field(..., examples=["ada@example.com"])
    password: SecretStr = Field(
        ...,
        description=f"Password, at least {MIN_PASSWORD_LENGTH} characters",
        examples=["correct-horse-battery"],
    )

    @field_validator("password")
    @classmethod
    def check_password_length(cls, value: SecretStr) -> SecretStr:
        if len(value.get_secret_value()) < MIN_PASSWORD_LENGTH:
            mssg = f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
            raise ValueError(mssg)
        return value


class UserResponse(BaseModel):
    """Public view of a user. Never includes the password hash."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    first_name: str
    last_name: str
    email: str
    created_at: datetime


class SignupData(BaseModel):
    user: UserResponse
