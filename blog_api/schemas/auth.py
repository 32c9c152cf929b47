from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field, SecretStr


class LoginRequest(BaseModel):
    """Login credentials."""

    model_config = ConfigDict(extra="ignore")

    email: EmailStr = Field(..., description="Account email", examples=["ada@example.com"])
    password: SecretStr = Field(..., description="Account password")


class Token(BaseModel):
    """Issued access token."""

    token: str
    token_type: str = "bearer"
    expires_in: int = Field(..., description="Lifetime in seconds")


class TokenData(BaseModel):
    """Claims recovered from a verified access token."""

    email: str
    user_id: UUID
    jti: str
    token_type: str = "access"
