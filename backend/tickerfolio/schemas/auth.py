"""Schemas for account endpoints."""

from pydantic import BaseModel, EmailStr, Field, field_validator

from tickerfolio.constants import PasswordLimits


def _validate_password_bytes(v: str) -> str:
    """Shared password validation logic."""
    if len(v.encode("utf-8")) > PasswordLimits.MAX_BYTES:
        raise ValueError(f"Password must be at most {PasswordLimits.MAX_BYTES} bytes")
    return v


class UserRegister(BaseModel):
    """Schema for user registration."""

    email: EmailStr
    password: str = Field(min_length=PasswordLimits.MIN_LENGTH)

    @field_validator("password")
    @classmethod
    def validate_password_bytes(cls, v: str) -> str:
        return _validate_password_bytes(v)


class UserLogin(BaseModel):
    """Schema for user login. The username is the email used at registration."""

    username: str
    password: str


class UserInfo(BaseModel):
    """Schema for user info in auth responses."""

    id: int
    email: str

    model_config = {"from_attributes": True}


class AuthResponse(BaseModel):
    """Schema for token response."""

    token: str
    user: UserInfo


class RegisterResponse(AuthResponse):
    """Registration logs the new user in straight away."""

    message: str


class ChangePasswordRequest(BaseModel):
    """Schema for changing password while logged in."""

    old_password: str
    new_password: str = Field(min_length=PasswordLimits.MIN_LENGTH)

    @field_validator("new_password")
    @classmethod
    def validate_password_bytes(cls, v: str) -> str:
        return _validate_password_bytes(v)
