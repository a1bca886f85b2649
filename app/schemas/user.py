"""Pydantic schemas for user accounts."""

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, Field, field_validator


def _require(value: str | None, message: str) -> str:
    if value is None or value == "":
        raise ValueError(message)
    return value


class UserCreate(BaseModel):
    """Signup payload."""

    username: str | None = Field(default=None, validate_default=True)
    email: str | None = Field(default=None, validate_default=True)
    password: str | None = Field(default=None, validate_default=True)

    @field_validator("username")
    @classmethod
    def username_required(cls, value: str | None) -> str:
        return _require(value, "Username is required")

    @field_validator("email")
    @classmethod
    def email_syntax(cls, value: str | None) -> str:
        try:
            validate_email(value or "", check_deliverability=False)
        except EmailNotValidError:
            raise ValueError("Invalid email address") from None
        return value

    @field_validator("password")
    @classmethod
    def password_required(cls, value: str | None) -> str:
        return _require(value, "Password is required")


class LoginRequest(BaseModel):
    """
    Login payload. The account is matched on email, or on username when one
    is supplied.
    """

    email: str | None = Field(default=None, validate_default=True)
    username: str | None = None
    password: str | None = Field(default=None, validate_default=True)

    @field_validator("email")
    @classmethod
    def email_required(cls, value: str | None) -> str:
        return _require(value, "Email is required")

    @field_validator("password")
    @classmethod
    def password_required(cls, value: str | None) -> str:
        return _require(value, "Password is required")


class UserResponse(BaseModel):
    """Public view of a stored user. The password hash is never serialized."""

    id: int
    username: str
    email: str
    role: str
    profile_picture: str
    level: int

    model_config = ConfigDict(from_attributes=True)
