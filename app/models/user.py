"""User model."""

import enum

from sqlalchemy import Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import BaseModel


class UserRole(str, enum.Enum):
    BASIC = "basic"


class User(BaseModel):
    __tablename__ = "UserData"
    __table_args__ = (
        UniqueConstraint("username", name="uq_userdata_username"),
        UniqueConstraint("email", name="uq_userdata_email"),
    )

    username: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    password: Mapped[str] = mapped_column(
        String(255), nullable=False, comment="bcrypt hash, never the plaintext."
    )
    role: Mapped[str] = mapped_column(
        String(50), nullable=False, default=UserRole.BASIC.value
    )
    profile_picture: Mapped[str] = mapped_column(
        String(1024), nullable=False, default=""
    )
    level: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    def __init__(self, **kwargs):
        kwargs.setdefault("role", UserRole.BASIC.value)
        kwargs.setdefault("profile_picture", "")
        kwargs.setdefault("level", 0)
        super().__init__(**kwargs)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username='{self.username}', role='{self.role}')>"
