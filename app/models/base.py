"""Base model for all other models to inherit from."""

from sqlalchemy import Integer
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base for all models."""

    pass


class BaseModel(Base):
    """
    Base model for the helpdesk tables.
    It includes a store-generated integer primary key.
    """

    __abstract__ = True

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="The unique identifier for the record.",
    )
