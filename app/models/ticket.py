"""Ticket model for tracking support requests."""

import enum
from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import BaseModel


class TicketStatus(str, enum.Enum):
    OPEN = "open"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Ticket(BaseModel):
    __tablename__ = "TicketData"
    __table_args__ = (UniqueConstraint("title", name="uq_ticketdata_title"),)

    userid: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    data: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[str] = mapped_column(
        String(50), nullable=False, default=TicketStatus.OPEN.value
    )
    date_time: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        comment="The time the ticket was submitted.",
    )

    def __init__(self, **kwargs):
        # status and date_time are server-side; callers cannot override them
        kwargs["status"] = TicketStatus.OPEN.value
        kwargs["date_time"] = utcnow()
        super().__init__(**kwargs)

    def __repr__(self) -> str:
        return f"<Ticket(id={self.id}, title='{self.title}', status='{self.status}')>"
