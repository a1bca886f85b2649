"""Exports all models for easy access."""

from .ban import Ban
from .base import Base, BaseModel
from .comment import Comment
from .ticket import Ticket, TicketStatus
from .user import User, UserRole

__all__ = [
    "Base",
    "BaseModel",
    "User",
    "UserRole",
    "Ticket",
    "TicketStatus",
    "Comment",
    "Ban",
]
