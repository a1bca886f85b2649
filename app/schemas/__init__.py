from .ban import BanCreate, BanResponse
from .comment import CommentCreate, CommentResponse
from .common import MessageResponse
from .ticket import TicketCreate, TicketResponse
from .user import LoginRequest, UserCreate, UserResponse

__all__ = [
    "BanCreate",
    "BanResponse",
    "CommentCreate",
    "CommentResponse",
    "LoginRequest",
    "MessageResponse",
    "TicketCreate",
    "TicketResponse",
    "UserCreate",
    "UserResponse",
]
