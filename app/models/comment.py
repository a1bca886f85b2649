"""Comment model for threaded discussion on tickets."""

from sqlalchemy import CheckConstraint, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import BaseModel


class Comment(BaseModel):
    __tablename__ = "CommentData"
    __table_args__ = (
        CheckConstraint("likes >= 0", name="ck_comment_likes_non_negative"),
        CheckConstraint("dislikes >= 0", name="ck_comment_dislikes_non_negative"),
    )

    ticketid: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    userid: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    data: Mapped[str] = mapped_column(Text, nullable=False)
    likes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    dislikes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    def __init__(self, **kwargs):
        kwargs.setdefault("likes", 0)
        kwargs.setdefault("dislikes", 0)
        super().__init__(**kwargs)

    def __repr__(self) -> str:
        return f"<Comment(id={self.id}, ticketid={self.ticketid}, likes={self.likes}, dislikes={self.dislikes})>"
