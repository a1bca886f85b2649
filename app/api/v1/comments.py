"""API endpoints for ticket comments and their like/dislike counters."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db_session
from app.models.comment import Comment
from app.schemas.comment import CommentCreate, CommentResponse
from app.schemas.common import MessageResponse

router = APIRouter()

COMMENT_NOT_FOUND = "Comment not found"


async def _increment(db: AsyncSession, comment_id: int, column) -> Comment:
    # One UPDATE ... RETURNING; the counter is never read back and rewritten
    stmt = (
        update(Comment)
        .where(Comment.id == comment_id)
        .values({column: column + 1})
        .returning(Comment)
    )
    comment = (await db.execute(stmt)).scalar_one_or_none()
    if comment is None:
        raise HTTPException(status.HTTP_404_NOT_FOUND, COMMENT_NOT_FOUND)
    await db.commit()
    return comment


@router.get("/LikeCommentById/{comment_id}", response_model=CommentResponse)
async def like_comment(comment_id: int, db: AsyncSession = Depends(get_db_session)):
    return await _increment(db, comment_id, Comment.likes)


@router.get("/DislikeCommentById/{comment_id}", response_model=CommentResponse)
async def dislike_comment(comment_id: int, db: AsyncSession = Depends(get_db_session)):
    return await _increment(db, comment_id, Comment.dislikes)


@router.get("/GetCommentByTicketId/{ticket_id}", response_model=list[CommentResponse])
async def get_comments_by_ticket(
    ticket_id: int, db: AsyncSession = Depends(get_db_session)
):
    result = await db.execute(
        select(Comment).where(Comment.ticketid == ticket_id).order_by(Comment.id)
    )
    comments = result.scalars().all()
    if not comments:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "No comments found")
    return comments


@router.get("/GetCommentByUserId/{user_id}", response_model=list[CommentResponse])
async def get_comments_by_user(user_id: int, db: AsyncSession = Depends(get_db_session)):
    result = await db.execute(
        select(Comment).where(Comment.userid == user_id).order_by(Comment.id)
    )
    comments = result.scalars().all()
    if not comments:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "No comments found")
    return comments


@router.post(
    "/AddComment", status_code=status.HTTP_201_CREATED, response_model=CommentResponse
)
async def add_comment(payload: CommentCreate, db: AsyncSession = Depends(get_db_session)):
    """
    Posts a comment on a ticket. The ticket and author ids are stored as given.
    """
    new_comment = Comment(
        ticketid=payload.ticketid, userid=payload.userid, data=payload.data
    )
    db.add(new_comment)
    await db.commit()
    return new_comment


@router.delete("/DeleteComment/{comment_id}", response_model=MessageResponse)
async def delete_comment(comment_id: int, db: AsyncSession = Depends(get_db_session)):
    comment = await db.get(Comment, comment_id)
    if not comment:
        raise HTTPException(status.HTTP_404_NOT_FOUND, COMMENT_NOT_FOUND)

    await db.delete(comment)
    await db.commit()
    return MessageResponse(message="Comment deleted successfully")
