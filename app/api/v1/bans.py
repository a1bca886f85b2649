"""API endpoints for the email ban list."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db_session
from app.models.ban import Ban
from app.schemas.ban import BanCreate, BanResponse
from app.schemas.common import MessageResponse
from app.utils.logging_config import logger

router = APIRouter()


@router.get("/GetAllBans", response_model=list[BanResponse])
async def get_all_bans(db: AsyncSession = Depends(get_db_session)):
    result = await db.execute(select(Ban).order_by(Ban.id))
    return result.scalars().all()


@router.get("/GetBan/{ban_id}", response_model=BanResponse)
async def get_ban(ban_id: int, db: AsyncSession = Depends(get_db_session)):
    ban = await db.get(Ban, ban_id)
    if not ban:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Ban not found")
    return ban


@router.post("/AddBan", status_code=status.HTTP_201_CREATED, response_model=BanResponse)
async def add_ban(payload: BanCreate, db: AsyncSession = Depends(get_db_session)):
    """
    Records a ban under the id chosen by the caller. A clashing id surfaces as
    a database error.
    """
    new_ban = Ban(id=payload.id, email=payload.email, reason=payload.reason)
    db.add(new_ban)
    await db.commit()
    logger.info(f"Ban {new_ban.id} added for {new_ban.email}")
    return new_ban


@router.delete("/DeleteBan/{ban_id}", response_model=MessageResponse)
async def delete_ban(ban_id: int, db: AsyncSession = Depends(get_db_session)):
    ban = await db.get(Ban, ban_id)
    if not ban:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Ban not found")

    await db.delete(ban)
    await db.commit()
    return MessageResponse(message="Ban deleted successfully")
