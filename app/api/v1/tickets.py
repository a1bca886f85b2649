"""API endpoints for support tickets."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db_session
from app.models.ticket import Ticket
from app.schemas.ticket import TicketCreate, TicketResponse
from app.utils.logging_config import logger

router = APIRouter()

DUPLICATE_TITLE = "Ticket with the same title already exists"


@router.get("/GetAllTickets", response_model=list[TicketResponse])
async def get_all_tickets(db: AsyncSession = Depends(get_db_session)):
    result = await db.execute(select(Ticket).order_by(Ticket.id))
    return result.scalars().all()


@router.get("/GetTicketUserId/{user_id}", response_model=list[TicketResponse])
async def get_tickets_by_user(user_id: int, db: AsyncSession = Depends(get_db_session)):
    result = await db.execute(
        select(Ticket).where(Ticket.userid == user_id).order_by(Ticket.id)
    )
    tickets = result.scalars().all()
    if not tickets:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "No tickets found")
    return tickets


@router.post(
    "/AddTicket",
    status_code=status.HTTP_201_CREATED,
    response_model=TicketResponse,
    summary="Submit a support ticket",
)
async def add_ticket(payload: TicketCreate, db: AsyncSession = Depends(get_db_session)):
    """
    Opens a ticket. Titles are unique across all users; status and submission
    time are always set here, never taken from the request.
    """
    if await db.scalar(select(Ticket.id).where(Ticket.title == payload.title)):
        raise HTTPException(status.HTTP_400_BAD_REQUEST, DUPLICATE_TITLE)

    new_ticket = Ticket(userid=payload.userid, title=payload.title, data=payload.data)
    db.add(new_ticket)
    try:
        await db.commit()
    except IntegrityError as e:
        await db.rollback()
        logger.warning(f"Concurrent ticket with title '{payload.title}' rejected: {e}")
        raise HTTPException(status.HTTP_400_BAD_REQUEST, DUPLICATE_TITLE) from e

    logger.info(f"Ticket {new_ticket.id} opened by user {new_ticket.userid}")
    return new_ticket
