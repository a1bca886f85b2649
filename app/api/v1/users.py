"""API endpoints for user accounts."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.concurrency import run_in_threadpool

from app.api.deps import get_db_session
from app.models.user import User
from app.schemas.user import LoginRequest, UserCreate, UserResponse
from app.utils.logging_config import logger
from app.utils.security import get_password_hash, verify_password

router = APIRouter()


@router.get("/GetAllUsers", response_model=list[UserResponse])
async def get_all_users(db: AsyncSession = Depends(get_db_session)):
    result = await db.execute(select(User).order_by(User.id))
    return result.scalars().all()


@router.get("/GetUser/{user_id}", response_model=UserResponse)
async def get_user(user_id: int, db: AsyncSession = Depends(get_db_session)):
    user = await db.get(User, user_id)
    if not user:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "User not found")
    return user


@router.post(
    "/AddUser",
    status_code=status.HTTP_201_CREATED,
    response_model=UserResponse,
    summary="Register a new user",
)
async def add_user(payload: UserCreate, db: AsyncSession = Depends(get_db_session)):
    """
    Creates a user with a bcrypt-hashed password.

    Username and email are checked separately so the caller learns which one
    is taken. The unique constraints on both columns still catch a concurrent
    signup that slips between the check and the insert.
    """
    if await db.scalar(select(User.id).where(User.username == payload.username)):
        raise HTTPException(
            status.HTTP_400_BAD_REQUEST, "User with the same username already exists"
        )
    if await db.scalar(select(User.id).where(User.email == payload.email)):
        raise HTTPException(
            status.HTTP_400_BAD_REQUEST, "User with the same email already exists"
        )

    # bcrypt is CPU-bound; keep it off the event loop
    hashed_password = await run_in_threadpool(get_password_hash, payload.password)
    new_user = User(
        username=payload.username,
        email=payload.email,
        password=hashed_password,
    )
    db.add(new_user)
    try:
        await db.commit()
    except IntegrityError as e:
        await db.rollback()
        logger.warning(f"Concurrent signup rejected for '{payload.username}': {e}")
        raise HTTPException(
            status.HTTP_400_BAD_REQUEST, "User with the same username or email already exists"
        ) from e

    logger.info(f"User {new_user.id} registered")
    return new_user


@router.post("/Login", response_model=UserResponse)
async def login(payload: LoginRequest, db: AsyncSession = Depends(get_db_session)):
    """
    Checks a password against the stored hash of the account matching the
    email, or the username when one is given. No session is issued.
    """
    criteria = [User.email == payload.email]
    if payload.username:
        criteria.append(User.username == payload.username)

    user = await db.scalar(select(User).where(or_(*criteria)).order_by(User.id).limit(1))
    if not user:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "User not found")

    if not await run_in_threadpool(verify_password, payload.password, user.password):
        raise HTTPException(
            status.HTTP_401_UNAUTHORIZED, "Password and user do not match"
        )
    return user
