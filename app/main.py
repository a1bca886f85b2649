from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.v1 import bans as bans_router
from app.api.v1 import comments as comments_router
from app.api.v1 import tickets as tickets_router
from app.api.v1 import users as users_router
from app.config.db import check_db_connection, close_db_connection
from app.settings import settings
from app.utils.errors import register_exception_handlers
from app.utils.logging_config import logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Handle application startup and shutdown events.
    """
    await check_db_connection()
    logger.info(f"HELPDESK API READY ON PORT {settings.PORT}")

    yield

    await close_db_connection()


app = FastAPI(
    lifespan=lifespan,
    title="Helpdesk API",
    description="A simple API for managing users, support tickets, comments and bans",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include routers
app.include_router(users_router.router, prefix="/User", tags=["Users"])
app.include_router(tickets_router.router, tags=["Tickets"])
app.include_router(comments_router.router, tags=["Comments"])
app.include_router(bans_router.router, tags=["Bans"])


@app.get("/")
def read_root() -> dict[str, str]:
    return {"message": "Hello from Helpdesk API!"}


if __name__ == "__main__":
    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT)
