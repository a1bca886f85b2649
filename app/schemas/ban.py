"""Pydantic schemas for the email ban list."""

from pydantic import BaseModel, ConfigDict, Field


class BanCreate(BaseModel):
    id: int = Field(..., description="Caller-assigned identifier of the ban.")
    email: str
    reason: str | None = None


class BanResponse(BaseModel):
    id: int
    email: str
    reason: str | None = None

    model_config = ConfigDict(from_attributes=True)
