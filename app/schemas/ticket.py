"""Pydantic schemas for tickets."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TicketCreate(BaseModel):
    userid: int
    title: str | None = Field(default=None, validate_default=True)
    data: str | None = Field(default=None, validate_default=True)

    @field_validator("title")
    @classmethod
    def title_required(cls, value: str | None) -> str:
        if not value:
            raise ValueError("Ticket must have a title")
        return value

    @field_validator("data")
    @classmethod
    def data_required(cls, value: str | None) -> str:
        if not value:
            raise ValueError("Ticket must have data")
        return value


class TicketResponse(BaseModel):
    id: int
    userid: int
    title: str
    data: str
    status: str
    date_time: datetime

    model_config = ConfigDict(from_attributes=True)
