"""Pydantic schemas for ticket comments."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CommentCreate(BaseModel):
    ticketid: int
    userid: int
    data: str | None = Field(default=None, validate_default=True)

    @field_validator("data")
    @classmethod
    def data_not_blank(cls, value: str | None) -> str:
        # Whitespace-only bodies are rejected but the stored text is left as sent
        if value is None or value.strip() == "":
            raise ValueError("You need to write something")
        return value


class CommentResponse(BaseModel):
    id: int
    ticketid: int
    userid: int
    data: str
    likes: int
    dislikes: int

    model_config = ConfigDict(from_attributes=True)
