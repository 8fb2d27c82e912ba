"""Pydantic models for request bodies."""

from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    """Payload for registering a user."""

    username: str = Field(min_length=1)


class SnackPayload(BaseModel):
    """Payload for creating or replacing a snack."""

    name: str
    description: str
    on_diet: bool = False
