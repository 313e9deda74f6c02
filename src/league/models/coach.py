"""Pydantic v2 model for coach records."""

from pydantic import BaseModel, Field


class Coach(BaseModel):
    """A team coach."""

    coach_id: int | None = Field(default=None, gt=0)  # None until inserted
    name: str = Field(min_length=1)
    surname: str = Field(min_length=1)
    nationality: str | None = None
    experience: int = Field(gt=0)  # years
