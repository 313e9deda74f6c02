"""Pydantic v2 model for users following players."""

from datetime import date

from pydantic import BaseModel, Field

from .enums import InteractionFrequency


class Follow(BaseModel):
    """Composite-keyed on (user_id, player_id, follow_date)."""

    user_id: int = Field(gt=0)
    player_id: int = Field(gt=0)
    follow_date: date
    frequency: InteractionFrequency
    notes: str = ""
