"""Pydantic v2 model for player participation in a match."""

from pydantic import BaseModel, Field, model_validator
from typing_extensions import Self

from .enums import PlayerStatus


class Participation(BaseModel):
    """Composite-keyed on (player_id, match_id)."""

    player_id: int = Field(gt=0)
    match_id: int = Field(gt=0)
    entry_minute: int = Field(ge=0)
    exit_minute: int = Field(ge=0)
    status: PlayerStatus

    @model_validator(mode="after")
    def check_minutes_order(self) -> Self:
        """A player cannot leave the court before entering it."""
        if self.exit_minute < self.entry_minute:
            raise ValueError(
                f"exit_minute ({self.exit_minute}) < entry_minute ({self.entry_minute})"
            )
        return self
