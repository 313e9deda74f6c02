"""Pydantic v2 model for per-player per-match statistics."""

from pydantic import BaseModel, Field


class Statistic(BaseModel):
    """Performance counters for one player in one match."""

    statistic_id: int | None = Field(default=None, gt=0)
    player_id: int = Field(gt=0)
    match_id: int = Field(gt=0)
    attacks: int = Field(ge=0)
    serves: int = Field(ge=0)
    blocks: int = Field(ge=0)
    digs: int = Field(ge=0)
    errors: int = Field(ge=0)

    @property
    def points(self) -> int:
        """Ranking contribution of this row; negative when errors dominate."""
        return self.blocks + self.serves + self.attacks + self.digs - self.errors
