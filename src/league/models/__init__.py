"""Pydantic v2 record models for every league entity.

Re-exports all model classes for convenient import::

    from league.models import Player, Statistic, ...
"""

from .coach import Coach
from .enums import InteractionFrequency, PlayerStatus, Position
from .follow import Follow
from .match import Match
from .opinion import Opinion, OpinionWithUser
from .participation import Participation
from .player import Player, PlayerWithCoach
from .ranking import RankingEntry
from .statistic import Statistic
from .user import User

__all__ = [
    "Coach",
    "Player",
    "PlayerWithCoach",
    "Match",
    "Statistic",
    "User",
    "Opinion",
    "OpinionWithUser",
    "Participation",
    "Follow",
    "RankingEntry",
    "Position",
    "PlayerStatus",
    "InteractionFrequency",
]
