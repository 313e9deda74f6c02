"""Interactive per-entity services behind the main menu."""

from .base import EntityService
from .coach import CoachService
from .follow import FollowService
from .match import MatchService
from .opinion import OpinionService
from .participation import ParticipationService
from .player import PlayerService
from .statistic import StatisticService
from .user import UserService

__all__ = [
    "EntityService",
    "CoachService",
    "PlayerService",
    "MatchService",
    "StatisticService",
    "UserService",
    "OpinionService",
    "ParticipationService",
    "FollowService",
]
