"""Closed value sets for player positions, statuses and follow frequency.

All three are ``str`` enums so they bind directly as SQL parameters and
compare equal to the upper-case text stored in the database.
"""

from enum import Enum


class Position(str, Enum):
    SETTER = "SETTER"
    OPPOSITE = "OPPOSITE"
    MIDDLE = "MIDDLE"
    LIBERO = "LIBERO"
    HITTER = "HITTER"


class PlayerStatus(str, Enum):
    """Status of a player during one match."""

    ACTIVE = "ACTIVE"
    SUBSTITUTED = "SUBSTITUTED"
    INJURED = "INJURED"
    EXPELLED = "EXPELLED"
    STARTER = "STARTER"
    RESERVE = "RESERVE"
    INACTIVE = "INACTIVE"


class InteractionFrequency(str, Enum):
    """How often a user interacts with a followed player."""

    DAILY = "DAILY"
    WEEKLY = "WEEKLY"
    MONTHLY = "MONTHLY"
    YEARLY = "YEARLY"
