"""Menu flows for player participation in matches."""

from league.models import Participation, PlayerStatus
from league.services.base import EntityService
from league.validation import FieldRule, enum_choice, int_at_least, positive_int


class ParticipationService(EntityService[Participation]):
    title = "participations"
    label = "participation"
    key_rules = (
        FieldRule("player_id", "Player ID: ", positive_int),
        FieldRule("match_id", "Match ID: ", positive_int),
    )
    rules = (
        FieldRule("entry_minute", "Entry minute (mandatory): ", int_at_least(0)),
        FieldRule("exit_minute", "Exit minute (mandatory): ", int_at_least(0)),
        FieldRule(
            "status",
            f"Status ({', '.join(s.value for s in PlayerStatus)}) (mandatory): ",
            enum_choice(PlayerStatus),
        ),
    )
