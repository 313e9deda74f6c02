"""Menu flows for users following players."""

from league.models import Follow, InteractionFrequency
from league.services.base import EntityService
from league.validation import FieldRule, enum_choice, free_text, parse_date, positive_int


class FollowService(EntityService[Follow]):
    title = "follows"
    label = "follow"
    key_rules = (
        FieldRule("user_id", "User ID: ", positive_int),
        FieldRule("player_id", "Player ID: ", positive_int),
        FieldRule("follow_date", "Follow date (dd-mm-yyyy): ", parse_date),
    )
    rules = (
        FieldRule(
            "frequency",
            f"Interaction frequency ({', '.join(f.value for f in InteractionFrequency)}) "
            "(mandatory): ",
            enum_choice(InteractionFrequency),
        ),
        FieldRule("notes", "Notes: ", free_text),
    )
