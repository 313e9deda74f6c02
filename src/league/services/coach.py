"""Menu flows for coaches."""

from league.models import Coach
from league.services.base import EntityService
from league.validation import (
    FieldRule,
    int_at_least,
    optional_text,
    positive_int,
    proper_name,
)


class CoachService(EntityService[Coach]):
    title = "coaches"
    label = "coach"
    key_rules = (FieldRule("coach_id", "Coach ID: ", positive_int),)
    rules = (
        FieldRule("name", "Name (mandatory): ", proper_name),
        FieldRule("surname", "Surname (mandatory): ", proper_name),
        FieldRule("nationality", "Nationality: ", optional_text),
        FieldRule("experience", "Years of experience (mandatory): ", int_at_least(1)),
    )
