"""Menu flows for matches."""

from league.models import Match
from league.services.base import EntityService
from league.validation import (
    FieldRule,
    int_at_least,
    optional_positive_int,
    parse_date,
    positive_int,
    proper_name,
    required_text,
)


class MatchService(EntityService[Match]):
    title = "matches"
    label = "match"
    key_rules = (FieldRule("match_id", "Match ID: ", positive_int),)
    rules = (
        FieldRule("match_date", "Date (dd-mm-yyyy) (mandatory): ", parse_date),
        FieldRule("team1", "First team (mandatory): ", proper_name),
        FieldRule("coach1_id", "Coach ID of the first team: ", optional_positive_int),
        FieldRule("team2", "Second team (mandatory): ", proper_name),
        FieldRule("coach2_id", "Coach ID of the second team: ", optional_positive_int),
        FieldRule("result", "Result (mandatory): ", required_text),
        FieldRule("duration", "Duration in minutes (mandatory): ", int_at_least(1)),
    )
