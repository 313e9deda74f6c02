"""Menu flows for players, including the player/coach listing."""

from league.exceptions import PersistenceError
from league.models import Player, PlayerWithCoach, Position
from league.services.base import Action, EntityService
from league.validation import (
    FieldRule,
    enum_choice,
    int_between,
    optional_text,
    positive_int,
    proper_name,
)


class PlayerService(EntityService[Player]):
    title = "players"
    label = "player"
    key_rules = (FieldRule("player_id", "Player ID: ", positive_int),)
    rules = (
        FieldRule("name", "Name (mandatory): ", proper_name),
        FieldRule("surname", "Surname (mandatory): ", proper_name),
        FieldRule(
            "position",
            f"Position ({', '.join(p.value for p in Position)}) (mandatory): ",
            enum_choice(Position),
        ),
        FieldRule("nationality", "Nationality: ", optional_text),
        FieldRule("age", "Age (16-50) (mandatory): ", int_between(16, 50)),
        FieldRule("jersey", "Jersey number (1-99) (mandatory): ", int_between(1, 99)),
        FieldRule("team_name", "Team name (mandatory): ", proper_name),
        FieldRule("coach_id", "Coach ID (mandatory): ", positive_int),
    )

    def extra_actions(self) -> list[Action]:
        return [("List players with their coaches", self.list_with_coach)]

    def list_with_coach(self) -> list[PlayerWithCoach]:
        try:
            rows = self.repo.players_with_coach()
        except PersistenceError as e:
            self.report_failure("list players with their coaches", e)
            return []

        self._print_rows(
            rows,
            "--- Players with their coaches ---",
            lambda r: (
                f"ID: {r.player_id}, Name: {r.name}, "
                f"Coach ID: {r.coach_id}, Team: {r.team_name}"
            ),
        )
        return rows
