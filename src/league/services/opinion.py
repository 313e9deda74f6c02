"""Menu flows for opinions, including the per-user listing."""

from league.exceptions import PersistenceError
from league.models import Opinion, OpinionWithUser
from league.services.base import Action, EntityService
from league.validation import FieldRule, free_text, int_between, positive_int


def _blank(value) -> str:
    return "-" if value is None else str(value)


class OpinionService(EntityService[Opinion]):
    title = "opinions"
    label = "opinion"
    key_rules = (FieldRule("opinion_id", "Opinion ID: ", positive_int),)
    rules = (
        FieldRule("match_id", "Match ID (mandatory): ", positive_int),
        FieldRule("player_id", "Player ID (mandatory): ", positive_int),
        FieldRule("user_id", "User ID (mandatory): ", positive_int),
        FieldRule("score", "Score (1-10) (mandatory): ", int_between(1, 10)),
        FieldRule("comment", "Comment: ", free_text),
    )

    def extra_actions(self) -> list[Action]:
        return [("List users' opinions about their players", self.list_with_user)]

    def list_with_user(self) -> list[OpinionWithUser]:
        try:
            rows = self.repo.opinions_with_user()
        except PersistenceError as e:
            self.report_failure("list the users' opinions", e)
            return []

        self._print_rows(
            rows,
            "--- Users' opinions ---",
            lambda r: (
                f"User ID: {r.user_id}, Player ID: {_blank(r.player_id)}, "
                f"Score: {_blank(r.score)}, Comment: {_blank(r.comment)}"
            ),
        )
        return rows
