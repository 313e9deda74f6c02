"""Menu flows for statistics and the player ranking report."""

import logging

from league.exceptions import PersistenceError
from league.models import RankingEntry, Statistic
from league.ranking import player_ranking
from league.services.base import Action, EntityService
from league.validation import FieldRule, int_at_least, positive_int

logger = logging.getLogger(__name__)

RANKING_ROW = "{:<10} {:<20} {:<20} {:<10} {:<10}"


class StatisticService(EntityService[Statistic]):
    title = "statistics"
    label = "statistic"
    key_rules = (FieldRule("statistic_id", "Statistic ID: ", positive_int),)
    rules = (
        FieldRule("player_id", "Player ID (mandatory): ", positive_int),
        FieldRule("match_id", "Match ID (mandatory): ", positive_int),
        FieldRule("attacks", "Attacks: ", int_at_least(0)),
        FieldRule("serves", "Serves: ", int_at_least(0)),
        FieldRule("blocks", "Blocks: ", int_at_least(0)),
        FieldRule("digs", "Digs: ", int_at_least(0)),
        FieldRule("errors", "Errors: ", int_at_least(0)),
    )

    def extra_actions(self) -> list[Action]:
        return [("Show the player ranking", self.show_ranking)]

    def show_ranking(self) -> list[RankingEntry]:
        """Print every player's total points and dense rank."""
        try:
            ranking = player_ranking(self.repo.conn)
        except PersistenceError as e:
            self.report_failure("compute the ranking", e)
            return []

        if not ranking:
            logger.info("The ranking has no rows")
            self.console.say("No ranking data available.")
            return ranking

        self.console.say("--- Player ranking ---")
        self.console.say(RANKING_ROW.format("ID", "Name", "Surname", "Points", "Rank"))
        for entry in ranking:
            self.console.say(
                RANKING_ROW.format(
                    entry.player_id, entry.name, entry.surname, entry.points, entry.rank
                )
            )
        logger.info("Ranked %d players", len(ranking))
        return ranking
