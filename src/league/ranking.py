"""Player ranking: total points per player with dense ranks.

A player's points are the sum of ``blocks + serves + attacks + digs -
errors`` over all of their statistic rows; players without statistics
score 0 and are ranked like any other zero-scorer.  Ranks are dense:
tied players share a rank and the next distinct score gets the next
integer, so the assigned ranks always form 1..N without gaps.

The computation runs in-process over the players and statistics tables
rather than in a database procedure.
"""

import logging
import sqlite3
from collections.abc import Iterable

from league.exceptions import PersistenceError
from league.models import Player, RankingEntry, Statistic

logger = logging.getLogger(__name__)

SELECT_PLAYERS = "SELECT * FROM players ORDER BY player_id"
SELECT_STATISTICS = "SELECT * FROM statistics ORDER BY statistic_id"


def compute_ranking(
    players: Iterable[Player],
    statistics: Iterable[Statistic],
) -> list[RankingEntry]:
    """Aggregate points per player and assign dense ranks.

    Statistics whose player is not in *players* are ignored, matching a
    players-LEFT-JOIN-statistics aggregation.

    Returns:
        One entry per player, ordered by rank and then player_id.
    """
    players = list(players)
    totals: dict[int, int] = {p.player_id: 0 for p in players}

    for stat in statistics:
        if stat.player_id in totals:
            totals[stat.player_id] += stat.points

    ordered = sorted(players, key=lambda p: (-totals[p.player_id], p.player_id))

    ranking: list[RankingEntry] = []
    rank = 0
    previous_points: int | None = None
    for player in ordered:
        points = totals[player.player_id]
        if points != previous_points:
            rank += 1
            previous_points = points
        ranking.append(
            RankingEntry(
                player_id=player.player_id,
                name=player.name,
                surname=player.surname,
                points=points,
                rank=rank,
            )
        )
    return ranking


def player_ranking(conn: sqlite3.Connection) -> list[RankingEntry]:
    """Load every player and statistic from *conn* and rank the players.

    Raises:
        PersistenceError: If either table cannot be read.
    """
    try:
        player_rows = conn.execute(SELECT_PLAYERS).fetchall()
        stat_rows = conn.execute(SELECT_STATISTICS).fetchall()
    except sqlite3.Error as e:
        raise PersistenceError("Error loading data for the ranking", cause=e) from e

    players = [Player.model_validate(dict(r)) for r in player_rows]
    statistics = [Statistic.model_validate(dict(r)) for r in stat_rows]
    logger.debug(
        "Ranking %d players over %d statistic rows", len(players), len(statistics)
    )
    return compute_ranking(players, statistics)
