"""Illustrative seed rows inserted once into each empty table.

Tables are seeded in creation order so the foreign keys of later rows
(coach 2, match 3, ...) point at the ids AUTOINCREMENT hands out to the
earlier ones on a fresh database.
"""

import logging
from datetime import date

from pydantic import BaseModel

from league.db import TABLES, Database
from league.exceptions import PersistenceError
from league.models import (
    Coach,
    Follow,
    InteractionFrequency,
    Match,
    Opinion,
    Participation,
    Player,
    PlayerStatus,
    Position,
    Statistic,
    User,
)
from league.repository import REPOSITORIES

logger = logging.getLogger(__name__)

SEED_DATA: dict[str, list[BaseModel]] = {
    "coaches": [
        Coach(name="Mario", surname="Martinez", nationality="Cuban", experience=2),
        Coach(name="Juan", surname="Lopez", nationality="Spanish", experience=5),
        Coach(name="Rosa", surname="Rodriguez Ruiz", experience=8),
        Coach(name="Carmen", surname="Moreno", nationality="Mexican", experience=3),
        Coach(name="Roberto", surname="Fernandez", experience=6),
    ],
    "players": [
        Player(name="Brenda", surname="Castillo", position=Position.LIBERO,
               nationality="Dominican", age=38, jersey=5, team_name="Team A", coach_id=2),
        Player(name="Brayelin", surname="Martinez", position=Position.HITTER,
               nationality="Cuban", age=25, jersey=14, team_name="Team B", coach_id=5),
        Player(name="Melisa", surname="Vargas", position=Position.OPPOSITE,
               nationality="Italian", age=29, jersey=45, team_name="Team C", coach_id=1),
        Player(name="Lara", surname="Morgan", position=Position.SETTER,
               nationality="American", age=24, jersey=58, team_name="Team D", coach_id=3),
        Player(name="Daiana", surname="Leyba", position=Position.MIDDLE,
               nationality="Mexican", age=21, jersey=2, team_name="Team E", coach_id=4),
    ],
    "matches": [
        Match(match_date=date(2021, 5, 18), team1="Team E", coach1_id=1, team2="Team B",
              coach2_id=3, result="Team B won the match", duration=156),
        Match(match_date=date(2020, 8, 24), team1="Team A", coach1_id=4, team2="Team D",
              coach2_id=2, result="Team D won the match", duration=172),
        Match(match_date=date(2023, 2, 4), team1="Team C", coach1_id=5, team2="Team B",
              coach2_id=3, result="Team B won the match", duration=142),
        Match(match_date=date(2024, 3, 15), team1="Team A", coach1_id=4, team2="Team C",
              coach2_id=5, result="Team A won the match", duration=158),
        Match(match_date=date(2022, 7, 21), team1="Team D", coach1_id=2, team2="Team E",
              coach2_id=1, result="Team E won the match", duration=184),
    ],
    "statistics": [
        Statistic(player_id=2, match_id=3, attacks=7, serves=2, blocks=5, digs=4, errors=2),
        Statistic(player_id=4, match_id=2, attacks=14, serves=5, blocks=3, digs=2, errors=3),
        Statistic(player_id=1, match_id=4, attacks=9, serves=8, blocks=12, digs=1, errors=1),
        Statistic(player_id=3, match_id=5, attacks=4, serves=10, blocks=4, digs=9, errors=4),
        Statistic(player_id=5, match_id=1, attacks=6, serves=4, blocks=3, digs=9, errors=2),
    ],
    "users": [
        User(name="Diana", surname="Rodriguez", email="diana@gmail.com",
             password="hgtrRed4@", player_id=2),
        User(name="Jose", surname="Sanchez", email="josesanch@gmail.com",
             password="hotrReu4@", player_id=5),
        User(name="Paula", surname="Perez", email="paulap@gmail.com",
             password="eytrRed4@", player_id=3),
        User(name="Valentina", surname="Garcia", email="valentinag@gmail.com",
             password="wgteRed6@", player_id=1),
        User(name="Juana", surname="Hernandez", email="juanah@gmail.com",
             password="tgtrReu4@", player_id=4),
    ],
    "opinions": [
        Opinion(match_id=3, player_id=4, user_id=2, score=8,
                comment="One of the best players I have ever seen"),
        Opinion(match_id=1, player_id=3, user_id=3, score=7,
                comment="Not bad during the match but it could have been better"),
        Opinion(match_id=5, player_id=1, user_id=4, score=3,
                comment="One of the worst matches I have seen her play"),
        Opinion(match_id=2, player_id=2, user_id=5, score=10,
                comment="They deserved first place and were impressive"),
        Opinion(match_id=4, player_id=5, user_id=1, score=7,
                comment="Glad my favourite player won"),
    ],
    "participations": [
        Participation(player_id=3, match_id=1, entry_minute=15, exit_minute=32,
                      status=PlayerStatus.ACTIVE),
        Participation(player_id=1, match_id=4, entry_minute=1, exit_minute=145,
                      status=PlayerStatus.STARTER),
        Participation(player_id=2, match_id=5, entry_minute=35, exit_minute=40,
                      status=PlayerStatus.SUBSTITUTED),
        Participation(player_id=4, match_id=2, entry_minute=10, exit_minute=25,
                      status=PlayerStatus.EXPELLED),
        Participation(player_id=5, match_id=3, entry_minute=2, exit_minute=48,
                      status=PlayerStatus.RESERVE),
    ],
    "follows": [
        Follow(user_id=3, player_id=4, follow_date=date(2022, 8, 25),
               frequency=InteractionFrequency.WEEKLY,
               notes="My favourite player since the Olympic Games"),
        Follow(user_id=1, player_id=5, follow_date=date(2021, 4, 10),
               frequency=InteractionFrequency.MONTHLY,
               notes="First place was fully deserved"),
        Follow(user_id=5, player_id=1, follow_date=date(2022, 10, 10),
               frequency=InteractionFrequency.DAILY,
               notes="A fan since she started playing volleyball"),
        Follow(user_id=4, player_id=2, follow_date=date(2024, 2, 11),
               frequency=InteractionFrequency.YEARLY,
               notes="I rarely watch the league now but she is still my favourite"),
        Follow(user_id=2, player_id=3, follow_date=date(2023, 12, 1),
               frequency=InteractionFrequency.WEEKLY,
               notes="Without doubt one of the best players in the world"),
    ],
}


def seed_empty_tables(db: Database) -> dict[str, int]:
    """Insert the seed rows into every table that is currently empty.

    A failing table is logged and skipped; the remaining tables are still
    attempted.

    Returns:
        Number of rows inserted per table (tables left alone are omitted).
    """
    inserted: dict[str, int] = {}

    for table in TABLES:
        if not db.is_empty(table):
            continue

        repo = REPOSITORIES[table](db.conn)
        count = 0
        try:
            for record in SEED_DATA[table]:
                repo.insert(record)
                count += 1
        except PersistenceError as e:
            logger.error("Error inserting the seed rows into %s: %s", table, e)
        else:
            logger.info("Inserted %d seed rows into %s", count, table)
        inserted[table] = count

    return inserted
