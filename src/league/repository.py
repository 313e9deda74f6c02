"""Data access layer with CRUD operations for all league tables.

Provides a generic :class:`Repository` that implements insert / get /
get_all / update / delete once, driven by per-entity SQL constants and a
Pydantic record model.  Eight thin subclasses bind it to the league
tables and add the few denormalized read queries the menus need.

Every mutating call runs inside ``with self.conn:`` so it is committed on
success and rolled back on any error, including zero rows affected.
"""

import logging
import sqlite3
from datetime import date
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from league.exceptions import PersistenceError
from league.models import (
    Coach,
    Follow,
    Match,
    Opinion,
    OpinionWithUser,
    Participation,
    Player,
    PlayerWithCoach,
    Statistic,
    User,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

# ---------------------------------------------------------------------------
# SQL constants
# ---------------------------------------------------------------------------

INSERT_COACH = """
    INSERT INTO coaches (name, surname, nationality, experience)
    VALUES (:name, :surname, :nationality, :experience)
"""
UPDATE_COACH = """
    UPDATE coaches SET
        name        = :name,
        surname     = :surname,
        nationality = :nationality,
        experience  = :experience
    WHERE coach_id = :coach_id
"""

INSERT_PLAYER = """
    INSERT INTO players (
        name, surname, position, nationality, age, jersey, team_name, coach_id
    ) VALUES (
        :name, :surname, :position, :nationality, :age, :jersey, :team_name, :coach_id
    )
"""
UPDATE_PLAYER = """
    UPDATE players SET
        name        = :name,
        surname     = :surname,
        position    = :position,
        nationality = :nationality,
        age         = :age,
        jersey      = :jersey,
        team_name   = :team_name,
        coach_id    = :coach_id
    WHERE player_id = :player_id
"""
SELECT_PLAYERS_WITH_COACH = """
    SELECT p.player_id, p.name, c.coach_id, p.team_name
    FROM players p
    JOIN coaches c ON p.coach_id = c.coach_id
    ORDER BY p.player_id
"""

INSERT_MATCH = """
    INSERT INTO matches (
        match_date, team1, coach1_id, team2, coach2_id, result, duration
    ) VALUES (
        :match_date, :team1, :coach1_id, :team2, :coach2_id, :result, :duration
    )
"""
UPDATE_MATCH = """
    UPDATE matches SET
        match_date = :match_date,
        team1      = :team1,
        coach1_id  = :coach1_id,
        team2      = :team2,
        coach2_id  = :coach2_id,
        result     = :result,
        duration   = :duration
    WHERE match_id = :match_id
"""

INSERT_STATISTIC = """
    INSERT INTO statistics (
        player_id, match_id, attacks, serves, blocks, digs, errors
    ) VALUES (
        :player_id, :match_id, :attacks, :serves, :blocks, :digs, :errors
    )
"""
UPDATE_STATISTIC = """
    UPDATE statistics SET
        player_id = :player_id,
        match_id  = :match_id,
        attacks   = :attacks,
        serves    = :serves,
        blocks    = :blocks,
        digs      = :digs,
        errors    = :errors
    WHERE statistic_id = :statistic_id
"""

INSERT_USER = """
    INSERT INTO users (name, surname, email, password, player_id)
    VALUES (:name, :surname, :email, :password, :player_id)
"""
UPDATE_USER = """
    UPDATE users SET
        name      = :name,
        surname   = :surname,
        email     = :email,
        password  = :password,
        player_id = :player_id
    WHERE user_id = :user_id
"""

INSERT_OPINION = """
    INSERT INTO opinions (match_id, player_id, user_id, score, comment)
    VALUES (:match_id, :player_id, :user_id, :score, :comment)
"""
UPDATE_OPINION = """
    UPDATE opinions SET
        match_id  = :match_id,
        player_id = :player_id,
        user_id   = :user_id,
        score     = :score,
        comment   = :comment
    WHERE opinion_id = :opinion_id
"""
SELECT_OPINIONS_WITH_USER = """
    SELECT u.user_id, p.player_id, o.score, o.comment
    FROM users u
    LEFT JOIN opinions o ON u.user_id = o.user_id
    LEFT JOIN players p ON o.player_id = p.player_id
    ORDER BY u.user_id, o.opinion_id
"""

INSERT_PARTICIPATION = """
    INSERT INTO participations (player_id, match_id, entry_minute, exit_minute, status)
    VALUES (:player_id, :match_id, :entry_minute, :exit_minute, :status)
"""
UPDATE_PARTICIPATION = """
    UPDATE participations SET
        entry_minute = :entry_minute,
        exit_minute  = :exit_minute,
        status       = :status
    WHERE player_id = :player_id AND match_id = :match_id
"""

INSERT_FOLLOW = """
    INSERT INTO follows (user_id, player_id, follow_date, frequency, notes)
    VALUES (:user_id, :player_id, :follow_date, :frequency, :notes)
"""
UPDATE_FOLLOW = """
    UPDATE follows SET
        frequency = :frequency,
        notes     = :notes
    WHERE user_id = :user_id AND player_id = :player_id AND follow_date = :follow_date
"""


def _bind(value: Any) -> Any:
    """Convert a key value to something sqlite3 binds without adapters."""
    if isinstance(value, date):
        return value.isoformat()
    return value


# ---------------------------------------------------------------------------
# Generic repository
# ---------------------------------------------------------------------------

class Repository(Generic[ModelT]):
    """CRUD data access for one table.

    Receives a raw ``sqlite3.Connection`` (not a Database instance) so tests
    can pass any connection, including in-memory databases.

    Subclasses set the table, the record model, the key column(s) and the
    INSERT / UPDATE statements (named parameters matching the model's field
    names).  SELECT and DELETE statements are derived from the key columns.
    ``generated_key`` names the AUTOINCREMENT column, or is None for
    composite-key tables whose keys are supplied by the caller.
    """

    table: str
    model: type[ModelT]
    entity: str
    key_fields: tuple[str, ...]
    generated_key: str | None = None
    insert_sql: str
    update_sql: str

    def __init__(self, conn: sqlite3.Connection) -> None:
        self.conn = conn

    # ------------------------------------------------------------------
    # SQL derived from the key columns
    # ------------------------------------------------------------------

    @property
    def _where_key(self) -> str:
        return " AND ".join(f"{field} = ?" for field in self.key_fields)

    @property
    def select_one_sql(self) -> str:
        return f"SELECT * FROM {self.table} WHERE {self._where_key}"

    @property
    def select_all_sql(self) -> str:
        return f"SELECT * FROM {self.table} ORDER BY {', '.join(self.key_fields)}"

    @property
    def delete_sql(self) -> str:
        return f"DELETE FROM {self.table} WHERE {self._where_key}"

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _key_params(self, key: tuple) -> tuple:
        if len(key) != len(self.key_fields):
            raise TypeError(
                f"{self.entity} key is ({', '.join(self.key_fields)}), "
                f"got {len(key)} value(s)"
            )
        return tuple(_bind(v) for v in key)

    def _to_model(self, row: sqlite3.Row) -> ModelT:
        return self.model.model_validate(dict(row))

    def _write(self, action: str, sql: str, params) -> sqlite3.Cursor:
        """Execute one mutating statement in its own transaction.

        Raises:
            PersistenceError: On any sqlite3 error, an integer too large
                to bind, or when no row was affected.  The transaction is
                rolled back in all cases.
        """
        try:
            with self.conn:
                cursor = self.conn.execute(sql, params)
                if cursor.rowcount == 0:
                    raise PersistenceError(
                        f"Could not {action} {self.entity}, no rows affected"
                    )
        except PersistenceError:
            logger.info("Rolled back %s on %s: no rows affected", action, self.table)
            raise
        except (sqlite3.Error, OverflowError) as e:
            logger.info("Rolled back %s on %s: %s", action, self.table, e)
            raise PersistenceError(
                f"Error trying to {action} {self.entity}", cause=e
            ) from e

        logger.debug("Committed %s on %s", action, self.table)
        return cursor

    def _read(self, sql: str, params: tuple = ()) -> list[sqlite3.Row]:
        try:
            return self.conn.execute(sql, params).fetchall()
        except (sqlite3.Error, OverflowError) as e:
            raise PersistenceError(
                f"Error reading {self.entity} records", cause=e
            ) from e

    # ------------------------------------------------------------------
    # CRUD
    # ------------------------------------------------------------------

    def insert(self, record: ModelT) -> ModelT:
        """Insert *record* and return it with its generated id filled in."""
        cursor = self._write(
            "insert", self.insert_sql, record.model_dump(mode="json")
        )
        if self.generated_key is None:
            return record
        if cursor.lastrowid is None:
            raise PersistenceError(f"No generated key returned for new {self.entity}")
        return record.model_copy(update={self.generated_key: cursor.lastrowid})

    def get(self, *key) -> ModelT | None:
        """Return the record with the given key, or None if not found."""
        rows = self._read(self.select_one_sql, self._key_params(key))
        return self._to_model(rows[0]) if rows else None

    def get_all(self) -> list[ModelT]:
        """Return every record, ordered by key."""
        return [self._to_model(r) for r in self._read(self.select_all_sql)]

    def update(self, record: ModelT) -> None:
        """Replace the non-key fields of an existing record."""
        self._write("update", self.update_sql, record.model_dump(mode="json"))

    def delete(self, *key) -> None:
        """Delete the record with the given key."""
        self._write("delete", self.delete_sql, self._key_params(key))

    def count(self) -> int:
        """Return the number of rows in the table."""
        return self._read(f"SELECT COUNT(*) FROM {self.table}")[0][0]


# ---------------------------------------------------------------------------
# Entity repositories
# ---------------------------------------------------------------------------

class CoachRepository(Repository[Coach]):
    table = "coaches"
    model = Coach
    entity = "coach"
    key_fields = ("coach_id",)
    generated_key = "coach_id"
    insert_sql = INSERT_COACH
    update_sql = UPDATE_COACH


class PlayerRepository(Repository[Player]):
    table = "players"
    model = Player
    entity = "player"
    key_fields = ("player_id",)
    generated_key = "player_id"
    insert_sql = INSERT_PLAYER
    update_sql = UPDATE_PLAYER

    def players_with_coach(self) -> list[PlayerWithCoach]:
        """Return every player that has a coach, with the coach's id."""
        return [
            PlayerWithCoach.model_validate(dict(r))
            for r in self._read(SELECT_PLAYERS_WITH_COACH)
        ]


class MatchRepository(Repository[Match]):
    table = "matches"
    model = Match
    entity = "match"
    key_fields = ("match_id",)
    generated_key = "match_id"
    insert_sql = INSERT_MATCH
    update_sql = UPDATE_MATCH


class StatisticRepository(Repository[Statistic]):
    table = "statistics"
    model = Statistic
    entity = "statistic"
    key_fields = ("statistic_id",)
    generated_key = "statistic_id"
    insert_sql = INSERT_STATISTIC
    update_sql = UPDATE_STATISTIC


class UserRepository(Repository[User]):
    table = "users"
    model = User
    entity = "user"
    key_fields = ("user_id",)
    generated_key = "user_id"
    insert_sql = INSERT_USER
    update_sql = UPDATE_USER

    def email_taken(self, email: str, exclude_user_id: int | None = None) -> bool:
        """Return True if another user already registered *email*.

        ``exclude_user_id`` lets an update keep the user's own address.
        """
        rows = self._read(
            "SELECT 1 FROM users WHERE email = ? AND user_id IS NOT ?",
            (email, exclude_user_id),
        )
        return bool(rows)


class OpinionRepository(Repository[Opinion]):
    table = "opinions"
    model = Opinion
    entity = "opinion"
    key_fields = ("opinion_id",)
    generated_key = "opinion_id"
    insert_sql = INSERT_OPINION
    update_sql = UPDATE_OPINION

    def opinions_with_user(self) -> list[OpinionWithUser]:
        """Return every user with their opinions (users without any included)."""
        return [
            OpinionWithUser.model_validate(dict(r))
            for r in self._read(SELECT_OPINIONS_WITH_USER)
        ]


class ParticipationRepository(Repository[Participation]):
    table = "participations"
    model = Participation
    entity = "participation"
    key_fields = ("player_id", "match_id")
    insert_sql = INSERT_PARTICIPATION
    update_sql = UPDATE_PARTICIPATION


class FollowRepository(Repository[Follow]):
    table = "follows"
    model = Follow
    entity = "follow"
    key_fields = ("user_id", "player_id", "follow_date")
    insert_sql = INSERT_FOLLOW
    update_sql = UPDATE_FOLLOW


# Table name -> repository class, in creation order
REPOSITORIES: dict[str, type[Repository]] = {
    cls.table: cls
    for cls in (
        CoachRepository,
        PlayerRepository,
        MatchRepository,
        StatisticRepository,
        UserRepository,
        OpinionRepository,
        ParticipationRepository,
        FollowRepository,
    )
}
