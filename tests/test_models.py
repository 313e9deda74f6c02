"""Unit tests for the Pydantic record models.

Tests field constraints, enum coercion and the cross-field validators for
each model class defined in league.models.
"""

from datetime import date

import pytest
from pydantic import ValidationError

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
    RankingEntry,
    Statistic,
    User,
)

# ---------------------------------------------------------------------------
# Fixtures: minimal valid dicts for each model
# ---------------------------------------------------------------------------


@pytest.fixture
def valid_player() -> dict:
    return {
        "name": "Ana",
        "surname": "Lopez",
        "position": "LIBERO",
        "age": 24,
        "jersey": 7,
        "team_name": "Team X",
        "coach_id": 1,
    }


@pytest.fixture
def valid_match() -> dict:
    return {
        "match_date": "2021-05-18",
        "team1": "Team E",
        "team2": "Team B",
        "result": "Team B won the match",
        "duration": 156,
    }


@pytest.fixture
def valid_participation() -> dict:
    return {
        "player_id": 3,
        "match_id": 1,
        "entry_minute": 15,
        "exit_minute": 32,
        "status": "ACTIVE",
    }


class TestCoach:

    def test_key_defaults_to_none(self):
        coach = Coach(name="Mario", surname="Martinez", experience=2)
        assert coach.coach_id is None
        assert coach.nationality is None

    def test_experience_must_be_positive(self):
        with pytest.raises(ValidationError):
            Coach(name="Mario", surname="Martinez", experience=0)


class TestPlayer:

    def test_valid(self, valid_player):
        player = Player(**valid_player)
        assert player.position is Position.LIBERO

    @pytest.mark.parametrize("age", [15, 51])
    def test_age_bounds(self, valid_player, age):
        valid_player["age"] = age
        with pytest.raises(ValidationError):
            Player(**valid_player)

    @pytest.mark.parametrize("jersey", [0, 100])
    def test_jersey_bounds(self, valid_player, jersey):
        valid_player["jersey"] = jersey
        with pytest.raises(ValidationError):
            Player(**valid_player)

    def test_unknown_position(self, valid_player):
        valid_player["position"] = "GOALKEEPER"
        with pytest.raises(ValidationError):
            Player(**valid_player)


class TestMatch:

    def test_iso_date_parsed(self, valid_match):
        assert Match(**valid_match).match_date == date(2021, 5, 18)

    def test_duration_positive(self, valid_match):
        valid_match["duration"] = 0
        with pytest.raises(ValidationError):
            Match(**valid_match)

    def test_team_cannot_play_itself(self, valid_match):
        valid_match["team2"] = valid_match["team1"]
        with pytest.raises(ValidationError, match="cannot play itself"):
            Match(**valid_match)

    def test_json_dump_uses_iso_date(self, valid_match):
        assert Match(**valid_match).model_dump(mode="json")["match_date"] == "2021-05-18"


class TestStatistic:

    def test_points(self):
        stat = Statistic(player_id=1, match_id=4, attacks=9, serves=8, blocks=12, digs=1, errors=1)
        assert stat.points == 29

    def test_points_can_be_negative(self):
        stat = Statistic(player_id=1, match_id=1, attacks=0, serves=0, blocks=0, digs=1, errors=5)
        assert stat.points == -4

    def test_counters_non_negative(self):
        with pytest.raises(ValidationError):
            Statistic(player_id=1, match_id=1, attacks=-1, serves=0, blocks=0, digs=0, errors=0)


class TestUserAndOpinion:

    def test_email_optional(self):
        user = User(name="Jose", surname="Sanchez", password="hotrReu4@")
        assert user.email is None

    def test_short_password_rejected(self):
        with pytest.raises(ValidationError):
            User(name="Jose", surname="Sanchez", password="short")

    @pytest.mark.parametrize("score", [0, 11])
    def test_opinion_score_bounds(self, score):
        with pytest.raises(ValidationError):
            Opinion(match_id=1, player_id=1, user_id=1, score=score)

    def test_opinion_comment_defaults_empty(self):
        assert Opinion(match_id=1, player_id=1, user_id=1, score=5).comment == ""


class TestParticipation:

    def test_valid(self, valid_participation):
        assert Participation(**valid_participation).status is PlayerStatus.ACTIVE

    def test_same_entry_and_exit_allowed(self, valid_participation):
        valid_participation["exit_minute"] = valid_participation["entry_minute"]
        Participation(**valid_participation)

    def test_exit_before_entry_rejected(self, valid_participation):
        valid_participation["exit_minute"] = 10
        with pytest.raises(ValidationError, match="exit_minute"):
            Participation(**valid_participation)


class TestFollow:

    def test_frequency_and_notes(self):
        follow = Follow(user_id=3, player_id=4, follow_date=date(2022, 8, 25), frequency="WEEKLY")
        assert follow.frequency is InteractionFrequency.WEEKLY
        assert follow.notes == ""


class TestRankingEntry:

    def test_rank_starts_at_one(self):
        with pytest.raises(ValidationError):
            RankingEntry(player_id=1, name="Ana", surname="Lopez", points=0, rank=0)
