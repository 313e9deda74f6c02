"""Tests for the bootstrap seed rows."""

import pytest

from league.db import TABLES, Database
from league.repository import REPOSITORIES, CoachRepository, UserRepository
from league.seed import SEED_DATA, seed_empty_tables


@pytest.fixture
def db(tmp_path):
    database = Database(tmp_path / "test.db")
    database.connect()
    database.create_schema()
    yield database
    database.close()


class TestSeedEmptyTables:

    def test_seeds_five_rows_per_table(self, db):
        inserted = seed_empty_tables(db)
        assert inserted == {table: 5 for table in TABLES}
        for table in TABLES:
            assert REPOSITORIES[table](db.conn).count() == 5

    def test_second_run_inserts_nothing(self, db):
        seed_empty_tables(db)
        assert seed_empty_tables(db) == {}
        assert CoachRepository(db.conn).count() == 5

    def test_non_empty_table_left_alone(self, db):
        seed_empty_tables(db)
        db.conn.execute("DELETE FROM follows")
        db.conn.commit()

        assert seed_empty_tables(db) == {"follows": 5}
        assert UserRepository(db.conn).count() == 5

    def test_failing_table_does_not_stop_the_rest(self, db):
        """A table whose seed rows break a foreign key is skipped, not fatal."""
        db.conn.execute(
            "INSERT INTO coaches (name, surname, experience) VALUES ('Mario', 'Martinez', 2)"
        )
        db.conn.commit()

        inserted = seed_empty_tables(db)
        # Coach ids 2..5 do not exist, so the first player with coach 2 fails
        assert inserted["players"] == 0
        assert "coaches" not in inserted
        assert set(inserted) == set(TABLES) - {"coaches"}

    def test_seeded_ids_match_references(self, db):
        seed_empty_tables(db)
        coaches = CoachRepository(db.conn).get_all()
        assert [c.coach_id for c in coaches] == [1, 2, 3, 4, 5]
        assert coaches[2].surname == "Rodriguez Ruiz"
        assert coaches[2].nationality is None


def test_seed_data_covers_every_table():
    assert set(SEED_DATA) == set(TABLES)
