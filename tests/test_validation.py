"""Tests for the console field validators and the rule pipeline.

Each validator takes the raw typed text and either returns the parsed
value or raises InvalidInput; nothing here touches a terminal.
"""

from datetime import date

import pytest

from league.exceptions import InvalidInput
from league.models import InteractionFrequency, PlayerStatus, Position
from league.validation import (
    FieldRule,
    email_address,
    enum_choice,
    free_text,
    int_at_least,
    int_between,
    optional_positive_int,
    optional_text,
    parse_date,
    password,
    positive_int,
    proper_name,
    required_text,
    run_rules,
)


# ---------------------------------------------------------------------------
# Names
# ---------------------------------------------------------------------------

class TestProperName:
    """Names, surnames and team names: capitalized words, at least 3 chars."""

    @pytest.mark.parametrize("value", ["Ana Garcia", "Ataque", "Team A", "Rodriguez Ruiz"])
    def test_accepts(self, value):
        assert proper_name(value) == value

    @pytest.mark.parametrize(
        "value",
        [
            "ana",          # lower-case start
            "Al",           # too short
            "Ana garcia",   # second word lower-case
            "Ana  Garcia",  # double space
            "Ana3",         # digit
            "",
        ],
    )
    def test_rejects(self, value):
        with pytest.raises(InvalidInput):
            proper_name(value)

    def test_strips_surrounding_whitespace(self):
        assert proper_name("  Lara  ") == "Lara"

    def test_long_invalid_input_fails_fast(self):
        """A long almost-valid string is rejected without catastrophic backtracking."""
        with pytest.raises(InvalidInput):
            proper_name("Aa" * 5000 + "!")


class TestFreeText:

    def test_optional_text_empty_is_none(self):
        assert optional_text("   ") is None

    def test_optional_text_accepts_accents(self):
        assert optional_text("Mexicana de Guadalajara") == "Mexicana de Guadalajara"
        assert optional_text("Española") == "Española"

    def test_optional_text_rejects_digits(self):
        with pytest.raises(InvalidInput):
            optional_text("Team 5")

    def test_free_text_empty_is_empty_string(self):
        assert free_text("") == ""

    def test_required_text_rejects_empty(self):
        with pytest.raises(InvalidInput, match="mandatory"):
            required_text("")


# ---------------------------------------------------------------------------
# Numbers
# ---------------------------------------------------------------------------

class TestNumbers:

    @pytest.mark.parametrize("value", ["16", "50", " 30 "])
    def test_age_accepts_inclusive_bounds(self, value):
        assert int_between(16, 50)(value) == int(value)

    @pytest.mark.parametrize("value", ["15", "51"])
    def test_age_rejects_out_of_range(self, value):
        with pytest.raises(InvalidInput, match="between 16 and 50"):
            int_between(16, 50)(value)

    def test_non_numeric_rejected(self):
        with pytest.raises(InvalidInput, match="not a whole number"):
            int_between(1, 10)("seven")

    def test_positive_int_rejects_zero(self):
        with pytest.raises(InvalidInput):
            positive_int("0")

    def test_positive_int_rejects_empty(self):
        with pytest.raises(InvalidInput, match="mandatory"):
            positive_int("")

    def test_optional_positive_int(self):
        assert optional_positive_int("") is None
        assert optional_positive_int("4") == 4
        with pytest.raises(InvalidInput):
            optional_positive_int("-4")

    def test_int_at_least(self):
        assert int_at_least(0)("0") == 0
        with pytest.raises(InvalidInput):
            int_at_least(0)("-1")

    @pytest.mark.parametrize("validator", [positive_int, optional_positive_int, int_at_least(0)])
    def test_rejects_numbers_beyond_sqlite_integer(self, validator):
        with pytest.raises(InvalidInput, match="too large"):
            validator("99999999999999999999")

    def test_accepts_largest_sqlite_integer(self):
        assert positive_int(str(2**63 - 1)) == 2**63 - 1


# ---------------------------------------------------------------------------
# Enums, dates, credentials
# ---------------------------------------------------------------------------

class TestEnumChoice:

    def test_case_insensitive(self):
        assert enum_choice(Position)("libero") is Position.LIBERO

    def test_every_status_accepted(self):
        validate = enum_choice(PlayerStatus)
        assert [validate(s.value) for s in PlayerStatus] == list(PlayerStatus)

    def test_error_lists_allowed_values(self):
        with pytest.raises(InvalidInput) as exc_info:
            enum_choice(InteractionFrequency)("HOURLY")
        assert "DAILY, WEEKLY, MONTHLY, YEARLY" in str(exc_info.value)


class TestParseDate:

    def test_day_month_year(self):
        assert parse_date("18-05-2021") == date(2021, 5, 18)

    @pytest.mark.parametrize("value", ["2021-05-18", "31-02-2021", "18/05/2021"])
    def test_rejects_other_formats_and_impossible_dates(self, value):
        with pytest.raises(InvalidInput, match="dd-mm-yyyy"):
            parse_date(value)

    def test_rejects_empty(self):
        with pytest.raises(InvalidInput, match="mandatory"):
            parse_date("")


class TestEmail:

    def test_accepts(self):
        assert email_address("diana@gmail.com") == "diana@gmail.com"

    def test_empty_is_none(self):
        assert email_address("") is None

    @pytest.mark.parametrize("value", ["ab@gmail.com", "diana@gmail", "diana.gmail.com"])
    def test_rejects(self, value):
        with pytest.raises(InvalidInput):
            email_address(value)


class TestPassword:

    def test_accepts(self):
        assert password("Abcdef1@") == "Abcdef1@"

    @pytest.mark.parametrize(
        "value",
        [
            "abcdefgh",   # no upper-case, no special
            "Abcdefgh",   # no special
            "abcdef1@",   # no upper-case
            "Abc1@",      # too short
        ],
    )
    def test_rejects(self, value):
        with pytest.raises(InvalidInput):
            password(value)


# ---------------------------------------------------------------------------
# Rule pipeline
# ---------------------------------------------------------------------------

class TestRunRules:

    def test_collects_values_in_order(self):
        rules = [
            FieldRule("name", "Name: ", proper_name),
            FieldRule("age", "Age: ", int_between(16, 50)),
        ]
        answers = {"Name: ": "Ana", "Age: ": "24"}
        asked = []

        def ask(prompt, validator):
            asked.append(prompt)
            return validator(answers[prompt])

        assert run_rules(rules, ask) == {"name": "Ana", "age": 24}
        assert asked == ["Name: ", "Age: "]
