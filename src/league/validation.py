"""Field validators for console input.

Every validator is a pure function taking the raw text typed by the user
and returning the parsed value, or raising :class:`InvalidInput` with a
message fit to show back to the user.  They never read or print anything
themselves, so the same rules drive the terminal menus and the tests.

Usage::

    from league.validation import FieldRule, int_between, run_rules

    rules = [FieldRule("age", "Age (16-50): ", int_between(16, 50))]
    fields = run_rules(rules, console.ask)
"""

import re
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, Callable

from league.exceptions import InvalidInput

Validator = Callable[[str], Any]

# Each word starts upper-case, letters only, single spaces between words
NAME_PATTERN = re.compile(r"[A-Z][a-zA-Z]*( [A-Z][a-zA-Z]*)*")
TEXT_PATTERN = re.compile(r"[A-Za-zÁÉÍÓÚáéíóúÑñ]+( [A-Za-zÁÉÍÓÚáéíóúÑñ]+)*")
EMAIL_PATTERN = re.compile(r".{3,}@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")

NAME_MIN_LENGTH = 3
PASSWORD_MIN_LENGTH = 8
# Largest value SQLite stores in an INTEGER column
SQLITE_INT_MAX = 2**63 - 1
PASSWORD_SPECIALS = '!@#$%^&*(),.?":{}|<>'
DATE_FORMAT = "%d-%m-%Y"


# ---------------------------------------------------------------------------
# Text fields
# ---------------------------------------------------------------------------

def proper_name(raw: str) -> str:
    """Mandatory name, surname or team name."""
    value = raw.strip()
    if len(value) < NAME_MIN_LENGTH or not NAME_PATTERN.fullmatch(value):
        raise InvalidInput(
            "Each word must start with an upper-case letter, contain only "
            "letters and be at least three characters long."
        )
    return value


def optional_text(raw: str) -> str | None:
    """Letters and single spaces; empty input means "not given"."""
    value = raw.strip()
    if not value:
        return None
    if not TEXT_PATTERN.fullmatch(value):
        raise InvalidInput("Only letters and single spaces are allowed.")
    return value


def free_text(raw: str) -> str:
    """Like :func:`optional_text` but an empty answer is stored as ``""``."""
    return optional_text(raw) or ""


def required_text(raw: str) -> str:
    value = optional_text(raw)
    if value is None:
        raise InvalidInput("This field is mandatory.")
    return value


# ---------------------------------------------------------------------------
# Numeric fields
# ---------------------------------------------------------------------------

def _parse_int(raw: str) -> int:
    value = raw.strip()
    if not value:
        raise InvalidInput("This field is mandatory.")
    try:
        number = int(value)
    except ValueError:
        raise InvalidInput(f"'{value}' is not a whole number.") from None
    if abs(number) > SQLITE_INT_MAX:
        raise InvalidInput("The number is too large.")
    return number


def positive_int(raw: str) -> int:
    """Mandatory identifier: a whole number greater than zero."""
    value = _parse_int(raw)
    if value <= 0:
        raise InvalidInput("The ID must be a number greater than 0.")
    return value


def optional_positive_int(raw: str) -> int | None:
    """Identifier of an optional relationship; empty input leaves it unset."""
    if not raw.strip():
        return None
    return positive_int(raw)


def int_between(low: int, high: int) -> Validator:
    """Return a validator accepting whole numbers in ``[low, high]``."""

    def validate(raw: str) -> int:
        value = _parse_int(raw)
        if not low <= value <= high:
            raise InvalidInput(f"Enter a number between {low} and {high}.")
        return value

    return validate


def int_at_least(low: int) -> Validator:
    """Return a validator accepting whole numbers ``>= low``."""

    def validate(raw: str) -> int:
        value = _parse_int(raw)
        if value < low:
            raise InvalidInput(f"Enter a number greater than or equal to {low}.")
        return value

    return validate


# ---------------------------------------------------------------------------
# Closed sets, dates and credentials
# ---------------------------------------------------------------------------

def enum_choice(enum_cls: type[Enum]) -> Validator:
    """Return a validator matching the upper-cased input against *enum_cls*."""
    allowed = ", ".join(member.value for member in enum_cls)

    def validate(raw: str):
        try:
            return enum_cls(raw.strip().upper())
        except ValueError:
            raise InvalidInput(f"Invalid value. Allowed values: {allowed}.") from None

    return validate


def parse_date(raw: str) -> date:
    """Mandatory ``dd-mm-yyyy`` date."""
    value = raw.strip()
    if not value:
        raise InvalidInput("The date is mandatory.")
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError:
        raise InvalidInput("Wrong date format, it must be dd-mm-yyyy.") from None


def email_address(raw: str) -> str | None:
    """Optional e-mail: three characters before ``@`` and a dotted domain.

    Uniqueness is checked against the database by the user service.
    """
    value = raw.strip()
    if not value:
        return None
    if not EMAIL_PATTERN.fullmatch(value):
        raise InvalidInput(
            "The e-mail needs at least three characters before the '@' "
            "and a domain containing a dot."
        )
    return value


def password(raw: str) -> str:
    """At least eight characters, one upper-case letter and one special character."""
    if (
        len(raw) < PASSWORD_MIN_LENGTH
        or not any(c.isupper() for c in raw)
        or not any(c in PASSWORD_SPECIALS for c in raw)
    ):
        raise InvalidInput(
            f"The password needs at least {PASSWORD_MIN_LENGTH} characters, "
            f"one upper-case letter and one of {PASSWORD_SPECIALS}"
        )
    return raw


# ---------------------------------------------------------------------------
# Rule pipeline
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class FieldRule:
    """One prompted field: where to store it, what to ask, how to check it."""

    name: str
    prompt: str
    validator: Validator


def run_rules(
    rules: list[FieldRule] | tuple[FieldRule, ...],
    ask: Callable[[str, Validator], Any],
) -> dict[str, Any]:
    """Ask every rule in order and collect the accepted values by field name.

    Args:
        rules: Ordered field rules.
        ask: Callable that keeps prompting until the validator accepts,
            typically :meth:`league.console.Console.ask`.
    """
    return {rule.name: ask(rule.prompt, rule.validator) for rule in rules}
