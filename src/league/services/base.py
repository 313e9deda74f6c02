"""Generic menu-driven service over one repository.

An :class:`EntityService` asks for validated field values through a
:class:`~league.console.Console`, builds the record model, calls the
repository and reports the outcome on the console and in the log.
Persistence failures are logged and reported; they never end the menu.
"""

import logging
from typing import Any, Callable, Generic, Sequence

from pydantic import BaseModel, ValidationError

from league.console import Console
from league.exceptions import PersistenceError
from league.repository import ModelT, Repository
from league.validation import FieldRule, run_rules

logger = logging.getLogger(__name__)

Action = tuple[str, Callable[[], Any]]


class EntityService(Generic[ModelT]):
    """Create / read / list / update / delete flows for one entity.

    Subclasses set ``title`` (menu heading), ``label`` (singular noun used
    in messages), ``key_rules`` (prompts for the key columns) and
    ``rules`` (prompts for every other field, in order).  Extra menu
    entries come from :meth:`extra_actions`.
    """

    title: str
    label: str
    key_rules: Sequence[FieldRule]
    rules: Sequence[FieldRule]

    def __init__(self, repo: Repository[ModelT], console: Console) -> None:
        self.repo = repo
        self.console = console

    # ------------------------------------------------------------------
    # Menu
    # ------------------------------------------------------------------

    def actions(self) -> list[Action]:
        by = "ID" if self.has_generated_key else "key"
        return [
            (f"Add {self.label}", self.create),
            (f"Get {self.label} by {by}", self.show_one),
            (f"List {self.title}", self.list_all),
            *self.extra_actions(),
            (f"Update {self.label}", self.update),
            (f"Delete {self.label}", self.delete),
        ]

    def extra_actions(self) -> list[Action]:
        return []

    def show_menu(self) -> None:
        """Loop over this entity's menu until the user picks "Back"."""
        actions = self.actions()
        back = len(actions) + 1

        while True:
            self.console.say(f"--- Manage {self.title} ---")
            for number, (text, _) in enumerate(actions, start=1):
                self.console.say(f"{number}. {text}")
            self.console.say(f"{back}. Back")

            choice = self.console.choose(back)
            if choice == back:
                self.console.say(f"Leaving {self.title}...")
                return
            actions[choice - 1][1]()

    # ------------------------------------------------------------------
    # Prompting
    # ------------------------------------------------------------------

    @property
    def has_generated_key(self) -> bool:
        return self.repo.generated_key is not None

    def field_rules(self, key: dict[str, Any] | None) -> Sequence[FieldRule]:
        """Rules for the non-key fields; *key* is set when updating."""
        return self.rules

    def read_key(self) -> dict[str, Any]:
        return run_rules(self.key_rules, self.console.ask)

    def read_record(self, key: dict[str, Any] | None = None) -> ModelT | None:
        """Prompt for a full record; returns None if the model rejects it."""
        values = dict(key or {})
        values.update(run_rules(self.field_rules(key), self.console.ask))
        try:
            return self.repo.model.model_validate(values)
        except ValidationError as e:
            logger.error("Invalid %s data: %s", self.label, e)
            self.console.say(f"The {self.label} data is not valid: {e}")
            return None

    def describe_key(self, record: BaseModel) -> str:
        return ", ".join(f"{f}={getattr(record, f)}" for f in self.repo.key_fields)

    def format_record(self, record: ModelT) -> str:
        return ", ".join(
            f"{name}: {'' if value is None else value}"
            for name, value in record.model_dump(mode="json").items()
        )

    # ------------------------------------------------------------------
    # Flows
    # ------------------------------------------------------------------

    def report_failure(self, action: str, error: Exception) -> None:
        """Log a failed repository call and tell the user; the menu goes on."""
        logger.error("Could not %s: %s", action, error)
        self.console.say(f"Could not {action}: {error}")

    def create(self) -> ModelT | None:
        """Prompt for a new record and insert it."""
        key = None if self.has_generated_key else self.read_key()
        record = self.read_record(key)
        if record is None:
            return None

        try:
            saved = self.repo.insert(record)
        except PersistenceError as e:
            self.report_failure(f"add the {self.label}", e)
            return None

        logger.info("Added %s %s", self.label, self.describe_key(saved))
        self.console.say(f"Added {self.label} ({self.describe_key(saved)})")
        return saved

    def show_one(self) -> ModelT | None:
        key = self.read_key()
        try:
            record = self.repo.get(*key.values())
        except PersistenceError as e:
            self.report_failure(f"read the {self.label}", e)
            return None

        if record is None:
            logger.info("No %s found for %s", self.label, key)
            self.console.say(f"No {self.label} found for {key}")
            return None

        logger.info("Found %s %s", self.label, key)
        self.console.say(self.format_record(record))
        return record

    def list_all(self) -> list[ModelT]:
        try:
            records = self.repo.get_all()
        except PersistenceError as e:
            self.report_failure(f"list the {self.title}", e)
            return []

        self._print_rows(records, f"--- {self.title.capitalize()} ---", self.format_record)
        return records

    def update(self) -> ModelT | None:
        """Prompt for the key, then for a full replacement of the other fields."""
        key = self.read_key()
        self.console.say(f"Enter the new data for the {self.label}:")
        record = self.read_record(key)
        if record is None:
            return None

        try:
            self.repo.update(record)
        except PersistenceError as e:
            self.report_failure(f"update the {self.label}", e)
            return None

        logger.info("Updated %s %s", self.label, key)
        self.console.say(f"Updated {self.label}: {self.format_record(record)}")
        return record

    def delete(self) -> bool:
        key = self.read_key()
        try:
            self.repo.delete(*key.values())
        except PersistenceError as e:
            self.report_failure(f"delete the {self.label}", e)
            return False

        logger.info("Deleted %s %s", self.label, key)
        self.console.say(f"Deleted {self.label} {key}")
        return True

    def _print_rows(self, rows: list, heading: str, fmt: Callable[[Any], str]) -> None:
        if not rows:
            self.console.say(f"No {self.title} found, the list is empty.")
            return
        self.console.say(heading)
        for row in rows:
            self.console.say(fmt(row))
