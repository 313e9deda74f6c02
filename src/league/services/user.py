"""Menu flows for users.

E-mail uniqueness is checked against the database before saving, so a
duplicate is re-prompted instead of failing on the UNIQUE constraint.
The constraint stays the source of truth for anything that slips past.
"""

import logging
from typing import Any, Sequence

from league.exceptions import InvalidInput, PersistenceError
from league.models import User
from league.services.base import EntityService
from league.validation import (
    FieldRule,
    email_address,
    optional_positive_int,
    password,
    positive_int,
    proper_name,
)

logger = logging.getLogger(__name__)


class UserService(EntityService[User]):
    title = "users"
    label = "user"
    key_rules = (FieldRule("user_id", "User ID: ", positive_int),)

    def field_rules(self, key: dict[str, Any] | None) -> Sequence[FieldRule]:
        user_id = key["user_id"] if key else None

        def unique_email(raw: str) -> str | None:
            email = email_address(raw)
            if email is None:
                return None
            try:
                taken = self.repo.email_taken(email, exclude_user_id=user_id)
            except PersistenceError as e:
                # The UNIQUE constraint still rejects a duplicate on save
                logger.warning("Could not check e-mail %s: %s", email, e)
                return email
            if taken:
                raise InvalidInput("That e-mail is already registered.")
            return email

        return (
            FieldRule("name", "Name (mandatory): ", proper_name),
            FieldRule("surname", "Surname (mandatory): ", proper_name),
            FieldRule("email", "E-mail: ", unique_email),
            FieldRule("password", "Password (mandatory): ", password),
            FieldRule("player_id", "Favourite player ID: ", optional_positive_int),
        )
