"""Custom exception hierarchy for the league manager.

Exception tree:
    LeagueError
    +-- ConfigError            (properties file missing or incomplete)
    +-- ConnectionUnavailable  (no open database connection)
    +-- PersistenceError       (SQL failure, zero rows affected, missing key)
    +-- InvalidInput           (a single field value was rejected)
"""

from typing import Optional


class LeagueError(Exception):
    """Base exception for all league manager errors."""


class ConfigError(LeagueError):
    """The connection properties could not be loaded.

    Raised at startup only -- the application logs it and ends the run
    without touching the database.
    """

    def __init__(self, message: str, *, path: Optional[str] = None):
        self.path = path
        super().__init__(message)


class ConnectionUnavailable(LeagueError):
    """An operation needed the database connection but none is open."""

    pass


class PersistenceError(LeagueError):
    """A repository operation failed.

    Wraps the underlying ``sqlite3.Error`` (if any) in ``cause`` so the
    service layer can log the underlying message.  Zero-rows-affected on
    update/delete is also reported this way, with ``cause`` left as None.
    """

    def __init__(self, message: str, *, cause: Optional[BaseException] = None):
        self.cause = cause
        super().__init__(message)

    def __str__(self) -> str:
        message = super().__str__()
        if self.cause is not None:
            return f"{message} ({self.cause})"
        return message


class InvalidInput(LeagueError):
    """A raw console value failed validation.

    Recovered locally by re-prompting; never fatal.
    """

    def __init__(self, message: str, *, field: Optional[str] = None):
        self.field = field
        super().__init__(message)
