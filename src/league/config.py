"""Application configuration and the connection properties file.

The database location and credentials live in a ``key=value`` properties
file (``db.url``, ``db.username``, ``db.password``) read once at startup.
Everything else has a sensible default on :class:`LeagueConfig`.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from dotenv import dotenv_values

from league.exceptions import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "application.properties"
SQLITE_URL_PREFIX = "sqlite:///"

REQUIRED_KEYS = ("db.url",)


def load_properties(path: str | Path) -> dict[str, str]:
    """Read the ``key=value`` connection properties with python-dotenv.

    Blank lines and ``#`` comments are skipped and surrounding whitespace is
    stripped.  A key written without ``=`` maps to ``""``.  ``${VAR}``
    references are kept literally, so passwords may contain ``$``.

    Raises:
        ConfigError: If the file does not exist or cannot be read.
    """
    path = Path(path)
    if not path.is_file():
        raise ConfigError(f"Properties file not found: {path}", path=str(path))
    try:
        values = dotenv_values(path, interpolate=False, encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(
            f"Cannot read properties file {path}: {e}", path=str(path)
        ) from e
    return {key: value or "" for key, value in values.items()}


def resolve_db_path(db_url: str) -> str:
    """Turn a ``db.url`` value into something ``sqlite3.connect`` accepts."""
    if db_url.startswith(SQLITE_URL_PREFIX):
        return db_url[len(SQLITE_URL_PREFIX):]
    return db_url


@dataclass
class LeagueConfig:
    """Configuration for the league manager."""

    # Properties file holding db.url / db.username / db.password
    config_path: str = DEFAULT_CONFIG_PATH

    # Logs go to {data_dir}/logs
    data_dir: str = "data"

    # Connection properties
    db_url: str = "sqlite:///data/vnl.db"
    db_username: str | None = None
    db_password: str | None = None

    # Console date format (dd-mm-yyyy)
    date_format: str = "%d-%m-%Y"

    @property
    def db_path(self) -> str:
        return resolve_db_path(self.db_url)

    @classmethod
    def from_properties(cls, path: str | Path, **overrides) -> "LeagueConfig":
        """Build a config from a properties file plus keyword overrides.

        Raises:
            ConfigError: If the file is unreadable or ``db.url`` is missing.
        """
        properties = load_properties(path)
        missing = [k for k in REQUIRED_KEYS if not properties.get(k)]
        if missing:
            raise ConfigError(
                f"Missing required properties in {path}: {', '.join(missing)}",
                path=str(path),
            )

        config = cls(
            config_path=str(path),
            db_url=properties["db.url"],
            db_username=properties.get("db.username") or None,
            db_password=properties.get("db.password") or None,
            **overrides,
        )
        # SQLite ignores credentials; record only whether they were supplied
        logger.debug(
            "Loaded connection properties from %s (username %s, password %s)",
            path,
            "set" if config.db_username else "unset",
            "set" if config.db_password else "unset",
        )
        return config
