"""CLI entry point for the volleyball league manager.

Provides ``main()`` as the entry point for the ``vnl-league`` console
script, and ``run(args)`` which sets up logging, reads the connection
properties, bootstraps the schema and seed rows, and hands over to the
interactive main menu.

Usage::

    vnl-league                                  # uses ./application.properties
    vnl-league --config conf/league.properties
    vnl-league --data-dir /tmp/vnl --log-level INFO
"""

import argparse
import logging
import sqlite3

from league.config import DEFAULT_CONFIG_PATH, LeagueConfig
from league.console import Console
from league.db import Database
from league.exceptions import ConfigError
from league.logging_config import setup_logging
from league.menu import MainMenu
from league.seed import seed_empty_tables

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the vnl-league CLI."""
    parser = argparse.ArgumentParser(
        prog="vnl-league",
        description="Manage a volleyball league from the terminal",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=DEFAULT_CONFIG_PATH,
        help=f"Properties file with db.url, db.username, db.password (default: {DEFAULT_CONFIG_PATH})",
    )
    parser.add_argument(
        "--data-dir",
        type=str,
        default="data",
        help="Data directory for logs (default: data)",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="WARNING",
        help="Minimum level printed to the console; the log file always gets DEBUG (default: WARNING)",
    )
    return parser


def run(args: argparse.Namespace, console: Console | None = None) -> int:
    """Bootstrap the application and run the main menu.

    Returns:
        Process exit status: 0 after a normal exit, 1 if startup failed.
    """
    console = console or Console()

    # 1. Logging
    log_file = setup_logging(
        data_dir=args.data_dir, console_level=getattr(logging, args.log_level)
    )
    logger.info("Starting vnl-league: config=%s, log=%s", args.config, log_file)

    # 2. Config
    try:
        config = LeagueConfig.from_properties(args.config, data_dir=args.data_dir)
    except ConfigError as e:
        logger.error("Configuration error: %s", e)
        console.say(f"Could not load the configuration: {e}")
        logging.shutdown()
        return 1

    # 3. Database
    db = Database(config.db_path)
    try:
        try:
            db.connect()
        except (sqlite3.Error, OSError) as e:
            logger.error("Could not connect to %s: %s", config.db_path, e)
            console.say(f"Could not connect to the database: {e}")
            return 1

        # 4. Schema and seed rows
        if not db.create_schema():
            console.say("Could not create the database tables, see the log file.")
            return 1
        seeded = seed_empty_tables(db)
        if seeded:
            logger.info("Seeded tables: %s", seeded)

        # 5. Menu
        try:
            MainMenu(db.conn, console).run()
        except (EOFError, KeyboardInterrupt):
            logger.info("Input closed, leaving the menu")
            console.say()
            console.say("Goodbye!")
        except Exception:
            logger.exception("Unexpected error in the main menu")
            console.say("An unexpected error occurred, see the log file.")
            return 1
        return 0
    finally:
        db.close()
        logging.shutdown()


def main() -> None:
    """Entry point for the vnl-league console script."""
    import sys

    parser = build_parser()
    args = parser.parse_args()
    sys.exit(run(args))


if __name__ == "__main__":
    main()
