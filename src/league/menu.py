"""Top-level menu: one option per table, the last one exits."""

import logging
import sqlite3

from league.console import Console
from league.repository import REPOSITORIES
from league.services import (
    CoachService,
    EntityService,
    FollowService,
    MatchService,
    OpinionService,
    ParticipationService,
    PlayerService,
    StatisticService,
    UserService,
)

logger = logging.getLogger(__name__)

# Menu order, matching the table creation order
SERVICES: tuple[type[EntityService], ...] = (
    CoachService,
    PlayerService,
    MatchService,
    StatisticService,
    UserService,
    OpinionService,
    ParticipationService,
    FollowService,
)


class MainMenu:
    """Dispatches to the per-table services until the user exits."""

    def __init__(self, conn: sqlite3.Connection, console: Console) -> None:
        self.console = console
        self.services = [
            cls(REPOSITORIES[cls.title](conn), console) for cls in SERVICES
        ]

    @property
    def exit_option(self) -> int:
        return len(self.services) + 1

    def show(self) -> None:
        self.console.say("=== Volleyball Nations League ===")
        for number, service in enumerate(self.services, start=1):
            self.console.say(f"{number}. Manage {service.title}")
        self.console.say(f"{self.exit_option}. Exit")

    def run(self) -> None:
        self.console.say("Welcome to the Volleyball Nations League manager.")
        while True:
            self.show()
            choice = self.console.choose(self.exit_option)
            if choice == self.exit_option:
                logger.info("User chose to exit")
                self.console.say("Goodbye!")
                return
            service = self.services[choice - 1]
            logger.debug("Entering the %s menu", service.title)
            service.show_menu()
