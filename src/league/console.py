"""Terminal I/O for the interactive menus.

Wraps the line reader and writer so services never call ``input`` or
``print`` directly; tests pass a scripted reader and a list-appending
writer instead.
"""

import logging
from typing import Any, Callable

from league.exceptions import InvalidInput
from league.validation import Validator, int_between

logger = logging.getLogger(__name__)


class Console:
    """Blocking prompt/answer loop over a reader and a writer.

    Usage::

        console = Console()
        age = console.ask("Age (16-50): ", int_between(16, 50))
    """

    def __init__(
        self,
        reader: Callable[[str], str] = input,
        writer: Callable[[str], Any] = print,
    ) -> None:
        self.reader = reader
        self.writer = writer

    def say(self, text: str = "") -> None:
        self.writer(text)

    def ask(self, prompt: str, validator: Validator) -> Any:
        """Prompt until *validator* accepts the answer, then return its value.

        There is no retry limit: an invalid answer is reported and the
        same prompt is shown again.
        """
        while True:
            raw = self.reader(prompt)
            try:
                return validator(raw)
            except InvalidInput as e:
                logger.info("Rejected answer to %r: %s", prompt.strip(), e)
                self.writer(f"{e} Try again.")

    def choose(self, count: int) -> int:
        """Read a menu option between 1 and *count*."""
        return self.ask(f"Choose an option (1-{count}): ", int_between(1, count))
