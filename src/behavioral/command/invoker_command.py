from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import List, Optional

logger = logging.getLogger(__name__)

__all__ = [
    "Command",
    "SimpleCommand",
    "Receiver",
    "ComplexCommand",
    "Invoker",
]

# ==========================
# Module: invoker_command
# Purpose: An Invoker parameterized with on-start/on-finish Commands; commands
#          either act on their own or delegate to a Receiver.
# ==========================


class Command(ABC):
    """
    Base interface for executable commands.

    :param description: Human-readable description of the command.
    """

    def __init__(self, description: str) -> None:
        self._description = description

    @property
    def description(self) -> str:
        """
        :return: Command description string.
        """
        return self._description

    @abstractmethod
    def execute(self) -> str:
        """
        Executes the command.

        :return: Narration of what was done.
        """


class SimpleCommand(Command):
    """
    Command that does a simple thing on its own.

    :param payload: Text the command "prints".
    """

    def __init__(self, payload: str) -> None:
        super().__init__(description=f"Simple({payload})")
        self._payload = payload

    def execute(self) -> str:
        return f"SimpleCommand: See, I can do simple things like printing ({self._payload})"


class Receiver:
    """
    Holds the business logic that complex commands delegate to.

    Every operation is appended to `journal` in call order.
    """

    def __init__(self) -> None:
        self.journal: List[str] = []

    def do_something(self, a: str) -> str:
        line = f"Receiver: Working on ({a})."
        self.journal.append(line)
        return line

    def do_something_else(self, b: str) -> str:
        line = f"Receiver: Also working on ({b})."
        self.journal.append(line)
        return line


class ComplexCommand(Command):
    """
    Delegates the real work to a Receiver.

    :param receiver: Receiver doing the work.
    :param a: Context for the first receiver operation.
    :param b: Context for the second receiver operation.
    """

    def __init__(self, receiver: Receiver, a: str, b: str) -> None:
        super().__init__(description=f"Complex({a}, {b})")
        self._receiver = receiver
        self._a = a
        self._b = b

    def execute(self) -> str:
        lines = [
            "ComplexCommand: Complex stuff should be done by a receiver object.",
            self._receiver.do_something(self._a),
            self._receiver.do_something_else(self._b),
        ]
        return "\n".join(lines)


class Invoker:
    """
    Runs an important operation, surrounded by optional on-start and on-finish commands.

    The invoker depends only on the Command interface.
    """

    def __init__(self) -> None:
        self._on_start: Optional[Command] = None
        self._on_finish: Optional[Command] = None

    def set_on_start(self, command: Optional[Command]) -> None:
        self._on_start = command

    def set_on_finish(self, command: Optional[Command]) -> None:
        self._on_finish = command

    def do_something_important(self) -> List[str]:
        """
        Executes on-start, the invoker's own work, then on-finish.

        :return: Ordered trace of everything that happened.
        """
        trace = ["Invoker: Does anybody want something done before I begin?"]
        if self._on_start is not None:
            logger.debug("Running on-start command: %s", self._on_start.description)
            trace.append(self._on_start.execute())
        trace.append("Invoker: ...doing something really important...")
        trace.append("Invoker: Does anybody want something done after I finish?")
        if self._on_finish is not None:
            logger.debug("Running on-finish command: %s", self._on_finish.description)
            trace.append(self._on_finish.execute())
        return trace


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    invoker = Invoker()
    invoker.set_on_start(SimpleCommand("Say Hi!"))
    invoker.set_on_finish(ComplexCommand(Receiver(), "Send email", "Save report"))
    for line in invoker.do_something_important():
        print(line)
