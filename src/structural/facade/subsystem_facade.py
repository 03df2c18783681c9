from __future__ import annotations

import logging
from typing import Optional

logger = logging.getLogger(__name__)

__all__ = ["Subsystem1", "Subsystem2", "Facade", "client_code"]

# ==========================
# Module: subsystem_facade
# Purpose: A Facade offering one simple operation over two subsystems that
#          clients could also use directly.
# ==========================


class Subsystem1:
    def operation1(self) -> str:
        return "Subsystem1: Ready!\n"

    def operation_n(self) -> str:
        return "Subsystem1: Go!\n"


class Subsystem2:
    def operation1(self) -> str:
        return "Subsystem2: Get ready!\n"

    def operation_z(self) -> str:
        return "Subsystem2: Fire!\n"


class Facade:
    """
    Shortcut over both subsystems.

    Subsystems can be supplied by the caller; otherwise the Facade creates and
    owns its own.

    :param subsystem1: Optional existing Subsystem1.
    :param subsystem2: Optional existing Subsystem2.
    """

    def __init__(self, subsystem1: Optional[Subsystem1] = None, subsystem2: Optional[Subsystem2] = None) -> None:
        self._subsystem1 = subsystem1 or Subsystem1()
        self._subsystem2 = subsystem2 or Subsystem2()

    def operation(self) -> str:
        """
        Initializes both subsystems, then orders them to perform the action.

        :return: The combined report.
        """
        logger.debug("Facade operating %s and %s",
                     type(self._subsystem1).__name__, type(self._subsystem2).__name__)
        parts = [
            "Facade initializes subsystems:\n",
            self._subsystem1.operation1(),
            self._subsystem2.operation1(),
            "Facade orders subsystems to perform the action:\n",
            self._subsystem1.operation_n(),
            self._subsystem2.operation_z(),
        ]
        return "".join(parts)


def client_code(facade: Facade) -> str:
    return facade.operation()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    print(client_code(Facade()), end="")
