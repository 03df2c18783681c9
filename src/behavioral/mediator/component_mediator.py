"""
component_mediator.py — Components that talk only through a Mediator.

Components never reference each other. They notify the mediator about what
they did, and the mediator decides which other operations to trigger:
  - "A" triggers Component2.do_c()
  - "D" triggers Component1.do_b() and then Component2.do_c()
Every other event is ignored.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import List, Optional

logger = logging.getLogger(__name__)

__all__ = [
    "MediatorError",
    "Mediator",
    "BaseComponent",
    "Component1",
    "Component2",
    "ConcreteMediator",
]


class MediatorError(RuntimeError):
    """
    Raised when a component tries to notify without a mediator attached.
    """


class Mediator(ABC):
    """Receives notifications from components."""

    @abstractmethod
    def notify(self, sender: "BaseComponent", event: str) -> None:
        """
        Reacts to an event raised by a component.

        :param sender: Component that raised the event.
        :param event: Event label.
        """
        raise NotImplementedError


class BaseComponent:
    """
    Stores the mediator and a journal of performed actions.

    :param mediator: Optional mediator; can be attached later with `mediator = ...`.
    :param journal: Shared action log; a private one is created when omitted.
    """

    def __init__(self, mediator: Optional[Mediator] = None, journal: Optional[List[str]] = None) -> None:
        self._mediator = mediator
        self.journal: List[str] = journal if journal is not None else []

    @property
    def mediator(self) -> Optional[Mediator]:
        return self._mediator

    @mediator.setter
    def mediator(self, value: Optional[Mediator]) -> None:
        self._mediator = value

    def _notify(self, action: str, event: str) -> None:
        if self._mediator is None:
            raise MediatorError(f"{type(self).__name__} has no mediator to notify about {event!r}.")
        self.journal.append(action)
        self._mediator.notify(self, event)


class Component1(BaseComponent):
    def do_a(self) -> None:
        self._notify("Component 1 does A.", "A")

    def do_b(self) -> None:
        self._notify("Component 1 does B.", "B")


class Component2(BaseComponent):
    def do_c(self) -> None:
        self._notify("Component 2 does C.", "C")

    def do_d(self) -> None:
        self._notify("Component 2 does D.", "D")


class ConcreteMediator(Mediator):
    """
    Coordinates Component1 and Component2.

    Attaches itself to both components and makes them share component1's
    journal, so the overall order of actions can be read back from either.
    Entries component2 already had are moved to the end of the shared journal.

    :param component1: First component.
    :param component2: Second component.
    """

    def __init__(self, component1: Component1, component2: Component2) -> None:
        self._component1 = component1
        self._component2 = component2
        if component2.journal is not component1.journal:
            component1.journal.extend(component2.journal)
            component2.journal = component1.journal
        component1.mediator = self
        component2.mediator = self

    @property
    def journal(self) -> List[str]:
        return self._component1.journal

    def notify(self, sender: BaseComponent, event: str) -> None:
        if event == "A":
            logger.debug("Mediator reacts on A from %s", type(sender).__name__)
            self.journal.append("Mediator reacts on A and triggers following operations:")
            self._component2.do_c()
        elif event == "D":
            logger.debug("Mediator reacts on D from %s", type(sender).__name__)
            self.journal.append("Mediator reacts on D and triggers following operations:")
            self._component1.do_b()
            self._component2.do_c()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    c1, c2 = Component1(), Component2()
    mediator = ConcreteMediator(c1, c2)

    print("Client triggers operation A.")
    c1.do_a()
    print("\n".join(mediator.journal))
    mediator.journal.clear()

    print("\nClient triggers operation D.")
    c2.do_d()
    print("\n".join(mediator.journal))
