"""
Prototype (Creational)

Intent:
    Copy existing objects without making the code depend on their classes.

Participants:
    - Prototype (abstract): declares `clone`.
    - ConcretePrototype1/2: clonable variants with their own extra field.
    - PrototypeFactory: registry of seeded prototypes; every request returns
      a fresh clone, never the registered instance.
"""

from __future__ import annotations

import copy
import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, Mapping, Optional

logger = logging.getLogger(__name__)

__all__ = [
    "PrototypeError",
    "PrototypeType",
    "Prototype",
    "ConcretePrototype1",
    "ConcretePrototype2",
    "PrototypeFactory",
]


class PrototypeError(KeyError):
    """
    Raised when no prototype is registered for the requested type.
    """


class PrototypeType(Enum):
    PROTOTYPE_1 = 0
    PROTOTYPE_2 = 1


class Prototype(ABC):
    """Base class with cloning ability.

    :param name: Prototype name.
    :param field: Generic numeric field updated by `method`.
    """

    def __init__(self, name: str, field: float = 0.0) -> None:
        self.name = name
        self.field = field

    @abstractmethod
    def clone(self) -> "Prototype":
        """Return an independent copy of this prototype."""
        raise NotImplementedError

    def method(self, field: float) -> str:
        """Set `field` and describe the call.

        :param field: New field value.
        :return: Narration of the call.
        """
        self.field = field
        return f"Call method from {self.name} with field: {field}"


class ConcretePrototype1(Prototype):
    def __init__(self, name: str, concrete_field: float) -> None:
        super().__init__(name)
        self.concrete_field1 = concrete_field

    def clone(self) -> "ConcretePrototype1":
        return copy.deepcopy(self)


class ConcretePrototype2(Prototype):
    def __init__(self, name: str, concrete_field: float) -> None:
        super().__init__(name)
        self.concrete_field2 = concrete_field

    def clone(self) -> "ConcretePrototype2":
        return copy.deepcopy(self)


class PrototypeFactory:
    """
    Hands out clones of registered prototypes by type.

    :param prototypes: Initial registry; when omitted the factory is seeded
                       with PROTOTYPE_1 (50.0) and PROTOTYPE_2 (60.0).
    """

    def __init__(self, prototypes: Optional[Mapping[PrototypeType, Prototype]] = None) -> None:
        if prototypes is None:
            prototypes = {
                PrototypeType.PROTOTYPE_1: ConcretePrototype1("PROTOTYPE_1", 50.0),
                PrototypeType.PROTOTYPE_2: ConcretePrototype2("PROTOTYPE_2", 60.0),
            }
        self._prototypes: Dict[PrototypeType, Prototype] = dict(prototypes)

    def register(self, kind: PrototypeType, prototype: Prototype) -> None:
        """
        Registers (or replaces) the prototype for `kind`.

        :param kind: Prototype type key.
        :param prototype: Instance to clone from now on.
        """
        self._prototypes[kind] = prototype

    def create_prototype(self, kind: PrototypeType) -> Prototype:
        """
        :param kind: Prototype type key.
        :return: A fresh clone of the registered prototype.
        :raises PrototypeError: If nothing is registered for `kind`.
        """
        try:
            prototype = self._prototypes[kind]
        except KeyError as exc:
            raise PrototypeError(f"No prototype registered for {kind!r}.") from exc
        logger.debug("Cloning %s", prototype.name)
        return prototype.clone()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    factory = PrototypeFactory()

    print("Let's create a Prototype 1")
    print(factory.create_prototype(PrototypeType.PROTOTYPE_1).method(90.6486))

    print("\nLet's create a Prototype 2")
    print(factory.create_prototype(PrototypeType.PROTOTYPE_2).method(10.4478))
