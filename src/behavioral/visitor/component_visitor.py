"""
Visitor (Behavioral)

Intent:
    Add operations over a set of component classes without changing them.
    Each component's `accept` calls the visit method matching its own class,
    so the visitor always knows the concrete type it is working with.
"""

from abc import ABC, abstractmethod
from typing import Iterable, List

__all__ = [
    "Visitor",
    "Component",
    "ConcreteComponentA",
    "ConcreteComponentB",
    "ConcreteVisitor1",
    "ConcreteVisitor2",
    "client_code",
]


class Visitor(ABC):
    """Declares one visit method per concrete component class."""

    @abstractmethod
    def visit_concrete_component_a(self, element: "ConcreteComponentA") -> str:
        raise NotImplementedError

    @abstractmethod
    def visit_concrete_component_b(self, element: "ConcreteComponentB") -> str:
        raise NotImplementedError


class Component(ABC):
    @abstractmethod
    def accept(self, visitor: Visitor) -> str:
        """Double dispatch into the visitor.

        :param visitor: Any Visitor.
        :return: Whatever the matching visit method returns.
        """
        raise NotImplementedError


class ConcreteComponentA(Component):
    def accept(self, visitor: Visitor) -> str:
        return visitor.visit_concrete_component_a(self)

    def exclusive_method_of_concrete_component_a(self) -> str:
        return "A"


class ConcreteComponentB(Component):
    def accept(self, visitor: Visitor) -> str:
        return visitor.visit_concrete_component_b(self)

    def exclusive_method_of_concrete_component_b(self) -> str:
        return "B"


class ConcreteVisitor1(Visitor):
    def visit_concrete_component_a(self, element: ConcreteComponentA) -> str:
        return f"{element.exclusive_method_of_concrete_component_a()} + ConcreteVisitor 1"

    def visit_concrete_component_b(self, element: ConcreteComponentB) -> str:
        return f"{element.exclusive_method_of_concrete_component_b()} + ConcreteVisitor 1"


class ConcreteVisitor2(Visitor):
    def visit_concrete_component_a(self, element: ConcreteComponentA) -> str:
        return f"{element.exclusive_method_of_concrete_component_a()} + ConcreteVisitor 2"

    def visit_concrete_component_b(self, element: ConcreteComponentB) -> str:
        return f"{element.exclusive_method_of_concrete_component_b()} + ConcreteVisitor 2"


def client_code(components: Iterable[Component], visitor: Visitor) -> List[str]:
    """Run the visitor over every component, in order."""
    return [component.accept(visitor) for component in components]


if __name__ == "__main__":
    components = [ConcreteComponentA(), ConcreteComponentB()]

    print("The client code works with all visitors via the base Visitor interface:")
    print("\n".join(client_code(components, ConcreteVisitor1())))

    print("\nIt allows the same client code to work with different types of visitors:")
    print("\n".join(client_code(components, ConcreteVisitor2())))
