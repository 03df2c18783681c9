"""
Chain of Responsibility (Behavioral)

Intent:
    Pass a request along a chain of handlers; each handler decides either to
    satisfy the request or to forward it, unchanged, to the next handler.

Participants:
    - Handler (abstract): keeps a non-owning reference to its successor and
      provides the "decline and forward" default via `_delegate`.
    - FoodHandler: recognizes exactly one food and answers for an animal.
    - HandlerChain: owns an ordered list of handlers and links them.
    - Client: dispatches requests to the head or to any interior handler.

Notes:
    - An unrecognized request is a normal outcome (`None`), not an error.
    - Traversal is strictly sequential; the first handler that recognizes
      the request wins and nothing after it is consulted.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

logger = logging.getLogger(__name__)

__all__ = [
    "ChainError",
    "Result",
    "Outcome",
    "Handler",
    "FoodHandler",
    "MonkeyHandler",
    "SquirrelHandler",
    "DogHandler",
    "HandlerChain",
    "build_chain",
    "build_default_chain",
    "dispatch",
    "client_code",
    "DEFAULT_FOOD",
]

DEFAULT_FOOD: Tuple[str, ...] = ("Nut", "Banana", "Cup of coffee")


class ChainError(ValueError):
    """
    Raised when a chain cannot be built (empty, or a handler linked twice).
    """


@dataclass(frozen=True, slots=True)
class Result:
    """Produced by the handler that satisfied a request.

    :ivar handler: Name of the handler that took the request.
    :ivar request: The request exactly as it was received.
    :ivar message: Short human-readable description.
    """
    handler: str
    request: str
    message: str


@dataclass(frozen=True, slots=True)
class Outcome:
    """What the client observed after dispatching one request.

    :ivar request: The dispatched request.
    :ivar result: The satisfying handler's result, or None if nobody took it.
    """
    request: str
    result: Optional[Result] = None

    @property
    def handled(self) -> bool:
        return self.result is not None

    def describe(self) -> str:
        if self.result is not None:
            return self.result.message
        return f"{self.request} was left untouched."


class Handler(ABC):
    """Abstract handler defining the chaining protocol.

    Concrete handlers only implement their responsibility in `handle` and
    call `_delegate` explicitly when they decline.
    """

    def __init__(self) -> None:
        self._next: Optional[Handler] = None

    @property
    def name(self) -> str:
        return type(self).__name__

    @property
    def next(self) -> Optional["Handler"]:
        """
        :return: The current successor, or None at the end of the chain.
        """
        return self._next

    def set_next(self, handler: Optional["Handler"]) -> Optional["Handler"]:
        """Set the next handler in a fluent manner and return it.

        Calling it again replaces the previous successor; None makes this
        handler the end of the chain.

        :param handler: The next handler to delegate to, or None.
        :return: The same handler to allow `a.set_next(b).set_next(c)`.
        """
        self._next = handler
        return handler

    @abstractmethod
    def handle(self, request: str) -> Optional[Result]:
        """Attempt to satisfy the request or forward it.

        :param request: The incoming request.
        :return: Result if handled here; the delegated result otherwise;
                 None when the chain ends without anybody taking it.
        """
        raise NotImplementedError

    def _delegate(self, request: str) -> Optional[Result]:
        """Forward the request, unmodified, to the next handler if present.

        :param request: The incoming request.
        :return: Next handler's result, or None when there is no next handler.
        """
        if self._next is not None:
            logger.debug("%s declined %r, forwarding to %s", self.name, request, self._next.name)
            return self._next.handle(request)
        logger.debug("%s declined %r at the end of the chain", self.name, request)
        return None

    def __repr__(self) -> str:
        return f"<{self.name}>"


class FoodHandler(Handler):
    """Recognizes a single food and eats it on behalf of an animal."""

    food: str = ""
    animal: str = ""

    def recognizes(self, request: str) -> bool:
        return request == self.food

    def handle(self, request: str) -> Optional[Result]:
        if self.recognizes(request):
            return Result(
                handler=self.name,
                request=request,
                message=f"{self.animal}: I'll eat the {request}.",
            )
        return self._delegate(request)


class MonkeyHandler(FoodHandler):
    food = "Banana"
    animal = "Monkey"


class SquirrelHandler(FoodHandler):
    food = "Nut"
    animal = "Squirrel"


class DogHandler(FoodHandler):
    food = "MeatBall"
    animal = "Dog"


class HandlerChain:
    """
    Owns an ordered list of handlers and links each one to the next.

    Handlers only hold non-owning successor references; this object is the
    single owner. The first handler is the head.

    :param handlers: Handlers in evaluation order.
    :raises ChainError: If no handler is given or the same instance repeats.
    """

    def __init__(self, handlers: Iterable[Handler]) -> None:
        self._handlers: List[Handler] = []
        for handler in handlers:
            self._add(handler)
        if not self._handlers:
            raise ChainError("A chain needs at least one handler.")
        logger.debug("Built chain: %s", " > ".join(h.name for h in self._handlers))

    def _add(self, handler: Handler) -> None:
        if any(h is handler for h in self._handlers):
            raise ChainError(f"{handler.name} is already linked into this chain.")
        # The tail ends the chain, whatever it was linked to before.
        handler.set_next(None)
        if self._handlers:
            self._handlers[-1].set_next(handler)
        self._handlers.append(handler)

    def append(self, handler: Handler) -> "HandlerChain":
        """
        Links a new handler after the current tail.

        :param handler: Handler to add.
        :return: self, for fluent use.
        """
        self._add(handler)
        return self

    @property
    def head(self) -> Handler:
        return self._handlers[0]

    @property
    def handlers(self) -> Tuple[Handler, ...]:
        return tuple(self._handlers)

    def dispatch(self, request: str) -> Outcome:
        """Dispatches from the head of the chain."""
        return dispatch(self.head, request)

    def __iter__(self) -> Iterator[Handler]:
        return iter(tuple(self._handlers))

    def __len__(self) -> int:
        return len(self._handlers)

    def __str__(self) -> str:
        return " > ".join(h.name for h in self._handlers)


def build_chain(*handlers: Handler) -> HandlerChain:
    """Link the given handlers in order and return the owning chain."""
    return HandlerChain(handlers)


def build_default_chain() -> HandlerChain:
    """Build the canonical chain (Monkey > Squirrel > Dog).

    :return: The owning chain; its head is the MonkeyHandler.
    """
    return build_chain(MonkeyHandler(), SquirrelHandler(), DogHandler())


def dispatch(entry: Handler, request: str) -> Outcome:
    """
    Submits a request to any handler, the head or an interior one.

    Starting from an interior handler only consults that handler and its
    successors.

    :param entry: Handler that receives the request first.
    :param request: The request.
    :return: Outcome reporting whether the request was handled.
    """
    result = entry.handle(request)
    outcome = Outcome(request=request, result=result)
    if outcome.handled:
        logger.info("%r handled by %s (entry: %s)", request, result.handler, entry.name)
    else:
        logger.info("%r left untouched (entry: %s)", request, entry.name)
    return outcome


def client_code(entry: Handler, requests: Iterable[str] = DEFAULT_FOOD) -> List[Outcome]:
    """Dispatch every request from the same entry point, in order."""
    return [dispatch(entry, request) for request in requests]


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    chain = build_default_chain()
    monkey, squirrel, _ = chain.handlers

    print(f"Chain: {chain}\n")
    for out in client_code(monkey):
        print(f"Client: Who wants a {out.request}?")
        print(f"  {'+' if out.handled else '-'} {out.describe()}")

    print("\nSubchain: SquirrelHandler > DogHandler\n")
    for out in client_code(squirrel):
        print(f"Client: Who wants a {out.request}?")
        print(f"  {'+' if out.handled else '-'} {out.describe()}")
