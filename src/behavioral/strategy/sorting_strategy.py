from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

__all__ = [
    "StrategyError",
    "Strategy",
    "AscendingStrategy",
    "DescendingStrategy",
    "Context",
    "SAMPLE_DATA",
]

# ==========================
# Module: sorting_strategy
# Purpose: A Context delegating sorting to an interchangeable Strategy that
#          can be swapped at runtime.
# ==========================

SAMPLE_DATA: Tuple[str, ...] = ("a", "e", "c", "b", "d")


class StrategyError(RuntimeError):
    """
    Raised when the Context is asked to work without a strategy.
    """


class Strategy(ABC):
    """
    Common interface of all versions of the algorithm.
    """

    @abstractmethod
    def do_algorithm(self, data: Sequence[str]) -> str:
        """
        :param data: Items to combine.
        :return: The combined, ordered string.
        """


class AscendingStrategy(Strategy):
    def do_algorithm(self, data: Sequence[str]) -> str:
        return "".join(sorted("".join(data)))


class DescendingStrategy(Strategy):
    def do_algorithm(self, data: Sequence[str]) -> str:
        return "".join(sorted("".join(data), reverse=True))


class Context:
    """
    Runs business logic through whichever strategy is currently set.

    :param strategy: Initial strategy; may be set later.
    """

    def __init__(self, strategy: Optional[Strategy] = None) -> None:
        self._strategy = strategy

    @property
    def strategy(self) -> Optional[Strategy]:
        return self._strategy

    @strategy.setter
    def strategy(self, strategy: Strategy) -> None:
        logger.debug("Strategy switched to %s", type(strategy).__name__)
        self._strategy = strategy

    def do_some_business_logic(self, data: Sequence[str] = SAMPLE_DATA) -> str:
        """
        Sorts `data` using the current strategy, without knowing how it does it.

        :param data: Items to sort.
        :return: Strategy output.
        :raises StrategyError: If no strategy is set.
        """
        if self._strategy is None:
            raise StrategyError("No strategy set on the context.")
        return self._strategy.do_algorithm(data)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    context = Context(AscendingStrategy())
    print("Context: Sorting data using the strategy (not sure how it'll do it)")
    print(context.do_some_business_logic())

    print("\nClient: Strategy is set to reverse sorting.")
    context.strategy = DescendingStrategy()
    print(context.do_some_business_logic())
