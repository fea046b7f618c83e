"""
Strategy example

A context applies an interchangeable sorting algorithm to a fixed input.
Algorithms work on a private copy and never mutate their argument.
"""
from abc import ABC, abstractmethod
from typing import Callable, List, Optional, Sequence

from design_patterns.core.exceptions import StrategyNotConfiguredError
from design_patterns.utils.logger import get_logger, log_with_context

logger = get_logger(__name__)

SAMPLE_DATA = (3, 1, 5, 2, 4)


class Strategy(ABC):
    """Common interface of the algorithms"""

    @abstractmethod
    def do_algorithm(self, data: Sequence[int]) -> List[int]:
        """
        Run the algorithm

        Args:
            data: Input sequence (left untouched)

        Returns:
            New list with the result
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class ConcreteStrategy1(Strategy):
    """Ascending sort"""

    def do_algorithm(self, data: Sequence[int]) -> List[int]:
        return sorted(data)


class ConcreteStrategy2(Strategy):
    """Descending sort (ascending sort, then reversed)"""

    def do_algorithm(self, data: Sequence[int]) -> List[int]:
        result = sorted(data)
        result.reverse()
        return result


def format_sequence(values: Sequence[int]) -> str:
    """Every element followed by ', ' (trailing separator included)"""
    return "".join(f"{value}, " for value in values)


class StrategyContext:
    """
    Holds a swappable strategy

    Args:
        strategy: Initial strategy; may be assigned later with set_strategy
        emit: Sink for output lines (stdout by default)
    """

    def __init__(
        self,
        strategy: Optional[Strategy] = None,
        emit: Callable[[str], None] = print
    ):
        self._strategy = strategy
        self._emit = emit

    @property
    def strategy(self) -> Optional[Strategy]:
        return self._strategy

    def set_strategy(self, strategy: Strategy):
        log_with_context(
            logger,
            'debug',
            "Strategy changed",
            previous=repr(self._strategy),
            current=repr(strategy),
        )
        self._strategy = strategy

    def do_some_business_logic(self) -> str:
        if self._strategy is None:
            raise StrategyNotConfiguredError()

        result = self._strategy.do_algorithm(list(SAMPLE_DATA))
        message = format_sequence(result)
        self._emit(message)
        return message
