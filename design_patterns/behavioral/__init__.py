"""
Behavioral patterns
"""

from design_patterns.behavioral.state import (
    State,
    TRANSITIONS,
    transition,
    StateContext,
)
from design_patterns.behavioral.strategy import (
    SAMPLE_DATA,
    Strategy,
    ConcreteStrategy1,
    ConcreteStrategy2,
    StrategyContext,
    format_sequence,
)

__all__ = [
    # State
    "State",
    "TRANSITIONS",
    "transition",
    "StateContext",

    # Strategy
    "SAMPLE_DATA",
    "Strategy",
    "ConcreteStrategy1",
    "ConcreteStrategy2",
    "StrategyContext",
    "format_sequence",
]
