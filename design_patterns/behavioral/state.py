"""
State example

Two-state machine expressed as a closed enumeration and a transition
table. Each request emits the current state's action and moves the
context to the other state; there is no terminal state.
"""
from enum import Enum
from typing import Callable, Dict, Optional, Tuple, Union

from design_patterns.core.exceptions import StateNotConfiguredError
from design_patterns.utils.logger import get_logger, log_with_context

logger = get_logger(__name__)


class State(str, Enum):
    """Machine states"""
    STATE_1 = "state_1"
    STATE_2 = "state_2"


# current -> (next, output)
TRANSITIONS: Dict[State, Tuple[State, str]] = {
    State.STATE_1: (State.STATE_2, "State 1 action."),
    State.STATE_2: (State.STATE_1, "State 2 action."),
}


def transition(state: State) -> Tuple[State, str]:
    """
    Handle a request in ``state``

    Returns:
        (next state, output line)
    """
    return TRANSITIONS[State(state)]


class StateContext:
    """
    Holds the current state and delegates requests to the transition table

    Args:
        initial: Starting state
        emit: Sink for output lines (stdout by default)
    """

    def __init__(
        self,
        initial: Optional[Union[State, str]],
        emit: Callable[[str], None] = print
    ):
        if initial is None:
            raise StateNotConfiguredError()
        self._state = State(initial)
        self._emit = emit

    @property
    def state(self) -> State:
        return self._state

    def request(self) -> str:
        next_state, output = transition(self._state)
        log_with_context(
            logger,
            'debug',
            "State transition",
            source=self._state.value,
            target=next_state.value,
        )
        self._emit(output)
        self._state = next_state
        return output

    def __repr__(self) -> str:
        return f"StateContext(state={self._state.value})"
