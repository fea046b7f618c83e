"""
Exception hierarchy for the pattern examples
"""


class PatternError(Exception):
    """Base class for errors raised by the pattern examples"""


class ContextNotConfiguredError(PatternError):
    """A context object was used before its delegate was assigned"""

    def __init__(self, context: str, delegate: str):
        self.context = context
        self.delegate = delegate
        super().__init__(f"{context} has no {delegate} configured")


class StateNotConfiguredError(ContextNotConfiguredError):
    def __init__(self, context: str = "StateContext"):
        super().__init__(context, "state")


class StrategyNotConfiguredError(ContextNotConfiguredError):
    def __init__(self, context: str = "StrategyContext"):
        super().__init__(context, "strategy")
