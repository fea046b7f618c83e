# Error handler utility
"""
Error context for demo stages

Logs any exception raised inside a stage together with its context
and lets it propagate.
"""
from typing import Any, Dict, Optional

from design_patterns.utils.logger import default_logger, log_with_context


class ErrorContext:
    """
    Error context manager (with statement)

    Example:
        with ErrorContext("strategy", strategy="ConcreteStrategy1"):
            context.do_some_business_logic()
    """

    def __init__(self, stage: str, logger=None, **context: Any):
        self.stage = stage
        self.logger = logger or default_logger
        self.context: Dict[str, Any] = context
        self.error: Optional[BaseException] = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is not None and issubclass(exc_type, Exception):
            self.error = exc_val
            log_with_context(
                self.logger,
                'error',
                f"Stage '{self.stage}' failed: {exc_val}",
                stage=self.stage,
                error_type=exc_type.__name__,
                **self.context
            )

        # Propagate (False keeps the exception raised)
        return False
