# Logger utility
"""
Rich based structured logging

Features:
- Console output: Rich handler on stderr, so stdout only carries the demo transcript
- File output: optional per-run log file
- Level filtering driven by Settings
- Structured messages: extra context appended as key=value pairs
"""
import logging
from pathlib import Path
from datetime import datetime
from typing import Optional, Union
from rich.logging import RichHandler
from rich.console import Console

from design_patterns.core.settings import get_settings

ROOT_LOGGER_NAME = "design_patterns"

# Rich Console (global, stderr)
console = Console(stderr=True)


class StructuredFormatter(logging.Formatter):
    """Formatter that appends the ``context`` extra as key=value pairs"""

    def format(self, record: logging.LogRecord) -> str:
        base_format = super().format(record)

        if hasattr(record, 'context'):
            context_str = " | ".join(
                f"{k}={v}" for k, v in record.context.items()
            )
            return f"{base_format} | {context_str}"

        return base_format


def setup_logger(
    name: str = ROOT_LOGGER_NAME,
    run_id: Optional[str] = None,
    log_level: str = "WARNING",
    log_dir: Optional[Union[str, Path]] = None
) -> logging.Logger:
    """
    Configure and return a logger

    Args:
        name: Logger name
        run_id: Run identifier used in the log file name (timestamp if None)
        log_level: DEBUG, INFO, WARNING, ERROR
        log_dir: Directory for the log file; no file handler when None

    Returns:
        Configured Logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, log_level.upper()))

    # Drop handlers from a previous setup
    logger.handlers.clear()

    console_handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    logger.addHandler(console_handler)

    if log_dir is not None:
        if run_id is None:
            run_id = datetime.now().strftime("%Y%m%d_%H%M%S")

        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        log_file = log_path / f"run_{run_id}.log"

        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(StructuredFormatter(
            fmt='%(asctime)s | %(name)s | %(levelname)-8s | %(funcName)s:%(lineno)d | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        logger.addHandler(file_handler)
        logger.debug(f"Logger initialized: run_id={run_id}, log_file={log_file}")

    return logger


def get_logger(name: str) -> logging.Logger:
    """Child logger of the package logger (``design_patterns.*``)"""
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def log_with_context(
    logger: logging.Logger,
    level: str,
    message: str,
    **context
):
    """
    Log a message with structured context

    Example:
        log_with_context(
            logger,
            'debug',
            'State transition',
            source='state_1',
            target='state_2'
        )
    """
    log_func = getattr(logger, level.lower())
    log_func(message, extra={'context': context})


def configure_from_settings() -> logging.Logger:
    """(Re)configure the package logger from the current Settings"""
    settings = get_settings()
    return setup_logger(log_level=settings.log_level, log_dir=settings.log_dir)


# Package logger (default)
default_logger = configure_from_settings()
