"""Logging configuration for taskboardx."""

import logging
import sys
from datetime import UTC, datetime
from pathlib import Path

# Loggers configured together: the package itself and the Flask dev server
CONFIGURED_LOGGERS = ("taskboardx", "werkzeug")


def _reset_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def setup_logging(verbose: int = 0, log_file: Path | None = None) -> None:
    """Configure logging based on verbosity level and optional file output.

    Calling it again replaces the handlers installed by the previous call.

    Args:
        verbose: Verbosity level (0=off, 1=INFO, 2+=DEBUG)
        log_file: Optional path to write logs to file
    """
    for name in CONFIGURED_LOGGERS:
        _reset_handlers(logging.getLogger(name))

    if verbose == 0 and log_file is None:
        return

    level = logging.DEBUG if verbose >= 2 else logging.INFO
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    handlers: list[logging.Handler] = []
    if verbose > 0:
        handlers.append(logging.StreamHandler(sys.stderr))
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)

    for name in CONFIGURED_LOGGERS:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        for handler in handlers:
            logger.addHandler(handler)

    logger = logging.getLogger("taskboardx")
    logger.info("=" * 60)
    logger.info(
        "taskboardx starting | %s | level=%s",
        datetime.now(UTC).strftime("%Y-%m-%d %H:%M:%S UTC"),
        logging.getLevelName(level),
    )
    logger.info("=" * 60)
