#!/usr/bin/env python3
"""Common logging utilities for the yugioh_cards library.

Every module logs through ``logging.getLogger(__name__)``. Records that carry
a ``log_file`` extra are appended to that file, everything else is written to
the console in the colour of its level.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

PACKAGE_LOGGER = __name__.partition(".")[0]

LOG_FORMAT = (
    "%(asctime)s %(label)s -- [%(component)s.%(funcName)s@%(namespace)s] : %(message)s"
)

ANSI_RESET = "\u001b[0m"
ANSI_RED = "\u001b[31m"
ANSI_GREEN = "\u001b[32m"
ANSI_YELLOW = "\u001b[33m"
ANSI_CYAN = "\u001b[36m"

LEVEL_COLORS = {
    "INFO": ANSI_GREEN,
    "ERROR": ANSI_RED,
    "WARNING": ANSI_YELLOW,
    "DEBUG": ANSI_CYAN,
}

LEVELS = {
    "INFO": logging.INFO,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "DEBUG": logging.DEBUG,
}


class CardLogFormatter(logging.Formatter):
    """Render a record as a single ``yyyy-MM-dd -- HH:mm:ss.SSS`` prefixed line."""

    default_time_format = "%Y-%m-%d -- %H:%M:%S"
    default_msec_format = "%s.%03d"

    def __init__(self, fmt: str = LOG_FORMAT):
        super().__init__(fmt)

    def format(self, record: logging.LogRecord) -> str:
        namespace, _, component = record.name.rpartition(".")
        record.component = component
        record.namespace = namespace or component
        if not hasattr(record, "label"):
            record.label = record.levelname
        return super().format(record)


class CardLogHandler(logging.Handler):
    """Route each record to its ``log_file`` extra, or to the console.

    File writes open, append, flush and close on every record so nothing is
    buffered between calls. A log destination that cannot be created falls
    back to the console; a failed write is reported through ``handleError``
    and never reaches the caller.
    """

    def __init__(self, stream=None):
        super().__init__()
        self.stream = stream
        self.setFormatter(CardLogFormatter())

    def emit(self, record: logging.LogRecord) -> None:
        try:
            line = self.format(record)
        except Exception:
            self.handleError(record)
            return

        log_file = getattr(record, "log_file", None)
        if not log_file:
            self.write_console(record, line)
            return

        log_file = Path(log_file)
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            log_file.touch(exist_ok=True)
        except OSError as e:
            print(f"Failed to create log file {log_file}: {e}", file=sys.stderr)
            self.write_console(record, line)
            return

        try:
            with open(log_file, "a", encoding="utf-8") as f:
                f.write(line + "\n")
                f.flush()
        except OSError:
            self.handleError(record)

    def write_console(self, record: logging.LogRecord, line: str) -> None:
        """Write a line to the console wrapped in its level colour."""
        stream = self.stream or sys.stdout
        color = LEVEL_COLORS.get(getattr(record, "label", record.levelname), ANSI_RESET)
        try:
            stream.write(f"{color}{line}{ANSI_RESET}\n")
            stream.flush()
        except Exception:
            self.handleError(record)


def install_handler() -> logging.Logger:
    """Attach the card log handler to the package logger once.

    The package logger lets everything through until a level is set on it.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.propagate = False
    if package_logger.level == logging.NOTSET:
        package_logger.setLevel(logging.DEBUG)

    if not any(isinstance(h, CardLogHandler) for h in package_logger.handlers):
        package_logger.addHandler(CardLogHandler())

    return package_logger


def setup_logging(level: int = logging.DEBUG) -> logging.Logger:
    """Configure the package logger for a command-line run.

    Safe to call more than once; the handler is only installed the first time.

    Args:
        level: Lowest level the package logger lets through (default: DEBUG)

    Returns:
        The package logger

    """
    package_logger = install_handler()
    package_logger.setLevel(level)

    # Quieten down urllib3
    logging.getLogger("urllib3").setLevel(logging.INFO)

    return package_logger


def log_message(
    level: str,
    message: str,
    source: str,
    log_file: Optional[Union[str, Path]] = None,
) -> None:
    """Log a single message under a level name.

    Unrecognised level names are logged at INFO severity but keep their own
    label and get no colour on the console.

    Args:
        level: One of INFO, ERROR, WARNING or DEBUG (case-insensitive)
        message: Free-text message
        source: Logger name of the originating component, usually ``__name__``
        log_file: File to append the line to; the console when empty

    """
    label = level.upper()
    extra = {"label": label}
    if log_file:
        extra["log_file"] = log_file

    logging.getLogger(source).log(
        LEVELS.get(label, logging.INFO), message, stacklevel=2, extra=extra
    )


# Records addressed to a log file must reach it without any setup call.
install_handler()
