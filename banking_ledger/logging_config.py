"""Diagnostic logging configuration for the banking ledger."""

import logging

import click


LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class ClickEchoHandler(logging.Handler):
    """Send log records to the current stderr through click."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(self.format(record), err=True)
        except Exception:
            self.handleError(record)


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """Configure logging for the banking_ledger package.

    Parameters
    ----------
    level : str
        Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).

    Returns
    -------
    logging.Logger
        The configured package logger.
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)

    package_logger = logging.getLogger("banking_ledger")
    package_logger.setLevel(log_level)
    package_logger.propagate = False

    # Replace handlers from a previous call
    for handler in package_logger.handlers[:]:
        if isinstance(handler, ClickEchoHandler):
            package_logger.removeHandler(handler)

    handler = ClickEchoHandler()
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    package_logger.addHandler(handler)

    return package_logger
