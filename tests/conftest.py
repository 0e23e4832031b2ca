"""Pytest configuration and fixtures."""

import logging

import pytest

from banking_ledger.logging_config import ClickEchoHandler


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo CLI logging setup so caplog sees package records again."""
    yield
    package_logger = logging.getLogger("banking_ledger")
    for handler in package_logger.handlers[:]:
        if isinstance(handler, ClickEchoHandler):
            package_logger.removeHandler(handler)
    package_logger.propagate = True
    package_logger.setLevel(logging.NOTSET)
