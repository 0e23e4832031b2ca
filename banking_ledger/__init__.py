"""
Banking Ledger

A minimal banking ledger with savings and checking accounts, transfers
and an append-only transaction log, driven by an interactive CLI menu.
"""

__version__ = "0.1.0"

from .models import (
    Account,
    AccountType,
    TransactionType,
    TransactionLogEntry,
    SAVINGS_INTEREST_RATE,
    CHECKING_OVERDRAFT_LIMIT,
)
from .transaction_log import TransactionLogger, DEFAULT_LOG_PATH
from .account_directory import AccountDirectory
from .cli import main


def create_account_directory(log_path: str = DEFAULT_LOG_PATH) -> AccountDirectory:
    """
    Create an AccountDirectory that logs to the given file.

    Args:
        log_path: Path to the transaction log file

    Returns:
        AccountDirectory instance
    """
    return AccountDirectory(TransactionLogger(log_path))


__all__ = [
    "Account",
    "AccountType",
    "TransactionType",
    "TransactionLogEntry",
    "SAVINGS_INTEREST_RATE",
    "CHECKING_OVERDRAFT_LIMIT",
    "TransactionLogger",
    "DEFAULT_LOG_PATH",
    "AccountDirectory",
    "create_account_directory",
    "main"
]
