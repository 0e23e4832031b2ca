"""
Transaction log for the banking ledger.

This module handles the append-only text file that records every
successful deposit and withdrawal.
"""

import logging
from decimal import Decimal
from typing import Callable, List, Optional

import click

from .models import TransactionLogEntry, TransactionType, to_decimal


DEFAULT_LOG_PATH = "transactions.log"


class TransactionLogger:
    """Appends transactions to the log file and replays them."""

    def __init__(self, log_path: str = DEFAULT_LOG_PATH):
        """Initialize the logger with the log file location."""
        self.log_path = log_path
        self.logger = logging.getLogger(__name__)

    def log(self, account_number: str, transaction_type: TransactionType,
            amount: Decimal, balance: Decimal) -> None:
        """Append one transaction line to the log.

        Write errors are reported and swallowed so that the account
        operation which triggered the write keeps its effect.
        """
        entry = TransactionLogEntry(
            account_number=account_number,
            transaction_type=transaction_type,
            amount=to_decimal(amount),
            balance_after=to_decimal(balance),
        )

        try:
            with open(self.log_path, "a", encoding="utf-8") as log_file:
                log_file.write(entry.to_line() + "\n")
        except OSError as e:
            self.logger.error(f"Error writing to transaction log: {e}")

    def read_lines(self) -> List[str]:
        """Return every log line in append order."""
        lines = self._read()
        return lines if lines is not None else []

    def entries(self) -> List[TransactionLogEntry]:
        """Parse the log into entries, skipping malformed lines."""
        result = []
        for number, line in enumerate(self.read_lines(), start=1):
            if not line.strip():
                continue
            try:
                result.append(TransactionLogEntry.from_line(line))
            except ValueError as e:
                self.logger.warning(f"Skipping log line {number}: {e}")
        return result

    def display_logs(self, echo: Callable[[str], None] = click.echo) -> None:
        """Print the transaction history in file order.

        Nothing is printed when the log cannot be read.
        """
        lines = self._read()
        if lines is None:
            return

        echo("Transaction History:")
        for line in lines:
            echo(line)

    def _read(self) -> Optional[List[str]]:
        try:
            with open(self.log_path, "r", encoding="utf-8") as log_file:
                return [line.rstrip("\r\n") for line in log_file]
        except (OSError, UnicodeDecodeError) as e:
            self.logger.error(f"Error reading transaction log: {e}")
            return None
