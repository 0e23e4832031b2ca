"""
Data models for the banking ledger.

This module contains the account model with its savings/checking policies
and the transaction log entry written for every successful operation.
"""

import logging
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from enum import Enum
from typing import Any, Optional


logger = logging.getLogger(__name__)

SAVINGS_INTEREST_RATE = Decimal('0.03')
CHECKING_OVERDRAFT_LIMIT = Decimal('500')

CENT = Decimal('0.01')


class AccountType(Enum):
    """Types of bank accounts."""
    SAVINGS = "savings"
    CHECKING = "checking"

    @property
    def label(self) -> str:
        return f"{self.value.capitalize()} Account"


class TransactionType(Enum):
    """Types of logged transactions."""
    DEPOSIT = "Deposit"
    WITHDRAWAL = "Withdrawal"


def to_decimal(value: Any) -> Decimal:
    """Convert a number or numeric string to Decimal."""
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value))
    except InvalidOperation:
        raise ValueError(f"Invalid amount: {value}")


def format_amount(amount: Decimal) -> str:
    """Render an amount with two decimals, rounding half up."""
    return f"{to_decimal(amount).quantize(CENT, rounding=ROUND_HALF_UP):.2f}"


@dataclass(frozen=True)
class TransactionLogEntry:
    """One line of the transaction log."""

    account_number: str
    transaction_type: TransactionType
    amount: Decimal
    balance_after: Decimal

    SEPARATOR = " | "
    BALANCE_PREFIX = "Balance: "

    def to_line(self) -> str:
        """Format the entry as a log line (without trailing newline)."""
        return self.SEPARATOR.join([
            self.account_number,
            self.transaction_type.value,
            format_amount(self.amount),
            self.BALANCE_PREFIX + format_amount(self.balance_after),
        ])

    @classmethod
    def from_line(cls, line: str) -> "TransactionLogEntry":
        """Parse a log line back into an entry."""
        parts = line.rstrip("\r\n").split(cls.SEPARATOR)
        if len(parts) != 4 or not parts[3].startswith(cls.BALANCE_PREFIX):
            raise ValueError(f"Malformed log line: {line!r}")

        account_number, type_value, amount, balance = parts
        try:
            transaction_type = TransactionType(type_value)
        except ValueError:
            raise ValueError(f"Unknown transaction type: {type_value}")

        return cls(
            account_number=account_number,
            transaction_type=transaction_type,
            amount=to_decimal(amount),
            balance_after=to_decimal(balance[len(cls.BALANCE_PREFIX):]),
        )


@dataclass
class Account:
    """Represents a bank account of either savings or checking type."""

    account_number: str
    holder_name: str
    account_type: AccountType = AccountType.SAVINGS
    balance: Decimal = Decimal('0.00')
    transaction_log: Optional[Any] = field(default=None, repr=False, compare=False)

    def __post_init__(self):
        """Initialize account after creation."""
        # Ensure balance is a Decimal
        self.balance = to_decimal(self.balance)

    @property
    def type_label(self) -> str:
        return self.account_type.label

    @property
    def available_funds(self) -> Decimal:
        """Largest amount a withdrawal may take right now."""
        if self.account_type is AccountType.CHECKING:
            return self.balance + CHECKING_OVERDRAFT_LIMIT
        return self.balance

    @property
    def insufficient_funds_message(self) -> str:
        if self.account_type is AccountType.CHECKING:
            return "Overdraft limit exceeded."
        return "Insufficient balance."

    def can_withdraw(self, amount: Decimal) -> bool:
        """Check if the account policy allows withdrawing the amount."""
        return to_decimal(amount) <= self.available_funds

    def deposit(self, amount: Decimal) -> bool:
        """Deposit money to account.

        Savings deposits are credited with the interest bonus on top of the
        amount; the log still records the amount as given.
        """
        amount = self._checked_amount(amount)
        if amount is None:
            return False

        if self.account_type is AccountType.SAVINGS:
            self.balance += amount * (1 + SAVINGS_INTEREST_RATE)
        else:
            self.balance += amount

        logger.info(f"Deposit of {amount} to {self.account_number}, balance {self.balance}")
        self._log_transaction(TransactionType.DEPOSIT, amount)
        return True

    def withdraw(self, amount: Decimal) -> bool:
        """Withdraw money from account if the policy allows it."""
        amount = self._checked_amount(amount)
        if amount is None:
            return False

        if not self.can_withdraw(amount):
            logger.info(
                f"Withdrawal of {amount} from {self.account_number} refused: "
                f"{self.insufficient_funds_message}"
            )
            return False

        self.balance -= amount
        logger.info(f"Withdrawal of {amount} from {self.account_number}, balance {self.balance}")
        self._log_transaction(TransactionType.WITHDRAWAL, amount)
        return True

    def display_details(self) -> str:
        """Human-readable account report."""
        return "\n".join([
            f"{self.type_label}:",
            f"Account Holder: {self.holder_name}",
            f"Account Number: {self.account_number}",
            f"Balance: {format_amount(self.balance)}",
        ])

    def _checked_amount(self, amount: Any) -> Optional[Decimal]:
        amount = to_decimal(amount)
        if not amount.is_finite() or amount <= 0:
            logger.warning(f"Rejected non-positive amount {amount} for {self.account_number}")
            return None
        return amount

    def _log_transaction(self, transaction_type: TransactionType, amount: Decimal):
        if self.transaction_log is not None:
            self.transaction_log.log(self.account_number, transaction_type, amount, self.balance)
