"""
Account directory for the banking ledger.

This module contains the in-memory registry of accounts and the
operations that act on more than one account.
"""

import logging
from decimal import Decimal
from typing import Dict, List, Optional

from .models import Account, AccountType, to_decimal
from .transaction_log import TransactionLogger


class AccountDirectory:
    """Maps account numbers to accounts for the lifetime of the process."""

    def __init__(self, transaction_log: Optional[TransactionLogger] = None):
        """Initialize an empty directory bound to a transaction log."""
        self.transaction_log = transaction_log
        self.logger = logging.getLogger(__name__)
        self._accounts: Dict[str, Account] = {}

    def __contains__(self, account_number: str) -> bool:
        return account_number in self._accounts

    def __len__(self) -> int:
        return len(self._accounts)

    def create(self, account_number: str, holder_name: str, account_type: AccountType,
               initial_balance: Decimal = Decimal('0.00')) -> Account:
        """Create an account and store it under its number.

        An existing account with the same number is replaced.
        """
        if not account_number or not account_number.strip():
            raise ValueError("Account number cannot be empty")

        if not holder_name or not holder_name.strip():
            raise ValueError("Account holder name cannot be empty")

        initial_balance = to_decimal(initial_balance)
        if not initial_balance.is_finite() or initial_balance < 0:
            raise ValueError("Initial balance cannot be negative")

        account_number = account_number.strip()
        if account_number in self._accounts:
            self.logger.warning(f"Account {account_number} already exists and is being replaced")

        account = Account(
            account_number=account_number,
            holder_name=holder_name.strip(),
            account_type=account_type,
            balance=initial_balance,
            transaction_log=self.transaction_log,
        )
        self._accounts[account_number] = account
        self.logger.info(f"Created {account_type.value} account {account_number}")
        return account

    def lookup(self, account_number: str) -> Optional[Account]:
        """Get account by number."""
        return self._accounts.get(account_number)

    def accounts(self) -> List[Account]:
        """Get all accounts in creation order."""
        return list(self._accounts.values())

    def total_balance(self) -> Decimal:
        """Sum of all account balances."""
        return sum((account.balance for account in self._accounts.values()), Decimal('0.00'))

    def transfer(self, from_number: str, to_number: str, amount: Decimal) -> bool:
        """Move money between two accounts.

        The withdrawal and the deposit are separate operations: the
        destination is credited only after the source withdrawal succeeded.
        """
        from_account = self.lookup(from_number)
        if not from_account:
            self.logger.warning("Source account not found.")
            return False

        to_account = self.lookup(to_number)
        if not to_account:
            self.logger.warning("Destination account not found.")
            return False

        if from_account is to_account:
            self.logger.warning(f"Transfer from {from_number} to the same account")

        if not from_account.withdraw(amount):
            return False

        to_account.deposit(amount)
        self.logger.info(f"Transferred {amount} from {from_number} to {to_number}")
        return True
