"""
CLI interface for the banking ledger.

This module provides the interactive menu for creating accounts, moving
money and reading back the transaction log.
"""

import click
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from .models import AccountType, CENT
from .transaction_log import TransactionLogger, DEFAULT_LOG_PATH
from .account_directory import AccountDirectory
from .logging_config import setup_logging


MENU_OPTIONS = [
    "Create Account",
    "Deposit",
    "Withdraw",
    "Transfer",
    "Display Account Details",
    "View Transaction Logs",
    "Exit",
]

ACCOUNT_TYPE_CHOICES = {
    '1': AccountType.SAVINGS,
    '2': AccountType.CHECKING,
}


class BankCLI:
    """CLI wrapper for ledger operations."""

    def __init__(self, log_path: str = DEFAULT_LOG_PATH):
        """Initialize CLI with a transaction log and an empty directory."""
        self.transaction_log = TransactionLogger(log_path)
        self.directory = AccountDirectory(self.transaction_log)

    def format_currency(self, amount: Decimal) -> str:
        """Format currency for display."""
        return f"{amount.quantize(CENT, rounding=ROUND_HALF_UP):,.2f}"

    def parse_currency(self, amount_str: str) -> Decimal:
        """Parse currency input."""
        try:
            clean_str = amount_str.replace(',', '').strip()
            amount = Decimal(clean_str)
        except (InvalidOperation, ValueError):
            raise ValueError(f"Invalid amount: {amount_str}")

        if not amount.is_finite():
            raise ValueError(f"Invalid amount: {amount_str}")
        return amount

    def parse_positive_amount(self, amount_str: str) -> Decimal:
        """Parse an amount that has to be greater than zero."""
        amount = self.parse_currency(amount_str)
        if amount <= 0:
            raise ValueError("Amount must be positive")
        return amount

    def show_menu(self):
        click.echo("\nBanking System Menu:")
        for number, title in enumerate(MENU_OPTIONS, start=1):
            click.echo(f"{number}. {title}")

    def run(self):
        """Run the menu loop until Exit is chosen or input ends."""
        actions = {
            1: self.create_account,
            2: self.deposit,
            3: self.withdraw,
            4: self.transfer,
            5: self.display_account,
            6: self.view_logs,
        }

        while True:
            self.show_menu()
            try:
                choice_str = click.prompt("Enter your choice", type=str)
            except click.Abort:
                return

            try:
                choice = int(choice_str.strip())
            except ValueError:
                choice = None

            if choice == len(MENU_OPTIONS):
                click.echo("Exiting Banking System. Goodbye!")
                return

            action = actions.get(choice)
            if action is None:
                click.echo("Invalid choice. Please try again.")
                continue

            try:
                action()
            except ValueError as e:
                click.echo(f"❌ Error: {e}", err=True)
            except click.Abort:
                return

    def create_account(self):
        click.echo("Create Account:")
        type_choice = click.prompt(
            "Enter Account Type (1 for Savings, 2 for Checking)",
            type=click.Choice(list(ACCOUNT_TYPE_CHOICES)),
            show_choices=False,
        )
        name = click.prompt("Enter Account Holder Name")
        account_number = click.prompt("Enter Account Number")
        balance = self.parse_currency(click.prompt("Enter Initial Balance"))

        if self.directory.lookup(account_number.strip()):
            click.echo(f"⚠️ Account {account_number.strip()} already exists and will be replaced")

        account = self.directory.create(
            account_number=account_number,
            holder_name=name,
            account_type=ACCOUNT_TYPE_CHOICES[type_choice],
            initial_balance=balance,
        )
        click.echo("✅ Account created successfully!")
        click.echo(f"Account Number: {account.account_number}")
        click.echo(f"Type: {account.type_label}")
        click.echo(f"Balance: {self.format_currency(account.balance)}")

    def deposit(self):
        account_number = click.prompt("Enter Account Number")
        account = self.directory.lookup(account_number)
        if not account:
            click.echo("❌ Account not found.", err=True)
            return

        amount = self.parse_positive_amount(click.prompt("Enter Amount to Deposit"))
        if account.deposit(amount):
            click.echo("✅ Deposit successful.")
            click.echo(f"New Balance: {self.format_currency(account.balance)}")
        else:
            click.echo("❌ Deposit failed", err=True)

    def withdraw(self):
        account_number = click.prompt("Enter Account Number")
        account = self.directory.lookup(account_number)
        if not account:
            click.echo("❌ Account not found.", err=True)
            return

        amount = self.parse_positive_amount(click.prompt("Enter Amount to Withdraw"))
        if account.withdraw(amount):
            click.echo("✅ Withdrawal successful.")
            click.echo(f"New Balance: {self.format_currency(account.balance)}")
        else:
            click.echo(f"❌ {account.insufficient_funds_message}", err=True)

    def transfer(self):
        source_number = click.prompt("Enter Source Account Number")
        source = self.directory.lookup(source_number)
        if not source:
            click.echo("❌ Source account not found.", err=True)
            return

        destination_number = click.prompt("Enter Destination Account Number")
        destination = self.directory.lookup(destination_number)
        if not destination:
            click.echo("❌ Destination account not found.", err=True)
            return

        amount = self.parse_positive_amount(click.prompt("Enter Amount to Transfer"))
        if self.directory.transfer(source_number, destination_number, amount):
            click.echo("✅ Transfer successful.")
            click.echo(f"From Account {source.account_number} Balance: {self.format_currency(source.balance)}")
            click.echo(f"To Account {destination.account_number} Balance: {self.format_currency(destination.balance)}")
        else:
            click.echo(f"❌ {source.insufficient_funds_message}", err=True)

    def display_account(self):
        account_number = click.prompt("Enter Account Number")
        account = self.directory.lookup(account_number)
        if not account:
            click.echo("❌ Account not found.", err=True)
            return

        click.echo(account.display_details())

    def view_logs(self):
        self.transaction_log.display_logs()


@click.group(invoke_without_command=True)
@click.option('--log-file', default=DEFAULT_LOG_PATH, help='Transaction log file path')
@click.option('--log-level', default='WARNING',
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              help='Diagnostic log level')
@click.pass_context
def cli(ctx, log_file, log_level):
    """Banking Ledger CLI"""
    setup_logging(log_level)
    ctx.ensure_object(dict)
    ctx.obj['cli'] = BankCLI(log_file)

    if ctx.invoked_subcommand is None:
        ctx.invoke(menu)


@cli.command()
@click.pass_context
def menu(ctx):
    """Run the interactive banking menu."""
    ctx.obj['cli'].run()


@cli.command()
@click.pass_context
def logs(ctx):
    """Show the transaction history."""
    ctx.obj['cli'].view_logs()


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == '__main__':
    main()
