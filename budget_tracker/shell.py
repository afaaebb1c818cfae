"""
Console Shell for Personal Budget Tracker

The interactive menu the user works with. It owns no data: it reads
answers, hands parsed transactions to the ledger and prints what the
ledger returns.

DESIGN PRINCIPLES:
1. Nothing reaches the ledger unless it parsed cleanly
2. Bad input is reported, never fatal
3. The ledger is passed in, never global
"""

from typing import Callable, Optional

from prompt_toolkit import PromptSession

from budget_tracker.audit import AuditLogger, configure_logging
from budget_tracker.config import LedgerSettings, get_settings
from budget_tracker.ledger import BudgetLedger, SortCriterion
from budget_tracker.models.transaction import format_amount
from budget_tracker.validation import TransactionParser


MENU = """
--- Personal Budget Tracker ---
1. Add Transaction
2. View All Transactions
3. Show Summary
4. Show Spending Analytics
5. Sort Transactions
6. Exit"""


DATE_HINTS = {
    "%Y-%m-%d": "yyyy-mm-dd",
    "%d/%m/%Y": "dd/mm/yyyy",
    "%m/%d/%Y": "mm/dd/yyyy",
}


class BudgetShell:
    """
    Six-action menu loop over a BudgetLedger.

    prompt and output default to a prompt_toolkit session and print;
    tests inject their own.
    """

    def __init__(
        self,
        ledger: BudgetLedger,
        parser: Optional[TransactionParser] = None,
        audit_logger: Optional[AuditLogger] = None,
        prompt: Optional[Callable[[str], str]] = None,
        output: Callable[[str], None] = print,
        settings: Optional[LedgerSettings] = None,
    ):
        self._ledger = ledger
        self._settings = settings or get_settings()
        self._parser = parser or TransactionParser(self._settings)
        self._audit_logger = audit_logger
        self._prompt = prompt or PromptSession().prompt
        self._output = output

        self._actions = {
            "1": self.add_transaction,
            "2": self.show_all_transactions,
            "3": self.show_summary,
            "4": self.show_spending_analytics,
            "5": self.sort_transactions,
        }

    def _money(self, amount) -> str:
        return format_amount(amount, self._settings.currency_symbol)

    def _format(self, transaction) -> str:
        return transaction.format(
            currency_symbol=self._settings.currency_symbol,
            date_format=self._settings.date_display_format,
        )

    def run(self) -> None:
        """Show the menu until the user exits (option 6, Ctrl-D or Ctrl-C)."""
        if self._audit_logger:
            self._audit_logger.log_session_started()

        while True:
            self._output(MENU)
            try:
                choice = self._prompt("Choose an option: ")
            except (EOFError, KeyboardInterrupt):
                break
            try:
                if not self.handle_choice(choice):
                    break
            except (EOFError, KeyboardInterrupt):
                break

        if self._audit_logger:
            self._audit_logger.log_session_ended(len(self._ledger))

    def handle_choice(self, choice: str) -> bool:
        """
        Run one menu action.

        Returns False when the user chose to exit.
        """
        selection = (choice or "").strip()
        if selection == "6":
            return False

        action = self._actions.get(selection)
        if action is None:
            self._output("Invalid choice. Try again.")
            if self._audit_logger:
                self._audit_logger.log_menu_selection_invalid(selection)
            return True

        action()
        return True

    def add_transaction(self) -> None:
        symbol = self._settings.currency_symbol
        example = DATE_HINTS.get(self._settings.date_input_format, self._settings.date_input_format)

        description = self._prompt("Enter Description: ")
        amount = self._prompt(f"Enter Amount: {symbol}")
        kind = self._prompt("Enter Type (Income/Expense): ")
        category = self._prompt("Enter Category: ")
        date = self._prompt(f"Enter Date ({example}): ")

        result = self._parser.parse(description, amount, kind, category, date)
        if not result.success:
            self._output("Invalid input. Transaction not added.")
            self._output(self._parser.get_user_friendly_summary(result))
            if self._audit_logger:
                self._audit_logger.log_transaction_rejected(
                    [issue.model_dump() for issue in result.issues]
                )
            return

        self._ledger.add(result.transaction)
        self._output("Transaction added successfully!")
        if result.warnings:
            self._output(self._parser.get_user_friendly_summary(result))

    def show_all_transactions(self) -> None:
        self._output("\nAll Transactions:")
        for transaction in self._ledger.all_transactions_by_date():
            self._output(self._format(transaction))

    def show_summary(self) -> None:
        summary = self._ledger.summary()
        self._output(f"\nTotal Income: {self._money(summary.total_income)}")
        self._output(f"Total Expenses: {self._money(summary.total_expenses)}")
        self._output(f"Net Savings: {self._money(summary.net_savings)}")
        if self._audit_logger:
            self._audit_logger.log_summary_viewed(str(summary.net_savings))

    def show_spending_analytics(self) -> None:
        analytics = self._ledger.spending_analytics()
        self._output("\nCategory-wise Spending:")
        for category, amount in analytics.category_spending.items():
            self._output(f"{category}: {self._money(amount)}")

        if analytics.most_spent is not None:
            most = analytics.most_spent
            self._output(f"\nMost Spent Category: {most.category} - {self._money(most.amount)}")

        if self._audit_logger:
            self._audit_logger.log_analytics_viewed(len(analytics.category_spending))

    def sort_transactions(self) -> None:
        requested = self._prompt(f"Sort by ({SortCriterion.choices()}): ")
        outcome = self._ledger.sort(requested)
        if not outcome.applied:
            self._output(outcome.message)

        self._output("\nAll Transactions:")
        for transaction in self._ledger:
            self._output(self._format(transaction))


def main() -> None:
    """Entry point for the budget-tracker console script."""
    settings = get_settings()
    configure_logging(settings.log_level_number, json_output=settings.log_json)

    audit_logger = AuditLogger()
    ledger = BudgetLedger(audit_logger=audit_logger)
    shell = BudgetShell(
        ledger,
        parser=TransactionParser(settings),
        audit_logger=audit_logger,
        settings=settings,
    )
    shell.run()
