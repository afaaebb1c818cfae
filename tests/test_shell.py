"""
Tests for the console shell.

The shell is driven with scripted answers and its output captured in a
list, so no terminal is needed.
"""

import pytest
from datetime import date
from decimal import Decimal

from budget_tracker.audit import AuditLogger
from budget_tracker.config import LedgerSettings
from budget_tracker.ledger import BudgetLedger
from budget_tracker.models.audit import AuditEventType
from budget_tracker.models.transaction import Transaction
from budget_tracker.shell import MENU, BudgetShell


class ScriptedPrompt:
    """Answers prompts from a list; raises EOFError when it runs out."""

    def __init__(self, answers):
        self._answers = list(answers)
        self.prompts = []

    def __call__(self, message: str) -> str:
        self.prompts.append(message)
        if not self._answers:
            raise EOFError
        return self._answers.pop(0)


@pytest.fixture
def settings() -> LedgerSettings:
    return LedgerSettings(
        currency_symbol="₱",
        date_input_format="%Y-%m-%d",
        date_display_format="%m/%d/%Y",
    )


def make_shell(answers, settings, ledger=None, audit_logger=None):
    output = []
    ledger = ledger if ledger is not None else BudgetLedger(audit_logger=audit_logger)
    shell = BudgetShell(
        ledger,
        audit_logger=audit_logger,
        prompt=answers if isinstance(answers, ScriptedPrompt) else ScriptedPrompt(answers),
        output=output.append,
        settings=settings,
    )
    return shell, ledger, output


LUNCH = ["1", "Lunch", "150.00", "Expense", "Food", "2024-01-05"]
SALARY = ["1", "Salary", "5000.00", "Income", "Work", "2024-01-01"]
COFFEE = ["1", "Coffee", "80.00", "Expense", "Food", "2024-01-06"]


class TestMenu:
    """Tests for menu handling."""

    def test_exit_option_stops_loop(self, settings):
        shell, ledger, output = make_shell(["6", "1"], settings)
        shell.run()
        assert output == [MENU]

    def test_end_of_input_stops_loop(self, settings):
        shell, _, output = make_shell([], settings)
        shell.run()
        assert "--- Personal Budget Tracker ---" in output[0]

    def test_invalid_choice(self, settings):
        """Test an unknown option is reported and the loop continues."""
        audit_logger = AuditLogger()
        shell, ledger, output = make_shell(["9", "abc", "6"], settings, audit_logger=audit_logger)
        shell.run()
        assert output.count("Invalid choice. Try again.") == 2
        assert len(ledger) == 0
        event_types = [event.event_type for event in audit_logger.events]
        assert event_types.count(AuditEventType.MENU_SELECTION_INVALID) == 2
        assert event_types[0] == AuditEventType.SESSION_STARTED
        assert event_types[-1] == AuditEventType.SESSION_ENDED

    def test_handle_choice_returns_false_on_exit(self, settings):
        shell, _, _ = make_shell([], settings)
        assert shell.handle_choice(" 6 ") is False


class TestAddTransaction:
    """Tests for option 1."""

    def test_add_transaction(self, settings):
        shell, ledger, output = make_shell(LUNCH + ["6"], settings)
        shell.run()
        assert "Transaction added successfully!" in output
        assert len(ledger) == 1
        assert ledger.transactions[0].amount == Decimal("150.00")

    def test_prompts(self, settings):
        prompt = ScriptedPrompt(LUNCH[1:])
        shell, _, _ = make_shell(prompt, settings)
        shell.add_transaction()
        assert prompt.prompts == [
            "Enter Description: ",
            "Enter Amount: ₱",
            "Enter Type (Income/Expense): ",
            "Enter Category: ",
            "Enter Date (yyyy-mm-dd): ",
        ]

    def test_bad_amount_discards_transaction(self, settings):
        """Test a parse failure leaves the ledger unchanged."""
        audit_logger = AuditLogger()
        answers = ["1", "Lunch", "lots", "Expense", "Food", "2024-01-05", "6"]
        shell, ledger, output = make_shell(answers, settings, audit_logger=audit_logger)
        shell.run()
        assert "Invalid input. Transaction not added." in output
        assert len(ledger) == 0
        assert any(
            event.event_type == AuditEventType.TRANSACTION_REJECTED
            for event in audit_logger.events
        )

    def test_bad_date_discards_transaction(self, settings):
        answers = ["1", "Lunch", "10", "Expense", "Food", "Jan 5th", "6"]
        shell, ledger, output = make_shell(answers, settings)
        shell.run()
        assert "Invalid input. Transaction not added." in output
        assert len(ledger) == 0


class TestViews:
    """Tests for options 2, 3 and 4."""

    def test_view_all_transactions_in_date_order(self, settings):
        shell, _, output = make_shell(LUNCH + SALARY + COFFEE + ["2", "6"], settings)
        shell.run()
        start = output.index("\nAll Transactions:")
        assert output[start + 1:start + 4] == [
            "01/01/2024 - Income - Work - Salary: ₱5,000.00",
            "01/05/2024 - Expense - Food - Lunch: ₱150.00",
            "01/06/2024 - Expense - Food - Coffee: ₱80.00",
        ]

    def test_show_summary(self, settings):
        shell, _, output = make_shell(LUNCH + SALARY + COFFEE + ["3", "6"], settings)
        shell.run()
        assert "\nTotal Income: ₱5,000.00" in output
        assert "Total Expenses: ₱230.00" in output
        assert "Net Savings: ₱4,770.00" in output

    def test_show_spending_analytics(self, settings):
        shell, _, output = make_shell(LUNCH + SALARY + COFFEE + ["4", "6"], settings)
        shell.run()
        assert "\nCategory-wise Spending:" in output
        assert "Food: ₱230.00" in output
        assert "\nMost Spent Category: Food - ₱230.00" in output

    def test_analytics_without_expenses(self, settings):
        """Test the most-spent line is omitted when nothing was spent."""
        shell, _, output = make_shell(["4", "6"], settings)
        shell.run()
        assert "\nCategory-wise Spending:" in output
        assert not any(line.startswith("\nMost Spent Category") for line in output)


class TestSortTransactions:
    """Tests for option 5."""

    @pytest.fixture
    def ledger(self) -> BudgetLedger:
        ledger = BudgetLedger()
        ledger.add(Transaction(
            description="Lunch", amount=Decimal("150"), kind="Expense",
            category="Food", date=date(2024, 1, 5),
        ))
        ledger.add(Transaction(
            description="Salary", amount=Decimal("5000"), kind="Income",
            category="Work", date=date(2024, 1, 10),
        ))
        return ledger

    def test_sort_and_relist(self, settings, ledger):
        prompt = ScriptedPrompt(["5", "amount", "6"])
        shell, _, output = make_shell(prompt, settings, ledger=ledger)
        shell.run()
        assert prompt.prompts[1] == "Sort by (date/amount/category): "
        start = output.index("\nAll Transactions:")
        assert output[start + 1:start + 3] == [
            "01/10/2024 - Income - Work - Salary: ₱5,000.00",
            "01/05/2024 - Expense - Food - Lunch: ₱150.00",
        ]
        assert [t.description for t in ledger] == ["Salary", "Lunch"]

    def test_invalid_sort_option(self, settings, ledger):
        """Test a bogus criterion is reported and the order kept."""
        shell, _, output = make_shell(["5", "bogus", "6"], settings, ledger=ledger)
        shell.run()
        assert "Invalid sort option." in output
        assert [t.description for t in ledger] == ["Lunch", "Salary"]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
