"""
Budget Ledger

DESIGN DECISION: Every query is DETERMINISTIC and TOTAL.
Totals, groupings and listings are recomputed from the transaction list
on every call, and an empty ledger is a valid input to all of them
(zero totals, empty breakdown, no most-spent category).

Only add() and sort() change state. Nothing else mutates the list.
"""

from decimal import Decimal
from typing import Iterator, Optional, Union

import structlog

from budget_tracker.audit import AuditLogger
from budget_tracker.ledger.errors import InvalidSortCriterionError
from budget_tracker.ledger.sorting import SortCriterion, SortOutcome, sort_transactions
from budget_tracker.models.ledger import CategoryTotal, LedgerSummary, SpendingAnalytics
from budget_tracker.models.transaction import Transaction, TransactionKind


logger = structlog.get_logger(__name__)


class BudgetLedger:
    """
    Ordered, in-memory collection of transactions.

    Insertion order is kept until sort() is called. Transactions whose
    kind is neither income nor expense stay in the ledger (and in every
    listing) but count towards no total.
    """

    def __init__(self, audit_logger: Optional[AuditLogger] = None):
        self._transactions: list[Transaction] = []
        self._audit_logger = audit_logger

    def __len__(self) -> int:
        return len(self._transactions)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(tuple(self._transactions))

    @property
    def transactions(self) -> tuple[Transaction, ...]:
        """Transactions in the current ledger order (read-only)."""
        return tuple(self._transactions)

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def add(self, transaction: Transaction) -> None:
        """Append a transaction to the end of the ledger."""
        self._transactions.append(transaction)
        logger.debug(
            "transaction_appended",
            kind=transaction.kind,
            ledger_size=len(self._transactions),
        )
        if self._audit_logger:
            self._audit_logger.log_transaction_added(
                description=transaction.description,
                kind=transaction.kind,
                amount=str(transaction.amount),
                ledger_size=len(self._transactions),
            )

    def sort(self, criterion: Union[str, SortCriterion]) -> SortOutcome:
        """
        Reorder the ledger in place.

        date and category sort ascending, amount sorts descending; all are
        stable. An unknown criterion leaves the order untouched and is
        reported in the returned outcome rather than raised.
        """
        requested = criterion.value if isinstance(criterion, SortCriterion) else str(criterion)

        try:
            resolved = SortCriterion.from_text(
                criterion if isinstance(criterion, SortCriterion) else requested
            )
        except InvalidSortCriterionError:
            logger.warning("sort_rejected", requested=requested)
            if self._audit_logger:
                self._audit_logger.log_sort_rejected(requested)
            return SortOutcome(
                applied=False,
                requested=requested,
                message="Invalid sort option.",
            )

        self._transactions = sort_transactions(self._transactions, resolved)
        if self._audit_logger:
            self._audit_logger.log_ledger_sorted(resolved.value, len(self._transactions))

        return SortOutcome(
            applied=True,
            criterion=resolved,
            requested=requested,
            message=f"Sorted by {resolved.value}.",
        )

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def _total_for(self, kind: TransactionKind) -> Decimal:
        return sum(
            (t.amount for t in self._transactions if t.kind_enum is kind),
            Decimal("0"),
        )

    def total_income(self) -> Decimal:
        """Sum of all income transactions (0 if there are none)."""
        return self._total_for(TransactionKind.INCOME)

    def total_expenses(self) -> Decimal:
        """Sum of all expense transactions (0 if there are none)."""
        return self._total_for(TransactionKind.EXPENSE)

    def net_savings(self) -> Decimal:
        return self.total_income() - self.total_expenses()

    def category_spending(self) -> dict[str, Decimal]:
        """
        Expense totals grouped by category.

        Categories match exactly (case-sensitive) and appear in the order
        they were first seen among expenses. Categories with no expenses
        are absent.
        """
        groups: dict[str, Decimal] = {}

        for transaction in self._transactions:
            if not transaction.is_expense:
                continue
            key = transaction.category
            if key not in groups:
                groups[key] = Decimal("0")
            groups[key] += transaction.amount

        return groups

    def most_spent_category(self) -> Optional[CategoryTotal]:
        """
        Category with the highest expense total.

        On a tie the category seen first wins. Returns None when the
        ledger has no expenses.
        """
        return _largest_category(self.category_spending())

    def all_transactions_by_date(self) -> list[Transaction]:
        """All transactions, oldest first; equal dates keep ledger order."""
        return sort_transactions(self._transactions, SortCriterion.DATE)

    def summary(self) -> LedgerSummary:
        total_income = self.total_income()
        total_expenses = self.total_expenses()
        return LedgerSummary(
            total_income=total_income,
            total_expenses=total_expenses,
            net_savings=total_income - total_expenses,
            transaction_count=len(self._transactions),
        )

    def spending_analytics(self) -> SpendingAnalytics:
        spending = self.category_spending()
        return SpendingAnalytics(
            category_spending=spending,
            most_spent=_largest_category(spending),
        )


def _largest_category(spending: dict[str, Decimal]) -> Optional[CategoryTotal]:
    # Strict comparison: the first category reaching the maximum keeps it
    best: Optional[CategoryTotal] = None
    for category, amount in spending.items():
        if best is None or amount > best.amount:
            best = CategoryTotal(category=category, amount=amount)
    return best
