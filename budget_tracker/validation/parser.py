"""
Transaction Input Parsing

DESIGN DECISION: Parsing NEVER raises into the caller.
The five prompt answers (description, amount, kind, category, date) are
checked field by field and every problem is collected, so the user sees
all of them at once. The caller gets either a Transaction or the list
of issues, and only a Transaction ever reaches the ledger.

Checks:
- Amount must be a finite, non-negative decimal
- Date must match the configured input format
- Kind must be Income or Expense (case-insensitive)
- Empty description/category are allowed but flagged

IMPORTANT: Parsing does not silently fix input beyond trimming
whitespace, a leading currency symbol and thousands separators.
"""

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Optional

from budget_tracker.config import LedgerSettings, get_settings
from budget_tracker.models.transaction import (
    ParseIssue,
    Transaction,
    TransactionKind,
    TransactionParseResult,
)


class TransactionParser:
    """Turns raw prompt answers into a TransactionParseResult."""

    def __init__(self, settings: Optional[LedgerSettings] = None):
        self._settings = settings or get_settings()

    def _parse_amount(self, raw: str) -> tuple[Optional[Decimal], list[ParseIssue]]:
        text = (raw or "").strip()
        symbol = self._settings.currency_symbol
        if symbol and text.startswith(symbol):
            text = text[len(symbol):].strip()
        text = text.replace(",", "")

        if not text:
            return None, [ParseIssue(
                field="amount",
                issue_type="missing",
                message="Amount is required",
                severity="error",
                suggested_fix="Enter a number such as 150.00",
            )]

        try:
            amount = Decimal(text)
        except InvalidOperation:
            amount = None

        if amount is None or not amount.is_finite():
            return None, [ParseIssue(
                field="amount",
                issue_type="invalid_format",
                message=f"Amount ({raw.strip()}) is not a valid number",
                severity="error",
                suggested_fix="Enter a number such as 150.00",
            )]

        if amount < 0:
            return None, [ParseIssue(
                field="amount",
                issue_type="invalid_value",
                message="Amount cannot be negative",
                severity="error",
                suggested_fix="Enter the amount without a minus sign and choose Expense",
            )]

        return amount, []

    def _parse_date(self, raw: str) -> tuple[Optional[date], list[ParseIssue]]:
        text = (raw or "").strip()
        fmt = self._settings.date_input_format
        example = date(2024, 1, 31).strftime(fmt)

        if not text:
            return None, [ParseIssue(
                field="date",
                issue_type="missing",
                message="Date is required",
                severity="error",
                suggested_fix=f"Enter a date such as {example}",
            )]

        try:
            return datetime.strptime(text, fmt).date(), []
        except ValueError:
            return None, [ParseIssue(
                field="date",
                issue_type="invalid_format",
                message=f"Date ({text}) is not a valid date",
                severity="error",
                suggested_fix=f"Enter a date such as {example}",
            )]

    def _parse_kind(self, raw: str) -> tuple[Optional[TransactionKind], list[ParseIssue]]:
        kind = TransactionKind.from_text(raw)
        if kind is None:
            return None, [ParseIssue(
                field="kind",
                issue_type="invalid_value",
                message=f"Type ({(raw or '').strip()}) must be Income or Expense",
                severity="error",
                suggested_fix="Enter Income or Expense",
            )]
        return kind, []

    def _check_text(self, field: str, raw: str) -> tuple[str, list[ParseIssue]]:
        text = (raw or "").strip()
        if not text:
            return text, [ParseIssue(
                field=field,
                issue_type="missing",
                message=f"{field.capitalize()} is empty",
                severity="warning",
            )]
        return text, []

    def parse(
        self,
        description: str,
        amount: str,
        kind: str,
        category: str,
        date: str,
    ) -> TransactionParseResult:
        """
        Parse the five prompt answers.

        Returns:
            TransactionParseResult with the transaction on success,
            or the issues that prevented it.
        """
        issues: list[ParseIssue] = []

        description_text, found = self._check_text("description", description)
        issues.extend(found)
        parsed_amount, found = self._parse_amount(amount)
        issues.extend(found)
        parsed_kind, found = self._parse_kind(kind)
        issues.extend(found)
        category_text, found = self._check_text("category", category)
        issues.extend(found)
        parsed_date, found = self._parse_date(date)
        issues.extend(found)

        if any(issue.severity == "error" for issue in issues):
            return TransactionParseResult(success=False, issues=issues)

        transaction = Transaction(
            description=description_text,
            amount=parsed_amount,
            kind=parsed_kind.label,
            category=category_text,
            date=parsed_date,
        )

        return TransactionParseResult(success=True, transaction=transaction, issues=issues)

    def get_user_friendly_summary(self, result: TransactionParseResult) -> str:
        """
        Generate a user-friendly summary of parse results.

        This is what the shell prints after a transaction is entered.
        """
        if result.success and not result.issues:
            return "All fields look good."

        lines = []

        if result.has_errors:
            lines.append("Some fields could not be read:")
            for issue in result.issues:
                if issue.severity == "error":
                    lines.append(f"   - {issue.message}")
                    if issue.suggested_fix:
                        lines.append(f"     Hint: {issue.suggested_fix}")

        if result.warnings:
            if lines:
                lines.append("")
            lines.append("Please note:")
            for warning in result.warnings:
                lines.append(f"   - {warning}")

        return "\n".join(lines)
