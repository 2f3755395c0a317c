"""Summary domain service: overall totals, weekly and monthly views."""

from collections import defaultdict
from datetime import date, datetime, timedelta
from typing import Optional

from dateutil.relativedelta import relativedelta

from finscore.database.base import Database
from finscore.domain.aggregate import aggregate, expense_by_category, top_categories
from finscore.domain.entities import (
    Aggregates,
    MonthlyTotals,
    SavingsEntryKind,
    WeeklySummary,
)


def month_key(value: date) -> str:
    """Calendar month key, e.g. '2024-03'."""
    return value.strftime("%Y-%m")


class SummaryService:
    """Service for building summary views over transactions."""

    def __init__(self, db: Database):
        """Initialize summary service.

        Args:
            db: Database instance
        """
        self.db = db

    def totals(self) -> Aggregates:
        """Totals over every stored transaction and savings entry."""
        entries = self.db.list_savings_entries()
        return aggregate(
            self.db.list_transactions(),
            [e for e in entries if e.kind == SavingsEntryKind.CONTRIBUTION],
            [e for e in entries if e.kind == SavingsEntryKind.WITHDRAWAL],
        )

    def weekly_summary(self, today: Optional[date] = None) -> WeeklySummary:
        """Summarize the current week, Monday through today.

        Args:
            today: Reference date, defaults to the current date

        Returns:
            WeeklySummary with the biggest expense category of the week, or
            None as top category when there were no expenses
        """
        today = today or date.today()
        monday = today - timedelta(days=today.weekday())
        transactions = self.db.list_transactions(
            start_date=datetime(monday.year, monday.month, monday.day),
            end_date=datetime(today.year, today.month, today.day, 23, 59, 59, 999999),
        )

        incomes = sum(float(t.amount) for t in transactions if t.is_income)
        expenses = sum(float(t.amount) for t in transactions if t.is_expense)
        top = top_categories(expense_by_category(transactions), limit=1)

        return WeeklySummary(
            start=monday,
            end=today,
            incomes=float(incomes),
            expenses=float(expenses),
            transaction_count=len(transactions),
            top_category=top[0][0] if top else None,
        )

    def monthly_totals(
        self, today: Optional[date] = None, months: int = 6
    ) -> list[MonthlyTotals]:
        """Income and expense totals for the last months, oldest first.

        Args:
            today: Reference date, defaults to the current date
            months: Number of calendar months, including the current one

        Returns:
            One MonthlyTotals per month; months without activity report 0
        """
        today = today or date.today()
        first = today.replace(day=1) - relativedelta(months=months - 1)
        keys = [month_key(first + relativedelta(months=i)) for i in range(months)]

        totals: dict[str, dict[str, float]] = defaultdict(
            lambda: {"incomes": 0.0, "expenses": 0.0}
        )
        for txn in self.db.list_transactions(
            start_date=datetime(first.year, first.month, first.day)
        ):
            field = "incomes" if txn.is_income else "expenses"
            totals[month_key(txn.date)][field] += float(txn.amount)

        return [
            MonthlyTotals(
                month=key,
                incomes=totals[key]["incomes"],
                expenses=totals[key]["expenses"],
            )
            for key in keys
        ]
