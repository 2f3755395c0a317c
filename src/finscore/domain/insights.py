"""Insights domain service.

Loads the full transaction and savings snapshot from the database and runs
the aggregation, scoring, budgeting and recommendation engines over it.
Nothing is cached; every call recomputes from the stored data.
"""

import logging
from typing import Any, Optional

from finscore.database.base import Database
from finscore.domain.aggregate import (
    aggregate,
    expense_by_category,
    savings_rate,
    top_categories,
)
from finscore.domain.entities import (
    Aggregates,
    BucketResult,
    BudgetMethod,
    FinancialScore,
    FinancialSnapshot,
    Recommendation,
    SavingsEntryKind,
    Transaction,
)
from finscore.domain.errors import NotFoundError
from finscore.domain.methods import calculate_bucket_spending, get_method_by_id
from finscore.domain.recommendations import (
    generate_method_recommendations,
    generate_recommendations,
    merge_recommendations,
)
from finscore.domain.score import calculate_score, half_up

logger = logging.getLogger(__name__)


class InsightsService:
    """Service producing scores, advice and budget breakdowns."""

    def __init__(self, db: Database):
        """Initialize insights service.

        Args:
            db: Database instance
        """
        self.db = db

    def _load(self) -> tuple[list[Transaction], Aggregates]:
        transactions = self.db.list_transactions()
        entries = self.db.list_savings_entries()
        contributions = [e for e in entries if e.kind == SavingsEntryKind.CONTRIBUTION]
        withdrawals = [e for e in entries if e.kind == SavingsEntryKind.WITHDRAWAL]
        return transactions, aggregate(transactions, contributions, withdrawals)

    def _goal(self) -> Optional[float]:
        settings = self.db.get_settings()
        return float(settings.goal) if settings.has_goal else None

    def aggregates(self) -> Aggregates:
        """Totals over all stored transactions and savings entries."""
        return self._load()[1]

    def _snapshot(
        self, transactions: list[Transaction], totals: Aggregates
    ) -> FinancialSnapshot:
        return FinancialSnapshot(
            incomes=totals.incomes,
            expenses=totals.expenses,
            savings_rate=savings_rate(totals.total_contributions, totals.incomes),
            total_contributions=totals.total_contributions,
            goal=self._goal(),
            expense_by_category=expense_by_category(transactions),
            # The stored history is treated as the current period
            monthly_expenses=totals.expenses,
            transaction_count=len(transactions),
        )

    def snapshot(self) -> FinancialSnapshot:
        """Build the input of the method-aware recommendation generator."""
        return self._snapshot(*self._load())

    def score(self) -> FinancialScore:
        """Financial health score with level and achievements."""
        data = self.snapshot()
        return calculate_score(
            incomes=data.incomes,
            expenses=data.expenses,
            savings_rate=data.savings_rate,
            total_contributions=data.total_contributions,
            goal=data.goal,
            transaction_count=data.transaction_count,
            has_goal=data.goal is not None,
            monthly_expenses=data.monthly_expenses,
        )

    def recommendations(self) -> list[Recommendation]:
        """General and method-aware recommendations, merged and ranked.

        Returns:
            Recommendations ordered by priority with duplicate ids removed
        """
        transactions, totals = self._load()
        goal = self._goal()
        general = generate_recommendations(
            transactions,
            goal,
            totals.total_contributions,
            totals.total_withdrawals,
            totals.incomes,
            totals.expenses,
        )
        method_aware = generate_method_recommendations(self._snapshot(transactions, totals))
        return merge_recommendations(general, method_aware)

    def selected_method(self) -> Optional[BudgetMethod]:
        """The budget method chosen by the user, or None."""
        return get_method_by_id(self.db.get_settings().financial_method)

    def select_method(self, method_id: str) -> BudgetMethod:
        """Select a budget method.

        Args:
            method_id: Method id such as "50-30-20" (labels like "50/30/20"
                are accepted)

        Returns:
            The selected BudgetMethod

        Raises:
            NotFoundError: If no method matches the id
        """
        method = get_method_by_id(method_id)
        if method is None:
            raise NotFoundError(f"Budget method '{method_id}' not found")
        self.db.set_financial_method(method.id)
        logger.info("Selected budget method %s", method.id)
        return method

    def clear_method(self) -> None:
        """Forget the selected budget method."""
        self.db.set_financial_method(None)
        logger.info("Cleared budget method")

    def bucket_spending(
        self, method: Optional[BudgetMethod] = None
    ) -> Optional[list[BucketResult]]:
        """Spending per bucket of a budget method.

        Args:
            method: Method to evaluate, defaults to the selected one

        Returns:
            One BucketResult per bucket, or None when no method is selected
        """
        method = method or self.selected_method()
        if method is None:
            return None
        transactions, totals = self._load()
        return calculate_bucket_spending(
            method, expense_by_category(transactions), totals.incomes
        )

    def advisor_payload(self) -> dict[str, Any]:
        """Financial summary handed to an external advisor.

        Percentages are preformatted strings: the savings rate with one
        decimal and the expense ratio with none, both "0" without income.
        """
        transactions, totals = self._load()
        incomes = totals.incomes
        expenses = totals.expenses

        if incomes > 0:
            rate = str(half_up(totals.total_contributions / incomes * 100, 1))
            expense_ratio = str(half_up(expenses / incomes * 100))
        else:
            rate = "0"
            expense_ratio = "0"

        if incomes > expenses:
            trend = "superávit"
        elif incomes < expenses:
            trend = "déficit"
        else:
            trend = "equilibrio"

        top = top_categories(expense_by_category(transactions), limit=5)
        return {
            "incomes": incomes,
            "expenses": expenses,
            "savingsRate": rate,
            "topCategories": ", ".join(f"{name}: ${amount:,.0f}" for name, amount in top),
            "goal": self._goal(),
            "netSavings": totals.net_savings,
            "expenseRatio": expense_ratio,
            "monthlyTrend": trend,
        }
