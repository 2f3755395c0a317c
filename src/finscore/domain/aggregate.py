"""Aggregation of transaction and savings snapshots into summary totals."""

from collections import defaultdict
from typing import Iterable, Sequence

from finscore.domain.entities import Aggregates, SavingsEntry, Transaction


def aggregate(
    transactions: Iterable[Transaction],
    contributions: Iterable[SavingsEntry],
    withdrawals: Iterable[SavingsEntry],
) -> Aggregates:
    """Reduce a snapshot into incomes, expenses and savings totals.

    Args:
        transactions: All income and expense transactions
        contributions: All savings contributions
        withdrawals: All savings withdrawals

    Returns:
        Aggregates with every total recomputed from the inputs. Empty inputs
        give all zeros; ``net_savings`` and ``available`` may be negative.
    """
    incomes = 0.0
    expenses = 0.0
    for txn in transactions:
        if txn.is_income:
            incomes += float(txn.amount)
        else:
            expenses += float(txn.amount)

    total_contributions = sum(float(entry.amount) for entry in contributions)
    total_withdrawals = sum(float(entry.amount) for entry in withdrawals)

    return Aggregates(
        incomes=incomes,
        expenses=expenses,
        total_contributions=float(total_contributions),
        total_withdrawals=float(total_withdrawals),
        net_savings=float(total_contributions - total_withdrawals),
        available=incomes - expenses,
    )


def expense_by_category(transactions: Iterable[Transaction]) -> dict[str, float]:
    """Total expense amount per category name."""
    totals: dict[str, float] = defaultdict(float)
    for txn in transactions:
        if txn.is_expense:
            totals[txn.category] += float(txn.amount)
    return dict(totals)


def savings_rate(total_contributions: float, incomes: float) -> float:
    """Contributions as a percentage of incomes, 0 when there is no income."""
    if incomes <= 0:
        return 0.0
    return float(total_contributions) / float(incomes) * 100


def top_categories(
    totals: dict[str, float], limit: int = 5, exclude: Sequence[str] = ()
) -> list[tuple[str, float]]:
    """Categories sorted by amount, highest first (ties keep input order)."""
    ranked = [(name, amount) for name, amount in totals.items() if name not in exclude]
    ranked.sort(key=lambda item: item[1], reverse=True)
    return ranked[:limit]
