"""Tests for summary service."""

from datetime import date, datetime
from decimal import Decimal

from finscore.domain.entities import TransactionType


def test_totals(summary_service, transaction_service, savings_service):
    """Test overall totals."""
    transaction_service.create_transaction(TransactionType.INCOME, Decimal("500"), "Salario", date(2024, 3, 1))
    savings_service.contribute(Decimal("100"), date(2024, 3, 2))
    savings_service.withdraw(Decimal("30"), date(2024, 3, 3))

    totals = summary_service.totals()
    assert totals.incomes == 530
    assert totals.expenses == 100
    assert totals.net_savings == 70
    assert totals.available == 430


def test_weekly_summary(summary_service, transaction_service):
    """Test the week runs from Monday to the reference day."""
    # 2024-03-06 is a Wednesday
    transaction_service.create_transaction(TransactionType.EXPENSE, Decimal("99"), "Ropa", date(2024, 3, 3))
    transaction_service.create_transaction(TransactionType.INCOME, Decimal("1000"), "Salario", date(2024, 3, 4))
    transaction_service.create_transaction(TransactionType.EXPENSE, Decimal("40"), "Comida", date(2024, 3, 5))
    transaction_service.create_transaction(TransactionType.EXPENSE, Decimal("60"), "Transporte", datetime(2024, 3, 6, 18, 30))
    transaction_service.create_transaction(TransactionType.EXPENSE, Decimal("500"), "Hogar", date(2024, 3, 7))

    summary = summary_service.weekly_summary(date(2024, 3, 6))

    assert summary.start == date(2024, 3, 4)
    assert summary.end == date(2024, 3, 6)
    assert summary.incomes == 1000
    assert summary.expenses == 100
    assert summary.balance == 900
    assert summary.transaction_count == 3
    assert summary.top_category == "Transporte"


def test_weekly_summary_without_expenses(summary_service):
    """Test an empty week."""
    summary = summary_service.weekly_summary(date(2024, 3, 4))
    assert summary.transaction_count == 0
    assert summary.top_category is None


def test_monthly_totals(summary_service, transaction_service):
    """Test six month comparison, oldest first with empty months."""
    transaction_service.create_transaction(TransactionType.INCOME, Decimal("100"), "Salario", date(2023, 9, 30))
    transaction_service.create_transaction(TransactionType.INCOME, Decimal("1000"), "Salario", date(2023, 10, 1))
    transaction_service.create_transaction(TransactionType.EXPENSE, Decimal("300"), "Comida", date(2024, 1, 15))
    transaction_service.create_transaction(TransactionType.EXPENSE, Decimal("50"), "Comida", date(2024, 3, 2))

    rows = summary_service.monthly_totals(date(2024, 3, 20))

    assert [row.month for row in rows] == [
        "2023-10", "2023-11", "2023-12", "2024-01", "2024-02", "2024-03",
    ]
    assert rows[0].incomes == 1000
    assert rows[3].expenses == 300
    assert rows[4].incomes == rows[4].expenses == 0
    assert rows[5].expenses == 50
