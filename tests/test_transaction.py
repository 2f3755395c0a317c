"""Tests for transaction service."""

import pytest
from datetime import date, datetime
from decimal import Decimal

from finscore.domain.entities import TransactionType
from finscore.domain.errors import NotFoundError, ValidationError


def test_create_transaction(transaction_service):
    """Test creating a transaction."""
    txn_id = transaction_service.create_transaction(
        transaction_type=TransactionType.EXPENSE,
        amount=Decimal("45000"),
        category="Comida",
        date=date(2024, 3, 5),
        description="Mercado",
    )
    txn = transaction_service.get_transaction(txn_id)
    assert txn is not None
    assert txn.amount == Decimal("45000")
    assert txn.category == "Comida"
    assert txn.date == datetime(2024, 3, 5)
    assert txn.description == "Mercado"
    assert txn.is_expense


@pytest.mark.parametrize("amount", [Decimal("0"), Decimal("-10")])
def test_non_positive_amount_rejected(transaction_service, amount):
    """Test that amounts must be positive."""
    with pytest.raises(ValidationError):
        transaction_service.create_transaction(
            TransactionType.EXPENSE, amount, "Comida", date(2024, 3, 5)
        )


def test_category_must_match_type(transaction_service):
    """Test that the category must exist for the transaction type."""
    with pytest.raises(NotFoundError):
        transaction_service.create_transaction(
            TransactionType.INCOME, Decimal("10"), "Comida", date(2024, 3, 5)
        )


def test_list_transactions_filters(transaction_service):
    """Test listing with date and type filters, newest first."""
    transaction_service.create_transaction(TransactionType.INCOME, Decimal("1000"), "Salario", date(2024, 3, 1))
    transaction_service.create_transaction(TransactionType.EXPENSE, Decimal("20"), "Comida", date(2024, 3, 10))
    transaction_service.create_transaction(TransactionType.EXPENSE, Decimal("30"), "Ropa", date(2024, 4, 2))

    all_txns = transaction_service.list_transactions()
    assert [t.category for t in all_txns] == ["Ropa", "Comida", "Salario"]

    march = transaction_service.list_transactions(start_date=date(2024, 3, 1), end_date=date(2024, 3, 31))
    assert len(march) == 2

    end_inclusive = transaction_service.list_transactions(end_date=date(2024, 3, 10))
    assert {t.category for t in end_inclusive} == {"Comida", "Salario"}

    expenses = transaction_service.list_transactions(transaction_type=TransactionType.EXPENSE)
    assert all(t.is_expense for t in expenses)
    assert len(expenses) == 2


def test_update_transaction(transaction_service):
    """Test updating selected fields."""
    txn_id = transaction_service.create_transaction(
        TransactionType.EXPENSE, Decimal("20"), "Comida", date(2024, 3, 10)
    )
    transaction_service.update_transaction(txn_id, amount=Decimal("25.50"), category="Hogar")

    txn = transaction_service.get_transaction(txn_id)
    assert txn.amount == Decimal("25.50")
    assert txn.category == "Hogar"
    assert txn.date == datetime(2024, 3, 10)


def test_update_type_checks_category(transaction_service):
    """Test that changing type revalidates the category."""
    txn_id = transaction_service.create_transaction(
        TransactionType.EXPENSE, Decimal("20"), "Comida", date(2024, 3, 10)
    )
    with pytest.raises(NotFoundError):
        transaction_service.update_transaction(txn_id, transaction_type=TransactionType.INCOME)
    transaction_service.update_transaction(
        txn_id, transaction_type=TransactionType.INCOME, category="Ventas"
    )
    assert transaction_service.get_transaction(txn_id).is_income


def test_update_missing_transaction(transaction_service):
    """Test updating a transaction that does not exist."""
    with pytest.raises(NotFoundError):
        transaction_service.update_transaction(999, amount=Decimal("1"))


def test_delete_transaction(transaction_service):
    """Test deleting a transaction."""
    txn_id = transaction_service.create_transaction(
        TransactionType.EXPENSE, Decimal("20"), "Comida", date(2024, 3, 10)
    )
    transaction_service.delete_transaction(txn_id)
    assert transaction_service.get_transaction(txn_id) is None
    with pytest.raises(NotFoundError):
        transaction_service.delete_transaction(txn_id)
