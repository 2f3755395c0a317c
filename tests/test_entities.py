"""Tests for domain entities."""

import math
import pytest
from dataclasses import FrozenInstanceError
from datetime import datetime, date
from decimal import Decimal

from finscore.domain.entities import (
    Aggregates,
    BucketResult,
    BudgetBucket,
    SavingsEntry,
    SavingsEntryKind,
    Transaction,
    TransactionType,
    UserSettings,
    WeeklySummary,
    positive_amount,
)
from finscore.domain.errors import DomainError, ValidationError


class TestTransaction:
    """Tests for Transaction entity."""

    def test_create_transaction(self):
        """Test creating a Transaction entity."""
        txn = Transaction(
            id=1,
            type="expense",
            amount=Decimal("45000"),
            category="Comida",
            date=datetime(2024, 3, 1),
        )
        assert txn.type == TransactionType.EXPENSE
        assert txn.is_expense
        assert not txn.is_income
        assert txn.description is None
        assert txn.linked_savings_id is None

    def test_transaction_immutability(self):
        """Test that Transaction entities are immutable."""
        txn = Transaction(1, TransactionType.INCOME, Decimal("10"), "Salario", datetime(2024, 1, 1))
        with pytest.raises(FrozenInstanceError):
            txn.amount = Decimal("20")

    def test_negative_amount_rejected(self):
        """Test that a negative amount fails validation."""
        with pytest.raises(ValidationError):
            Transaction(1, TransactionType.EXPENSE, Decimal("-1"), "Comida", datetime(2024, 1, 1))

    @pytest.mark.parametrize("amount", ["100", None, True, float("nan")])
    def test_non_numeric_amount_rejected(self, amount):
        """Test that non-numeric amounts fail validation."""
        with pytest.raises(ValidationError):
            Transaction(1, TransactionType.EXPENSE, amount, "Comida", datetime(2024, 1, 1))

    def test_unknown_type_rejected(self):
        """Test that an unknown transaction type is rejected."""
        with pytest.raises(ValueError):
            Transaction(1, "transfer", Decimal("1"), "Comida", datetime(2024, 1, 1))

    def test_validation_error_is_value_error(self):
        """Test that domain errors stay compatible with ValueError."""
        assert issubclass(ValidationError, DomainError)
        assert issubclass(ValidationError, ValueError)


class TestSavingsEntry:
    """Tests for SavingsEntry entity."""

    def test_default_kind_is_contribution(self):
        entry = SavingsEntry(id=1, amount=Decimal("100"), date=datetime(2024, 1, 1))
        assert entry.kind == SavingsEntryKind.CONTRIBUTION

    def test_zero_amount_rejected(self):
        with pytest.raises(ValidationError):
            SavingsEntry(id=1, amount=Decimal("0"), date=datetime(2024, 1, 1))


class TestPositiveAmount:
    """Tests for positive_amount validation."""

    def test_float_is_converted_exactly(self):
        assert positive_amount(0.1) == Decimal("0.1")

    def test_int_is_accepted(self):
        assert positive_amount(5) == Decimal("5")

    @pytest.mark.parametrize("value", [0, -3, Decimal("0"), math.inf, "12"])
    def test_invalid_values_rejected(self, value):
        with pytest.raises(ValidationError):
            positive_amount(value)


class TestBucketResult:
    """Tests for BucketResult over-budget flag."""

    def _bucket(self):
        return BudgetBucket(name="Deseos", percentage=30, match_categories=frozenset(["Ropa"]))

    def test_over_budget_above_hundred(self):
        result = BucketResult(bucket=self._bucket(), spent=110.0, limit=100.0, percentage_used=110.0)
        assert result.is_over_budget
        assert result.overspent == pytest.approx(10.0)

    def test_exactly_hundred_is_not_over(self):
        result = BucketResult(bucket=self._bucket(), spent=100.0, limit=100.0, percentage_used=100.0)
        assert not result.is_over_budget
        assert result.overspent == 0.0


class TestValueRecords:
    """Tests for small value records."""

    def test_aggregates_default_to_zero(self):
        totals = Aggregates()
        assert totals.incomes == 0.0
        assert totals.net_savings == 0.0

    def test_user_settings_goal(self):
        assert not UserSettings().has_goal
        assert not UserSettings(goal=Decimal("0")).has_goal
        assert UserSettings(goal=Decimal("1000")).has_goal

    def test_weekly_summary_balance(self):
        summary = WeeklySummary(
            start=date(2024, 3, 4),
            end=date(2024, 3, 6),
            incomes=100.0,
            expenses=250.0,
            transaction_count=3,
            top_category="Comida",
        )
        assert summary.balance == -150.0
