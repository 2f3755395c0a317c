"""Tests for ORM to domain mappers."""

from datetime import datetime, UTC
from decimal import Decimal

from finscore.database.mappers import (
    category_to_domain,
    savings_entry_to_domain,
    scheduled_action_to_domain,
    settings_to_domain,
    transaction_to_domain,
)
from finscore.database.models import (
    Category,
    SavingsEntry,
    ScheduledAction,
    Settings,
    Transaction,
)
from finscore.domain.entities import (
    SavingsEntryKind,
    ScheduledActionType,
    TransactionType,
    UserSettings,
)


def test_transaction_to_domain():
    orm = Transaction(
        id=7,
        type="income",
        amount=Decimal("12.50"),
        category="Salario",
        description="Pago",
        date=datetime(2024, 3, 1),
        linked_savings_id=None,
    )
    txn = transaction_to_domain(orm)
    assert txn.id == 7
    assert txn.type == TransactionType.INCOME
    assert txn.amount == Decimal("12.50")
    assert txn.description == "Pago"


def test_savings_entry_to_domain():
    orm = SavingsEntry(id=3, kind="withdrawal", amount=Decimal("5"), date=datetime(2024, 3, 1))
    entry = savings_entry_to_domain(orm)
    assert entry.kind == SavingsEntryKind.WITHDRAWAL
    assert entry.amount == Decimal("5")


def test_category_to_domain():
    orm = Category(id=1, name="Comida", category_type="expense", icon="🍽️")
    category = category_to_domain(orm)
    assert category.name == "Comida"
    assert category.type == TransactionType.EXPENSE


def test_scheduled_action_days_parsed():
    orm = ScheduledAction(
        id=2,
        type="savings",
        name="Ahorro",
        amount=Decimal("100"),
        days="1,15",
        category="Ahorro",
        active=True,
        created_at=datetime.now(UTC),
    )
    action = scheduled_action_to_domain(orm)
    assert action.type == ScheduledActionType.SAVINGS
    assert action.days == (1, 15)


def test_settings_to_domain():
    assert settings_to_domain(None) == UserSettings()
    settings = settings_to_domain(Settings(id=1, goal=Decimal("100"), financial_method="kakeibo"))
    assert settings.has_goal
    assert settings.financial_method == "kakeibo"
