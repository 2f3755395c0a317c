"""Mapper functions to convert SQLAlchemy models into domain entities.

This layer isolates the conversion logic so the scoring engines never see
ORM objects.
"""

from finscore.domain import entities as domain
from finscore.database.models import (
    Category as ORMCategory,
    Transaction as ORMTransaction,
    SavingsEntry as ORMSavingsEntry,
    ScheduledAction as ORMScheduledAction,
    Settings as ORMSettings,
)


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity."""
    return domain.Transaction(
        id=orm_transaction.id,
        type=domain.TransactionType(orm_transaction.type),
        amount=orm_transaction.amount,
        category=orm_transaction.category,
        date=orm_transaction.date,
        description=orm_transaction.description,
        linked_savings_id=orm_transaction.linked_savings_id,
    )


def savings_entry_to_domain(orm_entry: ORMSavingsEntry) -> domain.SavingsEntry:
    """Convert SQLAlchemy SavingsEntry model to domain SavingsEntry entity."""
    return domain.SavingsEntry(
        id=orm_entry.id,
        amount=orm_entry.amount,
        date=orm_entry.date,
        kind=domain.SavingsEntryKind(orm_entry.kind),
    )


def category_to_domain(orm_category: ORMCategory) -> domain.CategoryMeta:
    """Convert SQLAlchemy Category model to domain CategoryMeta entity."""
    return domain.CategoryMeta(
        name=orm_category.name,
        icon=orm_category.icon,
        type=domain.TransactionType(orm_category.category_type),
    )


def scheduled_action_to_domain(orm_action: ORMScheduledAction) -> domain.ScheduledAction:
    """Convert SQLAlchemy ScheduledAction model to domain ScheduledAction entity."""
    days = tuple(int(day) for day in orm_action.days.split(",") if day)
    return domain.ScheduledAction(
        id=orm_action.id,
        type=domain.ScheduledActionType(orm_action.type),
        name=orm_action.name,
        amount=orm_action.amount,
        days=days,
        category=orm_action.category,
        active=orm_action.active,
        created_at=orm_action.created_at,
    )


def settings_to_domain(orm_settings: ORMSettings | None) -> domain.UserSettings:
    """Convert the SQLAlchemy Settings row (possibly missing) to UserSettings."""
    if orm_settings is None:
        return domain.UserSettings()
    return domain.UserSettings(
        goal=orm_settings.goal,
        financial_method=orm_settings.financial_method,
    )
