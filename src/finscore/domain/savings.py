"""Savings domain service.

Every contribution is mirrored by an expense transaction in the "Ahorro"
category and every withdrawal by an income transaction in "Retiro de
ahorro". The database layer creates and deletes both sides together.
"""

import logging
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from finscore.database.base import Database
from finscore.domain.entities import (
    SAVINGS_CATEGORY,
    WITHDRAWAL_CATEGORY,
    SavingsEntry,
    SavingsEntryKind,
    TransactionType,
    positive_amount,
)
from finscore.domain.errors import (
    NotFoundError,
    ValidationError,
    insufficient_savings,
    savings_entry_not_found,
)
from finscore.domain.transaction import as_datetime

logger = logging.getLogger(__name__)

CONTRIBUTION_DESCRIPTION = "Aporte a ahorro"
WITHDRAWAL_DESCRIPTION = "Retiro desde ahorros"


class SavingsService:
    """Service for the savings goal, contributions and withdrawals."""

    def __init__(self, db: Database):
        """Initialize savings service.

        Args:
            db: Database instance
        """
        self.db = db

    def get_goal(self) -> Optional[Decimal]:
        """Return the savings goal, or None when no goal is set."""
        settings = self.db.get_settings()
        return settings.goal if settings.has_goal else None

    def set_goal(self, amount: Decimal) -> None:
        """Set the savings goal.

        Raises:
            ValidationError: If the amount is not a positive number
        """
        amount = positive_amount(amount, "goal")
        self.db.set_goal(amount)
        logger.info("Savings goal set to %s", amount)

    def clear_goal(self) -> None:
        """Remove the savings goal."""
        self.db.set_goal(None)
        logger.info("Savings goal cleared")

    def net_savings(self) -> Decimal:
        """Total contributions minus total withdrawals."""
        total = Decimal("0")
        for entry in self.db.list_savings_entries():
            if entry.kind == SavingsEntryKind.CONTRIBUTION:
                total += entry.amount
            else:
                total -= entry.amount
        return total

    def contribute(self, amount: Decimal, when: Optional[date] = None) -> int:
        """Record a savings contribution and its mirror expense transaction.

        Args:
            amount: Contribution amount, must be positive
            when: Date of the contribution, defaults to now

        Returns:
            Savings entry ID

        Raises:
            ValidationError: If the amount is not a positive number
        """
        amount = positive_amount(amount)
        entry_id, txn_id = self.db.create_linked_savings_entry(
            kind=SavingsEntryKind.CONTRIBUTION,
            amount=amount,
            date=as_datetime(when) if when is not None else datetime.now(),
            transaction_type=TransactionType.EXPENSE,
            category=SAVINGS_CATEGORY,
            description=CONTRIBUTION_DESCRIPTION,
        )
        logger.info("Recorded contribution %d of %s (transaction %d)", entry_id, amount, txn_id)
        return entry_id

    def withdraw(self, amount: Decimal, when: Optional[date] = None) -> int:
        """Record a savings withdrawal and its mirror income transaction.

        Args:
            amount: Withdrawal amount, must be positive
            when: Date of the withdrawal, defaults to now

        Returns:
            Savings entry ID

        Raises:
            ValidationError: If the amount is not a positive number or exceeds
                the current net savings
        """
        amount = positive_amount(amount)
        available = self.net_savings()
        if amount > available:
            raise ValidationError(insufficient_savings(amount, available))

        entry_id, txn_id = self.db.create_linked_savings_entry(
            kind=SavingsEntryKind.WITHDRAWAL,
            amount=amount,
            date=as_datetime(when) if when is not None else datetime.now(),
            transaction_type=TransactionType.INCOME,
            category=WITHDRAWAL_CATEGORY,
            description=WITHDRAWAL_DESCRIPTION,
        )
        logger.info("Recorded withdrawal %d of %s (transaction %d)", entry_id, amount, txn_id)
        return entry_id

    def list_contributions(self) -> list[SavingsEntry]:
        """List contributions, newest first."""
        return self.db.list_savings_entries(kind=SavingsEntryKind.CONTRIBUTION)

    def list_withdrawals(self) -> list[SavingsEntry]:
        """List withdrawals, newest first."""
        return self.db.list_savings_entries(kind=SavingsEntryKind.WITHDRAWAL)

    def delete_entry(self, entry_id: int) -> None:
        """Delete a contribution or withdrawal and its mirror transaction.

        Raises:
            NotFoundError: If the savings entry doesn't exist
        """
        if self.db.get_savings_entry(entry_id) is None:
            raise NotFoundError(savings_entry_not_found(entry_id))
        self.db.delete_savings_entry(entry_id)
        logger.info("Deleted savings entry %d", entry_id)
