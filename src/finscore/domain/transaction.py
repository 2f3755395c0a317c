"""Transaction domain service."""

from typing import Optional
from datetime import date, datetime
from decimal import Decimal

from finscore.database.base import Database
from finscore.domain.entities import (
    Transaction as TransactionEntity,
    TransactionType,
    positive_amount,
)
from finscore.domain.errors import (
    NotFoundError,
    ValidationError,
    category_not_found,
    transaction_not_found,
)


def as_datetime(value: date) -> datetime:
    """Promote a date to a datetime at midnight; datetimes pass through."""
    if isinstance(value, datetime):
        return value
    return datetime(value.year, value.month, value.day)


class TransactionService:
    """Service for managing income and expense transactions."""

    def __init__(self, db: Database):
        """Initialize transaction service.

        Args:
            db: Database instance
        """
        self.db = db

    def _check_category(self, category: str, transaction_type: TransactionType) -> None:
        if self.db.get_category(category, transaction_type) is None:
            raise NotFoundError(category_not_found(category, transaction_type.value))

    def create_transaction(
        self,
        transaction_type: TransactionType,
        amount: Decimal,
        category: str,
        date: date,
        description: Optional[str] = None,
    ) -> int:
        """Create a transaction.

        Args:
            transaction_type: Income or expense
            amount: Transaction amount, must be positive
            category: Category name, must exist for the transaction type
            date: Transaction date
            description: Optional description

        Returns:
            Transaction ID

        Raises:
            ValidationError: If the amount is not a positive number
            NotFoundError: If the category doesn't exist for the type
        """
        transaction_type = TransactionType(transaction_type)
        amount = positive_amount(amount)
        self._check_category(category, transaction_type)

        return self.db.create_transaction(
            transaction_type=transaction_type,
            amount=amount,
            category=category,
            date=as_datetime(date),
            description=description,
        )

    def get_transaction(self, transaction_id: int) -> Optional[TransactionEntity]:
        """Get transaction by ID.

        Args:
            transaction_id: Transaction ID

        Returns:
            Transaction entity or None if not found
        """
        return self.db.get_transaction(transaction_id)

    def list_transactions(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        transaction_type: Optional[TransactionType] = None,
    ) -> list[TransactionEntity]:
        """List transactions with filters, newest first.

        Args:
            start_date: Optional start date filter (inclusive)
            end_date: Optional end date filter (inclusive, whole day)
            transaction_type: Optional income/expense filter

        Returns:
            List of transaction entities
        """
        start = as_datetime(start_date) if start_date is not None else None
        end = None
        if end_date is not None:
            end = end_date if isinstance(end_date, datetime) else datetime(
                end_date.year, end_date.month, end_date.day, 23, 59, 59, 999999
            )
        if transaction_type is not None:
            transaction_type = TransactionType(transaction_type)
        return self.db.list_transactions(
            start_date=start, end_date=end, transaction_type=transaction_type
        )

    def update_transaction(
        self,
        transaction_id: int,
        transaction_type: Optional[TransactionType] = None,
        amount: Optional[Decimal] = None,
        category: Optional[str] = None,
        date: Optional[date] = None,
        description: Optional[str] = None,
    ) -> None:
        """Update transaction fields.

        Args:
            transaction_id: Transaction ID to update
            transaction_type: Optional new type
            amount: Optional new amount, must be positive
            category: Optional new category, must exist for the resulting type
            date: Optional new date
            description: Optional new description

        Raises:
            NotFoundError: If the transaction or category doesn't exist
            ValidationError: If the amount is invalid or the transaction
                mirrors a savings entry
        """
        txn = self.db.get_transaction(transaction_id)
        if txn is None:
            raise NotFoundError(transaction_not_found(transaction_id))
        if txn.linked_savings_id is not None:
            raise ValidationError(
                f"Transaction {transaction_id} belongs to savings entry "
                f"{txn.linked_savings_id}; delete the savings entry instead"
            )

        if transaction_type is not None:
            transaction_type = TransactionType(transaction_type)
        if amount is not None:
            amount = positive_amount(amount)

        new_type = transaction_type or txn.type
        if category is not None or new_type != txn.type:
            self._check_category(category or txn.category, new_type)

        self.db.update_transaction(
            transaction_id=transaction_id,
            transaction_type=transaction_type,
            amount=amount,
            category=category,
            date=as_datetime(date) if date is not None else None,
            description=description,
        )

    def delete_transaction(self, transaction_id: int) -> None:
        """Delete a transaction.

        A transaction that mirrors a savings contribution or withdrawal is
        removed together with its savings entry.

        Args:
            transaction_id: Transaction ID to delete

        Raises:
            NotFoundError: If transaction doesn't exist
        """
        txn = self.db.get_transaction(transaction_id)
        if txn is None:
            raise NotFoundError(transaction_not_found(transaction_id))

        self.db.delete_transaction(transaction_id)
