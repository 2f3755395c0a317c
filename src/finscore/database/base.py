"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional
from datetime import datetime
from decimal import Decimal

# Import entities directly to avoid circular import through domain/__init__.py
from finscore.domain.entities import (
    CategoryMeta,
    SavingsEntry,
    SavingsEntryKind,
    ScheduledAction,
    ScheduledActionType,
    Transaction,
    TransactionType,
    UserSettings,
)


class Database(ABC):
    """Abstract database interface for finscore."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Transaction operations
    @abstractmethod
    def create_transaction(
        self,
        transaction_type: TransactionType,
        amount: Decimal,
        category: str,
        date: datetime,
        description: Optional[str] = None,
    ) -> int:
        """Create a transaction. Returns transaction ID."""
        pass

    @abstractmethod
    def get_transaction(self, transaction_id: int) -> Optional[Transaction]:
        """Get transaction by ID."""
        pass

    @abstractmethod
    def list_transactions(
        self,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
        transaction_type: Optional[TransactionType] = None,
    ) -> list[Transaction]:
        """List transactions, newest first, with optional filters."""
        pass

    @abstractmethod
    def update_transaction(
        self,
        transaction_id: int,
        transaction_type: Optional[TransactionType] = None,
        amount: Optional[Decimal] = None,
        category: Optional[str] = None,
        date: Optional[datetime] = None,
        description: Optional[str] = None,
    ) -> None:
        """Update transaction fields that are not None."""
        pass

    @abstractmethod
    def delete_transaction(self, transaction_id: int) -> None:
        """Delete a transaction and the savings entry it mirrors, if any."""
        pass

    # Savings operations
    @abstractmethod
    def create_linked_savings_entry(
        self,
        kind: SavingsEntryKind,
        amount: Decimal,
        date: datetime,
        transaction_type: TransactionType,
        category: str,
        description: str,
    ) -> tuple[int, int]:
        """Create a savings entry and its mirror transaction atomically.

        Returns (savings entry ID, transaction ID).
        """
        pass

    @abstractmethod
    def get_savings_entry(self, entry_id: int) -> Optional[SavingsEntry]:
        """Get savings entry by ID."""
        pass

    @abstractmethod
    def list_savings_entries(
        self, kind: Optional[SavingsEntryKind] = None
    ) -> list[SavingsEntry]:
        """List savings entries, newest first, optionally filtered by kind."""
        pass

    @abstractmethod
    def delete_savings_entry(self, entry_id: int) -> None:
        """Delete a savings entry and its linked transactions."""
        pass

    # Category operations
    @abstractmethod
    def create_category(
        self, name: str, category_type: TransactionType, icon: str = ""
    ) -> int:
        """Create a category. Returns category ID."""
        pass

    @abstractmethod
    def get_category(
        self, name: str, category_type: TransactionType
    ) -> Optional[CategoryMeta]:
        """Get category by name within a type."""
        pass

    @abstractmethod
    def list_categories(
        self, category_type: Optional[TransactionType] = None
    ) -> list[CategoryMeta]:
        """List categories, optionally filtered by type."""
        pass

    # Settings operations
    @abstractmethod
    def get_settings(self) -> UserSettings:
        """Get user settings (defaults when never saved)."""
        pass

    @abstractmethod
    def set_goal(self, goal: Optional[Decimal]) -> None:
        """Set or clear the savings goal."""
        pass

    @abstractmethod
    def set_financial_method(self, method_id: Optional[str]) -> None:
        """Set or clear the selected budget method."""
        pass

    # Scheduled action operations
    @abstractmethod
    def create_scheduled_action(
        self,
        action_type: ScheduledActionType,
        name: str,
        amount: Decimal,
        days: tuple[int, ...],
        category: str,
    ) -> int:
        """Create an active scheduled action. Returns action ID."""
        pass

    @abstractmethod
    def get_scheduled_action(self, action_id: int) -> Optional[ScheduledAction]:
        """Get scheduled action by ID."""
        pass

    @abstractmethod
    def list_scheduled_actions(self) -> list[ScheduledAction]:
        """List all scheduled actions."""
        pass

    @abstractmethod
    def set_scheduled_action_active(self, action_id: int, active: bool) -> None:
        """Pause or resume a scheduled action."""
        pass

    @abstractmethod
    def delete_scheduled_action(self, action_id: int) -> None:
        """Delete a scheduled action and its execution log."""
        pass

    @abstractmethod
    def execution_exists(self, action_id: int, day: int, month: int, year: int) -> bool:
        """Check whether an action already ran for a day of a month."""
        pass

    @abstractmethod
    def log_execution(self, action_id: int, day: int, month: int, year: int) -> None:
        """Record that an action ran for a day of a month."""
        pass
