"""Scheduled action domain service."""

import calendar
import logging
from datetime import date, datetime
from decimal import Decimal
from typing import Iterable, Optional

from finscore.database.base import Database
from finscore.domain.entities import (
    SAVINGS_CATEGORY,
    ScheduledAction,
    ScheduledActionType,
    TransactionType,
    positive_amount,
)
from finscore.domain.errors import (
    DomainError,
    NotFoundError,
    ValidationError,
    category_not_found,
    scheduled_action_not_found,
)
from finscore.domain.savings import SavingsService
from finscore.domain.transaction import TransactionService

logger = logging.getLogger(__name__)


def _normalize_days(days: Iterable[int]) -> tuple[int, ...]:
    normalized = set()
    for day in days:
        if isinstance(day, bool) or not isinstance(day, int) or not 1 <= day <= 31:
            raise ValidationError(f"Scheduled day must be between 1 and 31, got {day!r}")
        normalized.add(day)
    if not normalized:
        raise ValidationError("At least one scheduled day is required")
    return tuple(sorted(normalized))


class ScheduledActionService:
    """Service for recurring automated expenses and savings contributions."""

    def __init__(self, db: Database):
        """Initialize scheduled action service.

        Args:
            db: Database instance
        """
        self.db = db
        self.transactions = TransactionService(db)
        self.savings = SavingsService(db)

    def create_action(
        self,
        action_type: ScheduledActionType,
        name: str,
        amount: Decimal,
        days: Iterable[int],
        category: Optional[str] = None,
    ) -> int:
        """Create an active scheduled action.

        Args:
            action_type: DEBT records an expense, SAVINGS a contribution
            name: Display name, used in the description of generated expenses
            amount: Amount per run, must be positive
            days: Days of the month (1-31) to run on
            category: Expense category for DEBT actions; SAVINGS actions
                always use the savings category

        Returns:
            Scheduled action ID

        Raises:
            ValidationError: If name, amount or days are invalid
            NotFoundError: If the expense category doesn't exist
        """
        action_type = ScheduledActionType(action_type)
        name = (name or "").strip()
        if not name:
            raise ValidationError("Scheduled action name cannot be empty")
        amount = positive_amount(amount)
        days = _normalize_days(days)

        if action_type == ScheduledActionType.SAVINGS:
            category = SAVINGS_CATEGORY
        else:
            if not category:
                raise ValidationError("Debt actions need an expense category")
            if self.db.get_category(category, TransactionType.EXPENSE) is None:
                raise NotFoundError(category_not_found(category, TransactionType.EXPENSE.value))

        action_id = self.db.create_scheduled_action(
            action_type=action_type,
            name=name,
            amount=amount,
            days=days,
            category=category,
        )
        logger.info("Created scheduled %s action %d (%s)", action_type.value, action_id, name)
        return action_id

    def get_action(self, action_id: int) -> Optional[ScheduledAction]:
        """Get scheduled action by ID."""
        return self.db.get_scheduled_action(action_id)

    def list_actions(self) -> list[ScheduledAction]:
        """List all scheduled actions."""
        return self.db.list_scheduled_actions()

    def set_active(self, action_id: int, active: bool) -> None:
        """Pause or resume a scheduled action.

        Raises:
            NotFoundError: If the action doesn't exist
        """
        if self.db.get_scheduled_action(action_id) is None:
            raise NotFoundError(scheduled_action_not_found(action_id))
        self.db.set_scheduled_action_active(action_id, active)

    def delete_action(self, action_id: int) -> None:
        """Delete a scheduled action.

        Raises:
            NotFoundError: If the action doesn't exist
        """
        if self.db.get_scheduled_action(action_id) is None:
            raise NotFoundError(scheduled_action_not_found(action_id))
        self.db.delete_scheduled_action(action_id)

    def _execute(self, action: ScheduledAction, when: datetime) -> None:
        if action.type == ScheduledActionType.SAVINGS:
            self.savings.contribute(action.amount, when)
        else:
            self.transactions.create_transaction(
                transaction_type=TransactionType.EXPENSE,
                amount=action.amount,
                category=action.category,
                date=when,
                description=f"Auto: {action.name}",
            )

    def run_pending(self, today: Optional[date] = None) -> int:
        """Execute scheduled runs that are due this month and not yet done.

        Missed days earlier in the month are caught up. A day past the end of
        the month (e.g. 31 in April) runs on the month's last day. An action
        that fails is logged and skipped without recording the execution.

        Args:
            today: Reference date, defaults to the current date

        Returns:
            Number of runs executed
        """
        today = today or date.today()
        last_day = calendar.monthrange(today.year, today.month)[1]
        count = 0

        for action in self.db.list_scheduled_actions():
            if not action.active:
                continue
            for day in action.days:
                run_day = min(day, last_day)
                if run_day > today.day:
                    continue
                if self.db.execution_exists(action.id, day, today.month, today.year):
                    continue

                try:
                    self._execute(action, datetime(today.year, today.month, run_day))
                except DomainError as e:
                    logger.error("Error executing scheduled action %r: %s", action.name, e)
                    continue

                self.db.log_execution(action.id, day, today.month, today.year)
                count += 1

        if count:
            logger.info("Executed %d scheduled action run(s)", count)
        return count
