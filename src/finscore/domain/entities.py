"""Domain model entities for finscore.

These are pure data classes representing business concepts, independent of
database schema. The scoring and recommendation engines consume them as an
immutable snapshot; nothing here holds derived state between calls.
"""

from dataclasses import dataclass, field
from datetime import date as date_type, datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from finscore.domain.errors import ValidationError

SAVINGS_CATEGORY = "Ahorro"
WITHDRAWAL_CATEGORY = "Retiro de ahorro"


class TransactionType(str, Enum):
    """Direction of a transaction."""

    INCOME = "income"
    EXPENSE = "expense"


class SavingsEntryKind(str, Enum):
    """Kind of savings ledger entry."""

    CONTRIBUTION = "contribution"
    WITHDRAWAL = "withdrawal"


class RecommendationType(str, Enum):
    """Presentation category of a recommendation."""

    WARNING = "warning"
    SUCCESS = "success"
    TIP = "tip"
    INSIGHT = "insight"


class ScheduledActionType(str, Enum):
    """What a scheduled action records when it runs."""

    DEBT = "debt"
    SAVINGS = "savings"


def _check_amount(value, field_name: str, allow_zero: bool) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise ValidationError(f"{field_name} must be numeric, got {value!r}")
    if value != value:  # NaN
        raise ValidationError(f"{field_name} must be numeric, got {value!r}")
    if value < 0 or (value == 0 and not allow_zero):
        bound = "non-negative" if allow_zero else "positive"
        raise ValidationError(f"{field_name} must be {bound}, got {value!r}")


def positive_amount(value, field_name: str = "amount") -> Decimal:
    """Validate a user supplied amount and return it as a Decimal.

    Raises:
        ValidationError: If the value is not a finite number greater than 0
    """
    if isinstance(value, float):
        value = Decimal(str(value))
    _check_amount(value, field_name, allow_zero=False)
    amount = Decimal(value)
    if not amount.is_finite():
        raise ValidationError(f"{field_name} must be a finite number, got {value!r}")
    return amount


@dataclass(frozen=True)
class Transaction:
    """Income or expense transaction."""

    id: int
    type: TransactionType
    amount: Decimal
    category: str
    date: datetime
    description: Optional[str] = None
    linked_savings_id: Optional[int] = None

    def __post_init__(self):
        object.__setattr__(self, "type", TransactionType(self.type))
        _check_amount(self.amount, "amount", allow_zero=True)

    @property
    def is_income(self) -> bool:
        return self.type == TransactionType.INCOME

    @property
    def is_expense(self) -> bool:
        return self.type == TransactionType.EXPENSE


@dataclass(frozen=True)
class SavingsEntry:
    """Savings contribution or withdrawal."""

    id: int
    amount: Decimal
    date: datetime
    kind: SavingsEntryKind = SavingsEntryKind.CONTRIBUTION

    def __post_init__(self):
        object.__setattr__(self, "kind", SavingsEntryKind(self.kind))
        _check_amount(self.amount, "amount", allow_zero=False)


@dataclass(frozen=True)
class CategoryMeta:
    """Category name and icon for one transaction type."""

    name: str
    icon: str
    type: TransactionType = TransactionType.EXPENSE

    def __post_init__(self):
        object.__setattr__(self, "type", TransactionType(self.type))


@dataclass(frozen=True)
class BudgetBucket:
    """Named group of expense categories with an optional income share.

    A percentage of 0 means the bucket has no fixed allocation.
    """

    name: str
    percentage: int
    match_categories: frozenset[str]
    color: str = "info"
    icon: str = ""


@dataclass(frozen=True)
class BudgetMethod:
    """Budgeting strategy from the static method catalog."""

    id: str
    name: str
    icon: str
    short_description: str
    description: str
    origin: str
    buckets: tuple[BudgetBucket, ...]
    tips: tuple[str, ...]


@dataclass(frozen=True)
class BucketResult:
    """Spending measured against one bucket of a budget method."""

    bucket: BudgetBucket
    spent: float
    limit: float
    percentage_used: float

    @property
    def is_over_budget(self) -> bool:
        return self.percentage_used > 100

    @property
    def overspent(self) -> float:
        """Amount above the limit, 0 when within budget."""
        return self.spent - self.limit if self.is_over_budget else 0.0


@dataclass(frozen=True)
class Aggregates:
    """Summary totals over a transaction and savings snapshot."""

    incomes: float = 0.0
    expenses: float = 0.0
    total_contributions: float = 0.0
    total_withdrawals: float = 0.0
    net_savings: float = 0.0
    available: float = 0.0


@dataclass(frozen=True)
class ScoreCategory:
    """One weighted component of the financial health score."""

    name: str
    score: int
    weight: int
    icon: str
    tip: str


@dataclass(frozen=True)
class Achievement:
    """Milestone derived from current aggregates."""

    id: str
    name: str
    description: str
    icon: str
    unlocked: bool
    progress: float


@dataclass(frozen=True)
class FinancialScore:
    """Health score, grade and gamification state."""

    total: int
    grade: str
    color: str
    breakdown: tuple[ScoreCategory, ...]
    level: int
    level_name: str
    xp: int
    xp_to_next: int
    achievements: tuple[Achievement, ...]

    @property
    def unlocked_count(self) -> int:
        return sum(1 for achievement in self.achievements if achievement.unlocked)


@dataclass(frozen=True)
class Recommendation:
    """Ranked piece of advice. Lower priority values are shown first."""

    id: str
    type: RecommendationType
    title: str
    description: str
    priority: int
    icon: str = ""
    method: Optional[str] = None
    actionable: Optional[str] = None


@dataclass(frozen=True)
class FinancialSnapshot:
    """Inputs of the method-aware recommendation generator."""

    incomes: float
    expenses: float
    savings_rate: float
    total_contributions: float
    goal: Optional[float]
    expense_by_category: dict[str, float] = field(default_factory=dict)
    monthly_expenses: float = 0.0
    transaction_count: int = 0


@dataclass(frozen=True)
class GoalProjection:
    """Result of the goal simulator."""

    months: int
    total_contributed: float
    total_interest: float
    reached: bool = True


@dataclass(frozen=True)
class ScheduledAction:
    """Recurring automated expense or savings contribution."""

    id: int
    type: ScheduledActionType
    name: str
    amount: Decimal
    days: tuple[int, ...]
    category: str
    active: bool
    created_at: datetime

    def __post_init__(self):
        object.__setattr__(self, "type", ScheduledActionType(self.type))


@dataclass(frozen=True)
class UserSettings:
    """Per-user settings: savings goal and selected budget method."""

    goal: Optional[Decimal] = None
    financial_method: Optional[str] = None

    @property
    def has_goal(self) -> bool:
        return self.goal is not None and self.goal > 0


@dataclass(frozen=True)
class WeeklySummary:
    """Totals for the current week (Monday to today)."""

    start: date_type
    end: date_type
    incomes: float
    expenses: float
    transaction_count: int
    top_category: Optional[str]

    @property
    def balance(self) -> float:
        return self.incomes - self.expenses


@dataclass(frozen=True)
class MonthlyTotals:
    """Income and expense totals for one calendar month."""

    month: str
    incomes: float
    expenses: float
