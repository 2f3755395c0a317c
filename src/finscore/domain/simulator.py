"""Savings goal simulator."""

import math
from decimal import Decimal, InvalidOperation

from finscore.domain.entities import GoalProjection
from finscore.domain.errors import ValidationError, invalid_amount

MAX_MONTHS = 600  # 50 years
DEFAULT_ANNUAL_RATE = 8


def _to_number(value, field: str) -> float:
    if isinstance(value, bool):
        raise ValidationError(f"{field} must be numeric, got {value!r}")
    if isinstance(value, str):
        try:
            value = Decimal(value.strip())
        except InvalidOperation:
            raise ValidationError(f"{field} must be numeric, got {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field} must be numeric, got {value!r}")
    if math.isnan(number) or math.isinf(number):
        raise ValidationError(f"{field} must be a finite number, got {value!r}")
    return number


def simulate_goal(goal, monthly, annual_rate_pct=DEFAULT_ANNUAL_RATE) -> GoalProjection:
    """Project how long a fixed monthly saving takes to reach a goal.

    Interest compounds monthly: each month the accumulated balance grows by
    the monthly rate and the contribution is added. The projection stops when
    the goal is reached or after 600 months.

    Args:
        goal: Target amount, must be positive
        monthly: Amount saved each month, must be positive
        annual_rate_pct: Annual nominal rate in percent, may be 0 or negative

    Returns:
        GoalProjection with months elapsed, principal contributed and interest
        earned (never negative)

    Raises:
        ValidationError: If any input is non-numeric, goal or monthly is not
            positive. No simulation is performed.
    """
    goal_amount = _to_number(goal, "goal")
    monthly_amount = _to_number(monthly, "monthly")
    rate_pct = _to_number(annual_rate_pct, "annual_rate_pct")

    if goal_amount <= 0:
        raise ValidationError(invalid_amount("goal", goal))
    if monthly_amount <= 0:
        raise ValidationError(invalid_amount("monthly", monthly))
    monthly_rate = rate_pct / 100 / 12
    accumulated = 0.0
    months = 0
    while accumulated < goal_amount and months < MAX_MONTHS:
        accumulated = accumulated * (1 + monthly_rate) + monthly_amount
        months += 1

    total_contributed = monthly_amount * months
    return GoalProjection(
        months=months,
        total_contributed=total_contributed,
        total_interest=max(0.0, accumulated - total_contributed),
        reached=accumulated >= goal_amount,
    )


def format_duration(months: int) -> str:
    """Human readable duration, e.g. 14 -> '1 año y 2 meses'."""
    years, remaining = divmod(months, 12)
    if years == 0:
        return f"{remaining} mes{'es' if remaining != 1 else ''}"
    year_text = f"{years} año{'s' if years > 1 else ''}"
    if remaining == 0:
        return year_text
    return f"{year_text} y {remaining} mes{'es' if remaining > 1 else ''}"
