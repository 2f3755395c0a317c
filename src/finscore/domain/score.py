"""Financial health score and gamification engine.

The score combines five weighted sub-scores, each looked up from a fixed
band table:

    ======================  ======  =====================================
    Category                Weight  Driving metric
    ======================  ======  =====================================
    Control de gastos       25      expenses / incomes (%)
    Tasa de ahorro          30      savings rate (%)
    Fondo de emergencia     20      contributions / monthly expenses
    Progreso de meta        15      contributions / goal (%)
    Consistencia            10      number of transactions
    ======================  ======  =====================================

XP, level and achievements are derived from the same inputs on every call.
"""

import math
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from finscore.domain.entities import Achievement, FinancialScore, ScoreCategory

# (threshold, score) pairs, checked in order
EXPENSE_BANDS = ((50, 100), (70, 80), (85, 60), (95, 40))
EXPENSE_FLOOR = 20
SAVINGS_BANDS = ((20, 100), (15, 85), (10, 65), (5, 40))
SAVINGS_FLOOR = 10
EMERGENCY_BANDS = ((6, 100), (3, 75), (1, 40))
EMERGENCY_FLOOR = 10
GOAL_BANDS = ((100, 100), (50, 70), (25, 45), (0, 20))
NO_GOAL_SCORE = 5
CONSISTENCY_BANDS = ((20, 100), (10, 70), (5, 40))
CONSISTENCY_FLOOR = 15

# (lower bound, grade, color)
GRADES = (
    (90, "A+", "success"),
    (80, "A", "success"),
    (70, "B+", "info"),
    (60, "B", "info"),
    (50, "C", "warning"),
    (40, "D", "warning"),
)
FAILING_GRADE = ("F", "destructive")

LEVELS = (
    ("Principiante", 0),
    ("Aprendiz", 100),
    ("Planificador", 300),
    ("Ahorrador", 600),
    ("Estratega", 1000),
    ("Experto", 1500),
    ("Maestro", 2200),
    ("Gurú Financiero", 3000),
)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(value + 0.5))


def half_up(value: float, places: int = 0) -> Decimal:
    """Round for display with halves up, e.g. 40.5 -> 41 and 1.25 -> 1.3."""
    exponent = Decimal(1).scaleb(-places)
    return Decimal(str(value)).quantize(exponent, rounding=ROUND_HALF_UP)


def _at_most(value: float, bands, floor: int) -> int:
    for threshold, score in bands:
        if value <= threshold:
            return score
    return floor


def _at_least(value: float, bands, floor: int) -> int:
    for threshold, score in bands:
        if value >= threshold:
            return score
    return floor


def expense_score(expense_ratio: float) -> int:
    return _at_most(expense_ratio, EXPENSE_BANDS, EXPENSE_FLOOR)


def savings_score(savings_rate: float) -> int:
    return _at_least(savings_rate, SAVINGS_BANDS, SAVINGS_FLOOR)


def emergency_score(months_of_expenses: float) -> int:
    return _at_least(months_of_expenses, EMERGENCY_BANDS, EMERGENCY_FLOOR)


def goal_score(goal_progress: float, has_goal: bool) -> int:
    if not has_goal:
        return NO_GOAL_SCORE
    return _at_least(goal_progress, GOAL_BANDS, GOAL_BANDS[-1][1])


def consistency_score(transaction_count: int) -> int:
    return _at_least(transaction_count, CONSISTENCY_BANDS, CONSISTENCY_FLOOR)


def get_grade(total: int) -> tuple[str, str]:
    """Return (grade, color) for a total score."""
    for lower_bound, grade, color in GRADES:
        if total >= lower_bound:
            return grade, color
    return FAILING_GRADE


def get_level(xp: int) -> tuple[int, str, int]:
    """Return (1-indexed level, level name, XP to next level) for an XP value.

    At the top level the XP to next level is 0.
    """
    index = 0
    for i in range(len(LEVELS) - 1, -1, -1):
        if xp >= LEVELS[i][1]:
            index = i
            break
    if index < len(LEVELS) - 1:
        xp_to_next = max(LEVELS[index + 1][1] - xp, 0)
    else:
        xp_to_next = 0
    return index + 1, LEVELS[index][0], xp_to_next


def _ratio(numerator: float, denominator: float, scale: float = 1.0) -> float:
    if denominator <= 0:
        return 0.0
    return numerator * scale / denominator


def _progress(value: float, threshold: float) -> float:
    return max(0.0, min(value * 100 / threshold, 100.0))


def calculate_score(
    incomes: float,
    expenses: float,
    savings_rate: float,
    total_contributions: float,
    goal: Optional[float],
    transaction_count: int,
    has_goal: bool,
    monthly_expenses: float,
) -> FinancialScore:
    """Calculate the financial health score.

    Args:
        incomes: Total income
        expenses: Total expenses
        savings_rate: Contributions as a percentage of income
        total_contributions: Total savings contributions
        goal: Savings goal amount, or None
        transaction_count: Number of recorded transactions
        has_goal: Whether the user has set a savings goal
        monthly_expenses: Expenses of one month, used for emergency coverage

    Returns:
        FinancialScore with breakdown, grade, XP, level and achievements.
        Zero incomes, expenses or monthly expenses never raise.
    """
    incomes = float(incomes)
    expenses = float(expenses)
    savings_rate = float(savings_rate)
    total_contributions = float(total_contributions)
    monthly_expenses = float(monthly_expenses)
    goal_amount = float(goal) if goal is not None else 0.0

    # Without income every expense is uncovered
    expense_ratio = _ratio(expenses, incomes, 100) if incomes > 0 else 100.0
    months_of_expenses = _ratio(total_contributions, monthly_expenses)
    goal_progress = min(_ratio(total_contributions, goal_amount, 100), 100.0)

    breakdown = (
        ScoreCategory(
            name="Control de gastos",
            score=expense_score(expense_ratio),
            weight=25,
            icon="💳",
            tip=(
                "Reduce tus gastos al 80% o menos de tus ingresos"
                if expense_ratio > 80
                else "¡Buen control de gastos!"
            ),
        ),
        ScoreCategory(
            name="Tasa de ahorro",
            score=savings_score(savings_rate),
            weight=30,
            icon="🐷",
            tip=(
                "Intenta ahorrar al menos el 20% de tus ingresos"
                if savings_rate < 20
                else "¡Excelente hábito de ahorro!"
            ),
        ),
        ScoreCategory(
            name="Fondo de emergencia",
            score=emergency_score(months_of_expenses),
            weight=20,
            icon="🛡️",
            tip=(
                f"Tienes {half_up(months_of_expenses, 1)} meses cubiertos. Meta: 3-6 meses"
                if months_of_expenses < 3
                else "¡Buen colchón de emergencia!"
            ),
        ),
        ScoreCategory(
            name="Progreso de meta",
            score=goal_score(goal_progress, has_goal),
            weight=15,
            icon="🎯",
            tip=(
                f"Llevas {half_up(goal_progress)}% de tu meta"
                if has_goal
                else "Establece una meta de ahorro para mejorar tu score"
            ),
        ),
        ScoreCategory(
            name="Consistencia",
            score=consistency_score(transaction_count),
            weight=10,
            icon="📊",
            tip=(
                "Registra más movimientos para un análisis preciso"
                if transaction_count < 10
                else "¡Buen seguimiento!"
            ),
        ),
    )

    total = round_half_up(sum(cat.score * cat.weight / 100 for cat in breakdown))
    grade, color = get_grade(total)

    xp = round_half_up(
        total * 10
        + transaction_count * 5
        + (50 if has_goal else 0)
        + (200 if goal_progress >= 100 else 0)
    )
    level, level_name, xp_to_next = get_level(xp)

    achievements = calculate_achievements(
        incomes=incomes,
        expenses=expenses,
        savings_rate=savings_rate,
        total_contributions=total_contributions,
        goal=goal,
        transaction_count=transaction_count,
        months_of_expenses=months_of_expenses,
    )

    return FinancialScore(
        total=total,
        grade=grade,
        color=color,
        breakdown=breakdown,
        level=level,
        level_name=level_name,
        xp=xp,
        xp_to_next=xp_to_next,
        achievements=achievements,
    )


def calculate_achievements(
    incomes: float,
    expenses: float,
    savings_rate: float,
    total_contributions: float,
    goal: Optional[float],
    transaction_count: int,
    months_of_expenses: float,
) -> tuple[Achievement, ...]:
    """Evaluate the eight achievements independently of each other."""
    goal_amount = float(goal) if goal is not None else 0.0
    has_positive_goal = goal_amount > 0
    expense_ratio = _ratio(expenses, incomes, 100)

    return (
        Achievement(
            id="first-step",
            name="Primer Paso",
            description="Registra tu primera transacción",
            icon="👣",
            unlocked=transaction_count >= 1,
            progress=_progress(transaction_count, 1),
        ),
        Achievement(
            id="tracker",
            name="Rastreador",
            description="Registra 10 transacciones",
            icon="📝",
            unlocked=transaction_count >= 10,
            progress=_progress(transaction_count, 10),
        ),
        Achievement(
            id="disciplined",
            name="Disciplinado",
            description="Registra 50 transacciones",
            icon="🏆",
            unlocked=transaction_count >= 50,
            progress=_progress(transaction_count, 50),
        ),
        Achievement(
            id="saver-20",
            name="Ahorrador Estrella",
            description="Alcanza una tasa de ahorro del 20%",
            icon="⭐",
            unlocked=savings_rate >= 20,
            progress=_progress(savings_rate, 20),
        ),
        Achievement(
            id="emergency-fund",
            name="Fondo de Emergencia",
            description="Ahorra 3 meses de gastos",
            icon="🛡️",
            unlocked=months_of_expenses >= 3,
            progress=_progress(months_of_expenses, 3),
        ),
        Achievement(
            id="goal-reached",
            name="Meta Cumplida",
            description="Alcanza tu meta de ahorro",
            icon="🎯",
            unlocked=has_positive_goal and total_contributions >= goal_amount,
            progress=(
                _progress(total_contributions, goal_amount) if has_positive_goal else 0.0
            ),
        ),
        Achievement(
            id="budget-master",
            name="Maestro del Presupuesto",
            description="Mantén gastos bajo el 70% de ingresos",
            icon="💪",
            unlocked=incomes > 0 and expense_ratio <= 70,
            progress=_progress(100 - expense_ratio, 30) if incomes > 0 else 0.0,
        ),
        Achievement(
            id="first-saving",
            name="Primera Semilla",
            description="Haz tu primer aporte al ahorro",
            icon="🌱",
            unlocked=total_contributions > 0,
            progress=100.0 if total_contributions > 0 else 0.0,
        ),
    )
