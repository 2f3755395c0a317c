"""Recommendation engines.

Two independent generators feed the advice list:

* ``generate_recommendations`` gives general insights about the spending
  split, expense and savings ratios, the biggest expense category, goal
  progress and a few category-specific tips.
* ``generate_method_recommendations`` runs a battery of heuristics named
  after budgeting methods (50/30/20, zero-based, emergency fund, 24/48 hour
  rule, compound interest, envelopes).

``merge_recommendations`` combines their outputs: concatenate, stable sort
by priority, then drop repeated ids keeping the first one.
"""

from typing import Iterable, Optional, Sequence

from finscore.domain.aggregate import expense_by_category, top_categories
from finscore.domain.entities import (
    SAVINGS_CATEGORY,
    FinancialSnapshot,
    Recommendation,
    RecommendationType,
    Transaction,
)
from finscore.domain.methods import NEEDS_CATEGORIES, WANTS_CATEGORIES
from finscore.domain.score import half_up

COMPOUND_ANNUAL_RATE = 0.08
PROJECTION_MONTHS = 12


def money(amount: float) -> str:
    """Format an amount for advice text, e.g. 1234.5 -> '$1,235'."""
    return f"${half_up(amount):,}"


def _sum_categories(totals: dict[str, float], categories: Iterable[str]) -> float:
    return sum(amount for name, amount in totals.items() if name in categories)


def by_priority(recommendations: Iterable[Recommendation]) -> list[Recommendation]:
    """Stable sort by priority, lower values first."""
    return sorted(recommendations, key=lambda rec: rec.priority)


def generate_recommendations(
    transactions: Sequence[Transaction],
    goal: Optional[float],
    total_contributions: float,
    total_withdrawals: float,
    incomes: float,
    expenses: float,
) -> list[Recommendation]:
    """Generate general recommendations from a transaction snapshot.

    Args:
        transactions: All transactions
        goal: Savings goal amount, or None
        total_contributions: Total savings contributions
        total_withdrawals: Total savings withdrawals
        incomes: Total income
        expenses: Total expenses

    Returns:
        Recommendations sorted by priority. With no transactions only the
        "no-data" tip is returned.
    """
    if len(transactions) == 0:
        return [
            Recommendation(
                id="no-data",
                type=RecommendationType.TIP,
                icon="📝",
                title="¡Empieza a registrar!",
                description=(
                    "Registra tus primeros ingresos y gastos para recibir "
                    "recomendaciones personalizadas sobre cómo administrar tu dinero."
                ),
                priority=0,
            )
        ]

    incomes = float(incomes)
    expenses = float(expenses)
    total_contributions = float(total_contributions)
    totals = expense_by_category(transactions)
    recs: list[Recommendation] = []

    if incomes > 0:
        needs_pct = _sum_categories(totals, NEEDS_CATEGORIES) * 100 / incomes
        wants_pct = _sum_categories(totals, WANTS_CATEGORIES) * 100 / incomes
        savings_pct = total_contributions * 100 / incomes

        needs_verdict = (
            "⚠️ Tus gastos en necesidades superan el 50% recomendado."
            if needs_pct > 50
            else "✅ Tus necesidades están dentro del rango."
        )
        recs.append(
            Recommendation(
                id="rule-502030",
                type=RecommendationType.INSIGHT,
                icon="📊",
                title="Regla 50/30/20",
                description=(
                    f"Necesidades: {half_up(needs_pct)}% (recomendado ≤50%) · "
                    f"Deseos: {half_up(wants_pct)}% (recomendado ≤30%) · "
                    f"Ahorro: {half_up(savings_pct)}% (recomendado ≥20%). {needs_verdict}"
                ),
                priority=1,
            )
        )

        expense_ratio = expenses * 100 / incomes
        if expense_ratio > 90:
            recs.append(
                Recommendation(
                    id="high-expenses",
                    type=RecommendationType.WARNING,
                    icon="🚨",
                    title="Gastos muy altos",
                    description=(
                        f"Estás gastando el {half_up(expense_ratio)}% de tus ingresos. "
                        "Intenta mantener tus gastos por debajo del 80% para "
                        "tener un colchón financiero."
                    ),
                    priority=2,
                )
            )
        elif expense_ratio < 60:
            recs.append(
                Recommendation(
                    id="great-balance",
                    type=RecommendationType.SUCCESS,
                    icon="🌟",
                    title="¡Excelente balance!",
                    description=(
                        f"Solo gastas el {half_up(expense_ratio)}% de tus ingresos. "
                        "Tienes un buen margen para ahorrar e invertir."
                    ),
                    priority=5,
                )
            )

        if savings_pct < 10:
            recs.append(
                Recommendation(
                    id="low-savings",
                    type=RecommendationType.WARNING,
                    icon="🐷",
                    title="Ahorro bajo",
                    description=(
                        f"Solo ahorras el {half_up(savings_pct)}% de tus ingresos. La "
                        "recomendación es ahorrar mínimo un 20%. Intenta apartar "
                        "un monto fijo cada mes antes de gastar."
                    ),
                    priority=3,
                )
            )
        elif savings_pct >= 20:
            recs.append(
                Recommendation(
                    id="good-savings",
                    type=RecommendationType.SUCCESS,
                    icon="💪",
                    title="¡Buen hábito de ahorro!",
                    description=(
                        f"Ahorras el {half_up(savings_pct)}% de tus ingresos, cumpliendo "
                        "la meta del 20%. ¡Sigue así!"
                    ),
                    priority=6,
                )
            )

    ranked = top_categories(totals, limit=1, exclude=(SAVINGS_CATEGORY,))
    if ranked and incomes > 0 and expenses > 0:
        top_name, top_amount = ranked[0]
        top_pct = half_up(top_amount * 100 / expenses)
        advice = (
            "Considera diversificar tus gastos o buscar alternativas más económicas."
            if top_pct > 40
            else "Parece un porcentaje razonable."
        )
        recs.append(
            Recommendation(
                id="top-category",
                type=RecommendationType.INSIGHT,
                icon="🔍",
                title=f"Mayor gasto: {top_name}",
                description=(
                    f"El {top_pct}% de tus gastos van a {top_name} "
                    f"({money(top_amount)}). {advice}"
                ),
                priority=4,
            )
        )

    recs.append(_goal_recommendation(goal, total_contributions))

    entertainment = totals.get("Entretenimiento", 0)
    if entertainment and incomes > 0:
        entertainment_pct = entertainment * 100 / incomes
        if entertainment_pct > 15:
            recs.append(
                Recommendation(
                    id="entertainment-high",
                    type=RecommendationType.TIP,
                    icon="🎬",
                    title="Entretenimiento elevado",
                    description=(
                        f"Gastas {half_up(entertainment_pct)}% en entretenimiento. Busca "
                        "alternativas gratuitas o con descuento para reducir este "
                        "gasto sin sacrificar diversión."
                    ),
                    priority=4,
                )
            )

    food = totals.get("Comida", 0)
    if food and incomes > 0:
        food_pct = food * 100 / incomes
        if food_pct > 30:
            recs.append(
                Recommendation(
                    id="food-high",
                    type=RecommendationType.TIP,
                    icon="🍽️",
                    title="Gasto en comida alto",
                    description=(
                        f"El {half_up(food_pct)}% de tus ingresos va a comida. Planifica "
                        "tus comidas semanalmente y cocina en casa para reducir "
                        "este gasto."
                    ),
                    priority=3,
                )
            )

    return by_priority(recs)


def _goal_recommendation(
    goal: Optional[float], total_contributions: float
) -> Recommendation:
    goal_amount = float(goal) if goal is not None else 0.0
    if goal_amount <= 0:
        return Recommendation(
            id="no-goal",
            type=RecommendationType.TIP,
            icon="🎯",
            title="Establece una meta de ahorro",
            description=(
                "Tener una meta concreta te ayuda a mantener la disciplina. Ve a "
                "la sección de Ahorro y define cuánto quieres ahorrar."
            ),
            priority=5,
        )

    progress = total_contributions * 100 / goal_amount
    if progress >= 100:
        return Recommendation(
            id="goal-reached",
            type=RecommendationType.SUCCESS,
            icon="🎉",
            title="¡Meta alcanzada!",
            description=(
                f"Has alcanzado el {half_up(progress)}% de tu meta de ahorro. "
                "¡Felicidades! Considera establecer una nueva meta más ambiciosa."
            ),
            priority=0,
        )
    if progress >= 50:
        return Recommendation(
            id="goal-halfway",
            type=RecommendationType.TIP,
            icon="🏃",
            title="Vas por buen camino",
            description=(
                f"Llevas el {half_up(progress)}% de tu meta. ¡No te detengas! Faltan "
                f"{money(goal_amount - total_contributions)} para llegar."
            ),
            priority=4,
        )
    return Recommendation(
        id="goal-push",
        type=RecommendationType.TIP,
        icon="🎯",
        title="Impulsa tu meta",
        description=(
            f"Llevas solo el {half_up(progress)}% de tu meta "
            f"({money(total_contributions)} de {money(goal_amount)}). Intenta "
            "aumentar tus aportes mensuales."
        ),
        priority=3,
    )


def future_value(
    principal: float, monthly: float, annual_rate: float, months: int
) -> float:
    """Future value of a principal plus a monthly annuity, compounded monthly."""
    monthly_rate = annual_rate / 12
    growth = (1 + monthly_rate) ** months
    if monthly_rate == 0:
        return principal + monthly * months
    return principal * growth + monthly * ((growth - 1) / monthly_rate)


def generate_method_recommendations(data: FinancialSnapshot) -> list[Recommendation]:
    """Run the method-based heuristics over a financial snapshot.

    Each heuristic is gated independently and emits at most one
    recommendation. Nothing is returned for a snapshot without transactions.

    Returns:
        Recommendations sorted by priority
    """
    if data.transaction_count == 0:
        return []

    incomes = float(data.incomes)
    expenses = float(data.expenses)
    contributions = float(data.total_contributions)
    monthly_expenses = float(data.monthly_expenses)
    totals = {name: float(amount) for name, amount in data.expense_by_category.items()}
    recs: list[Recommendation] = []

    # 50/30/20
    if incomes > 0:
        needs_total = _sum_categories(totals, NEEDS_CATEGORIES)
        wants_total = _sum_categories(totals, WANTS_CATEGORIES)
        needs_pct = needs_total * 100 / incomes
        wants_pct = wants_total * 100 / incomes

        if needs_pct > 50:
            recs.append(
                Recommendation(
                    id="503020-needs",
                    method="Regla 50/30/20",
                    icon="📊",
                    title="Necesidades por encima del 50%",
                    description=(
                        f"Tus necesidades representan el {half_up(needs_pct)}%. "
                        "Deberían ser máximo 50%."
                    ),
                    type=RecommendationType.WARNING,
                    priority=1,
                    actionable=(
                        f"Reduce {money(needs_total - incomes * 0.5)} en necesidades. "
                        "Revisa servicios y transporte."
                    ),
                )
            )
        if wants_pct > 30:
            recs.append(
                Recommendation(
                    id="503020-wants",
                    method="Regla 50/30/20",
                    icon="🎭",
                    title="Deseos por encima del 30%",
                    description=(
                        f"Tus deseos representan el {half_up(wants_pct)}%. "
                        "Deberían ser máximo 30%."
                    ),
                    type=RecommendationType.WARNING,
                    priority=2,
                    actionable=(
                        f"Reduce {money(wants_total - incomes * 0.3)} en "
                        "entretenimiento, ropa o viajes."
                    ),
                )
            )

    # Zero-based budget
    if incomes > 0:
        unassigned = incomes - expenses - contributions
        if unassigned > incomes * 0.1:
            recs.append(
                Recommendation(
                    id="zero-budget",
                    method="Presupuesto Base Cero",
                    icon="📋",
                    title="Dinero sin asignar",
                    description=(
                        f"Tienes {money(unassigned)} sin destino claro. En el "
                        "presupuesto base cero, cada peso debe tener un propósito."
                    ),
                    type=RecommendationType.TIP,
                    priority=3,
                    actionable=(
                        "Asigna ese dinero a ahorro, inversión o un fondo de emergencia."
                    ),
                )
            )

    # Emergency fund: exactly one tier fires
    if monthly_expenses > 0:
        months_covered = contributions / monthly_expenses
        missing = monthly_expenses * 3 - contributions
        if months_covered < 1:
            recs.append(
                Recommendation(
                    id="emergency-critical",
                    method="Fondo de Emergencia",
                    icon="🚨",
                    title="Sin fondo de emergencia",
                    description=(
                        f"Solo cubres {half_up(months_covered * 30)} días de gastos. "
                        "Lo recomendado es 3-6 meses."
                    ),
                    type=RecommendationType.WARNING,
                    priority=1,
                    actionable=f"Ahorra {money(missing)} para cubrir 3 meses.",
                )
            )
        elif months_covered < 3:
            recs.append(
                Recommendation(
                    id="emergency-building",
                    method="Fondo de Emergencia",
                    icon="🛡️",
                    title="Fondo en construcción",
                    description=(
                        f"Cubres {half_up(months_covered, 1)} meses de gastos. Faltan "
                        f"{half_up(3 - months_covered, 1)} meses más."
                    ),
                    type=RecommendationType.TIP,
                    priority=3,
                    actionable=(
                        f"Aporta {money(missing / 6)} mensuales para alcanzar "
                        "3 meses en 6 meses."
                    ),
                )
            )
        else:
            recs.append(
                Recommendation(
                    id="emergency-solid",
                    method="Fondo de Emergencia",
                    icon="✅",
                    title="Fondo de emergencia sólido",
                    description=(
                        f"Cubres {half_up(months_covered, 1)} meses de gastos. "
                        "¡Excelente protección!"
                    ),
                    type=RecommendationType.SUCCESS,
                    priority=7,
                    actionable=(
                        "Sigue hasta 6 meses para máxima seguridad."
                        if months_covered < 6
                        else "Considera invertir el excedente."
                    ),
                )
            )

    # 24/48 hour rule
    wants_total = _sum_categories(totals, WANTS_CATEGORIES)
    has_wants = any(name in WANTS_CATEGORIES for name in totals)
    if has_wants and incomes > 0 and wants_total > incomes * 0.35:
        recs.append(
            Recommendation(
                id="impulse-control",
                method="Regla 24/48 horas",
                icon="⏰",
                title="Posibles compras impulsivas",
                description=(
                    f"Tus gastos en deseos son altos ({half_up(wants_total * 100 / incomes)}%). "
                    "Antes de comprar algo no esencial, espera 24-48 horas."
                ),
                type=RecommendationType.TIP,
                priority=3,
                actionable=(
                    "Antes de cada compra no esencial, pregúntate: ¿Lo necesito o "
                    "lo quiero? Espera 24h antes de decidir."
                ),
            )
        )

    # Compound interest projection
    if contributions > 0 and data.savings_rate > 0:
        monthly_saving = incomes * float(data.savings_rate) / 100
        projected = future_value(
            contributions, monthly_saving, COMPOUND_ANNUAL_RATE, PROJECTION_MONTHS
        )
        recs.append(
            Recommendation(
                id="compound-interest",
                method="Interés Compuesto",
                icon="📈",
                title="Proyección a 1 año",
                description=(
                    "Si mantienes tu ritmo actual de ahorro, en 12 meses podrías "
                    f"tener ~{money(projected)} (estimando 8% anual)."
                ),
                type=RecommendationType.INSIGHT,
                priority=5,
                actionable=(
                    f"Aumenta tu ahorro mensual en un 10% ({money(monthly_saving * 0.1)}) "
                    "para acelerar tus resultados."
                ),
            )
        )

    # Envelope system
    if incomes > 0 and expenses > 0 and len(totals) >= 3:
        ranked = top_categories(totals, limit=1, exclude=(SAVINGS_CATEGORY,))
        if ranked:
            top_name, top_amount = ranked[0]
            top_pct = top_amount * 100 / expenses
            if top_pct > 35:
                recs.append(
                    Recommendation(
                        id="envelope-system",
                        method="Sistema de Sobres",
                        icon="✉️",
                        title=f"Controla tu gasto en {top_name}",
                        description=(
                            f"{top_name} representa el {half_up(top_pct)}% de tus gastos. "
                            'Asigna un "sobre" con límite fijo.'
                        ),
                        type=RecommendationType.TIP,
                        priority=4,
                        actionable=(
                            f"Asigna máximo {money(top_amount * 0.8)} mensuales para "
                            f"{top_name} y no lo excedas."
                        ),
                    )
                )

    return by_priority(recs)


def merge_recommendations(
    *groups: Iterable[Recommendation],
) -> list[Recommendation]:
    """Merge recommendation lists into one ranked, duplicate-free list.

    The groups are concatenated in argument order, stably sorted by priority,
    and only the first recommendation for each id is kept.
    """
    combined = [rec for group in groups for rec in group]
    seen: set[str] = set()
    merged = []
    for rec in by_priority(combined):
        if rec.id in seen:
            continue
        seen.add(rec.id)
        merged.append(rec)
    return merged
