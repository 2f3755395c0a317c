"""Budget method catalog and bucket spending calculation."""

from typing import Mapping, Optional

from finscore.domain.entities import BucketResult, BudgetBucket, BudgetMethod

NEEDS_CATEGORIES = frozenset(
    ["Comida", "Transporte", "Hogar", "Salud", "Servicios", "Educación"]
)
WANTS_CATEGORIES = frozenset(["Entretenimiento", "Ropa", "Viajes"])
SAVINGS_CATEGORIES = frozenset(["Ahorro"])


def _bucket(name, percentage, categories, color, icon) -> BudgetBucket:
    return BudgetBucket(
        name=name,
        percentage=percentage,
        match_categories=frozenset(categories),
        color=color,
        icon=icon,
    )


BUDGET_METHODS: tuple[BudgetMethod, ...] = (
    BudgetMethod(
        id="50-30-20",
        name="Regla 50/30/20",
        icon="📊",
        short_description="Divide ingresos en necesidades, deseos y ahorro",
        description=(
            "Popularizada por Elizabeth Warren, esta regla divide tus ingresos "
            "después de impuestos: 50% para necesidades esenciales, 30% para "
            "deseos y 20% para ahorro e inversión."
        ),
        origin="Elizabeth Warren – All Your Worth (2005)",
        buckets=(
            _bucket("Necesidades", 50, NEEDS_CATEGORIES, "info", "🏠"),
            _bucket("Deseos", 30, WANTS_CATEGORIES, "warning", "🎭"),
            _bucket("Ahorro", 20, SAVINGS_CATEGORIES, "success", "💰"),
        ),
        tips=(
            "Si tus necesidades superan el 50%, revisa suscripciones y servicios innecesarios.",
            "Los deseos son flexibles: aquí puedes recortar primero.",
            "El 20% de ahorro incluye fondo de emergencia, inversiones y pago de deudas.",
        ),
    ),
    BudgetMethod(
        id="kakeibo",
        name="Kakeibo",
        icon="📓",
        short_description="Método japonés de ahorro consciente",
        description=(
            "Kakeibo (家計簿) es un método japonés centenario que promueve el "
            "ahorro consciente mediante la reflexión. Clasifica gastos en 4 "
            "pilares: supervivencia, opcional, cultura y extras."
        ),
        origin="Hani Motoko – Japón (1904)",
        buckets=(
            _bucket(
                "Supervivencia",
                0,
                ["Comida", "Transporte", "Hogar", "Salud", "Servicios"],
                "info",
                "🍚",
            ),
            _bucket("Opcional", 0, ["Entretenimiento", "Ropa"], "warning", "🍰"),
            _bucket("Cultura", 0, ["Educación"], "primary", "📚"),
            _bucket("Extras", 0, ["Viajes"], "destructive", "🎁"),
        ),
        tips=(
            "Al inicio de cada mes, pregúntate: ¿Cuánto dinero tengo? ¿Cuánto quiero ahorrar?",
            "Registra cada gasto a mano para tomar conciencia de tus hábitos.",
            "Al final del mes, reflexiona: ¿Cumplí mi meta? ¿Qué puedo mejorar?",
            "Kakeibo no fija porcentajes: la clave es la reflexión y el compromiso personal.",
        ),
    ),
    BudgetMethod(
        id="zero-based",
        name="Presupuesto Base Cero",
        icon="🎯",
        short_description="Cada peso tiene un propósito asignado",
        description=(
            "En el presupuesto base cero, tus ingresos menos todos tus gastos "
            "asignados deben ser exactamente $0. Cada peso se destina a una "
            "categoría específica antes de gastarlo."
        ),
        origin="Dave Ramsey / Peter Pyhrr (1970s)",
        buckets=(
            _bucket("Vivienda y servicios", 25, ["Hogar", "Servicios"], "info", "🏠"),
            _bucket("Alimentación", 15, ["Comida"], "success", "🍽️"),
            _bucket("Transporte", 10, ["Transporte"], "warning", "🚗"),
            _bucket("Salud y educación", 10, ["Salud", "Educación"], "primary", "🩺"),
            _bucket(
                "Entretenimiento y personal",
                10,
                WANTS_CATEGORIES,
                "accent",
                "🎬",
            ),
            _bucket("Ahorro e inversión", 20, SAVINGS_CATEGORIES, "success", "📈"),
            _bucket("Libre asignación", 10, ["Otros"], "muted", "🔧"),
        ),
        tips=(
            "Asigna cada peso de tu ingreso ANTES de que empiece el mes.",
            "Si sobra dinero en una categoría, reasígnalo a otra.",
            "Revisa y ajusta tu presupuesto cada semana.",
            "Lo importante es que Ingresos - Gastos Asignados = $0.",
        ),
    ),
    BudgetMethod(
        id="envelope",
        name="Sistema de Sobres",
        icon="✉️",
        short_description="Asigna efectivo a sobres por categoría",
        description=(
            "El sistema de sobres divide tu dinero en sobres físicos o "
            "virtuales, uno por cada categoría de gasto. Cuando un sobre se "
            "vacía, no puedes gastar más en esa categoría hasta el próximo mes."
        ),
        origin="Tradición popular – Siglo XX",
        buckets=(
            _bucket("Comida", 20, ["Comida"], "success", "🍽️"),
            _bucket("Transporte", 10, ["Transporte"], "info", "🚗"),
            _bucket("Hogar y servicios", 30, ["Hogar", "Servicios"], "primary", "🏠"),
            _bucket("Entretenimiento", 10, WANTS_CATEGORIES, "warning", "🎬"),
            _bucket(
                "Salud y educación", 10, ["Salud", "Educación"], "destructive", "🩺"
            ),
            _bucket("Ahorro", 20, SAVINGS_CATEGORIES, "success", "💰"),
        ),
        tips=(
            "Cuando un sobre se vacía, NO tomes de otro sobre.",
            "Si sobra dinero en un sobre, pásalo a ahorro.",
            "Revisa tus sobres cada semana para no quedarte sin fondos.",
            "Este método es ideal si tiendes a gastar de más en ciertas categorías.",
        ),
    ),
    BudgetMethod(
        id="80-20",
        name="Regla 80/20",
        icon="⚡",
        short_description="Ahorra primero el 20%, gasta el resto libre",
        description=(
            "La versión simplificada: ahorra automáticamente el 20% de tus "
            "ingresos y usa el 80% restante sin restricciones. Ideal si no "
            "quieres rastrear cada categoría."
        ),
        origin="Principio de Pareto aplicado a finanzas",
        buckets=(
            _bucket(
                "Gastos libres",
                80,
                NEEDS_CATEGORIES | WANTS_CATEGORIES | {"Otros"},
                "info",
                "💳",
            ),
            _bucket("Ahorro primero", 20, SAVINGS_CATEGORIES, "success", "🏦"),
        ),
        tips=(
            "Automatiza el ahorro: transfiere el 20% el día que recibes tu ingreso.",
            "No te preocupes por categorías del 80%: la clave es ahorrar primero.",
            "Si puedes, aumenta gradualmente al 25% o 30%.",
        ),
    ),
    BudgetMethod(
        id="60-20-20",
        name="Regla 60/20/20",
        icon="📐",
        short_description="60% gastos fijos, 20% metas, 20% flexible",
        description=(
            "Divide tus ingresos en 60% para gastos fijos y compromisos, 20% "
            "para metas financieras (ahorro, inversión, deudas) y 20% para "
            "gastos flexibles y diversión."
        ),
        origin="Variante moderna de presupuesto por porcentajes",
        buckets=(
            _bucket("Gastos fijos", 60, NEEDS_CATEGORIES, "info", "📌"),
            _bucket("Metas financieras", 20, SAVINGS_CATEGORIES, "success", "🎯"),
            _bucket(
                "Gastos flexibles",
                20,
                WANTS_CATEGORIES | {"Otros"},
                "warning",
                "🎉",
            ),
        ),
        tips=(
            "Los gastos fijos incluyen todo lo que NO puedes evitar pagar.",
            "Las metas financieras son tu futuro: priorízalas antes de los flexibles.",
            "Si tus fijos superan el 60%, busca reducir renta, servicios o transporte.",
        ),
    ),
    BudgetMethod(
        id="70-20-10",
        name="Regla 70/20/10",
        icon="🧮",
        short_description="70% para vivir, 20% ahorro, 10% deudas o donaciones",
        description=(
            "Destina el 70% de tus ingresos a gastos de vida, el 20% a ahorro "
            "e inversión y el 10% restante a pagar deudas o a donaciones."
        ),
        origin="Variante de presupuesto por porcentajes",
        buckets=(
            _bucket(
                "Gastos de vida",
                70,
                NEEDS_CATEGORIES | WANTS_CATEGORIES,
                "info",
                "🏠",
            ),
            _bucket("Ahorro e inversión", 20, SAVINGS_CATEGORIES, "success", "💰"),
            _bucket("Deudas y donaciones", 10, ["Otros"], "warning", "🤝"),
        ),
        tips=(
            "Si tienes deudas con interés alto, usa el 10% para pagarlas primero.",
            "Cuando no tengas deudas, ese 10% puede ir a donaciones o a más ahorro.",
            "Revisa cada mes que tus gastos de vida no pasen del 70%.",
        ),
    ),
)

_METHODS_BY_ID = {method.id: method for method in BUDGET_METHODS}


def normalize_method_id(method_id: str) -> str:
    """Normalize a method id or label, e.g. '50/30/20' -> '50-30-20'."""
    normalized = method_id.strip().lower()
    for separator in ("/", " ", "_"):
        normalized = normalized.replace(separator, "-")
    return normalized


def list_methods() -> tuple[BudgetMethod, ...]:
    """Return the full method catalog in display order."""
    return BUDGET_METHODS


def get_method_by_id(method_id: Optional[str]) -> Optional[BudgetMethod]:
    """Look up a budget method.

    Args:
        method_id: Method id such as "50-30-20"; "50/30/20" and "Zero-Based"
            style labels are accepted too

    Returns:
        BudgetMethod, or None when no method is selected or the id is unknown
    """
    if not method_id:
        return None
    return _METHODS_BY_ID.get(normalize_method_id(method_id))


def has_fixed_allocations(method: BudgetMethod) -> bool:
    """Whether any bucket of the method prescribes a share of income."""
    return any(bucket.percentage > 0 for bucket in method.buckets)


def calculate_bucket_spending(
    method: BudgetMethod,
    expense_by_category: Mapping[str, float],
    incomes: float,
) -> list[BucketResult]:
    """Measure categorized spending against each bucket of a method.

    Categories not matched by any bucket are ignored. A bucket without a
    fixed percentage has a limit of 0 and reports 0% used.

    Args:
        method: Budget method to evaluate
        expense_by_category: Expense total per category name
        incomes: Total income the percentages apply to

    Returns:
        One BucketResult per bucket, in the method's bucket order
    """
    results = []
    for bucket in method.buckets:
        spent = sum(
            float(expense_by_category.get(category, 0))
            for category in sorted(bucket.match_categories)
        )
        limit = float(incomes) * bucket.percentage / 100 if bucket.percentage > 0 else 0.0
        percentage_used = spent * 100 / limit if limit > 0 else 0.0
        results.append(
            BucketResult(
                bucket=bucket,
                spent=spent,
                limit=limit,
                percentage_used=percentage_used,
            )
        )
    return results
