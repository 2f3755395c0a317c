"""Tests for the recommendation engines and merge pipeline."""

from decimal import Decimal

import pytest

from finscore.domain.entities import FinancialSnapshot, Recommendation, RecommendationType
from finscore.domain.recommendations import (
    future_value,
    generate_method_recommendations,
    generate_recommendations,
    merge_recommendations,
    money,
)
from finscore.domain.score import half_up


def _ids(recommendations):
    return [rec.id for rec in recommendations]


def _snapshot(**overrides):
    params = dict(
        incomes=1000.0,
        expenses=0.0,
        savings_rate=0.0,
        total_contributions=0.0,
        goal=None,
        expense_by_category={},
        monthly_expenses=0.0,
        transaction_count=1,
    )
    params.update(overrides)
    return FinancialSnapshot(**params)


@pytest.fixture
def overspender(make_transaction):
    """Income of 1000 with 600 on food and 200 on entertainment."""
    return [
        make_transaction("income", 1000, "Salario"),
        make_transaction("expense", 600, "Comida"),
        make_transaction("expense", 200, "Entretenimiento"),
    ]


class TestGeneralRecommendations:
    """Tests for generate_recommendations."""

    def test_no_transactions_gives_only_no_data(self):
        recs = generate_recommendations([], 5000, 100, 0, 0, 0)
        assert _ids(recs) == ["no-data"]
        assert recs[0].priority == 0

    def test_overspender(self, overspender):
        recs = generate_recommendations(overspender, None, 0, 0, 1000, 800)
        assert _ids(recs) == [
            "rule-502030",
            "low-savings",
            "food-high",
            "top-category",
            "entertainment-high",
            "no-goal",
        ]
        assert [rec.priority for rec in recs] == sorted(rec.priority for rec in recs)

    def test_healthy_balance(self, make_transaction):
        transactions = [
            make_transaction("income", 1000, "Salario"),
            make_transaction("expense", 50, "Comida"),
            make_transaction("expense", 250, "Ahorro"),
        ]
        recs = generate_recommendations(transactions, None, 250, 0, 1000, 300)
        ids = _ids(recs)
        assert "great-balance" in ids
        assert "good-savings" in ids
        assert "high-expenses" not in ids
        assert "low-savings" not in ids

    def test_high_expenses(self, make_transaction):
        transactions = [
            make_transaction("income", 1000, "Salario"),
            make_transaction("expense", 950, "Hogar"),
        ]
        assert "high-expenses" in _ids(generate_recommendations(transactions, None, 0, 0, 1000, 950))

    def test_top_category_ignores_savings(self, make_transaction):
        transactions = [
            make_transaction("income", 1000, "Salario"),
            make_transaction("expense", 500, "Ahorro"),
            make_transaction("expense", 100, "Transporte"),
        ]
        recs = generate_recommendations(transactions, None, 500, 0, 1000, 600)
        top = next(rec for rec in recs if rec.id == "top-category")
        assert top.title == "Mayor gasto: Transporte"

    def test_top_category_share_rounds_half_up(self, make_transaction):
        transactions = [
            make_transaction("income", 1000, "Salario"),
            make_transaction("expense", 81, "Hogar"),
            make_transaction("expense", 60, "Comida"),
            make_transaction("expense", 59, "Ropa"),
        ]
        recs = generate_recommendations(transactions, None, 0, 0, 1000, 200)
        top = next(rec for rec in recs if rec.id == "top-category")
        assert top.description.startswith("El 41% de tus gastos van a Hogar ($81).")
        assert "diversificar" in top.description

    @pytest.mark.parametrize(
        "contributions,expected",
        [(1000, "goal-reached"), (600, "goal-halfway"), (100, "goal-push")],
    )
    def test_goal_progress(self, make_transaction, contributions, expected):
        transactions = [make_transaction("expense", contributions, "Ahorro")]
        ids = _ids(generate_recommendations(transactions, 1000, contributions, 0, 0, contributions))
        assert expected in ids
        assert "no-goal" not in ids


class TestMethodRecommendations:
    """Tests for generate_method_recommendations."""

    def test_empty_snapshot(self):
        assert generate_method_recommendations(_snapshot(transaction_count=0)) == []

    def test_overspender(self):
        recs = generate_method_recommendations(
            _snapshot(
                expenses=800.0,
                expense_by_category={"Comida": 600.0, "Entretenimiento": 200.0},
                monthly_expenses=800.0,
                transaction_count=3,
            )
        )
        assert _ids(recs) == ["503020-needs", "emergency-critical", "zero-budget"]
        assert all(rec.actionable for rec in recs)
        assert recs[0].method == "Regla 50/30/20"

    @pytest.mark.parametrize(
        "contributions,expected",
        [(100.0, "emergency-critical"), (1000.0, "emergency-building"), (2000.0, "emergency-solid")],
    )
    def test_emergency_tiers(self, contributions, expected):
        recs = generate_method_recommendations(
            _snapshot(
                expenses=500.0,
                total_contributions=contributions,
                monthly_expenses=500.0,
            )
        )
        tiers = [rec.id for rec in recs if rec.id.startswith("emergency-")]
        assert tiers == [expected]

    def test_no_emergency_advice_without_expenses(self):
        recs = generate_method_recommendations(_snapshot(total_contributions=100.0))
        assert not [rec for rec in recs if rec.id.startswith("emergency-")]

    def test_impulse_control(self):
        recs = generate_method_recommendations(
            _snapshot(expenses=400.0, expense_by_category={"Viajes": 400.0})
        )
        assert "impulse-control" in _ids(recs)
        assert "503020-wants" in _ids(recs)

    def test_compound_interest(self):
        recs = generate_method_recommendations(
            _snapshot(total_contributions=100.0, savings_rate=10.0)
        )
        compound = next(rec for rec in recs if rec.id == "compound-interest")
        assert compound.type == RecommendationType.INSIGHT
        assert compound.priority == 5

    def test_envelope_system(self):
        recs = generate_method_recommendations(
            _snapshot(
                expenses=600.0,
                expense_by_category={"Comida": 400.0, "Ropa": 100.0, "Hogar": 100.0},
            )
        )
        envelope = next(rec for rec in recs if rec.id == "envelope-system")
        assert envelope.title == "Controla tu gasto en Comida"


class TestMerge:
    """Tests for merge_recommendations."""

    def test_empty_transactions_merge_to_no_data(self):
        general = generate_recommendations([], None, 0, 0, 0, 0)
        method = generate_method_recommendations(_snapshot(incomes=0.0, transaction_count=0))
        assert _ids(merge_recommendations(general, method)) == ["no-data"]

    def test_dedup_keeps_first_instance(self):
        first = Recommendation(id="x", type=RecommendationType.TIP, title="first", description="", priority=2)
        second = Recommendation(id="x", type=RecommendationType.TIP, title="second", description="", priority=2)
        other = Recommendation(id="y", type=RecommendationType.TIP, title="y", description="", priority=1)

        merged = merge_recommendations([first, other], [second])

        assert _ids(merged) == ["y", "x"]
        assert merged[1].title == "first"

    def test_lower_priority_duplicate_wins_after_sort(self):
        late = Recommendation(id="x", type=RecommendationType.TIP, title="late", description="", priority=5)
        early = Recommendation(id="x", type=RecommendationType.TIP, title="early", description="", priority=1)
        assert merge_recommendations([late], [early])[0].title == "early"

    def test_overspender_merge(self, overspender):
        general = generate_recommendations(overspender, None, 0, 0, 1000, 800)
        method = generate_method_recommendations(
            _snapshot(
                expenses=800.0,
                expense_by_category={"Comida": 600.0, "Entretenimiento": 200.0},
                monthly_expenses=800.0,
                transaction_count=3,
            )
        )
        assert _ids(merge_recommendations(general, method)) == [
            "rule-502030",
            "503020-needs",
            "emergency-critical",
            "low-savings",
            "food-high",
            "zero-budget",
            "top-category",
            "entertainment-high",
            "no-goal",
        ]

    def test_generators_are_repeatable(self, overspender):
        snapshot = _snapshot(
            expenses=800.0,
            expense_by_category={"Comida": 600.0, "Entretenimiento": 200.0},
            monthly_expenses=800.0,
            transaction_count=3,
        )
        general = [generate_recommendations(overspender, 2000, 300, 50, 1000, 800) for _ in range(2)]
        method = [generate_method_recommendations(snapshot) for _ in range(2)]

        assert general[0] == general[1]
        assert method[0] == method[1]
        assert merge_recommendations(general[0], method[0]) == merge_recommendations(
            general[1], method[1]
        )
        assert snapshot.expense_by_category == {"Comida": 600.0, "Entretenimiento": 200.0}


class TestHelpers:
    """Tests for formatting and projection helpers."""

    def test_money(self):
        assert money(1234.5) == "$1,235"
        assert money(1234.4) == "$1,234"
        assert money(1235.5) == "$1,236"

    def test_half_up(self):
        assert half_up(40.5) == 41
        assert half_up(6.25, 1) == Decimal("6.3")
        assert str(half_up(20.0, 1)) == "20.0"

    def test_future_value_without_rate(self):
        assert future_value(100, 10, 0, 12) == 220
