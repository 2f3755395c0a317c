"""Tests for the budget method catalog and bucket spending."""

import pytest

from finscore.domain.methods import (
    BUDGET_METHODS,
    calculate_bucket_spending,
    get_method_by_id,
    has_fixed_allocations,
    list_methods,
    normalize_method_id,
)


class TestCatalog:
    """Tests for the method registry."""

    def test_seven_methods_with_unique_ids(self):
        ids = [method.id for method in list_methods()]
        assert len(ids) == 7
        assert len(set(ids)) == 7
        assert ids[:2] == ["50-30-20", "kakeibo"]

    def test_percentages_within_range(self):
        for method in BUDGET_METHODS:
            for bucket in method.buckets:
                assert 0 <= bucket.percentage <= 100

    def test_fixed_allocation_methods_sum_to_hundred(self):
        for method in BUDGET_METHODS:
            if has_fixed_allocations(method):
                assert sum(b.percentage for b in method.buckets) == 100, method.id

    def test_lookup(self):
        assert get_method_by_id("kakeibo").name
        assert get_method_by_id("50/30/20").id == "50-30-20"
        assert get_method_by_id("Zero_Based").id == "zero-based"

    @pytest.mark.parametrize("method_id", [None, "", "unknown"])
    def test_unknown_or_missing_id_returns_none(self, method_id):
        assert get_method_by_id(method_id) is None

    def test_normalize_method_id(self):
        assert normalize_method_id(" 60/20/20 ") == "60-20-20"


class TestBucketSpending:
    """Tests for calculate_bucket_spending."""

    def test_503020_buckets(self):
        method = get_method_by_id("50-30-20")
        expenses = {"Comida": 300.0, "Hogar": 250.0, "Ropa": 330.0, "Ahorro": 100.0, "Otros": 999.0}

        needs, wants, savings = calculate_bucket_spending(method, expenses, 1000)

        assert needs.spent == 550
        assert needs.limit == 500
        assert needs.percentage_used == 110
        assert needs.is_over_budget
        assert wants.spent == 330
        assert wants.limit == 300
        assert wants.is_over_budget
        assert savings.spent == 100
        assert savings.limit == 200
        assert savings.percentage_used == 50
        assert not savings.is_over_budget

    def test_spent_equal_to_limit_is_not_over(self):
        method = get_method_by_id("50-30-20")
        needs = calculate_bucket_spending(method, {"Comida": 100.0}, 200)[0]
        assert needs.percentage_used == 100
        assert not needs.is_over_budget

    def test_spent_110_of_100(self):
        method = get_method_by_id("80-20")
        savings = [b for b in calculate_bucket_spending(method, {"Ahorro": 110.0}, 500)
                   if b.bucket.name == "Ahorro primero"][0]
        assert savings.limit == 100
        assert savings.percentage_used == 110
        assert savings.is_over_budget

    def test_kakeibo_has_no_limits(self):
        method = get_method_by_id("kakeibo")
        expenses = {"Comida": 500.0, "Ropa": 200.0, "Educación": 50.0, "Viajes": 900.0}
        results = calculate_bucket_spending(method, expenses, 1000)
        assert len(results) == len(method.buckets)
        for result in results:
            assert result.limit == 0
            assert result.percentage_used == 0
            assert not result.is_over_budget
        assert sum(r.spent for r in results) == 1650

    def test_zero_income_gives_zero_usage(self):
        method = get_method_by_id("envelope")
        for result in calculate_bucket_spending(method, {"Comida": 80.0}, 0):
            assert result.limit == 0
            assert result.percentage_used == 0
