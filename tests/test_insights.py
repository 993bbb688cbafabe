"""
Tests for the plain-English insight list.
"""
import math

from csv_insights.insights import synthesize_insights, coefficient_of_variation
from csv_insights.models import (
    CategoricalColumnProfile,
    FinancialInsights,
    HighValueEntry,
    NumericColumnProfile,
    Outlier,
)


def numeric(mean, std_dev, outliers=()):
    return NumericColumnProfile(count=10, sum=mean * 10, mean=mean, std_dev=std_dev, outliers=list(outliers))


class TestSynthesizeInsights:

    def test_fixed_rule_order(self):
        num = {
            "amount": numeric(100, 80, [Outlier(3, 900.0, "z-score")]),
            "qty": numeric(10, 1),
        }
        cat = {
            "currency": CategoricalColumnProfile(unique_values=1, distribution={"EUR": 4}, most_frequent="EUR", least_frequent="EUR"),
            "vendor": CategoricalColumnProfile(unique_values=2),
        }
        fin = FinancialInsights(
            high_value_entries=[HighValueEntry(3, 900.0), HighValueEntry(1, 120.5)],
            anomaly_summary=["Row 3: Unusual amount of 900 (2.7σ from mean)"],
        )

        assert synthesize_insights(num, cat, fin) == [
            "amount: 1 outlier(s) detected",
            "amount: High variability detected (CV: 80.0%)",
            "currency: All values are identical (EUR)",
            "Row 3: Unusual amount of 900 (2.7σ from mean)",
            "Highest transaction: 900",
        ]

    def test_nothing_to_report(self):
        assert synthesize_insights({"x": numeric(10, 1)}, {}, FinancialInsights()) == []

    def test_zero_mean_column_reported_as_unbounded(self):
        num = {"delta": NumericColumnProfile(count=4, sum=0.0, mean=0.0, std_dev=100.0)}

        assert synthesize_insights(num, {}, FinancialInsights()) == [
            "delta: High variability detected (CV: inf%)",
        ]

    def test_fractional_highest_transaction(self):
        fin = FinancialInsights(high_value_entries=[HighValueEntry(0, 12.75)])

        assert synthesize_insights({}, {}, fin) == ["Highest transaction: 12.75"]


class TestCoefficientOfVariation:

    def test_zero_mean_with_spread_is_unbounded(self):
        assert coefficient_of_variation(numeric(0, 5)) == math.inf

    def test_constant_column_is_undefined(self):
        assert coefficient_of_variation(numeric(0, 0)) is None

    def test_empty_column_is_undefined(self):
        assert coefficient_of_variation(NumericColumnProfile(count=0, sum=0.0)) is None

    def test_negative_mean_never_high(self):
        assert coefficient_of_variation(numeric(-10, 20)) == -200
