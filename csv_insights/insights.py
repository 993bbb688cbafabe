import math
from typing import Dict, List

from .constants import HIGH_VARIABILITY_CV
from .formatting import fmt_number
from .models import NumericColumnProfile, CategoricalColumnProfile, FinancialInsights


def coefficient_of_variation(stats: NumericColumnProfile):
    """CV in percent from the reported std_dev and mean.

    None for an empty or constant column; a zero mean with any spread is
    unbounded (inf).
    """
    if not stats.count or not stats.std_dev:
        return None
    if not stats.mean:
        return math.inf
    return stats.std_dev / stats.mean * 100


def synthesize_insights(
    numeric_analysis: Dict[str, NumericColumnProfile],
    categorical_analysis: Dict[str, CategoricalColumnProfile],
    financial: FinancialInsights,
) -> List[str]:
    insights = []

    # numeric
    for col, stats in numeric_analysis.items():
        if stats.outliers:
            insights.append(f"{col}: {len(stats.outliers)} outlier(s) detected")
        cv = coefficient_of_variation(stats)
        if cv is not None and cv > HIGH_VARIABILITY_CV:
            insights.append(f"{col}: High variability detected (CV: {cv:.1f}%)")

    # categorical
    for col, stats in categorical_analysis.items():
        if stats.unique_values == 1:
            insights.append(f"{col}: All values are identical ({stats.most_frequent})")

    # financial
    insights.extend(financial.anomaly_summary)
    if financial.high_value_entries:
        top_value = financial.high_value_entries[0].value
        insights.append(f"Highest transaction: {fmt_number(top_value)}")

    return insights
