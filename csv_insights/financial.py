from typing import List, Optional
import logging
import math

import numpy as np
import pandas as pd

from .constants import (
    ANOMALY_ZSCORE_THRESHOLD,
    HIGH_VALUE_FRACTION,
    MISSING_RECEIPT_VALUES,
)
from .errors import DEGENERATE_STATISTIC
from .formatting import fmt_number
from .models import Dataset, ColumnClassification, FinancialInsights, HighValueEntry
from .schema import infer_column_roles
from .utils import safe_float

log = logging.getLogger("csv_insights.financial")


class FinancialInsightEngine:
    """Heuristic spend summary over the first amount-like column.

    Columns are found by name: the amount column is the first header that
    mentions amount, cost, price or expense; the category column is the first
    categorical header mentioning category or type. Without an amount column
    only the missing-receipt check runs.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.log = logger or log

    def compute(self, dataset: Dataset, classification: ColumnClassification) -> FinancialInsights:
        res = FinancialInsights()
        df = dataset.frame
        roles = infer_column_roles(dataset, classification)
        res.amount_column = roles.get('amount')
        res.category_column = roles.get('category')
        res.receipt_column = roles.get('receipt')

        if res.amount_column:
            amounts = self._amounts(df, res.amount_column)
            res.high_value_entries = self.high_value_entries(amounts)
            if res.category_column:
                res.category_wise_totals = self.category_totals(df[res.category_column], amounts)
            res.anomaly_summary.extend(self.amount_anomalies(amounts, res.amount_column))
        else:
            self.log.debug("No amount column found, skipping amount heuristics")

        if res.receipt_column:
            missing = self.missing_receipts(df[res.receipt_column])
            if missing > 0:
                res.anomaly_summary.append(f"{missing} transactions missing receipts")

        return res

    @staticmethod
    def _amounts(df: pd.DataFrame, column: str) -> pd.Series:
        # index is the filtered row index
        return df[column].map(safe_float).dropna().astype(float)

    @staticmethod
    def high_value_entries(amounts: pd.Series) -> List[HighValueEntry]:
        if amounts.empty:
            return []
        top_n = int(math.ceil(len(amounts) * HIGH_VALUE_FRACTION))
        ranked = amounts.sort_values(ascending=False, kind='stable').head(top_n)
        return [HighValueEntry(row_index=int(i), value=float(v)) for i, v in ranked.items()]

    @staticmethod
    def category_totals(categories: pd.Series, amounts: pd.Series) -> dict:
        frame = pd.DataFrame({'category': categories.loc[amounts.index], 'amount': amounts})
        frame = frame[frame['category'].astype(bool)]
        if frame.empty:
            return {}
        totals = frame.groupby('category', sort=False)['amount'].sum()
        return {str(k): round(float(v), 2) for k, v in totals.items()}

    def amount_anomalies(self, amounts: pd.Series, column: str) -> List[str]:
        if amounts.empty:
            return []
        values = amounts.to_numpy()
        mean = float(values.mean())
        std = float(np.sqrt(np.mean((values - mean) ** 2)))
        if std == 0:
            self.log.debug(f"{DEGENERATE_STATISTIC}: amounts in '{column}' are constant, anomaly rule skipped")
            return []

        out = []
        for idx, v in amounts.items():
            z = abs(v - mean) / std
            if z > ANOMALY_ZSCORE_THRESHOLD:
                out.append(f"Row {int(idx)}: Unusual {column} of {fmt_number(v)} ({z:.1f}σ from mean)")
        return out

    @staticmethod
    def missing_receipts(receipts: pd.Series) -> int:
        return int(receipts.map(lambda v: (v or '') in MISSING_RECEIPT_VALUES).sum())
