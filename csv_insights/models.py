from dataclasses import dataclass, field, asdict
from typing import Dict, Any, List, Optional

import pandas as pd


@dataclass
class Dataset:
    headers: List[str]
    rows: List[Dict[str, str]]
    frame: pd.DataFrame
    warnings: List[str] = field(default_factory=list)

    @property
    def columns(self) -> List[str]:
        """Distinct headers in header order."""
        return list(dict.fromkeys(self.headers))


@dataclass
class ColumnClassification:
    numeric: List[str] = field(default_factory=list)
    categorical: List[str] = field(default_factory=list)
    date: List[str] = field(default_factory=list)


@dataclass
class Outlier:
    row_index: int
    value: float
    method: str  # "z-score" or "iqr"


@dataclass
class NumericColumnProfile:
    count: int
    sum: float
    mean: Optional[float] = None
    median: Optional[float] = None
    min: Optional[float] = None
    max: Optional[float] = None
    range: Optional[float] = None
    variance: Optional[float] = None
    std_dev: Optional[float] = None
    quartiles: Dict[str, Optional[float]] = field(default_factory=dict)
    iqr: Optional[float] = None
    outliers: List[Outlier] = field(default_factory=list)


@dataclass
class CategoricalColumnProfile:
    unique_values: int
    distribution: Dict[str, int] = field(default_factory=dict)
    most_frequent: Optional[str] = None
    least_frequent: Optional[str] = None


@dataclass
class HighValueEntry:
    row_index: int
    value: float


@dataclass
class FinancialInsights:
    high_value_entries: List[HighValueEntry] = field(default_factory=list)
    category_wise_totals: Dict[str, float] = field(default_factory=dict)
    anomaly_summary: List[str] = field(default_factory=list)
    amount_column: Optional[str] = None
    category_column: Optional[str] = None
    receipt_column: Optional[str] = None


@dataclass
class DatasetSummary:
    total_rows: int
    numeric_columns: List[str] = field(default_factory=list)
    categorical_columns: List[str] = field(default_factory=list)
    date_columns: List[str] = field(default_factory=list)


@dataclass
class AnalysisResult:
    dataset_summary: DatasetSummary
    numeric_analysis: Dict[str, NumericColumnProfile] = field(default_factory=dict)
    categorical_analysis: Dict[str, CategoricalColumnProfile] = field(default_factory=dict)
    financial_insights: FinancialInsights = field(default_factory=FinancialInsights)
    overall_insights: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        fin = self.financial_insights
        return {
            'dataset_summary': asdict(self.dataset_summary),
            'numeric_analysis': {c: asdict(p) for c, p in self.numeric_analysis.items()},
            'categorical_analysis': {c: asdict(p) for c, p in self.categorical_analysis.items()},
            'financial_insights': {
                'high_value_entries': [asdict(e) for e in fin.high_value_entries],
                'category_wise_totals': dict(fin.category_wise_totals),
                'anomaly_summary': list(fin.anomaly_summary),
                'columns': {
                    'amount': fin.amount_column,
                    'category': fin.category_column,
                    'receipt': fin.receipt_column,
                },
            },
            'overall_insights': list(self.overall_insights),
            'warnings': list(self.warnings),
        }
