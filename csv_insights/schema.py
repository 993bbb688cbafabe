from typing import Dict, List, Optional
import logging

from .constants import (
    SAMPLE_ROWS,
    DATE_NAME_HINTS,
    BOOLEAN_LITERALS,
    AMOUNT_NAME_HINTS,
    CATEGORY_NAME_HINTS,
    RECEIPT_NAME_HINTS,
)
from .models import Dataset, ColumnClassification
from .utils import safe_float, find_column

log = logging.getLogger("csv_insights.schema")


def _is_numeric_sample(values: List[str]) -> bool:
    # all() over an empty sample is True: a table with no rows types as numeric
    return all(safe_float(v) is not None and v not in BOOLEAN_LITERALS for v in values)


def classify_columns(dataset: Dataset, logger: Optional[logging.Logger] = None) -> ColumnClassification:
    """Partition the distinct headers into date-like, numeric and categorical.

    Rules are applied in order and the first match wins:
    a name containing "date" or "time" is date-like, even if its values are
    numbers; otherwise a column is numeric when every value among the first
    rows parses as a float; everything else is categorical.
    """
    logger = logger or log
    out = ColumnClassification()
    sample = dataset.frame.head(SAMPLE_ROWS)

    for c in dataset.columns:
        sval = str(c).lower()
        if any(k in sval for k in DATE_NAME_HINTS):
            out.date.append(c)
            continue

        values = ['' if v is None else str(v) for v in sample[c].tolist()]
        if _is_numeric_sample(values):
            out.numeric.append(c)
        else:
            out.categorical.append(c)

    logger.debug(
        f"Classified columns: numeric={out.numeric} categorical={out.categorical} date={out.date}"
    )
    return out


def infer_column_roles(dataset: Dataset, classification: ColumnClassification) -> Dict[str, str]:
    """Return mapping of financial role -> column name where detected."""
    roles = {}
    roles['amount'] = find_column(dataset.columns, AMOUNT_NAME_HINTS)
    # category must be a column typed categorical
    roles['category'] = find_column(classification.categorical, CATEGORY_NAME_HINTS)
    roles['receipt'] = find_column(dataset.columns, RECEIPT_NAME_HINTS)

    roles = {k: v for k, v in roles.items() if v}
    return roles
