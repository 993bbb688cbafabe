from typing import Any, Iterable, List, Optional
import logging
import math

import numpy as np
import pandas as pd

from .constants import ZSCORE_THRESHOLD, IQR_MULTIPLIER
from .errors import UNPARSABLE_VALUE, DEGENERATE_STATISTIC, EMPTY_CATEGORICAL_COLUMN
from .models import NumericColumnProfile, CategoricalColumnProfile, Outlier
from .utils import numeric_values

log = logging.getLogger("csv_insights.profiler")


def _r2(v: float) -> float:
    return round(float(v), 2)


def detect_outliers(values: np.ndarray, mean: float, std: float, q1: float, q3: float) -> List[Outlier]:
    """Flag values by z-score first, then by the IQR fences.

    One entry per position at most; a value caught by both rules is tagged
    z-score. A zero standard deviation disables the z-score rule.
    """
    iqr = q3 - q1
    lower = q1 - IQR_MULTIPLIER * iqr
    upper = q3 + IQR_MULTIPLIER * iqr
    outliers = []
    for idx, v in enumerate(values.tolist()):
        if std > 0 and abs(v - mean) / std > ZSCORE_THRESHOLD:
            outliers.append(Outlier(row_index=idx, value=v, method='z-score'))
        elif v < lower or v > upper:
            outliers.append(Outlier(row_index=idx, value=v, method='iqr'))
    return outliers


def profile_numeric(column: str, raw_values: Iterable[Any], logger: Optional[logging.Logger] = None) -> NumericColumnProfile:
    logger = logger or log
    raw_values = list(raw_values)
    values = numeric_values(raw_values)
    n = len(values)
    if n < len(raw_values):
        logger.debug(f"{UNPARSABLE_VALUE}: {len(raw_values) - n} value(s) skipped in '{column}'")
    if n == 0:
        logger.warning(f"Numeric column '{column}' has no parsable values")
        return NumericColumnProfile(count=0, sum=0.0, quartiles={'Q1': None, 'Q2': None, 'Q3': None})

    srt = np.sort(values)
    total = float(values.sum())
    mean = total / n
    median = float(np.median(srt))
    variance = float(np.mean((values - mean) ** 2))
    std = math.sqrt(variance)
    q1 = float(srt[int(math.floor(n * 0.25))])
    q3 = float(srt[int(math.floor(n * 0.75))])
    vmin = float(values.min())
    vmax = float(values.max())

    if std == 0:
        logger.debug(f"{DEGENERATE_STATISTIC}: zero standard deviation in '{column}', z-score rule skipped")

    return NumericColumnProfile(
        count=n,
        sum=_r2(total),
        mean=_r2(mean),
        median=_r2(median),
        min=vmin,
        max=vmax,
        range=vmax - vmin,
        variance=_r2(variance),
        std_dev=_r2(std),
        quartiles={'Q1': _r2(q1), 'Q2': _r2(median), 'Q3': _r2(q3)},
        iqr=_r2(q3 - q1),
        outliers=detect_outliers(values, mean, std, q1, q3),
    )


def profile_categorical(column: str, raw_values: Iterable[Any], logger: Optional[logging.Logger] = None) -> CategoricalColumnProfile:
    logger = logger or log
    ser = pd.Series([v for v in raw_values if v], dtype=object)
    if ser.empty:
        logger.debug(f"{EMPTY_CATEGORICAL_COLUMN}: '{column}' has no values")
        return CategoricalColumnProfile(unique_values=0)

    # sort=False keeps first-seen order; the stable sort keeps it among ties
    vc = ser.value_counts(sort=False)
    distribution = {str(k): int(v) for k, v in vc.items()}
    ranked = vc.sort_values(ascending=False, kind='stable')
    return CategoricalColumnProfile(
        unique_values=len(distribution),
        distribution=distribution,
        most_frequent=str(ranked.index[0]),
        least_frequent=str(ranked.index[-1]),
    )
