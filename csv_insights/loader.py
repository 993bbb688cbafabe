from typing import Optional
import logging

import pandas as pd

from .cleaner import normalize_text, split_lines, split_fields, build_row, drop_empty_rows
from .errors import MalformedInput, ROW_FIELD_COUNT_MISMATCH
from .models import Dataset

log = logging.getLogger("csv_insights.loader")


def parse_text(text: str, logger: Optional[logging.Logger] = None) -> Dataset:
    """Turn raw comma-delimited text into headers plus row mappings.

    Commas always separate fields; there is no quoting. Row indices used by
    every later stage refer to the filtered row list returned here.
    """
    logger = logger or log
    lines = split_lines(normalize_text(text or ''))
    if len(lines) < 2:
        raise MalformedInput('CSV must have at least a header row and one data row')

    headers = split_fields(lines[0])
    warnings = []

    dup = sorted({h for h in headers if headers.count(h) > 1})
    if dup:
        warnings.append(f'Duplicate columns detected: {dup}')
        logger.warning(f"Duplicate columns detected: {dup}")

    rows = []
    for line_num, line in enumerate(lines[1:], start=1):
        values = split_fields(line)
        if len(values) != len(headers):
            msg = f"Row {line_num} has {len(values)} values but expected {len(headers)}"
            warnings.append(msg)
            logger.warning(f"{ROW_FIELD_COUNT_MISMATCH}: {msg}")
        rows.append(build_row(headers, values))

    raw_count = len(rows)
    rows = drop_empty_rows(rows)
    if len(rows) < raw_count:
        logger.debug(f"Dropped {raw_count - len(rows)} empty rows")

    columns = list(dict.fromkeys(headers))
    frame = pd.DataFrame(rows, columns=columns, dtype=object)
    logger.info(f"CSV parsed: {len(rows)} rows x {len(columns)} cols")
    return Dataset(headers=headers, rows=rows, frame=frame, warnings=warnings)
