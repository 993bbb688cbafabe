from dataclasses import dataclass
from typing import Optional
import logging
import os
import time

from .constants import DEFAULT_CONFIG
from .loader import parse_text
from .schema import classify_columns
from .profiler import profile_numeric, profile_categorical
from .financial import FinancialInsightEngine
from .insights import synthesize_insights
from .models import AnalysisResult, DatasetSummary

log = logging.getLogger("csv_insights.pipeline")


@dataclass
class AnalysisConfig:
    max_upload_mb: int = DEFAULT_CONFIG['max_upload_mb']
    log_level: str = DEFAULT_CONFIG['log_level']
    output_dir: Optional[str] = DEFAULT_CONFIG['output_dir']

    @classmethod
    def from_env(cls) -> "AnalysisConfig":
        return cls(
            max_upload_mb=int(os.getenv("CSV_INSIGHTS_MAX_UPLOAD_MB", str(DEFAULT_CONFIG['max_upload_mb']))),
            log_level=os.getenv("CSV_INSIGHTS_LOG_LEVEL", DEFAULT_CONFIG['log_level']),
            output_dir=os.getenv("CSV_INSIGHTS_OUTPUT_DIR") or DEFAULT_CONFIG['output_dir'],
        )


def run_analysis(text: str, logger: Optional[logging.Logger] = None) -> AnalysisResult:
    """Profile a comma-delimited text blob.

    Raises MalformedInput when there is no header plus data line; every other
    data problem is absorbed into the result (fewer values, warnings, empty
    sections).
    """
    logger = logger or log
    start = time.time()

    dataset = parse_text(text, logger=logger)
    classification = classify_columns(dataset, logger=logger)
    df = dataset.frame

    numeric_analysis = {}
    for c in classification.numeric:
        numeric_analysis[c] = profile_numeric(c, df[c].tolist(), logger=logger)

    categorical_analysis = {}
    for c in classification.categorical:
        categorical_analysis[c] = profile_categorical(c, df[c].tolist(), logger=logger)

    financial = FinancialInsightEngine(logger=logger).compute(dataset, classification)
    overall = synthesize_insights(numeric_analysis, categorical_analysis, financial)

    summary = DatasetSummary(
        total_rows=len(dataset.rows),
        numeric_columns=list(classification.numeric),
        categorical_columns=list(classification.categorical),
        date_columns=list(classification.date),
    )
    logger.info(f"Analyzed {summary.total_rows} rows in {time.time() - start:.3f}s")

    return AnalysisResult(
        dataset_summary=summary,
        numeric_analysis=numeric_analysis,
        categorical_analysis=categorical_analysis,
        financial_insights=financial,
        overall_insights=overall,
        warnings=list(dataset.warnings),
    )
