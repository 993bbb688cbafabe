"""Statistical profiling of comma-delimited text: column typing, descriptive
statistics, outliers, spend heuristics and plain-English findings."""
from .errors import AnalysisError, MalformedInput, UploadRejected
from .models import AnalysisResult
from .pipeline import AnalysisConfig, run_analysis

__all__ = [
    "AnalysisConfig",
    "AnalysisError",
    "AnalysisResult",
    "MalformedInput",
    "UploadRejected",
    "run_analysis",
]

__version__ = "0.1.0"
