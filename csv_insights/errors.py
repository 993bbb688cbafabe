class AnalysisError(Exception):
    """Base class for failures surfaced to callers of the analysis engine."""


class MalformedInput(AnalysisError):
    """The text does not hold a header line plus at least one data line."""


class UploadRejected(AnalysisError):
    """An uploaded payload is not usable text (binary, undecodable, too large)."""


# Conditions below are absorbed by the engine and only ever appear by name in
# warnings and log records.
ROW_FIELD_COUNT_MISMATCH = "RowFieldCountMismatch"
UNPARSABLE_VALUE = "UnparsableValue"
DEGENERATE_STATISTIC = "DegenerateStatistic"
EMPTY_CATEGORICAL_COLUMN = "EmptyCategoricalColumn"
