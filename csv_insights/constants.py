DEFAULT_CONFIG = {
    "max_upload_mb": 20,
    "log_level": "INFO",
    "output_dir": None,  # reports are only written when set
}

# column classification
SAMPLE_ROWS = 10
DATE_NAME_HINTS = ("date", "time")
BOOLEAN_LITERALS = ("true", "false")

# numeric outliers
ZSCORE_THRESHOLD = 2.0
IQR_MULTIPLIER = 1.5

# financial heuristics
AMOUNT_NAME_HINTS = ("amount", "cost", "price", "expense")
CATEGORY_NAME_HINTS = ("category", "type")
RECEIPT_NAME_HINTS = ("receipt",)
MISSING_RECEIPT_VALUES = ("false", "0", "")
ANOMALY_ZSCORE_THRESHOLD = 2.5
HIGH_VALUE_FRACTION = 0.1

# synthesized insights
HIGH_VARIABILITY_CV = 50.0
