from typing import Any, Iterable, Optional
import math
import re

import numpy as np

try:
    import chardet
    HAS_CHARDET = True
except Exception:
    HAS_CHARDET = False


NUMBER_PREFIX_RE = re.compile(r"^[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


def safe_float(v: Any) -> Optional[float]:
    """Parse the leading number of a cell ("10%" -> 10.0, "5kg" -> 5.0).

    Returns None when the cell does not start with a number or the number is
    not finite.
    """
    if v is None:
        return None
    m = NUMBER_PREFIX_RE.match(str(v).strip())
    if not m:
        return None
    f = float(m.group(0))
    if math.isnan(f) or math.isinf(f):
        return None
    return f


def numeric_values(values: Iterable[Any]) -> np.ndarray:
    """Parsed values in input order, unparsable cells dropped."""
    parsed = [safe_float(v) for v in values]
    return np.array([f for f in parsed if f is not None], dtype=float)


def find_column(columns: Iterable[str], keys: Iterable[str]) -> Optional[str]:
    """First column (in column order) whose lowercased name contains any key."""
    keys = tuple(keys)
    for c in columns:
        lc = str(c).lower()
        if any(k in lc for k in keys):
            return c
    return None


def detect_encoding(raw: bytes, sample_size: int = 4096) -> str:
    try:
        if HAS_CHARDET:
            res = chardet.detect(raw[:sample_size])
            return res.get("encoding") or "utf-8"
        return "utf-8"
    except Exception:
        return "utf-8"


def decode_text(raw: bytes) -> str:
    """Decode an uploaded payload, trying utf-8 before the sniffed encoding."""
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        pass
    enc = detect_encoding(raw)
    try:
        return raw.decode(enc)
    except (UnicodeDecodeError, LookupError):
        return raw.decode("utf-8", errors="replace")
