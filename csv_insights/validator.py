from typing import Tuple, List
from pathlib import Path
from .errors import UploadRejected
from .utils import decode_text

TEXT_SUFFIXES = ('', '.csv', '.txt', '.tsv')


def validate_upload(raw: bytes, filename: str, cfg: dict) -> Tuple[str, List[str]]:
    """Check an uploaded payload and decode it to text.

    Raises UploadRejected for oversized, empty or binary payloads.
    """
    warnings = []
    size_mb = len(raw) / (1024 * 1024)
    if size_mb > cfg.get('max_upload_mb', 20):
        raise UploadRejected(f"File size {size_mb:.1f}MB exceeds max {cfg.get('max_upload_mb')}MB")

    if not raw:
        raise UploadRejected('Empty file')

    if b'\x00' in raw[:8192]:
        raise UploadRejected('File does not look like text')

    suffix = Path(filename or '').suffix.lower()
    if suffix not in TEXT_SUFFIXES:
        warnings.append(f'Unexpected file extension {suffix!r}, reading as CSV text')

    text = decode_text(raw)
    if '\ufffd' in text:
        warnings.append('Some bytes could not be decoded and were replaced')

    return text, warnings
