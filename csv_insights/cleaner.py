from typing import Dict, List


def normalize_text(text: str) -> str:
    # CRLF and lone CR -> LF, BOM removed
    if text.startswith('\ufeff'):
        text = text.lstrip('\ufeff')
    return text.replace('\r\n', '\n').replace('\r', '\n')


def split_lines(text: str) -> List[str]:
    return [line for line in text.strip().split('\n') if line.strip()]


def split_fields(line: str) -> List[str]:
    return [v.strip() for v in line.split(',')]


def build_row(headers: List[str], values: List[str]) -> Dict[str, str]:
    row = {}
    for i, h in enumerate(headers):
        row[h] = values[i] if i < len(values) else ''
    return row


def drop_empty_rows(rows: List[Dict[str, str]]) -> List[Dict[str, str]]:
    return [r for r in rows if any(v for v in r.values())]
