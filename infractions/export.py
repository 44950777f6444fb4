from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Union

from .config import KEY_FIELD_MONTH, THEMES, TOTAL_FIELD

Row = Union[Mapping[str, Any], Any]

HEADER_FIXED = "fixed"
HEADER_UNION = "union"


def _as_record(row: Row) -> Mapping[str, Any]:
    # typed rows flatten to the dashboard's record shape
    if hasattr(row, "as_record"):
        return row.as_record()
    return row


def csv_header(key_field: str = KEY_FIELD_MONTH, themes: Sequence[str] = THEMES) -> List[str]:
    return [key_field, *themes, TOTAL_FIELD]


def union_header(rows: Iterable[Row]) -> List[str]:
    """Every key seen across the rows, in first-seen order."""
    header: Dict[str, None] = {}
    for row in rows:
        for key in _as_record(row):
            header.setdefault(key, None)
    return list(header)


def to_csv_text(
    rows: Iterable[Row],
    header: Union[str, Sequence[str]] = HEADER_FIXED,
    key_field: str = KEY_FIELD_MONTH,
) -> str:
    """
    Serialize rows as comma-delimited text.

    header: "fixed" (key field, every theme, Totaal), "union" (keys seen in
    the rows) or an explicit column list. Missing fields become empty
    strings. Values are not quoted or escaped, so a value containing a comma
    or newline corrupts the line; the embedded dataset has none.
    """
    records = [_as_record(r) for r in rows]
    if header == HEADER_FIXED:
        columns = csv_header(key_field)
    elif header == HEADER_UNION:
        columns = union_header(records)
    elif isinstance(header, str):
        raise ValueError(f"Unknown header mode {header!r}")
    else:
        columns = list(header)

    lines = [",".join(columns)]
    for rec in records:
        lines.append(",".join(_cell(rec.get(col)) for col in columns))
    return "\n".join(lines)


def _cell(value: Any) -> str:
    return "" if value is None else str(value)


def export_csv(
    path: Path,
    rows: Iterable[Row],
    header: Union[str, Sequence[str]] = HEADER_FIXED,
    key_field: Optional[str] = None,
) -> Path:
    """Write the CSV text to `path` (the download side effect) and return the path."""
    text = to_csv_text(rows, header=header, key_field=key_field or KEY_FIELD_MONTH)
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path
