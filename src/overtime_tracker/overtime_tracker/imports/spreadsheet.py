from __future__ import annotations

from pathlib import Path
from typing import IO, Any, Mapping, Optional

import pandas as pd

from ..core.constants import END_TIME_COLUMN_ALIASES, SPREADSHEET_EXTENSIONS
from ..core.exceptions import ValidationError


def _excel_engine(ext: str) -> Optional[str]:
    if ext == ".xlsx":
        return "openpyxl"
    if ext == ".xls":
        return "xlrd"
    return None


def read_rows(stream: IO[bytes], filename: str) -> list[dict[str, str]]:
    """Read the first sheet of an uploaded file into row mappings.

    Cells are read as text so that "4.30" keeps its shape; empty cells become "".
    """
    ext = Path(filename or "").suffix.lower()
    if ext not in SPREADSHEET_EXTENSIONS:
        raise ValidationError("Unsupported file type, use an Excel (.xlsx, .xls) or CSV (.csv) file")

    try:
        if ext == ".csv":
            df = pd.read_csv(stream, dtype=str, keep_default_na=False, encoding="utf-8-sig")
        else:
            df = pd.read_excel(stream, sheet_name=0, dtype=str, engine=_excel_engine(ext))
    except (ValueError, OSError, pd.errors.ParserError) as e:
        raise ValidationError(f"Could not read the file: {e}") from e

    df = df.fillna("")
    return [{str(k): str(v) for k, v in record.items()} for record in df.to_dict(orient="records")]


def _cell_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def extract_end_time(row: Mapping[str, Any]) -> str:
    """The clock-out time of a row: first non-empty known column, else the first non-empty cell."""
    for alias in END_TIME_COLUMN_ALIASES:
        text = _cell_text(row.get(alias))
        if text:
            return text.strip()

    for value in row.values():
        text = _cell_text(value).strip()
        if text:
            return text
    return ""
