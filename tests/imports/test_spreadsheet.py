import io

import pandas as pd
import pytest

from src.overtime_tracker.overtime_tracker.core.exceptions import ValidationError
from src.overtime_tracker.overtime_tracker.imports.spreadsheet import extract_end_time, read_rows


def test_known_column_wins_in_alias_order():
    assert extract_end_time({"Time": "5.00", "end_time": "6.30"}) == "6.30"
    assert extract_end_time({"ساعة الانتهاء": "7.15", "end_time": "6.30"}) == "7.15"


def test_empty_known_column_falls_through_to_next_alias():
    assert extract_end_time({"ساعة الانتهاء": "", "Time": "5.00"}) == "5.00"


def test_unknown_columns_use_first_column():
    assert extract_end_time({"clock": " 7.15 ", "note": "x"}) == "7.15"


def test_fallback_skips_blank_leading_cells():
    assert extract_end_time({"#": "", "clock": "  ", "out": "6.45"}) == "6.45"
    assert extract_end_time({"a": "", "b": ""}) == ""


def test_empty_row_gives_empty_token():
    assert extract_end_time({}) == ""


def test_read_rows_from_csv_keeps_text():
    data = io.BytesIO("ساعة الانتهاء,ملاحظة\n6.30,\n4.30,late\n".encode("utf-8-sig"))

    rows = read_rows(data, "times.csv")

    assert rows == [
        {"ساعة الانتهاء": "6.30", "ملاحظة": ""},
        {"ساعة الانتهاء": "4.30", "ملاحظة": "late"},
    ]


def test_read_rows_from_xlsx():
    buffer = io.BytesIO()
    pd.DataFrame({"end_time": ["6.30", "7.00"]}).to_excel(buffer, index=False, engine="openpyxl")
    buffer.seek(0)

    rows = read_rows(buffer, "Times.XLSX")

    assert [r["end_time"] for r in rows] == ["6.30", "7.00"]


def test_unsupported_extension_is_rejected():
    with pytest.raises(ValidationError):
        read_rows(io.BytesIO(b"6.30"), "times.txt")
