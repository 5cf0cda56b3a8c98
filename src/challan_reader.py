from __future__ import annotations

import csv
import io
import logging
from pathlib import Path
from typing import Iterable, List, Mapping

from openpyxl import load_workbook

from .calculations import to_amount
from .models import ChallanRow

logger = logging.getLogger(__name__)

COLUMN_UAN = "UAN"
COLUMN_NAME = "Employee_Name"
COLUMN_ID_LINK = "ID_Link"
COLUMN_GROSS = "Gross_Wages"
COLUMN_EPF = "EPF_Wages"
COLUMN_EE_SHARE = "EE_Share"
COLUMN_ER_SHARE = "ER_Share"

EXCEL_SUFFIXES = {".xlsx", ".xlsm"}
CSV_SUFFIXES = {".csv"}


class UnsupportedChallanFormat(ValueError):
    """Raised when an uploaded challan is not a workbook or CSV file."""


def _text(value) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        # Excel stores long UANs as numbers
        return str(int(value))
    return str(value).strip()


def normalize_challan_row(raw: Mapping[str, object]) -> ChallanRow:
    """Build a ChallanRow from a mapping keyed by challan column names."""

    header_index = {
        str(key).strip(): value for key, value in raw.items() if key is not None
    }

    def _value(column_name: str):  # Helper to safely access a column
        return header_index.get(column_name)

    id_link = _text(_value(COLUMN_ID_LINK))
    return ChallanRow(
        uan=_text(_value(COLUMN_UAN)),
        employee_name=_text(_value(COLUMN_NAME)),
        gross_wages=to_amount(_value(COLUMN_GROSS)),
        epf_wages=to_amount(_value(COLUMN_EPF)),
        employee_share=to_amount(_value(COLUMN_EE_SHARE)),
        employer_share=to_amount(_value(COLUMN_ER_SHARE)),
        id_link=id_link or None,
    )


def _is_blank(raw: Mapping[str, object]) -> bool:
    return all(value is None or not str(value).strip() for value in raw.values())


def normalize_challan_rows(raw_rows: Iterable[Mapping[str, object]]) -> List[ChallanRow]:
    """Normalise raw rows, skipping only rows in which every cell is empty.

    Rows without a name or UAN are kept so their declared amounts still
    reach the totals as unmatched challan entries.
    """

    rows: List[ChallanRow] = []
    for position, raw in enumerate(raw_rows, start=1):
        if _is_blank(raw):
            logger.debug("Skipping empty challan row %d", position)
            continue
        row = normalize_challan_row(raw)
        if not row.employee_name and not row.uan:
            logger.warning("Challan row %d has neither employee name nor UAN", position)
        rows.append(row)
    return rows


def _rows_from_workbook(data: bytes) -> List[dict]:
    workbook = load_workbook(filename=io.BytesIO(data), data_only=True, read_only=True)
    try:
        sheet = workbook.worksheets[0]
        rows = sheet.iter_rows(values_only=True)
        headers_row = next(rows, None)  # First row should contain column headers
        if headers_row is None:  # Empty sheet edge case
            return []
        headers = [
            str(header).strip() if header is not None else "" for header in headers_row
        ]
        records = []
        for row in rows:
            if row is None or all(cell in (None, "") for cell in row):
                continue
            records.append(
                {header: row[idx] for idx, header in enumerate(headers) if idx < len(row)}
            )
        return records
    finally:
        workbook.close()  # Always close the workbook handle


def _rows_from_csv(data: bytes) -> List[dict]:
    text = data.decode("utf-8-sig")
    return list(csv.DictReader(io.StringIO(text)))


def parse_challan_file(data: bytes, filename: str) -> List[ChallanRow]:
    """Parse an uploaded challan (``.xlsx`` or ``.csv``) into rows.

    Args:
        data: Raw file contents.
        filename: Original file name; only its extension is used.

    Returns:
        Normalised challan rows in file order.
    """

    suffix = Path(filename).suffix.lower()
    if suffix in EXCEL_SUFFIXES:
        raw_rows = _rows_from_workbook(data)
    elif suffix in CSV_SUFFIXES:
        raw_rows = _rows_from_csv(data)
    else:
        raise UnsupportedChallanFormat(
            f"Unsupported challan file type {suffix or filename!r}; expected .xlsx or .csv"
        )
    rows = normalize_challan_rows(raw_rows)
    logger.info("Parsed %d challan rows from %s", len(rows), filename)
    return rows


def read_challan_file(file_path: Path) -> List[ChallanRow]:
    challan_path = Path(file_path)
    if not challan_path.exists():
        raise FileNotFoundError(f"Challan file not found: {challan_path}")
    return parse_challan_file(challan_path.read_bytes(), challan_path.name)


__all__ = [
    "UnsupportedChallanFormat",
    "normalize_challan_row",
    "normalize_challan_rows",
    "parse_challan_file",
    "read_challan_file",
]
