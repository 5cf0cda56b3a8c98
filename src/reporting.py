"""Report and export helpers for reconciliation results."""

from __future__ import annotations

import csv
import json
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Iterable, List

from .models import ReconciliationRecord, ReconciliationResult

CSV_COLUMNS = [
    "UAN",
    "Employee Name",
    "Category",
    "Days Present",
    "System Wage",
    "System PF",
    "Challan Wage",
    "Challan PF",
    "Difference",
    "Status",
    "Remarks",
]


def iso_timestamp() -> str:
    return datetime.now(timezone.utc).replace(microsecond=0).isoformat()


def write_report(payload: Dict[str, object], report_path: Path) -> None:
    report_path = Path(report_path)
    report_path.parent.mkdir(parents=True, exist_ok=True)
    report_path.write_text(
        json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8"
    )


def default_export_name(month: str) -> str:
    return f"PF_Reconciliation_{month}.csv"


def record_to_csv_row(record: ReconciliationRecord) -> List[object]:
    return [
        record.uan,
        record.employee_name,
        record.category,
        record.days_present,
        record.calculated_wage,
        record.calculated_pf,
        record.challan_wage,
        record.challan_pf,
        record.difference,
        record.status,
        record.remarks or "",
    ]


def write_records_csv(records: Iterable[ReconciliationRecord], csv_path: Path) -> Path:
    """Write records with the fixed export columns; names are quoted as needed."""

    csv_path = Path(csv_path)
    csv_path.parent.mkdir(parents=True, exist_ok=True)
    with csv_path.open("w", encoding="utf-8", newline="") as handle:
        writer = csv.writer(handle)
        writer.writerow(CSV_COLUMNS)
        for record in records:
            writer.writerow(record_to_csv_row(record))
    return csv_path


def filter_records(
    records: Iterable[ReconciliationRecord],
    search: str = "",
    status: str = "ALL",
) -> List[ReconciliationRecord]:
    """Apply the table search box and status filter.

    The search term matches employee names case-insensitively, or any part
    of the UAN.
    """

    term = (search or "").strip()
    lowered = term.lower()
    selected = []
    for record in records:
        matches_search = lowered in record.employee_name.lower() or term in record.uan
        matches_status = status == "ALL" or record.status == status
        if matches_search and matches_status:
            selected.append(record)
    return selected


def result_to_dict(result: ReconciliationResult) -> Dict[str, object]:
    return {
        "month": result.month,
        "summary": asdict(result.summary),
        "records": [asdict(record) for record in result.records],
    }


__all__ = [
    "CSV_COLUMNS",
    "default_export_name",
    "filter_records",
    "iso_timestamp",
    "record_to_csv_row",
    "result_to_dict",
    "write_records_csv",
    "write_report",
]
