"""High-level orchestration for a challan reconciliation run."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict

from . import challan_reader, reconciler, roster
from .config import ReconciliationSettings, load_settings
from .reporting import iso_timestamp, result_to_dict, write_records_csv, write_report

logger = logging.getLogger(__name__)

DEFAULT_REPORT_NAME = "challan_reconciliation_report.json"


def run_challan_reconciliation(
    month: str,
    challan_path: str,
    roster_path: str,
    *,
    output_path: str | None = None,
    csv_path: str | None = None,
    settings: ReconciliationSettings | None = None,
) -> Path:
    """Contract entry point for reconciling one month's challan.

    Args:
        month: Reporting month as ``YYYY-MM``.
        challan_path: Path to the uploaded challan (``.xlsx`` or ``.csv``).
        roster_path: Path to the JSON roster export.
        output_path: Optional JSON output path. Defaults to
            challan_reconciliation_report.json in the current working directory.
        csv_path: Optional path for the tabular CSV export.
        settings: Overrides for the PF constants; read from the environment
            when omitted.

    Returns:
        Path to the generated JSON report.
    """

    report_path = Path(output_path) if output_path else Path(DEFAULT_REPORT_NAME)
    report_payload: Dict[str, object] = {
        "status": "success",
        "generated_at": iso_timestamp(),
        "month": month,
        "summary": None,
        "records": [],
        "error": None,
    }

    try:
        active_settings = settings if settings is not None else load_settings()
        challan_rows = challan_reader.read_challan_file(Path(challan_path))
        workers = roster.load_roster(Path(roster_path)).list_workers()
        result = reconciler.reconcile(
            month, challan_rows, workers, settings=active_settings
        )
        report_payload.update(result_to_dict(result))
        if csv_path:
            write_records_csv(result.records, Path(csv_path))
    except Exception as exc:
        logger.exception("Challan reconciliation for %s failed", month)
        report_payload["status"] = "error"
        report_payload["error"] = str(exc)

    write_report(report_payload, report_path)
    return report_path


__all__ = ["run_challan_reconciliation", "DEFAULT_REPORT_NAME"]
