"""Reconcile uploaded challan rows against the worker roster."""

from __future__ import annotations

import logging
from typing import Iterable, Mapping, Sequence

from .calculations import calculate_wage, parse_month, to_amount
from .challan_reader import normalize_challan_row
from .config import DEFAULT_SETTINGS, ReconciliationSettings
from .matching import MatchStrategy, match_by_name_or_id
from .models import (
    ChallanRow,
    Contractor,
    ReconciliationRecord,
    ReconciliationResult,
    ReconciliationSummary,
    WorkerRecord,
)

logger = logging.getLogger(__name__)

NOT_IN_SYSTEM_REMARK = "Employee exists in Challan but not in System"
NOT_IN_CHALLAN_REMARK = "Employee active in System but missing in Challan"


def format_amount(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def _find_worker(
    row: ChallanRow,
    workers: Sequence[WorkerRecord],
    claimed: set[int],
    matcher: MatchStrategy,
) -> int | None:
    for index, worker in enumerate(workers):
        if index in claimed:
            continue
        if matcher(row, worker):
            return index
    return None


def reconcile(
    month: str,
    challan_rows: Iterable[ChallanRow | Mapping[str, object]],
    workers: Iterable[WorkerRecord],
    *,
    matcher: MatchStrategy = match_by_name_or_id,
    settings: ReconciliationSettings = DEFAULT_SETTINGS,
) -> ReconciliationResult:
    """Compare declared PF against the system calculation for ``month``.

    Each challan row binds to at most one worker and each worker to at most
    one row; the first row (in input order) to match a worker claims it.
    Workers left unclaimed after every row has been processed are reported
    as missing from the challan.

    Args:
        month: Reporting month in ``YYYY-MM`` form.
        challan_rows: Parsed challan rows, or raw mappings keyed by the
            challan column names.
        workers: Flattened roster of every contractor's workers.
        matcher: Decides whether a row refers to a worker.
        settings: PF rate, wage ceiling, tolerance and attendance fallback.

    Returns:
        The per-record details in challan order followed by system-only
        workers, plus the aggregate summary.
    """

    parse_month(month)
    rows = [
        row if isinstance(row, ChallanRow) else normalize_challan_row(row)
        for row in challan_rows
    ]
    roster = list(workers)

    records: list[ReconciliationRecord] = []
    summary = ReconciliationSummary()
    claimed: set[int] = set()

    for idx, row in enumerate(rows):
        challan_pf = to_amount(row.employee_share)
        challan_wage = to_amount(row.gross_wages)
        worker_index = _find_worker(row, roster, claimed, matcher)

        if worker_index is None:
            summary.not_found_in_db_count += 1
            summary.total_challan_pf += challan_pf
            records.append(
                ReconciliationRecord(
                    id=f"rec-{idx}",
                    uan=row.uan,
                    employee_name=row.employee_name,
                    category="Challan",
                    days_present=0,
                    calculated_wage=0,
                    calculated_pf=0,
                    challan_wage=challan_wage,
                    challan_pf=challan_pf,
                    difference=challan_pf,
                    status="NOT_FOUND_IN_DB",
                    remarks=NOT_IN_SYSTEM_REMARK,
                )
            )
            continue

        claimed.add(worker_index)
        calc = calculate_wage(roster[worker_index], month, settings)
        difference = challan_pf - calc.calculated_pf
        is_match = abs(difference) <= settings.match_tolerance
        if is_match:
            summary.matched_count += 1
        else:
            summary.mismatch_count += 1
        summary.total_calculated_pf += calc.calculated_pf
        summary.total_challan_pf += challan_pf

        records.append(
            ReconciliationRecord(
                id=f"rec-{idx}",
                uan=row.uan,
                employee_name=row.employee_name,
                category="Challan",
                days_present=calc.days_present,
                calculated_wage=calc.calculated_wage,
                calculated_pf=calc.calculated_pf,
                challan_wage=challan_wage,
                challan_pf=challan_pf,
                difference=difference,
                status="MATCH" if is_match else "MISMATCH",
                remarks=(
                    "OK"
                    if is_match
                    else f"Discrepancy of {settings.currency_symbol}"
                    f"{format_amount(difference)}"
                ),
            )
        )

    missing = [
        worker for index, worker in enumerate(roster) if index not in claimed
    ]
    for idx, worker in enumerate(missing):
        calc = calculate_wage(worker, month, settings)
        summary.not_found_in_challan_count += 1
        summary.total_calculated_pf += calc.calculated_pf
        records.append(
            ReconciliationRecord(
                id=f"missing-{idx}",
                uan="N/A",
                employee_name=worker.name,
                category="System",
                days_present=calc.days_present,
                calculated_wage=calc.calculated_wage,
                calculated_pf=calc.calculated_pf,
                challan_wage=0,
                challan_pf=0,
                difference=-calc.calculated_pf,
                status="NOT_FOUND_IN_CHALLAN",
                remarks=NOT_IN_CHALLAN_REMARK,
            )
        )

    summary.total_records = len(records)
    summary.net_difference = summary.total_challan_pf - summary.total_calculated_pf

    logger.info(
        "Reconciled %s: %d records (%d match, %d mismatch, %d not in system, "
        "%d not in challan), net difference %s",
        month,
        summary.total_records,
        summary.matched_count,
        summary.mismatch_count,
        summary.not_found_in_db_count,
        summary.not_found_in_challan_count,
        format_amount(summary.net_difference),
    )
    return ReconciliationResult(month=month, records=records, summary=summary)


def reconcile_contractors(
    month: str,
    challan_rows: Iterable[ChallanRow | Mapping[str, object]],
    contractors: Iterable[Contractor],
    **kwargs,
) -> ReconciliationResult:
    workers = [worker for contractor in contractors for worker in contractor.workers]
    return reconcile(month, challan_rows, workers, **kwargs)


__all__ = [
    "NOT_IN_CHALLAN_REMARK",
    "NOT_IN_SYSTEM_REMARK",
    "format_amount",
    "reconcile",
    "reconcile_contractors",
]
