"""Strategies deciding whether a challan row belongs to a worker.

Name matching is what the dashboard data supports today; UAN is the
identifier a production roster should be keyed on.
"""

from __future__ import annotations

from typing import Callable

from .models import ChallanRow, WorkerRecord

MatchStrategy = Callable[[ChallanRow, WorkerRecord], bool]


def match_by_name_or_id(row: ChallanRow, worker: WorkerRecord) -> bool:
    if row.employee_name == worker.name:
        return True
    return row.id_link is not None and row.id_link == worker.id


def match_by_uan(row: ChallanRow, worker: WorkerRecord) -> bool:
    row_uan = (row.uan or "").strip()
    worker_uan = (worker.uan or "").strip()
    if not row_uan or not worker_uan:
        return False
    return row_uan == worker_uan


__all__ = ["MatchStrategy", "match_by_name_or_id", "match_by_uan"]
