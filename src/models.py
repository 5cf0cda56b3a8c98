"""Domain models for challan (PF declaration) reconciliation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

ReconStatus = Literal[
    "MATCH",
    "MISMATCH",
    "NOT_FOUND_IN_DB",
    "NOT_FOUND_IN_CHALLAN",
]
RecordCategory = Literal["System", "Challan"]

RECON_STATUSES: tuple[ReconStatus, ...] = (
    "MATCH",
    "MISMATCH",
    "NOT_FOUND_IN_DB",
    "NOT_FOUND_IN_CHALLAN",
)


@dataclass(slots=True)
class AttendanceEntry:
    """One day of muster data for a worker."""

    date: str
    present: bool


@dataclass(slots=True)
class WorkerRecord:
    """Represents a worker as held in the system of record."""

    id: str
    name: str
    daily_wage: float
    attendance: list[AttendanceEntry] = field(default_factory=list)
    uan: str | None = None
    contractor_id: str | None = None


@dataclass(slots=True)
class Contractor:
    """A contractor and the workers deployed under it."""

    id: str
    name: str
    workers: list[WorkerRecord] = field(default_factory=list)


@dataclass(slots=True)
class ChallanRow:
    """A single declaration row taken from an uploaded challan file."""

    uan: str
    employee_name: str
    gross_wages: float
    epf_wages: float
    employee_share: float
    employer_share: float
    id_link: str | None = None


@dataclass(slots=True)
class ReconciliationRecord:
    """Outcome of comparing one worker or challan row."""

    id: str
    uan: str
    employee_name: str
    category: RecordCategory
    days_present: int
    calculated_wage: float
    calculated_pf: int
    challan_wage: float
    challan_pf: float
    difference: float
    status: ReconStatus
    remarks: str


@dataclass(slots=True)
class ReconciliationSummary:
    """Aggregate figures shown on the dashboard cards."""

    total_records: int = 0
    matched_count: int = 0
    mismatch_count: int = 0
    not_found_in_db_count: int = 0
    not_found_in_challan_count: int = 0
    total_calculated_pf: float = 0
    total_challan_pf: float = 0
    net_difference: float = 0


@dataclass(slots=True)
class ReconciliationResult:
    """Groups the per-record details and the summary of one run."""

    month: str
    records: list[ReconciliationRecord] = field(default_factory=list)
    summary: ReconciliationSummary = field(default_factory=ReconciliationSummary)


__all__ = [
    "AttendanceEntry",
    "ChallanRow",
    "Contractor",
    "RECON_STATUSES",
    "ReconStatus",
    "ReconciliationRecord",
    "ReconciliationResult",
    "ReconciliationSummary",
    "RecordCategory",
    "WorkerRecord",
]
