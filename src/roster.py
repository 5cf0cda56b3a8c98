"""Worker roster providers.

The engine only needs a flat list of workers; where it comes from is
injected through :class:`WorkerProvider` rather than read from a shared
client.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, List, Mapping, Protocol

from .models import AttendanceEntry, Contractor, WorkerRecord


class WorkerProvider(Protocol):
    def list_workers(self) -> List[WorkerRecord]: ...


class InMemoryWorkerProvider:
    """Serves a fixed snapshot of workers."""

    def __init__(self, workers: Iterable[WorkerRecord] = ()) -> None:
        self._workers = list(workers)

    @classmethod
    def from_contractors(cls, contractors: Iterable[Contractor]) -> "InMemoryWorkerProvider":
        return cls(worker for contractor in contractors for worker in contractor.workers)

    def list_workers(self) -> List[WorkerRecord]:
        return list(self._workers)


def _worker_from_dict(data: Mapping[str, object], contractor_id: str | None = None) -> WorkerRecord:
    attendance = [
        AttendanceEntry(date=str(entry.get("date", "")), present=bool(entry.get("present")))
        for entry in data.get("attendance") or []
    ]
    daily_wage = data.get("dailyWage", data.get("daily_wage", 0))
    return WorkerRecord(
        id=str(data["id"]),
        name=str(data["name"]).strip(),
        daily_wage=float(daily_wage),
        attendance=attendance,
        uan=data.get("uan"),
        contractor_id=data.get("contractorId", contractor_id),
    )


def _contractor_from_dict(data: Mapping[str, object]) -> Contractor:
    contractor_id = str(data["id"])
    return Contractor(
        id=contractor_id,
        name=str(data.get("name", "")),
        workers=[_worker_from_dict(w, contractor_id) for w in data.get("workers") or []],
    )


def load_roster(file_path: Path) -> InMemoryWorkerProvider:
    """Load workers from a JSON export of contractors or of bare workers."""

    roster_path = Path(file_path)
    if not roster_path.exists():
        raise FileNotFoundError(f"Roster file not found: {roster_path}")
    payload = json.loads(roster_path.read_text(encoding="utf-8"))
    if isinstance(payload, dict):
        payload = payload.get("contractors", payload.get("workers", []))
    if not isinstance(payload, list):
        raise ValueError(f"Roster file {roster_path} must contain a JSON list")

    if payload and all("workers" in item for item in payload):
        return InMemoryWorkerProvider.from_contractors(
            _contractor_from_dict(item) for item in payload
        )
    return InMemoryWorkerProvider(_worker_from_dict(item) for item in payload)


__all__ = ["InMemoryWorkerProvider", "WorkerProvider", "load_roster"]
