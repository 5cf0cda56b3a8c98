"""Mock challan upload and a demonstration run against a sample roster."""

from __future__ import annotations

import random
from typing import List, Sequence

from .calculations import round_half_up
from .config import PF_RATE_EMPLOYEE, PF_WAGE_CEILING
from .logging_config import setup_logging
from .models import AttendanceEntry, ChallanRow, Contractor, WorkerRecord
from .reconciler import reconcile_contractors

FULL_MONTH_DAYS = 26
UNDERPAYMENT = 100


def synthesize_challan_rows(
    workers: Sequence[WorkerRecord], seed: int | None = None
) -> List[ChallanRow]:
    """Build a challan that mostly agrees with ``workers``.

    About one worker in five is left out, every fifth worker is under-declared
    and one row refers to somebody outside the roster.
    """

    rng = random.Random(seed)
    rows: List[ChallanRow] = []
    for idx, worker in enumerate(workers):
        if rng.random() > 0.8:
            continue
        wage = worker.daily_wage * FULL_MONTH_DAYS
        pf_wage = min(wage, PF_WAGE_CEILING)
        pf_amount = round_half_up(pf_wage * PF_RATE_EMPLOYEE)
        if idx % 5 == 0:
            pf_amount -= UNDERPAYMENT
        rows.append(
            ChallanRow(
                uan=f"100{rng.randint(100000000, 999999999)}",
                employee_name=worker.name,
                gross_wages=wage,
                epf_wages=pf_wage,
                employee_share=pf_amount,
                employer_share=pf_amount,
                id_link=worker.id,
            )
        )

    rows.append(
        ChallanRow(
            uan="101000000001",
            employee_name="External Worker A",
            gross_wages=15000,
            epf_wages=15000,
            employee_share=1800,
            employer_share=1800,
            id_link="unknown-1",
        )
    )
    return rows


def sample_contractors(month: str = "2024-05", seed: int = 7) -> List[Contractor]:
    rng = random.Random(seed)
    contractors = []
    for c_idx, (name, wages) in enumerate(
        [("Apex Facility Services", (650, 720, 800)), ("Metro Civil Works", (540, 910))]
    ):
        workers = []
        for w_idx, wage in enumerate(wages):
            attendance = [
                AttendanceEntry(date=f"{month}-{day:02d}", present=rng.random() > 0.1)
                for day in range(1, 27)
            ]
            workers.append(
                WorkerRecord(
                    id=f"w-{c_idx}-{w_idx}",
                    name=f"Worker {c_idx}-{w_idx}",
                    daily_wage=wage,
                    attendance=attendance,
                    contractor_id=f"c-{c_idx}",
                )
            )
        contractors.append(Contractor(id=f"c-{c_idx}", name=name, workers=workers))
    return contractors


def main():
    setup_logging(format_as_json=False)
    month = "2024-05"
    contractors = sample_contractors(month)
    workers = [w for c in contractors for w in c.workers]
    rows = synthesize_challan_rows(workers, seed=42)
    result = reconcile_contractors(month, rows, contractors)
    print(result.summary)
    for record in result.records:
        print(record.status, record.employee_name, record.difference, record.remarks)


if __name__ == "__main__":
    main()
