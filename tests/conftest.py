import pytest

from src.models import AttendanceEntry, ChallanRow, WorkerRecord


def make_worker(name, daily_wage, present_days=0, absent_days=0, worker_id=None, **kwargs):
    attendance = [
        AttendanceEntry(date=f"2024-05-{day:02d}", present=True)
        for day in range(1, present_days + 1)
    ]
    attendance += [
        AttendanceEntry(date=f"2024-05-{day:02d}", present=False)
        for day in range(present_days + 1, present_days + absent_days + 1)
    ]
    return WorkerRecord(
        id=worker_id or f"id-{name}",
        name=name,
        daily_wage=daily_wage,
        attendance=attendance,
        **kwargs,
    )


def make_row(name, ee_share, uan="100123456789", id_link=None, gross=0):
    return ChallanRow(
        uan=uan,
        employee_name=name,
        gross_wages=gross,
        epf_wages=min(gross, 15000),
        employee_share=ee_share,
        employer_share=ee_share,
        id_link=id_link,
    )


@pytest.fixture
def worker_factory():
    return make_worker


@pytest.fixture
def row_factory():
    return make_row
