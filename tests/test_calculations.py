"""
Unit tests for wage and PF calculations.
"""

import pytest

from src.calculations import (
    calculate_wage,
    count_days_present,
    parse_month,
    round_half_up,
    to_amount,
)
from src.config import ReconciliationSettings
from src.models import AttendanceEntry, WorkerRecord


class TestParseMonth:

    def test_valid_month(self):
        assert parse_month("2024-05") == (2024, 5)

    @pytest.mark.parametrize("value", ["2024-13", "2024-00", "2024/05", "May 2024", ""])
    def test_rejects_malformed_month(self, value):
        with pytest.raises(ValueError):
            parse_month(value)


class TestRoundHalfUp:

    def test_half_rounds_up(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(1799.5) == 1800

    def test_below_half_rounds_down(self):
        assert round_half_up(1799.49) == 1799


class TestToAmount:

    def test_numbers_pass_through(self):
        assert to_amount(1800) == 1800.0
        assert to_amount(12.5) == 12.5

    def test_numeric_strings(self):
        assert to_amount(" 1,800 ") == 1800.0
        assert to_amount("₹1800") == 1800.0

    @pytest.mark.parametrize("value", [None, "", "abc", "12x", float("nan"), True])
    def test_malformed_values_become_zero(self, value):
        assert to_amount(value) == 0.0


class TestDaysPresent:

    def test_counts_only_present_days(self, worker_factory):
        worker = worker_factory("A", 500, present_days=20, absent_days=6)
        assert count_days_present(worker) == 20

    def test_empty_attendance_falls_back_to_22(self, worker_factory):
        worker = worker_factory("A", 500)
        assert count_days_present(worker) == 22

    def test_all_absent_falls_back_to_22(self, worker_factory):
        worker = worker_factory("A", 500, absent_days=5)
        assert count_days_present(worker) == 22

    def test_restrict_to_month_ignores_other_months(self):
        worker = WorkerRecord(
            id="w1",
            name="A",
            daily_wage=500,
            attendance=[
                AttendanceEntry(date="2024-04-30", present=True),
                AttendanceEntry(date="2024-05-01", present=True),
                AttendanceEntry(date="2024-05-02", present=True),
            ],
        )
        settings = ReconciliationSettings(restrict_to_month=True)

        assert count_days_present(worker, "2024-05", settings) == 2
        assert count_days_present(worker, "2024-05") == 3

    def test_custom_fallback(self, worker_factory):
        settings = ReconciliationSettings(default_days_present=26)
        assert count_days_present(worker_factory("A", 500), settings=settings) == 26


class TestCalculateWage:

    def test_pf_is_capped_at_wage_ceiling(self, worker_factory):
        worker = worker_factory("A", 1000, present_days=26)
        calc = calculate_wage(worker)

        assert calc.days_present == 26
        assert calc.calculated_wage == 26000
        assert calc.pf_wage_base == 15000
        assert calc.calculated_pf == 1800

    def test_below_ceiling(self, worker_factory):
        worker = worker_factory("A", 500, present_days=20)
        calc = calculate_wage(worker)

        assert calc.calculated_wage == 10000
        assert calc.pf_wage_base == 10000
        assert calc.calculated_pf == 1200

    def test_empty_attendance_fallback(self, worker_factory):
        calc = calculate_wage(worker_factory("A", 500))

        assert calc.days_present == 22
        assert calc.calculated_wage == 11000
        assert calc.calculated_pf == 1320

    def test_pf_rounds_half_up(self, worker_factory):
        # 1 day at 12.5 -> 12.5 * 0.12 = 1.5
        calc = calculate_wage(worker_factory("A", 12.5, present_days=1))
        assert calc.calculated_pf == 2
