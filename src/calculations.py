"""Wage and provident-fund calculations derived from attendance."""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from .config import DEFAULT_SETTINGS, ReconciliationSettings
from .models import WorkerRecord

logger = logging.getLogger(__name__)

_MONTH_PATTERN = re.compile(r"^(\d{4})-(\d{2})$")


@dataclass(frozen=True, slots=True)
class WageCalculation:
    """System-side figures for one worker."""

    days_present: int
    calculated_wage: float
    pf_wage_base: float
    calculated_pf: int


def parse_month(month: str) -> tuple[int, int]:
    """Split a ``YYYY-MM`` reporting month into ``(year, month)``."""

    match = _MONTH_PATTERN.match(str(month).strip())
    if match is None:
        raise ValueError(f"Reporting month must look like YYYY-MM, got {month!r}")
    year, month_number = int(match.group(1)), int(match.group(2))
    if not 1 <= month_number <= 12:
        raise ValueError(f"Reporting month out of range: {month!r}")
    return year, month_number


def round_half_up(value) -> int:
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def to_amount(value) -> float:
    """Coerce a declared figure to a number; anything unreadable counts as 0."""

    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        amount = float(value)
    else:
        text = str(value).strip().replace(",", "").lstrip("₹").strip()
        if not text:
            return 0.0
        try:
            amount = float(text)
        except ValueError:
            logger.warning("Treating malformed amount %r as 0", value)
            return 0.0
    if not math.isfinite(amount):
        logger.warning("Treating non-finite amount %r as 0", value)
        return 0.0
    return amount


def count_days_present(
    worker: WorkerRecord,
    month: str | None = None,
    settings: ReconciliationSettings = DEFAULT_SETTINGS,
) -> int:
    """Count present days, defaulting to a standard working month when zero.

    Attendance is taken as already windowed to the reporting period unless
    ``settings.restrict_to_month`` is set, in which case only entries dated
    inside ``month`` are counted.
    """

    entries = worker.attendance
    if settings.restrict_to_month and month:
        year, month_number = parse_month(month)
        prefix = f"{year:04d}-{month_number:02d}"
        entries = [entry for entry in entries if str(entry.date).startswith(prefix)]
    days = sum(1 for entry in entries if entry.present)
    return days or settings.default_days_present


def calculate_wage(
    worker: WorkerRecord,
    month: str | None = None,
    settings: ReconciliationSettings = DEFAULT_SETTINGS,
) -> WageCalculation:
    days_present = count_days_present(worker, month, settings)
    calculated_wage = days_present * worker.daily_wage
    pf_wage_base = min(calculated_wage, settings.pf_wage_ceiling)
    calculated_pf = round_half_up(
        Decimal(str(pf_wage_base)) * Decimal(str(settings.pf_rate))
    )
    return WageCalculation(
        days_present=days_present,
        calculated_wage=calculated_wage,
        pf_wage_base=pf_wage_base,
        calculated_pf=calculated_pf,
    )


__all__ = [
    "WageCalculation",
    "calculate_wage",
    "count_days_present",
    "parse_month",
    "round_half_up",
    "to_amount",
]
