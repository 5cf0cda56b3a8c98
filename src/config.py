"""Statutory constants and tunables for PF reconciliation."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from typing import Mapping

PF_RATE_EMPLOYEE = 0.12
PF_RATE_EMPLOYER = 0.12  # not used in comparisons
PF_WAGE_CEILING = 15000
MATCH_TOLERANCE = 2
DEFAULT_DAYS_PRESENT = 22
CURRENCY_SYMBOL = "₹"

ENV_PREFIX = "CHALLAN_RECON_"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass(frozen=True, slots=True)
class ReconciliationSettings:
    """Values the engine uses when computing and classifying PF figures."""

    pf_rate: float = PF_RATE_EMPLOYEE
    pf_wage_ceiling: float = PF_WAGE_CEILING
    match_tolerance: float = MATCH_TOLERANCE
    default_days_present: int = DEFAULT_DAYS_PRESENT
    restrict_to_month: bool = False
    currency_symbol: str = CURRENCY_SYMBOL

    def __post_init__(self) -> None:
        for field_name in ("pf_rate", "pf_wage_ceiling", "match_tolerance"):
            value = getattr(self, field_name)
            if not math.isfinite(value) or value < 0:
                raise ValueError(
                    f"{field_name} must be a finite, non-negative number, got {value!r}"
                )
        if self.default_days_present < 1:
            raise ValueError(
                f"default_days_present must be at least 1, got {self.default_days_present!r}"
            )


DEFAULT_SETTINGS = ReconciliationSettings()


def _env_number(environ: Mapping[str, str], name: str, default, cast, minimum=0):
    raw = environ.get(ENV_PREFIX + name)
    if raw is None or not raw.strip():
        return default
    try:
        value = cast(raw.strip())
    except ValueError as exc:
        raise ValueError(f"Invalid value for {ENV_PREFIX + name}: {raw!r}") from exc
    if not math.isfinite(value) or value < minimum:
        raise ValueError(
            f"Invalid value for {ENV_PREFIX + name}: {raw!r} "
            f"(must be a finite number >= {minimum})"
        )
    return value


def _env_flag(environ: Mapping[str, str], name: str, default: bool) -> bool:
    raw = environ.get(ENV_PREFIX + name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid value for {ENV_PREFIX + name}: {raw!r}")


def load_settings(environ: Mapping[str, str] | None = None) -> ReconciliationSettings:
    """Build settings from ``CHALLAN_RECON_*`` environment variables.

    Unset variables keep their statutory defaults.
    """

    env = os.environ if environ is None else environ
    return ReconciliationSettings(
        pf_rate=_env_number(env, "PF_RATE", PF_RATE_EMPLOYEE, float),
        pf_wage_ceiling=_env_number(env, "PF_WAGE_CEILING", PF_WAGE_CEILING, float),
        match_tolerance=_env_number(env, "MATCH_TOLERANCE", MATCH_TOLERANCE, float),
        default_days_present=_env_number(
            env, "DEFAULT_DAYS", DEFAULT_DAYS_PRESENT, int, minimum=1
        ),
        restrict_to_month=_env_flag(env, "RESTRICT_TO_MONTH", False),
    )


__all__ = [
    "CURRENCY_SYMBOL",
    "DEFAULT_DAYS_PRESENT",
    "DEFAULT_SETTINGS",
    "MATCH_TOLERANCE",
    "PF_RATE_EMPLOYEE",
    "PF_RATE_EMPLOYER",
    "PF_WAGE_CEILING",
    "ReconciliationSettings",
    "load_settings",
]
