from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from typing import Any, Dict, Literal

from ..core.types import EngineId
from .arithmetic_year import ArithmeticYearParams
from .leap import CYCLE33_RESIDUES, CycleLeapRule
from .legacy_year import LegacyYearParams
from .month_table import LEGACY_TABLE, STANDARD_TABLE, MonthTable


@dataclass(frozen=True)
class CalendarSpec:
    """Pure data payload for constructing a calendar engine."""
    year_params: Any  # LegacyYearParams | ArithmeticYearParams
    months: MonthTable
    epoch: date
    meta: dict


@dataclass(frozen=True)
class EngineSpec:
    """Top-level wrapper for all engine specifications."""
    kind: Literal["legacy", "arithmetic"]
    id: EngineId
    payload: CalendarSpec

    @staticmethod
    def like(name: str) -> "EngineSpec":
        if name not in ALL_SPECS:
            raise KeyError(f"Unknown base spec '{name}'. Available: {sorted(ALL_SPECS)}")
        return ALL_SPECS[name]

    def tweak(self, **kwargs) -> "EngineSpec":
        return replace(self, payload=replace(self.payload, **kwargs))

    def renamed(self, name: str, *, family: str = "custom") -> "EngineSpec":
        return replace(self, id=replace(self.id, name=name, family=family))


# ============================================================
# LEGACY CONSTANTS
# ============================================================

# Conventional start of the Persian calendar: March 21st, 621 CE.
LEGACY_EPOCH = date(621, 3, 21)
LEGACY_MEAN_YEAR = 365.2422

LEGACY_LEAP_RULE = CycleLeapRule(cycle=33, residues=CYCLE33_RESIDUES, epoch_year=0)


# ============================================================
# ARITHMETIC CONSTANTS
# ============================================================

# 979/01/01 fell on 1600-03-20; the 33-year residues count from that year.
ARITHMETIC_EPOCH_YEAR = 979
ARITHMETIC_EPOCH = date(1600, 3, 20)

ARITHMETIC_LEAP_RULE = CycleLeapRule(
    cycle=33, residues=CYCLE33_RESIDUES, epoch_year=ARITHMETIC_EPOCH_YEAR
)


# ============================================================
# SPECS
# ============================================================

LEGACY = EngineSpec(
    kind="legacy",
    id=EngineId("legacy", "legacy", "1"),
    payload=CalendarSpec(
        year_params=LegacyYearParams(leap_rule=LEGACY_LEAP_RULE, mean_year=LEGACY_MEAN_YEAR),
        months=LEGACY_TABLE,
        epoch=LEGACY_EPOCH,
        meta={"description": "Day-count approximation anchored at 621-03-21 (not invertible)."},
    ),
)

ARITHMETIC = EngineSpec(
    kind="arithmetic",
    id=EngineId("arithmetic", "arithmetic", "1"),
    payload=CalendarSpec(
        year_params=ArithmeticYearParams(
            leap_rule=ARITHMETIC_LEAP_RULE, epoch_year=ARITHMETIC_EPOCH_YEAR
        ),
        months=STANDARD_TABLE,
        epoch=ARITHMETIC_EPOCH,
        meta={"description": "33-year arithmetic calendar (exactly invertible)."},
    ),
)

ALL_SPECS: Dict[str, EngineSpec] = {
    "legacy": LEGACY,
    "arithmetic": ARITHMETIC,
}
