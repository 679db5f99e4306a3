"""
shamsi.engines.factory
----------------------
Transforms pure data specifications into live, executable Engine objects.
"""

from __future__ import annotations

import logging

from shamsi.core.errors import EngineUnavailableError
from shamsi.engines.arithmetic_year import ArithmeticYearEngine, ArithmeticYearParams
from shamsi.engines.calendar import CalendarEngine
from shamsi.engines.legacy_year import LegacyYearEngine, LegacyYearParams
from shamsi.engines.specs import CalendarSpec, EngineSpec

log = logging.getLogger(__name__)


def build_calendar_engine(spec: CalendarSpec, *, id) -> CalendarEngine:
    """Transforms a pure data CalendarSpec into a live CalendarEngine."""
    if isinstance(spec.year_params, LegacyYearParams):
        year_engine = LegacyYearEngine(spec.year_params)
    elif isinstance(spec.year_params, ArithmeticYearParams):
        year_engine = ArithmeticYearEngine(spec.year_params)
    else:
        raise EngineUnavailableError(f"Unknown year params type: {type(spec.year_params)}")

    return CalendarEngine(id=id, year=year_engine, months=spec.months, epoch=spec.epoch)


def make_engine(spec: EngineSpec) -> CalendarEngine:
    """The universal entry point."""
    engine = build_calendar_engine(spec.payload, id=spec.id)
    log.debug("built %s engine %r (epoch %s)", spec.kind, spec.id.name, spec.payload.epoch)
    return engine
