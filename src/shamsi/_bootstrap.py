from __future__ import annotations
import os

from shamsi.core.engine import EngineRegistry
from shamsi.engines.specs import ALL_SPECS
from shamsi.engines.factory import make_engine

DEFAULT_ENGINE_ENV = "SHAMSI_ENGINE"

def build_registry() -> EngineRegistry:
    engines = {}
    for name, spec in ALL_SPECS.items():
        engines[name] = make_engine(spec)
    reg = EngineRegistry(engines)
    default = os.environ.get(DEFAULT_ENGINE_ENV)
    if default:
        reg.set_default(default)
    return reg
