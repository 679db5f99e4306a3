"""Clock source. Everything that needs "now" takes it as a parameter."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

Clock = Callable[[], datetime]


def system_clock() -> datetime:
    """Local wall-clock reading of the host."""
    return datetime.now()


@dataclass(frozen=True)
class FixedClock:
    """A clock frozen at one instant."""
    at: datetime

    def __call__(self) -> datetime:
        return self.at


def resolve_now(now: Optional[datetime] = None, clock: Optional[Clock] = None) -> datetime:
    if now is not None:
        return now
    return (clock or system_clock)()
