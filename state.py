from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List

from stand import Stand, open_stands
from weather import Sky, WeatherOutcome


class Phase(Enum):
    SETUP = "setup"
    DAILY_CYCLE = "daily_cycle"
    RESOLUTION = "resolution"
    FINISHED = "finished"


@dataclass
class SeasonState:
    """Everything one season mutates. Owned by a single SeasonController."""
    roster: List[Stand]
    day: int = 0
    weather: WeatherOutcome = field(default_factory=lambda: WeatherOutcome(sky=Sky.FAIR))
    phase: Phase = Phase.SETUP
    records: List[Dict] = field(default_factory=list, repr=False)

    @classmethod
    def fresh(cls, n_stands: int) -> "SeasonState":
        return cls(roster=open_stands(n_stands))

    @property
    def solvent(self) -> List[Stand]:
        return [s for s in self.roster if not s.bankrupt]
