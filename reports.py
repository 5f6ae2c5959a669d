from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import List, Optional, Dict

import pandas as pd

from costs import Notice
from stand import Stand
from weather import DailyEvent, LightRain, Sky, WeatherOutcome


@dataclass(frozen=True)
class Instructions:
    start_cash: float
    sign_cost: float
    unit_cost_cents: int


@dataclass(frozen=True)
class DayBriefing:
    """Morning announcement: what the day costs and what the weather will do."""
    day: int
    unit_cost_cents: int
    sky: Sky
    event: DailyEvent
    notices: List[Notice] = field(default_factory=list)

    @property
    def rain_chance(self) -> Optional[int]:
        return self.event.severity if isinstance(self.event, LightRain) else None


@dataclass(frozen=True)
class StandReport:
    stand_id: int
    glasses: int
    signs: int
    price_cents: int
    glasses_sold: int
    income: float
    expenses: float
    profit: float
    cash: float
    bankrupt: bool
    went_bankrupt: bool = False   # bankruptcy happened today
    skipped: bool = False         # already bankrupt, took no part today

    @classmethod
    def of(cls, stand: Stand, went_bankrupt: bool = False, skipped: bool = False) -> "StandReport":
        return cls(
            stand_id=stand.id,
            glasses=stand.glasses,
            signs=stand.signs,
            price_cents=stand.price_cents,
            glasses_sold=stand.glasses_sold,
            income=stand.income,
            expenses=stand.expenses,
            profit=stand.profit,
            cash=stand.cash,
            bankrupt=stand.bankrupt,
            went_bankrupt=went_bankrupt,
            skipped=skipped,
        )


@dataclass(frozen=True)
class DailyReport:
    day: int
    weather: WeatherOutcome
    stands: List[StandReport]

    @property
    def storm(self) -> bool:
        return self.weather.storm_active

    def to_records(self) -> List[Dict]:
        rows = []
        for s in self.stands:
            row = asdict(s)
            row["day"] = self.day
            row["sky"] = self.weather.sky.value
            row["event"] = self.weather.event.name
            rows.append(row)
        return rows


@dataclass(frozen=True)
class Standing:
    rank: int
    stand_id: int
    cash: float
    bankrupt: bool


@dataclass(frozen=True)
class SeasonSummary:
    days_played: int
    standings: List[Standing]
    winner: Optional[Standing] = None

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame.from_records(
            [asdict(s) for s in self.standings],
            columns=["rank", "stand_id", "cash", "bankrupt"],
        )
