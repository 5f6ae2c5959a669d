from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol, Union
import math

import numpy as np

import config as cfg


class RandomSource(Protocol):
    """Anything yielding uniform floats in [0, 1); numpy Generators qualify."""

    def random(self) -> float: ...


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    seed = cfg.SEED if seed is None else seed
    return np.random.default_rng(seed)


class Sky(Enum):
    FAIR = "fair"
    CLOUDY = "cloudy"
    HOT = "hot"
    STORM = "storm"


# ---- daily events: exactly one per day ----

@dataclass(frozen=True)
class NoEvent:
    name = "none"


@dataclass(frozen=True)
class Storm:
    name = "storm"


@dataclass(frozen=True)
class HeatWave:
    name = "heat_wave"


@dataclass(frozen=True)
class LightRain:
    severity: int  # percent of demand lost, as forecast
    name = "light_rain"


@dataclass(frozen=True)
class StreetWork:
    name = "street_work"


DailyEvent = Union[NoEvent, Storm, HeatWave, LightRain, StreetWork]

NO_EVENT = NoEvent()


@dataclass(frozen=True)
class WeatherOutcome:
    sky: Sky
    event: DailyEvent = NO_EVENT

    @property
    def storm_active(self) -> bool:
        return isinstance(self.event, Storm)

    @property
    def heat_wave_active(self) -> bool:
        return isinstance(self.event, HeatWave)

    @property
    def light_rain_active(self) -> bool:
        return isinstance(self.event, LightRain)

    @property
    def street_work_active(self) -> bool:
        return isinstance(self.event, StreetWork)


def rain_severity(rng: RandomSource) -> int:
    """One of 30, 40, 50, 60, 70 percent; a fresh draw on every call."""
    step = math.floor(rng.random() * cfg.RAIN_SEVERITY_STEPS)
    return cfg.RAIN_SEVERITY_BASE + step * cfg.RAIN_SEVERITY_STEP


def _base_sky(r: float) -> Sky:
    if r < cfg.FAIR_UPPER:
        return Sky.FAIR
    elif r < cfg.CLOUDY_UPPER:
        return Sky.CLOUDY
    return Sky.HOT


def draw(day: int, rng: RandomSource) -> WeatherOutcome:
    """
    Weather for one day.

    The base sky is always drawn so the random stream advances the same way
    on every day; the first EVENT_FREE_DAYS days then override it to fair
    with no event. Later days take one more draw that decides the event:
    storm (cloudy, < STORM_CHANCE), light rain (rest of cloudy), heat wave
    (every hot day) or street work (fair, < STREET_WORK_CHANCE).
    """
    sky = _base_sky(rng.random())

    if day <= cfg.EVENT_FREE_DAYS:
        return WeatherOutcome(sky=Sky.FAIR)

    e = rng.random()

    if sky is Sky.CLOUDY:
        if e < cfg.STORM_CHANCE:
            return WeatherOutcome(sky=Sky.STORM, event=Storm())
        return WeatherOutcome(sky=Sky.CLOUDY, event=LightRain(severity=rain_severity(rng)))

    if sky is Sky.HOT:
        return WeatherOutcome(sky=Sky.HOT, event=HeatWave())

    if e < cfg.STREET_WORK_CHANCE:
        return WeatherOutcome(sky=Sky.FAIR, event=StreetWork())
    return WeatherOutcome(sky=Sky.FAIR)
