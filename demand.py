
import math

import config as cfg
from weather import DailyEvent, HeatWave, LightRain, StreetWork


def base_demand(price_cents: int) -> float:
    """Glasses wanted at a price, before advertising and weather.

    Above the reference price demand falls linearly; below it demand
    explodes with 1/price^2. The two branches do not meet at the reference
    price. A free glass has no upper bound on demand.
    """
    p = price_cents
    if p >= cfg.REFERENCE_PRICE:
        return (cfg.REFERENCE_PRICE - p) / cfg.REFERENCE_PRICE * cfg.HIGH_PRICE_SLOPE * cfg.BASE_DEMAND + cfg.BASE_DEMAND
    if p <= 0:
        return math.inf
    return cfg.LOW_PRICE_NUMERATOR / (p * p)


def ad_multiplier(signs: int) -> float:
    # saturates at 2x
    return 1 + (1 - math.exp(-signs * cfg.AD_RATE))


def event_multiplier(event: DailyEvent, severity: int = None) -> float:
    """Demand factor for the day's event; `severity` overrides the forecast rain."""
    if isinstance(event, HeatWave):
        return cfg.HEAT_WAVE_MULT
    if isinstance(event, LightRain):
        pct = event.severity if severity is None else severity
        return 1 - pct / 100
    if isinstance(event, StreetWork):
        return cfg.STREET_WORK_MULT
    return 1.0


def glasses_demanded(price_cents: int, signs: int, event: DailyEvent, severity: int = None) -> float:
    """Whole glasses demanded (math.inf for a free glass)."""
    d = base_demand(price_cents)
    d = d * ad_multiplier(signs)
    d *= event_multiplier(event, severity)
    if math.isinf(d):
        return d
    return math.floor(d)
