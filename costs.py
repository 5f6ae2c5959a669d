from typing import List, Dict
from enum import Enum

import config as cfg


class Notice(Enum):
    SUGAR_SUBSIDY_ENDED = "sugar_subsidy_ended"
    MIX_PRICE_UP = "mix_price_up"


# day number -> special notice shown that morning
NOTICES: Dict[int, Notice] = {
    3: Notice.SUGAR_SUBSIDY_ENDED,
    7: Notice.MIX_PRICE_UP,
}


def unit_cost_cents(day: int) -> int:
    """Cost in cents to make one glass on the given day."""
    cost = cfg.COST_SCHEDULE[0][1]
    for first_day, cents in cfg.COST_SCHEDULE:
        if day >= first_day:
            cost = cents
    return cost


def notices_for(day: int) -> List[Notice]:
    notice = NOTICES.get(day)
    return [notice] if notice is not None else []


def production_cost(glasses: int, unit_cost_cents: int) -> float:
    return glasses * (unit_cost_cents * 0.01)


def signs_cost(signs: int) -> float:
    return signs * cfg.SIGN_COST


def max_affordable_glasses(cash: float, unit_cost_cents: int) -> int:
    """Largest glass count whose production cost does not exceed cash."""
    per_glass = unit_cost_cents * 0.01
    if per_glass <= 0:
        return cfg.MAX_GLASSES
    n = min(cfg.MAX_GLASSES, max(0, int(cash / per_glass)))
    # float division can overshoot by one
    while n > 0 and production_cost(n, unit_cost_cents) > cash:
        n -= 1
    return n


def max_affordable_signs(cash_left: float) -> int:
    n = min(cfg.MAX_SIGNS, max(0, int(cash_left / cfg.SIGN_COST)))
    while n > 0 and signs_cost(n) > cash_left:
        n -= 1
    return n
