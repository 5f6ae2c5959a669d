from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
import logging
import math

import config as cfg
import costs
from demand import glasses_demanded
from stand import Stand
from weather import DailyEvent, LightRain, RandomSource, Storm, rain_severity

logger = logging.getLogger(__name__)

# half a cent of slack for float money
TOLERANCE = 0.005


class InvariantError(AssertionError):
    """The economics produced numbers that cannot happen; a defect, not bad input."""


@dataclass(frozen=True)
class DayResult:
    glasses_sold: int
    income: float
    expenses: float
    profit: float
    cash: float          # cash after booking the profit
    bankrupt: bool
    demand: float
    rain_severity: Optional[int] = None


def is_insolvent(cash: float, unit_cost_cents: int) -> bool:
    """Bankrupt when the stand cannot afford even one more glass."""
    return cash < unit_cost_cents * 0.01


def resolve(
    stand: Stand,
    unit_cost_cents: int,
    event: DailyEvent,
    rng: Optional[RandomSource] = None,
) -> DayResult:
    """
    Sales and money for one stand's committed decisions. Does not touch the stand.

    Light rain uses a severity redrawn from `rng` when REDRAW_RAIN_SEVERITY is
    set, otherwise the forecast severity carried by the event.
    """
    if isinstance(event, Storm):
        raise InvariantError("storm days are never resolved")

    severity = None
    if isinstance(event, LightRain):
        if cfg.REDRAW_RAIN_SEVERITY:
            if rng is None:
                raise ValueError("a random source is needed to redraw rain severity")
            severity = rain_severity(rng)
        else:
            severity = event.severity

    demand = glasses_demanded(stand.price_cents, stand.signs, event, severity)
    if math.isinf(demand):
        sold = stand.glasses
    else:
        sold = max(0, min(int(demand), stand.glasses))

    cost_per_glass = unit_cost_cents * 0.01
    income = sold * stand.price_cents * 0.01
    expenses = stand.signs * cfg.SIGN_COST + stand.glasses * cost_per_glass
    profit = income - expenses
    cash = stand.cash + profit

    result = DayResult(
        glasses_sold=sold,
        income=income,
        expenses=expenses,
        profit=profit,
        cash=cash,
        bankrupt=is_insolvent(cash, unit_cost_cents),
        demand=demand,
        rain_severity=severity,
    )
    check_invariants(stand, result)
    return result


def check_invariants(stand: Stand, result: DayResult) -> None:
    if not 0 <= result.glasses_sold <= stand.glasses:
        raise InvariantError(
            f"stand {stand.id} sold {result.glasses_sold} of {stand.glasses} glasses"
        )
    if abs(result.profit - (result.income - result.expenses)) > TOLERANCE:
        raise InvariantError(f"stand {stand.id}: profit != income - expenses")
    if abs(result.cash - (stand.cash + result.profit)) > TOLERANCE:
        raise InvariantError(f"stand {stand.id}: cash drifted from cash + profit")
    if result.cash < -TOLERANCE:
        raise InvariantError(f"stand {stand.id} ended the day with ${result.cash:.2f}")


def book(stand: Stand, result: DayResult, day: int, event: DailyEvent) -> None:
    """Apply a resolved day to the stand. Bankruptcy never reverts."""
    stand.glasses_sold = result.glasses_sold
    stand.income = result.income
    stand.expenses = result.expenses
    stand.profit = result.profit
    stand.cash = result.cash

    if result.bankrupt and not stand.bankrupt:
        stand.go_bankrupt()
        logger.info("stand %d went bankrupt on day %d with $%.2f", stand.id, day, stand.cash)

    stand.log_day(day, event.name)


def settle(stand: Stand, day: int, event: DailyEvent, rng: Optional[RandomSource] = None) -> DayResult:
    """resolve() then book() at the day's unit cost."""
    result = resolve(stand, costs.unit_cost_cents(day), event, rng)
    book(stand, result, day, event)
    return result
