from typing import Tuple, List, Dict, Optional, Sequence
from dataclasses import dataclass

import pandas as pd

import config as cfg
import costs
from decisions import Prompt, PromptKind
from season import SeasonController
from stand import Stand
from weather import make_rng


@dataclass(frozen=True)
class Plan:
    """What a scripted stand tries to do every day."""
    glasses: int
    signs: int
    price_cents: int


DEFAULT_PLAN = Plan(glasses=40, signs=2, price_cents=15)


class PlannedBoundary:
    """
    Answers every prompt from a per-stand Plan, scaled down to what the stand
    can afford that morning. Never asks to change its answers. Reports are
    kept in order for inspection.
    """

    def __init__(self, plans: Dict[int, Plan], default: Plan = DEFAULT_PLAN):
        self.plans = plans
        self.default = default
        self.reports: List = []
        self.unit_cost_cents = costs.unit_cost_cents(1)

    def _plan(self, stand_id: Optional[int]) -> Plan:
        return self.plans.get(stand_id, self.default)

    def request_decision(self, prompt: Prompt):
        if prompt.is_yes_no:
            return "NO"
        # a rejected answer falls back to zero, which is always valid and affordable
        if prompt.error is not None:
            return 0
        plan = self._plan(prompt.stand_id)
        if prompt.kind is PromptKind.GLASSES:
            return min(plan.glasses, costs.max_affordable_glasses(prompt.cash, self.unit_cost_cents))
        if prompt.kind is PromptKind.SIGNS:
            return min(plan.signs, costs.max_affordable_signs(prompt.cash))
        if prompt.kind is PromptKind.PRICE:
            return plan.price_cents
        return len(self.plans) or 1

    def emit_report(self, report) -> None:
        unit_cost = getattr(report, "unit_cost_cents", None)
        if unit_cost is not None:
            self.unit_cost_cents = unit_cost
        self.reports.append(report)


def simulate_season(
    plans: Sequence[Plan] = (DEFAULT_PLAN,),
    seed: Optional[int] = None,
) -> Tuple[pd.DataFrame, List[Stand], pd.DataFrame]:
    """
    Run one headless season, one stand per plan.

    Returns:
        df_days: one row per stand per day
        stands: the final roster
        df_standings: final ranking
    """
    seed = cfg.SEED if seed is None else seed
    boundary = PlannedBoundary({i + 1: p for i, p in enumerate(plans)})

    controller = SeasonController(boundary, rng=make_rng(seed), n_stands=len(plans))
    controller.run()

    df_days = controller.days_frame()
    df_standings = controller.standings_frame()
    return df_days, controller.state.roster, df_standings
