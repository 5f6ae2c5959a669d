from __future__ import annotations

from typing import List, Optional
import logging

import pandas as pd

import config as cfg
import costs
from day import DayCycle
from decisions import Boundary, Prompt, PromptKind, parse_stand_count, parse_yes
from reports import DailyReport, Instructions, SeasonSummary, Standing
from stand import Stand
from state import Phase, SeasonState
from weather import RandomSource, make_rng

logger = logging.getLogger(__name__)


def rank_stands(roster: List[Stand]) -> List[Standing]:
    """Richest first; sorted() is stable so ties keep roster order."""
    ordered = sorted(roster, key=lambda s: s.cash, reverse=True)
    return [
        Standing(rank=i + 1, stand_id=s.id, cash=s.cash, bankrupt=s.bankrupt)
        for i, s in enumerate(ordered)
    ]


def pick_winner(standings: List[Standing]) -> Optional[Standing]:
    # nobody wins by merely keeping the starting cash
    if standings and standings[0].cash > cfg.START_CASH:
        return standings[0]
    return None


class SeasonController:
    """
    Drives DayCycle until every stand is bankrupt or the season runs out of days,
    then ranks the stands. Owns its SeasonState; nothing else mutates it.
    """

    def __init__(self, boundary: Boundary, rng: Optional[RandomSource] = None,
                 n_stands: Optional[int] = None):
        self.boundary = boundary
        self.rng = make_rng() if rng is None else rng
        self.state: Optional[SeasonState] = None
        self.summary: Optional[SeasonSummary] = None
        self.reports: List[DailyReport] = []
        if n_stands is not None:
            self.state = SeasonState.fresh(max(1, min(cfg.MAX_STANDS, int(n_stands))))

    def setup(self) -> SeasonState:
        """Ask whether this is a new game and how many stands are playing."""
        new_game = parse_yes(self.boundary.request_decision(Prompt(PromptKind.NEW_GAME)))
        n = parse_stand_count(self.boundary.request_decision(
            Prompt(PromptKind.STAND_COUNT, low=1, high=cfg.MAX_STANDS)
        ))
        self.state = SeasonState.fresh(n)
        logger.info("season set up with %d stand(s)", n)

        if new_game:
            self.boundary.emit_report(Instructions(
                start_cash=cfg.START_CASH,
                sign_cost=cfg.SIGN_COST,
                unit_cost_cents=costs.unit_cost_cents(1),
            ))
        return self.state

    def is_over(self) -> bool:
        s = self.state
        return not s.solvent or s.day >= cfg.SEASON_LENGTH

    def play_day(self) -> DailyReport:
        report = DayCycle(self.state, self.boundary, self.rng).run()
        self.reports.append(report)
        return report

    def finish(self) -> SeasonSummary:
        self.state.phase = Phase.FINISHED
        standings = rank_stands(self.state.roster)
        self.summary = SeasonSummary(
            days_played=self.state.day,
            standings=standings,
            winner=pick_winner(standings),
        )
        if self.summary.winner is not None:
            logger.info("season over after %d days, stand %d wins with $%.2f",
                        self.state.day, self.summary.winner.stand_id, self.summary.winner.cash)
        else:
            logger.info("season over after %d days, no winner", self.state.day)
        self.boundary.emit_report(self.summary)
        return self.summary

    def run(self) -> SeasonSummary:
        if self.state is None:
            self.setup()
        while True:
            self.play_day()
            if self.is_over():
                break
        return self.finish()

    # ---- tabular views ----

    def days_frame(self) -> pd.DataFrame:
        return pd.DataFrame.from_records(self.state.records)

    def standings_frame(self) -> pd.DataFrame:
        summary = self.summary or SeasonSummary(self.state.day, rank_stands(self.state.roster))
        return summary.to_frame()


def play_sessions(boundary: Boundary, rng: Optional[RandomSource] = None) -> List[SeasonSummary]:
    """Play seasons back to back for as long as the players want another one."""
    rng = make_rng() if rng is None else rng
    summaries = []
    while True:
        summaries.append(SeasonController(boundary, rng).run())
        again = parse_yes(boundary.request_decision(Prompt(PromptKind.PLAY_AGAIN)))
        if not again:
            return summaries
