from __future__ import annotations

from typing import List
import logging

import costs
import economics
import weather
from decisions import Boundary, collect_decisions
from reports import DayBriefing, DailyReport, StandReport
from state import Phase, SeasonState
from weather import RandomSource

logger = logging.getLogger(__name__)


class DayCycle:
    """
    One simulated day over a season's state:
      - weather and event draw
      - morning briefing (unit cost, notices, forecast)
      - storm wipe-out, or decision collection for every solvent stand
      - resolution and bookkeeping
      - daily report
    The caller decides whether the season goes on.
    """

    def __init__(self, state: SeasonState, boundary: Boundary, rng: RandomSource):
        self.state = state
        self.boundary = boundary
        self.rng = rng

    def _weather(self) -> None:
        self.state.phase = Phase.DAILY_CYCLE
        self.state.day += 1
        self.state.weather = weather.draw(self.state.day, self.rng)

    def _brief(self) -> DayBriefing:
        day = self.state.day
        briefing = DayBriefing(
            day=day,
            unit_cost_cents=costs.unit_cost_cents(day),
            sky=self.state.weather.sky,
            event=self.state.weather.event,
            notices=costs.notices_for(day),
        )
        self.boundary.emit_report(briefing)
        return briefing

    def _storm(self) -> List[StandReport]:
        # everything set up this morning is ruined, cash stays as it was
        lines = []
        for stand in self.state.roster:
            if stand.bankrupt:
                lines.append(StandReport.of(stand, skipped=True))
                continue
            stand.wipe_out(self.state.day, self.state.weather.event.name)
            lines.append(StandReport.of(stand))
        logger.info("day %d: thunderstorm, no sales", self.state.day)
        return lines

    def _collect(self, unit_cost_cents: int) -> None:
        for stand in self.state.roster:
            if stand.bankrupt:
                continue
            collect_decisions(stand, unit_cost_cents, self.boundary)

    def _resolve(self) -> List[StandReport]:
        self.state.phase = Phase.RESOLUTION
        day = self.state.day
        event = self.state.weather.event
        lines = []
        for stand in self.state.roster:
            if stand.bankrupt:
                lines.append(StandReport.of(stand, skipped=True))
                continue
            result = economics.settle(stand, day, event, self.rng)
            lines.append(StandReport.of(stand, went_bankrupt=result.bankrupt))
        return lines

    def run(self) -> DailyReport:
        self._weather()
        briefing = self._brief()
        logger.debug(
            "day %d: sky=%s event=%s cost=%dc",
            briefing.day, briefing.sky.value, briefing.event.name, briefing.unit_cost_cents,
        )

        if self.state.weather.storm_active:
            lines = self._storm()
        else:
            self._collect(briefing.unit_cost_cents)
            lines = self._resolve()

        report = DailyReport(day=self.state.day, weather=self.state.weather, stands=lines)
        self.state.records.extend(report.to_records())
        self.boundary.emit_report(report)
        return report
