import pytest

import config as cfg
from conftest import ScriptedBoundary, ScriptedRandom
from decisions import Prompt, PromptKind, SeasonAbandoned
from reports import Instructions, SeasonSummary, Standing
from season import SeasonController, pick_winner, play_sessions, rank_stands
from sim import Plan, PlannedBoundary
from stand import Stand
from state import Phase
from weather import make_rng

BROKE = Plan(glasses=100, signs=0, price_cents=100)


def test_ranking_is_stable_on_ties():
    roster = [Stand(id=1, cash=1.0), Stand(id=2, cash=3.0), Stand(id=3, cash=1.0)]
    standings = rank_stands(roster)
    assert [s.stand_id for s in standings] == [2, 1, 3]
    assert [s.rank for s in standings] == [1, 2, 3]


def test_winner_needs_more_than_starting_cash():
    assert pick_winner([Standing(1, 1, cfg.START_CASH, False)]) is None
    top = Standing(1, 2, 2.01, False)
    assert pick_winner([top, Standing(2, 1, 1.0, False)]) == top
    assert pick_winner([]) is None


def test_setup_new_game_shows_instructions():
    boundary = ScriptedBoundary(["YES", "3"])
    state = SeasonController(boundary, rng=make_rng(0)).setup()
    assert [s.id for s in state.roster] == [1, 2, 3]
    assert state.phase is Phase.SETUP
    (instr,) = boundary.of_type(Instructions)
    assert instr.start_cash == 2.00
    assert instr.unit_cost_cents == 2


def test_setup_continuing_game_with_garbage_count():
    boundary = ScriptedBoundary(["no", "lots"])
    state = SeasonController(boundary, rng=make_rng(0)).setup()
    assert len(state.roster) == 1
    assert boundary.of_type(Instructions) == []


def test_season_lasts_at_most_thirty_days():
    boundary = PlannedBoundary({1: Plan(10, 0, 15), 2: Plan(20, 1, 12)})
    controller = SeasonController(boundary, rng=make_rng(5), n_stands=2)
    summary = controller.run()
    assert summary.days_played <= cfg.SEASON_LENGTH
    assert controller.state.phase is Phase.FINISHED
    assert boundary.reports[-1] is summary
    if any(not s.bankrupt for s in controller.state.roster):
        assert summary.days_played == cfg.SEASON_LENGTH


def test_season_ends_once_everyone_is_bankrupt():
    boundary = PlannedBoundary({1: BROKE, 2: BROKE})
    controller = SeasonController(boundary, rng=make_rng(1), n_stands=2)
    summary = controller.run()
    assert summary.days_played == 1
    assert summary.winner is None
    assert all(s.bankrupt for s in controller.state.roster)


class RecordingBoundary(PlannedBoundary):
    def __init__(self, plans):
        super().__init__(plans)
        self.day = 0
        self.asked = []

    def request_decision(self, prompt: Prompt):
        self.asked.append((self.day, prompt.stand_id))
        return super().request_decision(prompt)

    def emit_report(self, report) -> None:
        self.day = getattr(report, "day", self.day)
        super().emit_report(report)


def test_bankruptcy_is_monotonic_and_excludes_the_stand():
    boundary = RecordingBoundary({1: BROKE, 2: Plan(10, 0, 10)})
    controller = SeasonController(boundary, rng=make_rng(2), n_stands=2)
    controller.run()

    broke = controller.state.roster[0]
    assert broke.bankrupt
    assert {day for day, sid in boundary.asked if sid == 1} == {1}
    flags = list(broke.history["bankrupt"])
    assert flags == [True]
    assert len(controller.state.roster) == 2


@pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
def test_books_balance_every_day(seed):
    plans = {1: Plan(40, 2, 15), 2: Plan(200, 5, 8), 3: Plan(30, 0, 25)}
    controller = SeasonController(PlannedBoundary(plans), rng=make_rng(seed), n_stands=3)
    controller.run()
    for stand in controller.state.roster:
        h = stand.history
        cash_before = cfg.START_CASH
        was_bankrupt = False
        for row in h.itertuples():
            assert row.profit == pytest.approx(row.income - row.expenses, abs=0.01)
            assert row.cash == pytest.approx(cash_before + row.profit, abs=0.01)
            assert 0 <= row.glasses_sold <= row.glasses
            assert not (was_bankrupt and not row.bankrupt)
            was_bankrupt = bool(row.bankrupt)
            cash_before = row.cash


def test_frames():
    controller = SeasonController(PlannedBoundary({1: Plan(20, 1, 12)}), rng=make_rng(9), n_stands=1)
    controller.run()
    days = controller.days_frame()
    assert {"day", "stand_id", "cash", "event", "sky"} <= set(days.columns)
    assert list(days["day"]) == list(range(1, controller.state.day + 1))
    standings = controller.standings_frame()
    assert list(standings.columns) == ["rank", "stand_id", "cash", "bankrupt"]


class TwoSeasons(PlannedBoundary):
    def __init__(self):
        super().__init__({1: BROKE})
        self.again = ["Y", "N"]

    def request_decision(self, prompt: Prompt):
        if prompt.kind is PromptKind.PLAY_AGAIN:
            return self.again.pop(0)
        return super().request_decision(prompt)


def test_play_again_starts_a_fresh_season():
    boundary = TwoSeasons()
    summaries = play_sessions(boundary, rng=make_rng(0))
    assert len(summaries) == 2
    assert all(isinstance(s, SeasonSummary) for s in summaries)
    assert [s.days_played for s in summaries] == [1, 1]


class Quitter(ScriptedBoundary):
    def request_decision(self, prompt):
        if prompt.kind is PromptKind.GLASSES:
            raise SeasonAbandoned()
        return super().request_decision(prompt)


def test_abandoning_propagates():
    controller = SeasonController(Quitter(["N", "1"]), rng=make_rng(0))
    with pytest.raises(SeasonAbandoned):
        controller.run()
    assert controller.summary is None


def test_storm_on_the_last_day_still_ends_the_season():
    # fair days 1-2, fair with no event days 3-29, cloudy storm on day 30
    draws = [0.1, 0.1] + [0.1, 0.9] * (cfg.SEASON_LENGTH - 3) + [0.7, 0.1]
    rng = ScriptedRandom(draws)
    boundary = PlannedBoundary({1: Plan(10, 0, 15)})
    controller = SeasonController(boundary, rng=rng, n_stands=1)
    summary = controller.run()

    assert rng.exhausted
    assert summary.days_played == cfg.SEASON_LENGTH
    assert controller.state.phase is Phase.FINISHED
    assert controller.reports[-1].storm
    assert controller.reports[-1].day == cfg.SEASON_LENGTH
