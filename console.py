from typing import Callable, List

from costs import Notice
from decisions import InputError, Prompt, PromptKind, SeasonAbandoned
from reports import DailyReport, DayBriefing, Instructions, SeasonSummary
from weather import HeatWave, LightRain, Sky, StreetWork

QUESTIONS = {
    PromptKind.GLASSES: "HOW MANY GLASSES OF LEMONADE DO YOU WISH TO MAKE? ",
    PromptKind.SIGNS: "HOW MANY ADVERTISING SIGNS (15 CENTS EACH) DO YOU WANT TO MAKE? ",
    PromptKind.PRICE: "WHAT PRICE (IN CENTS) DO YOU WISH TO CHARGE FOR LEMONADE? ",
    PromptKind.CONFIRM_CHANGE: "WOULD YOU LIKE TO CHANGE ANYTHING? (Y/N) ",
    PromptKind.NEW_GAME: "ARE YOU STARTING A NEW GAME? (YES OR NO) ",
    PromptKind.STAND_COUNT: "HOW MANY PEOPLE WILL BE PLAYING? ",
    PromptKind.PLAY_AGAIN: "WOULD YOU LIKE TO PLAY AGAIN? (Y/N) ",
}

SKIES = {
    Sky.FAIR: "SUNNY",
    Sky.CLOUDY: "CLOUDY",
    Sky.HOT: "HOT AND DRY",
    Sky.STORM: "THUNDERSTORMS!",
}

NOTICES = {
    Notice.SUGAR_SUBSIDY_ENDED: "(YOUR MOTHER QUIT GIVING YOU FREE SUGAR)",
    Notice.MIX_PRICE_UP: "(THE PRICE OF LEMONADE MIX JUST WENT UP)",
}


def money(x: float) -> str:
    return f"${x:.2f}"


def error_lines(prompt: Prompt) -> List[str]:
    if prompt.error is InputError.INSUFFICIENT_FUNDS:
        return [
            "*** INSUFFICIENT FUNDS ***",
            f"THINK AGAIN!!! YOU HAVE ONLY {money(prompt.cash or 0.0)} IN CASH",
            f"AND THAT NEEDS {money(prompt.needed or 0.0)}.",
        ]
    if prompt.error is not None:
        return ["*** ERROR ***", "COME ON, BE REASONABLE!!! TRY AGAIN."]
    return []


def briefing_lines(b: DayBriefing) -> List[str]:
    lines = [
        "",
        "LEMONSVILLE WEATHER REPORT",
        f"  {SKIES[b.sky]}",
        "",
        f"ON DAY {b.day}, THE COST OF LEMONADE IS $.{b.unit_cost_cents:02d}",
    ]
    for n in b.notices:
        lines += ["*** SPECIAL NOTICE ***", NOTICES[n]]
    if isinstance(b.event, LightRain):
        lines += ["*** WEATHER UPDATE ***",
                  f"THERE IS A {b.event.severity}% CHANCE OF LIGHT RAIN,",
                  "AND THE WEATHER IS COOLER TODAY."]
    elif isinstance(b.event, HeatWave):
        lines += ["*** WEATHER ALERT ***", "A HEAT WAVE IS PREDICTED FOR TODAY!"]
    elif isinstance(b.event, StreetWork):
        lines += ["*** TRAFFIC ALERT ***",
                  "THE STREET DEPARTMENT IS WORKING TODAY.",
                  "THERE WILL BE NO TRAFFIC ON YOUR STREET."]
    return lines


def daily_lines(r: DailyReport) -> List[str]:
    if r.storm:
        lines = ["", "*** BREAKING NEWS ***",
                 "A SEVERE THUNDERSTORM HIT LEMONSVILLE EARLIER TODAY, JUST AS",
                 "THE LEMONADE STANDS WERE BEING SET UP. EVERYTHING WAS RUINED!!"]
    else:
        lines = ["", "$$ LEMONSVILLE DAILY FINANCIAL REPORT $$"]
    for s in r.stands:
        if s.skipped:
            lines.append(f"   STAND {s.stand_id}   *** BANKRUPT ***")
            continue
        lines += [
            "",
            f"   DAY {r.day:2d}   STAND {s.stand_id}",
            f"  {s.glasses_sold:3d}  GLASSES SOLD",
            f"{money(s.price_cents / 100)}  PER GLASS          INCOME {money(s.income)}",
            f"  {s.glasses:3d}  GLASSES MADE",
            f"  {s.signs:3d}  SIGNS MADE         EXPENSES {money(s.expenses)}",
            f"        PROFIT  {s.profit:.2f}",
            f"        ASSETS  {s.cash:.2f}",
        ]
        if s.went_bankrupt:
            lines += ["  *** BANKRUPTCY NOTICE ***",
                      "  YOU DON'T HAVE ENOUGH MONEY LEFT",
                      "  TO STAY IN BUSINESS - YOU'RE BANKRUPT!"]
    return lines


def summary_lines(s: SeasonSummary) -> List[str]:
    lines = ["", "GAME OVER!", f"FINAL STANDINGS AFTER {s.days_played} DAYS", ""]
    for st in s.standings:
        lines.append(f"{st.rank:2d}. STAND {st.stand_id}: {st.cash:.2f}")
    if s.winner is not None:
        lines += ["", "*** CONGRATULATIONS! ***",
                  f"STAND {s.winner.stand_id} WINS WITH {s.winner.cash:.2f}!"]
    return lines


def instruction_lines(i: Instructions) -> List[str]:
    return [
        "",
        "TO MANAGE YOUR LEMONADE STAND, YOU WILL NEED TO MAKE THESE DECISIONS EVERY DAY:",
        "1. HOW MANY GLASSES OF LEMONADE TO MAKE (ONLY ONE BATCH IS MADE EACH MORNING)",
        f"2. HOW MANY ADVERTISING SIGNS TO MAKE (THE SIGNS COST {int(round(i.sign_cost * 100))} CENTS EACH)",
        "3. WHAT PRICE TO CHARGE FOR EACH GLASS",
        "",
        f"YOU WILL BEGIN WITH {money(i.start_cash)} CASH (ASSETS).",
        f"YOUR COST TO MAKE LEMONADE IS {i.unit_cost_cents} CENTS A GLASS (THIS MAY CHANGE IN THE FUTURE).",
        "KEEP TRACK OF YOUR ASSETS, BECAUSE YOU CAN'T SPEND MORE MONEY THAN YOU HAVE!",
    ]


class ConsoleBoundary:
    """Plain-text boundary over input()/print(). EOF or Ctrl-C abandons the season."""

    def __init__(self, read: Callable[[str], str] = input, write: Callable[[str], None] = print):
        self.read = read
        self.write = write
        self._last_stand = None

    def _say(self, lines: List[str]) -> None:
        for line in lines:
            self.write(line)

    def request_decision(self, prompt: Prompt) -> str:
        if prompt.stand_id is not None and prompt.stand_id != self._last_stand:
            self._say(["", f"LEMONADE STAND {prompt.stand_id}"])
            if prompt.cash is not None:
                self._say([f"ASSETS: {money(prompt.cash)}"])
            self._last_stand = prompt.stand_id
        if prompt.draft is not None:
            g, n, p = prompt.draft
            self._say(["DECISION SUMMARY:", f"  GLASSES TO MAKE: {g}",
                       f"  SIGNS TO MAKE: {n}", f"  PRICE PER GLASS: {p} CENTS"])
        self._say(error_lines(prompt))
        try:
            return self.read(QUESTIONS[prompt.kind])
        except (EOFError, KeyboardInterrupt):
            raise SeasonAbandoned() from None

    def emit_report(self, report) -> None:
        if isinstance(report, DayBriefing):
            self._last_stand = None
            self._say(briefing_lines(report))
        elif isinstance(report, DailyReport):
            self._say(daily_lines(report))
        elif isinstance(report, SeasonSummary):
            self._say(summary_lines(report))
        elif isinstance(report, Instructions):
            self._say(instruction_lines(report))
