"""
Decision collection at the boundary between the simulation and whoever plays it.

The simulation never reads input itself. It hands a `Prompt` to a `Boundary`
and gets a raw value back; invalid values are answered by re-issuing the same
prompt with an `InputError` attached, so the boundary can tell the player what
went wrong. Each stand's morning is a small state machine:

    ASK_GLASSES -> ASK_SIGNS -> ASK_PRICE -> CONFIRM -> DONE
                                                  \\-> ASK_GLASSES (change)
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Optional, Protocol, Tuple
import logging
import re

import config as cfg
import costs
from stand import Stand

logger = logging.getLogger(__name__)


class PromptKind(Enum):
    GLASSES = "glasses"
    SIGNS = "signs"
    PRICE = "price"
    CONFIRM_CHANGE = "confirm_change"
    NEW_GAME = "new_game"
    STAND_COUNT = "stand_count"
    PLAY_AGAIN = "play_again"


YES_NO = {PromptKind.CONFIRM_CHANGE, PromptKind.NEW_GAME, PromptKind.PLAY_AGAIN}


class InputError(Enum):
    NOT_A_NUMBER = "not_a_number"
    OUT_OF_RANGE = "out_of_range"
    INSUFFICIENT_FUNDS = "insufficient_funds"


class DecisionError(ValueError):
    def __init__(self, error: InputError, message: str, needed: Optional[float] = None):
        super().__init__(message)
        self.error = error
        self.message = message
        self.needed = needed


class SeasonAbandoned(Exception):
    """Raised by a boundary when the player walks away mid-season."""


@dataclass(frozen=True)
class Prompt:
    kind: PromptKind
    stand_id: Optional[int] = None
    low: Optional[int] = None
    high: Optional[int] = None
    cash: Optional[float] = None        # cash still available for this decision
    needed: Optional[float] = None      # cost of the rejected answer
    error: Optional[InputError] = None
    draft: Optional[Tuple[int, int, int]] = None  # (glasses, signs, price) awaiting confirmation

    @property
    def is_yes_no(self) -> bool:
        return self.kind in YES_NO


class Boundary(Protocol):
    def request_decision(self, prompt: Prompt) -> Any: ...

    def emit_report(self, report: Any) -> None: ...


# ---------------- parsing ----------------

# ASCII digits only, no underscores
_INTEGER = re.compile(r"[+-]?[0-9]+")


def parse_int(raw: Any) -> int:
    if isinstance(raw, bool):
        raise DecisionError(InputError.NOT_A_NUMBER, f"{raw!r} is not a whole number")
    if isinstance(raw, int):
        return raw
    text = str(raw).strip()
    if not _INTEGER.fullmatch(text):
        raise DecisionError(InputError.NOT_A_NUMBER, f"{raw!r} is not a whole number")
    return int(text)


def parse_bounded(raw: Any, low: int, high: int) -> int:
    value = parse_int(raw)
    if not low <= value <= high:
        raise DecisionError(InputError.OUT_OF_RANGE, f"{value} is outside {low}..{high}")
    return value


def parse_yes(raw: Any) -> bool:
    """Anything starting with Y (any case) is a yes; everything else is a no."""
    if isinstance(raw, bool):
        return raw
    return str(raw).strip().upper().startswith("Y")


def parse_stand_count(raw: Any) -> int:
    """Stand count clamped to [1, MAX_STANDS]; unreadable answers mean one stand."""
    try:
        n = parse_int(raw)
    except DecisionError:
        return 1
    return max(1, min(cfg.MAX_STANDS, n))


# ---------------- per-stand state machine ----------------

class Step(Enum):
    ASK_GLASSES = "ask_glasses"
    ASK_SIGNS = "ask_signs"
    ASK_PRICE = "ask_price"
    CONFIRM = "confirm"
    DONE = "done"


class DecisionCollector:
    """Collects glasses, signs and price for one stand on one day."""

    def __init__(self, stand: Stand, unit_cost_cents: int, boundary: Boundary):
        self.stand = stand
        self.unit_cost_cents = unit_cost_cents
        self.boundary = boundary
        self.step = Step.ASK_GLASSES
        self.glasses = 0
        self.signs = 0
        self.price_cents = 0
        self.rounds = 0  # times the stand went back to change its answers

    def _ask(self, prompt: Prompt, accept) -> Any:
        # same prompt until the answer validates
        while True:
            raw = self.boundary.request_decision(prompt)
            try:
                return accept(raw)
            except DecisionError as err:
                logger.debug("stand %d: %s rejected (%s)", self.stand.id, prompt.kind.value, err.message)
                prompt = replace(prompt, error=err.error, needed=err.needed)

    def _accept_glasses(self, raw: Any) -> int:
        glasses = parse_bounded(raw, 0, cfg.MAX_GLASSES)
        cost = costs.production_cost(glasses, self.unit_cost_cents)
        if cost > self.stand.cash:
            raise DecisionError(
                InputError.INSUFFICIENT_FUNDS,
                f"{glasses} glasses need ${cost:.2f}, only ${self.stand.cash:.2f} in cash",
                needed=cost,
            )
        return glasses

    def _cash_after_glasses(self) -> float:
        return self.stand.cash - costs.production_cost(self.glasses, self.unit_cost_cents)

    def _accept_signs(self, raw: Any) -> int:
        signs = parse_bounded(raw, 0, cfg.MAX_SIGNS)
        left = self._cash_after_glasses()
        cost = costs.signs_cost(signs)
        if cost > left:
            raise DecisionError(
                InputError.INSUFFICIENT_FUNDS,
                f"{signs} signs need ${cost:.2f}, only ${left:.2f} left after lemonade",
                needed=cost,
            )
        return signs

    def _accept_price(self, raw: Any) -> int:
        return parse_bounded(raw, 0, cfg.MAX_PRICE_CENTS)

    def advance(self) -> Step:
        """Run the current step and move to the next one."""
        sid = self.stand.id
        if self.step is Step.ASK_GLASSES:
            self.glasses = self._ask(
                Prompt(PromptKind.GLASSES, sid, 0, cfg.MAX_GLASSES, cash=self.stand.cash),
                self._accept_glasses,
            )
            self.step = Step.ASK_SIGNS
        elif self.step is Step.ASK_SIGNS:
            self.signs = self._ask(
                Prompt(PromptKind.SIGNS, sid, 0, cfg.MAX_SIGNS, cash=self._cash_after_glasses()),
                self._accept_signs,
            )
            self.step = Step.ASK_PRICE
        elif self.step is Step.ASK_PRICE:
            self.price_cents = self._ask(
                Prompt(PromptKind.PRICE, sid, 0, cfg.MAX_PRICE_CENTS),
                self._accept_price,
            )
            self.step = Step.CONFIRM
        elif self.step is Step.CONFIRM:
            change = parse_yes(self.boundary.request_decision(
                Prompt(PromptKind.CONFIRM_CHANGE, sid, draft=(self.glasses, self.signs, self.price_cents))
            ))
            if change:
                self.rounds += 1
                self.step = Step.ASK_GLASSES
            else:
                self.step = Step.DONE
        return self.step

    def collect(self) -> Stand:
        while self.step is not Step.DONE:
            self.advance()
        self.stand.commit(self.glasses, self.signs, self.price_cents)
        return self.stand


def collect_decisions(stand: Stand, unit_cost_cents: int, boundary: Boundary) -> Stand:
    return DecisionCollector(stand, unit_cost_cents, boundary).collect()
