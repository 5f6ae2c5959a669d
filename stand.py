from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, List, Dict

import pandas as pd

import config as cfg

_HISTORY_COLS = [
    "day",
    "glasses",
    "signs",
    "price_cents",
    "glasses_sold",
    "income",
    "expenses",
    "profit",
    "cash",
    "bankrupt",
    "event",
]


@dataclass
class Stand:
    id: int
    cash: float = field(default_factory=lambda: float(cfg.START_CASH))

    # today's decisions
    glasses: int = 0
    signs: int = 0
    price_cents: int = 0

    # today's results
    glasses_sold: int = 0
    income: float = 0.0
    expenses: float = 0.0
    profit: float = 0.0

    bankrupt: bool = False

    _rows: List[Dict] = field(default_factory=list, repr=False)
    _cached_df: Optional[pd.DataFrame] = field(default=None, repr=False)

    @property
    def history(self) -> pd.DataFrame:
        """Materialize if needed, but read-only during simulation."""
        if self._cached_df is None:
            if self._rows:
                self._cached_df = pd.DataFrame.from_records(self._rows, columns=_HISTORY_COLS)
            else:
                self._cached_df = pd.DataFrame(columns=_HISTORY_COLS)
        return self._cached_df

    def commit(self, glasses: int, signs: int, price_cents: int) -> None:
        self.glasses = int(glasses)
        self.signs = int(signs)
        self.price_cents = int(price_cents)

    def wipe_out(self, day: int, event_name: str) -> None:
        """Storm: decisions discarded, nothing sold, nothing spent, cash untouched."""
        self.glasses = self.signs = self.price_cents = 0
        self.glasses_sold = 0
        self.income = self.expenses = self.profit = 0.0
        self.log_day(day, event_name)

    def go_bankrupt(self) -> None:
        self.bankrupt = True

    def log_day(self, day: int, event_name: str) -> None:
        self._rows.append({
            "day": day,
            "glasses": int(self.glasses),
            "signs": int(self.signs),
            "price_cents": int(self.price_cents),
            "glasses_sold": int(self.glasses_sold),
            "income": float(self.income),
            "expenses": float(self.expenses),
            "profit": float(self.profit),
            "cash": float(self.cash),
            "bankrupt": bool(self.bankrupt),
            "event": event_name,
        })
        self._cached_df = None  # invalidate cache


def open_stands(n: int, start_id: int = 1) -> List[Stand]:
    """Roster of n fresh stands with consecutive ids in join order."""
    return [Stand(id=start_id + i) for i in range(n)]
