"""
Small data model for a match row.

The frozen dataclass documents the expected fields for one played match as
they appear in the semicolon-separated source file. Keeping it immutable
makes it safe to pass the parsed rows around the app and between cached
Streamlit reruns.

Fields mirror the CSV header keys used throughout the app:
    - `Season_End_Year`, `Wk`, `Date`, `Home`, `Away`, `HomeGoals`,
        `AwayGoals`, `FTR`.
    - `TotalGoals` is derived (HomeGoals + AwayGoals). It stays `None` on a
        freshly parsed record and is filled once during ingestion by
        `controllers.data_controller.aggregate_matches`. A record whose
        TotalGoals disagrees with the two goal counts is rejected with
        `ValueError`.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from datetime import date
from enum import Enum
from typing import Optional


class FullTimeResult(str, Enum):
    HOME_WIN = "H"
    DRAW = "D"
    AWAY_WIN = "A"

    @property
    def label(self) -> str:
        return _RESULT_LABELS[self]


_RESULT_LABELS = {
    FullTimeResult.HOME_WIN: "Home Win",
    FullTimeResult.DRAW: "Draw",
    FullTimeResult.AWAY_WIN: "Away Win",
}


@dataclass(frozen=True)
class MatchRecord:
        Season_End_Year: int
        Wk: int
        Date: date
        Home: str
        Away: str
        HomeGoals: int
        AwayGoals: int
        FTR: FullTimeResult
        TotalGoals: Optional[int] = None

        def __post_init__(self):
            if self.TotalGoals is not None and self.TotalGoals != self.HomeGoals + self.AwayGoals:
                raise ValueError(
                    f"TotalGoals={self.TotalGoals} does not match "
                    f"HomeGoals + AwayGoals = {self.HomeGoals + self.AwayGoals}"
                )

        def with_total_goals(self) -> "MatchRecord":
            """Return a copy carrying the derived TotalGoals value."""
            return replace(self, TotalGoals=self.HomeGoals + self.AwayGoals)
