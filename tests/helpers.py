"""Builders shared by the test modules."""

from __future__ import annotations

from datetime import date

from models.match_model import MatchRecord


def make_record(home_goals: int, away_goals: int, ftr, wk: int = 1,
                home: str = "Arsenal", away: str = "Chelsea") -> MatchRecord:
    return MatchRecord(
        Season_End_Year=2021,
        Wk=wk,
        Date=date(2020, 9, 12),
        Home=home,
        Away=away,
        HomeGoals=home_goals,
        AwayGoals=away_goals,
        FTR=ftr,
    )
