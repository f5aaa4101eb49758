"""Unit tests for the match row model (models/match_model.py)."""

from datetime import date

import pytest

from common.utils import records_to_frame
from controllers.stats_controller import build_analysis
from models.match_model import FullTimeResult, MatchRecord
from tests.helpers import make_record


def _draw(total_goals):
    return MatchRecord(
        Season_End_Year=2021,
        Wk=1,
        Date=date(2020, 9, 12),
        Home="Fulham",
        Away="Arsenal",
        HomeGoals=1,
        AwayGoals=1,
        FTR=FullTimeResult.DRAW,
        TotalGoals=total_goals,
    )


class TestTotalGoals:
    def test_mismatched_total_is_rejected(self) -> None:
        with pytest.raises(ValueError, match="TotalGoals=9"):
            _draw(9)

    def test_matching_total_is_accepted(self) -> None:
        assert _draw(2).TotalGoals == 2

    def test_unset_total_is_accepted(self) -> None:
        assert _draw(None).TotalGoals is None

    def test_with_total_goals_derives_sum(self) -> None:
        assert make_record(2, 3, FullTimeResult.HOME_WIN).with_total_goals().TotalGoals == 5

    def test_frame_recomputes_total_from_goal_counts(self) -> None:
        record = _draw(2)
        # bypass __post_init__
        object.__setattr__(record, "TotalGoals", 9)
        assert records_to_frame([record])["TotalGoals"].tolist() == [2]
        assert build_analysis([record]).total_freq == {2: 1}


class TestFullTimeResult:
    def test_labels(self) -> None:
        assert [r.label for r in FullTimeResult] == ["Home Win", "Draw", "Away Win"]

    def test_string_comparison(self) -> None:
        assert FullTimeResult("H") is FullTimeResult.HOME_WIN
        assert FullTimeResult.DRAW == "D"
