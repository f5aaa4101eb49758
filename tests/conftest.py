"""Shared pytest fixtures for the match statistics tests.

Fixtures are organized into categories:
- Record fixtures (typed MatchRecords, built without touching the parser)
- CSV fixtures (raw semicolon-separated text and files on disk)
"""

from __future__ import annotations

from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import pytest

from models.match_model import FullTimeResult, MatchRecord
from tests.helpers import make_record


# =============================================================================
# Record Fixtures
# =============================================================================


@pytest.fixture
def three_matches() -> list[MatchRecord]:
    """One home win, one draw, one away win: 2-1, 0-0, 1-3."""
    return [
        make_record(2, 1, FullTimeResult.HOME_WIN, wk=1),
        make_record(0, 0, FullTimeResult.DRAW, wk=2),
        make_record(1, 3, FullTimeResult.AWAY_WIN, wk=3),
    ]


@pytest.fixture
def no_draw_matches() -> list[MatchRecord]:
    return [
        make_record(1, 0, FullTimeResult.HOME_WIN),
        make_record(3, 1, FullTimeResult.HOME_WIN),
        make_record(0, 2, FullTimeResult.AWAY_WIN),
    ]


# =============================================================================
# CSV Fixtures
# =============================================================================

HEADER = "Season_End_Year;Wk;Date;Home;HomeGoals;AwayGoals;Away;FTR"


@pytest.fixture
def csv_header() -> str:
    return HEADER


@pytest.fixture
def valid_csv_text() -> str:
    return "\n".join([
        HEADER,
        "2021;1;2020-09-12;Fulham;0;3;Arsenal;A",
        "2021;1;2020-09-12;Crystal Palace;1;0;Southampton;H",
        "2021;1;2020-09-13;Tottenham;0;1;Everton;A",
        "2021;2;2020-09-19;Everton;5;2;West Brom;H",
        "2021;2;2020-09-20;Southampton;2;5;Tottenham;A",
        "2021;3;2020-09-26;Brighton;2;3;Man Utd;A",
        "2021;3;2020-09-27;Leeds;4;3;Sheffield Utd;H",
        "2021;4;2020-10-03;Chelsea;4;0;Crystal Palace;H",
        "2021;4;2020-10-04;Man Utd;1;6;Tottenham;A",
        "2021;5;2020-10-17;Fulham;1;1;Sheffield Utd;D",
    ]) + "\n"


@pytest.fixture
def valid_csv_file(tmp_path: Path, valid_csv_text: str) -> Path:
    path = tmp_path / "premier-league-matches.csv"
    path.write_text(valid_csv_text, encoding="utf-8")
    return path
