"""
Result containers produced by the statistics pipeline.

Every class here is a frozen dataclass built exactly once per dataset load
and only read afterwards by the Streamlit pages:
    - `DatasetSummary`: whole-dataset counters from the aggregation pass.
    - `FieldStatistics`: mean/median/mode/quartiles of one numeric column.
    - `Analysis`: per-field statistics, frequency maps and result shares.
    - `FileInfo`: what the "Overview of the File" panel shows.
    - `Insights`: the booleans/values behind the written conclusions.
    - `MatchReport`: the bundle a page asks for.

Frequency maps are plain dicts so the whole report pickles cleanly through
`st.cache_data`; treat them as read-only.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Tuple

NO_MODE_LABEL = "No mode"


@dataclass(frozen=True)
class DatasetSummary:
    total_matches: int
    total_goals: int
    total_home_goals: int
    total_away_goals: int
    total_draws: int
    total_home_wins: int
    total_away_wins: int


@dataclass(frozen=True)
class FieldStatistics:
    mean: float
    median: float
    modes: Tuple[int, ...]   # empty tuple = no meaningful mode
    q1: int
    q3: int

    @property
    def has_mode(self) -> bool:
        return bool(self.modes)

    @property
    def mode_label(self) -> str:
        if not self.modes:
            return NO_MODE_LABEL
        return ", ".join(str(m) for m in self.modes)

    @property
    def iqr(self) -> int:
        return self.q3 - self.q1


@dataclass(frozen=True)
class Analysis:
    home_stats: FieldStatistics
    away_stats: FieldStatistics
    total_stats: FieldStatistics
    home_freq: Dict[int, int]
    away_freq: Dict[int, int]
    total_freq: Dict[int, int]
    ftr_freq: Dict[str, int]
    ftr_percentages: Dict[str, float]
    total_matches: int


@dataclass(frozen=True)
class FileInfo:
    name: str
    size_bytes: int
    file_type: str
    source: str

    @property
    def size_kb(self) -> float:
        return round(self.size_bytes / 1024, 2)


@dataclass(frozen=True)
class Insights:
    home_goal_advantage: bool     # home mean > away mean
    home_result_advantage: bool   # H% > A%
    total_goals_iqr: int


@dataclass(frozen=True)
class MatchReport:
    file_info: FileInfo
    summary: DatasetSummary
    analysis: Analysis
    insights: Insights
    raw: bytes
