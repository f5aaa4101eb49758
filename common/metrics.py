"""
Chart-ready series and display tables built from an `Analysis`.

This module provides:
    - `build_histogram_series`: frequency map -> (Goals, Count) rows sorted
        by goal value,
    - `build_cumulative_series`: histogram -> (Goals, Cumulative) rows for
        the ogive,
    - `build_pie_series`: result-code counts -> exactly three segments
        (Home Win, Draw, Away Win) with their colors,
    - `build_stats_table` / `build_result_table`: small DataFrames the
        Statistics page shows with `st.dataframe`.

Function notes:
    - All builders are pure: the same input always gives the same frame and
        the input mapping is never modified. Key order in the input does not
        matter because every series is sorted by key before use.
    - Frequency keys may arrive as strings (e.g. "2") when a map has been
        round-tripped through JSON; they are converted to int.
"""

#Import libraries
from __future__ import annotations
from typing import Mapping, Union

import pandas as pd

from common.colors import RESULT_COLORS
from common.constants import RESULT_CODES
from models.analysis_model import Analysis, FieldStatistics
from models.match_model import FullTimeResult

HISTOGRAM_COLUMNS  = ["Goals", "Count"]
CUMULATIVE_COLUMNS = ["Goals", "Cumulative"]
PIE_COLUMNS        = ["Name", "Code", "Value", "Color"]


# ---------- Series for charts ----------
def build_histogram_series(freq: Mapping[Union[int, str], int]) -> pd.DataFrame:
    rows = [(int(k), int(v)) for k, v in freq.items()]
    df = pd.DataFrame(rows, columns=HISTOGRAM_COLUMNS).astype("int64")
    return df.sort_values("Goals", kind="mergesort").reset_index(drop=True)


def build_cumulative_series(histogram: pd.DataFrame) -> pd.DataFrame:
    """
    Running total of `Count` in ascending `Goals` order (the ogive).

    Expects the frame from `build_histogram_series`; it is re-sorted here so
    a hand-built or shuffled histogram still accumulates in key order.
    """
    hist = histogram.sort_values("Goals", kind="mergesort")
    return pd.DataFrame({
        "Goals": hist["Goals"].to_numpy(dtype="int64"),
        "Cumulative": hist["Count"].cumsum().to_numpy(dtype="int64"),
    }, columns=CUMULATIVE_COLUMNS)


def build_pie_series(ftr_freq: Mapping[str, int]) -> pd.DataFrame:
    """Three fixed segments; a result code absent from the data shows as 0."""
    rows = []
    for code in RESULT_CODES:
        rows.append({
            "Name": FullTimeResult(code).label,
            "Code": code,
            "Value": int(ftr_freq.get(code, 0)),
            "Color": RESULT_COLORS[code],
        })
    return pd.DataFrame(rows, columns=PIE_COLUMNS)


# ---------- Tables for the Statistics page ----------
def _stats_row(field: str, s: FieldStatistics) -> dict:
    return {
        "Field": field,
        "Mean": round(s.mean, 2),
        "Median": s.median,
        "Mode": s.mode_label,
        "Q1": s.q1,
        "Q3": s.q3,
        "IQR": s.iqr,
    }


def build_stats_table(analysis: Analysis) -> pd.DataFrame:
    return pd.DataFrame([
        _stats_row("Home goals", analysis.home_stats),
        _stats_row("Away goals", analysis.away_stats),
        _stats_row("Total goals", analysis.total_stats),
    ])


def build_result_table(analysis: Analysis) -> pd.DataFrame:
    return pd.DataFrame([
        {
            "Result": FullTimeResult(code).label,
            "Matches": int(analysis.ftr_freq.get(code, 0)),
            "Percentage": analysis.ftr_percentages.get(code, 0.0),
        }
        for code in RESULT_CODES
    ])
