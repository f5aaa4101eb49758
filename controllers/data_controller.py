"""
Data controller helpers that glue the common data utilities to the
Streamlit pages.

This module exposes:
    - `load_matches(source)` reads and validates the file, returning typed
        records plus the metadata shown in the "Overview of the File" panel.
    - `aggregate_matches(records)` derives TotalGoals and accumulates the
        whole-dataset counters in a single pass.
    - `load_report(source, delimiter, timeout)` runs the full pipeline and
        is cached with `st.cache_data`, keyed on its arguments, so reruns and
        page switches reuse the result until a setting changes.

All file handling and parsing is implemented in `common.utils`; statistics
are built by `controllers.stats_controller`.
"""

from __future__ import annotations
import logging
from typing import List, Sequence, Tuple

import streamlit as st

from common.utils import describe_source, frame_to_records, parse_matches_csv, read_source
from controllers.stats_controller import build_analysis, build_insights
from models.analysis_model import DatasetSummary, FileInfo, MatchReport
from models.match_model import FullTimeResult, MatchRecord

logger = logging.getLogger(__name__)


def load_matches(source: str, delimiter: str = ";",
                 timeout: Tuple[float, float] = (10, 20)) -> Tuple[List[MatchRecord], FileInfo, bytes]:
    raw = read_source(source, timeout=timeout)
    records = frame_to_records(parse_matches_csv(raw, delimiter=delimiter))
    return records, describe_source(source, raw), raw


def aggregate_matches(records: Sequence[MatchRecord]) -> Tuple[List[MatchRecord], DatasetSummary]:
    """
    Return (augmented records, summary) in one pass over `records`.

    The input is left untouched; each output record is a new object with
    TotalGoals set. A record whose result code is not H/D/A still counts as
    a match and its goals are summed, but it adds to none of the three
    outcome counters.
    """
    augmented: List[MatchRecord] = []
    total_home = total_away = 0
    draws = home_wins = away_wins = 0

    for rec in records:
        augmented.append(rec.with_total_goals())
        total_home += rec.HomeGoals
        total_away += rec.AwayGoals
        if rec.FTR == FullTimeResult.HOME_WIN:
            home_wins += 1
        elif rec.FTR == FullTimeResult.DRAW:
            draws += 1
        elif rec.FTR == FullTimeResult.AWAY_WIN:
            away_wins += 1
        else:
            logger.warning("Unknown result code %r for %s vs %s (%s); left out of outcome counts",
                           rec.FTR, rec.Home, rec.Away, rec.Date)

    summary = DatasetSummary(
        total_matches=len(augmented),
        total_goals=total_home + total_away,
        total_home_goals=total_home,
        total_away_goals=total_away,
        total_draws=draws,
        total_home_wins=home_wins,
        total_away_wins=away_wins,
    )
    return augmented, summary


def build_report(source: str, delimiter: str = ";",
                 timeout: Tuple[float, float] = (10, 20)) -> MatchReport:
    """Load → aggregate → analyse. Raises a `MatchDataError` subclass on failure."""
    records, file_info, raw = load_matches(source, delimiter=delimiter, timeout=timeout)
    augmented, summary = aggregate_matches(records)
    analysis = build_analysis(augmented)
    logger.info("Analysed %d matches from %s (%d goals)", summary.total_matches, file_info.name, summary.total_goals)
    return MatchReport(
        file_info=file_info,
        summary=summary,
        analysis=analysis,
        insights=build_insights(analysis),
        raw=raw,
    )


@st.cache_data(ttl=3600, show_spinner=False)
def load_report(source: str, delimiter: str,
                timeout: Tuple[float, float] = (10, 20)) -> MatchReport:
    # Cached per (source, delimiter, timeout); exceptions are not cached by Streamlit.
    return build_report(source, delimiter=delimiter, timeout=timeout)
