from __future__ import annotations
from typing import Dict, Mapping, Sequence

from common.constants import RESULT_CODES
from common.stats import describe, frequency_distribution
from common.utils import records_to_frame
from models.analysis_model import Analysis, Insights
from models.match_model import MatchRecord


def result_percentages(ftr_freq: Mapping[str, int], total_matches: int) -> Dict[str, float]:
    """Share of each result code in percent, one decimal; 0.0 for everything when there are no matches."""
    if total_matches <= 0:
        return {code: 0.0 for code in RESULT_CODES}
    return {code: round(ftr_freq.get(code, 0) / total_matches * 100, 1) for code in RESULT_CODES}


def build_analysis(records: Sequence[MatchRecord]) -> Analysis:
    df = records_to_frame(list(records))

    # describe() raises EmptyInputError on an empty frame
    home_stats = describe(df["HomeGoals"])
    away_stats = describe(df["AwayGoals"])
    total_stats = describe(df["TotalGoals"])

    ftr_freq = {str(k): int(v) for k, v in df["FTR"].value_counts(sort=False).items()}
    total_matches = len(df)

    return Analysis(
        home_stats=home_stats,
        away_stats=away_stats,
        total_stats=total_stats,
        home_freq=frequency_distribution(df["HomeGoals"]),
        away_freq=frequency_distribution(df["AwayGoals"]),
        total_freq=frequency_distribution(df["TotalGoals"]),
        ftr_freq=ftr_freq,
        ftr_percentages=result_percentages(ftr_freq, total_matches),
        total_matches=total_matches,
    )


def build_insights(analysis: Analysis) -> Insights:
    pct = analysis.ftr_percentages
    return Insights(
        home_goal_advantage=analysis.home_stats.mean > analysis.away_stats.mean,
        home_result_advantage=pct.get("H", 0.0) > pct.get("A", 0.0),
        total_goals_iqr=analysis.total_stats.iqr,
    )
