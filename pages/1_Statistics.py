import streamlit as st

from common.config import load_settings
from common.metrics import build_stats_table, build_result_table
from common.ui import sidebar_header, require_report

st.set_page_config(page_title="Statistics", layout="wide")


def _field_lines(label: str, s) -> str:
    return (
        f"**{label}**  \n"
        f"• Q1 (25%): {s.q1} goals  \n"
        f"• Q2 (50% - Median): {s.median:g} goals  \n"
        f"• Q3 (75%): {s.q3} goals"
    )


def main():
    sidebar_header(source=load_settings().source)
    report = require_report()
    a, ins = report.analysis, report.insights

    st.header("Statistics")
    st.caption(f"Computed over {a.total_matches} matches.")

    # ------------------------------------------------------------
    # Mean, median, mode, quartiles
    # ------------------------------------------------------------
    st.subheader("Mean, median, mode and quartiles (goals per match)")
    st.dataframe(build_stats_table(a), use_container_width=True, hide_index=True)
    st.caption("Quartiles are read directly from the sorted data at positions ⌊n·0.25⌋ and ⌊n·0.75⌋.")

    cols = st.columns(3)
    for col, (label, s) in zip(cols, [("Home goals", a.home_stats),
                                      ("Away goals", a.away_stats),
                                      ("Total goals", a.total_stats)]):
        col.markdown(_field_lines(label, s))

    # ------------------------------------------------------------
    # Full-time results
    # ------------------------------------------------------------
    st.subheader("Full-time results")
    st.dataframe(build_result_table(a), use_container_width=True, hide_index=True)

    # ------------------------------------------------------------
    # Conclusions
    # ------------------------------------------------------------
    st.subheader("Conclusions")
    st.markdown(
        f"- Home teams score **{a.home_stats.mean:.2f}** goals per match on average, "
        f"away teams **{a.away_stats.mean:.2f}**; the average match has "
        f"**{a.total_stats.mean:.2f}** goals.\n"
        + ("- Home teams score more on average (home advantage).\n"
           if ins.home_goal_advantage else
           "- Away teams score at least as much as home teams on average.\n")
        + f"- Half of all matches have **{a.total_stats.median:g}** goals or fewer.\n"
        f"- Most frequent score lines: home **{a.home_stats.mode_label}**, "
        f"away **{a.away_stats.mode_label}**, total **{a.total_stats.mode_label}** goals.\n"
        f"- 25% of matches have {a.total_stats.q1} goals or fewer and 75% have "
        f"{a.total_stats.q3} or fewer (IQR = {ins.total_goals_iqr}).\n"
        f"- Home wins {a.ftr_percentages['H']}%, draws {a.ftr_percentages['D']}%, "
        f"away wins {a.ftr_percentages['A']}%"
        + (" — results favour the home side." if ins.home_result_advantage else
           " — no home advantage in results.")
    )


if __name__ == "__main__":
    main()
