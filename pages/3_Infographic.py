# pages/3_Infographic.py
import streamlit as st
import matplotlib.pyplot as plt
from matplotlib.gridspec import GridSpec
from io import BytesIO

from common.colors import HOME_COLOR, AWAY_COLOR, TOTAL_COLOR
from common.config import load_settings
from common.metrics import build_histogram_series, build_cumulative_series, build_pie_series
from common.plots import plot_histogram, plot_ogive, plot_result_pie
from common.ui import sidebar_header, require_report
from models.analysis_model import MatchReport

# --- Header layout knobs (easy to tweak) ---
HEADER_POS = {
    "title_y":    0.990,  # main title
    "subtitle_y": 0.952,  # line under title
    "stats_y":    0.915,  # headline numbers
}

# Small, readable defaults (apply to figures created after this line)
plt.rcParams.update({
    "axes.titlesize": 10,
    "axes.labelsize": 9,
    "xtick.labelsize": 8,
    "ytick.labelsize": 8,
    "legend.fontsize": 9,
    "figure.dpi": 110,
})

st.set_page_config(page_title="Infographic", layout="wide")


def _make_figure(report: MatchReport) -> plt.Figure:
    a, s = report.analysis, report.summary
    total_hist = build_histogram_series(a.total_freq)

    # Reserve generous top space so the header never overlaps plots
    fig = plt.figure(figsize=(10.5, 8.4))
    fig.subplots_adjust(top=0.84)
    gs = GridSpec(3, 2, figure=fig, hspace=0.55, wspace=0.25)

    plot_histogram(build_histogram_series(a.home_freq), color=HOME_COLOR,
                   ax=fig.add_subplot(gs[0, 0]), title="Home goals")
    plot_histogram(build_histogram_series(a.away_freq), color=AWAY_COLOR,
                   ax=fig.add_subplot(gs[0, 1]), title="Away goals")
    plot_histogram(total_hist, color=TOTAL_COLOR,
                   ax=fig.add_subplot(gs[1, 0]), title="Total goals")
    plot_ogive(build_cumulative_series(total_hist),
               ax=fig.add_subplot(gs[1, 1]), title="Ogive (total goals)")
    plot_result_pie(build_pie_series(a.ftr_freq),
                    ax=fig.add_subplot(gs[2, :]), title="Full-time results")

    # Header block
    title    = "Infographic — Premier League Descriptive Statistics"
    subtitle = f"{report.file_info.name} • {s.total_matches} matches • {s.total_goals} goals"
    statsln  = (f"Mean goals: home {a.home_stats.mean:.2f} • away {a.away_stats.mean:.2f} • "
                f"total {a.total_stats.mean:.2f}   |   "
                f"H {a.ftr_percentages['H']}% • D {a.ftr_percentages['D']}% • A {a.ftr_percentages['A']}%")

    fig.suptitle(title, fontsize=13, y=HEADER_POS["title_y"])
    fig.text(0.5, HEADER_POS["subtitle_y"], subtitle, ha="center", va="center", fontsize=10)
    fig.text(0.5, HEADER_POS["stats_y"],    statsln,  ha="center", va="center", fontsize=9.5)
    return fig


def main():
    sidebar_header(source=load_settings().source)
    report = require_report()

    st.header("Infographic")
    fig = _make_figure(report)
    st.pyplot(fig, use_container_width=True)

    # Download PDF
    pdf = BytesIO()
    fig.savefig(pdf, format="pdf", bbox_inches="tight")
    st.download_button(
        "⬇️ Download PDF",
        data=pdf.getvalue(),
        file_name=f"infographic_{report.file_info.name.rsplit('.', 1)[0]}.pdf",
        mime="application/pdf",
    )
    plt.close(fig)


if __name__ == "__main__":
    main()
