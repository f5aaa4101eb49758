import streamlit as st
import matplotlib.pyplot as plt

from common.colors import HOME_COLOR, AWAY_COLOR, TOTAL_COLOR
from common.config import load_settings
from common.metrics import build_histogram_series, build_cumulative_series, build_pie_series
from common.plots import plot_histogram, plot_ogive, plot_result_pie
from common.ui import sidebar_header, require_report

# ------------------------------------------------------------
# Page setup & consistent sidebar
# ------------------------------------------------------------
SMALL_FIGSIZE = (5.2, 2.4)  # <- compact size for all charts

st.set_page_config(page_title="Charts", layout="wide")


def _show(fig):
    st.pyplot(fig, use_container_width=False)
    plt.close(fig)


def main():
    sidebar_header(source=load_settings().source)
    report = require_report()
    a = report.analysis

    st.header("Histogram, Ogive and Pie Chart")

    # ------------------------------------------------------------
    # Histograms
    # ------------------------------------------------------------
    st.subheader("Histograms")
    left, right = st.columns(2)
    for col, title, freq, color in [
        (left, "Home goals", a.home_freq, HOME_COLOR),
        (right, "Away goals", a.away_freq, AWAY_COLOR),
    ]:
        with col:
            fig, ax = plt.subplots(figsize=SMALL_FIGSIZE)
            plot_histogram(build_histogram_series(freq), color=color, ax=ax, title=title)
            _show(fig)

    total_hist = build_histogram_series(a.total_freq)
    left, _ = st.columns(2)
    with left:
        fig, ax = plt.subplots(figsize=SMALL_FIGSIZE)
        plot_histogram(total_hist, color=TOTAL_COLOR, ax=ax, title="Total goals")
        _show(fig)

    # ------------------------------------------------------------
    # Ogive
    # ------------------------------------------------------------
    st.subheader("Ogive — cumulative frequency of total goals per match")
    left, _ = st.columns(2)
    with left:
        fig, ax = plt.subplots(figsize=SMALL_FIGSIZE)
        plot_ogive(build_cumulative_series(total_hist), ax=ax)
        _show(fig)

    # ------------------------------------------------------------
    # Pie
    # ------------------------------------------------------------
    st.subheader("Full-time result distribution")
    left, _ = st.columns(2)
    with left:
        fig, ax = plt.subplots(figsize=(4.0, 3.0))
        plot_result_pie(build_pie_series(a.ftr_freq), ax=ax)
        _show(fig)


if __name__ == "__main__":
    main()
