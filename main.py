"""
Main application entry for the Premier League descriptive statistics app.

This module defines the top-level Streamlit page that users see when they
open the app. It handles:
    - application configuration (`st.set_page_config`),
    - environment variable loading via `python-dotenv` and logging setup,
    - sidebar rendering (delegated to `common.ui`),
    - loading the match file and building the analysis once (via
        `controllers.data_controller.load_report`, which is cached),
    - the "Overview of the Data" and "Overview of the File" panels.

This file only composes logic from helper modules; parsing, statistics and
plotting live under `common/` and `controllers/`.

Notes for a new Python learner:
    - Side effects: running this module renders the UI. The heavy work is
        wrapped in `st.cache_data`, so reruns after a widget click are cheap.
    - Errors: a missing or malformed file is reported with `st.error` and
        the page stops; no partial numbers are shown.
"""

# Import libraries
import logging
import streamlit as st
from dotenv import load_dotenv

from common.config import load_settings
from common.constants import DATASET_URL
from common.ui import sidebar_header, require_report
from common.utils import configure_logging

# Configure Streamlit page and load environment variables from `.env`.
st.set_page_config(page_title="Premier League — Overview", layout="wide")
load_dotenv(override=False)

logger = logging.getLogger(__name__)

def main():
    settings = load_settings()
    configure_logging(settings.log_level)
    sidebar_header(source=settings.source)

    st.title("⚽ Premier League — Descriptive Statistical Analysis")
    st.caption("Mean, median, mode, quartiles and distributions of goals and results.")

    report = require_report()
    summary, info = report.summary, report.file_info

    col_data, col_file = st.columns(2)

    # 1) Overview of the data (whole-dataset counters)
    with col_data:
        st.subheader("Overview of the Data")
        r1 = st.columns(3)
        r1[0].metric("Total Matches", summary.total_matches)
        r1[1].metric("Total Goals", summary.total_goals)
        r1[2].metric("Draws", summary.total_draws)
        r2 = st.columns(4)
        r2[0].metric("Home Goals", summary.total_home_goals)
        r2[1].metric("Away Goals", summary.total_away_goals)
        r2[2].metric("Home Wins", summary.total_home_wins)
        r2[3].metric("Away Wins", summary.total_away_wins)

    # 2) Overview of the file (+ download and public source)
    with col_file:
        st.subheader("Overview of the File")
        st.markdown(
            f"**File Name:** {info.name}  \n"
            f"**File Size:** {info.size_kb:.2f} KB  \n"
            f"**File Type:** {info.file_type}"
        )
        st.download_button(
            "⬇️ Download File",
            data=report.raw,
            file_name=info.name,
            mime="text/csv",
        )
        st.link_button("View File Source on Kaggle", DATASET_URL)

if __name__ == "__main__":
    main()
