# common/ui.py
from __future__ import annotations
import logging
from pathlib import Path
import streamlit as st

from common.config import load_settings
from common.errors import MatchDataError
from controllers.data_controller import load_report
from models.analysis_model import MatchReport

logger = logging.getLogger(__name__)

# Project root = .../premier_league_stats
APP_ROOT = Path(__file__).resolve().parents[1]

PAGES = [
    ("main.py", "Overview", "🏠"),
    ("pages/1_Statistics.py", "Statistics", "📊"),
    ("pages/2_Charts.py", "Charts", "📈"),
    ("pages/3_Infographic.py", "Infographic", "🖼️"),
]

def _link_if_exists(rel_path: str, label: str, icon: str = "📄"):
    """Safely add a page link if the target file exists."""
    target = (APP_ROOT / rel_path)
    if target.exists():
        # Streamlit expects an app-relative path with forward slashes
        st.sidebar.page_link(rel_path.replace("\\", "/"), label=label, icon=icon)

def sidebar_header(source: str | None = None):
    # Hide the built-in pages nav so only our custom links appear
    st.markdown(
        "<style>[data-testid='stSidebarNav']{display:none !important;}</style>",
        unsafe_allow_html=True,
    )
    with st.sidebar:
        st.markdown("**Data source:** " + (source or "—"))
        if st.button("Reload data"):
            load_report.clear()
            if hasattr(st, "rerun"): st.rerun()
            else: st.experimental_rerun()

        st.divider()
        st.markdown("#### Pages")
    for rel_path, label, icon in PAGES:
        _link_if_exists(rel_path, label, icon)

def require_report() -> MatchReport:
    """Return the cached report or show the failure and stop the page."""
    settings = load_settings()
    with st.spinner("Loading analysis..."):
        try:
            return load_report(settings.source, settings.delimiter, settings.http_timeout)
        except MatchDataError as exc:
            logger.exception("Match analysis failed")
            st.error(f"Could not build the analysis: {exc}")
            st.stop()
