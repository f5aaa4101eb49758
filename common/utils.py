"""
Common utility functions for reading the match file and turning it into
typed records.

This module contains a small requests.Session wrapper for http(s) sources,
a local-file fallback, a strict CSV parser that validates the schema before
anything is computed, and the logging setup used by the Streamlit entry
point.

The parser returns a `pandas.DataFrame` first (handy for column-wise checks)
and `frame_to_records` converts it into immutable `MatchRecord` objects.
Nothing is silently coerced: a missing column, a non-numeric goal count or
an unknown result code raises `DataValidationError` naming the column and
the offending file rows.
"""

# Import libraries
from __future__ import annotations
import io
import logging
from pathlib import Path, PureWindowsPath
from typing import List, Tuple, Union

import pandas as pd
import requests

from common.constants import (
    GOAL_COLUMNS, INTEGER_COLUMNS, REQUIRED_COLUMNS, RESULT_CODES, TEXT_COLUMNS, USER_AGENT,
)
from common.errors import DataLoadError, DataValidationError
from models.analysis_model import FileInfo
from models.match_model import FullTimeResult, MatchRecord

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
MAX_ROWS_IN_MESSAGE = 5


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)


SESSION = requests.Session()
SESSION.headers.update({"User-Agent": USER_AGENT})


def is_remote(source: str) -> bool:
    return source.lower().startswith(("http://", "https://"))


def read_source(source: str, timeout: Tuple[float, float] = (10, 20)) -> bytes:
    """Return the raw bytes of a local path or an http(s) URL."""
    if is_remote(source):
        try:
            resp = SESSION.get(source, timeout=timeout)
            resp.raise_for_status()
        except requests.RequestException as exc:
            raise DataLoadError(f"could not fetch {source}: {exc}") from exc
        return resp.content

    path = Path(source)
    try:
        return path.read_bytes()
    except OSError as exc:
        raise DataLoadError(f"could not read {path}: {exc}") from exc


def describe_source(source: str, raw: bytes) -> FileInfo:
    if is_remote(source):
        name = source.split("?")[0].rstrip("/").rsplit("/", 1)[-1] or source
    else:
        # PureWindowsPath splits on both forward and back slashes
        name = PureWindowsPath(source).name or source
    suffix = Path(name).suffix.lstrip(".").lower()
    return FileInfo(name=name, size_bytes=len(raw), file_type=suffix or "unknown", source=source)


def _file_rows(mask: pd.Series) -> str:
    # +2: one for the header line, one because files count from 1
    rows = [str(i + 2) for i in mask[mask].index[:MAX_ROWS_IN_MESSAGE]]
    more = int(mask.sum()) - len(rows)
    return ", ".join(rows) + (f" (+{more} more)" if more > 0 else "")


def parse_matches_csv(raw: Union[bytes, str], delimiter: str = ";") -> pd.DataFrame:
    """Parse and validate the match file.

    Steps performed:
      1. Read every cell as text so pandas never guesses a type.
      2. Check that all required header keys are present.
      3. Convert integer columns, rejecting blanks, decimals and text;
         goal columns must also be non-negative.
      4. Parse `Date`; reject unparseable values.
      5. Require non-empty team names and a result code in H/D/A.
    """
    text = raw.decode("utf-8-sig") if isinstance(raw, bytes) else raw
    try:
        df = pd.read_csv(io.StringIO(text), sep=delimiter, dtype=str, keep_default_na=False)
    except pd.errors.EmptyDataError as exc:
        raise DataValidationError("match file is empty (no header row)") from exc
    except pd.errors.ParserError as exc:
        raise DataValidationError(f"malformed match file: {exc}") from exc

    df.columns = [str(c).strip() for c in df.columns]
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise DataValidationError(f"missing column(s): {', '.join(missing)}")

    df = df[REQUIRED_COLUMNS].copy()
    for col in REQUIRED_COLUMNS:
        # short rows come back as NaN even with keep_default_na=False
        df[col] = df[col].fillna("").astype(str).str.strip()
    if df.empty:
        logger.info("Match file has a header but no rows")
        return df

    for col in INTEGER_COLUMNS:
        nums = pd.to_numeric(df[col], errors="coerce")
        bad = nums.isna() | (nums % 1 != 0)
        if bad.any():
            raise DataValidationError(f"column {col!r} must hold whole numbers (file rows {_file_rows(bad)})")
        df[col] = nums.astype("int64")
    for col in GOAL_COLUMNS:
        neg = df[col] < 0
        if neg.any():
            raise DataValidationError(f"column {col!r} cannot be negative (file rows {_file_rows(neg)})")

    dates = pd.to_datetime(df["Date"], errors="coerce")
    if dates.isna().any():
        raise DataValidationError(f"column 'Date' has unparseable values (file rows {_file_rows(dates.isna())})")
    df["Date"] = dates.dt.date

    for col in TEXT_COLUMNS:
        blank = df[col] == ""
        if blank.any():
            raise DataValidationError(f"column {col!r} cannot be empty (file rows {_file_rows(blank)})")

    df["FTR"] = df["FTR"].str.upper()
    unknown = ~df["FTR"].isin(RESULT_CODES)
    if unknown.any():
        raise DataValidationError(
            f"column 'FTR' must be one of {'/'.join(RESULT_CODES)} (file rows {_file_rows(unknown)})"
        )

    logger.info("Parsed %d match rows", len(df))
    return df.reset_index(drop=True)


def frame_to_records(df: pd.DataFrame) -> List[MatchRecord]:
    """Turn a validated frame into MatchRecords (TotalGoals left unset)."""
    return [
        MatchRecord(
            Season_End_Year=int(r.Season_End_Year),
            Wk=int(r.Wk),
            Date=r.Date,
            Home=str(r.Home),
            Away=str(r.Away),
            HomeGoals=int(r.HomeGoals),
            AwayGoals=int(r.AwayGoals),
            FTR=FullTimeResult(r.FTR),
        )
        for r in df.itertuples(index=False)
    ]


def records_to_frame(records: List[MatchRecord]) -> pd.DataFrame:
    """Flatten records into a DataFrame; TotalGoals is always HomeGoals + AwayGoals."""
    rows = []
    for r in records:
        row = {
            "Season_End_Year": r.Season_End_Year,
            "Wk": r.Wk,
            "Date": r.Date,
            "Home": r.Home,
            "Away": r.Away,
            "HomeGoals": r.HomeGoals,
            "AwayGoals": r.AwayGoals,
            "FTR": str(getattr(r.FTR, "value", r.FTR)),
            "TotalGoals": r.HomeGoals + r.AwayGoals,
        }
        rows.append(row)
    return pd.DataFrame(rows, columns=REQUIRED_COLUMNS + ["TotalGoals"])
