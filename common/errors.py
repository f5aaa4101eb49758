# common/errors.py
"""Error types raised while loading and analysing the match dataset."""


class MatchDataError(Exception):
    """Base class for every failure the report views know how to display."""


class DataLoadError(MatchDataError):
    """The source file could not be read or fetched."""


class DataValidationError(MatchDataError):
    """A row or column does not match the expected schema."""


class EmptyInputError(MatchDataError):
    """A statistic was requested over zero observations."""
