"""Custom exceptions for the :mod:`mse_plots` package."""


class MsePlotsError(Exception):
    """Base exception for performance-metric plotting errors."""


class SchemaMismatch(MsePlotsError, ValueError):
    """A required column is absent from an input table."""


class EmptyGroup(MsePlotsError, ValueError):
    """An aggregate has no non-missing values to work with."""


__all__ = [
    "MsePlotsError",
    "SchemaMismatch",
    "EmptyGroup",
]
