"""Aggregates over the values of one (MP, metric) group.

This module provides pure functions used to summarise performance metrics
across scenarios. Missing values (None or NaN) are ignored everywhere.
"""

import math
from typing import Iterable, List, Optional

from mse_plots.errors import EmptyGroup


def drop_missing(values: Iterable[Optional[float]]) -> List[float]:
    """Return the non-missing values as floats."""
    return [float(v) for v in values if v is not None and not math.isnan(v)]


def calculate_mean(values: Iterable[Optional[float]]) -> float:
    """Mean of the non-missing values.

    Raises:
        EmptyGroup: If there are no non-missing values.
    """
    kept = drop_missing(values)
    if not kept:
        raise EmptyGroup("Cannot take the mean of an empty group")
    return math.fsum(kept) / len(kept)


def calculate_min(values: Iterable[Optional[float]]) -> float:
    kept = drop_missing(values)
    if not kept:
        raise EmptyGroup("Cannot take the minimum of an empty group")
    return min(kept)


def calculate_max(values: Iterable[Optional[float]]) -> float:
    kept = drop_missing(values)
    if not kept:
        raise EmptyGroup("Cannot take the maximum of an empty group")
    return max(kept)


def skater_min(values: Iterable[Optional[float]]) -> Optional[float]:
    """Second-lowest value: drop one occurrence of the minimum, take the min.

    Returns None when fewer than two non-missing values are available.
    """
    kept = sorted(drop_missing(values))
    if len(kept) < 2:
        return None
    return min(kept[1:])


def skater_max(values: Iterable[Optional[float]]) -> Optional[float]:
    """Second-highest value: drop one occurrence of the maximum, take the max.

    Returns None when fewer than two non-missing values are available.
    """
    kept = sorted(drop_missing(values), reverse=True)
    if len(kept) < 2:
        return None
    return max(kept[1:])
