"""Test data factories for generating performance-metric tables and records."""

from typing import Any

import pandas as pd

from mse_plots.schemas import LongFormRecord


def create_pm_table(
    mps: list[str] | None = None,
    metrics: dict[str, list[float]] | None = None,
) -> pd.DataFrame:
    """Create a performance-metric table with an MP column and metric columns."""
    mps = mps if mps is not None else ["NFref", "FMSY", "CC_1.0"]
    if metrics is None:
        metrics = {
            "LRP 1.5GT": [0.95, 0.80, 0.90][: len(mps)],
            "LTC": [0.10, 0.60, 0.45][: len(mps)],
            "AAVC": [0.99, 0.70, 0.85][: len(mps)],
        }
    return pd.DataFrame({"MP": mps, **metrics})


def create_long_form_record(
    mp: str = "FMSY", prob: float | None = 0.5, **kwargs: Any
) -> LongFormRecord:
    """Create a valid LongFormRecord with overrideable defaults."""
    defaults = {
        "scenario": "Scenario 1",
        "pm": "LTC",
        "is_reference": "ref" in mp,
    }
    data = {**defaults, **kwargs}
    return LongFormRecord(mp=mp, prob=prob, **data)
