"""Shared test fixtures."""

from typing import Callable

import pandas as pd
import pytest

from mse_plots.schemas import LongFormRecord, PlotConfig
from .factories import create_long_form_record, create_pm_table


@pytest.fixture
def pm_table_factory() -> Callable[..., pd.DataFrame]:
    """Fixture that returns the performance-metric table factory function."""
    return create_pm_table


@pytest.fixture
def long_form_record_factory() -> Callable[..., LongFormRecord]:
    """Fixture that returns the long-form record factory function."""
    return create_long_form_record


@pytest.fixture
def scenario_collection() -> dict[str, pd.DataFrame]:
    """Return two scenarios sharing the same MPs and metrics."""
    return {
        "Base": create_pm_table(),
        "Low M": create_pm_table(
            metrics={
                "LRP 1.5GT": [0.90, 0.70, 0.85],
                "LTC": [0.05, 0.50, 0.40],
                "AAVC": [0.98, 0.65, 0.80],
            }
        ),
    }


@pytest.fixture
def plot_config() -> PlotConfig:
    """Return a small figure configuration."""
    return PlotConfig(figsize=(6, 4), dpi=50)
