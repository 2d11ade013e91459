"""Schemas package.

- config.py: Plot configuration model (PlotConfig)
- data.py: Reshaped record models (LongFormRecord, SummaryRecord, etc.)
"""

from .config import PlotConfig
from .data import (
    LongFormRecord,
    MarkerStyle,
    SummaryRecord,
    WideRecord,
)

__all__ = [
    "PlotConfig",
    "LongFormRecord",
    "SummaryRecord",
    "WideRecord",
    "MarkerStyle",
]
