"""Services package for reshaping performance-metric tables.

This package contains:
- metrics.py: Aggregates over one (MP, metric) group (mean, skater min/max)
- reshape.py: Long-form, summary and wide reshaping plus MP marker styles
"""

from mse_plots.services.reshape import (
    assign_styles,
    classify_reference,
    to_long_form,
    to_summary,
    to_wide,
)

__all__ = [
    "to_long_form",
    "to_summary",
    "to_wide",
    "classify_reference",
    "assign_styles",
]
