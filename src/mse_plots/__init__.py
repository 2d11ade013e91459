"""Plotting helpers for MSE management-procedure performance metrics."""

from mse_plots.errors import EmptyGroup, MsePlotsError, SchemaMismatch
from mse_plots.schemas import PlotConfig
from mse_plots.vis.plotting import plot_dots, plot_tradeoff

__all__ = [
    "PlotConfig",
    "plot_tradeoff",
    "plot_dots",
    "MsePlotsError",
    "SchemaMismatch",
    "EmptyGroup",
]
