"""Trade-off and dot plots of management-procedure performance metrics."""

import logging
import math
from typing import Iterable, Mapping

import matplotlib
import numpy as np
import pandas as pd
import seaborn as sns
from matplotlib.colors import to_hex
from matplotlib.figure import Figure
from matplotlib.lines import Line2D

from mse_plots.errors import EmptyGroup, SchemaMismatch
from mse_plots.schemas import MarkerStyle, PlotConfig
from mse_plots.schemas.columns import ColumnNames
from mse_plots.schemas.defaults import TRADEOFF_LOWER_PAD, TRADEOFF_UPPER_LIMIT
from mse_plots.services.reshape import (
    assign_styles,
    collection_from_frames,
    records_to_frame,
    reference_map,
    to_long_form,
    to_summary,
    to_wide,
)
from mse_plots.vis.constants import (
    COLOR_BACKGROUND_BAR,
    COLOR_GRID_MAJOR,
    COLOR_GRID_MINOR,
    COLOR_PANEL_EDGE,
    DEFAULT_PALETTE,
    MM_TO_PT,
    RANGE_LINE_ALPHA,
    RANGE_LINE_WIDTH,
    SKATER_LINE_WIDTH,
)
from mse_plots.vis.translate import en2fr

# Ensure non-interactive backend for thread safety in scripts and reports
matplotlib.use("Agg")

logger = logging.getLogger(__name__)

DOT_PLOT_TYPES = ("single", "facet")


def create_figure(config: PlotConfig, nrows: int = 1, ncols: int = 1):
    """Create a standardized matplotlib figure and a 2-D array of axes.

    Returns:
        tuple (Figure, ndarray of Axes)
    """
    fig = Figure(figsize=config.figsize, dpi=config.dpi)
    axes = fig.subplots(nrows, ncols, squeeze=False, sharex=True, sharey=True)
    return fig, axes


def apply_standard_styling(ax) -> None:
    """Light grey grid and panel edges."""
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color=COLOR_GRID_MAJOR, linewidth=0.8)
    for spine in ax.spines.values():
        spine.set_color(COLOR_PANEL_EDGE)
        spine.set_linewidth(0.8)


def point_area(pt_size: float) -> float:
    """Convert a point diameter in millimetres to a scatter area (points^2)."""
    return (pt_size * MM_TO_PT) ** 2


def mp_colors(mps: Iterable[str], custom_pal: Mapping[str, str] | None = None):
    """Colour for each MP, from ``custom_pal`` or the default seaborn palette.

    MPs missing from ``custom_pal`` fall back to the default palette.
    """
    mps = list(mps)
    default = [to_hex(c) for c in sns.color_palette(DEFAULT_PALETTE, len(mps))]
    colors = dict(zip(mps, default))
    if custom_pal:
        missing = [mp for mp in mps if mp not in custom_pal]
        if missing:
            logger.warning(f"Custom palette has no colour for MPs: {missing}")
        colors.update({mp: custom_pal[mp] for mp in mps if mp in custom_pal})
    return colors


def _scatter_kwargs(style: MarkerStyle, color: str, size: float) -> dict:
    return {
        "marker": style.marker,
        "s": size,
        "edgecolors": color,
        "facecolors": color if style.filled else "none",
        "linewidths": 1.0,
    }


def _legend_handles(
    styles: Mapping[str, MarkerStyle], colors: Mapping[str, str], pt_size: float
) -> list[Line2D]:
    return [
        Line2D(
            [0],
            [0],
            marker=style.marker,
            linestyle="none",
            color=colors[mp],
            markerfacecolor=colors[mp] if style.filled else "none",
            markersize=pt_size * MM_TO_PT,
            label=mp,
        )
        for mp, style in styles.items()
    ]


def _grid_shape(n_panels: int, max_rows: int) -> tuple[int, int]:
    nrows = max(1, min(max_rows, n_panels))
    ncols = max(1, math.ceil(n_panels / nrows))
    return nrows, ncols


def _wrap_rows(n_panels: int) -> int:
    """Rows for a roughly square grid of panels, filled row by row."""
    if n_panels < 1:
        return 1
    return math.ceil(n_panels / math.ceil(math.sqrt(n_panels)))


def plot_tradeoff(
    pm_df_list: pd.DataFrame | Mapping[str, pd.DataFrame],
    xvar: str,
    yvar: str,
    config: PlotConfig | None = None,
    mp: Iterable[str] | None = None,
) -> Figure:
    """Trade-off scatterplot of two performance metrics, one panel per scenario.

    Args:
        pm_df_list: Mapping of scenario label to performance-metric table, or
            a single table.
        xvar: Performance metric for the x axis.
        yvar: Performance metric for the y axis.
        config: Presentation options. Defaults to PlotConfig().
        mp: Optional MPs to include. By default includes all.

    Raises:
        SchemaMismatch: If ``xvar`` or ``yvar`` is not a metric column.
        EmptyGroup: If no rows remain after MP filtering.
    """
    config = config or PlotConfig()
    collection = collection_from_frames(pm_df_list)
    wide = to_wide(to_long_form(collection, selected_mps=mp))
    if not wide:
        raise EmptyGroup("No performance metrics left to plot")
    metrics = {pm for record in wide for pm in record.values}
    for var in (xvar, yvar):
        if var not in metrics:
            raise SchemaMismatch(f"Performance metric '{var}' not found")
    df = records_to_frame(wide)

    xmin = df[xvar].min()
    ymin = df[yvar].min()

    styles = assign_styles(df[ColumnNames.MP], reference_map(wide))
    colors = mp_colors(styles, config.custom_pal)
    size = point_area(config.pt_size)

    scenarios = list(dict.fromkeys(df[ColumnNames.SCENARIO]))
    nrows, ncols = _grid_shape(len(scenarios), config.facet_rows)
    fig, axes = create_figure(config, nrows, ncols)
    flat_axes = axes.ravel()

    for ax, scenario in zip(flat_axes, scenarios):
        panel = df[df[ColumnNames.SCENARIO] == scenario]
        for mp_id, style in styles.items():
            rows = panel[panel[ColumnNames.MP] == mp_id]
            if rows.empty:
                continue
            ax.scatter(
                rows[xvar], rows[yvar], **_scatter_kwargs(style, colors[mp_id], size)
            )
        apply_standard_styling(ax)
        ax.set_title(scenario, fontsize=10)
        ax.set_xlim(xmin * TRADEOFF_LOWER_PAD, TRADEOFF_UPPER_LIMIT)
        ax.set_ylim(ymin * TRADEOFF_LOWER_PAD, TRADEOFF_UPPER_LIMIT)
        ax.set_aspect("equal", adjustable="box")

    for ax in flat_axes[len(scenarios) :]:
        ax.set_visible(False)

    fig.supxlabel(xvar, fontsize=11)
    fig.supylabel(yvar, fontsize=11)
    fig.legend(
        handles=_legend_handles(styles, colors, config.pt_size),
        title=en2fr("MP", config.french),
        loc="center right",
        frameon=False,
    )

    logger.info(
        f"Built trade-off plot of {yvar} vs {xvar}: "
        f"{len(scenarios)} scenario(s), {len(styles)} MP(s)"
    )
    return fig


def dodge_offsets(n_groups: int, width: float) -> np.ndarray:
    """Centre offsets of ``n_groups`` items dodged across ``width``."""
    if n_groups == 0:
        return np.array([])
    return -width / 2 + (np.arange(n_groups) + 0.5) * width / n_groups


def _minimum_gap(xs: Iterable[float]) -> float:
    unique = np.unique(np.round(np.asarray(list(xs), dtype=float), 9))
    if len(unique) < 2:
        return 1.0
    return float(np.diff(unique).min())


def plot_dots(
    pm_df_list: pd.DataFrame | Mapping[str, pd.DataFrame],
    type: str = "single",
    config: PlotConfig | None = None,
) -> Figure:
    """Dot plot of performance metrics per MP.

    In the single panel version (``type="single"``) the dot marks the mean
    across scenarios, a thin line spans the minimum to maximum and a thick
    line spans the range left after dropping the most extreme value at each
    end. The multipanel version (``type="facet"``) draws one panel per
    scenario with the raw values.

    Args:
        pm_df_list: Mapping of scenario label to performance-metric table, or
            a single table.
        type: ``"single"`` or ``"facet"``.
        config: Presentation options. Defaults to PlotConfig().

    Raises:
        ValueError: If ``type`` is not one of the supported plot types.
    """
    if type not in DOT_PLOT_TYPES:
        raise ValueError(f"type must be one of {DOT_PLOT_TYPES}, got '{type}'")
    config = config or PlotConfig()
    collection = collection_from_frames(pm_df_list)
    records = to_long_form(collection)
    if not records:
        raise EmptyGroup("No performance metrics left to plot")

    if type == "single":
        summary = to_summary(records)
        df = records_to_frame(summary)
        flags = reference_map(summary)
        panels = [None]
    else:
        df = records_to_frame(records)
        flags = reference_map(records)
        panels = list(dict.fromkeys(df[ColumnNames.SCENARIO]))

    pms = list(dict.fromkeys(df[ColumnNames.PM]))
    styles = assign_styles(flags, flags)
    colors = mp_colors(styles, config.custom_pal)
    size = point_area(config.pt_size)

    offsets = dict(zip(styles, dodge_offsets(len(styles), config.dodge)))
    pm_index = {pm: i for i, pm in enumerate(pms)}
    positions = [pm_index[pm] + offsets[mp_id] for pm in pms for mp_id in styles]
    gap = _minimum_gap(positions)

    nrows, ncols = _grid_shape(len(panels), _wrap_rows(len(panels)))
    fig, axes = create_figure(config, nrows, ncols)
    flat_axes = axes.ravel()

    for ax, scenario in zip(flat_axes, panels):
        panel = df if scenario is None else df[df[ColumnNames.SCENARIO] == scenario]
        x = panel[ColumnNames.PM].map(pm_index) + panel[ColumnNames.MP].map(offsets)

        if config.bar_alpha > 0:
            for pos in positions:
                ax.axvspan(
                    pos - gap / 2,
                    pos + gap / 2,
                    color=COLOR_BACKGROUND_BAR,
                    alpha=config.bar_alpha,
                    linewidth=0,
                )

        for mp_id, style in styles.items():
            mask = panel[ColumnNames.MP] == mp_id
            if not mask.any():
                continue
            rows = panel[mask]
            if type == "single":
                ax.vlines(
                    x[mask],
                    rows[ColumnNames.MIN],
                    rows[ColumnNames.MAX],
                    colors=colors[mp_id],
                    linewidth=RANGE_LINE_WIDTH,
                    alpha=RANGE_LINE_ALPHA,
                )
                skater = rows[ColumnNames.SKATER_MIN].notna()
                ax.vlines(
                    x[mask][skater],
                    rows.loc[skater, ColumnNames.SKATER_MIN],
                    rows.loc[skater, ColumnNames.SKATER_MAX],
                    colors=colors[mp_id],
                    linewidth=SKATER_LINE_WIDTH,
                    alpha=RANGE_LINE_ALPHA,
                )
            ax.scatter(
                x[mask],
                rows[ColumnNames.PROB],
                zorder=3,
                **_scatter_kwargs(style, colors[mp_id], size),
            )

        apply_standard_styling(ax)
        ax.grid(False, axis="x")
        ax.minorticks_on()
        ax.grid(True, which="minor", axis="y", color=COLOR_GRID_MINOR, linewidth=0.5)
        ax.tick_params(axis="x", which="both", bottom=False)
        ax.set_xticks(range(len(pms)))
        ax.set_xticklabels(pms)
        ax.set_xlim(min(positions) - gap, max(positions) + gap)
        ax.set_ylim(0, 1)
        if scenario is not None:
            ax.set_title(scenario, fontsize=10)

    for ax in flat_axes[len(panels) :]:
        ax.set_visible(False)

    fig.supxlabel(en2fr("Performance metric", config.french, allow_missing=True))
    fig.supylabel(en2fr("Probability", config.french, allow_missing=True))
    fig.legend(
        handles=_legend_handles(styles, colors, config.pt_size),
        title=en2fr("MP", config.french),
        loc="center right",
        frameon=False,
    )

    logger.info(
        f"Built {type} dot plot: {len(pms)} metric(s), {len(styles)} MP(s), "
        f"{len(panels)} panel(s)"
    )
    return fig
