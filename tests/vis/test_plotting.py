"""Tests for the trade-off and dot plots."""

import numpy as np
import pytest
from matplotlib.colors import to_hex
from matplotlib.figure import Figure

from mse_plots.errors import EmptyGroup, SchemaMismatch
from mse_plots.schemas import PlotConfig
from mse_plots.vis.plotting import (
    dodge_offsets,
    mp_colors,
    plot_dots,
    plot_tradeoff,
    point_area,
)


def _visible_axes(fig: Figure) -> list:
    return [ax for ax in fig.axes if ax.get_visible()]


def _legend_labels(fig: Figure) -> list[str]:
    return [t.get_text() for t in fig.legends[0].get_texts()]


# ---------------------------------------------------------------------------
# plot_tradeoff
# ---------------------------------------------------------------------------


def test_tradeoff_one_panel_per_scenario(scenario_collection, plot_config) -> None:
    fig = plot_tradeoff(scenario_collection, "LRP 1.5GT", "LTC", config=plot_config)
    axes = _visible_axes(fig)
    assert len(axes) == 2
    assert [ax.get_title() for ax in axes] == ["Base", "Low M"]


def test_tradeoff_axis_limits(scenario_collection, plot_config) -> None:
    """Lower limits are 99% of the smallest value across all panels."""
    fig = plot_tradeoff(scenario_collection, "LRP 1.5GT", "LTC", config=plot_config)
    ax = _visible_axes(fig)[0]
    assert ax.get_xlim() == pytest.approx((0.70 * 0.99, 1.005))
    assert ax.get_ylim() == pytest.approx((0.05 * 0.99, 1.005))


def test_tradeoff_legend_sorted_mps(scenario_collection, plot_config) -> None:
    fig = plot_tradeoff(scenario_collection, "LRP 1.5GT", "LTC", config=plot_config)
    assert _legend_labels(fig) == ["CC_1.0", "FMSY", "NFref"]
    assert fig.legends[0].get_title().get_text() == "MP"


def test_tradeoff_mp_filter(scenario_collection, plot_config) -> None:
    fig = plot_tradeoff(
        scenario_collection, "LTC", "AAVC", config=plot_config, mp=["FMSY", "NFref"]
    )
    assert _legend_labels(fig) == ["FMSY", "NFref"]


def test_tradeoff_french_legend(scenario_collection) -> None:
    config = PlotConfig(french=True, figsize=(6, 4), dpi=50)
    fig = plot_tradeoff(scenario_collection, "LTC", "AAVC", config=config)
    assert fig.legends[0].get_title().get_text() == "PG"


def test_tradeoff_five_scenarios_two_rows(pm_table_factory, plot_config) -> None:
    collection = {f"S{i}": pm_table_factory() for i in range(5)}
    fig = plot_tradeoff(collection, "LTC", "AAVC", config=plot_config)
    assert len(fig.axes) == 6
    assert len(_visible_axes(fig)) == 5


def test_tradeoff_unknown_metric(scenario_collection, plot_config) -> None:
    with pytest.raises(SchemaMismatch, match="P100"):
        plot_tradeoff(scenario_collection, "LTC", "P100", config=plot_config)


@pytest.mark.parametrize("xvar", ["MP", "scenario", "Reference"])
def test_tradeoff_identifier_is_not_a_metric(
    scenario_collection, plot_config, xvar: str
) -> None:
    with pytest.raises(SchemaMismatch, match=xvar):
        plot_tradeoff(scenario_collection, xvar, "LTC", config=plot_config)


def test_tradeoff_single_mp_string(scenario_collection, plot_config) -> None:
    fig = plot_tradeoff(
        scenario_collection, "LTC", "AAVC", config=plot_config, mp="FMSY"
    )
    assert _legend_labels(fig) == ["FMSY"]


def test_tradeoff_everything_filtered(scenario_collection, plot_config) -> None:
    with pytest.raises(EmptyGroup):
        plot_tradeoff(scenario_collection, "LTC", "AAVC", config=plot_config, mp=["X"])


def test_tradeoff_custom_palette(scenario_collection, plot_config) -> None:
    pal = {"NFref": "#000000", "FMSY": "#ff0000", "CC_1.0": "#00ff00"}
    config = plot_config.model_copy(update={"custom_pal": pal})
    fig = plot_tradeoff(scenario_collection, "LTC", "AAVC", config=config)
    handles = fig.legends[0].legend_handles
    assert [to_hex(h.get_color()) for h in handles] == [
        "#00ff00",
        "#ff0000",
        "#000000",
    ]


# ---------------------------------------------------------------------------
# plot_dots
# ---------------------------------------------------------------------------


def test_dots_single_panel(scenario_collection, plot_config) -> None:
    fig = plot_dots(scenario_collection, type="single", config=plot_config)
    axes = _visible_axes(fig)
    assert len(axes) == 1
    ax = axes[0]
    assert ax.get_ylim() == (0, 1)
    assert [t.get_text() for t in ax.get_xticklabels()] == ["LRP 1.5GT", "LTC", "AAVC"]


def test_dots_facet_panels(scenario_collection, plot_config) -> None:
    fig = plot_dots(scenario_collection, type="facet", config=plot_config)
    axes = _visible_axes(fig)
    assert [ax.get_title() for ax in axes] == ["Base", "Low M"]


def test_dots_accepts_single_frame(pm_table_factory, plot_config) -> None:
    fig = plot_dots(pm_table_factory(), type="facet", config=plot_config)
    assert len(_visible_axes(fig)) == 1


def test_dots_single_scenario_summary(pm_table_factory, plot_config) -> None:
    """One scenario gives point summaries with no skater range."""
    fig = plot_dots({"Only": pm_table_factory()}, config=plot_config)
    assert len(_visible_axes(fig)) == 1


def test_dots_labels(scenario_collection, plot_config) -> None:
    fig = plot_dots(scenario_collection, config=plot_config)
    assert fig.get_supylabel() == "Probability"
    assert fig.get_supxlabel() == "Performance metric"


def test_dots_french_labels(scenario_collection) -> None:
    config = PlotConfig(french=True, figsize=(6, 4), dpi=50)
    fig = plot_dots(scenario_collection, config=config)
    assert fig.get_supylabel() == "Probabilité"
    assert fig.get_supxlabel() == "Indicateur de rendement"
    assert fig.legends[0].get_title().get_text() == "PG"


def test_dots_background_bars(scenario_collection, plot_config) -> None:
    """One bar per dot; bar_alpha=0 omits them."""
    with_bars = plot_dots(scenario_collection, config=plot_config)
    assert len(_visible_axes(with_bars)[0].patches) == 9

    config = plot_config.model_copy(update={"bar_alpha": 0.0})
    without = plot_dots(scenario_collection, config=config)
    assert len(_visible_axes(without)[0].patches) == 0


def test_dots_invalid_type(scenario_collection) -> None:
    with pytest.raises(ValueError, match="type"):
        plot_dots(scenario_collection, type="lollipop")


# ---------------------------------------------------------------------------
# helpers
# ---------------------------------------------------------------------------


def test_dodge_offsets_centered() -> None:
    offsets = dodge_offsets(3, 0.6)
    assert offsets == pytest.approx([-0.2, 0.0, 0.2])
    assert np.isclose(offsets.sum(), 0.0)


def test_dodge_offsets_single_group() -> None:
    assert dodge_offsets(1, 0.6) == pytest.approx([0.0])


def test_point_area_grows_with_size() -> None:
    assert point_area(4.0) > point_area(2.25) > 0


def test_mp_colors_fallback_for_missing_palette_entries() -> None:
    colors = mp_colors(["A", "B"], {"A": "#123456"})
    assert colors["A"] == "#123456"
    assert colors["B"].startswith("#")
