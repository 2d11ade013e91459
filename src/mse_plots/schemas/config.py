"""Configuration schema for the plotting functions."""

from pydantic import BaseModel, ConfigDict, Field

from mse_plots.schemas.defaults import (
    DEFAULT_BAR_ALPHA,
    DEFAULT_DODGE,
    DEFAULT_DPI,
    DEFAULT_FACET_ROWS,
    DEFAULT_FIGSIZE,
    DEFAULT_FRENCH,
    DEFAULT_PT_SIZE,
)


class PlotConfig(BaseModel):
    """Presentation options shared by the trade-off and dot plots.

    `french` replaces a process-wide language option: it is passed
    explicitly with every plot call.
    """

    name: str = Field("Default", description="Config name")
    french: bool = Field(DEFAULT_FRENCH, description="Render labels in French")
    custom_pal: dict[str, str] | None = Field(
        None, description="Optional MP to colour mapping"
    )
    dodge: float = Field(
        DEFAULT_DODGE, ge=0, description="Horizontal spread of MPs within a metric"
    )
    bar_alpha: float = Field(
        DEFAULT_BAR_ALPHA,
        ge=0,
        le=1,
        description="Background bar transparency (0 omits the bars)",
    )
    pt_size: float = Field(DEFAULT_PT_SIZE, gt=0, description="Point size (mm)")
    facet_rows: int = Field(
        DEFAULT_FACET_ROWS, ge=1, description="Rows of panels in the trade-off plot"
    )
    figsize: tuple[float, float] = Field(
        DEFAULT_FIGSIZE, description="Figure size in inches"
    )
    dpi: int = Field(DEFAULT_DPI, gt=0, description="Figure resolution")

    model_config = ConfigDict(frozen=True)
