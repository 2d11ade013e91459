"""Reshaped performance-metric record schemas."""

import math
from typing import Annotated

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, Field


def _require_mp(value: str) -> str:
    if not value or not value.strip():
        raise ValueError("MP identifier must not be blank")
    return value


def _missing_to_none(value):
    """Map NaN, None and non-numeric cells to None (missing)."""
    if value is None:
        return None
    try:
        value = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(value):
        return None
    return value


MpId = Annotated[str, AfterValidator(_require_mp)]
MetricValue = Annotated[float | None, BeforeValidator(_missing_to_none)]


class LongFormRecord(BaseModel):
    """One (MP, scenario, metric) observation."""

    mp: MpId = Field(..., description="Management procedure identifier")
    scenario: str = Field(..., description="Scenario label (used verbatim)")
    pm: str = Field(..., description="Performance metric name")
    prob: MetricValue = Field(..., description="Metric value, None if missing")
    is_reference: bool = Field(..., description="Whether the MP is a reference MP")

    model_config = ConfigDict(frozen=True)


class SummaryRecord(BaseModel):
    """Per (MP, metric) aggregate across all scenarios."""

    mp: MpId = Field(..., description="Management procedure identifier")
    pm: str = Field(..., description="Performance metric name")
    prob: float = Field(..., description="Mean across scenarios")
    min: float = Field(..., description="Minimum across scenarios")
    max: float = Field(..., description="Maximum across scenarios")
    skater_min: MetricValue = Field(
        None, description="Minimum after dropping the lowest value"
    )
    skater_max: MetricValue = Field(
        None, description="Maximum after dropping the highest value"
    )
    is_reference: bool = Field(..., description="Whether the MP is a reference MP")

    model_config = ConfigDict(frozen=True)


class WideRecord(BaseModel):
    """One (MP, scenario) row with a value per performance metric."""

    mp: MpId = Field(..., description="Management procedure identifier")
    scenario: str = Field(..., description="Scenario label")
    values: dict[str, MetricValue] = Field(
        default_factory=dict, description="Metric name to value"
    )
    is_reference: bool = Field(..., description="Whether the MP is a reference MP")

    model_config = ConfigDict(frozen=True)


class MarkerStyle(BaseModel):
    """Matplotlib marker used to draw one MP."""

    marker: str = Field(..., description="Matplotlib marker code")
    filled: bool = Field(..., description="Filled (True) or open (False) marker")

    model_config = ConfigDict(frozen=True)
