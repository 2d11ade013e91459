"""Reshaping of performance-metric tables into plot-ready records.

Input tables have one row per management procedure (MP) and one column per
performance metric, keyed by an ``MP`` column. A scenario collection maps a
scenario label to one such table. The functions here turn a collection into
long-form records (one value per MP, scenario and metric), per-MP summaries
across scenarios, and wide rows for the trade-off scatterplot.

All functions are pure: they only read their arguments and return new
objects, so output order is reproducible for identical input.
"""

import logging
from typing import Iterable, Mapping

import pandas as pd

from mse_plots.errors import SchemaMismatch
from mse_plots.schemas.columns import ColumnNames
from mse_plots.schemas.data import (
    LongFormRecord,
    MarkerStyle,
    SummaryRecord,
    WideRecord,
)
from mse_plots.schemas.defaults import (
    DEFAULT_MARKER,
    REFERENCE_MARKER,
    REFERENCE_MP_MARKER,
)
from mse_plots.services.metrics import (
    calculate_max,
    calculate_mean,
    calculate_min,
    skater_max,
    skater_min,
)

logger = logging.getLogger(__name__)

# Columns that identify a row rather than hold a metric value.
ID_COLUMNS = (ColumnNames.MP, ColumnNames.SCENARIO)

# Column names the reshaped frames use for their own fields.
RESERVED_METRIC_NAMES = (ColumnNames.REFERENCE,)


def classify_reference(mp_id: str) -> bool:
    """Return True if ``mp_id`` names a reference MP (contains ``"ref"``)."""
    return REFERENCE_MP_MARKER in mp_id


def _validate_table(table: pd.DataFrame, scenario: str) -> None:
    if ColumnNames.MP not in table.columns:
        raise SchemaMismatch(
            f"Table for scenario '{scenario}' has no '{ColumnNames.MP}' column"
        )
    mps = table[ColumnNames.MP]
    blank = mps.isna() | (mps.astype(str).str.strip() == "")
    if blank.any():
        raise SchemaMismatch(
            f"Table for scenario '{scenario}' has {int(blank.sum())} blank MP "
            "identifier(s)"
        )
    reserved = [c for c in table.columns if c in RESERVED_METRIC_NAMES]
    if reserved:
        raise SchemaMismatch(
            f"Table for scenario '{scenario}' uses reserved column name(s) {reserved}"
        )


def metric_columns(table: pd.DataFrame) -> list:
    """Metric columns of a table, in table order."""
    return [c for c in table.columns if c not in ID_COLUMNS]


def collection_from_frames(
    pm_df_list: pd.DataFrame | Mapping[str, pd.DataFrame],
) -> dict[str, pd.DataFrame]:
    """Normalise plot input into a scenario collection.

    A single DataFrame becomes a collection with one unnamed scenario
    (label ``""``).
    """
    if isinstance(pm_df_list, pd.DataFrame):
        return {"": pm_df_list}
    if isinstance(pm_df_list, Mapping):
        return {str(name): table for name, table in pm_df_list.items()}
    raise TypeError(
        "Expected a DataFrame or a mapping of scenario name to DataFrame, "
        f"got {type(pm_df_list).__name__}"
    )


def to_long_form(
    collection: Mapping[str, pd.DataFrame],
    selected_mps: Iterable[str] | None = None,
) -> list[LongFormRecord]:
    """Flatten a scenario collection into one record per MP, scenario and metric.

    Records are emitted scenario by scenario (mapping order), then row by row
    (table order), then metric by metric (column order). A ``scenario``
    column inside a table is ignored; the mapping key is the label.

    Scenarios may carry different metric columns. A metric missing from a
    scenario produces no record for that scenario rather than a padded
    missing value, so later summaries for that metric only cover the
    scenarios that reported it.

    Args:
        collection: Mapping of scenario label to performance-metric table.
        selected_mps: Optional allow-list; rows for other MPs are dropped.
            A single MP name may be passed as a plain string.

    Raises:
        SchemaMismatch: If any table lacks an ``MP`` column, has a blank MP
            or uses a reserved column name.
    """
    # Validate everything up front so no partial result is ever produced.
    for scenario, table in collection.items():
        _validate_table(table, scenario)

    if isinstance(selected_mps, str):
        selected_mps = {selected_mps}
    allowed = set(selected_mps) if selected_mps is not None else None

    records = []
    for scenario, table in collection.items():
        if allowed is not None:
            kept = table[table[ColumnNames.MP].isin(allowed)]
            logger.debug(
                "Scenario '%s': kept %d of %d MPs", scenario, len(kept), len(table)
            )
            table = kept

        metrics = metric_columns(table)
        for _, row in table.iterrows():
            mp = str(row[ColumnNames.MP])
            is_reference = classify_reference(mp)
            for pm in metrics:
                records.append(
                    LongFormRecord(
                        mp=mp,
                        scenario=str(scenario),
                        pm=str(pm),
                        prob=row[pm],
                        is_reference=is_reference,
                    )
                )

    if allowed is not None:
        seen = {r.mp for r in records}
        absent = sorted(allowed - seen)
        if absent:
            logger.warning("Selected MPs not found in any scenario: %s", absent)

    logger.debug(
        "Reshaped %d scenario(s) into %d long-form records",
        len(collection),
        len(records),
    )
    return records


def _group(records: Iterable, key) -> dict:
    groups: dict = {}
    for record in records:
        groups.setdefault(key(record), []).append(record)
    return groups


def to_summary(records: Iterable[LongFormRecord]) -> list[SummaryRecord]:
    """Summarise long-form records across scenarios, per MP and metric.

    For each (MP, metric) group, in first-seen order, computes the mean,
    minimum and maximum of the non-missing values, plus the "skater" range:
    the minimum after dropping the single lowest value and the maximum after
    dropping the single highest value. The skater values are None for groups
    with fewer than two non-missing values.

    Raises:
        EmptyGroup: If a group has no non-missing values.
    """
    groups = _group(records, key=lambda r: (r.mp, r.pm))

    summary = []
    for (mp, pm), members in groups.items():
        values = [r.prob for r in members]
        summary.append(
            SummaryRecord(
                mp=mp,
                pm=pm,
                prob=calculate_mean(values),
                min=calculate_min(values),
                max=calculate_max(values),
                skater_min=skater_min(values),
                skater_max=skater_max(values),
                is_reference=classify_reference(mp),
            )
        )
    logger.debug("Summarised %d (MP, metric) groups", len(summary))
    return summary


def to_wide(records: Iterable[LongFormRecord]) -> list[WideRecord]:
    """Pivot long-form records to one row per (MP, scenario)."""
    groups = _group(records, key=lambda r: (r.mp, r.scenario))
    return [
        WideRecord(
            mp=mp,
            scenario=scenario,
            values={r.pm: r.prob for r in members},
            is_reference=classify_reference(mp),
        )
        for (mp, scenario), members in groups.items()
    ]


def assign_styles(
    mp_ids: Iterable[str],
    reference_flags: Mapping[str, bool] | None = None,
) -> dict[str, MarkerStyle]:
    """Map each MP to a marker: open circles for reference MPs, filled otherwise.

    Keys are sorted so repeated calls give identical mappings and legends.
    MPs absent from ``reference_flags`` are classified by name.
    """
    reference_flags = reference_flags or {}
    styles = {}
    for mp in sorted(set(mp_ids)):
        is_reference = reference_flags.get(mp, classify_reference(mp))
        if is_reference:
            styles[mp] = MarkerStyle(marker=REFERENCE_MARKER, filled=False)
        else:
            styles[mp] = MarkerStyle(marker=DEFAULT_MARKER, filled=True)
    return styles


def reference_map(records: Iterable) -> dict[str, bool]:
    """MP to reference flag, taken from any record type with ``mp``."""
    return {r.mp: r.is_reference for r in records}


def records_to_frame(
    records: Iterable[LongFormRecord | SummaryRecord | WideRecord],
) -> pd.DataFrame:
    """Convert records to a DataFrame with :class:`ColumnNames` columns.

    Wide records are flattened so each metric becomes its own column.
    Missing values become NaN.
    """
    rows = []
    for record in records:
        row = record.model_dump()
        if isinstance(record, WideRecord):
            row.update(row.pop("values"))
        row[ColumnNames.MP] = row.pop("mp")
        row[ColumnNames.REFERENCE] = row.pop("is_reference")
        rows.append(row)

    df = pd.DataFrame(rows)
    if df.empty:
        return df
    front = [ColumnNames.MP]
    if ColumnNames.SCENARIO in df.columns:
        front.append(ColumnNames.SCENARIO)
    rest = [c for c in df.columns if c not in front]
    return df[front + rest].astype(
        {c: float for c in rest if c not in (ColumnNames.PM, ColumnNames.REFERENCE)}
    )
