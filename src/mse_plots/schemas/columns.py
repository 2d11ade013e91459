"""Strongly typed column names for performance-metric DataFrames.

Defines the data contract between the reshaping services and the plots.
"""


class ColumnNames:
    """Column name constants matching the record field names."""

    MP = "MP"
    SCENARIO = "scenario"
    PM = "pm"
    PROB = "prob"
    MIN = "min"
    MAX = "max"
    SKATER_MIN = "skater_min"
    SKATER_MAX = "skater_max"
    REFERENCE = "Reference"
