"""Default parameter values for the MSE plotting helpers.

These constants are used as `Field(default=...)` values in the Pydantic
config schemas and by the reshaping services.
"""

# =============================================================================
# REFERENCE MANAGEMENT PROCEDURES
# =============================================================================
# Reference (benchmark) MPs are named with a "ref" fragment, e.g. "NFref",
# "FMSYref" or "MP_ref_1". The match is case-sensitive.
REFERENCE_MP_MARKER = "ref"

# Marker styles. Reference MPs are drawn as open circles, every other MP as
# a filled circle.
REFERENCE_MARKER = "o"
DEFAULT_MARKER = "o"

# =============================================================================
# PLOT CONFIG
# =============================================================================
DEFAULT_FRENCH = False
DEFAULT_DODGE = 0.6
DEFAULT_BAR_ALPHA = 0.2
DEFAULT_PT_SIZE = 2.25
DEFAULT_FACET_ROWS = 2
DEFAULT_FIGSIZE = (8.0, 5.0)
DEFAULT_DPI = 100

# Axis padding for the trade-off plot: lower limit is min * 0.99, upper 1.005.
TRADEOFF_LOWER_PAD = 0.99
TRADEOFF_UPPER_LIMIT = 1.005
