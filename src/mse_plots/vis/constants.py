"""Visualization constants: colors, chart styling, marker sizing."""

# Greys
COLOR_GRID_MAJOR = "#D9D9D9"  # grey85
COLOR_GRID_MINOR = "#F5F5F5"  # grey96
COLOR_PANEL_EDGE = "#B3B3B3"  # grey70
COLOR_BACKGROUND_BAR = "#BFBFBF"  # grey75

# Seaborn palette used when no custom palette is given
DEFAULT_PALETTE = "deep"

# Point sizes are given in millimetres; matplotlib scatter sizes are points^2.
MM_TO_PT = 72.27 / 25.4

# Range line widths (points) for the single-panel dot plot
RANGE_LINE_WIDTH = 0.4 * MM_TO_PT
SKATER_LINE_WIDTH = 0.85 * MM_TO_PT
RANGE_LINE_ALPHA = 0.8
