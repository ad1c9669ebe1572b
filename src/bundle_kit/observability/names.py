# src/bundle_kit/observability/names.py

"""Standard metric names for bundle-kit observability.

Use these constants instead of hardcoded strings.

Note: All duration metrics are in milliseconds.
"""

# ============================================================================
# Flattening Metrics
# ============================================================================

# Duration
FLATTEN_DURATION = "flatten_duration"

# Counters
MODULES_FLATTENED = "modules_flattened"
RESOLUTION_INCONSISTENCIES_TOTAL = "resolution_inconsistencies_total"


# ============================================================================
# Grouping Metrics
# ============================================================================

# Duration
GROUPING_DURATION = "grouping_duration"

# Gauges
ASSETS_GROUPED = "assets_grouped"


# ============================================================================
# Rendering Metrics
# ============================================================================

# Duration
RENDER_DURATION = "render_duration"

# Counters
RENDERS_TOTAL = "renders_total"
