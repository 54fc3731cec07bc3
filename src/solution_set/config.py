"""Named constants for sectioning, grid constraints and scoring."""

# ── Geometry ───────────────────────────────────────────────────────────────
# Allowed error (radians) when testing whether a corner lies inside a cone.
# Kept at its historical value; a candidate for property-based tuning.
ANGLE_TOLERANCE = 1e-4
# Distance within which a point counts as on a section edge or vertex.
BOUNDARY_TOLERANCE = 1e-3
COORDINATE_DECIMALS = 3   # rounding for intersections and distances

# ── Scoring ────────────────────────────────────────────────────────────────
PROPORTION_DECIMALS = 4   # line-equation coefficient ratios

# ── Grid ───────────────────────────────────────────────────────────────────
TICK_DECIMALS = 4

VALID_GRID_VALUES = (
    0.01, 0.02, 0.04, 0.05, 0.0625, 0.1, 0.125, 0.2, 0.25, 0.5, 1, 2, 3, 4, 5,
    8, 10, 12, 15, 20, 40, 50, 64, 100, 500, 1000,
)

# VALID_GRID_VALUES without 0.04, 0.0625, 0.125, 3, 4, 8, 12, 15, 40, 64
PREFERRED_GRID_VALUES = (
    0.01, 0.02, 0.05, 0.1, 0.2, 0.25, 0.5, 1, 2, 5, 10, 20, 50, 100, 500, 1000,
)

VALID_LABEL_VALUES = {
    0.01: (0, 0.01, 0.02, 0.04, 0.05, 0.1),
    0.02: (0, 0.02, 0.04, 0.1),
    0.04: (0, 0.04, 0.08, 0.16, 0.2),
    0.05: (0, 0.05, 0.1, 0.2, 0.25),
    0.0625: (0, 0.0625, 0.125, 0.25, 0.5),
    0.1: (0, 0.1, 0.2, 0.4, 0.5, 1),
    0.125: (0, 0.125, 0.25, 0.5, 1),
    0.2: (0, 0.2, 0.5, 0.1),
    0.25: (0, 0.25, 0.5, 1, 2),
    0.5: (0, 0.5, 1, 2),
    1: (0, 1, 2, 4, 5, 10),
    2: (0, 2, 4, 8, 10),
    3: (0, 3, 6, 12, 15),
    4: (0, 4, 8, 16, 20),
    5: (0, 5, 10, 20, 25),
    8: (0, 8, 16, 32, 40, 64),
    10: (0, 10, 20, 40, 50, 100),
    12: (0, 12, 24),
    15: (0, 15, 30, 60),
    20: (0, 20, 40, 80, 100),
    40: (0, 40, 80, 160, 200),
    50: (0, 50, 100, 200, 250),
    64: (0, 64, 128),
    100: (0, 100, 200, 400, 500),
    500: (0, 500, 1000, 2500),
    1000: (0, 1000, 2000, 4000, 5000),
}
