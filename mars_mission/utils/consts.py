# IN THIS FILE: ALL CONSTANTS

# -----------------------------------------------------------------------------
# 1. GRID LIMITS
# -----------------------------------------------------------------------------
DEFAULT_MAX_COORDINATE = 50     # Largest maxX / maxY accepted unless overridden
MIN_COORDINATE = 0              # Grid always starts at (0, 0)

# Environment variable that overrides DEFAULT_MAX_COORDINATE
MAX_COORDINATE_ENV = "MAX_GRID_COORDINATE"

# -----------------------------------------------------------------------------
# 2. INSTRUCTIONS
# -----------------------------------------------------------------------------
MAX_INSTRUCTION_LENGTH = 100

# Degrees applied by each turn command (clockwise positive)
LEFT_TURN_DEGREES = -90
RIGHT_TURN_DEGREES = 90

# -----------------------------------------------------------------------------
# 3. DIRECTIONS
# -----------------------------------------------------------------------------
# 0 degrees points along +y (north), increasing clockwise.
DEFAULT_HEADING_DEGREES = (
    ("N", 0),
    ("E", 90),
    ("S", 180),
    ("W", 270),
)

# Movement vectors are rounded to this many decimals
VECTOR_PRECISION = 3

# -----------------------------------------------------------------------------
# 4. OUTPUT
# -----------------------------------------------------------------------------
LOST_SUFFIX = "LOST"
