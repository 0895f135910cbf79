"""Constants used across the application."""

from unitsense.domain.models.units import Seconds

# Step between neighbouring data units (KB -> MB -> GB ...)
DATA_BASE = 1024.0

# Seconds in a minute, also the step between sec and min
TIME_BASE = 60.0

# Period lengths, in the order projections are reported
PROJECTION_PERIODS: tuple[tuple[str, Seconds], ...] = (
    ("minute", Seconds(TIME_BASE)),
    ("hour", Seconds(TIME_BASE * 60)),
    ("day", Seconds(TIME_BASE * 60 * 24)),
    ("week", Seconds(TIME_BASE * 60 * 24 * 7)),
)

# Decimal places used for every formatted magnitude
DISPLAY_PRECISION = 3
