"""
Configuration constants for the earthquake dashboard.
"""

import logging
import os
from typing import Dict, List, Tuple

from .models import MagnitudeRange

# ======================================================
#  DATA SOURCES / CONSTANTS
# ======================================================
# USGS summary feed: every event of the past seven days.
DEFAULT_FEED_URL: str = (
    "https://earthquake.usgs.gov/earthquakes/feed/v1.0/summary/all_week.geojson"
)
FEED_URL: str = os.getenv("QUAKEDASH_FEED_URL", DEFAULT_FEED_URL)

REQUEST_TIMEOUT: float = float(os.getenv("QUAKEDASH_TIMEOUT", "30"))

LOG_LEVEL: str = os.getenv("QUAKEDASH_LOG_LEVEL", "INFO").upper()

# Half-open [min, max) ranges; order matters, it is the bar order.
MAGNITUDE_RANGES: List[MagnitudeRange] = [
    MagnitudeRange("0-1", 0, 1),
    MagnitudeRange("1-2", 1, 2),
    MagnitudeRange("2-3", 2, 3),
    MagnitudeRange("3-4", 3, 4),
    MagnitudeRange("4-5", 4, 5),
    MagnitudeRange("5+", 5, 10),
]

# ======================================================
#  UI DEFAULTS
# ======================================================
AXIS_OPTIONS: List[Tuple[str, str]] = [
    ("Magnitude", "magnitude"),
    ("Depth", "depth"),
    ("Latitude", "latitude"),
    ("Longitude", "longitude"),
]
AXIS_LABELS: Dict[str, str] = {value: label for label, value in AXIS_OPTIONS}

DEFAULT_X_AXIS: str = "magnitude"
DEFAULT_Y_AXIS: str = "depth"

BAR_COLOR: str = "rgba(75,192,192,0.6)"
BAR_SELECTED_COLOR: str = "rgba(32,128,128,0.9)"
SCATTER_COLOR: str = "rgba(255, 99, 132, 0.6)"

TIMESTAMP_FORMAT: str = "%Y-%m-%d %H:%M:%S"
TABLE_HEIGHT: str = "60vh"


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Apply a basic root logging setup; repeated calls are no-ops."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
