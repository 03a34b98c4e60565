"""Crime series detection.

This module groups scenes into probable series by seeding a similarity
search from each scene not yet assigned to a series.
"""

from crimelink.clustering.models import SeriesGroup, compute_series_id, member_key
from crimelink.clustering.series_detector import (
    MIN_SERIES_SIZE,
    SERIES_THRESHOLD,
    detect_series,
)

__all__ = [
    "SeriesGroup",
    "compute_series_id",
    "member_key",
    "MIN_SERIES_SIZE",
    "SERIES_THRESHOLD",
    "detect_series",
]
