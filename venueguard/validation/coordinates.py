"""Coordinate and accuracy checks for geographic points."""
import math

MAX_LATITUDE = 90.0
MAX_LONGITUDE = 180.0

# Server-side limit for the accuracy radius, in meters
MAX_HORIZONTAL_ACCURACY = 1500.0

# Web Mercator tile projection limit
MAX_VALID_MAP_LATITUDE = 85.05112877


def is_valid_coordinate(latitude: float, longitude: float) -> bool:
    """True if both values are finite and within [-90, 90] / [-180, 180]."""
    if not math.isfinite(latitude) or not math.isfinite(longitude):
        return False
    return abs(latitude) <= MAX_LATITUDE and abs(longitude) <= MAX_LONGITUDE


def fix_accuracy(accuracy: float) -> float:
    """Clamp a horizontal accuracy into [0, MAX_HORIZONTAL_ACCURACY].

    Non-finite and non-positive values become 0.
    """
    if not math.isfinite(accuracy) or accuracy <= 0.0:
        return 0.0
    if accuracy >= MAX_HORIZONTAL_ACCURACY:
        return MAX_HORIZONTAL_ACCURACY
    return accuracy


def is_valid_map_latitude(latitude: float) -> bool:
    return abs(latitude) <= MAX_VALID_MAP_LATITUDE
