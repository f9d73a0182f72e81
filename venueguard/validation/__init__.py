from venueguard.validation.coordinates import (
    MAX_HORIZONTAL_ACCURACY,
    MAX_VALID_MAP_LATITUDE,
    fix_accuracy,
    is_valid_coordinate,
    is_valid_map_latitude,
)
from venueguard.validation.strings import MAX_STRING_LENGTH, clean_input_string

__all__ = [
    "MAX_HORIZONTAL_ACCURACY",
    "MAX_STRING_LENGTH",
    "MAX_VALID_MAP_LATITUDE",
    "clean_input_string",
    "fix_accuracy",
    "is_valid_coordinate",
    "is_valid_map_latitude",
]
