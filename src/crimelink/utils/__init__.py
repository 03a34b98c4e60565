"""Common utility functions for crimelink."""

from crimelink.utils.hashing import calculate_file_sha256, format_sha256
from crimelink.utils.timestamps import get_iso_timestamp

__all__ = [
    "get_iso_timestamp",
    "calculate_file_sha256",
    "format_sha256",
]
