"""Utility functions for NDBC data retrieval."""

from ndbc_data.utils.filesystem import ensure_data_dir, format_bytes
from ndbc_data.utils.parsing import parse_station_filter

__all__ = ["ensure_data_dir", "format_bytes", "parse_station_filter"]
