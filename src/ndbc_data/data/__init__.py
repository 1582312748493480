"""Station metadata scanning, feed parsing and parquet output."""

from ndbc_data.data.output import enrich_station_frame, write_station_parquet
from ndbc_data.data.station_metadata import scan_station_metadata
from ndbc_data.data.std_met import parse_std_met

__all__ = ["scan_station_metadata", "parse_std_met", "enrich_station_frame", "write_station_parquet"]
