"""Download NDBC realtime standard meteorological data and save it as parquet."""

from ndbc_data.data.station_metadata import StationPosition, scan_station_metadata
from ndbc_data.data.std_met import STD_MET_COLUMNS, ParsedFeed, parse_std_met
from ndbc_data.exceptions import (
    EmptyFeedError,
    FetchError,
    MetadataParseError,
    NdbcDataError,
    NoDataRowsError,
    NoHeaderFoundError,
    NoStationsFoundError,
    StationDataUnavailableError,
)

__version__ = "0.1.0"

__all__ = [
    "StationPosition",
    "scan_station_metadata",
    "STD_MET_COLUMNS",
    "ParsedFeed",
    "parse_std_met",
    "NdbcDataError",
    "MetadataParseError",
    "NoStationsFoundError",
    "NoHeaderFoundError",
    "NoDataRowsError",
    "EmptyFeedError",
    "FetchError",
    "StationDataUnavailableError",
]
