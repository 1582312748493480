"""Station table enrichment and parquet output."""

import logging
from pathlib import Path

import polars as pl

from ndbc_data.config.paths import get_station_output_path
from ndbc_data.data.station_metadata import StationPosition

logger = logging.getLogger(__name__)

ENRICHMENT_COLUMNS = ["station_id", "latitude", "longitude"]


def enrich_station_frame(
    frame: pl.DataFrame,
    station_id: str,
    position: StationPosition | None,
) -> pl.DataFrame:
    """Append constant station_id, latitude and longitude columns.

    Latitude and longitude are null when the station has no known position.

    Args:
        frame: Parsed observation table
        station_id: Station the table belongs to
        position: Station position from the metadata scan, if any

    Returns:
        Table with the three enrichment columns appended
    """
    latitude = position.latitude if position is not None else None
    longitude = position.longitude if position is not None else None

    return frame.with_columns(
        pl.lit(station_id, dtype=pl.Utf8).alias("station_id"),
        pl.lit(latitude, dtype=pl.Float64).alias("latitude"),
        pl.lit(longitude, dtype=pl.Float64).alias("longitude"),
    )


def write_station_parquet(frame: pl.DataFrame, out_dir: Path, station_id: str) -> Path:
    """Write a station table to ``{out_dir}/{station_id}.parquet``.

    An existing file for the station is overwritten.

    Returns:
        Path of the written file
    """
    path = get_station_output_path(out_dir, station_id)
    logger.info(f"Writing {path} ({frame.height} rows, {frame.width} columns)")
    frame.write_parquet(path)
    return path


def read_station_parquet(out_dir: Path, station_id: str) -> pl.DataFrame | None:
    """Read a station table written by :func:`write_station_parquet`.

    Returns:
        The table, or None if the station has no file in ``out_dir``
    """
    path = get_station_output_path(out_dir, station_id)
    if not path.exists():
        logger.debug(f"No parquet file for station {station_id} in {out_dir}")
        return None
    return pl.read_parquet(path)
