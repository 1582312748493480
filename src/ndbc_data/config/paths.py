"""Path configuration for NDBC data output."""

from pathlib import Path

# Relative to the working directory, matching the .gitignore entry written for it
DATA_DIR = Path("data")
GITIGNORE_PATH = Path(".gitignore")

# Station directory table written alongside the per-station files
STATIONS_FILENAME = "stations.parquet"


def get_station_output_path(out_dir: Path, station_id: str) -> Path:
    """Get the path to a station's parquet file.

    Args:
        out_dir: Output directory
        station_id: Station identifier (e.g., "46042")

    Returns:
        Path to the parquet file: {out_dir}/{station_id}.parquet
    """
    return out_dir / f"{station_id}.parquet"
