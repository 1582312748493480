#!/usr/bin/env python3
"""CLI for downloading NDBC realtime standard met data to parquet.

Usage:
    ndbc-data fetch 46042 41001 FPKA2           # Specific stations
    ndbc-data fetch --all-stations -w 8         # Every station with met data
    ndbc-data fetch 46042 --out-dir buoy_data   # Custom output directory
    ndbc-data fetch 46042 --config ndbc.yaml    # Settings from a YAML file
    ndbc-data show 46042                        # Print a saved station table
    ndbc-data init-config ndbc.yaml             # Write default settings for --config
"""

import logging
from pathlib import Path
from typing import Optional

import polars as pl
import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from ndbc_data.config.paths import DATA_DIR, STATIONS_FILENAME
from ndbc_data.config.pipeline import PipelineConfig
from ndbc_data.data.output import read_station_parquet
from ndbc_data.data.station_metadata import positions_to_frame
from ndbc_data.exceptions import NdbcDataError
from ndbc_data.pipeline import NdbcPipeline, StationResult
from ndbc_data.utils.filesystem import format_bytes
from ndbc_data.utils.parsing import parse_station_filter
from ndbc_data.utils.progress import (
    create_processing_progress,
    print_error,
    print_info,
    print_success,
    print_summary_table,
    print_warning,
    status_spinner,
)

app = typer.Typer(help="Fetch NDBC realtime standard meteorological data and save as Parquet.")
console = Console()
logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else (logging.WARNING if quiet else logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def load_config(
    config_file: Path | None,
    out_dir: Path | None,
    workers: int | None,
    update_gitignore: bool,
) -> PipelineConfig:
    """Build the pipeline config from an optional YAML file plus CLI overrides."""
    config = PipelineConfig.from_yaml_file(config_file) if config_file else PipelineConfig()
    if out_dir is not None:
        config.out_dir = out_dir
    if workers is not None:
        config.max_workers = workers
    if not update_gitignore:
        config.update_gitignore = False
    return config


@app.command()
def fetch(
    stations: Optional[list[str]] = typer.Argument(
        None,
        help="Station identifiers to retrieve (e.g., 42040 46042 FPKA2)",
    ),
    all_stations: bool = typer.Option(
        False,
        "--all-stations", "-a",
        help="Retrieve every station with met data in the station metadata",
    ),
    out_dir: Optional[Path] = typer.Option(
        None,
        "--out-dir", "-o",
        help=f"Output directory for parquet files (default: {DATA_DIR})",
    ),
    workers: Optional[int] = typer.Option(
        None,
        "--workers", "-w",
        help="Number of stations processed concurrently",
        min=1,
        max=32,
    ),
    config_file: Optional[Path] = typer.Option(
        None,
        "--config", "-c",
        help="YAML file with pipeline settings",
    ),
    update_gitignore: bool = typer.Option(
        True,
        "--gitignore/--no-gitignore",
        help="Add the output directory to .gitignore",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Quiet output"),
) -> None:
    """Download, parse and save realtime standard met data for stations."""
    setup_logging(verbose, quiet)

    station_ids = parse_station_filter(stations)
    if not station_ids and not all_stations:
        print_error("No stations given")
        print_info("Pass station IDs or use --all-stations")
        raise typer.Exit(1)

    try:
        config = load_config(config_file, out_dir, workers, update_gitignore)
    except (OSError, ValidationError) as e:
        print_error(f"Invalid configuration: {escape(str(e))}")
        raise typer.Exit(1)

    try:
        pipeline = NdbcPipeline(config)
    except OSError as e:
        print_error(f"Cannot prepare output directory {config.out_dir}: {escape(str(e))}")
        raise typer.Exit(1)

    # Station positions are required before any station can be enriched
    try:
        with status_spinner("Downloading station metadata..."):
            positions = pipeline.load_station_metadata()
    except NdbcDataError as e:
        print_error(escape(str(e)))
        raise typer.Exit(1)

    print_info(f"Station metadata: {len(positions)} stations with met data")
    positions_to_frame(positions).write_parquet(config.out_dir / STATIONS_FILENAME)

    if all_stations:
        station_ids = pipeline.all_station_ids()

    with create_processing_progress() as progress:
        task_id = progress.add_task("Processing stations", total=len(station_ids))

        def progress_callback(result: StationResult) -> None:
            progress.update(task_id, advance=1, description=f"Processed {result.station_id}")

        summary = pipeline.run(station_ids, progress_callback=progress_callback)

    written_bytes = sum(r.path.stat().st_size for r in summary.succeeded if r.path)
    print_summary_table(
        "Run Summary",
        {
            "Stations requested": len(station_ids),
            "Succeeded": len(summary.succeeded),
            "Failed": len(summary.failed),
            "Rows written": summary.total_rows,
            "Data written": format_bytes(written_bytes),
            "Output directory": config.out_dir,
        },
    )

    for result in summary.failed:
        print_warning(f"{result.station_id}: {escape(result.error or '')}")

    if summary.succeeded:
        print_success(f"Saved {len(summary.succeeded)} stations to {config.out_dir}")


@app.command()
def show(
    station: str = typer.Argument(..., help="Station identifier"),
    out_dir: Path = typer.Option(
        DATA_DIR,
        "--out-dir", "-o",
        help="Directory containing station parquet files",
    ),
    rows: int = typer.Option(10, "--rows", "-n", help="Number of rows to show", min=1),
) -> None:
    """Print the first rows of a saved station table."""
    station_id = station.strip().upper()
    frame = read_station_parquet(out_dir, station_id)
    if frame is None:
        print_error(f"No data saved for station {station_id} in {out_dir}")
        raise typer.Exit(1)

    with pl.Config(tbl_cols=-1):
        # Polars dtype labels like datetime[ms, UTC] must not be read as markup
        console.print(str(frame.head(rows)), markup=False, highlight=False, soft_wrap=True)
    print_info(f"{frame.height} rows, {frame.width} columns")


@app.command("init-config")
def init_config(
    path: Path = typer.Argument(Path("ndbc.yaml"), help="Where to write the YAML file"),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing file"),
) -> None:
    """Write the default pipeline settings as a YAML file for --config."""
    if path.exists() and not force:
        print_warning(f"{path} already exists. Use --force to overwrite.")
        raise typer.Exit(0)

    PipelineConfig().to_yaml_file(path)
    print_success(f"Wrote default settings to {path}")


if __name__ == "__main__":
    app()
