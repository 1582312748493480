"""Fetch, parse and save NDBC standard met data for a set of stations."""

import logging
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from pathlib import Path

from ndbc_data.client import NdbcClient
from ndbc_data.config.pipeline import PipelineConfig
from ndbc_data.data.output import enrich_station_frame, write_station_parquet
from ndbc_data.data.station_metadata import (
    StationPosition,
    all_station_ids,
    lookup_position,
    scan_station_metadata,
)
from ndbc_data.data.std_met import parse_std_met
from ndbc_data.exceptions import NdbcDataError, NoDataRowsError, NoHeaderFoundError
from ndbc_data.utils.filesystem import ensure_data_dir

logger = logging.getLogger(__name__)


@dataclass
class StationResult:
    """Outcome of processing one station."""

    station_id: str
    path: Path | None = None
    rows: int = 0
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class RunSummary:
    """Outcome of a run over several stations."""

    results: list[StationResult] = field(default_factory=list)

    @property
    def succeeded(self) -> list[StationResult]:
        return [r for r in self.results if r.ok]

    @property
    def failed(self) -> list[StationResult]:
        return [r for r in self.results if not r.ok]

    @property
    def total_rows(self) -> int:
        return sum(r.rows for r in self.succeeded)


class NdbcPipeline:
    """Downloads station metadata once, then processes stations independently.

    Example:
        >>> pipeline = NdbcPipeline(PipelineConfig(out_dir=Path("data")))
        >>> pipeline.load_station_metadata()
        >>> summary = pipeline.run(["46042", "41001"])
    """

    def __init__(self, config: PipelineConfig | None = None, client: NdbcClient | None = None):
        self.config = config or PipelineConfig()
        self.client = client or NdbcClient(self.config.download)
        self.station_meta: dict[str, StationPosition] = {}

        ensure_data_dir(
            self.config.out_dir,
            self.config.gitignore_path if self.config.update_gitignore else None,
        )

    @property
    def out_dir(self) -> Path:
        return self.config.out_dir

    def load_station_metadata(self) -> dict[str, StationPosition]:
        """Download and scan the station metadata document.

        Raises:
            FetchError: If the document cannot be downloaded
            MetadataParseError: If the document is malformed
            NoStationsFoundError: If no station has met data
        """
        content = self.client.fetch_station_metadata()
        self.station_meta = scan_station_metadata(content)
        logger.info(f"Station metadata retrieved: {len(self.station_meta)} stations")
        return self.station_meta

    def all_station_ids(self) -> list[str]:
        """Sorted IDs of all stations with met data in the loaded metadata.

        IDs are uppercased to match the names NDBC publishes realtime feeds
        under; positions are still found through the case-insensitive lookup.
        """
        return sorted({station_id.upper() for station_id in all_station_ids(self.station_meta)})

    def process_station(self, station_id: str) -> StationResult:
        """Fetch, parse, enrich and write one station.

        Raises:
            NdbcDataError: If any step fails for this station
        """
        text = self.client.fetch_realtime_text(station_id)

        parsed = parse_std_met(text)
        if not parsed.has_header:
            raise NoHeaderFoundError("no standard met header found")
        if parsed.is_empty:
            raise NoDataRowsError("no standard met rows found")

        position = lookup_position(self.station_meta, station_id)
        if position is None:
            logger.warning(f"No position known for station {station_id}")

        frame = enrich_station_frame(parsed.frame, station_id, position)
        path = write_station_parquet(frame, self.out_dir, station_id)
        return StationResult(station_id=station_id, path=path, rows=frame.height)

    def _process_safely(self, station_id: str) -> StationResult:
        try:
            return self.process_station(station_id)
        except NdbcDataError as e:
            logger.warning(f"Failed to process station {station_id}: {e}")
            return StationResult(station_id=station_id, error=str(e))
        except OSError as e:
            logger.warning(f"Failed to write station {station_id}: {e}")
            return StationResult(station_id=station_id, error=f"write failed: {e}")
        except Exception as e:
            logger.exception(f"Unexpected error processing station {station_id}")
            return StationResult(station_id=station_id, error=f"{type(e).__name__}: {e}")

    def run(
        self,
        station_ids: list[str],
        progress_callback: Callable[[StationResult], None] | None = None,
    ) -> RunSummary:
        """Process stations, recording failures instead of stopping.

        Results are returned in the order of ``station_ids`` regardless of
        the order in which concurrent workers finish.

        Args:
            station_ids: Stations to process
            progress_callback: Called with each result as it completes

        Returns:
            RunSummary with one result per station
        """
        results: dict[str, StationResult] = {}

        if self.config.max_workers <= 1:
            for station_id in station_ids:
                result = self._process_safely(station_id)
                results[station_id] = result
                if progress_callback:
                    progress_callback(result)
        else:
            with ThreadPoolExecutor(max_workers=self.config.max_workers) as executor:
                future_to_station = {
                    executor.submit(self._process_safely, station_id): station_id
                    for station_id in station_ids
                }
                for future in as_completed(future_to_station):
                    result = future.result()
                    results[future_to_station[future]] = result
                    if progress_callback:
                        progress_callback(result)

        summary = RunSummary(results=[results[s] for s in station_ids])
        logger.info(
            f"Done: {len(summary.succeeded)} succeeded, {len(summary.failed)} failed"
        )
        return summary
