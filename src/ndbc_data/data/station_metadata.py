"""Station position extraction from the NDBC station metadata XML.

The metadata document lists every station with its deployment history::

    <stations>
      <station id="41001" name="..." owner="..." ...>
        <history start="..." stop="..." lat="34.7" lng="-72.7" met="y" .../>
        <history start="..." lat="34.68" lng="-72.66" met="y" .../>
      </station>
    </stations>

Only stations with at least one met-enabled history entry get a position. The
currently open entry (no ``stop``) wins; otherwise the first met-enabled entry
is used.
"""

import io
import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass

import polars as pl

from ndbc_data.exceptions import MetadataParseError, NoStationsFoundError

logger = logging.getLogger(__name__)

STATIONS_TAG = "stations"
STATION_TAG = "station"
HISTORY_TAG = "history"

# Value of the history "met" attribute for met-enabled deployments
MET_ENABLED = "y"

STATION_FRAME_SCHEMA = {
    "station_id": pl.Utf8,
    "latitude": pl.Float64,
    "longitude": pl.Float64,
}


@dataclass(frozen=True)
class StationPosition:
    """Geographic position of a station."""

    station_id: str
    latitude: float
    longitude: float


@dataclass
class HistoryEntry:
    """One deployment interval from a station's history."""

    met_enabled: bool
    is_current: bool
    latitude: float | None = None
    longitude: float | None = None

    @classmethod
    def from_attributes(cls, attrs: dict[str, str]) -> "HistoryEntry":
        stop = attrs.get("stop")
        return cls(
            met_enabled=attrs.get("met") == MET_ENABLED,
            is_current=not stop,
            latitude=_parse_coordinate(attrs.get("lat")),
            longitude=_parse_coordinate(attrs.get("lng")),
        )

    @property
    def has_position(self) -> bool:
        return self.latitude is not None and self.longitude is not None


def _parse_coordinate(value: str | None) -> float | None:
    if value is None:
        return None
    try:
        return float(value)
    except ValueError:
        return None


def _local_name(tag: str) -> str:
    # Drop any "{namespace}" prefix
    return tag.rsplit("}", 1)[-1]


def scan_station_metadata(content: bytes) -> dict[str, StationPosition]:
    """Extract station positions from the station metadata document.

    The document is scanned as a stream of start/end events. For each station
    inside the ``stations`` container, met-enabled history entries are
    considered in document order: the first one is accepted unconditionally,
    later ones replace it only when they are the currently active deployment.

    Args:
        content: Raw bytes of the metadata XML document

    Returns:
        Mapping of station ID to its position

    Raises:
        MetadataParseError: If the document is not well-formed XML
        NoStationsFoundError: If no station has a met-enabled position
    """
    positions: dict[str, StationPosition] = {}

    in_stations = False
    station_id: str | None = None
    picked: tuple[float, float] | None = None

    try:
        for event, elem in ET.iterparse(io.BytesIO(content), events=("start", "end")):
            tag = _local_name(elem.tag)

            if event == "start":
                if tag == STATIONS_TAG:
                    in_stations = True
                elif in_stations and tag == STATION_TAG:
                    station_id = elem.get("id")
                    picked = None
                elif in_stations and tag == HISTORY_TAG:
                    entry = HistoryEntry.from_attributes(dict(elem.attrib))
                    if entry.met_enabled and entry.has_position:
                        if picked is None or entry.is_current:
                            picked = (entry.latitude, entry.longitude)
            else:
                if in_stations and tag == STATION_TAG:
                    if station_id and picked is not None:
                        positions[station_id] = StationPosition(station_id, picked[0], picked[1])
                    else:
                        logger.debug(f"Skipping station {station_id}: no met-enabled position")
                    station_id = None
                    picked = None
                    elem.clear()
                elif tag == STATIONS_TAG:
                    break
    except ET.ParseError as e:
        raise MetadataParseError(f"station metadata parse error: {e}") from e

    if not positions:
        raise NoStationsFoundError("no stations with met data found in metadata")

    logger.info(f"Found {len(positions)} stations with met data")
    return positions


def all_station_ids(positions: dict[str, StationPosition]) -> list[str]:
    """Return all station IDs in the mapping, sorted."""
    return sorted(positions)


def lookup_position(
    positions: dict[str, StationPosition],
    station_id: str,
) -> StationPosition | None:
    """Find a station's position, ignoring case.

    Metadata IDs are lowercase for some stations while realtime feeds are
    requested in uppercase, so an exact match is tried first and then a
    case-insensitive one.
    """
    position = positions.get(station_id)
    if position is not None:
        return position

    wanted = station_id.casefold()
    for key, candidate in positions.items():
        if key.casefold() == wanted:
            return candidate
    return None


def positions_to_frame(positions: dict[str, StationPosition]) -> pl.DataFrame:
    """Convert the station mapping to a table sorted by station ID."""
    rows = [positions[sid] for sid in all_station_ids(positions)]
    return pl.DataFrame(
        {
            "station_id": [p.station_id for p in rows],
            "latitude": [p.latitude for p in rows],
            "longitude": [p.longitude for p in rows],
        },
        schema=STATION_FRAME_SCHEMA,
    )
