"""Parsing utilities for command-line arguments."""

import logging

logger = logging.getLogger(__name__)


def parse_station_filter(station_args: list[str] | None) -> list[str]:
    """Normalize station arguments into a list of unique station IDs.

    Each argument may itself be a comma-separated list. IDs are stripped and
    uppercased; duplicates are dropped keeping first-seen order.

    Args:
        station_args: Station arguments from the command line, or None

    Returns:
        List of station IDs

    Examples:
        >>> parse_station_filter(["46042", "fpka2,41001"])
        ['46042', 'FPKA2', '41001']
        >>> parse_station_filter(None)
        []
    """
    if not station_args:
        return []

    stations: list[str] = []
    for arg in station_args:
        for station in arg.split(","):
            station = station.strip().upper()
            if not station:
                continue
            if station in stations:
                logger.debug(f"Ignoring duplicate station {station}")
                continue
            stations.append(station)

    return stations
