"""Parser for NDBC realtime standard meteorological text feeds.

A feed looks like::

    #YY  MM DD hh mm WDIR WSPD GST  WVHT   DPD   APD MWD   PRES  ATMP  WTMP  DEWP  VIS PTDY  TIDE
    #yr  mo dy hr mn degT m/s  m/s     m   sec   sec degT   hPa  degC  degC  degC  nmi  hPa    ft
    2024 05 01 12 50 200  5.0  6.0   0.9     6   4.7 190 1015.2  18.1  17.9  15.2   MM   MM    MM

The first five columns are always the timestamp. Observation columns are
located through the header, so feeds with fewer or reordered columns still
parse into the same fixed schema.
"""

import logging
import math
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import polars as pl

logger = logging.getLogger(__name__)

COMMENT_PREFIX = "#"

# Tokens denoting a missing reading
MISSING_VALUE_TOKENS = frozenset({"MM", "NaN"})

# Minimum tokens for a header candidate and for a data row (YY MM DD hh mm)
MIN_TIME_TOKENS = 5

TIME_COLUMN = "time"

# Standard met fields, in output column order
STD_MET_FIELDS = [
    "WDIR",  # wind direction (degT)
    "WSPD",  # wind speed (m/s)
    "GST",   # gust speed (m/s)
    "WVHT",  # significant wave height (m)
    "DPD",   # dominant wave period (sec)
    "APD",   # average wave period (sec)
    "MWD",   # mean wave direction (degT)
    "PRES",  # sea level pressure (hPa)
    "ATMP",  # air temperature (degC)
    "WTMP",  # water temperature (degC)
    "DEWP",  # dewpoint (degC)
    "VIS",   # visibility (nmi)
    "PTDY",  # pressure tendency (hPa)
    "TIDE",  # tide (ft)
]

STD_MET_COLUMNS = [TIME_COLUMN] + STD_MET_FIELDS

STD_MET_SCHEMA: dict[str, pl.DataType] = {
    TIME_COLUMN: pl.Datetime("ms", "UTC"),
    **{name: pl.Float64 for name in STD_MET_FIELDS},
}

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_MILLISECOND = timedelta(milliseconds=1)


@dataclass
class ParsedFeed:
    """Result of parsing one station feed.

    Attributes:
        frame: Observation table with the standard met schema
        header: Header tokens, or None if no header line was found
    """

    frame: pl.DataFrame
    header: list[str] | None = None

    @property
    def has_header(self) -> bool:
        return self.header is not None

    @property
    def is_empty(self) -> bool:
        return self.frame.height == 0


def _is_comment(line: str) -> bool:
    return line.lstrip().startswith(COMMENT_PREFIX)


def _header_tokens(line: str) -> list[str] | None:
    """Return the tokens of a header line, or None if the line is not a header."""
    tokens = line.lstrip().lstrip(COMMENT_PREFIX).split()
    if len(tokens) < MIN_TIME_TOKENS:
        return None
    if tokens[0].endswith("YY") and tokens[1] == "MM" and tokens[2] == "DD":
        return tokens
    return None


def find_header(lines: list[str]) -> tuple[list[str] | None, int]:
    """Locate the column header.

    A comment line directly after the header is taken as the units line and
    skipped.

    Args:
        lines: Feed lines

    Returns:
        Tuple of (header tokens, index of the first body line). The tokens
        are None and the index is ``len(lines)`` when no header exists.
    """
    for i, line in enumerate(lines):
        tokens = _header_tokens(line)
        if tokens is None:
            continue
        body_start = i + 1
        if body_start < len(lines) and _is_comment(lines[body_start]):
            body_start += 1
        return tokens, body_start
    return None, len(lines)


def decode_timestamp(tokens: list[str]) -> int | None:
    """Decode the leading YY MM DD hh mm tokens to epoch milliseconds (UTC).

    Years below 1000 (two-digit years) are taken as 2000 + value.

    Returns:
        Milliseconds since the epoch, or None if the tokens are not a valid
        date and time
    """
    if len(tokens) < MIN_TIME_TOKENS:
        return None
    try:
        year, month, day, hour, minute = (int(tok) for tok in tokens[:MIN_TIME_TOKENS])
        if year < 1000:
            year += 2000
        instant = datetime(year, month, day, hour, minute, tzinfo=timezone.utc)
    except ValueError:
        return None
    return (instant - _EPOCH) // _MILLISECOND


def parse_field_value(token: str | None) -> float | None:
    """Parse one observation token, returning None for missing or bad values."""
    if token is None or token in MISSING_VALUE_TOKENS:
        return None
    try:
        value = float(token)
    except ValueError:
        return None
    if math.isnan(value):
        return None
    return value


def empty_std_met_frame() -> pl.DataFrame:
    """Zero-row table with the standard met schema."""
    return pl.DataFrame(schema=STD_MET_SCHEMA)


def parse_std_met(text: str) -> ParsedFeed:
    """Parse a realtime standard met feed into a table.

    Rows are kept in feed order. Rows with fewer than five tokens or an
    undecodable timestamp are skipped. Capture stops at the first comment line
    after the data block.

    Args:
        text: Full feed text

    Returns:
        ParsedFeed; ``header`` is None and the table empty when no header
        line was found
    """
    lines = text.splitlines()
    header, body_start = find_header(lines)
    if header is None:
        logger.debug("No standard met header found")
        return ParsedFeed(frame=empty_std_met_frame())

    column_index = {name: idx for idx, name in enumerate(header)}
    field_index = {name: column_index.get(name) for name in STD_MET_FIELDS}

    times: list[int] = []
    columns: dict[str, list[float | None]] = {name: [] for name in STD_MET_FIELDS}
    skipped = 0

    for line in lines[body_start:]:
        stripped = line.strip()
        if not stripped:
            continue
        if stripped.startswith(COMMENT_PREFIX):
            break

        tokens = stripped.split()
        timestamp = decode_timestamp(tokens)
        if timestamp is None:
            skipped += 1
            continue

        times.append(timestamp)
        for name, idx in field_index.items():
            token = tokens[idx] if idx is not None and idx < len(tokens) else None
            columns[name].append(parse_field_value(token))

    if skipped:
        logger.debug(f"Skipped {skipped} undecodable rows")

    frame = pl.DataFrame(
        {TIME_COLUMN: times, **columns},
        schema={TIME_COLUMN: pl.Int64, **{name: pl.Float64 for name in STD_MET_FIELDS}},
    ).with_columns(
        pl.from_epoch(pl.col(TIME_COLUMN), time_unit="ms")
        .dt.replace_time_zone("UTC")
        .alias(TIME_COLUMN)
    )
    return ParsedFeed(frame=frame, header=header)
