"""Shared fixtures: sample NDBC documents and fake HTTP collaborators."""

import pytest
import requests

from ndbc_data.config.pipeline import PipelineConfig
from ndbc_data.exceptions import StationDataUnavailableError

SAMPLE_FEED = """\
#YY  MM DD hh mm WDIR WSPD GST  WVHT   DPD   APD MWD   PRES  ATMP  WTMP  DEWP  VIS PTDY  TIDE
#yr  mo dy hr mn degT m/s  m/s     m   sec   sec degT   hPa  degC  degC  degC  nmi  hPa    ft
2024 05 01 12 50 200  5.0  6.0   0.9     6   4.7 190 1015.2  18.1  17.9  15.2   MM -0.3    MM
2024 05 01 12 40 210  4.0  5.0    MM    MM    MM  MM 1015.3  18.0  17.9  15.1   MM   MM    MM
2024 05 01 12 30  MM   MM   MM   1.0     7   4.9 185     MM    MM  17.8    MM   MM   MM    MM
"""

SAMPLE_METADATA = b"""\
<?xml version="1.0" encoding="UTF-8"?>
<stations created="2024-05-01T12:00:00UTC" count="3">
  <station id="46042" name="MONTEREY" owner="NDBC" pgm="NDBC Meteorological/Ocean" type="buoy">
    <history start="1987-11-20" stop="2001-03-01" lat="36.75" lng="-122.42" met="y" hull="10D"/>
    <history start="2001-03-01" lat="36.785" lng="-122.398" met="y" hull="3D"/>
  </station>
  <station id="fpka2" name="FIVE FINGERS" owner="NDBC" pgm="NDBC Meteorological/Ocean" type="fixed">
    <history start="1984-07-01" stop="2010-01-01" lat="57.27" lng="-133.63" met="y"/>
  </station>
  <station id="waves" name="WAVE ONLY" owner="NDBC" pgm="NDBC" type="buoy">
    <history start="2010-01-01" lat="10.0" lng="20.0" met="n"/>
  </station>
</stations>
"""


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, status_code: int = 200, text: str = "", content: bytes | None = None):
        self.status_code = status_code
        self.text = text
        self.content = content if content is not None else text.encode()

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} Error")


class FakeSession:
    """Records requested URLs and returns canned responses."""

    def __init__(self, responses: dict[str, FakeResponse] | None = None, error: Exception | None = None):
        self.responses = responses or {}
        self.error = error
        self.headers: dict[str, str] = {}
        self.requested: list[str] = []
        self.closed = False

    def get(self, url: str, timeout=None, verify=True) -> FakeResponse:
        self.requested.append(url)
        if self.error is not None:
            raise self.error
        return self.responses.get(url, FakeResponse(status_code=404))

    def close(self) -> None:
        self.closed = True


class FakeClient:
    """NdbcClient replacement serving documents from memory."""

    def __init__(self, metadata: bytes = SAMPLE_METADATA, feeds: dict[str, str] | None = None):
        self.metadata = metadata
        self.feeds = feeds if feeds is not None else {"46042": SAMPLE_FEED}

    def fetch_station_metadata(self) -> bytes:
        return self.metadata

    def fetch_realtime_text(self, station_id: str) -> str:
        if station_id not in self.feeds:
            raise StationDataUnavailableError("data unavailable (404)")
        return self.feeds[station_id]


@pytest.fixture
def sample_feed() -> str:
    """Realtime standard met feed with three rows, newest first."""
    return SAMPLE_FEED


@pytest.fixture
def sample_metadata() -> bytes:
    """Station metadata with an open, a closed-only and a non-met station."""
    return SAMPLE_METADATA


@pytest.fixture
def pipeline_config(tmp_path) -> PipelineConfig:
    """Pipeline configuration writing into a temporary directory."""
    return PipelineConfig(
        out_dir=tmp_path / "data",
        gitignore_path=tmp_path / ".gitignore",
    )
