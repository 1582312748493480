"""HTTP client for NDBC station metadata and realtime feeds.

Each request is a single attempt; failures are reported to the caller as
:class:`~ndbc_data.exceptions.FetchError` subclasses.
"""

import logging

import requests

from ndbc_data.config.download import DownloadSettings
from ndbc_data.exceptions import EmptyFeedError, FetchError, StationDataUnavailableError

logger = logging.getLogger(__name__)


class NdbcClient:
    """Fetches documents from NDBC using a shared requests session."""

    def __init__(
        self,
        settings: DownloadSettings | None = None,
        session: requests.Session | None = None,
    ):
        self.settings = settings or DownloadSettings()
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": self.settings.user_agent})

    def _get(self, url: str) -> requests.Response:
        try:
            response = self.session.get(
                url,
                timeout=self.settings.timeout_seconds,
                verify=self.settings.verify_ssl,
            )
        except requests.exceptions.RequestException as e:
            raise FetchError(f"request to {url} failed: {e}") from e
        return response

    def fetch_station_metadata(self) -> bytes:
        """Download the station metadata XML document.

        Raises:
            FetchError: On connection failure or an HTTP error status
        """
        url = self.settings.metadata_url
        logger.info(f"Downloading station metadata from {url}")
        response = self._get(url)
        try:
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            raise FetchError(f"station metadata download failed: {e}") from e
        return response.content

    def fetch_realtime_text(self, station_id: str) -> str:
        """Download a station's realtime standard met feed.

        Raises:
            StationDataUnavailableError: If NDBC has no feed for the station
            EmptyFeedError: If the feed body is blank
            FetchError: On connection failure or any other HTTP error status
        """
        url = self.settings.realtime_url(station_id)
        logger.info(f"Downloading realtime data for {station_id} from {url}")
        response = self._get(url)
        if response.status_code == 404:
            raise StationDataUnavailableError("data unavailable (404)")
        try:
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            raise FetchError(f"realtime data download failed: {e}") from e

        text = response.text
        if not text.strip():
            raise EmptyFeedError("empty data")
        return text

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "NdbcClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
