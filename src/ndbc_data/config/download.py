"""Download configuration for NDBC data."""

from pydantic import Field

from ndbc_data.config.base import BaseConfig


class DownloadSettings(BaseConfig):
    """Configuration for NDBC HTTP requests."""

    # NOAA NDBC URLs
    metadata_url: str = Field(
        default="https://www.ndbc.noaa.gov/metadata/stationmetadata.xml",
        description="URL for the station metadata XML document",
    )
    realtime_url_template: str = Field(
        default="https://www.ndbc.noaa.gov/data/realtime2/{station}.txt",
        description="URL template for a station's realtime standard met feed",
    )

    # Network settings
    timeout_seconds: int = Field(default=60, ge=1, le=3600)

    verify_ssl: bool = Field(default=True)
    user_agent: str = Field(default="ndbc-data/0.1")

    def realtime_url(self, station_id: str) -> str:
        """Get the realtime feed URL for a station."""
        return self.realtime_url_template.format(station=station_id)


# Default settings instance
DEFAULT_DOWNLOAD_SETTINGS = DownloadSettings()
