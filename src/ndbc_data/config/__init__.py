"""Configuration management for NDBC data retrieval."""

from ndbc_data.config.base import BaseConfig
from ndbc_data.config.download import DEFAULT_DOWNLOAD_SETTINGS, DownloadSettings
from ndbc_data.config.paths import (
    DATA_DIR,
    GITIGNORE_PATH,
    STATIONS_FILENAME,
    get_station_output_path,
)
from ndbc_data.config.pipeline import PipelineConfig

__all__ = [
    "BaseConfig",
    "DownloadSettings",
    "DEFAULT_DOWNLOAD_SETTINGS",
    "PipelineConfig",
    "DATA_DIR",
    "GITIGNORE_PATH",
    "STATIONS_FILENAME",
    "get_station_output_path",
]
