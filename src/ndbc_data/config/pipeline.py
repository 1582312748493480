"""Pipeline configuration."""

from pathlib import Path

from pydantic import Field

from ndbc_data.config.base import BaseConfig
from ndbc_data.config.download import DownloadSettings
from ndbc_data.config.paths import DATA_DIR, GITIGNORE_PATH


class PipelineConfig(BaseConfig):
    """Configuration for a fetch-and-save run.

    Attributes:
        out_dir: Directory receiving one parquet file per station
        gitignore_path: Ignore file that gets an entry for out_dir
        update_gitignore: Whether to touch the ignore file at all
        max_workers: Number of stations processed concurrently
        download: HTTP settings
    """

    out_dir: Path = Field(default=DATA_DIR, description="Output directory for parquet files")
    gitignore_path: Path = Field(default=GITIGNORE_PATH)
    update_gitignore: bool = Field(default=True)
    max_workers: int = Field(default=1, ge=1, le=32)
    download: DownloadSettings = Field(default_factory=DownloadSettings)
