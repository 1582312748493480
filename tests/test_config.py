"""Tests for configuration classes."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from ndbc_data.config.base import BaseConfig
from ndbc_data.config.download import DownloadSettings
from ndbc_data.config.paths import DATA_DIR, get_station_output_path
from ndbc_data.config.pipeline import PipelineConfig


class SampleConfig(BaseConfig):
    """Test configuration class for testing base functionality."""

    name: str
    value: int = 42
    enabled: bool = True


def test_base_config():
    """Test basic BaseConfig functionality."""
    config = SampleConfig(name="test")
    assert config.name == "test"
    assert config.value == 42
    assert config.enabled is True


def test_base_config_validation():
    """Test that BaseConfig validates input."""
    with pytest.raises(ValidationError):
        SampleConfig()  # Missing 'name'

    with pytest.raises(ValidationError):
        SampleConfig(name="test", value="not_an_int")

    # Extra fields raise ValidationError (extra='forbid')
    with pytest.raises(ValidationError):
        SampleConfig(name="test", extra_field="not_allowed")


def test_base_config_validate_assignment():
    """Test that assignments are validated."""
    config = SampleConfig(name="test")
    with pytest.raises(ValidationError):
        config.value = "not_an_int"


def test_base_config_to_yaml():
    """Test converting config to YAML string."""
    yaml_str = SampleConfig(name="test", value=99).to_yaml()

    assert "name: test" in yaml_str
    assert "value: 99" in yaml_str
    assert "enabled: true" in yaml_str


def test_base_config_yaml_file_roundtrip(tmp_path: Path):
    """Test saving and loading YAML files."""
    path = tmp_path / "nested" / "config.yaml"
    SampleConfig(name="file", value=7).to_yaml_file(path)

    loaded = SampleConfig.from_yaml_file(path)
    assert loaded.name == "file"
    assert loaded.value == 7


def test_download_settings_defaults():
    """Test default NDBC URLs."""
    settings = DownloadSettings()

    assert settings.metadata_url == "https://www.ndbc.noaa.gov/metadata/stationmetadata.xml"
    assert settings.realtime_url("46042") == "https://www.ndbc.noaa.gov/data/realtime2/46042.txt"


def test_download_settings_validation():
    """Test network setting bounds."""
    with pytest.raises(ValidationError):
        DownloadSettings(timeout_seconds=0)


def test_pipeline_config_defaults():
    """Test pipeline defaults."""
    config = PipelineConfig()

    assert config.out_dir == DATA_DIR
    assert config.max_workers == 1
    assert config.update_gitignore is True
    assert isinstance(config.download, DownloadSettings)


def test_pipeline_config_from_yaml():
    """Test nested settings loaded from YAML."""
    config = PipelineConfig.from_yaml(
        "out_dir: buoy_data\nmax_workers: 4\ndownload:\n  timeout_seconds: 30\n"
    )

    assert config.out_dir == Path("buoy_data")
    assert config.max_workers == 4
    assert config.download.timeout_seconds == 30
    assert config.download.user_agent == DownloadSettings().user_agent


def test_pipeline_config_empty_yaml():
    """Test that an empty document gives defaults."""
    assert PipelineConfig.from_yaml("") == PipelineConfig()


def test_pipeline_config_rejects_bad_workers():
    """Test worker bounds."""
    with pytest.raises(ValidationError):
        PipelineConfig(max_workers=0)


def test_pipeline_config_yaml_roundtrip(tmp_path: Path):
    """Test that a dumped pipeline config loads back equal."""
    config = PipelineConfig(out_dir=tmp_path / "out", max_workers=3)
    path = tmp_path / "pipeline.yaml"
    config.to_yaml_file(path)

    assert PipelineConfig.from_yaml_file(path) == config


def test_get_station_output_path():
    """Test station file naming."""
    assert get_station_output_path(Path("data"), "46042") == Path("data/46042.parquet")
