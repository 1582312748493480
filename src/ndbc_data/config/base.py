"""Base configuration classes for NDBC data retrieval.

This module provides the base Pydantic model that other configuration classes inherit from,
offering common functionality for validation, serialization, and YAML loading.
"""

from pathlib import Path
from typing import Any, TypeVar

import yaml
from pydantic import BaseModel, ConfigDict

T = TypeVar("T", bound="BaseConfig")


class BaseConfig(BaseModel):
    """Base configuration class with common functionality.

    Provides:
    - Pydantic v2 configuration
    - YAML serialization
    - File loading utilities

    Example:
        >>> class MyConfig(BaseConfig):
        ...     name: str
        ...     value: int = 42
        >>> config = MyConfig(name="test")
        >>> config.to_yaml_file("config.yaml")
        >>> loaded = MyConfig.from_yaml_file("config.yaml")
    """

    model_config = ConfigDict(
        # Allow arbitrary types (for Path, etc.)
        arbitrary_types_allowed=True,
        # Validate on assignment
        validate_assignment=True,
        # Extra fields raise validation error
        extra="forbid",
        # Populate by name (allows field aliases)
        populate_by_name=True,
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a JSON-compatible dictionary."""
        return self.model_dump(mode="json")

    def to_yaml(self) -> str:
        """Convert configuration to YAML string."""
        return yaml.safe_dump(self.to_dict(), default_flow_style=False, sort_keys=False)

    def to_yaml_file(self, path: Path | str) -> None:
        """Save configuration to YAML file.

        Args:
            path: Output file path
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            f.write(self.to_yaml())

    @classmethod
    def from_dict(cls: type[T], data: dict[str, Any]) -> T:
        """Create configuration from dictionary.

        Args:
            data: Configuration dictionary

        Returns:
            Validated configuration instance
        """
        return cls.model_validate(data)

    @classmethod
    def from_yaml(cls: type[T], yaml_str: str) -> T:
        """Create configuration from YAML string.

        An empty document yields the default configuration.
        """
        data = yaml.safe_load(yaml_str) or {}
        return cls.from_dict(data)

    @classmethod
    def from_yaml_file(cls: type[T], path: Path | str) -> T:
        """Load configuration from YAML file.

        Args:
            path: Path to YAML file

        Returns:
            Validated configuration instance

        Raises:
            FileNotFoundError: If file doesn't exist
            ValidationError: If configuration is invalid
        """
        path = Path(path)
        with open(path) as f:
            return cls.from_yaml(f.read())
