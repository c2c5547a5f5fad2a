# speckit/core/config.py
"""
Project configuration (spec-kit.yaml) loading and saving.

Usage:
    from speckit.core.config import load_config, save_config, ProjectConfig

    config = load_config()                       # discovered from CWD
    config.consumer.language                     # "python"

    save_config(ProjectConfig(name="petstore"), Path("."))

Schema validation (pydantic) is separate from YAML loading so that other
components can reuse load_yaml for their own documents.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from speckit.core.errors import SpecKitError
from speckit.core.paths import DEFAULT_PLAN_FILE, SpecKitPaths
from speckit.logging.logger import get_logger

logger = get_logger(__name__)


# =============================================================================
# Errors
# =============================================================================


class ConfigError(SpecKitError):
    """Base error for configuration issues."""

    def __init__(self, message: str, path: Optional[Path] = None):
        self.path = path
        if path:
            message = f"{message} (file: {path})"
        super().__init__(message)


class ConfigNotFoundError(ConfigError):
    """Raised when a config file doesn't exist."""

    pass


class ConfigParseError(ConfigError):
    """Raised when YAML parsing fails."""

    pass


class ConfigValidationError(ConfigError):
    """Raised when config doesn't match schema."""

    pass


# =============================================================================
# Schema
# =============================================================================


class SdkSettings(BaseModel):
    """Where a vendor SDK for the contract lives (informational)."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    language: str = Field(default="java", description="SDK language")
    output_dir: str = Field(default="sdk", alias="outputDir", description="SDK directory")
    package_name: Optional[str] = Field(
        default=None, alias="packageName", description="Package/namespace for generated code"
    )


class ConsumerSettings(BaseModel):
    """Target for generated client code."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    language: str = Field(default="python", description="Target language for emission")
    output_dir: str = Field(
        default="consumer", alias="outputDir", description="Directory for generated files"
    )


class ProjectConfig(BaseModel):
    """Contents of spec-kit.yaml."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    name: str = Field(..., description="Project name")
    version: str = Field(default="1.0.0", description="Project version")
    openapi: str = Field(default="openapi.yaml", description="Contract path, project-relative")
    plan: str = Field(default=DEFAULT_PLAN_FILE, description="Plan path, project-relative")
    sdk: Optional[SdkSettings] = Field(default=None, description="Optional SDK settings")
    consumer: ConsumerSettings = Field(default_factory=ConsumerSettings)

    @property
    def package_name(self) -> Optional[str]:
        """Package name used for emission, if configured."""
        return self.sdk.package_name if self.sdk else None


# =============================================================================
# Loading / Saving
# =============================================================================


def load_yaml(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load a YAML file and return it as a dictionary.

    Raises:
        ConfigNotFoundError: If file doesn't exist
        ConfigParseError: If YAML is invalid or the root is not a mapping
    """
    p = Path(path)

    if not p.exists():
        raise ConfigNotFoundError("Config file not found", path=p)

    if p.is_dir():
        raise ConfigError("Config path is a directory, not a file", path=p)

    try:
        with p.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigParseError(f"Invalid YAML syntax: {e}", path=p) from e

    if not isinstance(data, dict):
        raise ConfigParseError("Config root must be a mapping (dict)", path=p)

    logger.debug(f"Loaded config from {p}")
    return data


def load_config(path: Optional[Union[str, Path]] = None) -> ProjectConfig:
    """
    Load and validate spec-kit.yaml.

    Args:
        path: Explicit config path. Defaults to the discovered project config.

    Raises:
        ConfigNotFoundError, ConfigParseError, ConfigValidationError
    """
    resolved = Path(path) if path is not None else SpecKitPaths.config()
    data = load_yaml(resolved)

    try:
        return ProjectConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"Config validation failed: {e}", path=resolved) from e


def save_config(config: ProjectConfig, root: Union[str, Path]) -> Path:
    """Write spec-kit.yaml into `root` and return its path."""
    path = SpecKitPaths.config(Path(root))
    data = config.model_dump(by_alias=True, exclude_none=True)

    with path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(data, f, sort_keys=False, indent=2)

    logger.debug(f"Saved config to {path}")
    return path


__all__ = [
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ConfigValidationError",
    "ConsumerSettings",
    "ProjectConfig",
    "SdkSettings",
    "load_config",
    "load_yaml",
    "save_config",
]
