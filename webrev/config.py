"""Configuration loading and validation for webrev."""

import os
from pathlib import Path
import re
from typing import Optional

from pydantic import BaseModel, Field, field_validator
import yaml


class ViewsConfig(BaseModel):
    """Context lines requested by each view."""

    patch_context: int = 3  # Modified files only; added/deleted files use 0
    udiff_context: int = 5
    cdiff_context: int = 5
    sdiff_context: int = 20
    frames_context: int = 0

    @field_validator("patch_context", "udiff_context", "cdiff_context", "sdiff_context", "frames_context")
    @classmethod
    def validate_context(cls, v: int) -> int:
        if v < 0:
            raise ValueError("Context size must be non-negative")
        return v

    def context_for(self, view: str) -> int:
        """Configured context size for a view name."""
        return getattr(self, f"{view}_context", 0)


class SourceConfig(BaseModel):
    """Default comparison source, used when the CLI is given none."""

    repo_path: Optional[str] = None
    base: Optional[str] = None
    head: str = "HEAD"
    webrev_dir: Optional[str] = None

    @field_validator("repo_path", "webrev_dir")
    @classmethod
    def resolve_env_var(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        return _resolve_env_var(v)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "WARNING"
    file: Optional[str] = None

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v = v.upper()
        if v not in valid_levels:
            raise ValueError(f"Level must be one of: {valid_levels}")
        return v

    @property
    def resolved_file(self) -> Optional[Path]:
        if self.file:
            return Path(self.file).expanduser()
        return None


class Config(BaseModel):
    """Main configuration model."""

    views: ViewsConfig = Field(default_factory=ViewsConfig)
    source: SourceConfig = Field(default_factory=SourceConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def _resolve_env_var(value: str) -> str:
    """Resolve environment variable references in config values.

    Supports ${VAR_NAME} syntax.
    """
    pattern = r"\$\{([^}]+)\}"
    match = re.match(pattern, value)
    if match:
        var_name = match.group(1)
        env_value = os.environ.get(var_name)
        if env_value is None:
            raise ValueError(f"Environment variable {var_name} not set")
        return env_value
    return value


def default_search_paths() -> list[Path]:
    return [
        Path.cwd() / "webrev.yaml",
        Path.home() / ".webrev" / "config.yaml",
    ]


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from YAML file.

    Args:
        config_path: Path to config file. If None, searches the default
            locations and falls back to built-in defaults.

    Returns:
        Validated Config object.

    Raises:
        FileNotFoundError: If an explicit config path does not exist.
        ValueError: If config validation fails.
    """
    if config_path is None:
        for path in default_search_paths():
            if path.exists():
                config_path = path
                break
        else:
            return Config()

    config_path = Path(config_path).expanduser()
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path) as f:
        raw_config = yaml.safe_load(f)

    return Config.model_validate(raw_config or {})
