"""Configuration management for filescope."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .analyzers.base_analyzer import DEFAULT_TOP_K


DEFAULT_SAMPLE_WIDTH = 100


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be read or parsed."""


def get_default_config_path() -> Path:
    """Get the default config path."""
    return Path.home() / ".filescope" / "config.yaml"


@dataclass
class LimitsConfig:
    """Caps on insight list sizes."""

    top_k: int = DEFAULT_TOP_K

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LimitsConfig":
        top_k = data.get("top_k", DEFAULT_TOP_K)
        if not isinstance(top_k, int) or top_k < 1:
            raise ConfigError(f"limits.top_k must be a positive integer, got {top_k!r}")
        return cls(top_k=top_k)

    def to_dict(self) -> dict[str, Any]:
        return {"top_k": self.top_k}


@dataclass
class DisplayConfig:
    """Console output settings."""

    sample_width: int = DEFAULT_SAMPLE_WIDTH

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DisplayConfig":
        width = data.get("sample_width", DEFAULT_SAMPLE_WIDTH)
        if not isinstance(width, int) or width < 10:
            raise ConfigError(f"display.sample_width must be an integer >= 10, got {width!r}")
        return cls(sample_width=width)

    def to_dict(self) -> dict[str, Any]:
        return {"sample_width": self.sample_width}


@dataclass
class LoggingConfig:
    """Log verbosity and optional log file."""

    verbose: bool = False
    log_file: Path | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LoggingConfig":
        log_file = data.get("log_file")
        return cls(
            verbose=bool(data.get("verbose", False)),
            log_file=Path(log_file).expanduser() if log_file else None,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "verbose": self.verbose,
            "log_file": str(self.log_file) if self.log_file else None,
        }


@dataclass
class Config:
    """Main configuration for filescope."""

    limits: LimitsConfig = field(default_factory=LimitsConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def default(cls) -> "Config":
        """Create a default configuration."""
        return cls()

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load configuration from a YAML file.

        A missing file yields the defaults.

        Raises:
            ConfigError: If the file is unreadable or malformed
        """
        if not path.exists():
            return cls.default()

        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Cannot read config {path}: {e}") from e

        if data is None:
            return cls.default()
        if not isinstance(data, dict):
            raise ConfigError(f"Config {path} must be a mapping at the top level")

        return cls(
            limits=LimitsConfig.from_dict(_section(data, "limits")),
            display=DisplayConfig.from_dict(_section(data, "display")),
            logging=LoggingConfig.from_dict(_section(data, "logging")),
        )

    def save(self, path: Path) -> None:
        """Save configuration to a YAML file."""
        path.parent.mkdir(parents=True, exist_ok=True)

        data = {
            "limits": self.limits.to_dict(),
            "display": self.display.to_dict(),
            "logging": self.logging.to_dict(),
        }

        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigError(f"Config section '{name}' must be a mapping")
    return section
