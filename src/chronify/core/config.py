import os
import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

from .exceptions import ConfigError


def _split_list(value: str) -> list[str]:
    return [part.strip() for part in value.split(",") if part.strip()]


@dataclass(frozen=True)
class Config:
    """Unified configuration for chronify.

    Priority (highest to lowest):
    1. CLI arguments (set at runtime)
    2. Environment variables
    3. chronify.toml file
    4. Default values
    """

    date_tags: list[str] = field(default_factory=list)
    ambiguous_time_range: int = 8
    languages: list[str] = field(default_factory=lambda: ["en"])
    duration_style: str = "dhm"

    @classmethod
    def load(cls, config_path: Path | None = None) -> "Config":
        """Load configuration from all sources with proper priority.

        Args:
            config_path: Path to chronify.toml (defaults to cwd/chronify.toml)

        Returns:
            Config instance with merged settings
        """
        config_data: dict[str, Any] = {}

        if config_path is None:
            config_path = Path.cwd() / "chronify.toml"

        if config_path.exists():
            config_data = cls._load_toml(config_path)

        config_data = cls._merge_env(config_data)

        return cls(**config_data)

    @staticmethod
    def _load_toml(path: Path) -> dict[str, Any]:
        """Load configuration from TOML file."""
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML in {path}: {e}") from e

        result: dict[str, Any] = {}

        if "tags" in data:
            tags = data["tags"]
            if "date_tags" in tags:
                value = tags["date_tags"]
                result["date_tags"] = _split_list(value) if isinstance(value, str) else list(value)

        if "parser" in data:
            parser = data["parser"]
            if "ambiguous_time_range" in parser:
                result["ambiguous_time_range"] = _to_int(
                    parser["ambiguous_time_range"], "ambiguous_time_range"
                )
            if "languages" in parser:
                value = parser["languages"]
                result["languages"] = _split_list(value) if isinstance(value, str) else list(value)

        if "format" in data:
            fmt = data["format"]
            if "duration_style" in fmt:
                result["duration_style"] = str(fmt["duration_style"])

        return result

    @staticmethod
    def _merge_env(config_data: dict[str, Any]) -> dict[str, Any]:
        """Merge environment variables into config (env takes priority over file)."""
        from dotenv import load_dotenv

        env_path = Path.cwd() / ".env"
        if env_path.exists():
            load_dotenv(env_path, override=True)

        env_mappings = {
            "CHRONIFY_DATE_TAGS": "date_tags",
            "CHRONIFY_AMBIGUOUS_TIME_RANGE": "ambiguous_time_range",
            "CHRONIFY_LANGUAGES": "languages",
            "CHRONIFY_DURATION_STYLE": "duration_style",
        }

        for env_var, config_key in env_mappings.items():
            value = os.environ.get(env_var)
            if value is not None:
                if config_key in ["date_tags", "languages"]:
                    config_data[config_key] = _split_list(value)
                elif config_key == "ambiguous_time_range":
                    config_data[config_key] = _to_int(value, env_var)
                else:
                    config_data[config_key] = value

        return config_data

    def merge_cli_args(self, **kwargs) -> "Config":
        """Create new Config with CLI arguments merged in (CLI args have highest priority).

        Args:
            **kwargs: CLI arguments to override config values

        Returns:
            New Config instance with CLI args merged
        """
        updates = {k: v for k, v in kwargs.items() if v is not None}
        return replace(self, **updates)


def _to_int(value: Any, name: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"{name} must be an integer, got {value!r}") from e


_global_config: Config | None = None


def get_config() -> Config:
    """Get the global config instance, loading it if not already loaded."""
    global _global_config
    if _global_config is None:
        _global_config = Config.load()
    return _global_config


def set_config(config: Config | None) -> None:
    """Set the global config instance (None forces a reload on next access)."""
    global _global_config
    _global_config = config
