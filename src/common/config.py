"""Shared configuration utilities."""

import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

from cluster_articles.cluster_articles import KEY_POLICIES
from common.urls import DEFAULT_TRACKING_PARAMS, TrackingParams

CONFIG_DIR = Path(__file__).parent / "configs"
CONFIG_ENV_VAR = "DISCOVER_CONFIG"


def find_config_path(
    config_name: str | None,
    config_dir: Path,
    default_name: str = "default",
    env_var: str | None = None,
) -> Path:
    """Find config file path, checking env var and defaults.

    Args:
        config_name: Name of config (without .yaml), a path to a YAML file, or None for default
        config_dir: Directory containing config files
        default_name: Default config name if config_name is None
        env_var: Environment variable to check for config name

    Returns:
        Path to the config file

    Raises:
        FileNotFoundError: If config file doesn't exist
    """
    if config_name is None:
        config_name = os.environ.get(env_var, default_name) if env_var else default_name

    if config_name.endswith((".yaml", ".yml")):
        config_path = Path(config_name)
    else:
        config_path = config_dir / f"{config_name}.yaml"
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    return config_path


def load_yaml(path: Path) -> dict:
    """Load YAML file and return dict."""
    with open(path) as f:
        return yaml.safe_load(f) or {}


@dataclass
class FetchConfig:
    """HTTP settings for feed fetching."""

    timeout: float = 30
    user_agent: str = "article-discovery/1.0 (RSS reader)"
    max_workers: int = 8

    def __post_init__(self) -> None:
        if self.timeout <= 0:
            raise ValueError(f"fetch.timeout must be positive, got {self.timeout}")
        if self.max_workers < 1:
            raise ValueError(f"fetch.max_workers must be >= 1, got {self.max_workers}")


@dataclass
class GoogleNewsConfig:
    """Locale parameters for Google News RSS search feeds."""

    hl: str = "en-US"
    gl: str = "US"
    ceid: str = "US:en"


def _build_section(cls: type, name: str, section: dict[str, Any] | None) -> Any:
    """Build a section dataclass, rejecting keys it doesn't define."""
    section = section or {}
    if not isinstance(section, dict):
        raise ValueError(f"{name} must be a mapping, got {type(section).__name__}")
    unknown = sorted(str(key) for key in set(section) - {f.name for f in fields(cls)})
    if unknown:
        raise ValueError(f"Unknown {name} config keys: {', '.join(unknown)}")
    return cls(**section)


@dataclass
class DiscoverConfig:
    tracking: TrackingParams = DEFAULT_TRACKING_PARAMS
    fetch: FetchConfig = field(default_factory=FetchConfig)
    google_news: GoogleNewsConfig = field(default_factory=GoogleNewsConfig)
    key_policy: str = "title_url"

    def __post_init__(self) -> None:
        if self.key_policy not in KEY_POLICIES:
            raise ValueError(
                f"Invalid key_policy: {self.key_policy}. Must be one of {list(KEY_POLICIES)}"
            )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DiscoverConfig":
        return cls(
            tracking=TrackingParams.from_config(data.get("tracking")),
            fetch=_build_section(FetchConfig, "fetch", data.get("fetch")),
            google_news=_build_section(GoogleNewsConfig, "google_news", data.get("google_news")),
            key_policy=(data.get("cluster") or {}).get("key_policy", "title_url"),
        )


def load_config(config_name: str | None = None) -> DiscoverConfig:
    """Load a DiscoverConfig by name (see `find_config_path`)."""
    path = find_config_path(config_name, CONFIG_DIR, env_var=CONFIG_ENV_VAR)
    return DiscoverConfig.from_dict(load_yaml(path))
