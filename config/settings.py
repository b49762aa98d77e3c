"""
Configuration management for vecdist.

Provides a dataclass for configuration and utilities
for loading settings from YAML files.
"""

import os
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Optional, Literal
import yaml


@dataclass
class Settings:
    """
    Settings container for vecdist.

    Attributes:
        metric: Distance metric (euclidean, manhattan, pearson, cosine)
        index_base: Indexing convention of callers (0 or 1)
        num_workers: Number of threads for the per-target loop
        chunk_size: Number of targets per chunk
        log_level: Logging level
    """
    metric: Literal["euclidean", "manhattan", "pearson", "cosine"] = "euclidean"
    index_base: int = 0
    num_workers: int = 1
    chunk_size: int = 1024
    log_level: str = "INFO"

    @classmethod
    def from_dict(cls, data: dict) -> "Settings":
        """Create Settings from dictionary."""
        return cls(**data)

    def to_dict(self) -> dict:
        """Convert Settings to dictionary."""
        return asdict(self)


def get_default_config_path() -> Path:
    """Get path to default configuration file."""
    # Environment variable wins over bundled defaults
    env_config = os.environ.get("VECDIST_CONFIG")
    if env_config:
        return Path(env_config)

    local_config = Path("./config/default_config.yaml")
    if local_config.exists():
        return local_config

    return Path(__file__).parent / "default_config.yaml"


def load_config(config_path: Optional[str] = None) -> Settings:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to config file. If None, uses default.

    Returns:
        Settings object with loaded configuration

    Example:
        >>> settings = load_config()
        >>> settings = load_config("./my_config.yaml")
    """
    if config_path is None:
        path = get_default_config_path()
    else:
        path = Path(config_path)

    if not path.exists():
        return Settings()

    with open(path, "r") as f:
        data = yaml.safe_load(f)

    if data is None:
        return Settings()

    return Settings.from_dict(data)
